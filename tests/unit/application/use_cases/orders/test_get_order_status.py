"""Unit tests for GetOrderStatusUseCase."""

from datetime import UTC, datetime, timedelta
from unittest.mock import AsyncMock, Mock

import pytest

from order_service.application.exceptions import RepositoryError
from order_service.application.use_cases.orders.get_order_status import (
    GetOrderStatusUseCase,
)
from order_service.domain.exceptions import InvalidOrderIdError, OrderNotFoundError
from order_service.domain.factories.order_factory import OrderFactory


@pytest.fixture
def mock_repository():
    """Create a mock order repository."""
    repository = Mock()
    repository.find_by_id = AsyncMock(return_value=None)
    repository.save = AsyncMock()
    repository.update = AsyncMock()
    return repository


class TestGetOrderStatusUseCase:
    """Test GetOrderStatusUseCase."""

    @pytest.mark.asyncio
    async def test_get_order_status_success(self, mock_repository):
        created_at = datetime(2024, 1, 1, tzinfo=UTC)
        updated_at = created_at + timedelta(minutes=5)
        mock_repository.find_by_id = AsyncMock(
            return_value=OrderFactory.reconstruct(
                "order-1", "processing", created_at, updated_at
            )
        )

        result = await GetOrderStatusUseCase(mock_repository).execute("order-1")

        assert result.id == "order-1"
        assert result.status == "processing"
        assert result.created_at == created_at
        assert result.updated_at == updated_at
        assert result.can_advance is True
        mock_repository.find_by_id.assert_awaited_once_with("order-1")

    @pytest.mark.asyncio
    async def test_delivered_order_cannot_advance(self, mock_repository):
        mock_repository.find_by_id = AsyncMock(
            return_value=OrderFactory.create_with_status("order-1", "delivered")
        )

        result = await GetOrderStatusUseCase(mock_repository).execute("order-1")

        assert result.status == "delivered"
        assert result.can_advance is False

    @pytest.mark.asyncio
    async def test_order_not_found(self, mock_repository):
        with pytest.raises(OrderNotFoundError) as exc_info:
            await GetOrderStatusUseCase(mock_repository).execute("missing")

        assert exc_info.value.order_id == "missing"
        assert "missing" in exc_info.value.message
        assert "missing" in str(exc_info.value)

    @pytest.mark.asyncio
    async def test_read_has_no_side_effects(self, mock_repository):
        mock_repository.find_by_id = AsyncMock(
            return_value=OrderFactory.create_with_status("order-1", "created")
        )

        await GetOrderStatusUseCase(mock_repository).execute("order-1")

        mock_repository.save.assert_not_called()
        mock_repository.update.assert_not_called()

    @pytest.mark.asyncio
    async def test_id_is_trimmed_before_lookup(self, mock_repository):
        with pytest.raises(OrderNotFoundError):
            await GetOrderStatusUseCase(mock_repository).execute("  order-1 ")

        mock_repository.find_by_id.assert_awaited_once_with("order-1")

    @pytest.mark.asyncio
    async def test_blank_id_raises_error(self, mock_repository):
        with pytest.raises(InvalidOrderIdError):
            await GetOrderStatusUseCase(mock_repository).execute("  ")

        mock_repository.find_by_id.assert_not_called()

    @pytest.mark.asyncio
    async def test_repository_error_is_propagated(self, mock_repository):
        mock_repository.find_by_id = AsyncMock(
            side_effect=RepositoryError("database down", operation="find_by_id")
        )

        with pytest.raises(RepositoryError):
            await GetOrderStatusUseCase(mock_repository).execute("order-1")
