"""Unit tests for UpdateOrderStatusUseCase."""

from datetime import UTC, datetime
from unittest.mock import AsyncMock, Mock

import pytest

from order_service.application.exceptions import (
    ConcurrentOrderUpdateError,
    EventPublishError,
    RepositoryError,
)
from order_service.application.use_cases.orders.update_order_status import (
    UpdateOrderStatusUseCase,
)
from order_service.domain.events import ORDER_STATUS_CHANGED, OrderStatusChanged
from order_service.domain.exceptions import (
    CannotAdvanceOrderStatusError,
    OrderNotFoundError,
)
from order_service.domain.factories.order_factory import OrderFactory
from order_service.domain.value_objects.order_status import OrderStatus


def _stored(status: str):
    return OrderFactory.reconstruct(
        "order-1", status, datetime(2024, 1, 1, tzinfo=UTC)
    )


@pytest.fixture
def mock_repository():
    """Create a mock order repository holding one CREATED order."""
    repository = Mock()
    repository.find_by_id = AsyncMock(return_value=_stored("created"))
    repository.update = AsyncMock(side_effect=lambda order, expected_status=None: order)
    return repository


@pytest.fixture
def mock_publisher():
    """Create a mock event publisher."""
    publisher = Mock()
    publisher.publish = AsyncMock(return_value=None)
    return publisher


@pytest.fixture
def use_case(mock_repository, mock_publisher):
    return UpdateOrderStatusUseCase(mock_repository, mock_publisher)


class TestUpdateOrderStatusUseCase:
    """Test UpdateOrderStatusUseCase."""

    @pytest.mark.asyncio
    async def test_advance_created_order(self, use_case, mock_repository, mock_publisher):
        """Test one advance updates once and publishes once."""
        result = await use_case.execute("order-1")

        assert result.id == "order-1"
        assert result.previous_status == "created"
        assert result.new_status == "processing"

        mock_repository.update.assert_awaited_once()
        updated_order = mock_repository.update.await_args.args[0]
        assert updated_order.status is OrderStatus.PROCESSING
        assert mock_repository.update.await_args.kwargs == {
            "expected_status": OrderStatus.CREATED
        }
        assert result.updated_at == updated_order.updated_at
        assert result.updated_at > updated_order.created_at

        mock_publisher.publish.assert_awaited_once()
        event_name, event = mock_publisher.publish.await_args.args
        assert event_name == ORDER_STATUS_CHANGED
        assert isinstance(event, OrderStatusChanged)
        assert event.order_id == "order-1"
        assert event.previous_status == "created"
        assert event.new_status == "processing"

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "current,expected",
        [
            ("created", "processing"),
            ("processing", "shipped"),
            ("shipped", "delivered"),
        ],
    )
    async def test_each_step_advances_once(
        self, use_case, mock_repository, current, expected
    ):
        mock_repository.find_by_id = AsyncMock(return_value=_stored(current))

        result = await use_case.execute("order-1")

        assert result.previous_status == current
        assert result.new_status == expected

    @pytest.mark.asyncio
    async def test_order_not_found(self, use_case, mock_repository, mock_publisher):
        mock_repository.find_by_id = AsyncMock(return_value=None)

        with pytest.raises(OrderNotFoundError) as exc_info:
            await use_case.execute("missing")

        assert exc_info.value.order_id == "missing"
        assert "missing" in exc_info.value.message
        assert "missing" in str(exc_info.value)
        mock_repository.update.assert_not_called()
        mock_publisher.publish.assert_not_called()

    @pytest.mark.asyncio
    async def test_delivered_order_cannot_advance(
        self, use_case, mock_repository, mock_publisher
    ):
        """Test a rejected transition has no side effects."""
        mock_repository.find_by_id = AsyncMock(return_value=_stored("delivered"))

        with pytest.raises(CannotAdvanceOrderStatusError) as exc_info:
            await use_case.execute("order-1")

        assert exc_info.value.current_status == "delivered"
        mock_repository.update.assert_not_called()
        mock_publisher.publish.assert_not_called()

    @pytest.mark.asyncio
    async def test_concurrent_update_is_not_published(
        self, use_case, mock_repository, mock_publisher
    ):
        mock_repository.update = AsyncMock(
            side_effect=ConcurrentOrderUpdateError("order-1", "created")
        )

        with pytest.raises(ConcurrentOrderUpdateError):
            await use_case.execute("order-1")

        mock_publisher.publish.assert_not_called()

    @pytest.mark.asyncio
    async def test_update_failure_is_not_published(
        self, use_case, mock_repository, mock_publisher
    ):
        mock_repository.update = AsyncMock(
            side_effect=RepositoryError("database down", operation="update")
        )

        with pytest.raises(RepositoryError):
            await use_case.execute("order-1")

        mock_publisher.publish.assert_not_called()

    @pytest.mark.asyncio
    async def test_publish_failure_is_raised_after_update(
        self, use_case, mock_repository, mock_publisher
    ):
        mock_publisher.publish = AsyncMock(
            side_effect=EventPublishError(ORDER_STATUS_CHANGED, "broker down")
        )

        with pytest.raises(EventPublishError):
            await use_case.execute("order-1")

        mock_repository.update.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_id_is_trimmed_before_lookup(self, use_case, mock_repository):
        await use_case.execute(" order-1 ")
        mock_repository.find_by_id.assert_awaited_once_with("order-1")
