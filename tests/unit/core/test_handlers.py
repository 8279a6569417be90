"""
Unit tests for exception handlers.

Tests cover:
- Status code mapping for domain and application errors
- Error envelope format
- Validation error handler formatting
- General exception handler (debug vs production)
"""

import json
from unittest.mock import MagicMock, patch

import pytest
from fastapi import Request
from fastapi.exceptions import RequestValidationError

from order_service.application.exceptions import (
    ApplicationError,
    ConcurrentOrderUpdateError,
    EventPublishError,
    RepositoryError,
)
from order_service.core.handlers import (
    application_exception_handler,
    application_status_code,
    domain_exception_handler,
    domain_status_code,
    general_exception_handler,
    validation_exception_handler,
)
from order_service.domain.exceptions import (
    CannotAdvanceOrderStatusError,
    InvalidOrderIdError,
    InvalidOrderStatusError,
    OrderNotFoundError,
)


@pytest.fixture
def mock_request() -> MagicMock:
    """Create a mock request with request_id in state."""
    request = MagicMock(spec=Request)
    request.state.request_id = "test-request-123"
    return request


@pytest.fixture
def mock_request_no_id() -> MagicMock:
    """Create a mock request without request_id."""
    request = MagicMock(spec=Request)
    request.state = MagicMock(spec=[])  # No request_id attribute
    return request


class TestStatusCodeMapping:
    """Tests for exception to HTTP status mapping."""

    @pytest.mark.parametrize(
        "exc,expected",
        [
            (OrderNotFoundError("order-1"), 404),
            (CannotAdvanceOrderStatusError("order-1", "delivered"), 400),
            (InvalidOrderIdError(""), 400),
            (InvalidOrderStatusError("lost"), 400),
        ],
    )
    def test_domain_status_code(self, exc, expected) -> None:
        assert domain_status_code(exc) == expected

    @pytest.mark.parametrize(
        "exc,expected",
        [
            (ConcurrentOrderUpdateError("order-1", "created"), 409),
            (RepositoryError("down", operation="save"), 503),
            (EventPublishError("order.created", "down"), 503),
            (ApplicationError("boom"), 500),
        ],
    )
    def test_application_status_code(self, exc, expected) -> None:
        assert application_status_code(exc) == expected


class TestDomainExceptionHandler:
    """Tests for domain_exception_handler."""

    @pytest.mark.asyncio
    async def test_not_found_response(self, mock_request: MagicMock) -> None:
        response = await domain_exception_handler(
            mock_request, OrderNotFoundError("order-1")
        )

        body = json.loads(response.body)

        assert response.status_code == 404
        assert body["error"]["code"] == "ORDER_NOT_FOUND"
        assert body["error"]["message"] == "Order not found: order-1"
        assert body["error"]["details"] == {}
        assert body["meta"]["request_id"] == "test-request-123"

    @pytest.mark.asyncio
    async def test_handles_missing_request_id(
        self, mock_request_no_id: MagicMock
    ) -> None:
        response = await domain_exception_handler(
            mock_request_no_id, CannotAdvanceOrderStatusError("order-1", "delivered")
        )

        body = json.loads(response.body)

        assert response.status_code == 400
        assert body["meta"]["request_id"] is None


class TestApplicationExceptionHandler:
    """Tests for application_exception_handler."""

    @pytest.mark.asyncio
    async def test_conflict_response(self, mock_request: MagicMock) -> None:
        response = await application_exception_handler(
            mock_request, ConcurrentOrderUpdateError("order-1", "created")
        )

        body = json.loads(response.body)

        assert response.status_code == 409
        assert body["error"]["code"] == "CONCURRENT_ORDER_UPDATE"
        assert body["error"]["details"]["current_state"] == "created"

    @pytest.mark.asyncio
    async def test_collaborator_failure_response(self, mock_request: MagicMock) -> None:
        response = await application_exception_handler(
            mock_request, RepositoryError("Failed to save order", operation="save")
        )

        body = json.loads(response.body)

        assert response.status_code == 503
        assert body["error"]["code"] == "REPOSITORY_ERROR"
        assert body["error"]["details"] == {
            "service": "order_repository",
            "operation": "save",
        }


class TestValidationExceptionHandler:
    """Tests for validation_exception_handler."""

    @pytest.mark.asyncio
    async def test_formats_errors(self, mock_request: MagicMock) -> None:
        exc = RequestValidationError(
            [
                {
                    "loc": ("body", "id"),
                    "msg": "String should have at most 64 characters",
                    "type": "string_too_long",
                }
            ]
        )

        response = await validation_exception_handler(mock_request, exc)

        body = json.loads(response.body)

        assert response.status_code == 422
        assert body["error"]["code"] == "VALIDATION_ERROR"
        assert body["error"]["details"] == [
            {
                "field": "body.id",
                "message": "String should have at most 64 characters",
                "type": "string_too_long",
            }
        ]


class TestGeneralExceptionHandler:
    """Tests for general_exception_handler."""

    @pytest.mark.asyncio
    async def test_hides_details_in_production(self, mock_request: MagicMock) -> None:
        with patch("order_service.core.handlers.settings") as mock_settings:
            mock_settings.debug = False
            response = await general_exception_handler(
                mock_request, RuntimeError("secret internals")
            )

        body = json.loads(response.body)

        assert response.status_code == 500
        assert body["error"]["code"] == "INTERNAL_ERROR"
        assert "secret internals" not in body["error"]["message"]

    @pytest.mark.asyncio
    async def test_shows_details_in_debug(self, mock_request: MagicMock) -> None:
        with patch("order_service.core.handlers.settings") as mock_settings:
            mock_settings.debug = True
            response = await general_exception_handler(
                mock_request, RuntimeError("secret internals")
            )

        body = json.loads(response.body)

        assert body["error"]["message"] == "secret internals"
