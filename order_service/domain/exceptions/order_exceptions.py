"""Order domain exceptions."""

from typing import Any

from order_service.domain.exceptions.base import DomainException


class OrderDomainException(DomainException):
    """Base exception for order-related domain errors."""


class OrderValidationError(OrderDomainException):
    """Base for malformed identity or status values."""


class InvalidOrderIdError(OrderValidationError):
    """Raised when an order identifier is missing or blank."""

    def __init__(self, value: Any):
        self.value = value
        super().__init__(
            message=f"Invalid order id: {value!r}",
            code="INVALID_ORDER_ID"
        )


class InvalidOrderStatusError(OrderValidationError):
    """Raised when a status token is not one of the known order statuses."""

    def __init__(self, value: Any):
        self.value = value
        super().__init__(
            message=f"Invalid order status: {value!r}",
            code="INVALID_ORDER_STATUS"
        )


class OrderNotFoundError(OrderDomainException):
    """Raised when an order cannot be found."""

    def __init__(self, order_id: str):
        self.order_id = order_id
        super().__init__(
            message=f"Order not found: {order_id}",
            code="ORDER_NOT_FOUND"
        )


class CannotAdvanceOrderStatusError(OrderDomainException):
    """Raised when advancing an order that is already in its terminal status."""

    def __init__(self, order_id: str, current_status: str):
        self.order_id = order_id
        self.current_status = current_status
        super().__init__(
            message=f"Cannot advance order {order_id} from status: {current_status}",
            code="CANNOT_ADVANCE_ORDER_STATUS"
        )
