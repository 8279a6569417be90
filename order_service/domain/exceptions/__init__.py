"""Domain exceptions package."""

from order_service.domain.exceptions.base import DomainException
from order_service.domain.exceptions.order_exceptions import (
    CannotAdvanceOrderStatusError,
    InvalidOrderIdError,
    InvalidOrderStatusError,
    OrderDomainException,
    OrderNotFoundError,
    OrderValidationError,
)

__all__ = [
    # Base
    "DomainException",
    # Order exceptions
    "OrderDomainException",
    "OrderValidationError",
    "InvalidOrderIdError",
    "InvalidOrderStatusError",
    "OrderNotFoundError",
    "CannotAdvanceOrderStatusError",
]
