"""Order status value object."""

from enum import Enum
from typing import Any

from order_service.domain.exceptions import InvalidOrderStatusError


class OrderStatus(str, Enum):
    """
    Lifecycle status of an order.

    The lowercase values are what gets persisted and published, so they
    must never change.
    """

    CREATED = "created"
    PROCESSING = "processing"
    SHIPPED = "shipped"
    DELIVERED = "delivered"

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"OrderStatus.{self.name}"

    @classmethod
    def create(cls, value: Any) -> "OrderStatus":
        """
        Create OrderStatus from a raw token.

        Matching is exact: "Created" or " created" are rejected.

        Args:
            value: Status token (e.g., "processing") or an OrderStatus

        Returns:
            OrderStatus member

        Raises:
            InvalidOrderStatusError: If value is not a known status
        """
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            raise InvalidOrderStatusError(value)
        try:
            return cls(value)
        except ValueError:
            raise InvalidOrderStatusError(value) from None

    @classmethod
    def created(cls) -> "OrderStatus":
        return cls.CREATED

    @classmethod
    def processing(cls) -> "OrderStatus":
        return cls.PROCESSING

    @classmethod
    def shipped(cls) -> "OrderStatus":
        return cls.SHIPPED

    @classmethod
    def delivered(cls) -> "OrderStatus":
        return cls.DELIVERED
