"""Order domain entity."""

from datetime import UTC, datetime, timedelta
from typing import Optional

from order_service.domain.exceptions import CannotAdvanceOrderStatusError
from order_service.domain.value_objects.order_id import OrderId
from order_service.domain.value_objects.order_status import OrderStatus

# Forward-only lifecycle; DELIVERED is terminal.
_NEXT_STATUS: dict[OrderStatus, Optional[OrderStatus]] = {
    OrderStatus.CREATED: OrderStatus.PROCESSING,
    OrderStatus.PROCESSING: OrderStatus.SHIPPED,
    OrderStatus.SHIPPED: OrderStatus.DELIVERED,
    OrderStatus.DELIVERED: None,
}


def _utcnow() -> datetime:
    return datetime.now(UTC)


def _as_utc(value: datetime) -> datetime:
    # Naive timestamps are taken to be UTC
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


class Order:
    """
    Order aggregate root.

    An order moves through CREATED -> PROCESSING -> SHIPPED -> DELIVERED one
    step at a time. ``advance()`` is the only mutation; callers cannot pick a
    target status, so skipping or reversing a step is impossible.

    Orders are normally built through ``OrderFactory`` rather than directly.
    """

    def __init__(
        self,
        order_id: OrderId,
        status: OrderStatus = OrderStatus.CREATED,
        created_at: Optional[datetime] = None,
        updated_at: Optional[datetime] = None,
    ):
        """
        Initialize an order.

        Args:
            order_id: Order identity
            status: Current status (CREATED for new orders)
            created_at: Creation timestamp, defaults to now; naive values are
                read as UTC
            updated_at: Last status change, defaults to created_at

        Raises:
            ValueError: If updated_at is earlier than created_at
        """
        self._id = order_id
        self._status = status
        self._created_at = _as_utc(created_at) if created_at else _utcnow()
        self._updated_at = _as_utc(updated_at) if updated_at else self._created_at

        if self._updated_at < self._created_at:
            raise ValueError("Order updated_at cannot be earlier than created_at")

    @property
    def id(self) -> OrderId:
        return self._id

    @property
    def status(self) -> OrderStatus:
        return self._status

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    def next_status(self) -> Optional[OrderStatus]:
        """
        Return the status ``advance()`` would move to.

        Returns:
            Next status, or None if the order is in its terminal status
        """
        return _NEXT_STATUS[self._status]

    def can_advance(self) -> bool:
        """Check whether ``advance()`` would currently succeed."""
        return _NEXT_STATUS[self._status] is not None

    def advance(self) -> OrderStatus:
        """
        Move the order one step forward in its lifecycle.

        The refreshed ``updated_at`` is always strictly later than the
        previous value, even if the clock has not moved.

        Returns:
            The new status

        Raises:
            CannotAdvanceOrderStatusError: If the order is already delivered
        """
        next_status = _NEXT_STATUS[self._status]
        if next_status is None:
            raise CannotAdvanceOrderStatusError(
                str(self._id),
                self._status.value
            )

        now = _utcnow()
        if now <= self._updated_at:
            now = self._updated_at + timedelta(microseconds=1)

        self._status = next_status
        self._updated_at = now
        return next_status

    def __eq__(self, other: object) -> bool:
        """Entity equality based on identity (id), not value."""
        if not isinstance(other, Order):
            return False
        return self._id == other._id

    def __hash__(self) -> int:
        """Hash based on identity."""
        return hash(self._id)

    def __repr__(self) -> str:
        return (
            f"Order(id={self._id.value!r}, status={self._status.value!r}, "
            f"created_at={self._created_at.isoformat()}, "
            f"updated_at={self._updated_at.isoformat()})"
        )
