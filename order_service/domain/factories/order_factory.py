"""Order factory."""

from datetime import datetime
from typing import Any, Optional

from order_service.domain.entities.order import Order
from order_service.domain.value_objects.order_id import OrderId
from order_service.domain.value_objects.order_status import OrderStatus


class OrderFactory:
    """
    Builds Order aggregates.

    ``create`` and ``create_with_status`` produce new orders;
    ``reconstruct`` rebuilds an order from stored fields and is the only
    path that may set an arbitrary status together with its original
    timestamps.
    """

    @staticmethod
    def create(order_id: Optional[Any] = None) -> Order:
        """
        Create a brand-new order in CREATED status.

        Args:
            order_id: Client supplied identifier; generated when omitted

        Returns:
            New Order

        Raises:
            InvalidOrderIdError: If the supplied identifier is blank
        """
        identity = OrderId.generate() if order_id is None else OrderId.create(order_id)
        return Order(identity, OrderStatus.created())

    @staticmethod
    def reconstruct(
        order_id: Any,
        status: Any,
        created_at: datetime,
        updated_at: Optional[datetime] = None,
    ) -> Order:
        """
        Rebuild an order from persisted state.

        No transition rules are applied: the stored status is history that
        was already accepted.

        Args:
            order_id: Stored identifier
            status: Stored status token or OrderStatus
            created_at: Original creation timestamp
            updated_at: Last status change, defaults to created_at

        Returns:
            Order with the supplied state

        Raises:
            InvalidOrderIdError: If the identifier is blank
            InvalidOrderStatusError: If the status token is unknown
        """
        return Order(
            OrderId.create(order_id),
            OrderStatus.create(status),
            created_at=created_at,
            updated_at=updated_at,
        )

    @staticmethod
    def create_with_status(order_id: Any, status: Any) -> Order:
        """
        Create a new order already in the given status, without history.

        Used for administrative backfill and tests.

        Raises:
            InvalidOrderIdError: If the identifier is blank
            InvalidOrderStatusError: If the status token is unknown
        """
        return Order(OrderId.create(order_id), OrderStatus.create(status))
