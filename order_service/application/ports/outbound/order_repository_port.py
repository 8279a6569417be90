"""Order repository port interface."""

from typing import Optional, Protocol

from order_service.domain.entities.order import Order
from order_service.domain.value_objects.order_status import OrderStatus


class OrderRepositoryPort(Protocol):
    """Repository interface for Order aggregate."""

    async def save(self, order: Order) -> Order:
        """
        Insert or overwrite an order (upsert keyed by id).

        Saving twice with the same id overwrites the stored order.

        Args:
            order: Order entity to persist

        Returns:
            The persisted order

        Raises:
            RepositoryError: If the store is unavailable
        """
        ...

    async def find_by_id(self, order_id: str) -> Optional[Order]:
        """
        Retrieve an order by identifier.

        The order is rebuilt through OrderFactory.reconstruct with its stored
        status and timestamps.

        Args:
            order_id: Order identifier

        Returns:
            Order if found, None otherwise

        Raises:
            RepositoryError: If the store is unavailable
        """
        ...

    async def update(
        self,
        order: Order,
        expected_status: Optional[OrderStatus] = None,
    ) -> Order:
        """
        Write an existing order's status and updated_at.

        When expected_status is given the write only succeeds if the stored
        status still equals it (optimistic concurrency). Without it the write
        is unconditional.

        Args:
            order: Order entity with updated state
            expected_status: Status the order had when it was loaded

        Returns:
            The updated order

        Raises:
            OrderNotFoundError: If the order does not exist
            ConcurrentOrderUpdateError: If the stored status no longer matches
            RepositoryError: If the store is unavailable
        """
        ...
