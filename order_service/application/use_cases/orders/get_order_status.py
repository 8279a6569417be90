"""Get order status use case."""

import logging

from order_service.application.dto.order_dto import OrderStatusOutput
from order_service.application.ports.outbound.order_repository_port import (
    OrderRepositoryPort,
)
from order_service.domain.exceptions import OrderNotFoundError
from order_service.domain.value_objects.order_id import OrderId

logger = logging.getLogger(__name__)


class GetOrderStatusUseCase:
    """Use case for reading an order's current status."""

    def __init__(self, order_repository: OrderRepositoryPort):
        """
        Initialize use case.

        Args:
            order_repository: Order persistence port
        """
        self.order_repository = order_repository

    async def execute(self, order_id: str) -> OrderStatusOutput:
        """
        Get order status.

        Args:
            order_id: Order identifier

        Returns:
            Current status, timestamps, and whether the order can advance

        Raises:
            InvalidOrderIdError: If the id is blank
            OrderNotFoundError: If the order doesn't exist
            RepositoryError: If the store is unavailable
        """
        order_id = OrderId.create(order_id).value

        try:
            order = await self.order_repository.find_by_id(order_id)
        except Exception as e:
            logger.error(f"Get order status failed for order {order_id}: {e}")
            raise

        if order is None:
            logger.warning(f"Order {order_id} not found")
            raise OrderNotFoundError(order_id)

        return OrderStatusOutput.from_entity(order)
