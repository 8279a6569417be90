"""Create order use case."""

import logging
from typing import Optional

from order_service.application.dto.order_dto import CreateOrderInput, CreateOrderOutput
from order_service.application.ports.outbound.event_publisher_port import (
    EventPublisherPort,
)
from order_service.application.ports.outbound.order_repository_port import (
    OrderRepositoryPort,
)
from order_service.domain.events.order_events import ORDER_CREATED, OrderCreated
from order_service.domain.factories.order_factory import OrderFactory

logger = logging.getLogger(__name__)


class CreateOrderUseCase:
    """Use case for creating a new order."""

    def __init__(
        self,
        order_repository: OrderRepositoryPort,
        event_publisher: EventPublisherPort,
    ):
        """
        Initialize use case.

        Args:
            order_repository: Order persistence port
            event_publisher: Domain event publishing port
        """
        self.order_repository = order_repository
        self.event_publisher = event_publisher

    async def execute(
        self, input_dto: Optional[CreateOrderInput] = None
    ) -> CreateOrderOutput:
        """
        Create, persist, and announce a new order.

        The order is saved before the event is published, so a failed save
        never produces an ``order.created`` event. A failed publish after a
        successful save leaves the order stored and re-raises.

        Args:
            input_dto: Optional creation data carrying a client supplied id

        Returns:
            Created order data

        Raises:
            InvalidOrderIdError: If the supplied id is blank
            RepositoryError: If the order cannot be stored
            EventPublishError: If the event cannot be published
        """
        requested_id = input_dto.id if input_dto else None

        try:
            order = OrderFactory.create(requested_id)
            order_id = order.id.value
            logger.info(f"Creating order {order_id}")

            await self.order_repository.save(order)
            logger.debug(f"Order {order_id} saved")

            event = OrderCreated(order_id=order_id)
            await self.event_publisher.publish(ORDER_CREATED, event)
        except Exception as e:
            logger.error(f"Create order failed (requested_id={requested_id!r}): {e}")
            raise

        logger.info(f"Order {order_id} created with status {order.status.value}")
        return CreateOrderOutput.from_entity(order)
