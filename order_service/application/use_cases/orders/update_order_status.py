"""Update (advance) order status use case."""

import logging

from order_service.application.dto.order_dto import UpdateOrderStatusOutput
from order_service.application.ports.outbound.event_publisher_port import (
    EventPublisherPort,
)
from order_service.application.ports.outbound.order_repository_port import (
    OrderRepositoryPort,
)
from order_service.domain.events.order_events import (
    ORDER_STATUS_CHANGED,
    OrderStatusChanged,
)
from order_service.domain.exceptions import (
    CannotAdvanceOrderStatusError,
    OrderNotFoundError,
)
from order_service.domain.value_objects.order_id import OrderId

logger = logging.getLogger(__name__)


class UpdateOrderStatusUseCase:
    """Use case for advancing an order to its next status."""

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

    async def execute(self, order_id: str) -> UpdateOrderStatusOutput:
        """
        Advance an order one step and announce the change.

        Order of side effects: transition, then conditional update keyed on
        the loaded status, then publish. A rejected transition touches
        neither the store nor the broker; a failed update is never published.

        Args:
            order_id: Order identifier

        Returns:
            Previous and new status with the change timestamp

        Raises:
            InvalidOrderIdError: If the id is blank
            OrderNotFoundError: If the order doesn't exist
            CannotAdvanceOrderStatusError: If the order is already delivered
            ConcurrentOrderUpdateError: If another writer advanced it first
            RepositoryError: If the store is unavailable
            EventPublishError: If the event cannot be published
        """
        order_id = OrderId.create(order_id).value

        try:
            order = await self.order_repository.find_by_id(order_id)
            if order is None:
                raise OrderNotFoundError(order_id)

            previous_status = order.status
            new_status = order.advance()

            await self.order_repository.update(order, expected_status=previous_status)
            logger.debug(
                f"Order {order_id} updated: {previous_status.value} -> {new_status.value}"
            )

            event = OrderStatusChanged(
                order_id=order.id.value,
                previous_status=previous_status.value,
                new_status=new_status.value,
            )
            await self.event_publisher.publish(ORDER_STATUS_CHANGED, event)
        except (OrderNotFoundError, CannotAdvanceOrderStatusError) as e:
            logger.warning(f"Update order status rejected for order {order_id}: {e}")
            raise
        except Exception as e:
            logger.error(f"Update order status failed for order {order_id}: {e}")
            raise

        logger.info(
            f"Order {order_id} advanced from {previous_status.value} to {new_status.value}"
        )
        return UpdateOrderStatusOutput(
            id=order.id.value,
            previous_status=previous_status.value,
            new_status=new_status.value,
            updated_at=order.updated_at,
        )
