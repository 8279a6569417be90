"""
PostgreSQL implementation of OrderRepositoryPort.

Each call runs in its own short transaction and commits before returning,
so a saved order is durable before the caller publishes anything about it.
"""

import logging
from typing import Optional

from sqlalchemy import select, update
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from order_service.application.exceptions import (
    ConcurrentOrderUpdateError,
    RepositoryError,
)
from order_service.domain.entities.order import Order
from order_service.domain.exceptions import OrderNotFoundError
from order_service.domain.value_objects.order_status import OrderStatus
from order_service.infrastructure.adapters.outbound.persistence.postgresql.mappers.order_mapper import (
    OrderMapper,
)
from order_service.infrastructure.adapters.outbound.persistence.postgresql.models.order_model import (
    OrderModel,
)

logger = logging.getLogger(__name__)


class PostgresOrderRepository:
    """
    PostgreSQL implementation of OrderRepositoryPort.

    Driver errors are wrapped in RepositoryError (chained with ``from``) so
    callers can tell infrastructure failures apart from business errors.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        """
        Initialize PostgreSQL order repository.

        Args:
            session_factory: Factory producing SQLAlchemy async sessions
        """
        self.session_factory = session_factory
        self.mapper = OrderMapper

    async def save(self, order: Order) -> Order:
        """
        Upsert an order with INSERT ... ON CONFLICT (id) DO UPDATE.

        Args:
            order: Order entity to persist

        Returns:
            The persisted order
        """
        values = self.mapper.to_values(order)
        insert_stmt = insert(OrderModel).values(**values)
        stmt = insert_stmt.on_conflict_do_update(
            index_elements=[OrderModel.id],
            set_={
                "status": insert_stmt.excluded.status,
                "created_at": insert_stmt.excluded.created_at,
                "updated_at": insert_stmt.excluded.updated_at,
            },
        )

        try:
            async with self.session_factory() as session, session.begin():
                await session.execute(stmt)
        except SQLAlchemyError as e:
            logger.error(f"Failed to save order {order.id}: {e}")
            raise RepositoryError(f"Failed to save order {order.id}", operation="save") from e

        logger.debug(f"Order {order.id} saved to PostgreSQL")
        return order

    async def find_by_id(self, order_id: str) -> Optional[Order]:
        """
        Retrieve an order by identifier.

        Args:
            order_id: Order identifier

        Returns:
            Order entity if found, None otherwise
        """
        stmt = select(OrderModel).where(OrderModel.id == order_id)

        try:
            async with self.session_factory() as session:
                result = await session.execute(stmt)
                model = result.scalar_one_or_none()
        except SQLAlchemyError as e:
            logger.error(f"Failed to find order {order_id}: {e}")
            raise RepositoryError(
                f"Failed to find order {order_id}", operation="find_by_id"
            ) from e

        if model is None:
            return None

        return self.mapper.to_entity(model)

    async def update(
        self,
        order: Order,
        expected_status: Optional[OrderStatus] = None,
    ) -> Order:
        """
        Write the order's status and updated_at.

        With ``expected_status`` the UPDATE is conditional on the stored status
        (compare-and-swap). A miss is then resolved into either
        OrderNotFoundError or ConcurrentOrderUpdateError.

        Args:
            order: Order entity with updated state
            expected_status: Status the order had when it was loaded

        Returns:
            The updated order
        """
        order_id = order.id.value
        stmt = update(OrderModel).where(OrderModel.id == order_id)
        if expected_status is not None:
            stmt = stmt.where(OrderModel.status == expected_status.value)
        stmt = stmt.values(status=order.status.value, updated_at=order.updated_at)

        try:
            async with self.session_factory() as session, session.begin():
                result = await session.execute(stmt)
                if result.rowcount == 0:
                    if expected_status is None:
                        raise OrderNotFoundError(order_id)
                    existing = await session.scalar(
                        select(OrderModel.id).where(OrderModel.id == order_id)
                    )
                    if existing is None:
                        raise OrderNotFoundError(order_id)
                    raise ConcurrentOrderUpdateError(order_id, expected_status.value)
        except SQLAlchemyError as e:
            logger.error(f"Failed to update order {order_id}: {e}")
            raise RepositoryError(
                f"Failed to update order {order_id}", operation="update"
            ) from e

        logger.debug(f"Order {order_id} updated in PostgreSQL to {order.status.value}")
        return order
