"""In-memory implementation of OrderRepositoryPort."""

import asyncio
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from order_service.application.exceptions import ConcurrentOrderUpdateError
from order_service.domain.entities.order import Order
from order_service.domain.exceptions import OrderNotFoundError
from order_service.domain.factories.order_factory import OrderFactory
from order_service.domain.value_objects.order_status import OrderStatus


@dataclass(frozen=True)
class _StoredOrder:
    status: str
    created_at: datetime
    updated_at: datetime


class InMemoryOrderRepository:
    """
    Order repository backed by a dict.

    Stores plain snapshots rather than entity references, so mutating a
    loaded Order has no effect until it is saved or updated. Used by the
    ``memory`` persistence backend and in tests.
    """

    def __init__(self) -> None:
        self._orders: dict[str, _StoredOrder] = {}
        self._lock = asyncio.Lock()

    async def save(self, order: Order) -> Order:
        async with self._lock:
            self._orders[order.id.value] = self._snapshot(order)
        return order

    async def find_by_id(self, order_id: str) -> Optional[Order]:
        stored = self._orders.get(order_id)
        if stored is None:
            return None
        return OrderFactory.reconstruct(
            order_id,
            stored.status,
            created_at=stored.created_at,
            updated_at=stored.updated_at,
        )

    async def update(
        self,
        order: Order,
        expected_status: Optional[OrderStatus] = None,
    ) -> Order:
        order_id = order.id.value
        async with self._lock:
            stored = self._orders.get(order_id)
            if stored is None:
                raise OrderNotFoundError(order_id)
            if expected_status is not None and stored.status != expected_status.value:
                raise ConcurrentOrderUpdateError(order_id, expected_status.value)

            self._orders[order_id] = _StoredOrder(
                status=order.status.value,
                created_at=stored.created_at,
                updated_at=order.updated_at,
            )
        return order

    def __len__(self) -> int:
        return len(self._orders)

    @staticmethod
    def _snapshot(order: Order) -> _StoredOrder:
        return _StoredOrder(
            status=order.status.value,
            created_at=order.created_at,
            updated_at=order.updated_at,
        )
