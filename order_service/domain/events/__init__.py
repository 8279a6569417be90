"""Domain events package."""

from order_service.domain.events.base import DomainEvent
from order_service.domain.events.order_events import (
    ORDER_CREATED,
    ORDER_STATUS_CHANGED,
    OrderCreated,
    OrderStatusChanged,
)

__all__ = [
    "DomainEvent",
    "ORDER_CREATED",
    "ORDER_STATUS_CHANGED",
    "OrderCreated",
    "OrderStatusChanged",
]
