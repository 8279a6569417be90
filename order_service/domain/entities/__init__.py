"""Domain entities package."""

from order_service.domain.entities.order import Order

__all__ = [
    "Order",
]
