"""Domain factories package."""

from order_service.domain.factories.order_factory import OrderFactory

__all__ = [
    "OrderFactory",
]
