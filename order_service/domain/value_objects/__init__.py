"""Domain value objects package."""

from order_service.domain.value_objects.order_id import OrderId
from order_service.domain.value_objects.order_status import OrderStatus

__all__ = [
    "OrderId",
    "OrderStatus",
]
