"""Order lifecycle use cases."""

from order_service.application.use_cases.orders.create_order import CreateOrderUseCase
from order_service.application.use_cases.orders.get_order_status import (
    GetOrderStatusUseCase,
)
from order_service.application.use_cases.orders.update_order_status import (
    UpdateOrderStatusUseCase,
)

__all__ = [
    "CreateOrderUseCase",
    "GetOrderStatusUseCase",
    "UpdateOrderStatusUseCase",
]
