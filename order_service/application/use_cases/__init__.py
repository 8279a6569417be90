"""Use cases (application layer business logic)."""

from order_service.application.use_cases.orders import (
    CreateOrderUseCase,
    GetOrderStatusUseCase,
    UpdateOrderStatusUseCase,
)

__all__ = [
    "CreateOrderUseCase",
    "GetOrderStatusUseCase",
    "UpdateOrderStatusUseCase",
]
