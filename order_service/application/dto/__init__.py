"""Data Transfer Objects (DTOs) for application layer."""

from order_service.application.dto.order_dto import (
    CreateOrderInput,
    CreateOrderOutput,
    OrderStatusOutput,
    UpdateOrderStatusOutput,
)

__all__ = [
    "CreateOrderInput",
    "CreateOrderOutput",
    "OrderStatusOutput",
    "UpdateOrderStatusOutput",
]
