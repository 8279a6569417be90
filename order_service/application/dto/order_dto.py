"""Order DTOs (Data Transfer Objects)."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from order_service.domain.entities.order import Order


class CreateOrderInput(BaseModel):
    """Input DTO for creating a new order."""

    id: Optional[str] = Field(
        None,
        description="Client supplied order id; generated when omitted",
    )

    model_config = {"frozen": True}


class CreateOrderOutput(BaseModel):
    """Output DTO for a newly created order."""

    id: str = Field(..., description="Order identifier")
    status: str = Field(..., description="Order status token")
    created_at: datetime = Field(..., description="Order creation timestamp")

    model_config = {"frozen": True}

    @classmethod
    def from_entity(cls, order: Order) -> "CreateOrderOutput":
        return cls(
            id=order.id.value,
            status=order.status.value,
            created_at=order.created_at,
        )


class OrderStatusOutput(BaseModel):
    """Output DTO for an order's current status."""

    id: str = Field(..., description="Order identifier")
    status: str = Field(..., description="Order status token")
    created_at: datetime = Field(..., description="Order creation timestamp")
    updated_at: datetime = Field(..., description="Last status change timestamp")
    can_advance: bool = Field(
        ..., description="Whether the order can move to the next status"
    )

    model_config = {"frozen": True}

    @classmethod
    def from_entity(cls, order: Order) -> "OrderStatusOutput":
        """
        Create DTO from Order entity.

        Args:
            order: Order domain entity

        Returns:
            OrderStatusOutput DTO
        """
        return cls(
            id=order.id.value,
            status=order.status.value,
            created_at=order.created_at,
            updated_at=order.updated_at,
            can_advance=order.can_advance(),
        )


class UpdateOrderStatusOutput(BaseModel):
    """Output DTO for an order status advance."""

    id: str = Field(..., description="Order identifier")
    previous_status: str = Field(..., description="Status before the advance")
    new_status: str = Field(..., description="Status after the advance")
    updated_at: datetime = Field(..., description="Timestamp of the status change")

    model_config = {"frozen": True}
