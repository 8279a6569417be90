"""
Mapper between Order domain entity and OrderModel database model.

This mapper handles bidirectional conversion:
- to_entity(): Convert SQLAlchemy model → Domain entity
- to_values(): Convert Domain entity → column values for INSERT/UPDATE
"""

from typing import Any

from order_service.domain.entities.order import Order
from order_service.domain.factories.order_factory import OrderFactory
from order_service.infrastructure.adapters.outbound.persistence.postgresql.models.order_model import (
    OrderModel,
)


class OrderMapper:
    """Mapper between Order entity and OrderModel."""

    @staticmethod
    def to_entity(model: OrderModel) -> Order:
        """
        Convert SQLAlchemy model to domain entity.

        Goes through OrderFactory.reconstruct so the stored status and both
        timestamps are restored exactly.
        """
        return OrderFactory.reconstruct(
            model.id,
            model.status,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    @staticmethod
    def to_values(entity: Order) -> dict[str, Any]:
        """Convert domain entity to a column -> value mapping."""
        return {
            "id": entity.id.value,
            "status": entity.status.value,
            "created_at": entity.created_at,
            "updated_at": entity.updated_at,
        }
