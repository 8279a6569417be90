"""SQLAlchemy models."""

from order_service.infrastructure.adapters.outbound.persistence.postgresql.models.base import Base
from order_service.infrastructure.adapters.outbound.persistence.postgresql.models.order_model import (
    OrderModel,
)

__all__ = [
    "Base",
    "OrderModel",
]
