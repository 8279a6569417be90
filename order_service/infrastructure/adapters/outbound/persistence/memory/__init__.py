"""In-memory persistence adapter."""

from order_service.infrastructure.adapters.outbound.persistence.memory.order_repository import (
    InMemoryOrderRepository,
)

__all__ = [
    "InMemoryOrderRepository",
]
