"""PostgreSQL repositories."""

from order_service.infrastructure.adapters.outbound.persistence.postgresql.repositories.order_repository import (
    PostgresOrderRepository,
)

__all__ = [
    "PostgresOrderRepository",
]
