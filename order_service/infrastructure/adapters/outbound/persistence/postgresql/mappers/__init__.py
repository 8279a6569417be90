"""Entity <-> model mappers."""

from order_service.infrastructure.adapters.outbound.persistence.postgresql.mappers.order_mapper import (
    OrderMapper,
)

__all__ = [
    "OrderMapper",
]
