"""Outbound ports (driven adapters interfaces)."""

from order_service.application.ports.outbound.event_publisher_port import (
    EventPublisherPort,
)
from order_service.application.ports.outbound.order_repository_port import (
    OrderRepositoryPort,
)

__all__ = [
    "EventPublisherPort",
    "OrderRepositoryPort",
]
