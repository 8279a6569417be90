"""In-memory messaging adapter."""

from order_service.infrastructure.adapters.outbound.messaging.memory.event_publisher import (
    InMemoryEventPublisher,
    PublishedEvent,
)

__all__ = [
    "InMemoryEventPublisher",
    "PublishedEvent",
]
