"""Event publisher port interface."""

from typing import Protocol

from order_service.domain.events.base import DomainEvent


class EventPublisherPort(Protocol):
    """Messaging interface used to announce domain events."""

    async def publish(self, event_name: str, event: DomainEvent) -> None:
        """
        Publish a domain event.

        Args:
            event_name: Topic name (e.g., "order.created")
            event: Domain event to publish

        Raises:
            EventPublishError: If the broker rejects or cannot receive the event
        """
        ...
