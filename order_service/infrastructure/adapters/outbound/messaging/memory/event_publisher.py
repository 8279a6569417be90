"""In-memory implementation of EventPublisherPort."""

import logging
from dataclasses import dataclass

from order_service.domain.events.base import DomainEvent

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PublishedEvent:
    """An event recorded by the in-memory publisher."""

    event_name: str
    event: DomainEvent


class InMemoryEventPublisher:
    """Records published events in order. For local runs and tests."""

    def __init__(self) -> None:
        self._history: list[PublishedEvent] = []

    async def publish(self, event_name: str, event: DomainEvent) -> None:
        self._history.append(PublishedEvent(event_name, event))
        logger.debug(f"Event recorded: {event_name} (aggregate_id={event.aggregate_id})")

    @property
    def history(self) -> list[PublishedEvent]:
        return list(self._history)

    def events_named(self, event_name: str) -> list[DomainEvent]:
        return [item.event for item in self._history if item.event_name == event_name]

    def clear(self) -> None:
        self._history.clear()
