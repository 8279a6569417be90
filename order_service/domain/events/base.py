"""Base class for domain events."""

from datetime import datetime
from typing import Any, ClassVar


class DomainEvent:
    """
    Immutable record of something that happened to an aggregate.

    Subclasses are frozen dataclasses that define ``event_name`` (the
    topic consumers subscribe to) and an ``occurred_at`` field.
    """

    event_name: ClassVar[str]
    occurred_at: datetime

    @property
    def aggregate_id(self) -> str:
        """Identifier of the aggregate the event belongs to."""
        raise NotImplementedError

    def to_dict(self) -> dict[str, Any]:
        """Serialize the event into primitive values."""
        raise NotImplementedError
