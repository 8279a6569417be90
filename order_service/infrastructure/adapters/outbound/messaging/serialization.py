"""Wire format shared by event publishers."""

import json
from typing import Any

from order_service.domain.events.base import DomainEvent


def event_payload(event_name: str, event: DomainEvent) -> dict[str, Any]:
    """
    Build the message body for an event.

    Downstream consumers read camelCase keys and the ``eventName`` field,
    so this shape is a public contract.
    """
    return {**event.to_dict(), "eventName": event_name}


def encode_event(event_name: str, event: DomainEvent) -> str:
    """Encode an event as a JSON string."""
    return json.dumps(event_payload(event_name, event), separators=(",", ":"))
