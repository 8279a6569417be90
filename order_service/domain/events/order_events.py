"""Order domain events."""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any, ClassVar

from order_service.domain.events.base import DomainEvent

ORDER_CREATED = "order.created"
ORDER_STATUS_CHANGED = "order.status.changed"


def _utcnow() -> datetime:
    return datetime.now(UTC)


@dataclass(frozen=True)
class OrderCreated(DomainEvent):
    """Published once an order has been persisted for the first time."""

    event_name: ClassVar[str] = ORDER_CREATED

    order_id: str
    occurred_at: datetime = field(default_factory=_utcnow)

    @property
    def aggregate_id(self) -> str:
        return self.order_id

    def to_dict(self) -> dict[str, Any]:
        return {
            "orderId": self.order_id,
            "aggregateId": self.aggregate_id,
            "occurredAt": self.occurred_at.isoformat(),
        }


@dataclass(frozen=True)
class OrderStatusChanged(DomainEvent):
    """Published after an order's status has been advanced and persisted."""

    event_name: ClassVar[str] = ORDER_STATUS_CHANGED

    order_id: str
    previous_status: str
    new_status: str
    occurred_at: datetime = field(default_factory=_utcnow)

    @property
    def aggregate_id(self) -> str:
        return self.order_id

    def to_dict(self) -> dict[str, Any]:
        return {
            "orderId": self.order_id,
            "aggregateId": self.aggregate_id,
            "previousStatus": self.previous_status,
            "newStatus": self.new_status,
            "occurredAt": self.occurred_at.isoformat(),
        }
