"""Unit tests for InMemoryEventPublisher."""

import pytest

from order_service.domain.events import (
    ORDER_CREATED,
    ORDER_STATUS_CHANGED,
    OrderCreated,
    OrderStatusChanged,
)
from order_service.infrastructure.adapters.outbound.messaging.memory import (
    InMemoryEventPublisher,
)


@pytest.mark.asyncio
class TestInMemoryEventPublisher:
    """Tests for the recording publisher."""

    async def test_records_events_in_order(self):
        publisher = InMemoryEventPublisher()
        created = OrderCreated(order_id="order-1")
        changed = OrderStatusChanged(
            order_id="order-1", previous_status="created", new_status="processing"
        )

        await publisher.publish(ORDER_CREATED, created)
        await publisher.publish(ORDER_STATUS_CHANGED, changed)

        assert [item.event_name for item in publisher.history] == [
            ORDER_CREATED,
            ORDER_STATUS_CHANGED,
        ]
        assert publisher.events_named(ORDER_STATUS_CHANGED) == [changed]

    async def test_history_is_a_copy(self):
        publisher = InMemoryEventPublisher()
        await publisher.publish(ORDER_CREATED, OrderCreated(order_id="order-1"))

        publisher.history.clear()

        assert len(publisher.history) == 1

    async def test_clear(self):
        publisher = InMemoryEventPublisher()
        await publisher.publish(ORDER_CREATED, OrderCreated(order_id="order-1"))

        publisher.clear()

        assert publisher.history == []
