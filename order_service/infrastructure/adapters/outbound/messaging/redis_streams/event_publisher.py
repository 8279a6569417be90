"""Redis Streams implementation of EventPublisherPort.

Each event name maps to its own stream (``<prefix>:<event_name>``) so
consumers can attach a consumer group per topic.
"""

import logging

import redis.asyncio as aioredis
from redis.exceptions import RedisError

from order_service.application.exceptions import EventPublishError
from order_service.domain.events.base import DomainEvent
from order_service.infrastructure.adapters.outbound.messaging.serialization import (
    encode_event,
)

logger = logging.getLogger(__name__)


class RedisStreamEventPublisher:
    """Publishes domain events with XADD.

    Streams are capped with an approximate MAXLEN so they cannot grow
    without bound.
    """

    def __init__(
        self,
        redis_client: aioredis.Redis,
        stream_prefix: str = "orders.events",
        max_stream_length: int = 100_000,
    ) -> None:
        self._redis = redis_client
        self._stream_prefix = stream_prefix
        self._max_len = max_stream_length

    def stream_name(self, event_name: str) -> str:
        return f"{self._stream_prefix}:{event_name}"

    async def publish(self, event_name: str, event: DomainEvent) -> None:
        """Append an event to its Redis Stream."""
        stream = self.stream_name(event_name)
        fields = {
            "event_name": event_name,
            "event_type": type(event).__name__,
            "aggregate_id": event.aggregate_id,
            "payload": encode_event(event_name, event),
        }

        try:
            message_id = await self._redis.xadd(
                stream, fields, maxlen=self._max_len, approximate=True
            )
        except RedisError as e:
            logger.error(f"Failed to publish event {event_name} to {stream}: {e}")
            raise EventPublishError(event_name, str(e)) from e

        logger.info(
            f"Event published: {event_name} (aggregate_id={event.aggregate_id}, "
            f"stream={stream}, message_id={message_id})"
        )
