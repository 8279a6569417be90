"""Redis Streams messaging adapter."""

from order_service.infrastructure.adapters.outbound.messaging.redis_streams.event_publisher import (
    RedisStreamEventPublisher,
)

__all__ = [
    "RedisStreamEventPublisher",
]
