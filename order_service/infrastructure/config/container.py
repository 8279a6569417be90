"""
Composition root.

Builds the order repository, the event publisher, and the three use cases
exactly once at process start. The FastAPI lifespan owns the resulting
container and closes it on shutdown.
"""

import logging
from dataclasses import dataclass, field
from typing import Optional

import redis.asyncio as aioredis

from order_service.application.ports.outbound.event_publisher_port import (
    EventPublisherPort,
)
from order_service.application.ports.outbound.order_repository_port import (
    OrderRepositoryPort,
)
from order_service.application.use_cases.orders import (
    CreateOrderUseCase,
    GetOrderStatusUseCase,
    UpdateOrderStatusUseCase,
)
from order_service.core.config import Settings
from order_service.infrastructure.adapters.outbound.messaging.memory import (
    InMemoryEventPublisher,
)
from order_service.infrastructure.adapters.outbound.messaging.redis_streams import (
    RedisStreamEventPublisher,
)
from order_service.infrastructure.adapters.outbound.persistence.memory import (
    InMemoryOrderRepository,
)
from order_service.infrastructure.adapters.outbound.persistence.postgresql.repositories import (
    PostgresOrderRepository,
)
from order_service.infrastructure.config.database import DatabaseConfig

logger = logging.getLogger(__name__)


@dataclass
class Container:
    """Wired application services and the resources they hold open."""

    order_repository: OrderRepositoryPort
    event_publisher: EventPublisherPort
    database: Optional[DatabaseConfig] = None
    redis_client: Optional[aioredis.Redis] = None
    create_order: CreateOrderUseCase = field(init=False)
    get_order_status: GetOrderStatusUseCase = field(init=False)
    update_order_status: UpdateOrderStatusUseCase = field(init=False)

    def __post_init__(self) -> None:
        self.create_order = CreateOrderUseCase(self.order_repository, self.event_publisher)
        self.get_order_status = GetOrderStatusUseCase(self.order_repository)
        self.update_order_status = UpdateOrderStatusUseCase(
            self.order_repository, self.event_publisher
        )

    async def health(self) -> dict[str, str]:
        """
        Check the external dependencies this container talks to.

        Returns:
            Mapping of dependency name to "ok" or "ko"
        """
        checks: dict[str, str] = {}
        if self.database is not None:
            checks["database"] = "ok" if await self.database.health_check() else "ko"
        if self.redis_client is not None:
            try:
                await self.redis_client.ping()
                checks["redis"] = "ok"
            except Exception as e:
                logger.warning(f"Redis health check failed: {e}")
                checks["redis"] = "ko"
        return checks

    async def close(self) -> None:
        """Release database and Redis connections."""
        try:
            if self.redis_client is not None:
                await self.redis_client.aclose()
                logger.info("Redis connection closed")
        finally:
            if self.database is not None:
                await self.database.close()


def build_container(settings: Settings) -> Container:
    """
    Create every collaborator from settings.

    Args:
        settings: Application settings

    Returns:
        Container with repository, publisher, and use cases
    """
    database: Optional[DatabaseConfig] = None
    redis_client: Optional[aioredis.Redis] = None

    if settings.persistence_backend == "postgresql":
        database = DatabaseConfig(
            settings.database_url_str,
            echo=settings.debug,
            pool_size=settings.db_pool_size,
            max_overflow=settings.db_max_overflow,
            pool_timeout=settings.db_pool_timeout,
            pool_recycle=settings.db_pool_recycle,
            pool_pre_ping=settings.db_pool_pre_ping,
        )
        order_repository: OrderRepositoryPort = PostgresOrderRepository(
            database.session_factory
        )
    else:
        order_repository = InMemoryOrderRepository()

    if settings.event_backend == "redis":
        redis_client = aioredis.from_url(
            settings.redis_url_str,
            decode_responses=True,
            max_connections=settings.redis_max_connections,
        )
        event_publisher: EventPublisherPort = RedisStreamEventPublisher(
            redis_client,
            stream_prefix=settings.event_stream_prefix,
            max_stream_length=settings.event_stream_max_length,
        )
    else:
        event_publisher = InMemoryEventPublisher()

    logger.info(
        f"Container built: persistence={settings.persistence_backend}, "
        f"events={settings.event_backend}"
    )

    return Container(
        order_repository=order_repository,
        event_publisher=event_publisher,
        database=database,
        redis_client=redis_client,
    )
