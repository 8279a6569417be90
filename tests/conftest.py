"""
Pytest configuration and fixtures for order service tests.

This module provides:
- Environment defaults so no external service is needed
- In-memory repository and publisher fixtures
- A container wired from the in-memory adapters
- An async HTTP client with the container dependency overridden
"""

# Set environment variables BEFORE importing anything from order_service
import os

os.environ.setdefault("PERSISTENCE_BACKEND", "memory")
os.environ.setdefault("EVENT_BACKEND", "memory")
os.environ.setdefault("LOG_FILE_ENABLED", "false")
os.environ.setdefault("LOG_LEVEL", "WARNING")

from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from order_service.api.dependencies import get_container
from order_service.infrastructure.adapters.outbound.messaging.memory import (
    InMemoryEventPublisher,
)
from order_service.infrastructure.adapters.outbound.persistence.memory import (
    InMemoryOrderRepository,
)
from order_service.infrastructure.config.container import Container
from order_service.main import app


# ============================================================================
# Adapter Fixtures
# ============================================================================
@pytest.fixture
def order_repository() -> InMemoryOrderRepository:
    """Empty in-memory order store."""
    return InMemoryOrderRepository()


@pytest.fixture
def event_publisher() -> InMemoryEventPublisher:
    """In-memory publisher that records every event."""
    return InMemoryEventPublisher()


@pytest.fixture
def container(
    order_repository: InMemoryOrderRepository,
    event_publisher: InMemoryEventPublisher,
) -> Container:
    """Container wired from the in-memory adapters."""
    return Container(order_repository=order_repository, event_publisher=event_publisher)


# ============================================================================
# HTTP Client Fixtures
# ============================================================================
@pytest_asyncio.fixture
async def async_client(container: Container) -> AsyncGenerator[AsyncClient, None]:
    """
    Create an async FastAPI test client.

    The lifespan is not run; the container dependency is overridden with
    the in-memory one instead.
    """
    app.dependency_overrides[get_container] = lambda: container

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as client:
        yield client

    app.dependency_overrides.clear()
