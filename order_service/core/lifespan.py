import logging
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI

from order_service.core.config import settings
from order_service.infrastructure.config.container import build_container

logger = logging.getLogger(__name__)


# ============================================================================
# Lifespan Context Manager
# ============================================================================
@asynccontextmanager
async def lifespan(app: FastAPI):  # type: ignore
    """
    Lifespan context manager for startup and shutdown events.

    Handles:
    - Building the container (repository, publisher, use cases) once
    - Storing it in app.state for the route dependencies
    - Resource cleanup on shutdown
    """
    logger.info(f"Starting {settings.app_name} v{settings.version}")
    logger.info(f"Environment: {settings.environment}")

    app.state.started_at = time.monotonic()
    app.state.container = build_container(settings)

    yield

    # Cleanup on shutdown
    logger.info("Shutting down application")
    await app.state.container.close()
    app.state.container = None
