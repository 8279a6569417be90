"""
Health Check Endpoints
"""

import time
from datetime import UTC, datetime
from typing import Any

from fastapi import APIRouter, Request

from order_service.api.dependencies import ContainerDep
from order_service.core.config import settings

router = APIRouter(prefix="/health", tags=["Health"])


@router.get("")
async def health_check(request: Request) -> dict[str, Any]:
    """
    Liveness check endpoint.

    Returns:
        Status, current timestamp, and process uptime in seconds
    """
    started_at = getattr(request.app.state, "started_at", None)
    uptime = time.monotonic() - started_at if started_at is not None else 0.0
    return {
        "status": "UP",
        "timestamp": datetime.now(UTC).isoformat(),
        "uptime": round(uptime, 3),
        "app": settings.app_name,
        "version": settings.version,
    }


@router.get("/ready")
async def readiness_check(container: ContainerDep) -> dict[str, Any]:
    """
    Readiness check endpoint.

    Verifies database and Redis connectivity when those backends are
    configured.

    Returns:
        Detailed readiness status
    """
    checks = await container.health()
    ready = all(result == "ok" for result in checks.values())

    return {
        "status": "ready" if ready else "degraded",
        "app": settings.app_name,
        "version": settings.version,
        "checks": checks,
    }
