"""
FastAPI application entry point.

This module sets up:
- FastAPI application with middleware
- Exception handlers
- API routes
- CORS configuration
"""

import uvicorn
from fastapi import APIRouter, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from order_service.api.routes import health, orders
from order_service.core.config import settings
from order_service.core.handlers import register_exception_handlers
from order_service.core.lifespan import lifespan
from order_service.core.logging import setup_logging
from order_service.core.middleware import RequestIDMiddleware, RequestLoggingMiddleware


def create_app() -> FastAPI:
    """Build the FastAPI application."""
    app = FastAPI(
        title=settings.app_name,
        version=settings.version,
        description=settings.description,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        lifespan=lifespan,
    )

    # ========================================================================
    # Exception Handlers
    # ========================================================================
    register_exception_handlers(app)

    # ========================================================================
    # Middleware Setup (Order matters!)
    # ========================================================================
    # Added last runs first: the request id must be set before logging runs.
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ========================================================================
    # API Routes
    # ========================================================================
    v1_router = APIRouter(prefix="/v1")
    v1_router.include_router(orders.router)

    api_router = APIRouter(prefix="/api")
    api_router.include_router(v1_router)

    app.include_router(health.router)
    app.include_router(api_router)

    return app


setup_logging()
app = create_app()


def run() -> None:
    """Run the service with uvicorn."""
    uvicorn.run(
        "order_service.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.reload,
        log_config=None,
    )


if __name__ == "__main__":
    run()
