"""
Infrastructure layer configuration.

This package contains configuration for infrastructure components:
- Database connection and session management
- The composition root that wires adapters into use cases
"""

from order_service.infrastructure.config.container import Container, build_container
from order_service.infrastructure.config.database import DatabaseConfig

__all__ = [
    "Container",
    "DatabaseConfig",
    "build_container",
]
