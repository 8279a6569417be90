"""
Core module for the order service.

Exports the main configuration and logging components.
"""

from order_service.core.config import Settings, settings
from order_service.core.logging import setup_logging

__all__ = [
    # Config
    "Settings",
    "settings",
    # Logging
    "setup_logging",
]
