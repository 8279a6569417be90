"""API route modules."""

from order_service.api.routes import health, orders

__all__ = ["health", "orders"]
