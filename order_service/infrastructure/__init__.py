"""
Infrastructure layer.

Adapters for PostgreSQL, Redis, and in-memory backends, plus the
configuration that wires them into the application use cases.
"""
