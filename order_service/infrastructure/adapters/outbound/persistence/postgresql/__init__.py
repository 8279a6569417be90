"""PostgreSQL persistence adapter."""
