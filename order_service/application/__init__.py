"""Application layer: use cases, ports, and DTOs."""
