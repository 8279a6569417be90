"""Domain layer package.

The domain layer contains pure business logic with zero external dependencies.
It includes entities, value objects, factories, domain events, and domain exceptions.
"""

__all__ = []
