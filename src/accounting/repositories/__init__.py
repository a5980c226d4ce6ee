"""Repository layer - data access abstractions and implementations."""

from accounting.repositories.protocols import AccountRepository

__all__ = [
    "AccountRepository",
]
