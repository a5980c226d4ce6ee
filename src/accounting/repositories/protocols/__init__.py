"""Repository protocol definitions (interfaces)."""

from accounting.repositories.protocols.account_repo import AccountRepository

__all__ = [
    "AccountRepository",
]
