"""Domain layer - pure business models with no external dependencies."""

from accounting.domain.models import Account, AccountType

__all__ = [
    "Account",
    "AccountType",
]
