"""Domain models package."""

from accounting.domain.models.enums import AccountType
from accounting.domain.models.account import Account

__all__ = [
    "AccountType",
    "Account",
]
