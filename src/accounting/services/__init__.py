"""Service layer - business logic orchestration."""

from accounting.services.account_service import AccountService, DEFAULT_CHART

__all__ = [
    "AccountService",
    "DEFAULT_CHART",
]
