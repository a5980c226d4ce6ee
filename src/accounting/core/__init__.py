"""Core utilities and shared functionality."""

from accounting.core.timezone import now_utc, to_utc, UTC
from accounting.core.exceptions import (
    AppError,
    ValidationError,
    NotFoundError,
    AccountInUseError,
)

__all__ = [
    "now_utc",
    "to_utc",
    "UTC",
    "AppError",
    "ValidationError",
    "NotFoundError",
    "AccountInUseError",
]
