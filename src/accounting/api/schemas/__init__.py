"""Pydantic schemas for API request/response."""

from accounting.api.schemas.account import (
    AccountCreate,
    AccountUpdate,
    AccountResponse,
    AccountListResponse,
)

__all__ = [
    "AccountCreate",
    "AccountUpdate",
    "AccountResponse",
    "AccountListResponse",
]
