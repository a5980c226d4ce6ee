"""Pydantic schemas for account endpoints."""

from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from accounting.domain.models.enums import AccountType


class AccountCreate(BaseModel):
    """Request schema for creating an account."""

    code: str = Field(..., min_length=1, max_length=20, description="Unique account code")
    name: str = Field(..., min_length=1, max_length=200, description="Account name")
    type: AccountType = Field(..., description="Account classification")
    description: Optional[str] = Field(default=None, max_length=500)
    parent_id: Optional[int] = Field(default=None, description="Parent account ID")


class AccountUpdate(BaseModel):
    """Request schema for editing an account.

    Omitted fields keep their value. Only ``description`` may be sent as null.
    """

    code: Optional[str] = Field(default=None, min_length=1, max_length=20)
    name: Optional[str] = Field(default=None, min_length=1, max_length=200)
    type: Optional[AccountType] = None
    description: Optional[str] = Field(default=None, max_length=500)
    active: Optional[bool] = None

    @field_validator("code", "name", "type", "active")
    @classmethod
    def _not_null(cls, value):
        # Only description may be cleared; the other columns are NOT NULL
        if value is None:
            raise ValueError("field may be omitted but not set to null")
        return value


class AccountResponse(BaseModel):
    """Response schema for a single account."""

    model_config = {"from_attributes": True}

    id: int
    code: str
    name: str
    type: AccountType
    description: Optional[str] = None
    parent_id: Optional[int] = None
    balance: Decimal
    active: bool
    level: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class AccountListResponse(BaseModel):
    """Response schema for listing accounts."""

    accounts: list[AccountResponse]
    count: int
