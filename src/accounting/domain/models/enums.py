"""Enumerations for domain models."""

from enum import Enum


class AccountType(str, Enum):
    """Account classification in the chart of accounts.

    ASSET and EXPENSE accounts increase with debits; LIABILITY, EQUITY and
    INCOME accounts increase with credits.
    """

    ASSET = "ASSET"
    LIABILITY = "LIABILITY"
    EQUITY = "EQUITY"
    INCOME = "INCOME"
    EXPENSE = "EXPENSE"
