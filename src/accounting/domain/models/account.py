"""Account domain model."""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Optional

from accounting.domain.models.enums import AccountType

DEBIT_NORMAL_TYPES = frozenset({AccountType.ASSET, AccountType.EXPENSE})


@dataclass
class Account:
    """
    A record in the chart of accounts.

    Accounts form a hierarchy through ``parent_id``; an account without a
    parent is a root account. ``id`` is assigned by storage on save.
    """

    code: str
    name: str
    type: AccountType
    id: Optional[int] = None
    description: Optional[str] = None
    parent_id: Optional[int] = None
    balance: Decimal = Decimal("0")
    active: bool = True
    level: int = 1
    created_at: Optional[datetime] = field(default=None)
    updated_at: Optional[datetime] = field(default=None)

    def __post_init__(self) -> None:
        if isinstance(self.type, str) and not isinstance(self.type, AccountType):
            self.type = AccountType(self.type)
        if not isinstance(self.balance, Decimal):
            self.balance = Decimal(str(self.balance))

    @property
    def is_root(self) -> bool:
        return self.parent_id is None

    @property
    def increases_with_debit(self) -> bool:
        """True for debit-normal accounts (assets and expenses)."""
        return self.type in DEBIT_NORMAL_TYPES

    def set_parent(self, parent: Optional["Account"]) -> None:
        """Attach to a parent account and recompute the hierarchy level."""
        self.parent_id = parent.id if parent is not None else None
        self.level = parent.level + 1 if parent is not None else 1

    def debit(self, amount: Decimal) -> None:
        """Apply a debit: raises debit-normal balances, lowers the others."""
        if self.increases_with_debit:
            self.balance += amount
        else:
            self.balance -= amount

    def credit(self, amount: Decimal) -> None:
        """Apply a credit: lowers debit-normal balances, raises the others."""
        if self.increases_with_debit:
            self.balance -= amount
        else:
            self.balance += amount
