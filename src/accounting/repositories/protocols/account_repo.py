"""Account repository protocol."""

from typing import Protocol, Optional

from accounting.domain.models import Account, AccountType


class AccountRepository(Protocol):
    """Interface for chart-of-accounts data access.

    Multi-row queries are ordered by account code. Single-row lookups return
    ``None`` when nothing matches; storage errors propagate to the caller.
    """

    def save(self, account: Account) -> Account:
        """Persist a new account; storage assigns its id."""
        ...

    def update(self, account: Account) -> Account:
        """Replace the stored row of an existing account."""
        ...

    def delete(self, account: Account) -> None:
        """Delete an account (hard delete)."""
        ...

    def find_by_id(self, account_id: int) -> Optional[Account]:
        """Retrieve account by ID."""
        ...

    def find_by_code(self, code: str) -> Optional[Account]:
        """Retrieve account by its unique code."""
        ...

    def find_all(self) -> list[Account]:
        """List all accounts."""
        ...

    def find_by_type(self, account_type: AccountType) -> list[Account]:
        """List accounts of the given type."""
        ...

    def find_active(self) -> list[Account]:
        """List accounts flagged active."""
        ...

    def find_root_accounts(self) -> list[Account]:
        """List accounts that have no parent."""
        ...

    def find_by_parent(self, parent: Account) -> list[Account]:
        """List the direct children of ``parent``.

        Returns an empty list when ``parent`` has not been saved yet.
        """
        ...

    def count(self) -> int:
        """Number of stored accounts."""
        ...
