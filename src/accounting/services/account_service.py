"""Account service for chart-of-accounts management."""

import logging
from decimal import Decimal
from typing import Optional

from accounting.core.exceptions import AccountInUseError, NotFoundError, ValidationError
from accounting.domain.models import Account, AccountType
from accounting.repositories.protocols import AccountRepository

logger = logging.getLogger(__name__)


# (code, name, type, parent code)
DEFAULT_CHART: tuple[tuple[str, str, AccountType, Optional[str]], ...] = (
    ("1", "ASSETS", AccountType.ASSET, None),
    ("1.1", "Current Assets", AccountType.ASSET, "1"),
    ("1.1.01", "Cash", AccountType.ASSET, "1.1"),
    ("1.1.02", "Banks", AccountType.ASSET, "1.1"),
    ("1.1.03", "Accounts Receivable", AccountType.ASSET, "1.1"),
    ("1.2", "Non-Current Assets", AccountType.ASSET, "1"),
    ("2", "LIABILITIES", AccountType.LIABILITY, None),
    ("2.1", "Current Liabilities", AccountType.LIABILITY, "2"),
    ("2.1.01", "Accounts Payable", AccountType.LIABILITY, "2.1"),
    ("2.1.02", "Taxes Payable", AccountType.LIABILITY, "2.1"),
    ("3", "EQUITY", AccountType.EQUITY, None),
    ("3.1", "Share Capital", AccountType.EQUITY, "3"),
    ("3.2", "Retained Earnings", AccountType.EQUITY, "3"),
    ("4", "INCOME", AccountType.INCOME, None),
    ("4.1", "Operating Income", AccountType.INCOME, "4"),
    ("4.1.01", "Sales Revenue", AccountType.INCOME, "4.1"),
    ("5", "EXPENSES", AccountType.EXPENSE, None),
    ("5.1", "Operating Expenses", AccountType.EXPENSE, "5"),
    ("5.1.01", "Payroll Expenses", AccountType.EXPENSE, "5.1"),
    ("5.1.02", "Administrative Expenses", AccountType.EXPENSE, "5.1"),
)


class AccountService:
    """
    Service for managing the chart of accounts.

    Adds the business checks the repository leaves to storage: duplicate
    codes are reported before hitting the unique index, and accounts with
    children or a balance cannot be deleted.
    """

    def __init__(self, account_repo: AccountRepository):
        self._account_repo = account_repo

    def create(
        self,
        code: str,
        name: str,
        account_type: AccountType,
        parent: Optional[Account] = None,
        description: Optional[str] = None,
    ) -> Account:
        """
        Create a new active account with a zero balance.

        Args:
            code: Unique account code, e.g. "1.1.01"
            name: Display name
            account_type: Classification of the account
            parent: Optional parent account; None creates a root account
            description: Optional free text

        Returns:
            The persisted Account with its id assigned
        """
        logger.info("Creating account: %s - %s", code, name)
        if self._account_repo.find_by_code(code) is not None:
            logger.error("Account already exists with code: %s", code)
            raise ValidationError(f"Account already exists with code: {code}")

        account = Account(
            code=code,
            name=name,
            type=AccountType(account_type),
            description=description,
            balance=Decimal("0"),
            active=True,
        )
        account.set_parent(parent)
        self._account_repo.save(account)
        logger.info("Account created successfully: %s (ID: %s)", code, account.id)
        return account

    def update(self, account: Account) -> Account:
        """Store changes made to an existing account."""
        logger.info("Updating account: %s", account.code)
        return self._account_repo.update(account)

    def delete(self, account_id: int) -> None:
        """Delete an account that has no children and a zero balance."""
        logger.info("Deleting account with ID: %s", account_id)
        account = self.get(account_id)

        if self._account_repo.find_by_parent(account):
            logger.error("Cannot delete account %s - has child accounts", account.code)
            raise AccountInUseError(account.code, "it has child accounts")

        if account.balance != 0:
            logger.error("Cannot delete account %s - has balance", account.code)
            raise AccountInUseError(account.code, "it has a non-zero balance")

        self._account_repo.delete(account)
        logger.info("Account deleted: %s", account.code)

    def deactivate(self, account_id: int) -> Account:
        """Mark an account inactive; it stays stored."""
        logger.info("Deactivating account with ID: %s", account_id)
        return self._set_active(account_id, False)

    def activate(self, account_id: int) -> Account:
        logger.info("Activating account with ID: %s", account_id)
        return self._set_active(account_id, True)

    def get(self, account_id: int) -> Account:
        """Get account by ID, raising NotFoundError when absent."""
        account = self._account_repo.find_by_id(account_id)
        if account is None:
            logger.error("Account not found with ID: %s", account_id)
            raise NotFoundError("Account", str(account_id))
        return account

    def find_by_id(self, account_id: int) -> Optional[Account]:
        logger.debug("Finding account by ID: %s", account_id)
        return self._account_repo.find_by_id(account_id)

    def find_by_code(self, code: str) -> Optional[Account]:
        logger.debug("Finding account by code: %s", code)
        return self._account_repo.find_by_code(code)

    def find_all(self) -> list[Account]:
        logger.debug("Retrieving all accounts")
        return self._account_repo.find_all()

    def find_by_type(self, account_type: AccountType) -> list[Account]:
        logger.debug("Finding accounts by type: %s", account_type)
        return self._account_repo.find_by_type(AccountType(account_type))

    def find_active(self) -> list[Account]:
        logger.debug("Retrieving active accounts")
        return self._account_repo.find_active()

    def find_root_accounts(self) -> list[Account]:
        logger.debug("Retrieving root accounts")
        return self._account_repo.find_root_accounts()

    def find_children(self, account_id: int) -> list[Account]:
        """List the direct children of the account with the given id."""
        logger.debug("Finding children accounts for parent ID: %s", account_id)
        return self._account_repo.find_by_parent(self.get(account_id))

    def get_chart_of_accounts(self) -> list[Account]:
        logger.debug("Retrieving chart of accounts")
        return self._account_repo.find_all()

    def search_by_name(self, name: str) -> list[Account]:
        """Case-insensitive substring search on account names."""
        logger.debug("Searching accounts by name: %s", name)
        needle = name.lower()
        return [a for a in self._account_repo.find_all() if needle in a.name.lower()]

    def count(self) -> int:
        return self._account_repo.count()

    def initialize_default_accounts(self) -> int:
        """
        Seed the default chart of accounts.

        Does nothing when any account already exists.

        Returns:
            Number of accounts created
        """
        if self._account_repo.count():
            logger.info("Chart of accounts already initialized, skipping")
            return 0

        logger.info("Initializing default chart of accounts")
        created: dict[str, Account] = {}
        for code, name, account_type, parent_code in DEFAULT_CHART:
            parent = created[parent_code] if parent_code else None
            created[code] = self.create(code, name, account_type, parent=parent)

        logger.info("Default chart of accounts initialized successfully")
        return len(created)

    def _set_active(self, account_id: int, active: bool) -> Account:
        account = self.get(account_id)
        account.active = active
        self._account_repo.update(account)
        logger.debug("Account %s active=%s", account.code, active)
        return account
