"""SQLAlchemy implementation of AccountRepository."""

import logging
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from accounting.core.exceptions import NotFoundError, ValidationError
from accounting.core.timezone import to_utc
from accounting.domain.models import Account, AccountType
from accounting.repositories.sqlalchemy.orm_models import AccountORM

logger = logging.getLogger(__name__)


class SqlAlchemyAccountRepository:
    """
    SQLAlchemy-backed account repository.

    The session is owned by the caller and is never closed here. Writes
    commit immediately; when a write fails the session is rolled back and
    the original SQLAlchemy exception is re-raised.
    """

    def __init__(self, db: Session):
        self._db = db

    def save(self, account: Account) -> Account:
        """Persist a new account and fill in its generated id and timestamps."""
        if account.id is not None:
            raise ValidationError(f"Account {account.code} already has id {account.id}")

        orm_account = AccountORM(
            code=account.code,
            name=account.name,
            description=account.description,
            type=account.type,
            parent_id=account.parent_id,
            balance=account.balance,
            active=account.active,
            level=account.level,
        )
        self._db.add(orm_account)
        self._commit("save", account.code)
        self._db.refresh(orm_account)

        account.id = orm_account.id
        account.created_at = _as_utc(orm_account.created_at)
        account.updated_at = _as_utc(orm_account.updated_at)
        logger.debug("Saved account %s (id=%s)", account.code, account.id)
        return account

    def update(self, account: Account) -> Account:
        """Replace every mutable column of an existing account."""
        if account.id is None:
            raise ValidationError(f"Account {account.code} has no id")

        orm_account = self._db.get(AccountORM, account.id)
        if orm_account is None:
            raise NotFoundError("Account", str(account.id))

        orm_account.code = account.code
        orm_account.name = account.name
        orm_account.description = account.description
        orm_account.type = account.type
        orm_account.parent_id = account.parent_id
        orm_account.balance = account.balance
        orm_account.active = account.active
        orm_account.level = account.level
        self._commit("update", account.code)
        self._db.refresh(orm_account)

        account.updated_at = _as_utc(orm_account.updated_at)
        logger.debug("Updated account %s (id=%s)", account.code, account.id)
        return account

    def delete(self, account: Account) -> None:
        """Delete an account row."""
        if account.id is None:
            raise ValidationError(f"Account {account.code} has no id")

        # The foreign key decides whether the row may go.
        try:
            self._db.query(AccountORM).filter(
                AccountORM.id == account.id
            ).delete(synchronize_session="fetch")
        except SQLAlchemyError:
            self._rollback("delete", account.code)
            raise
        self._commit("delete", account.code)
        logger.debug("Deleted account %s (id=%s)", account.code, account.id)

    def find_by_id(self, account_id: int) -> Optional[Account]:
        """Retrieve account by ID."""
        orm_account = self._db.get(AccountORM, account_id)
        return self._to_domain(orm_account) if orm_account else None

    def find_by_code(self, code: str) -> Optional[Account]:
        """Retrieve account by its unique code."""
        orm_account = self._db.query(AccountORM).filter(
            AccountORM.code == code
        ).one_or_none()
        return self._to_domain(orm_account) if orm_account else None

    def find_all(self) -> list[Account]:
        """List all accounts."""
        orm_accounts = self._db.query(AccountORM).order_by(AccountORM.code).all()
        return [self._to_domain(a) for a in orm_accounts]

    def find_by_type(self, account_type: AccountType) -> list[Account]:
        """List accounts of one type."""
        orm_accounts = (
            self._db.query(AccountORM)
            .filter(AccountORM.type == account_type)
            .order_by(AccountORM.code)
            .all()
        )
        return [self._to_domain(a) for a in orm_accounts]

    def find_active(self) -> list[Account]:
        """List active accounts."""
        orm_accounts = (
            self._db.query(AccountORM)
            .filter(AccountORM.active.is_(True))
            .order_by(AccountORM.code)
            .all()
        )
        return [self._to_domain(a) for a in orm_accounts]

    def find_root_accounts(self) -> list[Account]:
        """List accounts without a parent."""
        orm_accounts = (
            self._db.query(AccountORM)
            .filter(AccountORM.parent_id.is_(None))
            .order_by(AccountORM.code)
            .all()
        )
        return [self._to_domain(a) for a in orm_accounts]

    def find_by_parent(self, parent: Account) -> list[Account]:
        """List the direct children of a parent account.

        An unsaved parent (no id) cannot have children, so the result is empty.
        """
        if parent.id is None:
            return []
        orm_accounts = (
            self._db.query(AccountORM)
            .filter(AccountORM.parent_id == parent.id)
            .order_by(AccountORM.code)
            .all()
        )
        return [self._to_domain(a) for a in orm_accounts]

    def count(self) -> int:
        """Number of stored accounts."""
        return self._db.query(AccountORM).count()

    def _commit(self, operation: str, code: str) -> None:
        try:
            self._db.commit()
        except SQLAlchemyError:
            self._rollback(operation, code)
            raise

    def _rollback(self, operation: str, code: str) -> None:
        logger.warning("Rolling back failed %s of account %s", operation, code)
        self._db.rollback()

    @staticmethod
    def _to_domain(orm: AccountORM) -> Account:
        """Convert ORM model to domain model."""
        return Account(
            id=orm.id,
            code=orm.code,
            name=orm.name,
            description=orm.description,
            type=orm.type,
            parent_id=orm.parent_id,
            balance=orm.balance,
            active=orm.active,
            level=orm.level,
            created_at=_as_utc(orm.created_at),
            updated_at=_as_utc(orm.updated_at),
        )


def _as_utc(value):
    return to_utc(value) if value is not None else None
