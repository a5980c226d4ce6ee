"""Dependency injection for FastAPI."""

from fastapi import Depends
from sqlalchemy.orm import Session

from accounting.repositories.sqlalchemy.database import get_db
from accounting.repositories.sqlalchemy import SqlAlchemyAccountRepository
from accounting.services import AccountService


def get_account_repo(db: Session = Depends(get_db)) -> SqlAlchemyAccountRepository:
    """Provide AccountRepository instance."""
    return SqlAlchemyAccountRepository(db)


def get_account_service(
    account_repo: SqlAlchemyAccountRepository = Depends(get_account_repo),
) -> AccountService:
    """Provide AccountService instance."""
    return AccountService(account_repo=account_repo)
