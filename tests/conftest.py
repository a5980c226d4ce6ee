"""
Pytest configuration and fixtures for chart of accounts tests.

This module provides:
- In-memory SQLite database fixtures (foreign keys enforced)
- Repository and service fixtures
- Factory helpers for accounts
- FastAPI test client wired to the test database
"""

import os
from typing import Callable, Optional

import pytest

# Keep the app's own engine off the user's home directory
os.environ.setdefault("ACCOUNTING_DATABASE_URL", "sqlite:///:memory:")

from sqlalchemy import create_engine, StaticPool
from sqlalchemy.orm import sessionmaker, Session
from fastapi.testclient import TestClient

from accounting.main import app
from accounting.repositories.sqlalchemy.database import (
    Base,
    get_db,
    enable_sqlite_foreign_keys,
)
# Import ORM models to register them with Base before creating tables
from accounting.repositories.sqlalchemy import orm_models  # noqa: F401
from accounting.repositories.sqlalchemy import SqlAlchemyAccountRepository
from accounting.services import AccountService
from accounting.domain.models import Account, AccountType
from accounting.config.settings import reset_settings


# =============================================================================
# DATABASE FIXTURES
# =============================================================================


@pytest.fixture(scope="function")
def test_engine():
    """Create test database engine with shared in-memory SQLite."""
    reset_settings()

    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    enable_sqlite_foreign_keys(engine)
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture(scope="function")
def test_session(test_engine) -> Session:
    """Create test database session."""
    TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)
    session = TestSessionLocal()
    try:
        yield session
    finally:
        session.close()


# =============================================================================
# REPOSITORY / SERVICE FIXTURES
# =============================================================================


@pytest.fixture
def account_repo(test_session) -> SqlAlchemyAccountRepository:
    """Provide test AccountRepository."""
    return SqlAlchemyAccountRepository(test_session)


@pytest.fixture
def account_service(account_repo) -> AccountService:
    """Provide test AccountService."""
    return AccountService(account_repo=account_repo)


# =============================================================================
# FACTORY FIXTURES
# =============================================================================


def make_account(
    code: str,
    account_type: AccountType = AccountType.ASSET,
    name: Optional[str] = None,
    parent: Optional[Account] = None,
    active: bool = True,
) -> Account:
    """Build an unsaved Account."""
    account = Account(
        code=code,
        name=name or f"Account {code}",
        type=account_type,
        active=active,
    )
    account.set_parent(parent)
    return account


@pytest.fixture
def account_factory(account_repo) -> Callable[..., Account]:
    """Factory for saving test accounts straight through the repository."""

    def _create_account(
        code: str,
        account_type: AccountType = AccountType.ASSET,
        name: Optional[str] = None,
        parent: Optional[Account] = None,
        active: bool = True,
    ) -> Account:
        return account_repo.save(
            make_account(code, account_type, name=name, parent=parent, active=active)
        )

    return _create_account


@pytest.fixture
def parent_with_child(account_factory) -> tuple[Account, Account]:
    """Root account "1000" with a single child "1001"."""
    parent = account_factory("1000", name="Cash and Banks")
    child = account_factory("1001", name="Petty Cash", parent=parent)
    return parent, child


# =============================================================================
# API TEST CLIENT FIXTURE
# =============================================================================


@pytest.fixture
def client(test_engine) -> TestClient:
    """Provide FastAPI test client with test database."""
    TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)

    def override_get_db():
        session = TestSessionLocal()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
