"""SQLAlchemy repository implementations."""

from accounting.repositories.sqlalchemy.database import (
    get_engine,
    get_session_factory,
    get_db,
    get_session,
    init_db,
    init_db_with_path,
    reset_database,
    Base,
)
from accounting.repositories.sqlalchemy.account_repo import SqlAlchemyAccountRepository

__all__ = [
    "get_engine",
    "get_session_factory",
    "get_db",
    "get_session",
    "init_db",
    "init_db_with_path",
    "reset_database",
    "Base",
    "SqlAlchemyAccountRepository",
]
