"""SQLAlchemy ORM model definitions."""

from decimal import Decimal

from sqlalchemy import (
    Column,
    Integer,
    String,
    DateTime,
    Boolean,
    ForeignKey,
    Numeric,
    Enum as SqlEnum,
)

from accounting.core.timezone import now_utc
from accounting.domain.models.enums import AccountType
from accounting.repositories.sqlalchemy.database import Base


class AccountORM(Base):
    """SQLAlchemy model for Account."""

    __tablename__ = "accounts"

    id = Column(Integer, primary_key=True, autoincrement=True)
    code = Column(String(20), unique=True, index=True, nullable=False)
    name = Column(String(200), nullable=False)
    description = Column(String(500), nullable=True)
    type = Column(SqlEnum(AccountType), nullable=False)
    # No ON DELETE action: removing a parent that still has children is
    # rejected by the database.
    parent_id = Column(Integer, ForeignKey("accounts.id"), nullable=True, index=True)
    balance = Column(Numeric(precision=19, scale=4), nullable=False, default=Decimal("0"))
    active = Column(Boolean, nullable=False, default=True)
    level = Column(Integer, nullable=False, default=1)
    created_at = Column(DateTime, nullable=False, default=now_utc)
    updated_at = Column(DateTime, nullable=True, onupdate=now_utc)
