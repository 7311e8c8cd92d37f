"""SQLAlchemy models for ridetrack database."""

import uuid
from datetime import datetime, UTC
from sqlalchemy import (
    Column,
    String,
    DateTime,
    Numeric,
    CheckConstraint,
    create_engine,
)
from sqlalchemy.orm import declarative_base, sessionmaker, Session

Base = declarative_base()


def _new_id() -> str:
    return str(uuid.uuid4())


class Earning(Base):
    """Trip earning model."""

    __tablename__ = "earnings"

    id = Column(String(36), primary_key=True, default=_new_id)
    # ISO date string (YYYY-MM-DD), kept as text as the records carry it
    date = Column(String(10), nullable=False, index=True)
    platform = Column(String, nullable=False)
    driver = Column(String, nullable=False)
    amount = Column(Numeric(10, 2), nullable=False)
    description = Column(String, nullable=True)
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)

    __table_args__ = (CheckConstraint("amount >= 0", name="ck_earning_amount_non_negative"),)


class Expense(Base):
    """Vehicle expense model."""

    __tablename__ = "expenses"

    id = Column(String(36), primary_key=True, default=_new_id)
    date = Column(String(10), nullable=False, index=True)
    category = Column(String, nullable=False)
    amount = Column(Numeric(10, 2), nullable=False)
    description = Column(String, nullable=True)
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)

    __table_args__ = (CheckConstraint("amount >= 0", name="ck_expense_amount_non_negative"),)


def create_session_factory(database_url: str) -> sessionmaker[Session]:
    """Create a SQLAlchemy session factory."""
    engine = create_engine(database_url, echo=False)
    Base.metadata.create_all(engine)
    return sessionmaker(bind=engine)
