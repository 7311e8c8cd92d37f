"""Shared pytest fixtures for ridetrack tests."""

import os
import tempfile
from datetime import datetime, UTC
from decimal import Decimal

import pytest

from ridetrack.database.factories import create_sqlite_database
from ridetrack.domain.earning import EarningService
from ridetrack.domain.entities import (
    EarningRecord,
    ExpenseCategory,
    ExpenseRecord,
    Platform,
)
from ridetrack.domain.expense import ExpenseService
from ridetrack.domain.statistics import StatisticsService


@pytest.fixture
def temp_db():
    """Create a temporary database for testing."""
    tmp_dir = tempfile.mkdtemp()
    db_path = os.path.join(tmp_dir, "ridetrack.db")

    db = create_sqlite_database(database_path=db_path)
    db.connect()
    db.initialize_schema()

    yield db

    db.disconnect()
    for name in os.listdir(tmp_dir):
        os.unlink(os.path.join(tmp_dir, name))
    os.rmdir(tmp_dir)


@pytest.fixture
def earning_service(temp_db):
    """Create an EarningService with a temporary database."""
    return EarningService(temp_db)


@pytest.fixture
def expense_service(temp_db):
    """Create an ExpenseService with a temporary database."""
    return ExpenseService(temp_db)


@pytest.fixture
def statistics_service(temp_db):
    """Create a StatisticsService with a temporary database."""
    return StatisticsService(temp_db)


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()


def make_earning(
    date: str,
    amount,
    platform: Platform = Platform.UBER,
    driver: str = "Sandro",
    record_id: str | None = None,
) -> EarningRecord:
    """Build an in-memory earning record."""
    return EarningRecord(
        id=record_id or f"e-{date}-{amount}",
        date=date,
        platform=platform,
        driver=driver,
        amount=Decimal(str(amount)),
        description=None,
        created_at=datetime.now(UTC),
    )


def make_expense(
    date: str,
    amount,
    category: ExpenseCategory = ExpenseCategory.FUEL,
    record_id: str | None = None,
) -> ExpenseRecord:
    """Build an in-memory expense record."""
    return ExpenseRecord(
        id=record_id or f"x-{date}-{amount}",
        date=date,
        category=category,
        amount=Decimal(str(amount)),
        description=None,
        created_at=datetime.now(UTC),
    )
