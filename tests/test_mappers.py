"""Tests for database mappers."""

import pytest
from datetime import datetime, UTC
from decimal import Decimal

from ridetrack.database.models import Earning as ORMEarning, Expense as ORMExpense
from ridetrack.database.mappers import earning_to_domain, expense_to_domain
from ridetrack.domain.entities import (
    EarningRecord,
    ExpenseCategory,
    ExpenseRecord,
    Platform,
)


class TestEarningMapper:
    """Tests for Earning mapper."""

    def test_earning_to_domain(self):
        """Test converting ORM Earning to domain EarningRecord."""
        orm_earning = ORMEarning(
            id="abc",
            date="2024-01-15",
            platform="Cabify",
            driver="Sandro",
            amount=Decimal("12.30"),
            description=None,
            created_at=datetime.now(UTC),
        )
        earning = earning_to_domain(orm_earning)

        assert isinstance(earning, EarningRecord)
        assert earning.id == "abc"
        assert earning.platform is Platform.CABIFY
        assert earning.amount == Decimal("12.30")
        assert earning.created_at == orm_earning.created_at

    def test_unknown_platform_raises(self):
        orm_earning = ORMEarning(
            id="abc",
            date="2024-01-15",
            platform="Lyft",
            driver="Sandro",
            amount=Decimal("1"),
            created_at=datetime.now(UTC),
        )
        with pytest.raises(ValueError):
            earning_to_domain(orm_earning)


class TestExpenseMapper:
    """Tests for Expense mapper."""

    def test_expense_to_domain(self):
        """Test converting ORM Expense to domain ExpenseRecord."""
        orm_expense = ORMExpense(
            id="def",
            date="2024-01-16",
            category="CarWash",
            amount=Decimal("8.00"),
            description="Full wash",
            created_at=datetime.now(UTC),
        )
        expense = expense_to_domain(orm_expense)

        assert isinstance(expense, ExpenseRecord)
        assert expense.category is ExpenseCategory.CAR_WASH
        assert expense.description == "Full wash"
