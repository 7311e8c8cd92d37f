"""Tests for expense service."""

import pytest
from decimal import Decimal

from ridetrack.domain.entities import ExpenseCategory, RecordFilter
from ridetrack.domain.errors import MalformedDateError, NotFoundError, ValidationError


def test_create_and_list_expenses(expense_service):
    fuel = expense_service.create_expense(
        date="2024-01-15", category=ExpenseCategory.FUEL, amount=Decimal("60")
    )
    parts = expense_service.create_expense(
        date="2024-01-16",
        category=ExpenseCategory.PARTS,
        amount=Decimal("120"),
        description="Brake pads",
    )

    assert expense_service.list_expenses() == [parts, fuel]
    assert expense_service.list_expenses(RecordFilter(category=ExpenseCategory.FUEL)) == [fuel]


def test_create_expense_accepts_category_value(expense_service):
    expense = expense_service.create_expense(date="2024-01-15", category="CarWash", amount=Decimal("8"))

    assert expense.category is ExpenseCategory.CAR_WASH


def test_create_expense_rejects_negative_amount(expense_service):
    with pytest.raises(ValidationError):
        expense_service.create_expense(
            date="2024-01-15", category=ExpenseCategory.FUEL, amount=Decimal("-0.01")
        )


def test_create_expense_rejects_malformed_date(expense_service):
    with pytest.raises(MalformedDateError):
        expense_service.create_expense(
            date="2024-13-01", category=ExpenseCategory.FUEL, amount=Decimal("1")
        )


def test_delete_expense(expense_service):
    expense = expense_service.create_expense(
        date="2024-01-15", category=ExpenseCategory.OTHER, amount=Decimal("3")
    )

    expense_service.delete_expense(expense.id)

    assert expense_service.list_expenses() == []


def test_delete_missing_expense(expense_service):
    with pytest.raises(NotFoundError, match="Expense missing not found"):
        expense_service.delete_expense("missing")


def test_create_expense_rejects_fractions_of_a_cent(expense_service):
    with pytest.raises(ValidationError, match="two decimal places"):
        expense_service.create_expense(
            date="2024-01-15", category=ExpenseCategory.FUEL, amount=Decimal("10.125")
        )
    assert expense_service.list_expenses() == []


def test_require_expense(expense_service):
    expense = expense_service.create_expense(
        date="2024-01-15", category=ExpenseCategory.PARTS, amount=Decimal("80")
    )

    assert expense_service.require_expense(expense.id).id == expense.id
    with pytest.raises(NotFoundError, match="Expense missing not found"):
        expense_service.require_expense("missing")
