"""Mapper functions to convert between domain models and SQLAlchemy models.

This layer isolates the conversion logic, so enum parsing and the decimal
amount type stay out of both the ORM models and the domain services.
"""

from ridetrack.domain import entities as domain
from ridetrack.database.models import (
    Earning as ORMEarning,
    Expense as ORMExpense,
)


def earning_to_domain(orm_earning: ORMEarning) -> domain.EarningRecord:
    """Convert SQLAlchemy Earning model to domain EarningRecord entity."""
    return domain.EarningRecord(
        id=orm_earning.id,
        date=orm_earning.date,
        platform=domain.Platform(orm_earning.platform),
        driver=orm_earning.driver,
        amount=orm_earning.amount,
        description=orm_earning.description,
        created_at=orm_earning.created_at,
    )


def expense_to_domain(orm_expense: ORMExpense) -> domain.ExpenseRecord:
    """Convert SQLAlchemy Expense model to domain ExpenseRecord entity."""
    return domain.ExpenseRecord(
        id=orm_expense.id,
        date=orm_expense.date,
        category=domain.ExpenseCategory(orm_expense.category),
        amount=orm_expense.amount,
        description=orm_expense.description,
        created_at=orm_expense.created_at,
    )
