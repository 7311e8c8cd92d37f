"""Expense domain service."""

from decimal import Decimal
from typing import Optional

from ridetrack.database.base import Database
from ridetrack.domain.dashboard import filter_expenses
from ridetrack.domain.entities import ExpenseCategory, ExpenseRecord, RecordFilter, Table
from ridetrack.domain.errors import NotFoundError, expense_not_found
from ridetrack.utils.amount_parser import validate_amount
from ridetrack.utils.date_parser import parse_record_date


class ExpenseService:
    """Service for recording and browsing vehicle expenses."""

    def __init__(self, db: Database):
        """Initialize expense service.

        Args:
            db: Database instance
        """
        self.db = db

    def create_expense(
        self,
        date: str,
        category: ExpenseCategory,
        amount: Decimal,
        description: Optional[str] = None,
    ) -> ExpenseRecord:
        """Record an expense.

        Args:
            date: Expense date as YYYY-MM-DD
            category: Expense category
            amount: Amount spent
            description: Optional description

        Returns:
            The stored expense, with its assigned ID

        Raises:
            MalformedDateError: If date is not YYYY-MM-DD
            ValidationError: If amount is negative or not in whole cents
        """
        parse_record_date(date)
        validate_amount(amount)

        return self.db.insert_record(
            Table.EXPENSES,
            {
                "date": date,
                "category": ExpenseCategory(category),
                "amount": amount,
                "description": description or None,
            },
        )

    def get_expense(self, expense_id: str) -> Optional[ExpenseRecord]:
        """Get expense by ID."""
        return self.db.get_record(Table.EXPENSES, expense_id)

    def require_expense(self, expense_id: str) -> ExpenseRecord:
        """Get expense by ID or raise NotFoundError."""
        expense = self.get_expense(expense_id)
        if expense is None:
            raise NotFoundError(expense_not_found(expense_id))
        return expense

    def list_expenses(
        self, record_filter: Optional[RecordFilter] = None
    ) -> list[ExpenseRecord]:
        """List expenses, newest first, optionally filtered by date and category."""
        expenses = self.db.list_records(Table.EXPENSES)
        if record_filter is None:
            return expenses
        return filter_expenses(expenses, record_filter)

    def delete_expense(self, expense_id: str) -> None:
        """Delete an expense.

        Raises:
            NotFoundError: If the expense doesn't exist
        """
        self.require_expense(expense_id)
        self.db.delete_record(Table.EXPENSES, expense_id)
