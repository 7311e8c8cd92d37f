"""Dashboard filters and headline totals."""

from decimal import Decimal
from typing import Sequence

from ridetrack.domain.entities import (
    DashboardTotals,
    EarningRecord,
    ExpenseRecord,
    RecordFilter,
)
from ridetrack.utils.date_parser import parse_record_date


def filter_earnings(
    earnings: Sequence[EarningRecord], record_filter: RecordFilter
) -> list[EarningRecord]:
    """Apply date, platform and driver filters to earnings."""
    return [
        e
        for e in earnings
        if (record_filter.date is None or e.date == record_filter.date)
        and (record_filter.platform is None or e.platform == record_filter.platform)
        and (record_filter.driver is None or e.driver == record_filter.driver)
    ]


def filter_expenses(
    expenses: Sequence[ExpenseRecord], record_filter: RecordFilter
) -> list[ExpenseRecord]:
    """Apply date and category filters to expenses."""
    return [
        e
        for e in expenses
        if (record_filter.date is None or e.date == record_filter.date)
        and (record_filter.category is None or e.category == record_filter.category)
    ]


def dashboard_totals(
    earnings: Sequence[EarningRecord], expenses: Sequence[ExpenseRecord]
) -> DashboardTotals:
    """Compute earned, spent and net over already-filtered records."""
    total_earned = sum((e.amount for e in earnings), Decimal("0"))
    total_spent = sum((e.amount for e in expenses), Decimal("0"))
    return DashboardTotals(
        total_earned=total_earned,
        total_spent=total_spent,
        net_income=total_earned - total_spent,
        trip_count=len(earnings),
        expense_count=len(expenses),
    )


def available_dates(
    earnings: Sequence[EarningRecord], expenses: Sequence[ExpenseRecord]
) -> list[str]:
    """Distinct record dates, newest first.

    Raises:
        MalformedDateError: If any record date is not ``YYYY-MM-DD``
    """
    unique = {e.date: e.id for e in earnings}
    unique.update({e.date: e.id for e in expenses})
    return sorted(
        unique, key=lambda d: parse_record_date(d, unique[d]), reverse=True
    )
