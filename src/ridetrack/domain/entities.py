"""Domain model entities for ridetrack.

These are pure data classes representing business concepts, independent of
database schema. Record dates are kept as ``YYYY-MM-DD`` strings, exactly as
the record store hands them over; parsing happens where a calendar date is
needed.
"""

from dataclasses import dataclass
from datetime import datetime, date
from decimal import Decimal
from enum import Enum
from typing import Generic, Optional, TypeVar


class Platform(str, Enum):
    """Ride-share platform an earning came from."""

    UBER = "Uber"
    CABIFY = "Cabify"
    DIDI = "Didi"


class ExpenseCategory(str, Enum):
    """Kind of vehicle expense."""

    FUEL = "Fuel"
    CAR_WASH = "CarWash"
    PARTS = "Parts"
    OTHER = "Other"


class Granularity(str, Enum):
    """Bucketing unit for the statistics series."""

    DAY = "day"
    WEEK = "week"
    MONTH = "month"


class LabelLocale(str, Enum):
    """Language used for month labels."""

    ES = "es"
    EN = "en"


class Table(str, Enum):
    """Tables exposed by the record store."""

    EARNINGS = "earnings"
    EXPENSES = "expenses"


@dataclass(frozen=True)
class EarningRecord:
    """Earning from a single trip."""

    id: str
    date: str
    platform: Platform
    driver: str
    amount: Decimal
    description: Optional[str]
    created_at: datetime


@dataclass(frozen=True)
class ExpenseRecord:
    """Vehicle expense."""

    id: str
    date: str
    category: ExpenseCategory
    amount: Decimal
    description: Optional[str]
    created_at: datetime


@dataclass(frozen=True)
class BucketSummary:
    """Totals for one day, week or month of the statistics series."""

    period_label: str
    period_start: date
    period_end: date
    total_earnings: Decimal
    total_expenses: Decimal
    net: Decimal
    has_data: bool
    trip_count: int = 0
    average_per_trip: Decimal = Decimal("0")


K = TypeVar("K")


@dataclass(frozen=True)
class GroupSummary(Generic[K]):
    """Total, count and average for one key of a rollup."""

    key: K
    total: Decimal
    count: int
    average: Decimal


@dataclass(frozen=True)
class CategoryShare:
    """Expense category total with its share of all expenses."""

    category: ExpenseCategory
    total: Decimal
    count: int
    percentage: Decimal


@dataclass(frozen=True)
class RecordFilter:
    """Filters applied to list and dashboard views.

    ``None`` on any field means no filtering on that field.
    """

    date: Optional[str] = None
    platform: Optional[Platform] = None
    category: Optional[ExpenseCategory] = None
    driver: Optional[str] = None


@dataclass(frozen=True)
class DashboardTotals:
    """Headline figures for the dashboard."""

    total_earned: Decimal
    total_spent: Decimal
    net_income: Decimal
    trip_count: int
    expense_count: int


@dataclass(frozen=True)
class StatisticsReport:
    """Everything the statistics view renders."""

    granularity: Granularity
    buckets: tuple[BucketSummary, ...]
    platforms: tuple[GroupSummary[Platform], ...]
    categories: tuple[CategoryShare, ...]
    drivers: tuple[GroupSummary[str], ...]
