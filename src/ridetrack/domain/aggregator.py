"""Period-bucketed statistics aggregator.

Turns the full earning and expense collections into a calendar-aligned series of
day, week or month buckets ready for charting. Everything here is a pure
function of its arguments; nothing is cached between calls.
"""

import logging
from collections import defaultdict
from datetime import date, timedelta
from decimal import Decimal
from typing import Optional, Sequence

from dateutil.relativedelta import relativedelta

from ridetrack.domain.entities import (
    BucketSummary,
    EarningRecord,
    ExpenseRecord,
    Granularity,
    LabelLocale,
)
from ridetrack.utils.date_parser import format_record_date, parse_record_date

logger = logging.getLogger(__name__)

MONTH_ABBREVIATIONS: dict[LabelLocale, tuple[str, ...]] = {
    LabelLocale.ES: (
        "ene", "feb", "mar", "abr", "may", "jun",
        "jul", "ago", "sep", "oct", "nov", "dic",
    ),
    LabelLocale.EN: (
        "Jan", "Feb", "Mar", "Apr", "May", "Jun",
        "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
    ),
}

ZERO = Decimal("0")


def start_of_week(day: date, week_starts_on_monday: bool = True) -> date:
    """Return the first day of the week containing ``day``."""
    if week_starts_on_monday:
        offset = day.weekday()
    else:
        # date.weekday(): Monday=0 .. Sunday=6
        offset = (day.weekday() + 1) % 7
    return day - timedelta(days=offset)


def end_of_week(day: date, week_starts_on_monday: bool = True) -> date:
    """Return the last day of the week containing ``day``."""
    return start_of_week(day, week_starts_on_monday) + timedelta(days=6)


def start_of_month(day: date) -> date:
    return day.replace(day=1)


def end_of_month(day: date) -> date:
    return start_of_month(day) + relativedelta(months=1) - timedelta(days=1)


def period_bounds(
    day: date, granularity: Granularity, week_starts_on_monday: bool = True
) -> tuple[date, date]:
    """Return the inclusive ``(start, end)`` of the bucket containing ``day``."""
    if granularity == Granularity.WEEK:
        return (
            start_of_week(day, week_starts_on_monday),
            end_of_week(day, week_starts_on_monday),
        )
    if granularity == Granularity.MONTH:
        return start_of_month(day), end_of_month(day)
    return day, day


def iter_periods(
    earliest: date,
    latest: date,
    granularity: Granularity,
    week_starts_on_monday: bool = True,
) -> list[tuple[date, date]]:
    """List every bucket between two dates, aligned to bucket boundaries.

    Args:
        earliest: First date that must be covered
        latest: Last date that must be covered
        granularity: Bucketing unit
        week_starts_on_monday: Week alignment for WEEK buckets

    Returns:
        Chronological list of inclusive ``(period_start, period_end)`` pairs
    """
    periods: list[tuple[date, date]] = []
    current, _ = period_bounds(earliest, granularity, week_starts_on_monday)
    while current <= latest:
        start, end = period_bounds(current, granularity, week_starts_on_monday)
        periods.append((start, end))
        current = end + timedelta(days=1)
    return periods


def format_period_label(
    period_start: date,
    granularity: Granularity,
    locale: LabelLocale = LabelLocale.ES,
) -> str:
    """Build the chart label for a bucket.

    Day buckets read ``dd/mm``, week buckets ``S<ISO week>`` and month buckets
    use the locale's three-letter month abbreviation. Labels carry no year.
    """
    if granularity == Granularity.WEEK:
        # The ISO week is the one of the Monday inside the bucket; for
        # Sunday-start weeks that is the day after period_start.
        monday = period_start + timedelta(days=(7 - period_start.weekday()) % 7)
        return f"S{monday.isocalendar()[1]}"
    if granularity == Granularity.MONTH:
        return MONTH_ABBREVIATIONS[locale][period_start.month - 1]
    return period_start.strftime("%d/%m")


def _bucket_key(
    record_date: str,
    parsed: date,
    granularity: Granularity,
    week_starts_on_monday: bool,
) -> str | date:
    if granularity == Granularity.DAY:
        return record_date
    return period_bounds(parsed, granularity, week_starts_on_monday)[0]


def aggregate(
    earnings: Sequence[EarningRecord],
    expenses: Sequence[ExpenseRecord],
    granularity: Granularity,
    week_starts_on_monday: bool = True,
    *,
    today: Optional[date] = None,
    locale: LabelLocale = LabelLocale.ES,
) -> list[BucketSummary]:
    """Aggregate earnings and expenses into a chronological bucket series.

    The series runs from the earliest record date to the later of the latest
    record date and today. Day series keep every bucket, including empty ones;
    week and month series drop buckets without data.

    Args:
        earnings: Earning records in any order
        expenses: Expense records in any order
        granularity: Bucketing unit
        week_starts_on_monday: If False, weeks run Sunday to Saturday
        today: Reference date for the end of the series (defaults to today)
        locale: Language for month labels

    Returns:
        List of bucket summaries in chronological order

    Raises:
        MalformedDateError: If any record date is not ``YYYY-MM-DD``
    """
    if not earnings and not expenses:
        return []

    if today is None:
        today = date.today()

    earning_dates = [parse_record_date(e.date, e.id) for e in earnings]
    expense_dates = [parse_record_date(e.date, e.id) for e in expenses]
    all_dates = earning_dates + expense_dates
    earliest = min(all_dates)
    latest = max(max(all_dates), today)

    # Day buckets match on the raw date string; coarser buckets on the parsed
    # date falling inside [period_start, period_end].
    earnings_by_bucket: dict[str | date, list[EarningRecord]] = defaultdict(list)
    for record, parsed in zip(earnings, earning_dates):
        key = _bucket_key(record.date, parsed, granularity, week_starts_on_monday)
        earnings_by_bucket[key].append(record)

    expenses_by_bucket: dict[str | date, list[ExpenseRecord]] = defaultdict(list)
    for record, parsed in zip(expenses, expense_dates):
        key = _bucket_key(record.date, parsed, granularity, week_starts_on_monday)
        expenses_by_bucket[key].append(record)

    buckets: list[BucketSummary] = []
    for period_start, period_end in iter_periods(
        earliest, latest, granularity, week_starts_on_monday
    ):
        if granularity == Granularity.DAY:
            key: str | date = format_record_date(period_start)
        else:
            key = period_start

        period_earnings = earnings_by_bucket.get(key, [])
        period_expenses = expenses_by_bucket.get(key, [])

        total_earnings = sum((e.amount for e in period_earnings), ZERO)
        total_expenses = sum((e.amount for e in period_expenses), ZERO)
        trip_count = len(period_earnings)
        has_data = total_earnings > 0 or total_expenses > 0

        if not has_data and granularity != Granularity.DAY:
            continue

        buckets.append(
            BucketSummary(
                period_label=format_period_label(period_start, granularity, locale),
                period_start=period_start,
                period_end=period_end,
                total_earnings=total_earnings,
                total_expenses=total_expenses,
                net=total_earnings - total_expenses,
                has_data=has_data,
                trip_count=trip_count,
                average_per_trip=total_earnings / trip_count if trip_count else ZERO,
            )
        )

    logger.debug(
        "Aggregated %d earnings and %d expenses into %d %s buckets (%s to %s)",
        len(earnings),
        len(expenses),
        len(buckets),
        granularity.value,
        earliest,
        latest,
    )
    return buckets
