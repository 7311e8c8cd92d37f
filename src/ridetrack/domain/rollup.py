"""Grouped rollups by platform, expense category and driver."""

from decimal import Decimal
from typing import Callable, Hashable, Iterable, Optional, Sequence, TypeVar

from ridetrack.domain.entities import (
    CategoryShare,
    EarningRecord,
    ExpenseCategory,
    ExpenseRecord,
    GroupSummary,
    Platform,
)

R = TypeVar("R")
K = TypeVar("K", bound=Hashable)

ZERO = Decimal("0")


def _amount(record) -> Decimal:
    return record.amount


def rollup_by(
    records: Iterable[R],
    key_fn: Callable[[R], K],
    total_fn: Callable[[R], Decimal] = _amount,
    keys: Optional[Sequence[K]] = None,
) -> list[GroupSummary[K]]:
    """Group records by key and compute total, count and average per group.

    Groups whose total is zero are left out.

    Args:
        records: Records to group
        key_fn: Returns the grouping key of a record
        total_fn: Returns the value summed for a record (defaults to its amount)
        keys: Optional key enumeration fixing the output order; records whose key
            is not listed are ignored. Without it, keys appear in order of first
            occurrence.

    Returns:
        List of group summaries
    """
    totals: dict[K, Decimal] = {}
    counts: dict[K, int] = {}
    if keys is not None:
        for key in keys:
            totals[key] = ZERO
            counts[key] = 0

    for record in records:
        key = key_fn(record)
        if keys is not None and key not in totals:
            continue
        totals[key] = totals.get(key, ZERO) + total_fn(record)
        counts[key] = counts.get(key, 0) + 1

    results: list[GroupSummary[K]] = []
    for key, total in totals.items():
        if total == 0:
            continue
        count = counts[key]
        results.append(
            GroupSummary(
                key=key,
                total=total,
                count=count,
                average=total / count if count else ZERO,
            )
        )
    return results


def platform_rollup(earnings: Iterable[EarningRecord]) -> list[GroupSummary[Platform]]:
    """Earnings per platform, with trip count and average per trip."""
    return rollup_by(earnings, lambda e: e.platform, keys=list(Platform))


def category_rollup(
    expenses: Iterable[ExpenseRecord],
) -> list[GroupSummary[ExpenseCategory]]:
    """Expenses per category."""
    return rollup_by(expenses, lambda e: e.category, keys=list(ExpenseCategory))


def driver_rollup(earnings: Iterable[EarningRecord]) -> list[GroupSummary[str]]:
    """Earnings per driver, in order of first appearance."""
    return rollup_by(earnings, lambda e: e.driver)


def category_shares(expenses: Sequence[ExpenseRecord]) -> list[CategoryShare]:
    """Expense categories with their percentage of total expenses."""
    grand_total = sum((e.amount for e in expenses), ZERO)
    return [
        CategoryShare(
            category=group.key,
            total=group.total,
            count=group.count,
            percentage=group.total / grand_total * 100 if grand_total > 0 else ZERO,
        )
        for group in category_rollup(expenses)
    ]
