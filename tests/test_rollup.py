"""Tests for grouped rollups."""

from decimal import Decimal

from conftest import make_earning, make_expense
from ridetrack.domain.entities import ExpenseCategory, GroupSummary, Platform
from ridetrack.domain.rollup import (
    category_rollup,
    category_shares,
    driver_rollup,
    platform_rollup,
    rollup_by,
)


def test_rollup_by_platform_excludes_zero_totals():
    earnings = [
        make_earning("2024-01-01", 10, platform=Platform.UBER, record_id="1"),
        make_earning("2024-01-02", 20, platform=Platform.UBER, record_id="2"),
        make_earning("2024-01-03", 0, platform=Platform.CABIFY, record_id="3"),
    ]

    result = rollup_by(earnings, lambda e: e.platform)

    assert result == [
        GroupSummary(key=Platform.UBER, total=Decimal("30"), count=2, average=Decimal("15"))
    ]


def test_rollup_by_follows_key_enumeration_order():
    earnings = [
        make_earning("2024-01-01", 5, platform=Platform.DIDI, record_id="1"),
        make_earning("2024-01-02", 8, platform=Platform.UBER, record_id="2"),
    ]

    result = rollup_by(earnings, lambda e: e.platform, keys=list(Platform))

    assert [g.key for g in result] == [Platform.UBER, Platform.DIDI]


def test_rollup_by_without_keys_uses_first_appearance():
    earnings = [
        make_earning("2024-01-01", 5, driver="Ana", record_id="1"),
        make_earning("2024-01-02", 8, driver="Sandro", record_id="2"),
        make_earning("2024-01-03", 1, driver="Ana", record_id="3"),
    ]

    result = driver_rollup(earnings)

    assert [(g.key, g.total, g.count) for g in result] == [
        ("Ana", Decimal("6"), 2),
        ("Sandro", Decimal("8"), 1),
    ]
    assert result[0].average == Decimal("3")


def test_rollup_by_custom_total_function():
    earnings = [
        make_earning("2024-01-01", 5, record_id="1"),
        make_earning("2024-01-02", 8, record_id="2"),
    ]

    result = rollup_by(earnings, lambda e: e.platform, total_fn=lambda e: Decimal("1"))

    assert result[0].total == Decimal("2")
    assert result[0].count == 2


def test_rollup_by_empty_input():
    assert rollup_by([], lambda e: e.platform, keys=list(Platform)) == []


def test_platform_rollup_computes_average_per_trip():
    earnings = [
        make_earning("2024-01-01", 12, platform=Platform.CABIFY, record_id="1"),
        make_earning("2024-01-02", 18, platform=Platform.CABIFY, record_id="2"),
        make_earning("2024-01-03", 40, platform=Platform.DIDI, record_id="3"),
    ]

    result = platform_rollup(earnings)

    assert [g.key for g in result] == [Platform.CABIFY, Platform.DIDI]
    assert result[0].average == Decimal("15")
    assert result[1].count == 1


def test_category_rollup_orders_by_category_enum():
    expenses = [
        make_expense("2024-01-01", 30, category=ExpenseCategory.OTHER, record_id="1"),
        make_expense("2024-01-02", 60, category=ExpenseCategory.FUEL, record_id="2"),
    ]

    result = category_rollup(expenses)

    assert [g.key for g in result] == [ExpenseCategory.FUEL, ExpenseCategory.OTHER]


def test_category_shares_percentages():
    expenses = [
        make_expense("2024-01-01", 75, category=ExpenseCategory.FUEL, record_id="1"),
        make_expense("2024-01-02", 25, category=ExpenseCategory.CAR_WASH, record_id="2"),
    ]

    result = category_shares(expenses)

    assert [(s.category, s.percentage) for s in result] == [
        (ExpenseCategory.FUEL, Decimal("75")),
        (ExpenseCategory.CAR_WASH, Decimal("25")),
    ]


def test_category_shares_all_zero():
    expenses = [make_expense("2024-01-01", 0, record_id="1")]

    assert category_shares(expenses) == []
