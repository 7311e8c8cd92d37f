"""Tests for amount parsing."""

from decimal import Decimal

import pytest

from ridetrack.domain.errors import ValidationError
from ridetrack.utils.amount_parser import parse_amount, validate_amount


@pytest.mark.parametrize(
    "text, expected",
    [
        ("123.45", Decimal("123.45")),
        ("$123.45", Decimal("123.45")),
        ("1,234.56", Decimal("1234.56")),
        (" 50 ", Decimal("50")),
        ("-12.00", Decimal("-12.00")),
    ],
)
def test_parse_amount(text, expected):
    assert parse_amount(text) == expected


@pytest.mark.parametrize("text", ["", "   ", "abc", "12.3.4", "NaN", "Infinity"])
def test_parse_amount_invalid(text):
    with pytest.raises(ValueError):
        parse_amount(text)


@pytest.mark.parametrize("amount", [Decimal("0"), Decimal("12.5"), Decimal("12.50"), Decimal("12.500")])
def test_validate_amount_accepts_whole_cents(amount):
    assert validate_amount(amount) == amount


def test_validate_amount_rejects_negative():
    with pytest.raises(ValidationError, match="negative"):
        validate_amount(Decimal("-0.01"))


@pytest.mark.parametrize("amount", [Decimal("0.004"), Decimal("1.005")])
def test_validate_amount_rejects_fractions_of_a_cent(amount):
    with pytest.raises(ValidationError, match="two decimal places"):
        validate_amount(amount)
