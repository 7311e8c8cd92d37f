"""Amount parsing utilities."""

from decimal import Decimal, InvalidOperation
import re

from ridetrack.domain.errors import ValidationError, negative_amount, too_precise_amount


def parse_amount(amount_str: str) -> Decimal:
    """Parse an amount string into a Decimal.

    Handles various formats:
    - "123.45"
    - "$123.45"
    - "1,234.56"
    - "-12.00" (parsed; rejecting negatives is up to the caller)

    Args:
        amount_str: Amount string

    Returns:
        Decimal amount

    Raises:
        ValueError: If amount string cannot be parsed
    """
    if not amount_str or not amount_str.strip():
        raise ValueError("Empty amount string")

    amount_str = amount_str.strip()
    amount_str = re.sub(r"[$€£¥]", "", amount_str)
    amount_str = amount_str.replace(",", "").strip()

    try:
        amount = Decimal(amount_str)
    except InvalidOperation:
        raise ValueError(f"Could not parse amount '{amount_str}'")
    if not amount.is_finite():
        raise ValueError(f"Could not parse amount '{amount_str}'")
    return amount


CENT = Decimal("0.01")


def validate_amount(amount: Decimal) -> Decimal:
    """Check that an amount can be stored as-is: not negative, whole cents.

    Raises:
        ValidationError: If the amount is negative or has fractions of a cent
    """
    if amount < 0:
        raise ValidationError(negative_amount(amount))
    # 1.50 and 1.500 are fine, 0.004 would be rounded away by storage
    if amount != amount.quantize(CENT):
        raise ValidationError(too_precise_amount(amount))
    return amount
