"""Date parsing utilities."""

import re
from datetime import date, datetime, timedelta
from typing import Optional

from dateutil import parser as date_parser
from dateutil.relativedelta import relativedelta

from ridetrack.domain.errors import MalformedDateError

RECORD_DATE_FORMAT = "%Y-%m-%d"
_RECORD_DATE_RE = re.compile(r"^[0-9]{4}-[0-9]{2}-[0-9]{2}$")


_WEEKDAYS = ("monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday")

# Spanish relative words
_SYNONYMS = {
    "hoy": "today",
    "ayer": "yesterday",
    "mañana": "tomorrow",
    "manana": "tomorrow",
}


def _relative_date(word: str, today: date) -> Optional[date]:
    """Resolve a relative date expression, or return None if it is not one."""
    word = _SYNONYMS.get(word, word)
    if word == "today":
        return today
    if word == "yesterday":
        return today - timedelta(days=1)
    if word == "tomorrow":
        return today + timedelta(days=1)

    prefix, _, period = word.partition(" ")
    if prefix == "this":
        if period == "week":
            return today - timedelta(days=today.weekday())
        if period == "month":
            return today.replace(day=1)
    elif prefix == "last":
        if period == "week":
            return today - timedelta(days=today.weekday() + 7)
        if period == "month":
            return (today - relativedelta(months=1)).replace(day=1)
        if period in _WEEKDAYS:
            days_ago = (today.weekday() - _WEEKDAYS.index(period)) % 7 or 7
            return today - timedelta(days=days_ago)
    return None


def parse_date(date_str: str, today: Optional[date] = None) -> date:
    """Parse a user-supplied date string into a date object.

    Accepts absolute dates ("2024-01-15", "January 15, 2024") and relative
    words: "today", "yesterday", "tomorrow" (or "hoy", "ayer", "mañana"),
    "this week", "this month", "last week", "last month", "last friday".

    Raises:
        ValueError: If the string cannot be parsed
    """
    date_str = date_str.strip().lower()
    today = today or date.today()

    relative = _relative_date(date_str, today)
    if relative is not None:
        return relative

    try:
        return date_parser.parse(date_str).date()
    except (ValueError, TypeError, OverflowError) as e:
        raise ValueError(f"Could not parse date '{date_str}': {e}")


def parse_record_date(value: object, record_id: Optional[str] = None) -> date:
    """Parse a stored record date, accepting only ``YYYY-MM-DD``.

    Args:
        value: Date string as held by a record
        record_id: Optional record ID, used in the error message

    Returns:
        Date object

    Raises:
        MalformedDateError: If the value is not a valid date in the fixed format
    """
    if not isinstance(value, str) or not _RECORD_DATE_RE.match(value):
        raise MalformedDateError(value, record_id)
    try:
        return datetime.strptime(value, RECORD_DATE_FORMAT).date()
    except ValueError:
        # e.g. 2024-02-30
        raise MalformedDateError(value, record_id) from None


def format_record_date(value: date) -> str:
    """Format a date the way records store it."""
    return value.strftime(RECORD_DATE_FORMAT)


def normalize_date_input(date_str: str) -> str:
    """Parse user input (absolute or relative) and return a record date string."""
    return format_record_date(parse_date(date_str))
