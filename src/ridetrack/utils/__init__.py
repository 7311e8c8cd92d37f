"""Utility functions for ridetrack."""

from ridetrack.utils.date_parser import parse_date, parse_record_date
from ridetrack.utils.amount_parser import parse_amount

__all__ = ["parse_date", "parse_record_date", "parse_amount"]
