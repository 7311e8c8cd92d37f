"""Earning domain service."""

from decimal import Decimal
from typing import Optional

from ridetrack.database.base import Database
from ridetrack.domain.dashboard import filter_earnings
from ridetrack.domain.entities import EarningRecord, Platform, RecordFilter, Table
from ridetrack.domain.errors import (
    NotFoundError,
    ValidationError,
    earning_not_found,
)
from ridetrack.utils.amount_parser import validate_amount
from ridetrack.utils.date_parser import parse_record_date


class EarningService:
    """Service for recording and browsing trip earnings."""

    def __init__(self, db: Database):
        """Initialize earning service.

        Args:
            db: Database instance
        """
        self.db = db

    def create_earning(
        self,
        date: str,
        platform: Platform,
        driver: str,
        amount: Decimal,
        description: Optional[str] = None,
    ) -> EarningRecord:
        """Record an earning.

        Args:
            date: Trip date as YYYY-MM-DD
            platform: Platform the trip was made on
            driver: Driver name
            amount: Amount earned
            description: Optional description

        Returns:
            The stored earning, with its assigned ID

        Raises:
            MalformedDateError: If date is not YYYY-MM-DD
            ValidationError: If amount is negative, not in whole cents, or driver is empty
        """
        parse_record_date(date)
        validate_amount(amount)
        driver = driver.strip()
        if not driver:
            raise ValidationError("Driver name is required")

        return self.db.insert_record(
            Table.EARNINGS,
            {
                "date": date,
                "platform": Platform(platform),
                "driver": driver,
                "amount": amount,
                "description": description or None,
            },
        )

    def get_earning(self, earning_id: str) -> Optional[EarningRecord]:
        """Get earning by ID."""
        return self.db.get_record(Table.EARNINGS, earning_id)

    def require_earning(self, earning_id: str) -> EarningRecord:
        """Get earning by ID or raise NotFoundError."""
        earning = self.get_earning(earning_id)
        if earning is None:
            raise NotFoundError(earning_not_found(earning_id))
        return earning

    def list_earnings(
        self, record_filter: Optional[RecordFilter] = None
    ) -> list[EarningRecord]:
        """List earnings, newest first, optionally filtered.

        Args:
            record_filter: Optional date, platform and driver filter

        Returns:
            List of earning entities
        """
        earnings = self.db.list_records(Table.EARNINGS)
        if record_filter is None:
            return earnings
        return filter_earnings(earnings, record_filter)

    def delete_earning(self, earning_id: str) -> None:
        """Delete an earning.

        Raises:
            NotFoundError: If the earning doesn't exist
        """
        self.require_earning(earning_id)
        self.db.delete_record(Table.EARNINGS, earning_id)
