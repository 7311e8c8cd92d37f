"""Statistics domain service."""

from datetime import date
from typing import Optional

from ridetrack.database.base import Database
from ridetrack.domain.aggregator import aggregate
from ridetrack.domain.dashboard import dashboard_totals, filter_earnings, filter_expenses
from ridetrack.domain.entities import (
    DashboardTotals,
    Granularity,
    LabelLocale,
    RecordFilter,
    StatisticsReport,
    Table,
)
from ridetrack.domain.rollup import category_shares, driver_rollup, platform_rollup


class StatisticsService:
    """Service for building the dashboard and statistics views."""

    def __init__(self, db: Database):
        """Initialize statistics service.

        Args:
            db: Database instance
        """
        self.db = db

    def build_report(
        self,
        granularity: Granularity = Granularity.WEEK,
        week_starts_on_monday: bool = True,
        locale: LabelLocale = LabelLocale.ES,
        today: Optional[date] = None,
    ) -> StatisticsReport:
        """Build the statistics report over all records.

        Filters never apply here: the series and the rollups always cover the
        full record collections.
        """
        earnings = self.db.list_records(Table.EARNINGS)
        expenses = self.db.list_records(Table.EXPENSES)

        buckets = aggregate(
            earnings,
            expenses,
            granularity,
            week_starts_on_monday,
            today=today,
            locale=locale,
        )
        return StatisticsReport(
            granularity=granularity,
            buckets=tuple(buckets),
            platforms=tuple(platform_rollup(earnings)),
            categories=tuple(category_shares(expenses)),
            drivers=tuple(driver_rollup(earnings)),
        )

    def get_dashboard(self, record_filter: Optional[RecordFilter] = None) -> DashboardTotals:
        """Headline totals over the filtered records."""
        record_filter = record_filter or RecordFilter()
        earnings = filter_earnings(self.db.list_records(Table.EARNINGS), record_filter)
        expenses = filter_expenses(self.db.list_records(Table.EXPENSES), record_filter)
        return dashboard_totals(earnings, expenses)
