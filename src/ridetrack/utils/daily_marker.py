"""Last-seen-day marker used for the once-a-day greeting."""

import logging
from datetime import date
from pathlib import Path
from typing import Optional

from ridetrack.utils.date_parser import format_record_date

logger = logging.getLogger(__name__)

MARKER_FILENAME = "last_seen_day"


def marker_path_for(database_path: str | Path) -> Path:
    """Place the marker file next to the database file."""
    return Path(database_path).expanduser().resolve().parent / MARKER_FILENAME


def check_new_day(marker_path: Path, today: Optional[date] = None) -> bool:
    """Record today in the marker file and report whether it changed.

    Args:
        marker_path: Marker file location
        today: Reference date (defaults to today)

    Returns:
        True the first time this is called on a given day, False afterwards
    """
    today_str = format_record_date(today or date.today())
    last_seen = None
    if marker_path.exists():
        last_seen = marker_path.read_text(encoding="utf-8").strip()

    if last_seen == today_str:
        return False

    marker_path.parent.mkdir(parents=True, exist_ok=True)
    marker_path.write_text(today_str + "\n", encoding="utf-8")
    logger.debug("Day marker moved from %s to %s", last_seen, today_str)
    return True
