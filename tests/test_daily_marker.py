"""Tests for the last-seen-day marker."""

from datetime import date

from ridetrack.utils.daily_marker import MARKER_FILENAME, check_new_day, marker_path_for


def test_first_check_is_new_day(tmp_path):
    marker = tmp_path / "state" / MARKER_FILENAME

    assert check_new_day(marker, today=date(2024, 1, 1)) is True
    assert marker.read_text(encoding="utf-8").strip() == "2024-01-01"


def test_same_day_is_not_new(tmp_path):
    marker = tmp_path / MARKER_FILENAME
    check_new_day(marker, today=date(2024, 1, 1))

    assert check_new_day(marker, today=date(2024, 1, 1)) is False


def test_next_day_is_new(tmp_path):
    marker = tmp_path / MARKER_FILENAME
    check_new_day(marker, today=date(2024, 1, 1))

    assert check_new_day(marker, today=date(2024, 1, 2)) is True
    assert check_new_day(marker, today=date(2024, 1, 2)) is False


def test_marker_lives_next_to_database(tmp_path):
    db_path = tmp_path / "ridetrack.db"

    assert marker_path_for(db_path) == tmp_path.resolve() / MARKER_FILENAME
