"""Database layer for ridetrack application."""

from ridetrack.database.base import Database
from ridetrack.database.factories import create_sqlite_database

__all__ = ["Database", "create_sqlite_database"]
