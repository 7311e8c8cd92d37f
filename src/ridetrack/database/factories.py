"""Database factory functions for creating database instances."""

import os
from pathlib import Path
from typing import Optional

from ridetrack.database.sqlalchemy_db import SQLAlchemyDatabase


def default_database_path() -> Path:
    """Return ~/.ridetrack/ridetrack.db, creating the directory if needed."""
    db_dir = Path.home() / ".ridetrack"
    db_dir.mkdir(exist_ok=True)
    return db_dir / "ridetrack.db"


def create_sqlite_database(database_path: Optional[str] = None) -> SQLAlchemyDatabase:
    """Create a SQLite database instance.

    Args:
        database_path: Path to SQLite database file. If None, checks RIDETRACK_DB_PATH
            environment variable, then defaults to ~/.ridetrack/ridetrack.db

    Returns:
        SQLAlchemyDatabase instance configured for SQLite
    """
    if database_path is None:
        database_path = os.environ.get("RIDETRACK_DB_PATH")

    if database_path is None:
        database_path = str(default_database_path())

    db = SQLAlchemyDatabase(f"sqlite:///{database_path}")
    db.database_path = database_path
    return db
