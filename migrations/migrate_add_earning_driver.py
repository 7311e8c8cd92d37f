#!/usr/bin/env python3
"""Migration script to add the driver column to the earnings table.

Earlier databases recorded earnings without a driver. This migration adds:
- driver (VARCHAR, NOT NULL), filled with --default-driver for existing rows

Usage:
    python migrations/migrate_add_earning_driver.py [--db-path PATH] [--default-driver NAME]
"""

import os
import sys
from pathlib import Path

# Add src to path so we can import ridetrack modules
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from sqlalchemy import create_engine, inspect, text
from ridetrack.database.factories import default_database_path


def column_exists(engine, table_name: str, column_name: str) -> bool:
    """Check if a column exists in a table."""
    inspector = inspect(engine)
    columns = [col["name"] for col in inspector.get_columns(table_name)]
    return column_name in columns


def migrate_database(database_path: str | None = None, default_driver: str = "Driver") -> bool:
    """Add the driver column to earnings.

    Args:
        database_path: Path to database file. If None, checks RIDETRACK_DB_PATH,
            then uses the default location.
        default_driver: Driver name given to existing earnings

    Returns:
        True if the column was added, False if it already existed

    Raises:
        RuntimeError: If the database has no earnings table
    """
    if not default_driver.strip():
        raise ValueError("Default driver name must not be empty")

    if database_path is None:
        database_path = os.environ.get("RIDETRACK_DB_PATH") or str(default_database_path())

    # Plain engine: the application factory would create missing tables
    engine = create_engine(f"sqlite:///{database_path}")
    try:
        if "earnings" not in inspect(engine).get_table_names():
            raise RuntimeError(
                "Table 'earnings' does not exist. Please initialize the database schema first."
            )

        if column_exists(engine, "earnings", "driver"):
            print("Migration already applied: driver column exists in earnings table")
            return False

        print("Starting migration: adding driver column...")
        with engine.begin() as conn:
            # SQLite rejects bound parameters in DDL, so fill the column afterwards
            conn.execute(text("ALTER TABLE earnings ADD COLUMN driver VARCHAR NOT NULL DEFAULT ''"))
            conn.execute(text("UPDATE earnings SET driver = :driver"), {"driver": default_driver})
        print("Migration completed successfully!")
        return True
    finally:
        engine.dispose()


def main():
    """Main entry point for migration script."""
    import argparse

    parser = argparse.ArgumentParser(description="Migrate database to add earning drivers")
    parser.add_argument(
        "--db-path",
        type=str,
        help="Path to database file (overrides RIDETRACK_DB_PATH environment variable)",
    )
    parser.add_argument(
        "--default-driver",
        type=str,
        default="Driver",
        help="Driver name assigned to existing earnings",
    )
    args = parser.parse_args()

    try:
        migrate_database(database_path=args.db_path, default_driver=args.default_driver)
        return 0
    except Exception as e:
        print(f"\nMigration failed: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
