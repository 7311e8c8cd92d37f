"""Abstract record store interface."""

from abc import ABC, abstractmethod
from typing import Any, Optional, Union

# Import entities directly to avoid circular import through domain/__init__.py
from ridetrack.domain.entities import EarningRecord, ExpenseRecord, Table

Record = Union[EarningRecord, ExpenseRecord]


class Database(ABC):
    """Abstract record store for ridetrack.

    Exposes the two tables, ``earnings`` and ``expenses``, through list, insert
    and delete. Records are never updated in place.
    """

    @abstractmethod
    def connect(self) -> None:
        """Connect to the database."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the database."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Initialize database schema (create tables)."""
        pass

    @abstractmethod
    def list_records(self, table: Table) -> list[Record]:
        """List all records of a table, newest first by creation time."""
        pass

    @abstractmethod
    def get_record(self, table: Table, record_id: str) -> Optional[Record]:
        """Get a record by ID."""
        pass

    @abstractmethod
    def insert_record(self, table: Table, fields: dict[str, Any]) -> Record:
        """Insert a record.

        The store assigns ``id`` and ``created_at``; ``fields`` carries the rest
        of the record's columns. Returns the stored record.
        """
        pass

    @abstractmethod
    def delete_record(self, table: Table, record_id: str) -> None:
        """Delete a record by ID.

        Raises:
            NotFoundError: If no record has this ID
        """
        pass
