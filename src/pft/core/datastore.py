#!/usr/bin/env python3
"""
DataStore Protocol - Standard interface for record persistence.

Separates how a collection is stored (one JSON record per collection) from the
stores that own the in-memory state and enforce the domain rules.
"""

from datetime import datetime
from typing import Protocol, TypeVar

T = TypeVar("T")


class DataStore(Protocol[T]):
    """
    Protocol for a single persisted record plus metadata queries.

    Type parameter T is the decoded collection (list of entries, list of tip ids).
    """

    def exists(self) -> bool:
        """
        Check if the record exists in storage.

        Returns:
            True if the backing file exists, False otherwise
        """
        ...

    def load(self) -> T:
        """
        Load the collection from storage.

        An absent record is an empty collection, not an error.

        Raises:
            PersistenceError: If the record cannot be read or decoded
        """
        ...

    def save(self, data: T) -> None:
        """
        Persist the full collection.

        Raises:
            PersistenceError: If the record cannot be written
        """
        ...

    def last_modified(self) -> datetime | None:
        """Timestamp of the last write, or None if the record doesn't exist."""
        ...

    def age_days(self) -> int | None:
        """Days since the last write, or None if the record doesn't exist."""
        ...

    def item_count(self) -> int | None:
        """Number of items in the stored collection, or None if absent."""
        ...

    def size_bytes(self) -> int | None:
        """Size of the record in bytes, or None if absent."""
        ...

    def summary_text(self) -> str:
        """Brief human-readable description for CLI output and logs."""
        ...
