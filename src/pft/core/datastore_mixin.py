#!/usr/bin/env python3
"""
DataStore Mixin - Common functionality for JSON record stores.

Each persisted collection is one JSON file. The mixin supplies the file
metadata methods and the read/write plumbing that turns I/O and decoding
failures into PersistenceError; subclasses only describe how their
collection maps to and from JSON.
"""

import json
import logging
from abc import abstractmethod
from datetime import datetime
from pathlib import Path
from typing import Any

from .errors import PersistenceError
from .json_utils import read_json, write_json

logger = logging.getLogger(__name__)


class JsonRecordMixin:
    """
    Mixin providing common DataStore functionality for a single JSON file.

    Subclasses must set ``self.path`` (via ``__init__``) and implement:
    - _decode(raw) -> collection
    - _encode(collection) -> JSON-serializable value
    - summary_text() -> str
    """

    def __init__(self, path: Path):
        """Initialize with the backing file path."""
        self.path = Path(path)

    @abstractmethod
    def _decode(self, raw: Any) -> Any:
        """Convert parsed JSON into the domain collection."""
        ...

    @abstractmethod
    def _encode(self, data: Any) -> Any:
        """Convert the domain collection into JSON-serializable data."""
        ...

    @abstractmethod
    def summary_text(self) -> str:
        """Get human-readable summary of current data state."""
        ...

    def exists(self) -> bool:
        """Check if the record file exists."""
        return self.path.exists()

    def load(self) -> Any:
        """
        Load and decode the record. An absent file decodes as an empty list.

        Raises:
            PersistenceError: If the file can't be read, isn't JSON, or has the wrong shape
        """
        if not self.exists():
            return self._decode([])

        try:
            raw = read_json(self.path)
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            raise PersistenceError(f"Could not read {self.path.name}: {e}", path=str(self.path)) from e

        if not isinstance(raw, list):
            raise PersistenceError(
                f"Expected a JSON array in {self.path.name}, found {type(raw).__name__}",
                path=str(self.path),
            )

        return self._decode(raw)

    def save(self, data: Any) -> None:
        """
        Encode and atomically write the record.

        Raises:
            PersistenceError: If the file can't be written
        """
        try:
            write_json(self.path, self._encode(data))
        except (OSError, TypeError, ValueError) as e:
            raise PersistenceError(f"Could not write {self.path.name}: {e}", path=str(self.path)) from e
        logger.debug("Wrote %s", self.path)

    def last_modified(self) -> datetime | None:
        """Get timestamp of the record file."""
        if not self.exists():
            return None
        return datetime.fromtimestamp(self.path.stat().st_mtime)

    def age_days(self) -> int | None:
        """
        Get age of data in days since last modification.

        Returns:
            Number of days since last modification, or None if data doesn't exist
        """
        last_mod = self.last_modified()
        if last_mod is None:
            return None
        return (datetime.now() - last_mod).days

    def item_count(self) -> int | None:
        """Get count of items in the stored record, or None if absent or unreadable."""
        if not self.exists():
            return None
        try:
            return len(self.load())
        except PersistenceError:
            return None

    def size_bytes(self) -> int | None:
        """Get size of the record file in bytes."""
        if not self.exists():
            return None
        return self.path.stat().st_size
