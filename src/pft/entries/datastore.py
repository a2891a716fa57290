#!/usr/bin/env python3
"""
Entry DataStore

JSON record holding the full ordered entry collection.
"""

import logging
from pathlib import Path
from typing import Any

from ..core.datastore_mixin import JsonRecordMixin
from .models import Entry

logger = logging.getLogger(__name__)


class EntryRecordStore(JsonRecordMixin):
    """
    DataStore for the entry collection.

    Malformed individual records, and later records repeating an earlier id,
    are skipped with a warning so one bad row doesn't cost the user every
    other entry.
    """

    def __init__(self, path: Path):
        """
        Initialize entry record store.

        Args:
            path: JSON file holding the entries (data/pft_transactions_v1.json)
        """
        super().__init__(path)

    def _decode(self, raw: list[Any]) -> list[Entry]:
        entries: list[Entry] = []
        seen_ids: set[str] = set()
        for index, record in enumerate(raw):
            if not isinstance(record, dict):
                logger.warning("Skipping non-object entry record at index %d in %s", index, self.path.name)
                continue
            try:
                entry = Entry.from_dict(record)
            except (KeyError, TypeError, ValueError) as e:
                logger.warning("Skipping malformed entry record at index %d in %s: %s", index, self.path.name, e)
                continue
            if entry.id in seen_ids:
                logger.warning("Skipping duplicate entry id %s at index %d in %s", entry.id, index, self.path.name)
                continue
            seen_ids.add(entry.id)
            entries.append(entry)
        return entries

    def _encode(self, data: list[Entry]) -> list[dict[str, Any]]:
        return [entry.to_dict() for entry in data]

    def summary_text(self) -> str:
        """Get human-readable summary."""
        count = self.item_count()
        if count is None:
            return "No entries stored"
        return f"Entries: {count} stored"
