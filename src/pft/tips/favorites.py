#!/usr/bin/env python3
"""
Favorites Store

The set of favorited tip ids, persisted as a JSON array after every change.
Ids are deliberately not checked against the tip catalog: the catalog can
change independently of what users have already favorited.
"""

import logging
from pathlib import Path
from typing import Any

from ..core.datastore import DataStore
from ..core.datastore_mixin import JsonRecordMixin
from ..core.errors import PersistenceError

logger = logging.getLogger(__name__)


class FavoritesRecordStore(JsonRecordMixin):
    """DataStore for the favorite tip ids."""

    def __init__(self, path: Path):
        """
        Initialize favorites record store.

        Args:
            path: JSON file holding the ids (data/pft_tips_favs_v1.json)
        """
        super().__init__(path)

    def _decode(self, raw: list[Any]) -> list[str]:
        # dict.fromkeys keeps first-seen order while dropping duplicates
        return list(dict.fromkeys(str(item) for item in raw if item is not None))

    def _encode(self, data: list[str]) -> list[str]:
        return list(data)

    def summary_text(self) -> str:
        """Get human-readable summary."""
        count = self.item_count()
        if count is None:
            return "No favorites stored"
        return f"Favorites: {count} tips"


class FavoritesStore:
    """
    Insertion-ordered set of favorite tip ids with synchronous persistence.

    Follows the same best-effort contract as EntryStore: write failures are
    recorded on ``last_persistence_error`` rather than raised.
    """

    def __init__(self, record_store: DataStore[list[str]]):
        self.record_store = record_store
        self._ids: dict[str, None] = {}
        self.last_persistence_error: PersistenceError | None = None
        self.reload()

    def reload(self) -> None:
        """Re-read the persisted favorites."""
        try:
            self._ids = dict.fromkeys(self.record_store.load())
            self.last_persistence_error = None
        except PersistenceError as e:
            logger.warning("Starting with no favorites; stored data unreadable: %s", e)
            self._ids = {}
            self.last_persistence_error = e

    def _persist(self) -> None:
        try:
            self.record_store.save(list(self._ids))
            self.last_persistence_error = None
        except PersistenceError as e:
            logger.warning("Favorites may not survive a reload: %s", e)
            self.last_persistence_error = e

    def toggle(self, tip_id: str) -> bool:
        """
        Add the id if absent, remove it if present, then persist.

        Returns:
            True if the tip is now a favorite, False if it was removed
        """
        tip_id = str(tip_id)
        if tip_id in self._ids:
            del self._ids[tip_id]
            now_favorite = False
        else:
            self._ids[tip_id] = None
            now_favorite = True
        self._persist()
        logger.info("%s favorite %s", "Added" if now_favorite else "Removed", tip_id)
        return now_favorite

    def is_favorite(self, tip_id: str) -> bool:
        return str(tip_id) in self._ids

    def count(self) -> int:
        return len(self._ids)

    def list(self) -> list[str]:
        """Favorite ids in the order they were added."""
        return list(self._ids)

    def clear(self) -> int:
        """Remove all favorites and persist. Returns the number removed."""
        removed = len(self._ids)
        self._ids = {}
        self._persist()
        logger.info("Cleared %d favorites", removed)
        return removed
