"""
Tips Package

Static money tips and the user's favorites.

Key Components:
- catalog: packaged tip catalog with search and category counts
- favorites: persisted set of favorited tip ids
"""

from pathlib import Path

from .catalog import ALL_CATEGORIES, Tip, get_tip, load_catalog, parse_catalog, popular_categories, search_tips
from .favorites import FavoritesRecordStore, FavoritesStore


def open_favorites_store(path: Path) -> FavoritesStore:
    """Create a FavoritesStore backed by the JSON record at ``path``."""
    return FavoritesStore(FavoritesRecordStore(path))


__all__ = [
    "ALL_CATEGORIES",
    "FavoritesRecordStore",
    "FavoritesStore",
    "Tip",
    "get_tip",
    "load_catalog",
    "open_favorites_store",
    "parse_catalog",
    "popular_categories",
    "search_tips",
]
