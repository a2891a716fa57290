#!/usr/bin/env python3
"""
Entry Query Engine

Pure filtering of an entry sequence by free-text title search and type.
Selections come straight from the user, so unrecognised values fall back to
defaults here instead of raising.
"""

import logging
from collections.abc import Iterable

from .models import Entry, TypeFilter

logger = logging.getLogger(__name__)


def parse_type_filter(value: "str | TypeFilter | None") -> TypeFilter:
    """
    Interpret a raw type selection, defaulting to ALL.

    Example:
        parse_type_filter("Income") -> TypeFilter.INCOME
        parse_type_filter("bogus") -> TypeFilter.ALL
    """
    if isinstance(value, TypeFilter):
        return value
    if value is None:
        return TypeFilter.ALL
    try:
        return TypeFilter(str(value).strip().lower())
    except ValueError:
        logger.debug("Unrecognised type filter %r, showing all entries", value)
        return TypeFilter.ALL


def filter_entries(
    entries: Iterable[Entry],
    search_text: str | None = "",
    type_filter: "str | TypeFilter | None" = TypeFilter.ALL,
) -> list[Entry]:
    """
    Filter entries by case-insensitive title substring and type.

    Both predicates must hold. Input order is preserved.

    Args:
        entries: Entries to filter
        search_text: Substring to look for in titles; blank matches everything
        type_filter: all, income or expense

    Returns:
        Matching entries, possibly empty
    """
    query = (search_text or "").strip().lower()
    selected = parse_type_filter(type_filter)

    return [
        entry
        for entry in entries
        if (not query or query in entry.title.lower()) and selected.matches(entry.type)
    ]
