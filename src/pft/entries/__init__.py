"""
Entries Package

Income and expense records: the data model, the persisted store and the
query engine used by every view.

Key Components:
- models: Entry, EntryType, TypeFilter
- store: EntryStore with validation and persist-on-every-mutation
- datastore: JSON record backing the store
- query: filter_entries for search and type selection
"""

from pathlib import Path

from .datastore import EntryRecordStore
from .models import Entry, EntryType, TypeFilter, new_entry_id
from .query import filter_entries, parse_type_filter
from .store import EntryStore


def open_entry_store(path: Path) -> EntryStore:
    """Create an EntryStore backed by the JSON record at ``path``."""
    return EntryStore(EntryRecordStore(path))


__all__ = [
    "Entry",
    "EntryRecordStore",
    "EntryStore",
    "EntryType",
    "TypeFilter",
    "filter_entries",
    "new_entry_id",
    "open_entry_store",
    "parse_type_filter",
]
