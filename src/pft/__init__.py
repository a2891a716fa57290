"""
Personal Finance Tracker

Local income and expense tracking with summaries, charts, search, export and
a favoritable tips list. All state lives in JSON records under a data
directory.

Domain Packages:
- core: Money, month keys, configuration, persistence plumbing, errors
- entries: entry model, persisted store, search/type filtering
- analysis: totals, per-type breakdown, monthly cumulative balance
- tips: static tip catalog and favorites
- export: CSV and chart snapshots
- cli: the `pft` command-line interface

Example Usage:
    from pft.entries import open_entry_store, filter_entries
    from pft.analysis import build_report

    store = open_entry_store(Path("data/pft_transactions_v1.json"))
    store.add("Salary", "2500", "income")
    report = build_report(filter_entries(store.list(), "", "all"))
"""

__version__ = "0.1.0"
__author__ = "PFT Contributors"

from .analysis import SummaryReport, build_report
from .core.config import Environment, get_config
from .core.errors import NotFoundError, PersistenceError, TrackerError, ValidationError
from .core.money import Money
from .entries import Entry, EntryStore, EntryType, TypeFilter, filter_entries, open_entry_store
from .tips import FavoritesStore, open_favorites_store

__all__ = [
    "Entry",
    "EntryStore",
    "EntryType",
    "Environment",
    "FavoritesStore",
    "Money",
    "NotFoundError",
    "PersistenceError",
    "SummaryReport",
    "TrackerError",
    "TypeFilter",
    "ValidationError",
    "build_report",
    "filter_entries",
    "get_config",
    "open_entry_store",
    "open_favorites_store",
]
