#!/usr/bin/env python3
"""
Shared CLI helpers: store construction, filter options and output formatting.
"""

import click

from ..core.config import Config, get_config
from ..core.dates import parse_timestamp
from ..core.errors import PersistenceError
from ..entries import EntryStore, TypeFilter, open_entry_store
from ..entries.models import Entry
from ..tips import FavoritesStore, open_favorites_store

TYPE_FILTER_CHOICES = [t.value for t in TypeFilter]

search_option = click.option("--search", "-s", default="", help="Case-insensitive title search")
type_option = click.option(
    "--type",
    "type_filter",
    type=click.Choice(TYPE_FILTER_CHOICES, case_sensitive=False),
    default=TypeFilter.ALL.value,
    help="Entry type to show (default: all)",
)


def current_config(ctx: click.Context) -> Config:
    """Config stored by the main group, or the global one when run standalone."""
    obj = ctx.find_object(dict)
    if obj and obj.get("config") is not None:
        return obj["config"]
    return get_config()


def load_entry_store(ctx: click.Context) -> EntryStore:
    """Open the entry store fresh for this invocation and warn if it was unreadable."""
    store = open_entry_store(current_config(ctx).storage.entries_file)
    warn_if_unsaved(store.last_persistence_error, reading=True)
    return store


def load_favorites_store(ctx: click.Context) -> FavoritesStore:
    """Open the favorites store fresh for this invocation."""
    store = open_favorites_store(current_config(ctx).storage.favorites_file)
    warn_if_unsaved(store.last_persistence_error, reading=True)
    return store


def warn_if_unsaved(error: PersistenceError | None, reading: bool = False) -> None:
    """Print a storage warning to stderr if the last read or write failed."""
    if error is None:
        return
    if reading:
        click.echo(f"⚠️  Stored data could not be read, starting empty: {error}", err=True)
    else:
        click.echo(f"⚠️  Changes may not survive a reload: {error}", err=True)


def display_date(entry: Entry) -> str:
    """Entry timestamp in local time, or the raw stored text if unparseable."""
    try:
        moment = parse_timestamp(entry.date)
    except ValueError:
        return entry.date or "-"
    if moment.tzinfo is not None:
        moment = moment.astimezone()
    return moment.strftime("%Y-%m-%d %H:%M")


def format_entry_line(entry: Entry, currency_symbol: str) -> str:
    """One row of the entries listing."""
    return (
        f"{display_date(entry):<17} {entry.title[:30]:<30} {entry.type.label:<8} "
        f"{entry.amount.format(currency_symbol):>16}  [{entry.id}]"
    )
