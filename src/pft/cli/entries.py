#!/usr/bin/env python3
"""
Entries CLI - Record, edit, delete and list income and expense entries.
"""

from typing import Optional

import click

from ..analysis import compute_totals
from ..core.errors import TrackerError
from ..entries import filter_entries
from ..entries.models import EntryType
from .common import (
    current_config,
    format_entry_line,
    load_entry_store,
    search_option,
    type_option,
    warn_if_unsaved,
)

ENTRY_TYPE_CHOICES = [t.value for t in EntryType]


@click.group()
def entries() -> None:
    """Income and expense entry commands."""
    pass


@entries.command()
@click.argument("title")
@click.argument("amount")
@click.option(
    "--type",
    "entry_type",
    type=click.Choice(ENTRY_TYPE_CHOICES, case_sensitive=False),
    required=True,
    help="income or expense",
)
@click.option("--date", "date_str", help="Entry timestamp (ISO-8601), defaults to now")
@click.pass_context
def add(ctx: click.Context, title: str, amount: str, entry_type: str, date_str: Optional[str]) -> None:
    """
    Record a new entry.

    Examples:
      pft entries add "Salary" 2500 --type income
      pft entries add "Rent" "1,200.50" --type expense --date 2024-08-01
    """
    config = current_config(ctx)
    store = load_entry_store(ctx)

    try:
        entry = store.add(title, amount, entry_type, date=date_str)
    except TrackerError as e:
        raise click.ClickException(str(e)) from e

    warn_if_unsaved(store.last_persistence_error)
    click.echo(f"✅ Added {entry.type.value}: {entry.title} {entry.amount.format(config.reports.currency_symbol)}")
    click.echo(f"   Id: {entry.id}")


@entries.command()
@click.argument("entry_id")
@click.option("--title", help="New title")
@click.option("--amount", help="New amount")
@click.option(
    "--type",
    "entry_type",
    type=click.Choice(ENTRY_TYPE_CHOICES, case_sensitive=False),
    help="New type",
)
@click.pass_context
def edit(
    ctx: click.Context,
    entry_id: str,
    title: Optional[str],
    amount: Optional[str],
    entry_type: Optional[str],
) -> None:
    """
    Edit an entry's title, amount or type. The date can't be changed.

    Options left out keep their current value.

    Example:
      pft entries edit 1729340000000-1a2b3c4d --amount 1300
    """
    if title is None and amount is None and entry_type is None:
        raise click.UsageError("Nothing to change: give at least one of --title, --amount or --type.")

    config = current_config(ctx)
    store = load_entry_store(ctx)

    try:
        current = store.get(entry_id)
        entry = store.update(
            entry_id,
            title if title is not None else current.title,
            amount if amount is not None else current.amount,
            entry_type if entry_type is not None else current.type,
        )
    except TrackerError as e:
        raise click.ClickException(str(e)) from e

    warn_if_unsaved(store.last_persistence_error)
    click.echo(f"✅ Updated: {entry.title} {entry.type.value} {entry.amount.format(config.reports.currency_symbol)}")


@entries.command()
@click.argument("entry_id")
@click.option("--yes", "-y", is_flag=True, help="Skip the confirmation prompt")
@click.pass_context
def delete(ctx: click.Context, entry_id: str, yes: bool) -> None:
    """Delete an entry. This cannot be undone."""
    store = load_entry_store(ctx)

    try:
        entry = store.get(entry_id)
    except TrackerError as e:
        raise click.ClickException(str(e)) from e

    click.echo(f"{entry.title} ({entry.type.value})")
    if not yes and not click.confirm("Are you sure you want to delete this transaction?"):
        click.echo("Cancelled.")
        return

    store.remove(entry_id)

    warn_if_unsaved(store.last_persistence_error)
    click.echo(f"🗑️  Deleted {entry_id}")


@entries.command(name="list")
@search_option
@type_option
@click.pass_context
def list_entries(ctx: click.Context, search: str, type_filter: str) -> None:
    """
    List entries, newest first, with totals for what is shown.

    Examples:
      pft entries list
      pft entries list --search rent --type expense
    """
    config = current_config(ctx)
    symbol = config.reports.currency_symbol
    store = load_entry_store(ctx)

    shown = filter_entries(store.list(), search, type_filter)

    if not shown:
        click.echo("No transactions found.")
    else:
        for entry in shown:
            click.echo(format_entry_line(entry, symbol))

    totals = compute_totals(shown)
    click.echo(f"\n{'-' * 60}")
    click.echo(f"Income:  {totals.income.format(symbol)}")
    click.echo(f"Expense: {totals.expense.format(symbol)}")
    click.echo(f"Balance: {totals.balance.format(symbol)}")


@entries.command()
@click.option("--yes", "-y", is_flag=True, help="Skip the confirmation prompt")
@click.pass_context
def clear(ctx: click.Context, yes: bool) -> None:
    """Delete every entry. This cannot be undone."""
    store = load_entry_store(ctx)

    if not len(store):
        click.echo("No transactions to clear.")
        return

    if not yes and not click.confirm("Clear all transactions? This cannot be undone."):
        click.echo("Cancelled.")
        return

    removed = store.clear()
    warn_if_unsaved(store.last_persistence_error)
    click.echo(f"🗑️  Cleared {removed} transactions")
