#!/usr/bin/env python3
"""
Entry Aggregation

Three independent projections over a sequence of entries, normally the
already-filtered list so figures match what the user is looking at:

- Totals: income, expense and balance
- Category breakdown: amount per entry type, for the proportion chart
- Monthly cumulative series: running balance over a fixed lookback window

All projections are total functions: empty input gives zero totals, an empty
breakdown and a window of zero points.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date

from ..core.dates import YearMonth, month_window
from ..core.money import Money
from ..entries.models import Entry, EntryType

DEFAULT_LOOKBACK_MONTHS = 8


@dataclass(frozen=True)
class Totals:
    """Aggregate income, expense and balance."""

    income: Money
    expense: Money
    balance: Money


@dataclass(frozen=True)
class MonthlyPoint:
    """One month of the cumulative balance series."""

    month: YearMonth
    net: Money
    cumulative: Money

    @property
    def label(self) -> str:
        """Display label, e.g. "Oct 2026"."""
        return self.month.label()


def compute_totals(entries: Iterable[Entry]) -> Totals:
    """
    Sum income and expense amounts; balance is income minus expense.

    Example:
        [100 income, 40 expense] -> Totals(income=100, expense=40, balance=60)
    """
    income = Money.zero()
    expense = Money.zero()
    for entry in entries:
        if entry.type is EntryType.INCOME:
            income += entry.amount
        else:
            expense += entry.amount
    return Totals(income=income, expense=expense, balance=income - expense)


def category_breakdown(entries: Iterable[Entry]) -> dict[EntryType, Money]:
    """
    Total amount per entry type, income first.

    Types with no entries are omitted, so an empty input gives an empty dict.
    """
    sums: dict[EntryType, Money] = {}
    for entry in entries:
        sums[entry.type] = sums.get(entry.type, Money.zero()) + entry.amount
    return {entry_type: sums[entry_type] for entry_type in EntryType if entry_type in sums}


def monthly_cumulative_series(
    entries: Iterable[Entry],
    months: int = DEFAULT_LOOKBACK_MONTHS,
    today: date | None = None,
) -> list[MonthlyPoint]:
    """
    Running balance over the last ``months`` calendar months, oldest first.

    Each month's net (income minus expense dated in that month) is added to
    the previous month's cumulative value, starting from zero. Amounts are
    whole minor units, so every net is already exact to two decimals and no
    rounding error carries between months. Months without entries still
    appear with a zero net.
    Entries whose date has no parseable ``YYYY-MM`` prefix, or that fall
    outside the window, don't contribute.

    Args:
        entries: Entries to aggregate
        months: Window width (default 8)
        today: Anchor date for the newest month (default: today)

    Returns:
        Exactly ``months`` MonthlyPoint values

    Raises:
        ValueError: If months is less than 1
    """
    window = month_window(months, today)
    nets: dict[YearMonth, int] = dict.fromkeys(window, 0)

    for entry in entries:
        bucket = entry.month
        if bucket is None or bucket not in nets:
            continue
        nets[bucket] += entry.signed_amount.to_minor()

    series: list[MonthlyPoint] = []
    running = 0
    for month in window:
        net = nets[month]
        running += net
        series.append(MonthlyPoint(month=month, net=Money.from_minor(net), cumulative=Money.from_minor(running)))
    return series
