#!/usr/bin/env python3
"""
Summary Report

Bundles the three aggregation projections for one entry selection so every
view (terminal, JSON, chart) renders the same numbers.
"""

from collections.abc import Sequence
from dataclasses import dataclass
from datetime import date
from typing import Any

from ..core.money import Money
from ..entries.models import Entry, EntryType
from .summary import (
    DEFAULT_LOOKBACK_MONTHS,
    MonthlyPoint,
    Totals,
    category_breakdown,
    compute_totals,
    monthly_cumulative_series,
)


@dataclass(frozen=True)
class SummaryReport:
    """Totals, breakdown and monthly series for a set of entries."""

    entry_count: int
    totals: Totals
    breakdown: dict[EntryType, Money]
    series: list[MonthlyPoint]

    @property
    def is_empty(self) -> bool:
        """True when no entries were aggregated."""
        return self.entry_count == 0

    def to_dict(self) -> dict[str, Any]:
        """Plain JSON-ready values; amounts as decimal strings in major units."""
        return {
            "entry_count": self.entry_count,
            "totals": {
                "income": str(self.totals.income),
                "expense": str(self.totals.expense),
                "balance": str(self.totals.balance),
            },
            "breakdown": {entry_type.value: str(amount) for entry_type, amount in self.breakdown.items()},
            "monthly_series": [
                {
                    "month": str(point.month),
                    "label": point.label,
                    "net": str(point.net),
                    "cumulative": str(point.cumulative),
                }
                for point in self.series
            ],
        }


def build_report(
    entries: Sequence[Entry],
    months: int = DEFAULT_LOOKBACK_MONTHS,
    today: date | None = None,
) -> SummaryReport:
    """
    Run all projections over ``entries``.

    Args:
        entries: Usually the filtered entries currently on screen
        months: Lookback window for the monthly series
        today: Anchor date for the series (default: today)
    """
    return SummaryReport(
        entry_count=len(entries),
        totals=compute_totals(entries),
        breakdown=category_breakdown(entries),
        series=monthly_cumulative_series(entries, months=months, today=today),
    )
