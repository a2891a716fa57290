"""
Financial Analysis Package

Aggregation of entries into the figures every view shows.

Key Components:
- summary: totals, per-type breakdown, monthly cumulative balance series
- report: one SummaryReport bundling all three for a selection of entries
"""

from .report import SummaryReport, build_report
from .summary import (
    DEFAULT_LOOKBACK_MONTHS,
    MonthlyPoint,
    Totals,
    category_breakdown,
    compute_totals,
    monthly_cumulative_series,
)

__all__ = [
    "DEFAULT_LOOKBACK_MONTHS",
    "MonthlyPoint",
    "SummaryReport",
    "Totals",
    "build_report",
    "category_breakdown",
    "compute_totals",
    "monthly_cumulative_series",
]
