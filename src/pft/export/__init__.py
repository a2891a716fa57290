"""
Export Package

Read-only snapshots of entries and reports for use outside the tracker.

Key Components:
- csv_export: quoted CSV of entries
- charts: income/expense doughnut and cumulative balance line
"""

from .charts import SUPPORTED_FORMATS, render_dashboard
from .csv_export import CSV_COLUMNS, entries_to_dataframe, export_entries_csv

__all__ = [
    "CSV_COLUMNS",
    "SUPPORTED_FORMATS",
    "entries_to_dataframe",
    "export_entries_csv",
    "render_dashboard",
]
