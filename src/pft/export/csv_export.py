#!/usr/bin/env python3
"""
CSV Export

Writes entries as a fully quoted CSV with the stored record columns.
Read-only over its input: the store is never touched.
"""

import csv
import logging
from collections.abc import Sequence
from pathlib import Path

import pandas as pd

from ..entries.models import Entry

logger = logging.getLogger(__name__)

CSV_COLUMNS = ["id", "title", "amount", "type", "date"]


def entries_to_dataframe(entries: Sequence[Entry]) -> pd.DataFrame:
    """
    Tabulate entries in the given order.

    Amounts are decimal strings in major units so the CSV never shows float noise.
    """
    rows = [
        {
            "id": entry.id,
            "title": entry.title,
            "amount": str(entry.amount),
            "type": entry.type.value,
            "date": entry.date,
        }
        for entry in entries
    ]
    return pd.DataFrame(rows, columns=CSV_COLUMNS, dtype=str)


def export_entries_csv(entries: Sequence[Entry], output_file: Path) -> Path:
    """
    Write entries to ``output_file`` as CSV with every field quoted.

    Args:
        entries: Entries to export, in display order
        output_file: Destination path; parent directories are created

    Returns:
        The written path
    """
    output_file = Path(output_file)
    output_file.parent.mkdir(parents=True, exist_ok=True)

    df = entries_to_dataframe(entries)
    df.to_csv(output_file, index=False, quoting=csv.QUOTE_ALL, encoding="utf-8")

    logger.info("Exported %d entries to %s", len(df), output_file)
    return output_file
