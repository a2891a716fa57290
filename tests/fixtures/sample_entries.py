"""
Synthetic entry builders for tests.

All titles and amounts are made up.
"""

from datetime import date

from pft.core.dates import YearMonth
from pft.core.money import Money
from pft.entries.models import Entry, EntryType


def month_timestamp(anchor: date, offset: int, day: int = 10) -> str:
    """ISO timestamp on ``day`` of the month ``offset`` months from ``anchor``."""
    month = YearMonth.from_date(anchor).shift(offset)
    return f"{month}-{day:02d}T12:00:00.000Z"


def make_entry(entry_id: str, title: str, amount: str, entry_type: str, timestamp: str) -> Entry:
    """Build an Entry directly, bypassing the store."""
    return Entry(
        id=entry_id,
        title=title,
        amount=Money.from_major(amount),
        type=EntryType(entry_type),
        date=timestamp,
    )
