#!/usr/bin/env python3
"""
Date Primitives for Entry Timestamps and Monthly Buckets

Entries carry ISO-8601 timestamp strings. Monthly aggregation only needs the
calendar month, taken from the ``YYYY-MM`` prefix of the stored timestamp, so a
record written with any ISO flavour (with or without time, offset or ``Z``)
still lands in the month it was written for.
"""

import re
from dataclasses import dataclass
from datetime import date, datetime, timezone

_MONTH_PREFIX = re.compile(r"^(\d{4})-(\d{2})")


@dataclass(frozen=True, order=True)
class YearMonth:
    """Immutable calendar month key, ordered chronologically."""

    year: int
    month: int

    def __post_init__(self):
        if not 1 <= self.month <= 12:
            raise ValueError(f"Month out of range: {self.month}")

    @classmethod
    def from_date(cls, value: date) -> "YearMonth":
        """Month containing the given date (or datetime)."""
        return cls(year=value.year, month=value.month)

    @classmethod
    def from_string(cls, value: str) -> "YearMonth":
        """
        Parse from a string starting with ``YYYY-MM``.

        Args:
            value: "2024-08", "2024-08-15" or "2024-08-15T10:00:00.000Z"

        Raises:
            ValueError: If the prefix is missing or the month is invalid
        """
        match = _MONTH_PREFIX.match(value.strip())
        if not match:
            raise ValueError(f"No YYYY-MM prefix in {value!r}")
        return cls(year=int(match.group(1)), month=int(match.group(2)))

    @classmethod
    def current(cls, today: date | None = None) -> "YearMonth":
        """Month of ``today`` (default: the local current date)."""
        return cls.from_date(today or date.today())

    def shift(self, months: int) -> "YearMonth":
        """Return the month ``months`` later (negative for earlier)."""
        index = self.year * 12 + (self.month - 1) + months
        return YearMonth(year=index // 12, month=index % 12 + 1)

    def label(self) -> str:
        """Short display label, e.g. "Oct 2026"."""
        return date(self.year, self.month, 1).strftime("%b %Y")

    def __str__(self) -> str:
        return f"{self.year:04d}-{self.month:02d}"


def month_window(months: int, today: date | None = None) -> list[YearMonth]:
    """
    Consecutive months ending at the current month, oldest first.

    Args:
        months: Window width, must be at least 1
        today: Anchor date (default: local current date)

    Returns:
        List of exactly ``months`` YearMonth values
    """
    if months < 1:
        raise ValueError(f"Window must contain at least one month, got {months}")
    anchor = YearMonth.current(today)
    return [anchor.shift(-offset) for offset in range(months - 1, -1, -1)]


def month_key(timestamp: str | None) -> YearMonth | None:
    """
    Month bucket for a stored timestamp, or None if it cannot be parsed.

    Example:
        month_key("2024-08-15T10:00:00.000Z") -> YearMonth(2024, 8)
        month_key("yesterday") -> None
    """
    if not timestamp:
        return None
    try:
        return YearMonth.from_string(timestamp)
    except ValueError:
        return None


def now_timestamp() -> str:
    """Current UTC time as ISO-8601 with millisecond precision and ``Z`` suffix."""
    return format_timestamp(datetime.now(timezone.utc))


def format_timestamp(value: datetime | date) -> str:
    """
    Format a date or datetime as a stored entry timestamp.

    Aware datetimes are converted to UTC; naive ones are taken as-is.
    A plain date becomes midnight of that day.
    """
    if not isinstance(value, datetime):
        value = datetime(value.year, value.month, value.day)
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc)
        return value.replace(tzinfo=None).isoformat(timespec="milliseconds") + "Z"
    return value.isoformat(timespec="milliseconds")


def parse_timestamp(value: str) -> datetime:
    """
    Parse an ISO-8601 timestamp or date string.

    Raises:
        ValueError: If the string is not ISO-8601
    """
    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    return datetime.fromisoformat(text)
