#!/usr/bin/env python3
"""
Entry Data Models

An Entry is a single income or expense record. Amounts are positive Money
magnitudes; the direction comes from the entry type.
"""

import secrets
import time
from dataclasses import dataclass
from enum import Enum
from typing import Any

from ..core.dates import YearMonth, month_key
from ..core.money import Money


class EntryType(Enum):
    """Direction of an entry."""

    INCOME = "income"
    EXPENSE = "expense"

    @property
    def label(self) -> str:
        """Display label, e.g. "Income"."""
        return self.value.capitalize()

    @classmethod
    def parse(cls, value: "str | EntryType") -> "EntryType":
        """
        Parse a type from user input, case-insensitively.

        Raises:
            ValueError: If the value is not income or expense
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ValueError(f"Type must be either 'income' or 'expense', got {value!r}") from None


class TypeFilter(Enum):
    """Type selection for listing entries."""

    ALL = "all"
    INCOME = "income"
    EXPENSE = "expense"

    def matches(self, entry_type: EntryType) -> bool:
        """True if entries of ``entry_type`` pass this filter."""
        return self is TypeFilter.ALL or self.value == entry_type.value


def new_entry_id() -> str:
    """
    Generate an entry id: creation time in milliseconds plus a random suffix.

    Ids sort roughly by creation order; the 32-bit suffix makes collisions
    within the same millisecond negligible.
    """
    return f"{time.time_ns() // 1_000_000}-{secrets.token_hex(4)}"


@dataclass
class Entry:
    """
    A single income or expense record.

    ``date`` is the stored ISO-8601 timestamp string. It is kept verbatim so
    records with unparseable dates survive a load/save cycle unchanged.
    """

    id: str
    title: str
    amount: Money
    type: EntryType
    date: str

    @property
    def signed_amount(self) -> Money:
        """Amount with sign applied: positive for income, negative for expense."""
        return self.amount if self.type is EntryType.INCOME else -self.amount

    @property
    def month(self) -> YearMonth | None:
        """Calendar month bucket, or None when the date can't be parsed."""
        return month_key(self.date)

    def to_dict(self) -> dict[str, Any]:
        """Convert to the stored record layout."""
        return {
            "id": self.id,
            "title": self.title,
            "amount": self.amount.to_number(),
            "type": self.type.value,
            "date": self.date,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Entry":
        """
        Create an Entry from a stored record.

        Numeric ids from older records are converted to strings.

        Raises:
            KeyError: If a required field is missing
            ValueError: If the title is blank or the amount or type is invalid
        """
        amount = Money.from_major(data["amount"])
        if not amount.is_positive():
            raise ValueError(f"Stored amount must be positive: {data['amount']!r}")
        title = str(data["title"])
        if not title.strip():
            raise ValueError("Stored title must not be empty")

        return cls(
            id=str(data["id"]),
            title=title,
            amount=amount,
            type=EntryType.parse(data["type"]),
            date=str(data.get("date") or ""),
        )
