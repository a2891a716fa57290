#!/usr/bin/env python3
"""
Entry Store

Owns the mutable, most-recent-first list of entries. Every mutation validates
its input, updates the in-memory list and then writes the whole collection
back before returning.

Persistence is best-effort: a failed read or write is logged and recorded on
``last_persistence_error`` instead of being raised, and the in-memory list
stays authoritative for the rest of the session.
"""

import logging
import math
import re
from collections.abc import Iterator
from datetime import date, datetime
from decimal import Decimal

from ..core.datastore import DataStore
from ..core.dates import format_timestamp, now_timestamp, parse_timestamp
from ..core.errors import NotFoundError, PersistenceError, ValidationError
from ..core.money import Money
from .models import Entry, EntryType, new_entry_id

logger = logging.getLogger(__name__)

AmountInput = str | int | float | Decimal | Money

# Stored dates must start with YYYY-MM-DD so monthly bucketing can read them
_ISO_DATE_PREFIX = re.compile(r"^\d{4}-\d{2}-\d{2}")


def validate_title(title: str | None) -> str:
    """Strip and check a title. Raises ValidationError if empty."""
    clean = (title or "").strip()
    if not clean:
        raise ValidationError("title", "Title must not be empty.")
    return clean


def validate_amount(amount: AmountInput | None) -> Money:
    """
    Convert a raw amount to a positive Money magnitude.

    Raises:
        ValidationError: If the amount is missing, not a finite number, or not positive
    """
    if amount is None:
        raise ValidationError("amount", "Amount is required.")
    if isinstance(amount, Money):
        money = amount
    else:
        if isinstance(amount, float) and not math.isfinite(amount):
            raise ValidationError("amount", f"Amount must be a finite number, got {amount!r}.")
        try:
            money = Money.from_major(amount)
        except ValueError as e:
            raise ValidationError("amount", f"Please enter a valid amount: {e}") from e

    if not money.is_positive():
        raise ValidationError("amount", f"Amount must be greater than zero, got {amount!r}.")
    return money


def validate_type(entry_type: str | EntryType | None) -> EntryType:
    """Parse an entry type. Raises ValidationError if not income or expense."""
    if entry_type is None:
        raise ValidationError("type", "Type is required.")
    try:
        return EntryType.parse(entry_type)
    except ValueError as e:
        raise ValidationError("type", str(e)) from e


def validate_date(value: str | date | datetime | None) -> str:
    """
    Normalize an explicit entry date, or stamp the current time.

    Raises:
        ValidationError: If a string date isn't ISO-8601 starting with YYYY-MM-DD
    """
    if value is None:
        return now_timestamp()
    if isinstance(value, (date, datetime)):
        return format_timestamp(value)
    text = str(value).strip()
    if not text:
        return now_timestamp()
    message = f"Date must be ISO-8601 (YYYY-MM-DD[THH:MM:SS]), got {value!r}."
    if not _ISO_DATE_PREFIX.match(text):
        raise ValidationError("date", message)
    try:
        parse_timestamp(text)
    except ValueError as e:
        raise ValidationError("date", message) from e
    return text


class EntryStore:
    """
    Process-owned collection of entries with synchronous persistence.

    Construct one per surface activation; it loads the persisted record
    immediately. Call ``reload()`` to pick up writes made elsewhere.
    """

    def __init__(self, record_store: DataStore[list[Entry]]):
        """
        Initialize and load the store.

        Args:
            record_store: Backing record, normally an EntryRecordStore
        """
        self.record_store = record_store
        self._entries: list[Entry] = []
        self.last_persistence_error: PersistenceError | None = None
        self.reload()

    def reload(self) -> None:
        """Discard in-memory state and re-read the persisted record."""
        try:
            self._entries = self.record_store.load()
            self.last_persistence_error = None
        except PersistenceError as e:
            logger.warning("Starting with no entries; stored data unreadable: %s", e)
            self._entries = []
            self.last_persistence_error = e
        logger.debug("Loaded %d entries", len(self._entries))

    def _persist(self) -> None:
        try:
            self.record_store.save(self._entries)
            self.last_persistence_error = None
        except PersistenceError as e:
            logger.warning("Changes may not survive a reload: %s", e)
            self.last_persistence_error = e

    def _find_index(self, entry_id: str) -> int:
        entry_id = str(entry_id)
        for index, entry in enumerate(self._entries):
            if entry.id == entry_id:
                return index
        raise NotFoundError(entry_id)

    def add(
        self,
        title: str,
        amount: AmountInput,
        entry_type: str | EntryType,
        date: str | date | datetime | None = None,
    ) -> Entry:
        """
        Create an entry at the head of the collection and persist.

        Args:
            title: Display title, surrounding whitespace stripped
            amount: Positive amount in major units
            entry_type: "income" or "expense"
            date: Optional explicit timestamp (default: now)

        Returns:
            The created Entry

        Raises:
            ValidationError: If any field is invalid
        """
        entry = Entry(
            id=self._unique_id(),
            title=validate_title(title),
            amount=validate_amount(amount),
            type=validate_type(entry_type),
            date=validate_date(date),
        )
        self._entries.insert(0, entry)
        self._persist()
        logger.info("Added %s entry %s: %s (%s)", entry.type.value, entry.id, entry.title, entry.amount)
        return entry

    def update(self, entry_id: str, title: str, amount: AmountInput, entry_type: str | EntryType) -> Entry:
        """
        Replace title, amount and type of an existing entry in place.

        Id and date are preserved.

        Raises:
            NotFoundError: If the id is unknown
            ValidationError: If any field is invalid
        """
        index = self._find_index(entry_id)
        new_title = validate_title(title)
        new_amount = validate_amount(amount)
        new_type = validate_type(entry_type)

        entry = self._entries[index]
        entry.title = new_title
        entry.amount = new_amount
        entry.type = new_type
        self._persist()
        logger.info("Updated entry %s", entry.id)
        return entry

    def remove(self, entry_id: str) -> None:
        """
        Delete an entry.

        Raises:
            NotFoundError: If the id is unknown, including when already removed
        """
        index = self._find_index(entry_id)
        removed = self._entries.pop(index)
        self._persist()
        logger.info("Removed entry %s", removed.id)

    def clear(self) -> int:
        """Delete every entry and persist. Returns the number removed."""
        removed = len(self._entries)
        self._entries = []
        self._persist()
        logger.info("Cleared %d entries", removed)
        return removed

    def get(self, entry_id: str) -> Entry:
        """
        Look up an entry by id.

        Raises:
            NotFoundError: If the id is unknown
        """
        return self._entries[self._find_index(entry_id)]

    def list(self) -> list[Entry]:
        """All entries in store order (most recent first)."""
        return list(self._entries)

    def _unique_id(self) -> str:
        existing = {entry.id for entry in self._entries}
        entry_id = new_entry_id()
        while entry_id in existing:
            entry_id = new_entry_id()
        return entry_id

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Entry]:
        return iter(list(self._entries))

    def __contains__(self, entry_id: object) -> bool:
        return any(entry.id == str(entry_id) for entry in self._entries)
