#!/usr/bin/env python3
"""
Error Taxonomy for the Personal Finance Tracker

All user-level failures raised by the core derive from TrackerError so the
presentation layer can catch one type and report the message.
"""


class TrackerError(Exception):
    """Base class for recoverable tracker errors."""

    pass


class ValidationError(TrackerError):
    """Raised when entry input (title, amount, type, date) is invalid."""

    def __init__(self, field: str, message: str):
        super().__init__(message)
        self.field = field
        self.message = message


class NotFoundError(TrackerError):
    """Raised when an operation references an unknown entry id."""

    def __init__(self, entry_id: str):
        super().__init__(f"Entry not found: {entry_id}")
        self.entry_id = entry_id


class PersistenceError(TrackerError):
    """
    Storage read or write failure.

    Stores never raise this from their public mutators. It is recorded on the
    store's ``last_persistence_error`` so callers can warn that changes may not
    survive a reload.
    """

    def __init__(self, message: str, path: str | None = None):
        super().__init__(message)
        self.path = path
