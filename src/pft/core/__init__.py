"""
Core Utilities Package

Shared primitives used across entries, analysis, tips and export.

This package provides:
- Money with integer minor units, plus parsing and formatting helpers
- YearMonth month keys and entry timestamp helpers
- JSON record persistence (DataStore protocol and mixin)
- Configuration management and logging setup
- The error taxonomy (ValidationError, NotFoundError, PersistenceError)
"""

from .config import Config, Environment, get_config, reload_config
from .currency import format_minor, minor_to_decimal_str, parse_amount_to_minor
from .dates import YearMonth, month_key, month_window, now_timestamp
from .errors import NotFoundError, PersistenceError, TrackerError, ValidationError
from .money import Money

__all__ = [
    # Configuration
    "Config",
    "Environment",
    "Money",
    "NotFoundError",
    "PersistenceError",
    "TrackerError",
    "ValidationError",
    "YearMonth",
    "format_minor",
    "get_config",
    "minor_to_decimal_str",
    "month_key",
    "month_window",
    "now_timestamp",
    "parse_amount_to_minor",
    "reload_config",
]
