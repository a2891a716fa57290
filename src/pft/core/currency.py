#!/usr/bin/env python3
"""
Currency Parsing and Formatting Utilities

Amounts are held as integer minor units (cents, kobo) everywhere in the core.
Parsing goes through Decimal so user strings like "1,250.50" never touch
floating point.

Key Principles:
- Never use floating-point arithmetic for currency calculations
- Round half-up to minor units once, at the input boundary
- Format with pure integer arithmetic
"""

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

MINOR_UNITS_PER_MAJOR = 100

DEFAULT_CURRENCY_SYMBOL = "₦"

# Symbols stripped from user input before parsing
_CURRENCY_SYMBOLS = ("₦", "$", "€", "£")


def parse_amount_to_minor(value: str | int | float | Decimal) -> int:
    """
    Parse a user-entered amount into integer minor units.

    Accepts numbers or strings; strings may carry a currency symbol and
    thousands separators. Rounds half-up to the nearest minor unit.

    Args:
        value: Amount in major units, e.g. "12.34", "₦1,250", 12.5

    Returns:
        Amount in minor units (1234 for "12.34")

    Raises:
        ValueError: If the value is not a finite number

    Examples:
        parse_amount_to_minor("12.34") -> 1234
        parse_amount_to_minor("₦1,250.5") -> 125050
        parse_amount_to_minor(0.005) -> 1
    """
    if isinstance(value, bool):
        raise ValueError(f"Not an amount: {value!r}")

    if isinstance(value, Decimal):
        decimal_amount = value
    elif isinstance(value, int):
        decimal_amount = Decimal(value)
    elif isinstance(value, float):
        # repr of a float is its shortest round-tripping decimal form
        decimal_amount = Decimal(repr(value))
    else:
        clean = str(value).strip()
        for symbol in _CURRENCY_SYMBOLS:
            clean = clean.replace(symbol, "")
        clean = clean.replace(",", "").replace(" ", "")
        if not clean:
            raise ValueError("Amount is empty")
        try:
            decimal_amount = Decimal(clean)
        except InvalidOperation as e:
            raise ValueError(f"Not an amount: {value!r}") from e

    if not decimal_amount.is_finite():
        raise ValueError(f"Amount must be finite: {value!r}")

    minor = (decimal_amount * MINOR_UNITS_PER_MAJOR).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    return int(minor)


def minor_to_decimal_str(minor: int) -> str:
    """
    Convert minor units to a plain decimal string using integer arithmetic.

    Example:
        minor_to_decimal_str(4599) -> "45.99"
        minor_to_decimal_str(-5) -> "-0.05"
    """
    is_negative = minor < 0
    abs_minor = abs(int(minor))

    major = abs_minor // MINOR_UNITS_PER_MAJOR
    remainder = abs_minor % MINOR_UNITS_PER_MAJOR

    if is_negative:
        return f"-{major}.{remainder:02d}"
    return f"{major}.{remainder:02d}"


def minor_to_major_number(minor: int) -> int | float:
    """
    Convert minor units to a JSON-friendly number in major units.

    Whole amounts come back as int so stored records read naturally (100, not 100.0).
    """
    if minor % MINOR_UNITS_PER_MAJOR == 0:
        return minor // MINOR_UNITS_PER_MAJOR
    return float(Decimal(minor) / MINOR_UNITS_PER_MAJOR)


def format_minor(minor: int, symbol: str = DEFAULT_CURRENCY_SYMBOL) -> str:
    """
    Format minor units for display with symbol and thousands separators.

    Example:
        format_minor(125050) -> "₦1,250.50"
        format_minor(-4000, "$") -> "-$40.00"
    """
    is_negative = minor < 0
    abs_minor = abs(int(minor))
    major = abs_minor // MINOR_UNITS_PER_MAJOR
    remainder = abs_minor % MINOR_UNITS_PER_MAJOR

    formatted = f"{symbol}{major:,}.{remainder:02d}"
    return f"-{formatted}" if is_negative else formatted
