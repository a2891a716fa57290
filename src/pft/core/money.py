#!/usr/bin/env python3
"""
Money Primitive Type

Immutable currency value wrapper that uses integer minor units internally.
Prevents floating-point errors and provides type-safe currency operations.
"""

from dataclasses import dataclass
from decimal import Decimal

from .currency import (
    MINOR_UNITS_PER_MAJOR,
    format_minor,
    minor_to_decimal_str,
    minor_to_major_number,
    parse_amount_to_minor,
)


@dataclass(frozen=True)
class Money:
    """
    Immutable money value in minor units.

    Entry amounts are always positive magnitudes; signed values appear only
    as derived results such as a balance or a monthly net.

    Examples:
        >>> income = Money.from_major("100")
        >>> expense = Money.from_minor(4000)
        >>> str(income - expense)
        '60.00'
        >>> (expense - income).format("$")
        '-$60.00'
    """

    minor: int

    @classmethod
    def zero(cls) -> "Money":
        """Zero amount."""
        return cls(minor=0)

    @classmethod
    def from_minor(cls, minor: int) -> "Money":
        """Create Money from minor units."""
        return cls(minor=minor)

    @classmethod
    def from_major(cls, amount: str | int | float | Decimal) -> "Money":
        """
        Parse from a major-unit amount like "12.34", "₦1,250" or 12.5.

        Raises:
            ValueError: If the amount is not a finite number
        """
        return cls(minor=parse_amount_to_minor(amount))

    def to_minor(self) -> int:
        """Get value in minor units."""
        return self.minor

    def to_decimal(self) -> Decimal:
        """Get value in major units as an exact Decimal."""
        return Decimal(self.minor) / MINOR_UNITS_PER_MAJOR

    def to_number(self) -> int | float:
        """Get value in major units as a JSON-friendly number."""
        return minor_to_major_number(self.minor)

    def format(self, symbol: str) -> str:
        """Format for display with the given currency symbol."""
        return format_minor(self.minor, symbol)

    def is_positive(self) -> bool:
        """True if strictly greater than zero."""
        return self.minor > 0

    def __add__(self, other: "Money") -> "Money":
        """Add two Money objects."""
        return Money(minor=self.minor + other.minor)

    def __sub__(self, other: "Money") -> "Money":
        """Subtract two Money objects."""
        return Money(minor=self.minor - other.minor)

    def __neg__(self) -> "Money":
        """Negate."""
        return Money(minor=-self.minor)

    def __lt__(self, other: "Money") -> bool:
        return self.minor < other.minor

    def __le__(self, other: "Money") -> bool:
        return self.minor <= other.minor

    def __gt__(self, other: "Money") -> bool:
        return self.minor > other.minor

    def __ge__(self, other: "Money") -> bool:
        return self.minor >= other.minor

    def __str__(self) -> str:
        """Plain decimal string in major units."""
        return minor_to_decimal_str(self.minor)

    def __repr__(self) -> str:
        return f"Money(minor={self.minor})"
