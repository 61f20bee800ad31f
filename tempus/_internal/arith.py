"""Floor-based integer arithmetic and range guards.

Every carry between temporal units goes through floor_div / floor_mod so
that negative increments borrow correctly across midnight and the epoch.
Python's ``//`` and ``%`` already round toward negative infinity; these
names make that requirement explicit at each call site.

This module is not part of the public API.
"""

from __future__ import annotations

from tempus._internal.constants import MAX_YEAR, MIN_YEAR
from tempus.errors import ArithmeticOverflowError


def floor_div(a: int, b: int) -> int:
    """Return the quotient of a / b rounded toward negative infinity.

    Examples:
        >>> floor_div(7, 2)
        3
        >>> floor_div(-7, 2)
        -4
    """
    return a // b


def floor_mod(a: int, b: int) -> int:
    """Return the remainder of a / b, taking the sign of the divisor.

    The result always satisfies ``floor_div(a, b) * b + floor_mod(a, b) == a``.

    Examples:
        >>> floor_mod(7, 2)
        1
        >>> floor_mod(-7, 2)
        1
        >>> floor_mod(-1, 86400)
        86399
    """
    return a % b


def check_year_in_range(year: int) -> int:
    """Return year unchanged, or raise if arithmetic pushed it out of range.

    Args:
        year: A year produced by arithmetic (not user input).

    Raises:
        ArithmeticOverflowError: If year is outside MIN_YEAR to MAX_YEAR.
    """
    if year < MIN_YEAR or year > MAX_YEAR:
        raise ArithmeticOverflowError(
            f"year {year} is outside the supported range {MIN_YEAR} to {MAX_YEAR}"
        )
    return year


__all__ = [
    "floor_div",
    "floor_mod",
    "check_year_in_range",
]
