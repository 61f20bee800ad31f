"""Calendar utilities for Tempus.

This module provides internal functions for calendar calculations,
including epoch-day conversions and leap year logic.

Epoch day 0 = 1970-01-01.

The conversions count days from 0000-03-01 so that the leap day falls at
the end of each computational year, then split the count into 400-year
cycles with floor division. That makes both directions closed-form and
valid for negative years without any special casing.

This module is not part of the public API.
"""

from __future__ import annotations

from tempus._internal.arith import floor_div, floor_mod
from tempus._internal.constants import (
    DAYS_0000_TO_1970,
    DAYS_IN_MONTH,
    DAYS_PER_CYCLE,
    DAYS_PER_WEEK,
    MAX_YEAR,
    MIN_YEAR,
)


def is_leap_year(year: int) -> bool:
    """Check if a year is a leap year in the proleptic Gregorian calendar.

    A year is a leap year if:
    - Divisible by 4, AND
    - NOT divisible by 100, unless also divisible by 400

    Args:
        year: The year to check (can be zero or negative).

    Returns:
        True if the year is a leap year.

    Examples:
        >>> is_leap_year(2000)  # Divisible by 400
        True
        >>> is_leap_year(1900)  # Divisible by 100 but not 400
        False
        >>> is_leap_year(2024)  # Divisible by 4 but not 100
        True
        >>> is_leap_year(2023)  # Not divisible by 4
        False
    """
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in a given month.

    Args:
        year: The year (needed for February in leap years).
        month: The month (1-12).

    Returns:
        Number of days in the month.

    Raises:
        ValueError: If month is not in 1-12.
    """
    if month < 1 or month > 12:
        raise ValueError(f"month must be 1-12, got {month}")

    if month == 2 and is_leap_year(year):
        return 29
    return DAYS_IN_MONTH[month]


def days_in_year(year: int) -> int:
    """Return 366 for leap years, 365 otherwise."""
    return 366 if is_leap_year(year) else 365


# Days before each month (cumulative), for non-leap years
# Index 0 is unused, months are 1-indexed
_DAYS_BEFORE_MONTH = (0, 0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334)


def day_of_year(year: int, month: int, day: int) -> int:
    """Return the 1-based day of the year for a valid date."""
    result = _DAYS_BEFORE_MONTH[month] + day
    if month > 2 and is_leap_year(year):
        result += 1
    return result


def ymd_to_epoch_day(year: int, month: int, day: int) -> int:
    """Convert year, month, day to a day count since 1970-01-01.

    The inputs are assumed valid; validate user input with
    tempus._internal.validation first.

    Args:
        year: The year (astronomical, can be 0 or negative).
        month: The month (1-12).
        day: The day (1-31).

    Returns:
        The epoch day.

    Examples:
        >>> ymd_to_epoch_day(1970, 1, 1)
        0
        >>> ymd_to_epoch_day(1969, 12, 31)
        -1
        >>> ymd_to_epoch_day(2000, 3, 1)
        11017
    """
    # Shift so the computational year starts in March
    y = year - 1 if month <= 2 else year
    era = floor_div(y, 400)
    year_of_era = y - era * 400  # [0, 399]
    shifted_month = month - 3 if month > 2 else month + 9  # March = 0
    day_of_shifted_year = (153 * shifted_month + 2) // 5 + day - 1
    day_of_era = (
        year_of_era * 365
        + year_of_era // 4
        - year_of_era // 100
        + day_of_shifted_year
    )
    return era * DAYS_PER_CYCLE + day_of_era - DAYS_0000_TO_1970


def epoch_day_to_ymd(epoch_day: int) -> tuple[int, int, int]:
    """Convert a day count since 1970-01-01 to year, month, day.

    Args:
        epoch_day: The epoch day (can be negative).

    Returns:
        Tuple of (year, month, day).

    Examples:
        >>> epoch_day_to_ymd(0)
        (1970, 1, 1)
        >>> epoch_day_to_ymd(-1)
        (1969, 12, 31)
        >>> epoch_day_to_ymd(19722)
        (2023, 12, 31)
    """
    z = epoch_day + DAYS_0000_TO_1970
    era = floor_div(z, DAYS_PER_CYCLE)
    day_of_era = z - era * DAYS_PER_CYCLE  # [0, 146096]
    year_of_era = (
        day_of_era
        - day_of_era // 1460
        + day_of_era // 36524
        - day_of_era // (DAYS_PER_CYCLE - 1)
    ) // 365
    day_of_shifted_year = day_of_era - (
        365 * year_of_era + year_of_era // 4 - year_of_era // 100
    )
    shifted_month = (5 * day_of_shifted_year + 2) // 153
    day = day_of_shifted_year - (153 * shifted_month + 2) // 5 + 1
    month = shifted_month + 3 if shifted_month < 10 else shifted_month - 9
    year = year_of_era + era * 400
    if month <= 2:
        year += 1
    return (year, month, day)


def epoch_day_to_day_of_week(epoch_day: int) -> int:
    """Convert an epoch day to an ISO day of week (Monday=1, Sunday=7).

    1970-01-01 was a Thursday.

    Examples:
        >>> epoch_day_to_day_of_week(0)
        4
        >>> epoch_day_to_day_of_week(-4)
        7
    """
    return floor_mod(epoch_day + 3, DAYS_PER_WEEK) + 1


MIN_EPOCH_DAY: int = ymd_to_epoch_day(MIN_YEAR, 1, 1)
MAX_EPOCH_DAY: int = ymd_to_epoch_day(MAX_YEAR, 12, 31)


__all__ = [
    "is_leap_year",
    "days_in_month",
    "days_in_year",
    "day_of_year",
    "ymd_to_epoch_day",
    "epoch_day_to_ymd",
    "epoch_day_to_day_of_week",
    "MIN_EPOCH_DAY",
    "MAX_EPOCH_DAY",
]
