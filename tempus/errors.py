"""Tempus exception hierarchy.

All Tempus-specific exceptions inherit from TempusError.
"""

from __future__ import annotations


class TempusError(Exception):
    """Base exception for all Tempus errors."""

    pass


class ValidationError(TempusError):
    """Invalid input values.

    Raised synchronously when a temporal value is constructed from an
    out-of-range field or an impossible combination of fields. No partial
    object is ever returned.

    Examples:
        - Month value outside 1-12
        - Day value outside valid range for month
        - Hour value outside 0-23
        - Interval end before its start
    """

    pass


class TimezoneError(ValidationError):
    """Invalid or unknown time-zone.

    Examples:
        - Region id unknown to the host time-zone database
        - Offset outside the -18:00 to +18:00 range
        - Offset components with mixed signs
    """

    pass


class EmptyInputError(TempusError):
    """A reduction such as min_of() or max_of() received no values."""

    pass


class ArithmeticOverflowError(TempusError):
    """Arithmetic operation exceeded representable range.

    Tempus raises rather than saturates: any result whose year falls outside
    MIN_YEAR..MAX_YEAR, or whose epoch-second falls outside the matching
    range, raises this error.

    Examples:
        - Adding 2_000_000 years to a date
        - Subtracting a duration that goes before LocalDateTime.min()
    """

    pass


class MissingFieldError(TempusError):
    """A required field is absent from a field lookup result."""

    pass


__all__ = [
    "TempusError",
    "ValidationError",
    "TimezoneError",
    "EmptyInputError",
    "ArithmeticOverflowError",
    "MissingFieldError",
]
