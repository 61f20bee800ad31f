"""DayOfWeek enumeration.

This module provides the DayOfWeek enum using ISO-8601 numbering,
Monday = 1 through Sunday = 7.
"""

from __future__ import annotations

from enum import IntEnum

from tempus.errors import ValidationError


class DayOfWeek(IntEnum):
    """A day of the week, numbered per ISO-8601.

    Examples:
        >>> DayOfWeek.MONDAY.value
        1
        >>> DayOfWeek.of(7)
        <DayOfWeek.SUNDAY: 7>
        >>> DayOfWeek.SATURDAY.is_weekend
        True
    """

    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6
    SUNDAY = 7

    @classmethod
    def of(cls, value: int) -> DayOfWeek:
        """Return the DayOfWeek for an ISO value from 1 to 7.

        Raises:
            ValidationError: If value is outside 1-7.
        """
        if value < 1 or value > 7:
            raise ValidationError(f"day-of-week must be between 1 and 7, got {value}")
        return cls(value)

    @property
    def is_weekend(self) -> bool:
        """Return True for Saturday and Sunday."""
        return self >= DayOfWeek.SATURDAY

    def plus(self, days: int) -> DayOfWeek:
        """Return the day of the week that is ``days`` later (or earlier)."""
        return DayOfWeek((self.value - 1 + days) % 7 + 1)

    def __str__(self) -> str:
        return self.name.capitalize()


__all__ = ["DayOfWeek"]
