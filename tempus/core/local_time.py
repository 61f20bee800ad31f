"""LocalTime class representing a time of day.

This module provides the LocalTime class for time-of-day values with
nanosecond precision, without a date or time-zone.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from tempus._internal.arith import floor_mod
from tempus._internal.constants import (
    NANOS_PER_DAY,
    NANOS_PER_HOUR,
    NANOS_PER_MINUTE,
    NANOS_PER_SECOND,
    SECONDS_PER_DAY,
)
from tempus._internal.validation import validate_int, validate_range
from tempus.arithmetic.comparisons import max_of, min_of
from tempus.core.duration import Duration
from tempus.errors import ValidationError

if TYPE_CHECKING:
    from tempus.clock import Clock
    from tempus.core.local_date import LocalDate
    from tempus.core.local_date_time import LocalDateTime
    from tempus.fields import FieldLookup
    from tempus.zone.base import TimeZone


class LocalTime:
    """A time of day with nanosecond precision, from 00:00 to 23:59:59.999999999.

    The internal representation is a single nanosecond-of-day count;
    hour, minute, second and nano are derived from it.

    Attributes:
        hour: The hour (0-23).
        minute: The minute (0-59).
        second: The second (0-59).
        nano: The nanosecond of the second (0-999999999).

    Examples:
        >>> t = LocalTime.of(14, 30, 45)
        >>> t.hour
        14
        >>> str(t)
        '14:30:45'

        >>> str(LocalTime.of(9, 5))
        '09:05'
    """

    __slots__ = ("_nano_of_day",)

    def __init__(self, hour: int, minute: int, second: int = 0, nano: int = 0) -> None:
        """Create a LocalTime; equivalent to LocalTime.of().

        Raises:
            ValidationError: If any component is not an integer or is out
                of range.
        """
        for name, value in (
            ("hour", hour),
            ("minute", minute),
            ("second", second),
            ("nano", nano),
        ):
            validate_int(name, value)
        self._nano_of_day: int = _checked_nano_of_day(hour, minute, second, nano)

    @classmethod
    def _from_nano_of_day(cls, nano_of_day: int) -> LocalTime:
        """Create a LocalTime from a known-valid nanosecond-of-day.

        This is an internal factory method that bypasses validation.
        """
        instance = object.__new__(cls)
        instance._nano_of_day = nano_of_day
        return instance

    @classmethod
    def of(cls, hour: int, minute: int, second: int = 0, nano: int = 0) -> LocalTime:
        """Create a LocalTime from its fields.

        Args:
            hour: The hour (0-23).
            minute: The minute (0-59).
            second: The second (0-59).
            nano: The nanosecond of the second (0-999999999).

        Raises:
            ValidationError: If any component is out of range.

        Examples:
            >>> LocalTime.of(23, 59, 59, 999_999_999)
            LocalTime(23, 59, 59, nano=999999999)
        """
        return cls(hour, minute, second, nano)

    @classmethod
    def of_second_of_day(cls, second_of_day: int, nano: int = 0) -> LocalTime:
        """Create a LocalTime from a second-of-day and a nanosecond.

        Raises:
            ValidationError: If second_of_day is outside 0-86399 or nano
                outside 0-999999999.

        Examples:
            >>> LocalTime.of_second_of_day(3661)
            LocalTime(1, 1, 1, nano=0)
        """
        validate_int("second-of-day", second_of_day)
        validate_int("nano", nano)
        if second_of_day < 0 or second_of_day >= SECONDS_PER_DAY:
            raise ValidationError(
                f"second-of-day must be between 0 and {SECONDS_PER_DAY - 1}, "
                f"got {second_of_day}"
            )
        if nano < 0 or nano >= NANOS_PER_SECOND:
            raise ValidationError(
                f"nano must be between 0 and {NANOS_PER_SECOND - 1}, got {nano}"
            )
        return cls._from_nano_of_day(second_of_day * NANOS_PER_SECOND + nano)

    @classmethod
    def of_nano_of_day(cls, nano_of_day: int) -> LocalTime:
        """Create a LocalTime from a nanosecond-of-day.

        Raises:
            ValidationError: If nano_of_day is outside one day.
        """
        validate_int("nano-of-day", nano_of_day)
        if nano_of_day < 0 or nano_of_day >= NANOS_PER_DAY:
            raise ValidationError(
                f"nano-of-day must be between 0 and {NANOS_PER_DAY - 1}, "
                f"got {nano_of_day}"
            )
        return cls._from_nano_of_day(nano_of_day)

    @classmethod
    def from_fields(cls, fields: FieldLookup) -> LocalTime:
        """Create a LocalTime from parsed fields.

        hour and minute are required; second and nano default to 0.

        Raises:
            MissingFieldError: If hour or minute is absent.
            ValidationError: If a value is out of range or not an integer.
        """
        from tempus.fields import (
            HOUR,
            MINUTE,
            NANO,
            SECOND,
            get_int_field,
            get_optional_int_field,
        )

        return cls.of(
            get_int_field(fields, HOUR),
            get_int_field(fields, MINUTE),
            get_optional_int_field(fields, SECOND),
            get_optional_int_field(fields, NANO),
        )

    @classmethod
    def now(cls, zone: TimeZone, clock: Clock | None = None) -> LocalTime:
        """Return the current time of day in the given time-zone."""
        from tempus.core.local_date_time import LocalDateTime

        return LocalDateTime.now(zone, clock).time

    @classmethod
    def midnight(cls) -> LocalTime:
        """Return 00:00."""
        return cls._from_nano_of_day(0)

    @classmethod
    def noon(cls) -> LocalTime:
        """Return 12:00."""
        return cls._from_nano_of_day(12 * NANOS_PER_HOUR)

    @classmethod
    def min(cls) -> LocalTime:
        """Return the earliest time of day, 00:00."""
        return cls._from_nano_of_day(0)

    @classmethod
    def max(cls) -> LocalTime:
        """Return the latest time of day, 23:59:59.999999999."""
        return cls._from_nano_of_day(NANOS_PER_DAY - 1)

    @classmethod
    def min_of(cls, *times: LocalTime) -> LocalTime:
        """Return the earliest of the given times.

        Raises:
            EmptyInputError: If no times are given.
        """
        return min_of(times, name="LocalTime.min_of")

    @classmethod
    def max_of(cls, *times: LocalTime) -> LocalTime:
        """Return the latest of the given times.

        Raises:
            EmptyInputError: If no times are given.
        """
        return max_of(times, name="LocalTime.max_of")

    @property
    def hour(self) -> int:
        return self._nano_of_day // NANOS_PER_HOUR

    @property
    def minute(self) -> int:
        return (self._nano_of_day % NANOS_PER_HOUR) // NANOS_PER_MINUTE

    @property
    def second(self) -> int:
        return (self._nano_of_day % NANOS_PER_MINUTE) // NANOS_PER_SECOND

    @property
    def nano(self) -> int:
        """Return the nanosecond of the second (0-999999999)."""
        return self._nano_of_day % NANOS_PER_SECOND

    def to_second_of_day(self) -> int:
        """Return the time as seconds since midnight, dropping the nano part."""
        return self._nano_of_day // NANOS_PER_SECOND

    def to_nano_of_day(self) -> int:
        """Return the time as nanoseconds since midnight."""
        return self._nano_of_day

    def with_hour(self, hour: int) -> LocalTime:
        return LocalTime(hour, self.minute, self.second, self.nano)

    def with_minute(self, minute: int) -> LocalTime:
        return LocalTime(self.hour, minute, self.second, self.nano)

    def with_second(self, second: int) -> LocalTime:
        return LocalTime(self.hour, self.minute, second, self.nano)

    def with_nano(self, nano: int) -> LocalTime:
        return LocalTime(self.hour, self.minute, self.second, nano)

    def plus_hours(self, hours: int) -> LocalTime:
        """Return a copy with hours added, wrapping around midnight.

        Examples:
            >>> LocalTime.of(22, 0).plus_hours(5)
            LocalTime(3, 0, 0, nano=0)
        """
        return self.plus_nanos(hours * NANOS_PER_HOUR)

    def plus_minutes(self, minutes: int) -> LocalTime:
        return self.plus_nanos(minutes * NANOS_PER_MINUTE)

    def plus_seconds(self, seconds: int) -> LocalTime:
        return self.plus_nanos(seconds * NANOS_PER_SECOND)

    def plus_nanos(self, nanos: int) -> LocalTime:
        """Return a copy with nanoseconds added, wrapping around midnight."""
        if nanos == 0:
            return self
        return LocalTime._from_nano_of_day(
            floor_mod(self._nano_of_day + nanos, NANOS_PER_DAY)
        )

    def plus_duration(self, duration: Duration) -> LocalTime:
        """Return a copy with a Duration added, wrapping around midnight.

        Examples:
            >>> LocalTime.of(0, 0).plus_duration(Duration.of_seconds(-1))
            LocalTime(23, 59, 59, nano=0)
        """
        return self.plus_nanos(duration.to_nanos())

    def minus_hours(self, hours: int) -> LocalTime:
        return self.plus_hours(-hours)

    def minus_minutes(self, minutes: int) -> LocalTime:
        return self.plus_minutes(-minutes)

    def minus_seconds(self, seconds: int) -> LocalTime:
        return self.plus_seconds(-seconds)

    def minus_nanos(self, nanos: int) -> LocalTime:
        return self.plus_nanos(-nanos)

    def minus_duration(self, duration: Duration) -> LocalTime:
        return self.plus_nanos(-duration.to_nanos())

    def truncated_to(self, unit: Duration) -> LocalTime:
        """Return a copy truncated to a multiple of unit since midnight.

        The unit must be positive, at most one day, and divide a day
        evenly (for example one minute, fifteen minutes or one hour).

        Raises:
            ValidationError: If the unit is not a valid truncation unit.

        Examples:
            >>> LocalTime.of(10, 47, 12).truncated_to(Duration.of_minutes(15))
            LocalTime(10, 45, 0, nano=0)
        """
        unit_nanos = _day_fraction_nanos(unit, "truncation")
        return LocalTime._from_nano_of_day(
            self._nano_of_day - self._nano_of_day % unit_nanos
        )

    def rounded_to(self, unit: Duration) -> LocalTime:
        """Return a copy rounded to the nearest multiple of unit since midnight.

        Halfway values round up. A result of 24:00 wraps to midnight;
        LocalDateTime.rounded_to() carries it into the next day instead.
        The unit rules are those of truncated_to().

        Raises:
            ValidationError: If the unit is not a valid rounding unit.

        Examples:
            >>> LocalTime.of(10, 52).rounded_to(Duration.of_minutes(15))
            LocalTime(10, 45, 0, nano=0)
            >>> LocalTime.of(10, 52, 30).rounded_to(Duration.of_minutes(15))
            LocalTime(11, 0, 0, nano=0)
        """
        return LocalTime._from_nano_of_day(
            self._rounded_nano_of_day(unit) % NANOS_PER_DAY
        )

    def _rounded_nano_of_day(self, unit: Duration) -> int:
        """Return the rounded nanosecond-of-day, which may equal one full day."""
        unit_nanos = _day_fraction_nanos(unit, "rounding")
        remainder = self._nano_of_day % unit_nanos
        rounded = self._nano_of_day - remainder
        if remainder * 2 >= unit_nanos:
            rounded += unit_nanos
        return rounded

    def at_date(self, date: LocalDate) -> LocalDateTime:
        """Combine this time with a date."""
        from tempus.core.local_date_time import LocalDateTime

        return LocalDateTime(date, self)

    def compare_to(self, other: LocalTime) -> int:
        """Return -1, 0 or 1 as this time is before, equal to or after other."""
        if self._nano_of_day < other._nano_of_day:
            return -1
        if self._nano_of_day > other._nano_of_day:
            return 1
        return 0

    def is_equal_to(self, other: LocalTime) -> bool:
        return self._nano_of_day == other._nano_of_day

    def is_before(self, other: LocalTime) -> bool:
        return self._nano_of_day < other._nano_of_day

    def is_before_or_equal_to(self, other: LocalTime) -> bool:
        return self._nano_of_day <= other._nano_of_day

    def is_after(self, other: LocalTime) -> bool:
        return self._nano_of_day > other._nano_of_day

    def is_after_or_equal_to(self, other: LocalTime) -> bool:
        return self._nano_of_day >= other._nano_of_day

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LocalTime):
            return NotImplemented
        return self._nano_of_day == other._nano_of_day

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, LocalTime):
            return NotImplemented
        return self._nano_of_day < other._nano_of_day

    def __le__(self, other: object) -> bool:
        if not isinstance(other, LocalTime):
            return NotImplemented
        return self._nano_of_day <= other._nano_of_day

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, LocalTime):
            return NotImplemented
        return self._nano_of_day > other._nano_of_day

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, LocalTime):
            return NotImplemented
        return self._nano_of_day >= other._nano_of_day

    def __hash__(self) -> int:
        return hash(self._nano_of_day)

    def __bool__(self) -> bool:
        """Times are always truthy, midnight included."""
        return True

    def __repr__(self) -> str:
        return (
            f"LocalTime({self.hour}, {self.minute}, {self.second}, nano={self.nano})"
        )

    def __str__(self) -> str:
        """Return the ISO-8601 text, omitting a zero seconds or fraction part.

        Examples:
            >>> str(LocalTime.of(10, 0))
            '10:00'
            >>> str(LocalTime.of(10, 0, 5))
            '10:00:05'
            >>> str(LocalTime.of(10, 0, 0, 120_000_000))
            '10:00:00.12'
        """
        result = f"{self.hour:02d}:{self.minute:02d}"
        second, nano = self.second, self.nano
        if second or nano:
            result += f":{second:02d}"
            if nano:
                result += "." + f"{nano:09d}".rstrip("0")
        return result


@validate_range(hour=(0, 23), minute=(0, 59), second=(0, 59), nano=(0, 999_999_999))
def _checked_nano_of_day(hour: int, minute: int, second: int, nano: int) -> int:
    return (
        hour * NANOS_PER_HOUR
        + minute * NANOS_PER_MINUTE
        + second * NANOS_PER_SECOND
        + nano
    )


def _day_fraction_nanos(unit: Duration, operation: str) -> int:
    unit_nanos = unit.to_nanos()
    if unit_nanos <= 0 or unit_nanos > NANOS_PER_DAY:
        raise ValidationError(
            f"{operation} unit must be positive and at most one day, got {unit}"
        )
    if NANOS_PER_DAY % unit_nanos != 0:
        raise ValidationError(
            f"{operation} unit must divide a day evenly, got {unit}"
        )
    return unit_nanos


__all__ = ["LocalTime"]
