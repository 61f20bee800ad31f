"""Duration class representing an exact amount of time.

This module provides the Duration class for representing time-line
amounts with nanosecond precision, such as '34.5 seconds'.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from tempus._internal.arith import floor_div, floor_mod
from tempus._internal.constants import (
    NANOS_PER_MILLISECOND,
    NANOS_PER_SECOND,
    SECONDS_PER_DAY,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
)

if TYPE_CHECKING:
    from tempus.core.instant import Instant


class Duration:
    """An exact amount of time with nanosecond precision.

    Duration is time-line based: one day is always 86,400 seconds. For
    calendar amounts such as '1 month' use Period.

    The internal representation is normalized such that:
    - `_nanos` is always in the range [0, 1_000_000_000)
    - `_seconds` carries the sign, so -0.5s is stored as (-1, 500_000_000)

    Attributes:
        seconds: The whole seconds, rounded toward negative infinity.
        nanos: The nanosecond adjustment [0, 1e9).

    Examples:
        >>> d = Duration.of_seconds(90)
        >>> d.seconds
        90
        >>> str(d)
        'PT1M30S'

        >>> d = Duration.of_millis(-500)
        >>> (d.seconds, d.nanos)
        (-1, 500000000)
    """

    __slots__ = ("_seconds", "_nanos")

    def __init__(self, seconds: int = 0, nanos: int = 0) -> None:
        """Create a Duration from seconds and a nanosecond adjustment.

        Both arguments may be any integer; the nanosecond part is folded
        into seconds with floor division.

        Examples:
            >>> Duration(1, 1_500_000_000)
            Duration(seconds=2, nanos=500000000)

            >>> Duration(0, -1)
            Duration(seconds=-1, nanos=999999999)
        """
        self._seconds: int = seconds + floor_div(nanos, NANOS_PER_SECOND)
        self._nanos: int = floor_mod(nanos, NANOS_PER_SECOND)

    @classmethod
    def zero(cls) -> Duration:
        """Return a zero-length duration."""
        return cls(0, 0)

    @classmethod
    def of_days(cls, days: int) -> Duration:
        """Create a Duration of standard 24-hour days."""
        return cls(days * SECONDS_PER_DAY)

    @classmethod
    def of_hours(cls, hours: int) -> Duration:
        """Create a Duration from a number of hours."""
        return cls(hours * SECONDS_PER_HOUR)

    @classmethod
    def of_minutes(cls, minutes: int) -> Duration:
        """Create a Duration from a number of minutes."""
        return cls(minutes * SECONDS_PER_MINUTE)

    @classmethod
    def of_seconds(cls, seconds: int, nano_adjustment: int = 0) -> Duration:
        """Create a Duration from seconds and an optional nanosecond adjustment.

        Args:
            seconds: Number of seconds (can be negative).
            nano_adjustment: Nanoseconds to add, any sign or magnitude.

        Examples:
            >>> Duration.of_seconds(3, -1)
            Duration(seconds=2, nanos=999999999)
        """
        return cls(seconds, nano_adjustment)

    @classmethod
    def of_millis(cls, millis: int) -> Duration:
        """Create a Duration from a number of milliseconds.

        Examples:
            >>> Duration.of_millis(1500)
            Duration(seconds=1, nanos=500000000)
        """
        return cls(0, millis * NANOS_PER_MILLISECOND)

    @classmethod
    def of_nanos(cls, nanos: int) -> Duration:
        """Create a Duration from a number of nanoseconds."""
        return cls(0, nanos)

    @classmethod
    def between(cls, start_inclusive: Instant, end_exclusive: Instant) -> Duration:
        """Return the exact Duration between two instants.

        The result is negative when the end is before the start.

        Examples:
            >>> from tempus.core.instant import Instant
            >>> Duration.between(Instant.of(10), Instant.of(12, 5))
            Duration(seconds=2, nanos=5)
        """
        return cls(
            end_exclusive.epoch_second - start_inclusive.epoch_second,
            end_exclusive.nano - start_inclusive.nano,
        )

    @property
    def seconds(self) -> int:
        """Return the whole seconds, rounded toward negative infinity."""
        return self._seconds

    @property
    def nanos(self) -> int:
        """Return the nanosecond adjustment, always in [0, 1e9)."""
        return self._nanos

    def is_zero(self) -> bool:
        """Return True if this duration is zero length."""
        return self._seconds == 0 and self._nanos == 0

    def is_negative(self) -> bool:
        """Return True if this duration is strictly negative."""
        return self._seconds < 0

    def is_positive(self) -> bool:
        """Return True if this duration is strictly positive."""
        return self._seconds > 0 or (self._seconds == 0 and self._nanos != 0)

    def plus(self, other: Duration) -> Duration:
        """Return the sum of this duration and another."""
        return Duration(self._seconds + other._seconds, self._nanos + other._nanos)

    def minus(self, other: Duration) -> Duration:
        """Return this duration with another subtracted."""
        return Duration(self._seconds - other._seconds, self._nanos - other._nanos)

    def plus_seconds(self, seconds: int) -> Duration:
        """Return a copy with the given number of seconds added."""
        if seconds == 0:
            return self
        return Duration(self._seconds + seconds, self._nanos)

    def plus_nanos(self, nanos: int) -> Duration:
        """Return a copy with the given number of nanoseconds added."""
        if nanos == 0:
            return self
        return Duration(self._seconds, self._nanos + nanos)

    def multiplied_by(self, multiplicand: int) -> Duration:
        """Return a copy multiplied by an integer scalar.

        Examples:
            >>> Duration.of_millis(1500).multiplied_by(3)
            Duration(seconds=4, nanos=500000000)
        """
        if multiplicand == 1:
            return self
        return Duration(0, self.to_nanos() * multiplicand)

    def negated(self) -> Duration:
        """Return a copy with the sign reversed."""
        return Duration(-self._seconds, -self._nanos)

    def abs(self) -> Duration:
        """Return a copy with a positive length."""
        return self.negated() if self.is_negative() else self

    def to_millis(self) -> int:
        """Return the total length in milliseconds, rounded toward negative infinity."""
        return floor_div(self.to_nanos(), NANOS_PER_MILLISECOND)

    def to_nanos(self) -> int:
        """Return the total length in nanoseconds."""
        return self._seconds * NANOS_PER_SECOND + self._nanos

    def compare_to(self, other: Duration) -> int:
        """Return -1, 0 or 1 as this duration is shorter, equal or longer."""
        if (self._seconds, self._nanos) < (other._seconds, other._nanos):
            return -1
        if (self._seconds, self._nanos) > (other._seconds, other._nanos):
            return 1
        return 0

    def is_equal_to(self, other: Duration) -> bool:
        """Return True if both durations have the same length."""
        return self.compare_to(other) == 0

    def __add__(self, other: object) -> Duration:
        if not isinstance(other, Duration):
            return NotImplemented
        return self.plus(other)

    def __sub__(self, other: object) -> Duration:
        if not isinstance(other, Duration):
            return NotImplemented
        return self.minus(other)

    def __mul__(self, other: object) -> Duration:
        if isinstance(other, bool) or not isinstance(other, int):
            return NotImplemented
        return self.multiplied_by(other)

    def __rmul__(self, other: object) -> Duration:
        return self.__mul__(other)

    def __neg__(self) -> Duration:
        return self.negated()

    def __pos__(self) -> Duration:
        return self

    def __abs__(self) -> Duration:
        return self.abs()

    def __eq__(self, other: object) -> bool:
        """Check equality with another Duration.

        Examples:
            >>> Duration.of_seconds(60) == Duration.of_minutes(1)
            True
        """
        if not isinstance(other, Duration):
            return NotImplemented
        return self._seconds == other._seconds and self._nanos == other._nanos

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self.compare_to(other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self.compare_to(other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self.compare_to(other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self.compare_to(other) >= 0

    def __hash__(self) -> int:
        return hash((self._seconds, self._nanos))

    def __bool__(self) -> bool:
        """Return True if this duration is non-zero."""
        return not self.is_zero()

    def __repr__(self) -> str:
        return f"Duration(seconds={self._seconds}, nanos={self._nanos})"

    def __str__(self) -> str:
        """Return the ISO-8601 representation, such as 'PT8H6M12.345S'.

        Every non-zero component of a negative duration carries its own
        minus sign.

        Examples:
            >>> str(Duration.zero())
            'PT0S'
            >>> str(Duration.of_seconds(3723))
            'PT1H2M3S'
            >>> str(Duration.of_millis(-90_500))
            'PT-1M-30.5S'
        """
        if self.is_zero():
            return "PT0S"

        total_nanos = self.to_nanos()
        sign = "-" if total_nanos < 0 else ""
        total_seconds, nanos = divmod(abs(total_nanos), NANOS_PER_SECOND)
        hours, remainder = divmod(total_seconds, SECONDS_PER_HOUR)
        minutes, seconds = divmod(remainder, SECONDS_PER_MINUTE)

        result = "PT"
        if hours:
            result += f"{sign}{hours}H"
        if minutes:
            result += f"{sign}{minutes}M"
        if seconds or nanos:
            result += f"{sign}{seconds}"
            if nanos:
                result += "." + f"{nanos:09d}".rstrip("0")
            result += "S"
        return result


__all__ = ["Duration"]
