"""Instant class representing a point on the time-line.

This module provides the Instant class, an epoch-second counter with a
nanosecond-of-second adjustment. Instants carry no calendar or time-zone;
they are converted to and from LocalDateTime through a TimeZone.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, overload

from tempus._internal.arith import floor_div, floor_mod
from tempus._internal.calendar import MAX_EPOCH_DAY, MIN_EPOCH_DAY
from tempus._internal.constants import (
    NANOS_PER_MILLISECOND,
    NANOS_PER_SECOND,
    SECONDS_PER_DAY,
)
from tempus.arithmetic.comparisons import max_of, min_of
from tempus.core.duration import Duration
from tempus.errors import ArithmeticOverflowError, ValidationError

if TYPE_CHECKING:
    from tempus.clock import Clock
    from tempus.core.local_date_time import LocalDateTime
    from tempus.zone.base import TimeZone

MIN_EPOCH_SECOND: int = MIN_EPOCH_DAY * SECONDS_PER_DAY
MAX_EPOCH_SECOND: int = MAX_EPOCH_DAY * SECONDS_PER_DAY + SECONDS_PER_DAY - 1


class Instant:
    """A point on the time-line, with nanosecond precision.

    Instants are ordered lexicographically by (epoch_second, nano). The
    nanosecond part is always normalized to [0, 999_999_999], so the
    instant half a second before the epoch is (-1, 500_000_000).

    The representable range is that of LocalDateTime.min() to
    LocalDateTime.max() at UTC; leaving it raises ArithmeticOverflowError.

    Attributes:
        epoch_second: Seconds since 1970-01-01T00:00:00Z.
        nano: Nanosecond of the second [0, 1e9).

    Examples:
        >>> i = Instant.of(1, 100_000_000)
        >>> str(i)
        '1970-01-01T00:00:01.1Z'

        >>> Instant.of(0, -1)
        Instant(epoch_second=-1, nano=999999999)
    """

    __slots__ = ("_epoch_second", "_nano")

    def __init__(self, epoch_second: int, nano: int = 0) -> None:
        """Create an Instant; equivalent to Instant.of()."""
        seconds = epoch_second + floor_div(nano, NANOS_PER_SECOND)
        if seconds < MIN_EPOCH_SECOND or seconds > MAX_EPOCH_SECOND:
            raise ArithmeticOverflowError(
                f"epoch second {seconds} is outside the supported range "
                f"{MIN_EPOCH_SECOND} to {MAX_EPOCH_SECOND}"
            )
        self._epoch_second: int = seconds
        self._nano: int = floor_mod(nano, NANOS_PER_SECOND)

    @classmethod
    def of(cls, epoch_second: int, nano_adjustment: int = 0) -> Instant:
        """Create an Instant from an epoch second and a nanosecond adjustment.

        The adjustment may have any sign or magnitude; it is folded into
        the seconds with floor division.

        Args:
            epoch_second: Seconds since 1970-01-01T00:00:00Z.
            nano_adjustment: Nanoseconds to add to epoch_second.

        Raises:
            ArithmeticOverflowError: If the result is out of range.

        Examples:
            >>> Instant.of(3, 1_000_000_001)
            Instant(epoch_second=4, nano=1)
        """
        return cls(epoch_second, nano_adjustment)

    @classmethod
    def epoch(cls) -> Instant:
        """Return 1970-01-01T00:00:00Z."""
        return cls(0, 0)

    @classmethod
    def min(cls) -> Instant:
        """Return the earliest representable instant."""
        return cls(MIN_EPOCH_SECOND, 0)

    @classmethod
    def max(cls) -> Instant:
        """Return the latest representable instant."""
        return cls(MAX_EPOCH_SECOND, NANOS_PER_SECOND - 1)

    @classmethod
    def now(cls, clock: Clock | None = None) -> Instant:
        """Return the current instant from the given clock.

        Args:
            clock: The clock to read. Defaults to a fresh SystemClock.
        """
        from tempus.clock import SystemClock

        if clock is None:
            clock = SystemClock()
        return clock.get_time()

    @classmethod
    def min_of(cls, *instants: Instant) -> Instant:
        """Return the earliest of the given instants.

        Raises:
            EmptyInputError: If no instants are given.
        """
        return min_of(instants, name="Instant.min_of")

    @classmethod
    def max_of(cls, *instants: Instant) -> Instant:
        """Return the latest of the given instants.

        Raises:
            EmptyInputError: If no instants are given.
        """
        return max_of(instants, name="Instant.max_of")

    @property
    def epoch_second(self) -> int:
        """Return the number of seconds since 1970-01-01T00:00:00Z."""
        return self._epoch_second

    @property
    def nano(self) -> int:
        """Return the nanosecond of the second [0, 1e9)."""
        return self._nano

    def to_epoch_millis(self) -> int:
        """Return milliseconds since the epoch, rounded toward negative infinity."""
        return self._epoch_second * 1000 + self._nano // NANOS_PER_MILLISECOND

    def with_epoch_second(self, epoch_second: int) -> Instant:
        """Return a copy with the epoch second replaced."""
        return Instant(epoch_second, self._nano)

    def with_nano(self, nano: int) -> Instant:
        """Return a copy with the nanosecond of the second replaced.

        Raises:
            ValidationError: If nano is outside [0, 999_999_999].
        """
        if nano < 0 or nano >= NANOS_PER_SECOND:
            raise ValidationError(
                f"nano must be between 0 and {NANOS_PER_SECOND - 1}, got {nano}"
            )
        return Instant(self._epoch_second, nano)

    def plus(self, duration: Duration) -> Instant:
        """Return a copy with the given Duration added."""
        if duration.is_zero():
            return self
        return Instant(
            self._epoch_second + duration.seconds,
            self._nano + duration.nanos,
        )

    def minus(self, duration: Duration) -> Instant:
        """Return a copy with the given Duration subtracted."""
        return self.plus(duration.negated())

    def plus_seconds(self, seconds: int) -> Instant:
        """Return a copy with the given number of seconds added."""
        if seconds == 0:
            return self
        return Instant(self._epoch_second + seconds, self._nano)

    def plus_millis(self, millis: int) -> Instant:
        """Return a copy with the given number of milliseconds added."""
        return self.plus_nanos(millis * NANOS_PER_MILLISECOND)

    def plus_nanos(self, nanos: int) -> Instant:
        """Return a copy with the given number of nanoseconds added."""
        if nanos == 0:
            return self
        return Instant(self._epoch_second, self._nano + nanos)

    def minus_seconds(self, seconds: int) -> Instant:
        """Return a copy with the given number of seconds subtracted."""
        return self.plus_seconds(-seconds)

    def minus_millis(self, millis: int) -> Instant:
        """Return a copy with the given number of milliseconds subtracted."""
        return self.plus_millis(-millis)

    def minus_nanos(self, nanos: int) -> Instant:
        """Return a copy with the given number of nanoseconds subtracted."""
        return self.plus_nanos(-nanos)

    def at_time_zone(self, zone: TimeZone) -> LocalDateTime:
        """Return the local date-time of this instant in the given zone."""
        from tempus.core.local_date_time import LocalDateTime

        return LocalDateTime.of_instant(self, zone)

    def compare_to(self, other: Instant) -> int:
        """Return -1, 0 or 1 as this instant is before, equal to or after other."""
        if self._epoch_second != other._epoch_second:
            return -1 if self._epoch_second < other._epoch_second else 1
        if self._nano != other._nano:
            return -1 if self._nano < other._nano else 1
        return 0

    def is_equal_to(self, other: Instant) -> bool:
        return self.compare_to(other) == 0

    def is_before(self, other: Instant) -> bool:
        return self.compare_to(other) < 0

    def is_before_or_equal_to(self, other: Instant) -> bool:
        return self.compare_to(other) <= 0

    def is_after(self, other: Instant) -> bool:
        return self.compare_to(other) > 0

    def is_after_or_equal_to(self, other: Instant) -> bool:
        return self.compare_to(other) >= 0

    def __add__(self, other: object) -> Instant:
        if not isinstance(other, Duration):
            return NotImplemented
        return self.plus(other)

    @overload
    def __sub__(self, other: Duration) -> Instant: ...

    @overload
    def __sub__(self, other: Instant) -> Duration: ...

    def __sub__(self, other: object) -> Instant | Duration:
        """Subtract a Duration (giving an Instant) or an Instant (giving a Duration).

        Examples:
            >>> Instant.of(10) - Instant.of(4)
            Duration(seconds=6, nanos=0)
        """
        if isinstance(other, Duration):
            return self.minus(other)
        if isinstance(other, Instant):
            return Duration.between(other, self)
        return NotImplemented

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return self._epoch_second == other._epoch_second and self._nano == other._nano

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return self.compare_to(other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return self.compare_to(other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return self.compare_to(other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return self.compare_to(other) >= 0

    def __hash__(self) -> int:
        return hash((self._epoch_second, self._nano))

    def __repr__(self) -> str:
        return f"Instant(epoch_second={self._epoch_second}, nano={self._nano})"

    def __str__(self) -> str:
        """Return the ISO-8601 UTC representation, always ending in 'Z'.

        Examples:
            >>> str(Instant.epoch())
            '1970-01-01T00:00Z'
            >>> str(Instant.of(-1))
            '1969-12-31T23:59:59Z'
        """
        from tempus.core.local_date_time import LocalDateTime
        from tempus.zone.offset import TimeZoneOffset

        return f"{LocalDateTime.of_instant(self, TimeZoneOffset.utc())}Z"


__all__ = ["Instant", "MIN_EPOCH_SECOND", "MAX_EPOCH_SECOND"]
