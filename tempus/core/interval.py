"""Interval class representing a span between two instants.

This module provides the Interval class for time spans with half-open
semantics [start, end): the start instant is included and the end
instant is excluded.
"""

from __future__ import annotations

from tempus.core.duration import Duration
from tempus.core.instant import Instant
from tempus.errors import ValidationError


class Interval:
    """A half-open span of time [start, end) between two instants.

    The end may equal the start, giving a zero-length interval. Such an
    interval contains no instant and no interval (not even itself), but
    still abuts any interval that starts or ends at the same instant.

    Attributes:
        start: Start of the interval (inclusive).
        end: End of the interval (exclusive).

    Examples:
        >>> morning = Interval(Instant.of(9 * 3600), Instant.of(10 * 3600))
        >>> Instant.of(9 * 3600) in morning
        True
        >>> Instant.of(10 * 3600) in morning  # End is exclusive
        False

        >>> later = Interval(Instant.of(10 * 3600), Instant.of(11 * 3600))
        >>> morning.abuts(later), morning.overlaps(later)
        (True, False)
    """

    __slots__ = ("_start", "_end")

    def __init__(self, start: Instant, end: Instant) -> None:
        """Create the interval [start, end).

        Raises:
            ValidationError: If end is before start.
        """
        if end.is_before(start):
            raise ValidationError(
                f"The end instant must not be before the start instant: "
                f"got start={start}, end={end}"
            )
        self._start: Instant = start
        self._end: Instant = end

    @classmethod
    def of(cls, start: Instant, end: Instant) -> Interval:
        return cls(start, end)

    @property
    def start(self) -> Instant:
        return self._start

    @property
    def end(self) -> Instant:
        return self._end

    @property
    def is_empty(self) -> bool:
        """Return True for a zero-length interval."""
        return self._start == self._end

    def with_start(self, start: Instant) -> Interval:
        """Return a copy with the start changed.

        Raises:
            ValidationError: If the new start is after the end.
        """
        return Interval(start, self._end)

    def with_end(self, end: Instant) -> Interval:
        """Return a copy with the end changed.

        Raises:
            ValidationError: If the new end is before the start.
        """
        return Interval(self._start, end)

    def duration(self) -> Duration:
        """Return the exact Duration from start to end."""
        return Duration.between(self._start, self._end)

    def overlaps(self, other: Interval) -> bool:
        """Return True if the two intervals share at least one instant.

        A zero-length interval overlaps an interval that strictly surrounds
        it, but not one that merely starts or ends at the same instant.
        """
        return self._start.is_before(other._end) and other._start.is_before(self._end)

    def abuts(self, other: Interval) -> bool:
        """Return True if one interval ends exactly where the other starts."""
        return other._end == self._start or self._end == other._start

    def contains(self, other: Interval) -> bool:
        """Return True if other lies entirely inside this interval.

        The other interval must start inside this one, so a zero-length
        interval contains nothing.

        Examples:
            >>> hour = Interval(Instant.of(0), Instant.of(3600))
            >>> hour.contains(Interval(Instant.of(0), Instant.of(0)))
            True
            >>> hour.contains(Interval(Instant.of(3600), Instant.of(3600)))
            False
        """
        return (
            self._start.is_before_or_equal_to(other._start)
            and other._start.is_before(self._end)
            and other._end.is_before_or_equal_to(self._end)
        )

    def contains_instant(self, instant: Instant) -> bool:
        """Return True if start <= instant < end."""
        return self._start.is_before_or_equal_to(instant) and instant.is_before(
            self._end
        )

    def gap(self, other: Interval) -> Interval | None:
        """Return the interval between two disjoint intervals, or None.

        There is no gap when the intervals overlap or abut.

        Examples:
            >>> a = Interval(Instant.of(3), Instant.of(7))
            >>> a.gap(Interval(Instant.of(8), Instant.of(8)))
            Interval(Instant(epoch_second=7, nano=0), Instant(epoch_second=8, nano=0))
            >>> a.gap(Interval(Instant.of(7), Instant.of(9))) is None
            True
        """
        if self._start.is_after(other._end):
            return Interval(other._end, self._start)
        if other._start.is_after(self._end):
            return Interval(self._end, other._start)
        return None

    def overlap(self, other: Interval) -> Interval | None:
        """Return the shared part of two overlapping intervals, or None."""
        if not self.overlaps(other):
            return None
        return Interval(
            Instant.max_of(self._start, other._start),
            Instant.min_of(self._end, other._end),
        )

    def cover(self, other: Interval) -> Interval:
        """Return the smallest interval containing both intervals.

        This is always defined, even when there is a gap between them.
        """
        return Interval(
            Instant.min_of(self._start, other._start),
            Instant.max_of(self._end, other._end),
        )

    def union(self, other: Interval) -> Interval | None:
        """Return the cover of two overlapping intervals, or None."""
        if not self.overlaps(other):
            return None
        return self.cover(other)

    def join(self, other: Interval) -> Interval | None:
        """Return the cover of two abutting intervals, or None."""
        if not self.abuts(other):
            return None
        return self.cover(other)

    def is_equal_to(self, other: Interval) -> bool:
        return self._start == other._start and self._end == other._end

    def __contains__(self, instant: object) -> bool:
        if not isinstance(instant, Instant):
            return False
        return self.contains_instant(instant)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Interval):
            return NotImplemented
        return self.is_equal_to(other)

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __hash__(self) -> int:
        return hash((self._start, self._end))

    def __bool__(self) -> bool:
        """Return True unless the interval has zero length."""
        return not self.is_empty

    def __repr__(self) -> str:
        return f"Interval({self._start!r}, {self._end!r})"

    def __str__(self) -> str:
        """Return '<start>/<end>' using the ISO-8601 text of each instant.

        Examples:
            >>> str(Interval(Instant.of(0), Instant.of(3600)))
            '1970-01-01T00:00Z/1970-01-01T01:00Z'
        """
        return f"{self._start}/{self._end}"


__all__ = ["Interval"]
