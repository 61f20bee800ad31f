"""Clocks: injectable sources of the current instant.

Every ``now()`` factory in Tempus takes an optional Clock. Passing a
FixedClock makes code that depends on the current time deterministic.

Examples:
    >>> from tempus.core.instant import Instant
    >>> clock = FixedClock(Instant.of(1_000_000_000))
    >>> Instant.now(clock)
    Instant(epoch_second=1000000000, nano=0)
"""

from __future__ import annotations

import time
from abc import ABC, abstractmethod

from tempus.core.duration import Duration
from tempus.core.instant import Instant


class Clock(ABC):
    """Abstract source of the current instant."""

    __slots__ = ()

    @abstractmethod
    def get_time(self) -> Instant:
        """Return the current instant according to this clock."""


class SystemClock(Clock):
    """Clock backed by the operating system's real-time clock."""

    __slots__ = ()

    def get_time(self) -> Instant:
        return Instant.of(0, time.time_ns())

    def __repr__(self) -> str:
        return "SystemClock()"


class FixedClock(Clock):
    """Clock that always returns the same instant.

    Examples:
        >>> clock = FixedClock(Instant.epoch())
        >>> clock.get_time() == clock.get_time()
        True
    """

    __slots__ = ("_instant",)

    def __init__(self, instant: Instant) -> None:
        self._instant: Instant = instant

    def get_time(self) -> Instant:
        return self._instant

    def __repr__(self) -> str:
        return f"FixedClock({self._instant})"


class OffsetClock(Clock):
    """Clock that adds a fixed Duration to another clock's time.

    Examples:
        >>> base = FixedClock(Instant.epoch())
        >>> OffsetClock(base, Duration.of_hours(1)).get_time()
        Instant(epoch_second=3600, nano=0)
    """

    __slots__ = ("_reference", "_offset")

    def __init__(self, reference: Clock, offset: Duration) -> None:
        self._reference: Clock = reference
        self._offset: Duration = offset

    @property
    def reference(self) -> Clock:
        return self._reference

    @property
    def offset(self) -> Duration:
        return self._offset

    def get_time(self) -> Instant:
        return self._reference.get_time().plus(self._offset)

    def __repr__(self) -> str:
        return f"OffsetClock({self._reference!r}, {self._offset})"


__all__ = ["Clock", "SystemClock", "FixedClock", "OffsetClock"]
