"""TimeZone base class.

A TimeZone answers one question: what is the offset from UTC, in seconds,
at a given Instant? Everything else (Instant <-> LocalDateTime conversion)
is built on that single query, so tests may substitute any subclass.
"""

from __future__ import annotations

import datetime as _datetime
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from tempus.core.instant import Instant
    from tempus.zone.offset import TimeZoneOffset


class TimeZone(ABC):
    """Abstract time-zone: either a fixed offset or a geographical region.

    Subclasses implement get_id(), get_offset() and to_tzinfo(). Two
    time-zones are equal when they have the same id.
    """

    __slots__ = ()

    @classmethod
    def utc(cls) -> TimeZoneOffset:
        """Return the UTC offset zone."""
        from tempus.zone.offset import TimeZoneOffset

        return TimeZoneOffset.utc()

    @abstractmethod
    def get_id(self) -> str:
        """Return the unique identifier, such as 'Z', '+02:00' or 'Europe/Paris'."""

    @abstractmethod
    def get_offset(self, instant: Instant) -> int:
        """Return the offset from UTC in seconds at the given instant."""

    @abstractmethod
    def to_tzinfo(self) -> _datetime.tzinfo:
        """Return the equivalent standard-library tzinfo object."""

    def is_equal_to(self, other: TimeZone) -> bool:
        return self.get_id() == other.get_id()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TimeZone):
            return NotImplemented
        return self.get_id() == other.get_id()

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __hash__(self) -> int:
        return hash(self.get_id())

    def __str__(self) -> str:
        return self.get_id()


__all__ = ["TimeZone"]
