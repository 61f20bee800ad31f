"""TimeZoneOffset: a time-zone with a fixed offset from UTC."""

from __future__ import annotations

import datetime as _datetime
from typing import TYPE_CHECKING, ClassVar

from tempus._internal.constants import (
    MAX_OFFSET_SECONDS,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
)
from tempus.errors import TimezoneError
from tempus.zone.base import TimeZone

if TYPE_CHECKING:
    from tempus.core.instant import Instant


class TimeZoneOffset(TimeZone):
    """A fixed offset from UTC, between -18:00 and +18:00.

    The offset is stored in seconds; positive values are east of UTC.

    Examples:
        >>> TimeZoneOffset.of(5, 30).get_id()
        '+05:30'
        >>> TimeZoneOffset.of_total_seconds(-3600).total_seconds
        -3600
        >>> str(TimeZoneOffset.utc())
        'Z'
    """

    __slots__ = ("_total_seconds",)

    _utc_instance: ClassVar[TimeZoneOffset | None] = None

    def __init__(self, total_seconds: int) -> None:
        """Create an offset; equivalent to of_total_seconds().

        Raises:
            TimezoneError: If total_seconds is not an int or exceeds 18 hours.
        """
        if isinstance(total_seconds, bool) or not isinstance(total_seconds, int):
            raise TimezoneError(
                f"total_seconds must be an integer, got {type(total_seconds).__name__}"
            )
        if abs(total_seconds) > MAX_OFFSET_SECONDS:
            raise TimezoneError(
                f"time-zone offset {total_seconds} is outside the range "
                f"-{MAX_OFFSET_SECONDS} to {MAX_OFFSET_SECONDS} seconds"
            )
        self._total_seconds: int = total_seconds

    @classmethod
    def of(cls, hours: int, minutes: int = 0, seconds: int = 0) -> TimeZoneOffset:
        """Create an offset from hours, minutes and seconds.

        All non-zero components must have the same sign.

        Raises:
            TimezoneError: If the components are out of range or mix signs.

        Examples:
            >>> TimeZoneOffset.of(-5, -30).total_seconds
            -19800
        """
        if abs(minutes) > 59:
            raise TimezoneError(f"minutes must be between -59 and 59, got {minutes}")
        if abs(seconds) > 59:
            raise TimezoneError(f"seconds must be between -59 and 59, got {seconds}")

        components = (hours, minutes, seconds)
        if any(c > 0 for c in components) and any(c < 0 for c in components):
            raise TimezoneError(
                f"time-zone offset hours, minutes and seconds must share a sign, "
                f"got {hours}, {minutes}, {seconds}"
            )

        return cls(hours * SECONDS_PER_HOUR + minutes * SECONDS_PER_MINUTE + seconds)

    @classmethod
    def of_total_seconds(cls, total_seconds: int) -> TimeZoneOffset:
        return cls(total_seconds)

    @classmethod
    def utc(cls) -> TimeZoneOffset:
        """Return the UTC offset. All calls return the same instance."""
        if cls._utc_instance is None:
            cls._utc_instance = cls(0)
        return cls._utc_instance

    @property
    def total_seconds(self) -> int:
        """Return the offset from UTC in seconds."""
        return self._total_seconds

    def is_utc(self) -> bool:
        return self._total_seconds == 0

    def get_id(self) -> str:
        """Return 'Z' for UTC, otherwise '+HH:MM' or '+HH:MM:SS'."""
        if self._total_seconds == 0:
            return "Z"
        sign = "-" if self._total_seconds < 0 else "+"
        hours, remainder = divmod(abs(self._total_seconds), SECONDS_PER_HOUR)
        minutes, seconds = divmod(remainder, SECONDS_PER_MINUTE)
        result = f"{sign}{hours:02d}:{minutes:02d}"
        if seconds:
            result += f":{seconds:02d}"
        return result

    def get_offset(self, instant: Instant) -> int:
        return self._total_seconds

    def to_tzinfo(self) -> _datetime.timezone:
        """Return a datetime.timezone with the same fixed offset."""
        if self._total_seconds == 0:
            return _datetime.timezone.utc
        return _datetime.timezone(_datetime.timedelta(seconds=self._total_seconds))

    def __repr__(self) -> str:
        return f"TimeZoneOffset({self.get_id()!r})"


__all__ = ["TimeZoneOffset"]
