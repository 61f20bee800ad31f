"""LocalDateTime class combining a LocalDate and a LocalTime.

This module provides the LocalDateTime class and the carry arithmetic
that folds excess hours, minutes, seconds and nanoseconds across day
boundaries back into the date.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, overload

from tempus._internal.arith import floor_div, floor_mod
from tempus._internal.calendar import MAX_EPOCH_DAY, MIN_EPOCH_DAY
from tempus._internal.constants import (
    HOURS_PER_DAY,
    MINUTES_PER_DAY,
    NANOS_PER_DAY,
    NANOS_PER_SECOND,
    SECONDS_PER_DAY,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
)
from tempus.arithmetic.comparisons import max_of, min_of
from tempus.core.duration import Duration
from tempus.core.instant import Instant
from tempus.core.local_date import LocalDate
from tempus.core.local_time import LocalTime
from tempus.core.period import Period
from tempus.errors import ArithmeticOverflowError
from tempus.units.day_of_week import DayOfWeek

if TYPE_CHECKING:
    from tempus.clock import Clock
    from tempus.fields import FieldLookup
    from tempus.zone.base import TimeZone


class LocalDateTime:
    """A date-time without a time-zone, such as 2007-12-03T10:15:30.

    Attributes:
        date: The LocalDate part.
        time: The LocalTime part.

    Examples:
        >>> dt = LocalDateTime.of(2024, 1, 15, 14, 30)
        >>> str(dt)
        '2024-01-15T14:30'

        >>> str(LocalDateTime.of(2024, 1, 15, 23, 0).plus_hours(2))
        '2024-01-16T01:00'
    """

    __slots__ = ("_date", "_time")

    def __init__(self, date: LocalDate, time: LocalTime) -> None:
        self._date: LocalDate = date
        self._time: LocalTime = time

    @classmethod
    def of(
        cls,
        year: int,
        month: int,
        day: int,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        nano: int = 0,
    ) -> LocalDateTime:
        """Create a LocalDateTime from its fields.

        Raises:
            ValidationError: If any field is out of range.

        Examples:
            >>> LocalDateTime.of(2007, 12, 3, 10, 15, 30)
            LocalDateTime(LocalDate(2007, 12, 3), LocalTime(10, 15, 30, nano=0))
        """
        return cls(
            LocalDate.of(year, month, day),
            LocalTime.of(hour, minute, second, nano),
        )

    @classmethod
    def of_instant(cls, instant: Instant, zone: TimeZone) -> LocalDateTime:
        """Return the local date-time of an instant in the given time-zone.

        Examples:
            >>> from tempus.zone.offset import TimeZoneOffset
            >>> str(LocalDateTime.of_instant(Instant.of(0), TimeZoneOffset.of(-1)))
            '1969-12-31T23:00'
        """
        seconds = instant.epoch_second + zone.get_offset(instant)
        epoch_day = floor_div(seconds, SECONDS_PER_DAY)
        second_of_day = floor_mod(seconds, SECONDS_PER_DAY)
        if epoch_day < MIN_EPOCH_DAY or epoch_day > MAX_EPOCH_DAY:
            raise ArithmeticOverflowError(
                f"{instant} at offset {zone} is outside the supported date range"
            )
        return cls(
            LocalDate._from_epoch_day(epoch_day),
            LocalTime.of_second_of_day(second_of_day, instant.nano),
        )

    @classmethod
    def from_fields(cls, fields: FieldLookup) -> LocalDateTime:
        """Create a LocalDateTime from parsed date and time fields.

        Raises:
            MissingFieldError: If a required field is absent.
            ValidationError: If a value is invalid.
        """
        return cls(LocalDate.from_fields(fields), LocalTime.from_fields(fields))

    @classmethod
    def now(cls, zone: TimeZone, clock: Clock | None = None) -> LocalDateTime:
        """Return the current date-time in the given time-zone."""
        return cls.of_instant(Instant.now(clock), zone)

    @classmethod
    def min(cls) -> LocalDateTime:
        """Return -999999-01-01T00:00."""
        return cls(LocalDate.min(), LocalTime.min())

    @classmethod
    def max(cls) -> LocalDateTime:
        """Return +999999-12-31T23:59:59.999999999."""
        return cls(LocalDate.max(), LocalTime.max())

    @classmethod
    def min_of(cls, *date_times: LocalDateTime) -> LocalDateTime:
        """Return the earliest of the given date-times.

        Raises:
            EmptyInputError: If no date-times are given.
        """
        return min_of(date_times, name="LocalDateTime.min_of")

    @classmethod
    def max_of(cls, *date_times: LocalDateTime) -> LocalDateTime:
        """Return the latest of the given date-times.

        Raises:
            EmptyInputError: If no date-times are given.
        """
        return max_of(date_times, name="LocalDateTime.max_of")

    @property
    def date(self) -> LocalDate:
        return self._date

    @property
    def time(self) -> LocalTime:
        return self._time

    @property
    def year(self) -> int:
        return self._date.year

    @property
    def month(self) -> int:
        return self._date.month

    @property
    def day(self) -> int:
        return self._date.day

    @property
    def day_of_week(self) -> DayOfWeek:
        return self._date.day_of_week

    @property
    def day_of_year(self) -> int:
        return self._date.day_of_year

    @property
    def hour(self) -> int:
        return self._time.hour

    @property
    def minute(self) -> int:
        return self._time.minute

    @property
    def second(self) -> int:
        return self._time.second

    @property
    def nano(self) -> int:
        return self._time.nano

    def with_date(self, date: LocalDate) -> LocalDateTime:
        if date == self._date:
            return self
        return LocalDateTime(date, self._time)

    def with_time(self, time: LocalTime) -> LocalDateTime:
        if time == self._time:
            return self
        return LocalDateTime(self._date, time)

    def with_year(self, year: int) -> LocalDateTime:
        """Return a copy with the year changed, clamping February 29 if needed."""
        return self.with_date(self._date.with_year(year))

    def with_month(self, month: int) -> LocalDateTime:
        """Return a copy with the month changed, clamping the day if needed."""
        return self.with_date(self._date.with_month(month))

    def with_day(self, day: int) -> LocalDateTime:
        return self.with_date(self._date.with_day(day))

    def with_hour(self, hour: int) -> LocalDateTime:
        return self.with_time(self._time.with_hour(hour))

    def with_minute(self, minute: int) -> LocalDateTime:
        return self.with_time(self._time.with_minute(minute))

    def with_second(self, second: int) -> LocalDateTime:
        return self.with_time(self._time.with_second(second))

    def with_nano(self, nano: int) -> LocalDateTime:
        return self.with_time(self._time.with_nano(nano))

    def plus_period(self, period: Period) -> LocalDateTime:
        """Return a copy with a Period added to the date part."""
        return self.with_date(self._date.plus_period(period))

    def minus_period(self, period: Period) -> LocalDateTime:
        return self.with_date(self._date.minus_period(period))

    def plus_duration(self, duration: Duration) -> LocalDateTime:
        """Return a copy with a Duration added, carrying into the date.

        Examples:
            >>> dt = LocalDateTime.of(2024, 1, 15, 23, 59, 59)
            >>> str(dt.plus_duration(Duration.of_seconds(2)))
            '2024-01-16T00:00:01'
        """
        if duration.is_zero():
            return self
        return self._plus_with_overflow(0, 0, duration.seconds, duration.nanos, 1)

    def minus_duration(self, duration: Duration) -> LocalDateTime:
        if duration.is_zero():
            return self
        return self._plus_with_overflow(0, 0, duration.seconds, duration.nanos, -1)

    def plus_years(self, years: int) -> LocalDateTime:
        return self.with_date(self._date.plus_years(years))

    def plus_months(self, months: int) -> LocalDateTime:
        """Return a copy with months added, clamping the day to the month's end.

        Examples:
            >>> str(LocalDateTime.of(2020, 1, 31).plus_months(1))
            '2020-02-29T00:00'
        """
        return self.with_date(self._date.plus_months(months))

    def plus_weeks(self, weeks: int) -> LocalDateTime:
        return self.with_date(self._date.plus_weeks(weeks))

    def plus_days(self, days: int) -> LocalDateTime:
        return self.with_date(self._date.plus_days(days))

    def plus_hours(self, hours: int) -> LocalDateTime:
        if hours == 0:
            return self
        return self._plus_with_overflow(hours, 0, 0, 0, 1)

    def plus_minutes(self, minutes: int) -> LocalDateTime:
        if minutes == 0:
            return self
        return self._plus_with_overflow(0, minutes, 0, 0, 1)

    def plus_seconds(self, seconds: int) -> LocalDateTime:
        if seconds == 0:
            return self
        return self._plus_with_overflow(0, 0, seconds, 0, 1)

    def plus_nanos(self, nanos: int) -> LocalDateTime:
        if nanos == 0:
            return self
        return self._plus_with_overflow(0, 0, 0, nanos, 1)

    def minus_years(self, years: int) -> LocalDateTime:
        return self.with_date(self._date.minus_years(years))

    def minus_months(self, months: int) -> LocalDateTime:
        return self.with_date(self._date.minus_months(months))

    def minus_weeks(self, weeks: int) -> LocalDateTime:
        return self.with_date(self._date.minus_weeks(weeks))

    def minus_days(self, days: int) -> LocalDateTime:
        return self.with_date(self._date.minus_days(days))

    def minus_hours(self, hours: int) -> LocalDateTime:
        if hours == 0:
            return self
        return self._plus_with_overflow(hours, 0, 0, 0, -1)

    def minus_minutes(self, minutes: int) -> LocalDateTime:
        if minutes == 0:
            return self
        return self._plus_with_overflow(0, minutes, 0, 0, -1)

    def minus_seconds(self, seconds: int) -> LocalDateTime:
        if seconds == 0:
            return self
        return self._plus_with_overflow(0, 0, seconds, 0, -1)

    def minus_nanos(self, nanos: int) -> LocalDateTime:
        if nanos == 0:
            return self
        return self._plus_with_overflow(0, 0, 0, nanos, -1)

    def _plus_with_overflow(
        self, hours: int, minutes: int, seconds: int, nanos: int, sign: int
    ) -> LocalDateTime:
        """Add (sign=1) or subtract (sign=-1) a time amount, carrying into the date.

        Each unit is split into whole days and an intra-day remainder with
        floor division, so increments of any size or sign are exact.

        Args:
            hours: Hours to add, any sign or magnitude.
            minutes: Minutes to add, any sign or magnitude.
            seconds: Seconds to add, any sign or magnitude.
            nanos: Nanoseconds to add, any sign or magnitude.
            sign: 1 to add, -1 to subtract.

        Raises:
            ArithmeticOverflowError: If the date leaves the supported range.
        """
        total_days = (
            floor_div(hours, HOURS_PER_DAY)
            + floor_div(minutes, MINUTES_PER_DAY)
            + floor_div(seconds, SECONDS_PER_DAY)
        ) * sign

        current_second_of_day = self._time.to_second_of_day()
        current_nano = self._time.nano

        total_seconds = (
            floor_mod(seconds, SECONDS_PER_DAY)
            + floor_mod(minutes, MINUTES_PER_DAY) * SECONDS_PER_MINUTE
            + floor_mod(hours, HOURS_PER_DAY) * SECONDS_PER_HOUR
        ) * sign + current_second_of_day

        total_nanos = nanos * sign + current_nano
        total_seconds += floor_div(total_nanos, NANOS_PER_SECOND)
        new_nano = floor_mod(total_nanos, NANOS_PER_SECOND)

        total_days += floor_div(total_seconds, SECONDS_PER_DAY)
        new_second_of_day = floor_mod(total_seconds, SECONDS_PER_DAY)

        if new_second_of_day == current_second_of_day and new_nano == current_nano:
            new_time = self._time
        else:
            new_time = LocalTime.of_second_of_day(new_second_of_day, new_nano)

        return LocalDateTime(self._date.plus_days(total_days), new_time)

    def truncated_to(self, unit: Duration) -> LocalDateTime:
        """Return a copy with the time truncated to a unit that divides a day."""
        return self.with_time(self._time.truncated_to(unit))

    def rounded_to(self, unit: Duration) -> LocalDateTime:
        """Return a copy with the time rounded half-up to a unit that divides a day.

        Rounding up to 24:00 moves to midnight of the next day.

        Raises:
            ValidationError: If the unit is not a valid rounding unit.
            ArithmeticOverflowError: If the next day is out of range.

        Examples:
            >>> late = LocalDateTime.of(2024, 1, 15, 23, 45)
            >>> str(late.rounded_to(Duration.of_hours(1)))
            '2024-01-16T00:00'
        """
        nano_of_day = self._time._rounded_nano_of_day(unit)
        if nano_of_day == NANOS_PER_DAY:
            return LocalDateTime(self._date.plus_days(1), LocalTime.midnight())
        return self.with_time(LocalTime.of_nano_of_day(nano_of_day))

    def to_epoch_second(self, zone: TimeZone) -> int:
        """Return the epoch second of this date-time in the given time-zone.

        The zone's offset is queried once, at the instant this date-time
        would be if it were UTC.

        Examples:
            >>> from tempus.zone.offset import TimeZoneOffset
            >>> LocalDateTime.of(1970, 1, 1, 1).to_epoch_second(TimeZoneOffset.of(1))
            0
        """
        seconds = (
            self._date.to_epoch_day() * SECONDS_PER_DAY
            + self._time.to_second_of_day()
        )
        return seconds - zone.get_offset(Instant.of(seconds, self._time.nano))

    def to_instant(self, zone: TimeZone) -> Instant:
        """Return the Instant this date-time represents in the given time-zone."""
        return Instant.of(self.to_epoch_second(zone), self._time.nano)

    def compare_to(self, other: LocalDateTime) -> int:
        """Return -1, 0 or 1 as this date-time is before, equal to or after other."""
        result = self._date.compare_to(other._date)
        if result != 0:
            return result
        return self._time.compare_to(other._time)

    def is_equal_to(self, other: LocalDateTime) -> bool:
        return self.compare_to(other) == 0

    def is_before(self, other: LocalDateTime) -> bool:
        return self.compare_to(other) < 0

    def is_before_or_equal_to(self, other: LocalDateTime) -> bool:
        return self.compare_to(other) <= 0

    def is_after(self, other: LocalDateTime) -> bool:
        return self.compare_to(other) > 0

    def is_after_or_equal_to(self, other: LocalDateTime) -> bool:
        return self.compare_to(other) >= 0

    def __add__(self, other: object) -> LocalDateTime:
        if isinstance(other, Duration):
            return self.plus_duration(other)
        if isinstance(other, Period):
            return self.plus_period(other)
        return NotImplemented

    @overload
    def __sub__(self, other: Duration) -> LocalDateTime: ...

    @overload
    def __sub__(self, other: Period) -> LocalDateTime: ...

    def __sub__(self, other: object) -> LocalDateTime:
        if isinstance(other, Duration):
            return self.minus_duration(other)
        if isinstance(other, Period):
            return self.minus_period(other)
        return NotImplemented

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LocalDateTime):
            return NotImplemented
        return self._date == other._date and self._time == other._time

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, LocalDateTime):
            return NotImplemented
        return self.compare_to(other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, LocalDateTime):
            return NotImplemented
        return self.compare_to(other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, LocalDateTime):
            return NotImplemented
        return self.compare_to(other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, LocalDateTime):
            return NotImplemented
        return self.compare_to(other) >= 0

    def __hash__(self) -> int:
        return hash((self._date, self._time))

    def __bool__(self) -> bool:
        return True

    def __repr__(self) -> str:
        return f"LocalDateTime({self._date!r}, {self._time!r})"

    def __str__(self) -> str:
        return f"{self._date}T{self._time}"


__all__ = ["LocalDateTime"]
