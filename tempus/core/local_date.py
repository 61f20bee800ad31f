"""LocalDate class representing a calendar date.

This module provides the LocalDate class for dates in the proleptic
Gregorian (ISO) calendar, without a time or time-zone.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from tempus._internal.arith import check_year_in_range, floor_div, floor_mod
from tempus._internal.calendar import (
    MAX_EPOCH_DAY,
    MIN_EPOCH_DAY,
    day_of_year,
    days_in_month,
    days_in_year,
    epoch_day_to_day_of_week,
    epoch_day_to_ymd,
    is_leap_year,
    ymd_to_epoch_day,
)
from tempus._internal.constants import (
    DAYS_PER_WEEK,
    MAX_YEAR,
    MIN_YEAR,
    MONTHS_PER_YEAR,
)
from tempus._internal.validation import (
    validate_day,
    validate_int,
    validate_month,
    validate_year,
)
from tempus.arithmetic.comparisons import max_of, min_of
from tempus.core.period import Period
from tempus.errors import ArithmeticOverflowError, ValidationError
from tempus.units.day_of_week import DayOfWeek

if TYPE_CHECKING:
    from tempus.clock import Clock
    from tempus.core.local_date_time import LocalDateTime
    from tempus.core.local_time import LocalTime
    from tempus.fields import FieldLookup
    from tempus.zone.base import TimeZone


class LocalDate:
    """A date without a time-zone in the ISO-8601 calendar, such as 2007-12-03.

    The internal representation is the number of days since 1970-01-01
    (the epoch day); year, month and day are derived from it.

    Attributes:
        year: The year, from -999999 to 999999.
        month: The month (1-12).
        day: The day of the month (1-31).

    Examples:
        >>> d = LocalDate.of(2024, 1, 15)
        >>> d.year, d.month, d.day
        (2024, 1, 15)
        >>> d.to_epoch_day()
        19737

        >>> LocalDate.of(2024, 1, 31).plus_months(1)
        LocalDate(2024, 2, 29)
    """

    __slots__ = ("_epoch_day",)

    def __init__(self, year: int, month: int, day: int) -> None:
        """Create a LocalDate; equivalent to LocalDate.of().

        Raises:
            ValidationError: If any component is not an integer or is out
                of range.
        """
        validate_int("year", year)
        validate_int("month", month)
        validate_int("day", day)
        validate_year(year)
        validate_month(month)
        validate_day(year, month, day)
        self._epoch_day: int = ymd_to_epoch_day(year, month, day)

    @classmethod
    def _from_epoch_day(cls, epoch_day: int) -> LocalDate:
        """Create a LocalDate from a known-valid epoch day, bypassing validation."""
        instance = object.__new__(cls)
        instance._epoch_day = epoch_day
        return instance

    @classmethod
    def of(cls, year: int, month: int, day: int) -> LocalDate:
        """Create a LocalDate from year, month and day.

        Raises:
            ValidationError: If the year is out of range, the month is not
                1-12, or the day does not exist in that month.

        Examples:
            >>> LocalDate.of(2023, 2, 29)
            Traceback (most recent call last):
            ...
            ValidationError: day must be between 1 and 28 for 2023-02, got 29
        """
        return cls(year, month, day)

    @classmethod
    def of_epoch_day(cls, epoch_day: int) -> LocalDate:
        """Create a LocalDate from a day count since 1970-01-01.

        Raises:
            ValidationError: If the epoch day is outside the supported range.

        Examples:
            >>> LocalDate.of_epoch_day(-1)
            LocalDate(1969, 12, 31)
        """
        validate_int("epoch day", epoch_day)
        if epoch_day < MIN_EPOCH_DAY or epoch_day > MAX_EPOCH_DAY:
            raise ValidationError(
                f"epoch day must be between {MIN_EPOCH_DAY} and {MAX_EPOCH_DAY}, "
                f"got {epoch_day}"
            )
        return cls._from_epoch_day(epoch_day)

    @classmethod
    def of_year_day(cls, year: int, day_of_year: int) -> LocalDate:
        """Create a LocalDate from a year and a 1-based day of the year.

        Raises:
            ValidationError: If the day does not exist in that year.

        Examples:
            >>> LocalDate.of_year_day(2024, 60)
            LocalDate(2024, 2, 29)
        """
        validate_int("year", year)
        validate_int("day-of-year", day_of_year)
        validate_year(year)
        length = days_in_year(year)
        if day_of_year < 1 or day_of_year > length:
            raise ValidationError(
                f"day-of-year must be between 1 and {length} for {year}, "
                f"got {day_of_year}"
            )
        return cls._from_epoch_day(ymd_to_epoch_day(year, 1, 1) + day_of_year - 1)

    @classmethod
    def from_fields(cls, fields: FieldLookup) -> LocalDate:
        """Create a LocalDate from parsed year, month and day fields.

        Raises:
            MissingFieldError: If a field is absent.
            ValidationError: If a value is invalid.
        """
        from tempus.fields import DAY, MONTH, YEAR, get_int_field

        return cls.of(
            get_int_field(fields, YEAR),
            get_int_field(fields, MONTH),
            get_int_field(fields, DAY),
        )

    @classmethod
    def now(cls, zone: TimeZone, clock: Clock | None = None) -> LocalDate:
        """Return the current date in the given time-zone."""
        from tempus.core.local_date_time import LocalDateTime

        return LocalDateTime.now(zone, clock).date

    @classmethod
    def min(cls) -> LocalDate:
        """Return the earliest supported date, -999999-01-01."""
        return cls._from_epoch_day(MIN_EPOCH_DAY)

    @classmethod
    def max(cls) -> LocalDate:
        """Return the latest supported date, +999999-12-31."""
        return cls._from_epoch_day(MAX_EPOCH_DAY)

    @classmethod
    def epoch(cls) -> LocalDate:
        """Return 1970-01-01."""
        return cls._from_epoch_day(0)

    @classmethod
    def min_of(cls, *dates: LocalDate) -> LocalDate:
        """Return the earliest of the given dates.

        Raises:
            EmptyInputError: If no dates are given.
        """
        return min_of(dates, name="LocalDate.min_of")

    @classmethod
    def max_of(cls, *dates: LocalDate) -> LocalDate:
        """Return the latest of the given dates.

        Raises:
            EmptyInputError: If no dates are given.
        """
        return max_of(dates, name="LocalDate.max_of")

    @property
    def year(self) -> int:
        return epoch_day_to_ymd(self._epoch_day)[0]

    @property
    def month(self) -> int:
        return epoch_day_to_ymd(self._epoch_day)[1]

    @property
    def day(self) -> int:
        return epoch_day_to_ymd(self._epoch_day)[2]

    @property
    def day_of_week(self) -> DayOfWeek:
        """Return the ISO day of the week.

        Examples:
            >>> LocalDate.of(2024, 1, 15).day_of_week
            <DayOfWeek.MONDAY: 1>
        """
        return DayOfWeek(epoch_day_to_day_of_week(self._epoch_day))

    @property
    def day_of_year(self) -> int:
        """Return the day of the year (1-366)."""
        return day_of_year(*epoch_day_to_ymd(self._epoch_day))

    def to_ymd(self) -> tuple[int, int, int]:
        """Return (year, month, day) in a single conversion."""
        return epoch_day_to_ymd(self._epoch_day)

    def is_leap_year(self) -> bool:
        return is_leap_year(self.year)

    def length_of_month(self) -> int:
        """Return the number of days in this date's month."""
        year, month, _ = epoch_day_to_ymd(self._epoch_day)
        return days_in_month(year, month)

    def length_of_year(self) -> int:
        """Return 366 in a leap year, 365 otherwise."""
        return days_in_year(self.year)

    def to_epoch_day(self) -> int:
        """Return the number of days since 1970-01-01."""
        return self._epoch_day

    def with_year(self, year: int) -> LocalDate:
        """Return a copy with the year changed.

        February 29 becomes February 28 if the new year is not a leap year.

        Raises:
            ValidationError: If year is out of range.
        """
        validate_int("year", year)
        validate_year(year)
        _, month, day = epoch_day_to_ymd(self._epoch_day)
        return self._resolve(year, month, day)

    def with_month(self, month: int) -> LocalDate:
        """Return a copy with the month changed, clamping the day to the month's end.

        Raises:
            ValidationError: If month is not 1-12.

        Examples:
            >>> LocalDate.of(2021, 3, 31).with_month(4)
            LocalDate(2021, 4, 30)
        """
        validate_int("month", month)
        validate_month(month)
        year, _, day = epoch_day_to_ymd(self._epoch_day)
        return self._resolve(year, month, day)

    def with_day(self, day: int) -> LocalDate:
        """Return a copy with the day-of-month changed.

        Raises:
            ValidationError: If the day does not exist in this month.
        """
        year, month, _ = epoch_day_to_ymd(self._epoch_day)
        return LocalDate(year, month, day)

    def plus_years(self, years: int) -> LocalDate:
        """Return a copy with years added, clamping February 29 if needed.

        Raises:
            ArithmeticOverflowError: If the resulting year is out of range.
        """
        if years == 0:
            return self
        year, month, day = epoch_day_to_ymd(self._epoch_day)
        return self._resolve(check_year_in_range(year + years), month, day)

    def plus_months(self, months: int) -> LocalDate:
        """Return a copy with months added, clamping the day to the month's end.

        Raises:
            ArithmeticOverflowError: If the resulting year is out of range.

        Examples:
            >>> LocalDate.of(2021, 1, 31).plus_months(1)
            LocalDate(2021, 2, 28)
            >>> LocalDate.of(2020, 3, 31).plus_months(-1)
            LocalDate(2020, 2, 29)
        """
        if months == 0:
            return self
        year, month, day = epoch_day_to_ymd(self._epoch_day)
        total_months = year * MONTHS_PER_YEAR + (month - 1) + months
        new_year = check_year_in_range(floor_div(total_months, MONTHS_PER_YEAR))
        new_month = floor_mod(total_months, MONTHS_PER_YEAR) + 1
        return self._resolve(new_year, new_month, day)

    def plus_weeks(self, weeks: int) -> LocalDate:
        return self.plus_days(weeks * DAYS_PER_WEEK)

    def plus_days(self, days: int) -> LocalDate:
        """Return a copy with days added.

        Raises:
            ArithmeticOverflowError: If the result is out of range.

        Examples:
            >>> LocalDate.of(2023, 12, 31).plus_days(1)
            LocalDate(2024, 1, 1)
        """
        if days == 0:
            return self
        epoch_day = self._epoch_day + days
        if epoch_day < MIN_EPOCH_DAY or epoch_day > MAX_EPOCH_DAY:
            raise ArithmeticOverflowError(
                f"adding {days} days to {self} leaves the supported range "
                f"{MIN_YEAR} to {MAX_YEAR}"
            )
        return LocalDate._from_epoch_day(epoch_day)

    def plus_period(self, period: Period) -> LocalDate:
        """Return a copy with a Period added: years and months first, then days.

        Examples:
            >>> LocalDate.of(2024, 1, 31).plus_period(Period.of(0, 1, 1))
            LocalDate(2024, 3, 1)
        """
        return self.plus_months(period.to_total_months()).plus_days(period.days)

    def minus_years(self, years: int) -> LocalDate:
        return self.plus_years(-years)

    def minus_months(self, months: int) -> LocalDate:
        return self.plus_months(-months)

    def minus_weeks(self, weeks: int) -> LocalDate:
        return self.plus_weeks(-weeks)

    def minus_days(self, days: int) -> LocalDate:
        return self.plus_days(-days)

    def minus_period(self, period: Period) -> LocalDate:
        return self.plus_period(period.negated())

    def at_time(self, time: LocalTime) -> LocalDateTime:
        """Combine this date with a time of day."""
        from tempus.core.local_date_time import LocalDateTime

        return LocalDateTime(self, time)

    def days_until(self, other: LocalDate) -> int:
        """Return the number of days from this date to other (negative if earlier)."""
        return other._epoch_day - self._epoch_day

    def until(self, other: LocalDate) -> Period:
        """Return the Period from this date until other, end exclusive."""
        return Period.between(self, other)

    def compare_to(self, other: LocalDate) -> int:
        """Return -1, 0 or 1 as this date is before, equal to or after other."""
        if self._epoch_day < other._epoch_day:
            return -1
        if self._epoch_day > other._epoch_day:
            return 1
        return 0

    def is_equal_to(self, other: LocalDate) -> bool:
        return self._epoch_day == other._epoch_day

    def is_before(self, other: LocalDate) -> bool:
        return self._epoch_day < other._epoch_day

    def is_before_or_equal_to(self, other: LocalDate) -> bool:
        return self._epoch_day <= other._epoch_day

    def is_after(self, other: LocalDate) -> bool:
        return self._epoch_day > other._epoch_day

    def is_after_or_equal_to(self, other: LocalDate) -> bool:
        return self._epoch_day >= other._epoch_day

    @staticmethod
    def _resolve(year: int, month: int, day: int) -> LocalDate:
        """Build a date, clamping day to the last valid day of (year, month)."""
        day = min(day, days_in_month(year, month))
        return LocalDate._from_epoch_day(ymd_to_epoch_day(year, month, day))

    def __add__(self, other: object) -> LocalDate:
        if not isinstance(other, Period):
            return NotImplemented
        return self.plus_period(other)

    def __sub__(self, other: object) -> LocalDate:
        if not isinstance(other, Period):
            return NotImplemented
        return self.minus_period(other)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LocalDate):
            return NotImplemented
        return self._epoch_day == other._epoch_day

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, LocalDate):
            return NotImplemented
        return self._epoch_day < other._epoch_day

    def __le__(self, other: object) -> bool:
        if not isinstance(other, LocalDate):
            return NotImplemented
        return self._epoch_day <= other._epoch_day

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, LocalDate):
            return NotImplemented
        return self._epoch_day > other._epoch_day

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, LocalDate):
            return NotImplemented
        return self._epoch_day >= other._epoch_day

    def __hash__(self) -> int:
        return hash(self._epoch_day)

    def __bool__(self) -> bool:
        return True

    def __repr__(self) -> str:
        year, month, day = epoch_day_to_ymd(self._epoch_day)
        return f"LocalDate({year}, {month}, {day})"

    def __str__(self) -> str:
        """Return the ISO-8601 text, such as '2024-01-15'.

        Years outside 0000-9999 carry a sign.

        Examples:
            >>> str(LocalDate.of(-44, 3, 15))
            '-0044-03-15'
            >>> str(LocalDate.of(12345, 6, 7))
            '+12345-06-07'
        """
        year, month, day = epoch_day_to_ymd(self._epoch_day)
        if year < 0:
            year_text = f"-{-year:04d}"
        elif year > 9999:
            year_text = f"+{year}"
        else:
            year_text = f"{year:04d}"
        return f"{year_text}-{month:02d}-{day:02d}"


__all__ = ["LocalDate"]
