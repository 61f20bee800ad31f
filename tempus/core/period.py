"""Period class representing a calendar-based amount of time.

This module provides the Period class for amounts such as '2 years,
3 months and 4 days'. Unlike Duration, a Period has no fixed length: one
month added to January 31 and to February 1 moves by different numbers
of days.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from tempus._internal.constants import DAYS_PER_WEEK, MONTHS_PER_YEAR

if TYPE_CHECKING:
    from tempus.core.local_date import LocalDate


def _trunc_divmod(value: int, divisor: int) -> tuple[int, int]:
    """Divide truncating toward zero, so the remainder keeps value's sign."""
    quotient = abs(value) // divisor
    if value < 0:
        quotient = -quotient
    return quotient, value - quotient * divisor


class Period:
    """A date-based amount of time in years, months and days.

    Each component is stored separately and may have either sign; no
    normalization happens unless normalized() is called.

    Attributes:
        years: The number of years.
        months: The number of months.
        days: The number of days.

    Examples:
        >>> p = Period.of(1, 2, 3)
        >>> str(p)
        'P1Y2M3D'

        >>> Period.of_months(14).normalized()
        Period(years=1, months=2, days=0)
    """

    __slots__ = ("_years", "_months", "_days")

    def __init__(self, years: int = 0, months: int = 0, days: int = 0) -> None:
        self._years: int = years
        self._months: int = months
        self._days: int = days

    @classmethod
    def of(cls, years: int, months: int, days: int) -> Period:
        """Create a Period from years, months and days."""
        return cls(years, months, days)

    @classmethod
    def zero(cls) -> Period:
        """Return the zero period."""
        return cls(0, 0, 0)

    @classmethod
    def of_years(cls, years: int) -> Period:
        return cls(years, 0, 0)

    @classmethod
    def of_months(cls, months: int) -> Period:
        return cls(0, months, 0)

    @classmethod
    def of_weeks(cls, weeks: int) -> Period:
        """Create a Period of the given number of seven-day weeks."""
        return cls(0, 0, weeks * DAYS_PER_WEEK)

    @classmethod
    def of_days(cls, days: int) -> Period:
        return cls(0, 0, days)

    @classmethod
    def between(cls, start_inclusive: LocalDate, end_exclusive: LocalDate) -> Period:
        """Return the Period between two dates, as months then remaining days.

        The start date is included and the end date excluded. The result is
        negative if the end is before the start, and all components then
        share that sign.

        Examples:
            >>> from tempus.core.local_date import LocalDate
            >>> Period.between(LocalDate.of(2020, 1, 15), LocalDate.of(2021, 3, 10))
            Period(years=1, months=1, days=23)
        """
        start, end = start_inclusive, end_exclusive
        total_months = (end.year * MONTHS_PER_YEAR + end.month) - (
            start.year * MONTHS_PER_YEAR + start.month
        )
        days = end.day - start.day

        if total_months > 0 and days < 0:
            total_months -= 1
            days = end.to_epoch_day() - start.plus_months(total_months).to_epoch_day()
        elif total_months < 0 and days > 0:
            total_months += 1
            days -= end.length_of_month()

        years, months = _trunc_divmod(total_months, MONTHS_PER_YEAR)
        return cls(years, months, days)

    @property
    def years(self) -> int:
        return self._years

    @property
    def months(self) -> int:
        return self._months

    @property
    def days(self) -> int:
        return self._days

    def is_zero(self) -> bool:
        """Return True if all three components are zero."""
        return self._years == 0 and self._months == 0 and self._days == 0

    def is_negative(self) -> bool:
        """Return True if any component is negative."""
        return self._years < 0 or self._months < 0 or self._days < 0

    def with_years(self, years: int) -> Period:
        return Period(years, self._months, self._days)

    def with_months(self, months: int) -> Period:
        return Period(self._years, months, self._days)

    def with_days(self, days: int) -> Period:
        return Period(self._years, self._months, days)

    def plus_years(self, years: int) -> Period:
        if years == 0:
            return self
        return Period(self._years + years, self._months, self._days)

    def plus_months(self, months: int) -> Period:
        if months == 0:
            return self
        return Period(self._years, self._months + months, self._days)

    def plus_days(self, days: int) -> Period:
        if days == 0:
            return self
        return Period(self._years, self._months, self._days + days)

    def plus(self, other: Period) -> Period:
        """Return the component-wise sum of two periods."""
        return Period(
            self._years + other._years,
            self._months + other._months,
            self._days + other._days,
        )

    def minus(self, other: Period) -> Period:
        """Return the component-wise difference of two periods."""
        return self.plus(other.negated())

    def negated(self) -> Period:
        return self.multiplied_by(-1)

    def multiplied_by(self, scalar: int) -> Period:
        """Return a copy with every component multiplied by scalar."""
        if scalar == 1:
            return self
        return Period(self._years * scalar, self._months * scalar, self._days * scalar)

    def normalized(self) -> Period:
        """Return a copy with months folded into years.

        Years and months end up with the same sign and months within
        -11..11. Days are left untouched.

        Examples:
            >>> Period.of(1, 15, 3).normalized()
            Period(years=2, months=3, days=3)
            >>> Period.of(1, -25, 0).normalized()
            Period(years=-1, months=-1, days=0)
        """
        years, months = _trunc_divmod(self.to_total_months(), MONTHS_PER_YEAR)
        if years == self._years and months == self._months:
            return self
        return Period(years, months, self._days)

    def to_total_months(self) -> int:
        """Return years * 12 + months, ignoring days."""
        return self._years * MONTHS_PER_YEAR + self._months

    def is_equal_to(self, other: Period) -> bool:
        return self == other

    def __add__(self, other: object) -> Period:
        if not isinstance(other, Period):
            return NotImplemented
        return self.plus(other)

    def __sub__(self, other: object) -> Period:
        if not isinstance(other, Period):
            return NotImplemented
        return self.minus(other)

    def __mul__(self, other: object) -> Period:
        if isinstance(other, bool) or not isinstance(other, int):
            return NotImplemented
        return self.multiplied_by(other)

    def __rmul__(self, other: object) -> Period:
        return self.__mul__(other)

    def __neg__(self) -> Period:
        return self.negated()

    def __eq__(self, other: object) -> bool:
        """Compare component-wise; P1Y and P12M are not equal."""
        if not isinstance(other, Period):
            return NotImplemented
        return (
            self._years == other._years
            and self._months == other._months
            and self._days == other._days
        )

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __hash__(self) -> int:
        return hash((self._years, self._months, self._days))

    def __bool__(self) -> bool:
        return not self.is_zero()

    def __repr__(self) -> str:
        return f"Period(years={self._years}, months={self._months}, days={self._days})"

    def __str__(self) -> str:
        """Return the ISO-8601 representation, such as 'P1Y2M3D'.

        Zero components are omitted; the zero period is 'P0D'.
        """
        if self.is_zero():
            return "P0D"
        result = "P"
        if self._years:
            result += f"{self._years}Y"
        if self._months:
            result += f"{self._months}M"
        if self._days:
            result += f"{self._days}D"
        return result


__all__ = ["Period"]
