"""Edge case tests for Tempus.

This module tests boundary conditions, error handling, and edge cases
across the library, including the validation and calendar helpers and
the exception hierarchy.
"""

from __future__ import annotations

import logging

import pytest

from tempus import (
    ArithmeticOverflowError,
    DayOfWeek,
    Duration,
    EmptyInputError,
    Instant,
    LocalDate,
    LocalDateTime,
    LocalTime,
    MissingFieldError,
    TempusError,
    TimezoneError,
    ValidationError,
)
from tempus._internal.arith import check_year_in_range, floor_div, floor_mod
from tempus._internal.calendar import (
    MAX_EPOCH_DAY,
    MIN_EPOCH_DAY,
    days_in_month,
    epoch_day_to_ymd,
    is_leap_year,
    ymd_to_epoch_day,
)
from tempus._internal.constants import MAX_YEAR, MIN_YEAR
from tempus._internal.validation import validate_int, validate_range
from tempus.arithmetic.comparisons import compare, max_of, min_of


# ============================================================================
# Test Exception Hierarchy
# ============================================================================


class TestExceptionHierarchy:
    """Tests for the Tempus exception classes."""

    @pytest.mark.parametrize(
        "error",
        [
            ValidationError,
            TimezoneError,
            EmptyInputError,
            ArithmeticOverflowError,
            MissingFieldError,
        ],
    )
    def test_all_derive_from_tempus_error(self, error: type[Exception]) -> None:
        assert issubclass(error, TempusError)

    def test_timezone_error_is_validation_error(self) -> None:
        assert issubclass(TimezoneError, ValidationError)

    def test_overflow_is_not_validation_error(self) -> None:
        assert not issubclass(ArithmeticOverflowError, ValidationError)

    def test_catch_all(self) -> None:
        with pytest.raises(TempusError):
            LocalDate.of(2024, 2, 30)


# ============================================================================
# Test Validation Helpers
# ============================================================================


class TestValidateRangeDecorator:
    """Tests for the @validate_range decorator."""

    def test_accepts_boundaries(self) -> None:
        @validate_range(n=(1, 10))
        def in_range(n: int) -> int:
            return n

        assert in_range(1) == 1
        assert in_range(10) == 10

    def test_rejects_out_of_range(self) -> None:
        @validate_range(n=(1, 10))
        def in_range(n: int) -> int:
            return n

        with pytest.raises(ValidationError, match="n must be between 1 and 10, got 11"):
            in_range(11)
        with pytest.raises(ValidationError):
            in_range(n=0)

    def test_validates_defaults(self) -> None:
        @validate_range(n=(1, 10))
        def bad_default(n: int = 0) -> int:
            return n

        with pytest.raises(ValidationError):
            bad_default()

    def test_validate_int(self) -> None:
        assert validate_int("n", 5) == 5
        with pytest.raises(ValidationError, match="n must be an integer, got bool"):
            validate_int("n", True)
        with pytest.raises(ValidationError):
            validate_int("n", "5")


# ============================================================================
# Test Floor Arithmetic
# ============================================================================


class TestFloorArithmetic:
    """Tests for floor_div, floor_mod and check_year_in_range."""

    @pytest.mark.parametrize("a", [-86_401, -86_400, -1, 0, 1, 86_399, 86_400])
    def test_identity(self, a: int) -> None:
        assert floor_div(a, 86_400) * 86_400 + floor_mod(a, 86_400) == a
        assert 0 <= floor_mod(a, 86_400) < 86_400

    def test_negative(self) -> None:
        assert floor_div(-1, 86_400) == -1
        assert floor_mod(-1, 86_400) == 86_399

    def test_check_year_in_range(self) -> None:
        assert check_year_in_range(MAX_YEAR) == MAX_YEAR
        with pytest.raises(ArithmeticOverflowError):
            check_year_in_range(MAX_YEAR + 1)
        with pytest.raises(ArithmeticOverflowError):
            check_year_in_range(MIN_YEAR - 1)


# ============================================================================
# Test Calendar Helpers
# ============================================================================


class TestCalendar:
    """Tests for the proleptic Gregorian calendar helpers."""

    @pytest.mark.parametrize(
        "year, expected",
        [
            (2024, True),
            (2023, False),
            (2000, True),
            (1900, False),
            (0, True),
            (-4, True),
            (-1, False),
            (-100, False),
            (-400, True),
        ],
    )
    def test_is_leap_year(self, year: int, expected: bool) -> None:
        assert is_leap_year(year) is expected

    def test_days_in_month(self) -> None:
        assert days_in_month(2024, 2) == 29
        assert days_in_month(2023, 2) == 28
        assert days_in_month(2023, 4) == 30
        assert days_in_month(2023, 12) == 31

    def test_epoch_day_limits(self) -> None:
        assert epoch_day_to_ymd(MIN_EPOCH_DAY) == (MIN_YEAR, 1, 1)
        assert epoch_day_to_ymd(MAX_EPOCH_DAY) == (MAX_YEAR, 12, 31)

    def test_round_trip_near_cycle_boundaries(self) -> None:
        for epoch_day in range(-146_097 - 800, -146_097 + 800):
            assert ymd_to_epoch_day(*epoch_day_to_ymd(epoch_day)) == epoch_day
        for epoch_day in range(11_017 - 400, 11_017 + 400):
            assert ymd_to_epoch_day(*epoch_day_to_ymd(epoch_day)) == epoch_day


# ============================================================================
# Test DayOfWeek
# ============================================================================


class TestDayOfWeek:
    """Tests for the DayOfWeek enum."""

    def test_of(self) -> None:
        assert DayOfWeek.of(1) is DayOfWeek.MONDAY
        with pytest.raises(ValidationError):
            DayOfWeek.of(0)
        with pytest.raises(ValidationError):
            DayOfWeek.of(8)

    def test_weekend(self) -> None:
        assert DayOfWeek.SUNDAY.is_weekend
        assert not DayOfWeek.FRIDAY.is_weekend

    def test_plus_wraps(self) -> None:
        assert DayOfWeek.SUNDAY.plus(1) is DayOfWeek.MONDAY
        assert DayOfWeek.MONDAY.plus(-1) is DayOfWeek.SUNDAY
        assert DayOfWeek.WEDNESDAY.plus(14) is DayOfWeek.WEDNESDAY

    def test_str(self) -> None:
        assert str(DayOfWeek.THURSDAY) == "Thursday"

    def test_week_cycle_across_epoch(self) -> None:
        date = LocalDate.of(1969, 12, 1)
        for _ in range(70):
            assert date.plus_days(1).day_of_week is date.day_of_week.plus(1)
            date = date.plus_days(1)


# ============================================================================
# Test Range Limits
# ============================================================================


class TestRangeLimits:
    """Tests at the edges of the supported range."""

    def test_instant_range_matches_dates(self) -> None:
        assert Instant.min().epoch_second == MIN_EPOCH_DAY * 86_400
        assert Instant.max().epoch_second == MAX_EPOCH_DAY * 86_400 + 86_399
        assert Instant.max().nano == 999_999_999

    def test_min_max_strings(self) -> None:
        assert str(LocalDate.min()) == "-999999-01-01"
        assert str(LocalDate.max()) == "+999999-12-31"
        assert str(LocalDateTime.max()) == "+999999-12-31T23:59:59.999999999"

    def test_overflow_never_saturates(self) -> None:
        with pytest.raises(ArithmeticOverflowError):
            LocalDate.max().plus_years(1)
        with pytest.raises(ArithmeticOverflowError):
            Instant.min().minus_nanos(1)
        with pytest.raises(ArithmeticOverflowError):
            LocalDateTime.min().minus_duration(Duration.of_nanos(1))

    def test_time_wraps_instead_of_overflowing(self) -> None:
        assert LocalTime.max().plus_nanos(1) == LocalTime.min()


# ============================================================================
# Test Comparison Helpers
# ============================================================================


class TestComparisons:
    """Tests for compare, min_of and max_of."""

    def test_compare(self) -> None:
        assert compare(Duration.of_seconds(1), Duration.of_seconds(2)) == -1
        assert compare(Duration.of_seconds(2), Duration.of_seconds(2)) == 0
        assert compare(Duration.of_seconds(3), Duration.of_seconds(2)) == 1

    def test_ties_keep_first(self) -> None:
        first = LocalDateTime.of(2024, 1, 1)
        second = LocalDateTime.of(2024, 1, 1)
        assert min_of([first, second]) is first
        assert max_of([first, second]) is first

    def test_empty_message(self) -> None:
        with pytest.raises(EmptyInputError, match=r"Instant.max_of\(\) requires"):
            Instant.max_of()
        with pytest.raises(EmptyInputError, match=r"min_of\(\) requires"):
            min_of([])

    def test_accepts_generators(self) -> None:
        values = (Duration.of_seconds(n) for n in (3, 1, 2))
        assert min_of(values) == Duration.of_seconds(1)


# ============================================================================
# Test Logging
# ============================================================================


class TestLogging:
    """Tests for the library's logging setup."""

    def test_package_logger_has_null_handler(self) -> None:
        handlers = logging.getLogger("tempus").handlers
        assert any(isinstance(h, logging.NullHandler) for h in handlers)

    def test_region_load_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        from tempus import TimeZoneRegion
        from tempus.zone import region as region_module

        region_module._load_zone.cache_clear()
        with caplog.at_level(logging.DEBUG, logger="tempus.zone.region"):
            TimeZoneRegion.of("Europe/Lisbon")
        assert "Loading time-zone region Europe/Lisbon" in caplog.text
