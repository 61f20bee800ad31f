"""Tests for the Instant class."""

from __future__ import annotations

import pytest

from tempus import (
    ArithmeticOverflowError,
    Duration,
    EmptyInputError,
    FixedClock,
    Instant,
    LocalDateTime,
    TimeZoneOffset,
    ValidationError,
)
from tempus.core.instant import MAX_EPOCH_SECOND, MIN_EPOCH_SECOND


class TestInstantConstruction:
    """Tests for Instant construction."""

    def test_of(self) -> None:
        i = Instant.of(1_000, 123)
        assert i.epoch_second == 1_000
        assert i.nano == 123

    def test_nano_adjustment_is_normalized(self) -> None:
        """Any nano adjustment folds into seconds with floor division."""
        assert Instant.of(3, 1_000_000_001) == Instant.of(4, 1)
        assert Instant.of(0, -1) == Instant.of(-1, 999_999_999)
        assert Instant.of(0, -2_500_000_000) == Instant.of(-3, 500_000_000)

    def test_epoch(self) -> None:
        assert Instant.epoch() == Instant.of(0)

    def test_min_and_max_match_local_date_time_range(self) -> None:
        utc = TimeZoneOffset.utc()
        assert Instant.min() == LocalDateTime.min().to_instant(utc)
        assert Instant.max() == LocalDateTime.max().to_instant(utc)

    def test_out_of_range_raises(self) -> None:
        with pytest.raises(ArithmeticOverflowError):
            Instant.of(MAX_EPOCH_SECOND + 1)
        with pytest.raises(ArithmeticOverflowError):
            Instant.of(MIN_EPOCH_SECOND, -1)

    def test_now_uses_clock(self) -> None:
        clock = FixedClock(Instant.of(42, 7))
        assert Instant.now(clock) == Instant.of(42, 7)

    def test_now_without_clock_reads_system_time(self) -> None:
        assert Instant.now().is_after(Instant.of(1_600_000_000))


class TestInstantArithmetic:
    """Tests for Instant arithmetic."""

    def test_plus_duration(self) -> None:
        i = Instant.of(10, 900_000_000).plus(Duration.of_millis(200))
        assert i == Instant.of(11, 100_000_000)

    def test_minus_duration(self) -> None:
        i = Instant.of(10).minus(Duration.of_nanos(1))
        assert i == Instant.of(9, 999_999_999)

    def test_plus_units(self) -> None:
        i = Instant.epoch()
        assert i.plus_seconds(-1) == Instant.of(-1)
        assert i.plus_millis(1_500) == Instant.of(1, 500_000_000)
        assert i.plus_nanos(-1) == Instant.of(-1, 999_999_999)
        assert i.minus_seconds(5) == Instant.of(-5)
        assert i.minus_millis(1) == Instant.of(-1, 999_000_000)
        assert i.minus_nanos(1) == Instant.of(-1, 999_999_999)

    def test_operators(self) -> None:
        a = Instant.of(100)
        assert a + Duration.of_seconds(5) == Instant.of(105)
        assert a - Duration.of_seconds(5) == Instant.of(95)
        assert a - Instant.of(40) == Duration.of_seconds(60)

    def test_with_nano(self) -> None:
        assert Instant.of(5, 1).with_nano(9) == Instant.of(5, 9)
        with pytest.raises(ValidationError):
            Instant.of(5).with_nano(1_000_000_000)

    def test_with_epoch_second(self) -> None:
        assert Instant.of(5, 1).with_epoch_second(7) == Instant.of(7, 1)

    def test_to_epoch_millis(self) -> None:
        assert Instant.of(1, 999_999_999).to_epoch_millis() == 1_999
        assert Instant.of(-1, 500_000_000).to_epoch_millis() == -500

    def test_overflow_on_arithmetic(self) -> None:
        with pytest.raises(ArithmeticOverflowError):
            Instant.max().plus_nanos(1)


class TestInstantComparison:
    """Tests for Instant ordering."""

    def test_lexicographic_order(self) -> None:
        a = Instant.of(1, 999_999_999)
        b = Instant.of(2, 0)
        assert a < b
        assert a.is_before(b)
        assert b.is_after(a)
        assert a.is_before_or_equal_to(a)
        assert b.is_after_or_equal_to(b)
        assert a.compare_to(b) == -1
        assert b.compare_to(a) == 1
        assert a.compare_to(Instant.of(1, 999_999_999)) == 0

    def test_min_of_and_max_of(self) -> None:
        a, b, c = Instant.of(3), Instant.of(1), Instant.of(2)
        assert Instant.min_of(a, b, c) == b
        assert Instant.max_of(a, b, c) == a

    def test_min_of_empty_raises(self) -> None:
        with pytest.raises(EmptyInputError):
            Instant.min_of()
        with pytest.raises(EmptyInputError):
            Instant.max_of()

    def test_hashable(self) -> None:
        assert len({Instant.of(1), Instant.of(1, 0), Instant.of(2)}) == 2


class TestInstantString:
    """Tests for the ISO-8601 text form."""

    def test_epoch(self) -> None:
        assert str(Instant.epoch()) == "1970-01-01T00:00Z"

    def test_fraction(self) -> None:
        assert str(Instant.of(1, 100_000_000)) == "1970-01-01T00:00:01.1Z"

    def test_before_epoch(self) -> None:
        assert str(Instant.of(-1)) == "1969-12-31T23:59:59Z"
        assert str(Instant.of(0, -1)) == "1969-12-31T23:59:59.999999999Z"

    def test_at_time_zone(self) -> None:
        dt = Instant.of(0).at_time_zone(TimeZoneOffset.of(2))
        assert str(dt) == "1970-01-01T02:00"

    def test_repr(self) -> None:
        assert repr(Instant.of(1, 5)) == "Instant(epoch_second=1, nano=5)"
