"""Tests for the Duration class."""

from __future__ import annotations

import pytest

from tempus import Duration, Instant


class TestDurationConstruction:
    """Tests for Duration construction and normalization."""

    def test_zero(self) -> None:
        """Duration.zero() has no seconds and no nanos."""
        d = Duration.zero()
        assert d.seconds == 0
        assert d.nanos == 0
        assert d.is_zero()

    def test_nanos_carry_into_seconds(self) -> None:
        """Nanos of a second or more carry into seconds."""
        d = Duration(1, 1_500_000_000)
        assert d.seconds == 2
        assert d.nanos == 500_000_000

    def test_negative_nanos_borrow_from_seconds(self) -> None:
        """Negative nanos borrow a whole second; nanos stay non-negative."""
        d = Duration.of_seconds(0, -1)
        assert d.seconds == -1
        assert d.nanos == 999_999_999

    def test_unit_factories(self) -> None:
        """Factories convert their unit to seconds."""
        assert Duration.of_days(1).seconds == 86_400
        assert Duration.of_hours(2).seconds == 7_200
        assert Duration.of_minutes(3).seconds == 180
        assert Duration.of_millis(1_500) == Duration(1, 500_000_000)
        assert Duration.of_nanos(-1) == Duration(-1, 999_999_999)

    def test_between_instants(self) -> None:
        """Duration.between() is end minus start, signed."""
        start = Instant.of(10, 500)
        end = Instant.of(12, 200)
        assert Duration.between(start, end) == Duration(1, 999_999_700)
        assert Duration.between(end, start) == Duration(-2, 300)


class TestDurationPredicates:
    """Tests for sign predicates."""

    def test_positive(self) -> None:
        d = Duration.of_nanos(1)
        assert d.is_positive()
        assert not d.is_negative()
        assert not d.is_zero()

    def test_negative(self) -> None:
        d = Duration.of_nanos(-1)
        assert d.is_negative()
        assert not d.is_positive()

    def test_bool_is_non_zero(self) -> None:
        assert not Duration.zero()
        assert Duration.of_seconds(1)


class TestDurationArithmetic:
    """Tests for Duration arithmetic."""

    def test_plus_and_minus(self) -> None:
        a = Duration.of_millis(700)
        b = Duration.of_millis(600)
        assert a.plus(b) == Duration.of_millis(1_300)
        assert a.minus(b) == Duration.of_millis(100)
        assert b.minus(a) == Duration.of_millis(-100)

    def test_operators(self) -> None:
        a = Duration.of_seconds(90)
        assert a + Duration.of_seconds(30) == Duration.of_minutes(2)
        assert a - Duration.of_seconds(30) == Duration.of_minutes(1)
        assert a * 2 == Duration.of_minutes(3)
        assert 2 * a == Duration.of_minutes(3)
        assert -a == Duration.of_seconds(-90)
        assert abs(-a) == a

    def test_multiply_by_bool_is_rejected(self) -> None:
        with pytest.raises(TypeError):
            Duration.of_seconds(1) * True  # type: ignore[operator]

    def test_multiplied_by_negative(self) -> None:
        d = Duration.of_millis(1_500).multiplied_by(-3)
        assert d == Duration.of_millis(-4_500)

    def test_plus_seconds_and_nanos(self) -> None:
        d = Duration.zero().plus_seconds(5).plus_nanos(-1)
        assert d == Duration(4, 999_999_999)

    def test_to_millis_rounds_down(self) -> None:
        assert Duration.of_nanos(1_999_999).to_millis() == 1
        assert Duration.of_nanos(-1).to_millis() == -1

    def test_to_nanos(self) -> None:
        assert Duration(-1, 500_000_000).to_nanos() == -500_000_000


class TestDurationComparison:
    """Tests for Duration ordering."""

    def test_ordering(self) -> None:
        short = Duration.of_millis(-500)
        long = Duration.of_seconds(1)
        assert short < long
        assert long > short
        assert short.compare_to(long) == -1
        assert long.compare_to(short) == 1
        assert long.compare_to(Duration.of_millis(1_000)) == 0

    def test_equality_and_hash(self) -> None:
        assert Duration.of_minutes(1) == Duration.of_seconds(60)
        assert hash(Duration.of_minutes(1)) == hash(Duration.of_seconds(60))
        assert Duration.of_minutes(1).is_equal_to(Duration.of_seconds(60))

    def test_comparison_with_other_type(self) -> None:
        assert Duration.zero() != 0
        with pytest.raises(TypeError):
            Duration.zero() < 0  # type: ignore[operator]


class TestDurationString:
    """Tests for the ISO-8601 text form."""

    def test_zero(self) -> None:
        assert str(Duration.zero()) == "PT0S"

    def test_components(self) -> None:
        d = Duration.of_seconds(8 * 3600 + 6 * 60 + 12, 345_000_000)
        assert str(d) == "PT8H6M12.345S"

    def test_omits_zero_components(self) -> None:
        assert str(Duration.of_hours(25)) == "PT25H"
        assert str(Duration.of_seconds(61)) == "PT1M1S"

    def test_negative(self) -> None:
        assert str(Duration.of_millis(-90_500)) == "PT-1M-30.5S"
        assert str(Duration.of_nanos(-1)) == "PT-0.000000001S"

    def test_repr(self) -> None:
        assert repr(Duration.of_millis(-500)) == "Duration(seconds=-1, nanos=500000000)"
