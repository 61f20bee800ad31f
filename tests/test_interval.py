"""Tests for the Interval class."""

from __future__ import annotations

import pytest

from tempus import Duration, Instant, Interval, ValidationError


def at(hour: int, minute: int = 0) -> Instant:
    """Instant at the given wall-clock time on 1970-01-01 UTC."""
    return Instant.of(hour * 3600 + minute * 60)


def span(start: tuple[int, int], end: tuple[int, int]) -> Interval:
    return Interval(at(*start), at(*end))


class TestIntervalConstruction:
    """Tests for Interval construction."""

    def test_start_and_end(self) -> None:
        i = Interval.of(at(9), at(10))
        assert i.start == at(9)
        assert i.end == at(10)

    def test_end_before_start_raises(self) -> None:
        with pytest.raises(
            ValidationError, match="end instant must not be before the start instant"
        ):
            Interval(at(10), at(9))

    def test_zero_length_is_allowed(self) -> None:
        i = Interval(at(9), at(9))
        assert i.is_empty
        assert not i
        assert i.duration() == Duration.zero()

    def test_with_start_and_end(self) -> None:
        i = span((9, 0), (10, 0))
        assert i.with_start(at(8)) == span((8, 0), (10, 0))
        assert i.with_end(at(11)) == span((9, 0), (11, 0))
        with pytest.raises(ValidationError):
            i.with_start(at(11))
        with pytest.raises(ValidationError):
            i.with_end(at(8))

    def test_duration(self) -> None:
        assert span((9, 0), (10, 30)).duration() == Duration.of_minutes(90)


class TestIntervalContainsInstant:
    """Tests for contains_instant() and the in operator."""

    @pytest.mark.parametrize(
        "instant, expected",
        [
            (at(11, 59), False),
            (at(12, 0), True),
            (at(12, 30), True),
            (Instant.of(13 * 3600 - 1, 999_999_999), True),
            (at(13, 0), False),
            (at(14, 0), False),
        ],
    )
    def test_half_open(self, instant: Instant, expected: bool) -> None:
        i = span((12, 0), (13, 0))
        assert i.contains_instant(instant) is expected
        assert (instant in i) is expected

    def test_empty_contains_nothing(self) -> None:
        i = span((12, 0), (12, 0))
        assert not i.contains_instant(at(12))

    def test_in_with_other_type(self) -> None:
        assert "12:00" not in span((12, 0), (13, 0))


class TestIntervalContains:
    """Tests for contains() with another interval."""

    @pytest.mark.parametrize(
        "other, expected",
        [
            (((9, 0), (10, 0)), False),
            (((11, 0), (12, 0)), False),
            (((11, 0), (12, 30)), False),
            (((12, 0), (12, 0)), True),
            (((12, 0), (12, 30)), True),
            (((12, 0), (13, 0)), True),
            (((12, 15), (12, 45)), True),
            (((12, 30), (13, 0)), True),
            (((12, 30), (13, 30)), False),
            (((13, 0), (13, 0)), False),
            (((13, 0), (14, 0)), False),
            (((11, 0), (14, 0)), False),
        ],
    )
    def test_contains(
        self, other: tuple[tuple[int, int], tuple[int, int]], expected: bool
    ) -> None:
        assert span((12, 0), (13, 0)).contains(span(*other)) is expected

    def test_empty_contains_nothing(self) -> None:
        empty = span((12, 0), (12, 0))
        assert not empty.contains(empty)
        assert not empty.contains(span((11, 0), (13, 0)))


class TestIntervalOverlapsAndAbuts:
    """Tests for overlaps() and abuts()."""

    @pytest.mark.parametrize(
        "other, overlaps, abuts",
        [
            (((9, 0), (11, 0)), False, False),
            (((11, 0), (12, 0)), False, True),
            (((11, 0), (12, 30)), True, False),
            (((12, 0), (12, 0)), False, True),
            (((12, 30), (12, 30)), True, False),
            (((12, 0), (13, 0)), True, False),
            (((12, 30), (14, 0)), True, False),
            (((13, 0), (13, 0)), False, True),
            (((13, 0), (14, 0)), False, True),
            (((14, 0), (15, 0)), False, False),
            (((11, 0), (14, 0)), True, False),
        ],
    )
    def test_table(
        self,
        other: tuple[tuple[int, int], tuple[int, int]],
        overlaps: bool,
        abuts: bool,
    ) -> None:
        base = span((12, 0), (13, 0))
        candidate = span(*other)
        assert base.overlaps(candidate) is overlaps
        assert candidate.overlaps(base) is overlaps
        assert base.abuts(candidate) is abuts
        assert candidate.abuts(base) is abuts


class TestIntervalGap:
    """Tests for gap()."""

    def test_gap_after(self) -> None:
        assert span((3, 0), (7, 0)).gap(span((8, 0), (8, 0))) == span((7, 0), (8, 0))

    def test_gap_before(self) -> None:
        assert span((8, 0), (9, 0)).gap(span((3, 0), (7, 0))) == span((7, 0), (8, 0))

    def test_no_gap_when_abutting_or_overlapping(self) -> None:
        a = span((3, 0), (7, 0))
        assert a.gap(span((7, 0), (9, 0))) is None
        assert a.gap(span((6, 0), (9, 0))) is None


class TestIntervalOverlap:
    """Tests for overlap()."""

    def test_overlap_is_symmetric(self) -> None:
        a = span((3, 0), (7, 0))
        b = span((6, 0), (8, 0))
        assert a.overlap(b) == span((6, 0), (7, 0))
        assert b.overlap(a) == span((6, 0), (7, 0))

    def test_contained(self) -> None:
        outer = span((3, 0), (9, 0))
        inner = span((4, 0), (5, 0))
        assert outer.overlap(inner) == inner

    def test_no_overlap(self) -> None:
        assert span((3, 0), (7, 0)).overlap(span((7, 0), (8, 0))) is None


class TestIntervalCoverUnionJoin:
    """Tests for cover(), union() and join()."""

    def test_cover_spans_gap(self) -> None:
        assert span((3, 0), (7, 0)).cover(span((8, 0), (8, 0))) == span((3, 0), (8, 0))

    def test_union_requires_overlap(self) -> None:
        a = span((3, 0), (7, 0))
        assert a.union(span((6, 0), (9, 0))) == span((3, 0), (9, 0))
        assert a.union(span((7, 0), (9, 0))) is None

    def test_join_requires_abutting(self) -> None:
        a = span((3, 0), (7, 0))
        assert a.join(span((7, 0), (9, 0))) == span((3, 0), (9, 0))
        assert span((7, 0), (9, 0)).join(a) == span((3, 0), (9, 0))
        assert a.join(span((6, 0), (9, 0))) is None


class TestIntervalEquality:
    """Tests for equality, hashing and text forms."""

    def test_equality(self) -> None:
        assert span((1, 0), (2, 0)) == span((1, 0), (2, 0))
        assert span((1, 0), (2, 0)).is_equal_to(span((1, 0), (2, 0)))
        assert span((1, 0), (2, 0)) != span((1, 0), (3, 0))
        assert span((1, 0), (2, 0)) != (at(1), at(2))

    def test_hash(self) -> None:
        assert len({span((1, 0), (2, 0)), span((1, 0), (2, 0))}) == 1

    def test_str(self) -> None:
        i = Interval(Instant.of(0), Instant.of(3600, 500_000_000))
        assert str(i) == "1970-01-01T00:00Z/1970-01-01T01:00:00.5Z"

    def test_repr(self) -> None:
        assert repr(Interval(Instant.of(0), Instant.of(1))) == (
            "Interval(Instant(epoch_second=0, nano=0), "
            "Instant(epoch_second=1, nano=0))"
        )
