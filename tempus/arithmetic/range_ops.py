"""Set operations over collections of intervals.

This module provides utility functions for working with many intervals:
    - merge_intervals: Fold overlapping or abutting intervals together
    - span_intervals: The single interval covering all inputs
    - find_gaps: The uncovered stretches between inputs
    - total_duration: Time covered by the inputs, counted once

These complement the pairwise methods on Interval.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable

if TYPE_CHECKING:
    from tempus.core.duration import Duration
    from tempus.core.interval import Interval


def merge_intervals(intervals: Iterable[Interval]) -> list[Interval]:
    """Merge overlapping or abutting intervals into a minimal sorted list.

    Zero-length intervals are dropped.

    Examples:
        >>> from tempus.core.instant import Instant
        >>> from tempus.core.interval import Interval
        >>> a = Interval(Instant.of(0), Instant.of(10))
        >>> b = Interval(Instant.of(10), Instant.of(20))
        >>> c = Interval(Instant.of(30), Instant.of(40))
        >>> [str(i.duration()) for i in merge_intervals([c, b, a])]
        ['PT20S', 'PT10S']
    """
    non_empty = sorted(
        (i for i in intervals if not i.is_empty),
        key=lambda i: (i.start, i.end),
    )
    if not non_empty:
        return []

    result: list[Interval] = []
    current = non_empty[0]
    for interval in non_empty[1:]:
        if current.overlaps(interval) or current.abuts(interval):
            current = current.cover(interval)
        else:
            result.append(current)
            current = interval

    result.append(current)
    return result


def span_intervals(intervals: Iterable[Interval]) -> Interval | None:
    """Return the cover of all intervals, or None for no input.

    Gaps between the inputs are included in the result.
    """
    result: Interval | None = None
    for interval in intervals:
        result = interval if result is None else result.cover(interval)
    return result


def find_gaps(intervals: Iterable[Interval]) -> list[Interval]:
    """Return the gaps between the intervals, in order.

    Inputs are merged first, so overlapping or abutting intervals leave
    no gap.
    """
    merged = merge_intervals(intervals)
    gaps: list[Interval] = []
    for current, following in zip(merged, merged[1:]):
        gap = current.gap(following)
        if gap is not None:
            gaps.append(gap)
    return gaps


def total_duration(intervals: Iterable[Interval]) -> Duration:
    """Return the total time covered by the intervals, counting overlaps once."""
    from tempus.core.duration import Duration

    total = Duration.zero()
    for interval in merge_intervals(intervals):
        total = total.plus(interval.duration())
    return total


__all__ = [
    "merge_intervals",
    "span_intervals",
    "find_gaps",
    "total_duration",
]
