"""Operations shared across the temporal types.

Ordering helpers (from tempus.arithmetic.comparisons):
    - compare: Return -1, 0, or 1 for two values of one type
    - min_of, max_of: Earliest or latest of a non-empty sequence

Interval set operations (from tempus.arithmetic.range_ops):
    - merge_intervals: Fold overlapping or abutting intervals together
    - span_intervals: The single interval covering all inputs
    - find_gaps: The uncovered stretches between inputs
    - total_duration: Time covered by the inputs, counted once
"""

from __future__ import annotations

from tempus.arithmetic.comparisons import compare, max_of, min_of
from tempus.arithmetic.range_ops import (
    find_gaps,
    merge_intervals,
    span_intervals,
    total_duration,
)

__all__ = [
    # Ordering
    "compare",
    "min_of",
    "max_of",
    # Interval sets
    "merge_intervals",
    "span_intervals",
    "find_gaps",
    "total_duration",
]
