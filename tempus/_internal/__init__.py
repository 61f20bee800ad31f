"""Internal utilities for Tempus.

This module contains private implementation details:
    - Floor-based arithmetic helpers
    - Validation decorators
    - Constants and magic numbers

Note: This module is not part of the public API.
"""

from __future__ import annotations

from tempus._internal.arith import check_year_in_range, floor_div, floor_mod
from tempus._internal.validation import (
    validate_day,
    validate_int,
    validate_month,
    validate_range,
    validate_year,
)

__all__: list[str] = [
    "check_year_in_range",
    "floor_div",
    "floor_mod",
    "validate_day",
    "validate_int",
    "validate_month",
    "validate_range",
    "validate_year",
]
