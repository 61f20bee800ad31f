"""Temporal units and enumerations.

This module provides:
    - DayOfWeek: ISO day-of-week enum (Monday=1 .. Sunday=7)
"""

from __future__ import annotations

from tempus.units.day_of_week import DayOfWeek

__all__: list[str] = [
    "DayOfWeek",
]
