"""Core temporal types.

This module provides the fundamental temporal types:
    - Instant: Point on the time-line (epoch second + nano)
    - LocalDate: Calendar date in the proleptic Gregorian calendar
    - LocalTime: Time of day with nanosecond precision
    - LocalDateTime: Combined date and time, without a time-zone
    - Duration: Exact amount of time with nanosecond precision
    - Period: Calendar-based amount (years, months, days)
    - Interval: Half-open span between two instants [start, end)
"""

from __future__ import annotations

from tempus.core.duration import Duration
from tempus.core.instant import Instant
from tempus.core.period import Period
from tempus.core.local_time import LocalTime
from tempus.core.local_date import LocalDate
from tempus.core.local_date_time import LocalDateTime
from tempus.core.interval import Interval

__all__: list[str] = [
    "Duration",
    "Instant",
    "Interval",
    "LocalDate",
    "LocalDateTime",
    "LocalTime",
    "Period",
]
