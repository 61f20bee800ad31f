"""Tempus: immutable date and time values with a half-open interval algebra.

Tempus provides calendar arithmetic that is deterministic and free of
wall-clock side effects: the current time comes from an injected Clock
and time-zone rules from an injected TimeZone.

Core Types:
    Instant: Point on the time-line (epoch second, nano)
    LocalDate: Calendar date (year, month, day)
    LocalTime: Time of day (hour, minute, second, nano)
    LocalDateTime: Combined date and time without a time-zone
    Duration: Exact amount of time with nanosecond precision
    Period: Calendar-based amount (years, months, days)
    Interval: Half-open span between two instants [start, end)

Time-zones:
    TimeZone: Offset lookup capability
    TimeZoneOffset: Fixed offset from UTC
    TimeZoneRegion: IANA region backed by zoneinfo

Clocks:
    Clock, SystemClock, FixedClock, OffsetClock

Exceptions:
    TempusError: Base exception
    ValidationError: Invalid input values
    TimezoneError: Invalid time-zone
    EmptyInputError: min/max over no values
    ArithmeticOverflowError: Result outside the supported range
    MissingFieldError: Required field absent from a FieldLookup

Example:
    >>> from tempus import FixedClock, Instant, LocalDateTime, TimeZoneOffset
    >>> clock = FixedClock(Instant.of(1_700_000_000))
    >>> str(LocalDateTime.now(TimeZoneOffset.utc(), clock))
    '2023-11-14T22:13:20'
"""

from __future__ import annotations

import logging

__version__ = "0.1.0"

# Core types
from tempus.core.duration import Duration
from tempus.core.instant import Instant
from tempus.core.interval import Interval
from tempus.core.local_date import LocalDate
from tempus.core.local_date_time import LocalDateTime
from tempus.core.local_time import LocalTime
from tempus.core.period import Period

# Units
from tempus.units.day_of_week import DayOfWeek

# Time-zones
from tempus.zone.base import TimeZone
from tempus.zone.offset import TimeZoneOffset
from tempus.zone.region import TimeZoneRegion

# Clocks
from tempus.clock import Clock, FixedClock, OffsetClock, SystemClock

# Fields
from tempus.fields import FieldLookup, Fields

# Exceptions
from tempus.errors import (
    ArithmeticOverflowError,
    EmptyInputError,
    MissingFieldError,
    TempusError,
    TimezoneError,
    ValidationError,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__: list[str] = [
    "__version__",
    # Core types
    "Duration",
    "Instant",
    "Interval",
    "LocalDate",
    "LocalDateTime",
    "LocalTime",
    "Period",
    # Units
    "DayOfWeek",
    # Time-zones
    "TimeZone",
    "TimeZoneOffset",
    "TimeZoneRegion",
    # Clocks
    "Clock",
    "FixedClock",
    "OffsetClock",
    "SystemClock",
    # Fields
    "FieldLookup",
    "Fields",
    # Exceptions
    "TempusError",
    "ValidationError",
    "TimezoneError",
    "EmptyInputError",
    "ArithmeticOverflowError",
    "MissingFieldError",
]
