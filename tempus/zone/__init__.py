"""Time-zones.

This module provides:
    - TimeZone: abstract offset-lookup capability
    - TimeZoneOffset: fixed offset from UTC
    - TimeZoneRegion: IANA region backed by zoneinfo
"""

from __future__ import annotations

from tempus.zone.base import TimeZone
from tempus.zone.offset import TimeZoneOffset
from tempus.zone.region import TimeZoneRegion

__all__: list[str] = [
    "TimeZone",
    "TimeZoneOffset",
    "TimeZoneRegion",
]
