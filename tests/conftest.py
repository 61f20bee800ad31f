"""Pytest configuration and fixtures for Tempus tests."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Add the parent directory to sys.path so tempus can be imported
# without needing to install the package
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from tempus.clock import FixedClock  # noqa: E402
from tempus.core.instant import Instant  # noqa: E402
from tempus.zone.offset import TimeZoneOffset  # noqa: E402
from tempus.zone.region import TimeZoneRegion  # noqa: E402


@pytest.fixture
def utc() -> TimeZoneOffset:
    """The UTC offset zone."""
    return TimeZoneOffset.utc()


@pytest.fixture
def fixed_clock() -> FixedClock:
    """A clock frozen at 2023-11-14T22:13:20Z."""
    return FixedClock(Instant.of(1_700_000_000))


@pytest.fixture
def paris() -> TimeZoneRegion:
    """The Europe/Paris region (CET/CEST)."""
    return TimeZoneRegion.of("Europe/Paris")
