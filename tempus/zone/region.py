"""TimeZoneRegion: a geographical time-zone backed by the IANA database.

Offsets are looked up through the standard-library ``zoneinfo`` module.
The ``tzdata`` distribution is a dependency so that the database is
available on hosts without system zone files.
"""

from __future__ import annotations

import datetime as _datetime
import functools
import logging
import zoneinfo
from importlib import resources
from typing import TYPE_CHECKING

from tempus._internal.constants import SECONDS_PER_DAY
from tempus.errors import TimezoneError
from tempus.zone.base import TimeZone

if TYPE_CHECKING:
    from tempus.core.instant import Instant
    from tempus.fields import FieldLookup

logger = logging.getLogger(__name__)

_EPOCH = _datetime.datetime(1970, 1, 1, tzinfo=_datetime.timezone.utc)

_UTC_MIN = _datetime.datetime.min.replace(tzinfo=_datetime.timezone.utc)
_UTC_MAX = _datetime.datetime.max.replace(tzinfo=_datetime.timezone.utc)

# One day of margin keeps the local result inside datetime's year 1-9999.
_MIN_LOOKUP_SECOND = int((_UTC_MIN - _EPOCH).total_seconds()) + SECONDS_PER_DAY
_MAX_LOOKUP_SECOND = int((_UTC_MAX - _EPOCH).total_seconds()) - SECONDS_PER_DAY


@functools.lru_cache(maxsize=None)
def _load_zone(region_id: str) -> zoneinfo.ZoneInfo:
    logger.debug("Loading time-zone region %s", region_id)
    return zoneinfo.ZoneInfo(region_id)


class TimeZoneRegion(TimeZone):
    """A geographical region where the same time-zone rules apply.

    Examples:
        >>> paris = TimeZoneRegion.of("Europe/Paris")
        >>> paris.get_id()
        'Europe/Paris'
    """

    __slots__ = ("_id", "_zone")

    def __init__(self, region_id: str, zone: zoneinfo.ZoneInfo) -> None:
        """Wrap an already-loaded ZoneInfo. Use of() to look up by id."""
        self._id: str = region_id
        self._zone: zoneinfo.ZoneInfo = zone

    @classmethod
    def of(cls, region_id: str) -> TimeZoneRegion:
        """Return the region with the given IANA identifier.

        Raises:
            TimezoneError: If the id is empty, looks like an offset, or is
                unknown to the time-zone database.

        Examples:
            >>> TimeZoneRegion.of("America/New_York").get_id()
            'America/New_York'
        """
        if not isinstance(region_id, str):
            raise TimezoneError(
                "time-zone region id must be a string, "
                f"got {type(region_id).__name__}"
            )
        if region_id == "" or region_id in ("Z", "z") or region_id[0] in "+-":
            raise TimezoneError(f"Invalid time-zone region id: {region_id!r}")

        try:
            zone = _load_zone(region_id)
        except (zoneinfo.ZoneInfoNotFoundError, ValueError, OSError) as e:
            raise TimezoneError(f"Unknown time-zone region: {region_id}") from e

        return cls(region_id, zone)

    @classmethod
    def from_fields(cls, fields: FieldLookup) -> TimeZoneRegion:
        """Return the region named by the time_zone_region field.

        Raises:
            MissingFieldError: If the field is absent.
            TimezoneError: If the region is unknown.
        """
        from tempus.fields import TIME_ZONE_REGION

        return cls.of(str(fields.get_field(TIME_ZONE_REGION)))

    @staticmethod
    def get_all_identifiers(include_obsolete: bool = False) -> frozenset[str]:
        """Return the region ids known to the time-zone database.

        By default only the ids listed for a country in ``zone.tab``, plus
        ``UTC``, are returned. Backward-compatibility links such as
        ``US/Eastern`` or ``GB`` are only included when include_obsolete
        is true.

        Examples:
            >>> "US/Eastern" in TimeZoneRegion.get_all_identifiers()
            False
            >>> "US/Eastern" in TimeZoneRegion.get_all_identifiers(True)
            True
        """
        identifiers = _all_identifiers()
        if include_obsolete:
            return identifiers
        current = {"UTC"}
        for ids in _identifiers_by_country().values():
            current.update(ids)
        return identifiers.intersection(current)

    @staticmethod
    def get_identifiers_for_country(country_code: str) -> frozenset[str]:
        """Return the region ids used in a country.

        Args:
            country_code: An ISO 3166-1 alpha-2 code, such as ``"FR"``.
                Case is ignored.

        Returns:
            The ids listed for the country, or an empty set if the code is
            unknown.

        Examples:
            >>> TimeZoneRegion.get_identifiers_for_country("fr")
            frozenset({'Europe/Paris'})
        """
        return _identifiers_by_country().get(country_code.upper(), frozenset())

    def get_id(self) -> str:
        return self._id

    def get_offset(self, instant: Instant) -> int:
        """Return the UTC offset in seconds in effect at the given instant.

        Instants beyond the range of datetime use the rules in effect at
        the nearest representable moment.
        """
        seconds = instant.epoch_second
        if seconds < _MIN_LOOKUP_SECOND or seconds > _MAX_LOOKUP_SECOND:
            clamped = min(max(seconds, _MIN_LOOKUP_SECOND), _MAX_LOOKUP_SECOND)
            logger.debug(
                "Clamping offset lookup for %s from epoch second %d to %d",
                self._id,
                seconds,
                clamped,
            )
            seconds = clamped

        utc = _EPOCH + _datetime.timedelta(seconds=seconds)
        offset = utc.astimezone(self._zone).utcoffset()
        if offset is None:
            raise TimezoneError(
                f"No offset available for time-zone region {self._id}"
            )
        return int(offset.total_seconds())

    def to_tzinfo(self) -> zoneinfo.ZoneInfo:
        """Return the underlying ZoneInfo."""
        return self._zone

    def __repr__(self) -> str:
        return f"TimeZoneRegion({self._id!r})"


@functools.lru_cache(maxsize=1)
def _all_identifiers() -> frozenset[str]:
    identifiers = frozenset(zoneinfo.available_timezones())
    logger.debug("Found %d time-zone region identifiers", len(identifiers))
    return identifiers


@functools.lru_cache(maxsize=1)
def _identifiers_by_country() -> dict[str, frozenset[str]]:
    # zone.tab: country code, coordinates, id, optional comment; tab separated.
    text = resources.files("tzdata.zoneinfo").joinpath("zone.tab").read_text(
        encoding="utf-8"
    )
    by_country: dict[str, set[str]] = {}
    for line in text.splitlines():
        if not line or line.startswith("#"):
            continue
        columns = line.split("\t")
        if len(columns) < 3:
            continue
        by_country.setdefault(columns[0], set()).add(columns[2])
    logger.debug("Read time-zone regions for %d countries", len(by_country))
    return {code: frozenset(ids) for code, ids in by_country.items()}


__all__ = ["TimeZoneRegion"]
