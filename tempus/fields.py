"""Field lookup: the hand-off point between a parser and the value types.

A parser that has already split text such as ``2024-02-29T10:15`` into
named parts exposes them through a FieldLookup. LocalDate, LocalTime,
LocalDateTime and TimeZoneRegion each read the fields they need through
their ``from_fields`` factory and validate the values themselves.

Examples:
    >>> from tempus.core.local_date import LocalDate
    >>> LocalDate.from_fields(Fields(year=2024, month="02", day="29"))
    LocalDate(2024, 2, 29)
"""

from __future__ import annotations

from typing import Any, Mapping, Protocol, runtime_checkable

from tempus.errors import MissingFieldError, ValidationError

YEAR = "year"
MONTH = "month"
DAY = "day"
HOUR = "hour"
MINUTE = "minute"
SECOND = "second"
NANO = "nano"
TIME_ZONE_REGION = "time_zone_region"

FIELD_NAMES: frozenset[str] = frozenset(
    {YEAR, MONTH, DAY, HOUR, MINUTE, SECOND, NANO, TIME_ZONE_REGION}
)

_MISSING = object()


@runtime_checkable
class FieldLookup(Protocol):
    """Read access to named, already-extracted field values."""

    def has_field(self, name: str) -> bool: ...

    def get_field(self, name: str) -> Any: ...

    def get_optional_field(self, name: str, default: Any = None) -> Any: ...


class Fields:
    """A FieldLookup backed by a mapping.

    Values are stored as given; integers and decimal strings are both
    accepted by the value types. A field set to None counts as absent.

    Examples:
        >>> f = Fields({"hour": "10"}, minute=15)
        >>> f.get_field("hour")
        '10'
        >>> f.has_field("second")
        False
    """

    __slots__ = ("_values",)

    def __init__(self, values: Mapping[str, Any] | None = None, **kwargs: Any) -> None:
        merged = dict(values or {})
        merged.update(kwargs)
        self._values: dict[str, Any] = {
            name: value for name, value in merged.items() if value is not None
        }

    def has_field(self, name: str) -> bool:
        return name in self._values

    def get_field(self, name: str) -> Any:
        """Return the value of a required field.

        Raises:
            MissingFieldError: If the field is absent.
        """
        try:
            return self._values[name]
        except KeyError:
            raise MissingFieldError(f"missing required field: {name}") from None

    def get_optional_field(self, name: str, default: Any = None) -> Any:
        return self._values.get(name, default)

    def __contains__(self, name: object) -> bool:
        return name in self._values

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Fields):
            return NotImplemented
        return self._values == other._values

    def __repr__(self) -> str:
        items = ", ".join(f"{k}={v!r}" for k, v in sorted(self._values.items()))
        return f"Fields({items})"


def to_int(name: str, value: Any) -> int:
    """Convert a field value (int or decimal string) to an int.

    Raises:
        ValidationError: If the value is neither an int nor a decimal string.

    Examples:
        >>> to_int("month", "07")
        7
        >>> to_int("year", -44)
        -44
    """
    if isinstance(value, bool):
        raise ValidationError(f"{name} must be an integer, got bool")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        text = value.strip()
        digits = text[1:] if text[:1] in ("+", "-") else text
        if digits.isdigit() and digits.isascii():
            return int(text)
        raise ValidationError(f"{name} must be a decimal integer, got {value!r}")
    raise ValidationError(
        f"{name} must be an integer or decimal string, got {type(value).__name__}"
    )


def get_int_field(lookup: FieldLookup, name: str) -> int:
    """Return a required field of lookup as an int.

    Raises:
        MissingFieldError: If the field is absent.
        ValidationError: If the value is not an integer.
    """
    return to_int(name, lookup.get_field(name))


def get_optional_int_field(lookup: FieldLookup, name: str, default: int = 0) -> int:
    """Return an optional field of lookup as an int, or default when absent."""
    value = lookup.get_optional_field(name, _MISSING)
    if value is _MISSING or value is None:
        return default
    return to_int(name, value)


__all__ = [
    "YEAR",
    "MONTH",
    "DAY",
    "HOUR",
    "MINUTE",
    "SECOND",
    "NANO",
    "TIME_ZONE_REGION",
    "FIELD_NAMES",
    "FieldLookup",
    "Fields",
    "to_int",
    "get_int_field",
    "get_optional_int_field",
]
