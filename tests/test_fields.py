"""Tests for field lookups and their use by the value types."""

from __future__ import annotations

from typing import Any

import pytest

from tempus import (
    FieldLookup,
    Fields,
    LocalDate,
    LocalTime,
    MissingFieldError,
    ValidationError,
)
from tempus.fields import (
    FIELD_NAMES,
    get_int_field,
    get_optional_int_field,
    to_int,
)


class TestFields:
    """Tests for the mapping-backed Fields lookup."""

    def test_mapping_and_keywords_merge(self) -> None:
        f = Fields({"year": 2024, "month": 1}, month=2)
        assert f.get_field("year") == 2024
        assert f.get_field("month") == 2

    def test_none_counts_as_absent(self) -> None:
        f = Fields(hour=10, second=None)
        assert f.has_field("hour")
        assert not f.has_field("second")
        assert "second" not in f
        assert "hour" in f

    def test_missing_required_field(self) -> None:
        with pytest.raises(MissingFieldError, match="missing required field: day"):
            Fields().get_field("day")

    def test_optional_field(self) -> None:
        f = Fields(nano=5)
        assert f.get_optional_field("nano") == 5
        assert f.get_optional_field("second") is None
        assert f.get_optional_field("second", 0) == 0

    def test_equality_and_repr(self) -> None:
        assert Fields(year=1, month=2) == Fields({"month": 2, "year": 1})
        assert repr(Fields(month=2, year=1)) == "Fields(month=2, year=1)"

    def test_satisfies_protocol(self) -> None:
        assert isinstance(Fields(), FieldLookup)

    def test_field_names(self) -> None:
        assert "time_zone_region" in FIELD_NAMES
        assert len(FIELD_NAMES) == 8


class TestToInt:
    """Tests for converting field values to integers."""

    @pytest.mark.parametrize(
        "value, expected",
        [(7, 7), ("07", 7), ("-44", -44), ("+12", 12), (" 3 ", 3)],
    )
    def test_accepted(self, value: Any, expected: int) -> None:
        assert to_int("field", value) == expected

    @pytest.mark.parametrize("value", ["", "1.5", "abc", "--1", "٣", True, 1.0, None])
    def test_rejected(self, value: Any) -> None:
        with pytest.raises(ValidationError, match="field"):
            to_int("field", value)

    def test_get_int_field(self) -> None:
        assert get_int_field(Fields(year="2024"), "year") == 2024
        with pytest.raises(MissingFieldError):
            get_int_field(Fields(), "year")

    def test_get_optional_int_field(self) -> None:
        assert get_optional_int_field(Fields(), "second") == 0
        assert get_optional_int_field(Fields(), "second", 30) == 30
        assert get_optional_int_field(Fields(second="09"), "second") == 9


class _DictLookup:
    """A FieldLookup that is not a Fields instance."""

    def __init__(self, values: dict[str, Any]) -> None:
        self.values = values

    def has_field(self, name: str) -> bool:
        return name in self.values

    def get_field(self, name: str) -> Any:
        if name not in self.values:
            raise MissingFieldError(f"missing required field: {name}")
        return self.values[name]

    def get_optional_field(self, name: str, default: Any = None) -> Any:
        return self.values.get(name, default)


class TestFromFields:
    """Tests for the from_fields factories with any FieldLookup."""

    def test_custom_lookup(self) -> None:
        lookup = _DictLookup({"year": "2024", "month": "02", "day": "29"})
        assert isinstance(lookup, FieldLookup)
        assert LocalDate.from_fields(lookup) == LocalDate.of(2024, 2, 29)

    def test_values_are_validated(self) -> None:
        with pytest.raises(ValidationError):
            LocalDate.from_fields(Fields(year=2023, month=2, day=29))
        with pytest.raises(ValidationError):
            LocalTime.from_fields(Fields(hour=24, minute=0))

    def test_optional_time_fields(self) -> None:
        t = LocalTime.from_fields(Fields(hour=1, minute=2, nano="000000500"))
        assert t == LocalTime.of(1, 2, 0, 500)
