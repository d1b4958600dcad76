"""
Tests for value access and coercion helpers.

Date: 2026-02-10
"""

import math
from datetime import date, datetime, timezone
from types import SimpleNamespace

from gridcore.core.pipeline.values import (
    get_field,
    strict_equals,
    stringify,
    to_number,
    to_timestamp,
)


class TestGetField:
    """Test reading fields from rows."""

    def test_mapping_row(self):
        """Test reading a key from a dictionary row."""
        assert get_field({"a": 1}, "a") == 1
        assert get_field({"a": 1}, "b") is None

    def test_attribute_row(self):
        """Test reading an attribute from a record object."""
        row = SimpleNamespace(a=2)
        assert get_field(row, "a") == 2
        assert get_field(row, "missing") is None


class TestToNumber:
    """Test numeric coercion."""

    def test_numeric_strings(self):
        """Test that numeric text is parsed."""
        assert to_number("42") == 42.0
        assert to_number(" 2.5 ") == 2.5

    def test_non_numeric_is_nan(self):
        """Test that non-numeric input becomes NaN."""
        assert math.isnan(to_number("abc"))
        assert math.isnan(to_number(""))
        assert math.isnan(to_number([1]))

    def test_missing_value(self):
        """Test that None maps to the given missing value."""
        assert math.isnan(to_number(None))
        assert to_number(None, missing=0.0) == 0.0

    def test_huge_int_saturates(self):
        """Test that ints beyond float range become signed infinity."""
        assert to_number(10**400) == math.inf
        assert to_number(-(10**400)) == -math.inf


class TestStrictEquals:
    """Test strict equality without cross-type coercion."""

    def test_same_type(self):
        """Test equal values of the same type."""
        assert strict_equals("x", "x")
        assert strict_equals(3, 3)

    def test_int_and_float(self):
        """Test that numbers compare by value."""
        assert strict_equals(1, 1.0)

    def test_no_string_number_coercion(self):
        """Test that a string never equals a number."""
        assert not strict_equals(1, "1")

    def test_bool_only_equals_bool(self):
        """Test that booleans only equal booleans."""
        assert not strict_equals(True, 1)
        assert strict_equals(False, False)


class TestStringify:
    """Test text rendering used by the contains filter."""

    def test_values(self):
        """Test rendering of common values."""
        assert stringify(None) == ""
        assert stringify(True) == "true"
        assert stringify(3.0) == "3"
        assert stringify(2.5) == "2.5"


class TestToTimestamp:
    """Test date parsing for the date sorter."""

    def test_iso_string(self):
        """Test that ISO strings and datetimes agree."""
        expected = datetime(2024, 1, 2, tzinfo=timezone.utc).timestamp() * 1000
        assert to_timestamp("2024-01-02T00:00:00Z") == expected
        assert to_timestamp(datetime(2024, 1, 2)) == expected
        assert to_timestamp(date(2024, 1, 2)) == expected

    def test_epoch_milliseconds(self):
        """Test that numbers are taken as epoch milliseconds."""
        assert to_timestamp(1500) == 1500.0

    def test_invalid_is_epoch(self):
        """Test that unparseable values become the epoch."""
        assert to_timestamp("not a date") == 0.0
        assert to_timestamp(None) == 0.0
        assert to_timestamp(float("nan")) == 0.0
        assert to_timestamp(10**400) == 0.0
