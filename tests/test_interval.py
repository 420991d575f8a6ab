"""Tests for the Interval value type."""

import logging
from dataclasses import FrozenInstanceError
from datetime import datetime

import pytest

from pginterval import Interval, parse


def test_defaults_to_zero():
    """Test that every field defaults to zero."""
    assert Interval() == Interval(months=0, days=0, seconds=0)


def test_fields_are_keyword_only():
    """Test that positional construction is rejected."""
    with pytest.raises(TypeError):
        Interval(1, 2, 3)  # type: ignore[misc]


@pytest.mark.parametrize("bad", [1.5, "1", None, True])
def test_fields_must_be_int(bad: object):
    """Test that non-integer fields are rejected."""
    with pytest.raises(TypeError, match="must be an int"):
        Interval(days=bad)  # type: ignore[arg-type]


def test_is_immutable():
    """Test that fields cannot be reassigned."""
    value = Interval(days=1)

    with pytest.raises(FrozenInstanceError):
        value.days = 2  # type: ignore[misc]


def test_copy_is_equal_but_distinct():
    """Test cloning an interval."""
    value = parse("1 year 2 days 00:00:03")
    clone = value.copy()

    assert clone == value
    assert clone is not value


def test_hashable():
    """Test that equal intervals hash alike and work as dict keys."""
    lookup = {parse("1 week"): "weekly"}

    assert lookup[Interval(days=7)] == "weekly"


def test_fields_are_independent():
    """Test that no field is derived from another."""
    value = parse("40 days 90 seconds 13 mons")

    assert (value.months, value.days, value.seconds) == (13, 40, 90)


def test_in_minutes():
    """Test the seconds field expressed as minutes."""
    assert parse("01:30:00").in_minutes == 90
    assert parse("90").in_minutes == 1.5
    assert parse("3 days").in_minutes == 0


def test_between_classmethod():
    """Test constructing an interval from two datetimes."""
    value = Interval.between(datetime(2025, 1, 1, 0, 0), datetime(2025, 1, 2, 6, 0))

    assert value == Interval(days=1, seconds=6 * 3600)


def test_multiply_operator_rejects_non_numbers():
    """Test that '*' only accepts numbers."""
    with pytest.raises(TypeError):
        parse("1 day") * "2"  # type: ignore[operator]


def test_documented_synopsis():
    """Test the end-to-end usage shown in the Interval docstring."""
    m = parse("2 months")
    w = parse("1 week")

    assert str(w) == "7 days"
    assert str(m + w) == "2 mons 7 days"
    assert m + w == Interval(months=2, days=7)


def test_parse_logs_at_debug(caplog: pytest.LogCaptureFixture):
    """Test that parsing emits a debug record."""
    with caplog.at_level(logging.DEBUG, logger="pginterval.parser"):
        parse("3 days")

    assert "parsed '3 days'" in caplog.text
