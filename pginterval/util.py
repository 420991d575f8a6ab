"""Utility constants and helpers for pginterval.

Time unit constants represent durations in seconds, except for
``MONTHS_PER_YEAR`` and ``DAYS_PER_WEEK`` which scale the calendar buckets.
"""

from typing import Literal, TypeAlias

# Time unit constants (all values in seconds)
SECOND = 1
MINUTE = 60
HOUR = 3600
DAY = 86400

# Calendar unit constants
DAYS_PER_WEEK = 7
MONTHS_PER_YEAR = 12

Field: TypeAlias = Literal["months", "days", "seconds"]

# Every unit a magnitude can carry, as (field it accumulates into, multiplier).
# Names are matched case-sensitively, like PostgreSQL's lowercase keywords.
_SYNONYMS: list[tuple[tuple[str, ...], Field, int]] = [
    (("s", "sec", "secs", "second", "seconds"), "seconds", SECOND),
    (("m", "min", "mins", "minute", "minutes"), "seconds", MINUTE),
    (("h", "hr", "hrs", "hour", "hours"), "seconds", HOUR),
    (("d", "day", "days"), "days", 1),
    (("w", "wk", "wks", "week", "weeks"), "days", DAYS_PER_WEEK),
    (("mon", "mons", "month", "months"), "months", 1),
    (("y", "yr", "yrs", "year", "years"), "months", MONTHS_PER_YEAR),
]

UNITS: dict[str, tuple[Field, int]] = {
    name: (field, scale) for names, field, scale in _SYNONYMS for name in names
}

# Unit assumed for a bare trailing number ("90" is ninety seconds)
DEFAULT_UNIT = "s"


def trunc_mod(value: int, divisor: int) -> int:
    """Remainder taking the sign of ``value`` (C-style, not Python's ``%``)."""
    remainder = abs(value) % divisor
    return -remainder if value < 0 else remainder
