"""Render intervals as text.

``to_canonical_string`` produces PostgreSQL's default interval output
(``1 year 2 mons 3 days 04:05:06``), which ``parse`` reads back.
``to_terse_string`` is a compact form for pure clock durations.
"""

from pginterval.errors import UnsupportedError
from pginterval.interval import Interval
from pginterval.util import HOUR, MINUTE, MONTHS_PER_YEAR, trunc_mod


def _plural(amount: int, noun: str) -> str:
    if amount == 1:
        return f"1 {noun}"
    return f"{amount} {noun}s"


def _clock_fields(seconds: int) -> tuple[str, str, str]:
    """Zero-padded hours, minutes and seconds; hours are not wrapped at 24."""
    hours = seconds // HOUR
    minutes = trunc_mod(seconds // MINUTE, 60)
    secs = trunc_mod(seconds, 60)
    return f"{hours:02d}", f"{minutes:02d}", f"{secs:02d}"


def to_canonical_string(value: Interval) -> str:
    """
    Format an interval the way PostgreSQL prints it.

    Segments with a zero source field are left out. Months of a year or more
    are split into years and leftover months; days and seconds are never
    promoted.

    Examples:
        >>> to_canonical_string(Interval(months=14, days=1, seconds=3661))
        '1 year 2 mons 1 day 01:01:01'
        >>> to_canonical_string(Interval())
        '00:00:00'
    """
    if not (value.months or value.days or value.seconds):
        return "00:00:00"

    parts: list[str] = []

    months = value.months
    if months >= MONTHS_PER_YEAR:
        parts.append(_plural(months // MONTHS_PER_YEAR, "year"))
        months %= MONTHS_PER_YEAR
    if months:
        parts.append(_plural(months, "mon"))

    if value.days:
        parts.append(_plural(value.days, "day"))

    if value.seconds:
        parts.append(":".join(_clock_fields(value.seconds)))

    return " ".join(parts)


def to_terse_string(value: Interval) -> str:
    """
    Format a pure clock interval compactly, e.g. ``01hr 30min``.

    Zero-valued units are dropped, so a zero interval renders as an empty
    string.

    Raises:
        UnsupportedError: If the interval has months or days
    """
    if value.months:
        raise UnsupportedError("months is not (yet) supported")
    if value.days:
        raise UnsupportedError("days is not (yet) supported")

    if not value.seconds:
        return ""

    hours, minutes, seconds = _clock_fields(value.seconds)
    parts: list[str] = []
    if hours != "00":
        parts.append(hours + ("hr" if hours == "01" else "hrs"))
    if minutes != "00":
        parts.append(minutes + "min")
    if seconds != "00":
        parts.append(seconds + "s")
    return " ".join(parts)
