"""Combining, scaling and measuring intervals.

All functions are pure: they return new Interval values and never touch
their arguments.
"""

from datetime import datetime, timedelta
from typing import Any

from pginterval.interval import Interval
from pginterval.util import DAY, trunc_mod


def _require_interval(value: Any, role: str) -> Interval:
    if not isinstance(value, Interval):
        raise TypeError(
            f"{role} must be an Interval.\n"
            f"Got {type(value).__name__!r}: {value!r}\n"
            f"Hint: use Interval.parse(...) to build one from text, or\n"
            f"  interval.apply_to(dt) to shift a datetime"
        )
    return value


def _require_datetime(value: Any, role: str) -> datetime:
    if not isinstance(value, datetime):
        raise TypeError(
            f"{role} must be a datetime.\n"
            f"Got {type(value).__name__!r}: {value!r}"
        )
    return value


def combine(a: Interval, b: Interval) -> Interval:
    """Field-wise sum of two intervals."""
    _require_interval(a, "Left operand")
    _require_interval(b, "Right operand")
    return Interval(
        months=a.months + b.months,
        days=a.days + b.days,
        seconds=a.seconds + b.seconds,
    )


def scale(value: Interval, factor: float) -> Interval:
    """
    Multiply every field of an interval by a scalar.

    Each product is truncated toward zero; nothing is carried between
    fields, so half of "1 mon" is a zero interval, not 15 days.

    Args:
        value: Interval to scale
        factor: Multiplier, int or float

    Returns:
        New interval with each field multiplied

    Raises:
        TypeError: If value is not an Interval or factor is not a number
    """
    _require_interval(value, "Scaled value")
    if isinstance(factor, bool) or not isinstance(factor, (int, float)):
        raise TypeError(
            f"Scale factor must be an int or float.\n"
            f"Got {type(factor).__name__!r}: {factor!r}"
        )
    return Interval(
        months=int(value.months * factor),
        days=int(value.days * factor),
        seconds=int(value.seconds * factor),
    )


def distance(start: datetime, end: datetime) -> Interval:
    """
    Interval from ``start`` to ``end`` as days and seconds.

    Months are never produced: like PostgreSQL's timestamp subtraction, the
    elapsed time is whole days plus a remainder of seconds. Sub-second
    precision is floored away first. Days are floored while the second
    remainder keeps the sign of the total, so a span one second backwards is
    ``Interval(days=-1, seconds=-1)``.

    Args:
        start: Earlier point in time
        end: Later point in time

    Returns:
        Interval with months == 0

    Raises:
        TypeError: If either argument is not a datetime
    """
    _require_datetime(start, "Distance start")
    _require_datetime(end, "Distance end")

    total = (end - start) // timedelta(seconds=1)
    return Interval(days=total // DAY, seconds=trunc_mod(total, DAY))
