"""Adding intervals to datetimes with calendar-correct month arithmetic.

An interval is applied in three steps, each on local wall-clock fields:
months first (clamping to the end of a shorter month, so Jan 31 + 1 month
is Feb 28 or 29), then days, then seconds. Time zones are never consulted;
an aware datetime keeps its tzinfo and is shifted by its wall-clock fields.
"""

import logging
from datetime import datetime, timedelta

from dateutil.relativedelta import relativedelta

from pginterval.interval import Interval
from pginterval.util import HOUR, MINUTE

logger = logging.getLogger(__name__)

# A day-of-month above this is treated as "near the end of the month" and
# pulled back into the target month when it overflows. Every month is longer.
CLAMP_THRESHOLD = 20


def _shift_months(work: datetime, months: int) -> datetime:
    """Move ``work`` by whole months, clamping overflowing end-of-month days."""
    day = work.day
    # Step from the 1st so the month shift itself can never overflow.
    first = work.replace(day=1) + relativedelta(months=months)
    # Re-apply the original day, letting it roll over into the next month.
    shifted = first + timedelta(days=day - 1)

    if day > CLAMP_THRESHOLD:
        while shifted.day < CLAMP_THRESHOLD:
            shifted -= timedelta(days=1)
    return shifted


def apply_to(value: Interval, base: datetime) -> datetime:
    """
    Add an interval to a datetime.

    Args:
        value: Interval to add
        base: Point in time to start from; not modified

    Returns:
        New datetime. Microseconds and tzinfo of ``base`` are preserved.

    Raises:
        TypeError: If value is not an Interval or base is not a datetime
        OverflowError: If a day or second step leaves the datetime range
        ValueError: If the month step leaves the supported year range

    Examples:
        >>> from pginterval import parse
        >>> apply_to(parse("1 month"), datetime(2024, 1, 31, 9, 30))
        datetime.datetime(2024, 2, 29, 9, 30)
        >>> apply_to(parse("1 day 25:00:00"), datetime(2024, 12, 31, 12, 0))
        datetime.datetime(2025, 1, 2, 13, 0)
    """
    if not isinstance(value, Interval):
        raise TypeError(
            f"apply_to() requires an Interval.\n"
            f"Got {type(value).__name__!r}: {value!r}"
        )
    if not isinstance(base, datetime):
        raise TypeError(
            f"An Interval can only be added to a datetime or another Interval.\n"
            f"Got {type(base).__name__!r}: {base!r}\n"
            f"Hint: promote a date first:\n"
            f"  datetime.combine(d, time())"
        )

    time_of_day = base.hour * HOUR + base.minute * MINUTE + base.second
    work = base.replace(hour=0, minute=0, second=0)

    work = _shift_months(work, value.months)
    work += timedelta(days=value.days)
    result = work + timedelta(seconds=time_of_day + value.seconds)

    logger.debug("%s + %r -> %s", base.isoformat(), value, result.isoformat())
    return result
