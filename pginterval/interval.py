from dataclasses import dataclass, fields, replace
from datetime import datetime
from typing import Any

from typing_extensions import Self


@dataclass(frozen=True, kw_only=True)
class Interval:
    """A PostgreSQL-style interval: months, days and seconds kept apart.

    The three fields are independent accumulators. Nothing is ever folded
    from one into another (90 seconds stays 90 seconds, 40 days stays 40
    days), because a month and a day only acquire a length once the interval
    is applied to a concrete date.

    Examples:
        >>> m = Interval.parse("2 months")
        >>> w = Interval.parse("1 week")
        >>> str(w)
        '7 days'
        >>> str(m.combine(w))
        '2 mons 7 days'
        >>> Interval.parse("1 month").apply_to(datetime(2009, 1, 31))
        datetime.datetime(2009, 2, 28, 0, 0)
    """

    months: int = 0
    days: int = 0
    seconds: int = 0

    def __post_init__(self) -> None:
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise TypeError(
                    f"Interval {f.name} must be an int.\n"
                    f"Got {type(value).__name__!r}: {value!r}\n"
                    f"Hint: build intervals from text or scale them instead:\n"
                    f"  Interval.parse('1 day 12:00:00')\n"
                    f"  Interval(days=1) * 1.5"
                )

    # construction

    @classmethod
    def parse(cls, text: str) -> "Interval":
        """Parse interval text such as ``"1 year 2 mons 3 days 04:05:06"``."""
        from pginterval.parser import parse

        return parse(text)

    @classmethod
    def between(cls, start: datetime, end: datetime) -> "Interval":
        """Distance from ``start`` to ``end`` as days and seconds, never months."""
        from pginterval.arithmetic import distance

        return distance(start, end)

    def copy(self) -> Self:
        """Return an equal but distinct interval."""
        return replace(self)

    # arithmetic

    def combine(self, other: "Interval") -> "Interval":
        """Field-wise sum of two intervals."""
        from pginterval.arithmetic import combine

        return combine(self, other)

    def scale(self, factor: float) -> "Interval":
        """Multiply every field by ``factor``, truncating toward zero."""
        from pginterval.arithmetic import scale

        return scale(self, factor)

    def apply_to(self, base: datetime) -> datetime:
        """Add this interval to ``base`` using calendar month arithmetic."""
        from pginterval.dates import apply_to

        return apply_to(self, base)

    @property
    def in_minutes(self) -> float:
        """The seconds field expressed in minutes; months and days are ignored."""
        return self.seconds / 60

    # rendering

    def to_canonical_string(self) -> str:
        from pginterval.formatting import to_canonical_string

        return to_canonical_string(self)

    def to_terse_string(self) -> str:
        from pginterval.formatting import to_terse_string

        return to_terse_string(self)

    def __str__(self) -> str:
        return self.to_canonical_string()

    def __repr__(self) -> str:
        return f"Interval({self.to_canonical_string()!r})"

    # operators

    def __add__(self, other: Any) -> Any:
        if isinstance(other, Interval):
            return self.combine(other)
        if isinstance(other, datetime):
            return self.apply_to(other)
        return NotImplemented

    def __radd__(self, other: Any) -> Any:
        if isinstance(other, datetime):
            return self.apply_to(other)
        return NotImplemented

    def __mul__(self, other: Any) -> Any:
        if isinstance(other, bool) or not isinstance(other, (int, float)):
            return NotImplemented
        return self.scale(other)

    __rmul__ = __mul__
