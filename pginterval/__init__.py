from .arithmetic import combine, distance, scale
from .dates import apply_to
from .errors import IntervalError, ParseError, UnsupportedError
from .formatting import to_canonical_string, to_terse_string
from .interval import Interval
from .parser import parse
from .util import DAY, HOUR, MINUTE, SECOND

__all__ = [
    "Interval",
    "parse",
    "combine",
    "scale",
    "distance",
    "apply_to",
    "to_canonical_string",
    "to_terse_string",
    "IntervalError",
    "ParseError",
    "UnsupportedError",
    "SECOND",
    "MINUTE",
    "HOUR",
    "DAY",
]
