"""Parse PostgreSQL-style interval text.

Parsing happens in two passes. ``tokenize`` splits the trimmed input on
single spaces and tags every token with its lexical kind; ``parse`` then
walks that flat stream once, pairing magnitudes with units.

Accepted forms, freely concatenated:

    "3 days"         magnitude and unit as separate tokens
    "3days"          magnitude and unit fused into one token
    "04:05:06"       clock segment, exactly hours:minutes:seconds
    "90"             a trailing bare number is a count of seconds
"""

import logging
import re
from dataclasses import dataclass
from typing import Literal, TypeAlias

from pginterval.errors import ParseError
from pginterval.interval import Interval
from pginterval.util import DEFAULT_UNIT, HOUR, MINUTE, UNITS

logger = logging.getLogger(__name__)

Kind: TypeAlias = Literal["clock", "number", "fused", "word"]

_NUMBER = re.compile(r"[0-9]+")
_FUSED = re.compile(r"([0-9]+)([a-z]+)")

CLOCK_ERROR = "time intervals not in the form HH:MM:SS not yet implemented"


@dataclass(frozen=True)
class Token:
    kind: Kind
    text: str


def _classify(chunk: str) -> Kind:
    if ":" in chunk:
        return "clock"
    if _NUMBER.fullmatch(chunk):
        return "number"
    if _FUSED.fullmatch(chunk):
        return "fused"
    return "word"


def tokenize(text: str) -> list[Token]:
    """Split interval text into annotated tokens.

    Only leading and trailing whitespace is stripped; inner tokens are
    separated by exactly one space, so doubled spaces produce an empty
    ``word`` token which the parser rejects.
    """
    return [Token(_classify(chunk), chunk) for chunk in text.strip().split(" ")]


def _clock_seconds(token: Token, text: str) -> int:
    parts = token.text.split(":")
    if len(parts) != 3:
        raise ParseError(text, CLOCK_ERROR)
    if not all(_NUMBER.fullmatch(part) for part in parts):
        raise ParseError(text, f"{CLOCK_ERROR}: {token.text!r}")
    hours, minutes, seconds = (int(part) for part in parts)
    return hours * HOUR + minutes * MINUTE + seconds


def parse(text: str) -> Interval:
    """
    Parse interval text into an Interval.

    Args:
        text: Interval text, e.g. ``"1 year 2 mons"``, ``"3d 04:05:06"``

    Returns:
        The interval the text describes

    Raises:
        ParseError: If the text does not follow the interval grammar
        TypeError: If text is not a string

    Examples:
        >>> parse("1 week")
        Interval('7 days')
        >>> parse("2months 36 hours")
        Interval('2 mons 36:00:00')
    """
    if not isinstance(text, str):
        raise TypeError(
            f"Interval text must be a str.\n"
            f"Got {type(text).__name__!r}: {text!r}\n"
            f"Hint: use Interval.between(start, end) for two datetimes"
        )

    trimmed = text.strip()
    if not trimmed:
        raise ParseError(text)

    totals = {"months": 0, "days": 0, "seconds": 0}
    tokens = tokenize(trimmed)
    i = 0
    while i < len(tokens):
        token = tokens[i]
        i += 1

        if token.kind == "clock":
            totals["seconds"] += _clock_seconds(token, text)
            continue

        if token.kind == "fused":
            match = _FUSED.fullmatch(token.text)
            assert match is not None
            magnitude, unit = match.group(1), match.group(2)
        elif token.kind == "number":
            magnitude = token.text
            if i < len(tokens):
                unit = tokens[i].text
                i += 1
            else:
                unit = DEFAULT_UNIT
        else:
            raise ParseError(text)

        if unit not in UNITS:
            raise ParseError(text)
        field, multiplier = UNITS[unit]
        totals[field] += int(magnitude) * multiplier

    result = Interval(**totals)
    logger.debug("parsed %r as %r", text, result)
    return result
