"""Exceptions raised by pginterval."""


class IntervalError(Exception):
    """Base class for pginterval errors."""


class ParseError(IntervalError, ValueError):
    """Interval text that does not match the interval grammar.

    Attributes:
        text: The offending input, verbatim
    """

    def __init__(self, text: str, message: str | None = None):
        if message is None:
            message = f'invalid input syntax for type interval: "{text}"'
        super().__init__(message)
        self.text: str = text


class UnsupportedError(IntervalError, NotImplementedError):
    """Requested rendering cannot represent the interval's calendar units."""
