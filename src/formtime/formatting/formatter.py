"""strftime-style rendering of calendar moments.

A partial strftime covering the directives used by the default date and
time input formats:

    Directive | Meaning
    ----------|------------------------------------------
    %Y        | Year with century, zero-padded to 4 digits
    %m        | Month [01,12]
    %d        | Day of the month [01,31]
    %H        | Hour, 24-hour clock [00,23]
    %M        | Minute [00,59]
    %S        | Second [00,59]
    %%        | A literal '%'

Unknown directives ('%' followed by a letter, digit or underscore) render
as nothing. A '%' followed by any other character is literal text, so
"100%-off" renders unchanged. A '%' at the very end of the format string is
an error. The parsing direction, by contrast, rejects unknown
directives at compile time.

The formatter is independent of the format compiler: it walks the format
string in a single pass and never builds a regular expression.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Callable
from datetime import date, time
from typing import NamedTuple

from formtime.constants import DEFAULT_DAY, DEFAULT_MONTH, DEFAULT_YEAR
from formtime.diagnostics import ErrorTemplate, FormatError
from formtime.parsing.matcher import CanonicalTime

__all__ = ["CalendarMoment", "strftime"]

type CalendarMoment = date | time | CanonicalTime


class _Fields(NamedTuple):
    year: int
    month: int
    day: int
    hour: int
    minute: int
    second: int


_RENDERERS: dict[str, Callable[[_Fields], str]] = {
    "Y": lambda f: f"{f.year:04d}",
    "m": lambda f: f"{f.month:02d}",
    "d": lambda f: f"{f.day:02d}",
    "H": lambda f: f"{f.hour:02d}",
    "M": lambda f: f"{f.minute:02d}",
    "S": lambda f: f"{f.second:02d}",
    "%": lambda _f: "%",
}


def strftime(moment: CalendarMoment, format_string: str) -> str:
    """Render a calendar moment according to a format string.

    Args:
        moment: datetime.date, datetime.datetime, datetime.time or
            CanonicalTime. Date parts missing from a time default to
            1900-01-01; time parts missing from a date default to 0.
        format_string: Output format, e.g. "%Y-%m-%d %H:%M:%S"

    Returns:
        Formatted string

    Raises:
        FormatError: If the format string ends with a lone '%'

    Examples:
        >>> strftime(datetime(2006, 10, 25, 14, 30, 59), "%Y-%m-%d %H:%M:%S")
        '2006-10-25 14:30:59'
        >>> strftime(datetime(2006, 10, 25, 14, 30, 59), "%Y-%m-%d %q %H:%M:%S")
        '2006-10-25  14:30:59'
    """
    fields = _fields_of(moment)
    parts: list[str] = []
    i = 0
    n = len(format_string)

    while i < n:
        char = format_string[i]
        if char != "%":
            parts.append(char)
            i += 1
            continue

        if i + 1 >= n:
            diagnostic = ErrorTemplate.format_unterminated_directive(format_string, "%")
            raise FormatError(diagnostic, format_string=format_string)

        code = format_string[i + 1]
        if code != "%" and not _is_word_char(code):
            # Not a directive: the '%' is literal text
            parts.append("%")
            i += 1
            continue

        renderer = _RENDERERS.get(code)
        if renderer is not None:
            parts.append(renderer(fields))
        i += 2

    return "".join(parts)


def _is_word_char(char: str) -> bool:
    return char.isalnum() or char == "_"


def _fields_of(moment: CalendarMoment) -> _Fields:
    return _Fields(
        year=getattr(moment, "year", DEFAULT_YEAR),
        month=getattr(moment, "month", DEFAULT_MONTH),
        day=getattr(moment, "day", DEFAULT_DAY),
        hour=getattr(moment, "hour", 0),
        minute=getattr(moment, "minute", 0),
        second=getattr(moment, "second", 0),
    )
