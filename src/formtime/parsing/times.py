"""Public parsing entry points.

- strptime() raises FormatError / ParseError / RangeError
- parse_time() returns tuple[CanonicalTime | None, tuple[FormTimeError, ...]]
  and NEVER raises; errors are returned in the tuple
- try_parse_with_formats() tries candidate formats in order, first success
  wins, and reports a single generic error when none matches

Thread-safe. Compiled formats are shared through the compile cache.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from formtime.diagnostics import ErrorTemplate, FormTimeError, ParseError
from formtime.runtime.locale_table import ENGLISH, LocaleTable

from .compiler import compile_format
from .matcher import CanonicalTime

__all__ = ["INVALID_INPUT_MESSAGE", "parse_time", "strptime", "try_parse_with_formats"]

logger = logging.getLogger(__name__)

INVALID_INPUT_MESSAGE: str = "Enter a valid date/time."


def strptime(text: str, format_string: str, locale: LocaleTable = ENGLISH) -> CanonicalTime:
    """Parse text according to a format string.

    Args:
        text: Input text, e.g. "Oct 25, 2006"
        format_string: Format string, e.g. "%b %d, %Y" or "MMM d, yyyy"
        locale: Month names and meridiem markers (default: English)

    Returns:
        CanonicalTime (year, month, day, hour, minute, second, 0, 1, -1)

    Raises:
        FormatError: If the format string is malformed
        ParseError: If the text does not match the format
        RangeError: If a captured value is out of range

    Example:
        >>> strptime("10/25/06", "%m/%d/%y")
        CanonicalTime(year=2006, month=10, day=25, hour=0, minute=0, second=0, weekday=0, yearday=1, dst=-1)
    """  # noqa: E501
    return compile_format(format_string, locale).parse(text)


def parse_time(
    text: str,
    format_string: str,
    locale: LocaleTable = ENGLISH,
) -> tuple[CanonicalTime | None, tuple[FormTimeError, ...]]:
    """Parse text according to a format string without raising.

    Args:
        text: Input text
        format_string: Format string
        locale: Month names and meridiem markers (default: English)

    Returns:
        Tuple of (result, errors):
        - result: CanonicalTime, or None if parsing failed
        - errors: Tuple holding the FormatError, ParseError or RangeError
          (empty tuple on success)

    Examples:
        >>> result, errors = parse_time("4:25 PM", "h:mm tt")
        >>> result.hour, result.minute
        (16, 25)
        >>> errors
        ()

        >>> result, errors = parse_time("2006-04-31", "yyyy-MM-dd")
        >>> result is None
        True
        >>> type(errors[0]).__name__
        'RangeError'
    """
    try:
        return (strptime(text, format_string, locale), ())
    except FormTimeError as e:
        return (None, (e,))


def try_parse_with_formats(
    text: str,
    formats: Iterable[str],
    locale: LocaleTable = ENGLISH,
    *,
    message: str = INVALID_INPUT_MESSAGE,
) -> tuple[CanonicalTime | None, tuple[FormTimeError, ...]]:
    """Try each format in order; the first successful parse wins.

    Per-format failures are not surfaced: when every format fails, a single
    ParseError carrying ``message`` is returned. The individual failures are
    logged at DEBUG level.

    Args:
        text: Input text
        formats: Candidate format strings, tried in order
        locale: Month names and meridiem markers (default: English)
        message: User-facing message for the combined failure

    Returns:
        Tuple of (result, errors):
        - result: CanonicalTime from the first matching format, or None
        - errors: Empty on success, else one ParseError with ``message``

    Example:
        >>> result, errors = try_parse_with_formats("25 October 2006", ("%Y-%m-%d", "%d %B %Y"))
        >>> result[:3]
        (2006, 10, 25)
    """
    for format_string in formats:
        result, errors = parse_time(text, format_string, locale)
        if result is not None:
            return (result, ())
        for error in errors:
            logger.debug("Format %r rejected %r: %s", format_string, text, error)

    diagnostic = ErrorTemplate.validation_invalid(message, str(text))
    return (None, (ParseError(diagnostic, input_value=str(text)),))
