"""Type guard functions for parsing result type narrowing.

parse_time() and try_parse_with_formats() return
tuple[CanonicalTime | None, tuple[FormTimeError, ...]]. These guards check
the result component to narrow types for mypy.

Python 3.13+ with TypeIs support (PEP 742).

Note: All guards accept None and return False. This simplifies the pattern from
`if not errors and result is not None` to just `if is_valid_time(result)`.

Example:
    >>> result, errors = parse_time("14:30", "HH:mm")
    >>> if is_valid_time(result):
    ...     # mypy knows result is CanonicalTime
    ...     minutes = result.hour * 60 + result.minute
"""

from typing import TypeIs

from .calendar import days_in_month
from .matcher import CanonicalTime

__all__ = ["is_valid_date_fields", "is_valid_time"]


def is_valid_time(value: CanonicalTime | None) -> TypeIs[CanonicalTime]:
    """Type guard: Check if a parse result is present.

    Args:
        value: CanonicalTime from a parse result tuple (may be None on error)

    Returns:
        True if value is a CanonicalTime, False otherwise
    """
    return value is not None


def is_valid_date_fields(value: CanonicalTime | None) -> TypeIs[CanonicalTime]:
    """Type guard: Check that a result also converts to a datetime.date.

    The parser accepts any four-digit year, including 0000, which the
    datetime module cannot represent. Use this guard before to_date() or
    to_datetime() when the format includes a four-digit year.

    Args:
        value: CanonicalTime from a parse result tuple (may be None on error)

    Returns:
        True if value is a CanonicalTime with a year in 1-9999
    """
    return (
        value is not None
        and 1 <= value.year <= 9999
        and 1 <= value.day <= days_in_month(value.month, value.year)
    )
