"""Shared constants for formtime.

This module provides centralized configuration constants used across the
parsing, formatting and validation packages. Placing constants here avoids
circular imports and provides a single source of truth.

Constants are grouped by domain:
- Calendar defaults: Values used when a format omits a field
- Year windowing: Two-digit year interpretation
- Limits: Cache and input size bounds
- Field defaults: Input formats tried by the field validators

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Calendar defaults
    "DEFAULT_YEAR",
    "DEFAULT_MONTH",
    "DEFAULT_DAY",
    "DEFAULT_WEEKDAY",
    "DEFAULT_YEARDAY",
    "DEFAULT_DST",
    # Year windowing
    "TWO_DIGIT_YEAR_PIVOT",
    # Limits
    "MAX_FORMAT_CACHE_SIZE",
    "MAX_LOCALE_CACHE_SIZE",
    "MAX_INPUT_LENGTH",
    # Field defaults
    "DEFAULT_DATE_INPUT_FORMATS",
    "DEFAULT_TIME_INPUT_FORMATS",
    "DEFAULT_DATETIME_INPUT_FORMATS",
]

# ============================================================================
# CALENDAR DEFAULTS
# ============================================================================
#
# Matches the struct_time convention: a format that only encodes a time of day
# lands on 1900-01-01. Weekday, yearday and DST are placeholders and are never
# computed by the parser.

DEFAULT_YEAR: int = 1900
DEFAULT_MONTH: int = 1
DEFAULT_DAY: int = 1
DEFAULT_WEEKDAY: int = 0
DEFAULT_YEARDAY: int = 1
DEFAULT_DST: int = -1

# ============================================================================
# YEAR WINDOWING
# ============================================================================

# Two-digit years below the pivot belong to the 2000s, the rest to the 1900s.
# 68 mirrors the POSIX strptime %y convention: "67" -> 2067, "68" -> 1968.
TWO_DIGIT_YEAR_PIVOT: int = 68

# ============================================================================
# LIMITS
# ============================================================================

# Compiled formats are keyed by (format string, locale table). Applications
# typically use a handful of formats.
MAX_FORMAT_CACHE_SIZE: int = 256

# Babel locale tables loaded via LocaleTable.for_locale().
MAX_LOCALE_CACHE_SIZE: int = 128

# Longest input accepted by the matcher. Real date/time strings are short;
# anything beyond this is rejected before the regex engine sees it.
MAX_INPUT_LENGTH: int = 256

# ============================================================================
# FIELD DEFAULTS
# ============================================================================

DEFAULT_DATE_INPUT_FORMATS: tuple[str, ...] = (
    "%Y-%m-%d",  # '2006-10-25'
    "%m/%d/%Y",  # '10/25/2006'
    "%m/%d/%y",  # '10/25/06'
    "%b %d %Y",  # 'Oct 25 2006'
    "%b %d, %Y",  # 'Oct 25, 2006'
    "%d %b %Y",  # '25 Oct 2006'
    "%d %b, %Y",  # '25 Oct, 2006'
    "%B %d %Y",  # 'October 25 2006'
    "%B %d, %Y",  # 'October 25, 2006'
    "%d %B %Y",  # '25 October 2006'
    "%d %B, %Y",  # '25 October, 2006'
)

DEFAULT_TIME_INPUT_FORMATS: tuple[str, ...] = (
    "%H:%M:%S",  # '14:30:59'
    "%H:%M",  # '14:30'
)

DEFAULT_DATETIME_INPUT_FORMATS: tuple[str, ...] = (
    "%Y-%m-%d %H:%M:%S",  # '2006-10-25 14:30:59'
    "%Y-%m-%d %H:%M",  # '2006-10-25 14:30'
    "%Y-%m-%d",  # '2006-10-25'
    "%m/%d/%Y %H:%M:%S",  # '10/25/2006 14:30:59'
    "%m/%d/%Y %H:%M",  # '10/25/2006 14:30'
    "%m/%d/%Y",  # '10/25/2006'
    "%m/%d/%y %H:%M:%S",  # '10/25/06 14:30:59'
    "%m/%d/%y %H:%M",  # '10/25/06 14:30'
    "%m/%d/%y",  # '10/25/06'
)
