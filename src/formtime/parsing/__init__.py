"""Date/time parsing: format compiler, matcher and public parse functions.

- strptime() raises FormatError / ParseError / RangeError
- parse_time() and try_parse_with_formats() NEVER raise; errors are
  returned in a tuple alongside the result

Public API:
    Parsing Functions:
        strptime - Returns CanonicalTime (raises on failure)
        parse_time - Returns tuple[CanonicalTime | None, tuple[FormTimeError, ...]]
        try_parse_with_formats - First matching format wins, single generic error

    Compilation:
        compile_format - Returns a cached, immutable CompiledFormat
        CompiledFormat - Pattern plus expected directives
        Directive - Canonical directive codes

    Results:
        CanonicalTime - Nine-field calendar record

    Type Guards:
        is_valid_time - TypeIs guard for CanonicalTime (not None)
        is_valid_date_fields - TypeIs guard for results convertible to date

Example:
    >>> from formtime.parsing import parse_time, is_valid_time
    >>> result, errors = parse_time("25 Oct, 2006", "%d %b, %Y")
    >>> if is_valid_time(result):
    ...     day = result.to_date()

Python 3.13+.
"""

from .calendar import days_in_month, is_leap_year
from .compiler import CompiledFormat, compile_format
from .guards import is_valid_date_fields, is_valid_time
from .matcher import CanonicalTime
from .times import INVALID_INPUT_MESSAGE, parse_time, strptime, try_parse_with_formats
from .tokenizer import Directive

__all__ = [
    "INVALID_INPUT_MESSAGE",
    "CanonicalTime",
    "CompiledFormat",
    "Directive",
    "compile_format",
    "days_in_month",
    "is_leap_year",
    "is_valid_date_fields",
    "is_valid_time",
    "parse_time",
    "strptime",
    "try_parse_with_formats",
]
