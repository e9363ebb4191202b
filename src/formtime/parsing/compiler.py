"""Format compiler: format string -> matching pattern + expected directives.

compile_format() tokenizes a format string, emits one capturing group per
directive and records the directives in encounter order. Capture groups are
positional: the Nth group belongs to the Nth expected directive.

Locale names are looked up once, at compile time, and regex-escaped before
they are interpolated into the pattern, so month names such as "janv." or
"Mai." match literally.

Thread-safe. Compiled formats are immutable and cached per
(format string, locale table).

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import functools
import logging
import re
from dataclasses import dataclass
from typing import TYPE_CHECKING

from formtime.constants import MAX_FORMAT_CACHE_SIZE
from formtime.diagnostics import ErrorTemplate, FormatError
from formtime.runtime.locale_table import ENGLISH, LocaleTable

from .matcher import extract
from .tokenizer import Directive, TokenKind, normalize_format, tokenize_format

if TYPE_CHECKING:
    from .matcher import CanonicalTime

__all__ = ["CompiledFormat", "compile_format"]

logger = logging.getLogger(__name__)

# ==============================================================================
# DIRECTIVE PATTERNS
# ==============================================================================
#
#   Directive | Sub-pattern       | Captures
#   ----------|-------------------|----------------------------------
#   yyyy      | ([0-9]{4})        | Year with century
#   yy        | ([0-9]{1,2})      | Year without century [00,99]
#   M         | ([0-9]{1,2})      | Month [1,12]
#   MMM       | (Jan|Feb|...)     | Locale short month names
#   MMMM      | (January|...)     | Locale full month names
#   d         | ([0-9]{1,2})      | Day of month [1,31]
#   H         | ([0-9]{1,2})      | Hour, 24-hour clock [0,23]
#   h         | ([0-9]{1,2})      | Hour, 12-hour clock [1,12]
#   m         | ([0-9]{1,2})      | Minute [0,59]
#   s         | ([0-9]{1,2})      | Second [0,59]
#   tt        | (AM|PM)           | Locale meridiem markers
#
# ASCII digit classes are used instead of \d, which would also accept
# non-ASCII decimal digits.
# ==============================================================================

_ONE_OR_TWO_DIGITS = "([0-9]{1,2})"

_NUMERIC_PATTERNS: dict[Directive, str] = {
    Directive.YEAR: "([0-9]{4})",
    Directive.YEAR_2_DIGIT: _ONE_OR_TWO_DIGITS,
    Directive.MONTH: _ONE_OR_TWO_DIGITS,
    Directive.DAY: _ONE_OR_TWO_DIGITS,
    Directive.HOUR_24: _ONE_OR_TWO_DIGITS,
    Directive.HOUR_12: _ONE_OR_TWO_DIGITS,
    Directive.MINUTE: _ONE_OR_TWO_DIGITS,
    Directive.SECOND: _ONE_OR_TWO_DIGITS,
}

_WHITESPACE_PATTERN = r"\s+"


@dataclass(frozen=True, slots=True)
class CompiledFormat:
    """A format string compiled for matching.

    Immutable and safe to share between threads.

    Attributes:
        format_string: The format string as given
        normalized: The format string with whitespace runs collapsed
        pattern: Regular expression anchored to the whole input, one group
            per directive
        directives: Directives in capture-group order
        locale: Locale table whose names were compiled into the pattern
    """

    format_string: str
    normalized: str
    pattern: re.Pattern[str]
    directives: tuple[Directive, ...]
    locale: LocaleTable

    def parse(self, text: str) -> CanonicalTime:
        """Parse text against this format.

        Raises:
            ParseError: If text does not match
            RangeError: If a captured value is out of range
        """
        return extract(self, text)


def compile_format(format_string: str, locale: LocaleTable = ENGLISH) -> CompiledFormat:
    """Compile a format string into a matching pattern.

    Results are cached per (format_string, locale); the locale table is
    hashable, so two equal tables share cache entries.

    Args:
        format_string: Format string, e.g. "yyyy-MM-dd HH:mm" or "%d %B %Y"
        locale: Month names and meridiem markers (default: English)

    Returns:
        CompiledFormat ready for repeated parsing

    Raises:
        FormatError: If the format contains an unterminated or unrecognized
            directive, or is not a string

    Example:
        >>> compiled = compile_format("yyyy-MM-dd")
        >>> compiled.directives
        (<Directive.YEAR: 'yyyy'>, <Directive.MONTH: 'M'>, <Directive.DAY: 'd'>)
        >>> compiled.parse("2006-10-25")[:3]
        (2006, 10, 25)
    """
    if not isinstance(format_string, str):
        diagnostic = ErrorTemplate.format_not_string(  # type: ignore[unreachable]
            type(format_string).__name__
        )
        raise FormatError(diagnostic, format_string=str(format_string))
    return _compile_cached(format_string, locale)


@functools.lru_cache(maxsize=MAX_FORMAT_CACHE_SIZE)
def _compile_cached(format_string: str, locale: LocaleTable) -> CompiledFormat:
    tokens = tokenize_format(format_string)
    name_patterns = _name_patterns(locale)

    parts: list[str] = []
    directives: list[Directive] = []

    for token in tokens:
        match token.kind:
            case TokenKind.WHITESPACE:
                parts.append(_WHITESPACE_PATTERN)
            case TokenKind.LITERAL:
                parts.append(re.escape(token.value))
            case TokenKind.DIRECTIVE:
                assert token.directive is not None
                if token.directive in _NUMERIC_PATTERNS:
                    parts.append(_NUMERIC_PATTERNS[token.directive])
                else:
                    parts.append(name_patterns[token.directive])
                directives.append(token.directive)

    compiled = CompiledFormat(
        format_string=format_string,
        normalized=normalize_format(tokens),
        pattern=re.compile(r"\A" + "".join(parts) + r"\Z"),
        directives=tuple(directives),
        locale=locale,
    )
    logger.debug(
        "Compiled format %r -> %r (%s)",
        format_string,
        compiled.pattern.pattern,
        ", ".join(directives),
    )
    return compiled


def _name_patterns(locale: LocaleTable) -> dict[Directive, str]:
    return {
        Directive.MONTH_NAME: _alternation(locale.months),
        Directive.MONTH_SHORT_NAME: _alternation(locale.short_months),
        Directive.MERIDIEM: _alternation((locale.am, locale.pm)),
    }


def _alternation(names: tuple[str, ...]) -> str:
    # Longest first, so a name that is a prefix of another does not shadow it
    ordered = sorted(set(names), key=len, reverse=True)
    return "(" + "|".join(re.escape(name) for name in ordered) + ")"
