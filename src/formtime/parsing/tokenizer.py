"""Format string tokenizer.

Splits a date/time format string into directive, literal and whitespace
tokens. Two directive syntaxes are accepted and may be mixed:

    Pattern letters          strftime     Directive
    ---------------          --------     ---------
    yyyy                     %Y           YEAR (4 digits)
    yy                       %y           YEAR_2_DIGIT (windowed)
    M, MM                    %m           MONTH (numeric)
    MMM                      %b           MONTH_SHORT_NAME
    MMMM                     %B           MONTH_NAME
    d, dd                    %d           DAY
    H, HH                    %H           HOUR_24
    h, hh                    %I           HOUR_12
    m, mm                    %M           MINUTE
    s, ss                    %S           SECOND
    tt                       %p           MERIDIEM

Pattern letters are matched longest-first ("yyyy" before "yy", "MMMM" before
"MMM"). A pattern letter that starts no directive ("y", "t") is literal text.
"ddd"/"dddd" (weekday names) are recognized tokens without a parse pattern
and are rejected.

Literal text:
    - '%%' is a literal percent sign
    - Single quotes delimit literal text: 'at' -> "at"
    - Two consecutive single quotes produce a literal quote: '' -> "'"

Whitespace:
    Runs of whitespace characters and the strftime whitespace directives
    %t / %n collapse into one WHITESPACE token.

Python 3.13+. Zero external dependencies.
"""

from enum import Enum, StrEnum
from typing import NamedTuple

from formtime.diagnostics import ErrorTemplate, FormatError

__all__ = [
    "Directive",
    "FormatToken",
    "TokenKind",
    "normalize_format",
    "tokenize_format",
]


class Directive(StrEnum):
    """Canonical directive codes.

    Values are the canonical pattern-letter spelling, so ``str(directive)``
    round-trips through ``Directive(...)``.
    """

    YEAR = "yyyy"
    YEAR_2_DIGIT = "yy"
    MONTH = "M"
    MONTH_SHORT_NAME = "MMM"
    MONTH_NAME = "MMMM"
    DAY = "d"
    HOUR_24 = "H"
    HOUR_12 = "h"
    MINUTE = "m"
    SECOND = "s"
    MERIDIEM = "tt"


class TokenKind(Enum):
    """Kinds of format tokens."""

    DIRECTIVE = "directive"
    LITERAL = "literal"
    WHITESPACE = "whitespace"


class FormatToken(NamedTuple):
    """One token of a format string.

    Attributes:
        kind: Token kind
        source: Source spelling ("MM", "%m", "'at'"); a single space for
            WHITESPACE tokens
        value: Literal text for LITERAL tokens, canonical code for
            DIRECTIVE tokens, a single space for WHITESPACE tokens
        directive: The directive for DIRECTIVE tokens, else None
    """

    kind: TokenKind
    source: str
    value: str
    directive: Directive | None = None


# Pattern-letter tokens grouped by leading letter, longest first.
# None marks a recognized token that has no parse pattern.
_PATTERN_TOKENS: dict[str, tuple[tuple[str, Directive | None], ...]] = {
    "d": (
        ("dddd", None),  # Full weekday name
        ("ddd", None),  # Short weekday name
        ("dd", Directive.DAY),
        ("d", Directive.DAY),
    ),
    "M": (
        ("MMMM", Directive.MONTH_NAME),
        ("MMM", Directive.MONTH_SHORT_NAME),
        ("MM", Directive.MONTH),
        ("M", Directive.MONTH),
    ),
    "y": (
        ("yyyy", Directive.YEAR),
        ("yy", Directive.YEAR_2_DIGIT),
    ),
    "H": (
        ("HH", Directive.HOUR_24),
        ("H", Directive.HOUR_24),
    ),
    "h": (
        ("hh", Directive.HOUR_12),
        ("h", Directive.HOUR_12),
    ),
    "m": (
        ("mm", Directive.MINUTE),
        ("m", Directive.MINUTE),
    ),
    "s": (
        ("ss", Directive.SECOND),
        ("s", Directive.SECOND),
    ),
    "t": (("tt", Directive.MERIDIEM),),
}

_STRFTIME_DIRECTIVES: dict[str, Directive] = {
    "Y": Directive.YEAR,
    "y": Directive.YEAR_2_DIGIT,
    "m": Directive.MONTH,
    "b": Directive.MONTH_SHORT_NAME,
    "B": Directive.MONTH_NAME,
    "d": Directive.DAY,
    "H": Directive.HOUR_24,
    "I": Directive.HOUR_12,
    "M": Directive.MINUTE,
    "S": Directive.SECOND,
    "p": Directive.MERIDIEM,
}

_STRFTIME_WHITESPACE: frozenset[str] = frozenset({"t", "n"})

_WHITESPACE_TOKEN = FormatToken(TokenKind.WHITESPACE, " ", " ")


def tokenize_format(format_string: str) -> list[FormatToken]:
    """Tokenize a format string.

    Adjacent literal characters are merged into one LITERAL token and
    consecutive whitespace collapses into one WHITESPACE token.

    Examples:
        "yyyy-MM-dd" -> [yyyy, "-", MM, "-", dd]
        "%d %B, %Y" -> [%d, " ", %B, ",", " ", %Y]
        "h 'o''clock' tt" -> [h, " ", "o'clock", " ", tt]

    Args:
        format_string: Format string to tokenize

    Returns:
        List of tokens in source order

    Raises:
        FormatError: On a dangling '%', an unclosed quote, an unknown
            strftime directive or a weekday-name token
    """
    tokens: list[FormatToken] = []
    i = 0
    n = len(format_string)

    while i < n:
        char = format_string[i]

        if char.isspace():
            _append_whitespace(tokens)
            i += 1
            continue

        if char == "%":
            if i + 1 >= n:
                diagnostic = ErrorTemplate.format_unterminated_directive(format_string, "%")
                raise FormatError(diagnostic, format_string=format_string)
            code = format_string[i + 1]
            if code in _STRFTIME_WHITESPACE:
                _append_whitespace(tokens)
            elif code == "%":
                _append_literal(tokens, "%%", "%")
            elif code in _STRFTIME_DIRECTIVES:
                directive = _STRFTIME_DIRECTIVES[code]
                tokens.append(FormatToken(TokenKind.DIRECTIVE, "%" + code, directive, directive))
            else:
                diagnostic = ErrorTemplate.format_unknown_directive(format_string, "%" + code)
                raise FormatError(diagnostic, format_string=format_string)
            i += 2
            continue

        if char == "'":
            end, literal = _read_quoted(format_string, i)
            if literal:
                _append_literal(tokens, format_string[i:end], literal)
            i = end
            continue

        if char in _PATTERN_TOKENS:
            for candidate, directive in _PATTERN_TOKENS[char]:
                if format_string.startswith(candidate, i):
                    if directive is None:
                        diagnostic = ErrorTemplate.format_unknown_directive(
                            format_string, candidate
                        )
                        raise FormatError(diagnostic, format_string=format_string)
                    tokens.append(FormatToken(TokenKind.DIRECTIVE, candidate, directive, directive))
                    i += len(candidate)
                    break
            else:
                # Letter that starts no directive on its own ("y", "t")
                _append_literal(tokens, char, char)
                i += 1
            continue

        _append_literal(tokens, char, char)
        i += 1

    return tokens


def normalize_format(tokens: list[FormatToken]) -> str:
    """Rebuild the format string with every whitespace run collapsed.

    Example:
        "%d  %B,%t%Y" -> "%d %B, %Y"
    """
    return "".join(token.source for token in tokens)


def _append_whitespace(tokens: list[FormatToken]) -> None:
    if not tokens or tokens[-1].kind is not TokenKind.WHITESPACE:
        tokens.append(_WHITESPACE_TOKEN)


def _append_literal(tokens: list[FormatToken], source: str, value: str) -> None:
    if tokens and tokens[-1].kind is TokenKind.LITERAL:
        previous = tokens[-1]
        tokens[-1] = FormatToken(
            TokenKind.LITERAL, previous.source + source, previous.value + value
        )
    else:
        tokens.append(FormatToken(TokenKind.LITERAL, source, value))


def _read_quoted(format_string: str, start: int) -> tuple[int, str]:
    """Read a quoted literal starting at the opening quote.

    Returns:
        Tuple of (index after the closing quote, literal text)

    Raises:
        FormatError: If the quote is never closed
    """
    n = len(format_string)

    # '' outside a quoted section is a literal single quote
    if start + 1 < n and format_string[start + 1] == "'":
        return start + 2, "'"

    i = start + 1
    chars: list[str] = []
    while i < n:
        if format_string[i] == "'":
            # '' inside a quoted section is a literal single quote
            if i + 1 < n and format_string[i + 1] == "'":
                chars.append("'")
                i += 2
                continue
            return i + 1, "".join(chars)
        chars.append(format_string[i])
        i += 1

    diagnostic = ErrorTemplate.format_unterminated_directive(format_string, format_string[start:])
    raise FormatError(diagnostic, format_string=format_string)
