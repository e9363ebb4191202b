"""Diagnostic codes and data structures.

Defines error codes, error categories, and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum, StrEnum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "ErrorCategory",
]


class ErrorCategory(StrEnum):
    """Error categorization for formtime diagnostics.

    Inherits from ``StrEnum`` so that ``str(category)`` and direct string
    comparisons work without accessing ``.value``.

    Categories:
        FORMAT: Malformed or unsupported format string
        PARSE: Input text does not match the compiled format
        RANGE: Captured value outside its field's valid range
        VALIDATION: User-facing field validation failure
        LOCALE: Locale table could not be built
    """

    FORMAT = "format"
    PARSE = "parse"
    RANGE = "range"
    VALIDATION = "validation"
    LOCALE = "locale"


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Format errors (format string compilation and rendering)
        2000-2999: Parse errors (input does not match)
        3000-3999: Range errors (field invariants)
        4000-4999: Validation errors (field validators)
        5000-5999: Locale errors (locale table construction)
    """

    # Format errors (1000-1999)
    FORMAT_UNTERMINATED_DIRECTIVE = 1001
    FORMAT_UNKNOWN_DIRECTIVE = 1002
    FORMAT_NOT_STRING = 1003

    # Parse errors (2000-2999)
    PARSE_NO_MATCH = 2001
    PARSE_NOT_STRING = 2002
    PARSE_INPUT_TOO_LONG = 2003

    # Range errors (3000-3999)
    RANGE_FIELD_OUT_OF_RANGE = 3001
    RANGE_DAY_OUT_OF_MONTH = 3002

    # Validation errors (4000-4999)
    VALIDATION_INVALID = 4001
    VALIDATION_REQUIRED = 4002

    # Locale errors (5000-5999)
    LOCALE_UNKNOWN = 5001
    LOCALE_TABLE_INVALID = 5002

    @property
    def category(self) -> ErrorCategory:
        """Category derived from the code's numeric block."""
        return _CATEGORY_BY_BLOCK[self.value // 1000]


_CATEGORY_BY_BLOCK: dict[int, ErrorCategory] = {
    1: ErrorCategory.FORMAT,
    2: ErrorCategory.PARSE,
    3: ErrorCategory.RANGE,
    4: ErrorCategory.VALIDATION,
    5: ErrorCategory.LOCALE,
}


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Provides rich error information for both humans and tools.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        format_string: Format string involved in the failure (if any)
        input_value: Input text involved in the failure (if any)
        field_name: Calendar field that failed validation (range errors)
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    format_string: str | None = None
    input_value: str | None = None
    field_name: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic in the default (Rust compiler) style.

        Example output:
            error[RANGE_FIELD_OUT_OF_RANGE]: Month is out of range: 13
              = field: month
              = help: Months run from 1 to 12

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
