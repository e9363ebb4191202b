"""formtime exception hierarchy with structured diagnostics.

All exceptions optionally store Diagnostic objects for rich error information.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic

__all__ = [
    "FormTimeError",
    "FormatError",
    "ParseError",
    "RangeError",
    "ValidationError",
]


class FormTimeError(Exception):
    """Base exception for all formtime errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize FormTimeError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.message)
        else:
            self.diagnostic = None
            super().__init__(message)


class FormatError(FormTimeError):
    """Malformed or unsupported format string.

    Raised by the format compiler for unterminated or unrecognized directive
    tokens, and by strftime() for a dangling '%' at the end of the format.

    Attributes:
        format_string: The offending format string
    """

    def __init__(self, message: str | Diagnostic, *, format_string: str = "") -> None:
        """Initialize FormatError.

        Args:
            message: Error message string OR Diagnostic object
            format_string: The format string that failed to compile
        """
        super().__init__(message)
        self.format_string = format_string


class ParseError(FormTimeError):
    """Input text does not match the compiled format.

    Attributes:
        input_value: The text that failed to parse
        format_string: The format it was matched against
    """

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        input_value: str = "",
        format_string: str = "",
    ) -> None:
        """Initialize ParseError.

        Args:
            message: Error message string OR Diagnostic object
            input_value: The text that failed to parse
            format_string: The format it was matched against
        """
        super().__init__(message)
        self.input_value = input_value
        self.format_string = format_string


class RangeError(FormTimeError):
    """A captured value violates its calendar field's range.

    Covers plain bounds (month 13, minute 60) as well as calendar-aware day
    checks (April 31, February 29 in a common year).

    Attributes:
        field: Name of the offending field ('month', 'day', 'hour', ...)
        value: The out-of-range value
    """

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        field: str,
        value: int,
        input_value: str = "",
        format_string: str = "",
    ) -> None:
        """Initialize RangeError.

        Args:
            message: Error message string OR Diagnostic object
            field: Name of the offending field
            value: The out-of-range value
            input_value: The text that was being parsed
            format_string: The format it was matched against
        """
        super().__init__(message)
        self.field = field
        self.value = value
        self.input_value = input_value
        self.format_string = format_string


class ValidationError(FormTimeError):
    """User-facing validation failure raised by field validators.

    The message is meant for end users ("Enter a valid date."); parser detail
    is intentionally not part of it.

    Attributes:
        code: Short machine-readable code ('invalid', 'required')
    """

    def __init__(self, message: str | Diagnostic, *, code: str) -> None:
        """Initialize ValidationError.

        Args:
            message: User-facing message OR Diagnostic object
            code: Short machine-readable code
        """
        super().__init__(message)
        self.code = code

    @property
    def message(self) -> str:
        """The user-facing message."""
        return str(self)
