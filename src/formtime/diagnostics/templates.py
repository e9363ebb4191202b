"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode

__all__ = ["ErrorTemplate"]


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This provides:
        - Testable error messages
        - Consistent formatting
        - Documentation of all error cases
    """

    # =========================================================================
    # FORMAT ERRORS (1000-1999)
    # =========================================================================

    @staticmethod
    def format_unterminated_directive(format_string: str, token: str) -> Diagnostic:
        """Format string ends inside a directive or quoted literal.

        Args:
            format_string: The offending format string
            token: The incomplete token ('%' or the open quote section)

        Returns:
            Diagnostic for FORMAT_UNTERMINATED_DIRECTIVE
        """
        msg = f"Unterminated directive {token!r} in format {format_string!r}"
        return Diagnostic(
            code=DiagnosticCode.FORMAT_UNTERMINATED_DIRECTIVE,
            message=msg,
            hint="Use '%%' for a literal percent sign and close every quoted literal",
            format_string=format_string,
        )

    @staticmethod
    def format_unknown_directive(format_string: str, token: str) -> Diagnostic:
        """Format string contains a directive with no matching pattern.

        Args:
            format_string: The offending format string
            token: The unrecognized directive token

        Returns:
            Diagnostic for FORMAT_UNKNOWN_DIRECTIVE
        """
        msg = f"Unrecognized directive {token!r} in format {format_string!r}"
        return Diagnostic(
            code=DiagnosticCode.FORMAT_UNKNOWN_DIRECTIVE,
            message=msg,
            hint=(
                "Supported directives: yyyy yy M MM MMM MMMM d dd H HH h hh m mm s ss tt "
                "and %Y %y %m %b %B %d %H %I %M %S %p %%"
            ),
            format_string=format_string,
        )

    @staticmethod
    def format_not_string(received_type: str) -> Diagnostic:
        """Format argument is not a string.

        Args:
            received_type: Type name of the received value

        Returns:
            Diagnostic for FORMAT_NOT_STRING
        """
        msg = f"Format must be a string, got {received_type}"
        return Diagnostic(
            code=DiagnosticCode.FORMAT_NOT_STRING,
            message=msg,
        )

    # =========================================================================
    # PARSE ERRORS (2000-2999)
    # =========================================================================

    @staticmethod
    def parse_no_match(value: str, format_string: str) -> Diagnostic:
        """Input does not match the compiled format.

        Args:
            value: The input text
            format_string: The format it was matched against

        Returns:
            Diagnostic for PARSE_NO_MATCH
        """
        msg = f"Time data did not match format: data={value}, format={format_string}"
        return Diagnostic(
            code=DiagnosticCode.PARSE_NO_MATCH,
            message=msg,
            hint="Literal characters in the format must appear verbatim in the input",
            format_string=format_string,
            input_value=value,
        )

    @staticmethod
    def parse_not_string(received_type: str) -> Diagnostic:
        """Input to parse is not a string.

        Args:
            received_type: Type name of the received value

        Returns:
            Diagnostic for PARSE_NOT_STRING
        """
        msg = f"Expected string, got {received_type}"
        return Diagnostic(
            code=DiagnosticCode.PARSE_NOT_STRING,
            message=msg,
        )

    @staticmethod
    def parse_input_too_long(length: int, limit: int) -> Diagnostic:
        """Input exceeds the accepted length.

        Args:
            length: Length of the received input
            limit: Maximum accepted length

        Returns:
            Diagnostic for PARSE_INPUT_TOO_LONG
        """
        msg = f"Input of {length} characters exceeds limit of {limit}"
        return Diagnostic(
            code=DiagnosticCode.PARSE_INPUT_TOO_LONG,
            message=msg,
        )

    # =========================================================================
    # RANGE ERRORS (3000-3999)
    # =========================================================================

    @staticmethod
    def field_out_of_range(field_name: str, value: int, low: int, high: int) -> Diagnostic:
        """Captured value outside its field's fixed bounds.

        Args:
            field_name: Calendar field ('month', 'day', 'hour', ...)
            value: The captured value
            low: Smallest valid value
            high: Largest valid value

        Returns:
            Diagnostic for RANGE_FIELD_OUT_OF_RANGE
        """
        msg = f"{field_name.capitalize()} is out of range: {value}"
        return Diagnostic(
            code=DiagnosticCode.RANGE_FIELD_OUT_OF_RANGE,
            message=msg,
            hint=f"Valid {field_name} values run from {low} to {high}",
            field_name=field_name,
        )

    @staticmethod
    def day_out_of_month(day: int, month: int, year: int, days_in_month: int) -> Diagnostic:
        """Day does not exist in the resolved month and year.

        Args:
            day: The captured day of month
            month: The resolved month
            year: The resolved year
            days_in_month: Number of days the month has in that year

        Returns:
            Diagnostic for RANGE_DAY_OUT_OF_MONTH
        """
        msg = f"Day {day} is out of range for month {month}"
        return Diagnostic(
            code=DiagnosticCode.RANGE_DAY_OUT_OF_MONTH,
            message=msg,
            hint=f"Month {month} of {year} has {days_in_month} days",
            field_name="day",
        )

    # =========================================================================
    # VALIDATION ERRORS (4000-4999)
    # =========================================================================

    @staticmethod
    def validation_invalid(message: str, value: str) -> Diagnostic:
        """Field input matched none of its formats.

        Args:
            message: User-facing message ('Enter a valid date.')
            value: The rejected input

        Returns:
            Diagnostic for VALIDATION_INVALID
        """
        return Diagnostic(
            code=DiagnosticCode.VALIDATION_INVALID,
            message=message,
            input_value=value,
        )

    @staticmethod
    def validation_required() -> Diagnostic:
        """Required field received an empty value.

        Returns:
            Diagnostic for VALIDATION_REQUIRED
        """
        return Diagnostic(
            code=DiagnosticCode.VALIDATION_REQUIRED,
            message="This field is required.",
        )

    # =========================================================================
    # LOCALE ERRORS (5000-5999)
    # =========================================================================

    @staticmethod
    def locale_unknown(locale_code: str) -> Diagnostic:
        """Locale code not known to Babel.

        Args:
            locale_code: The unknown locale code

        Returns:
            Diagnostic for LOCALE_UNKNOWN
        """
        msg = f"Unknown locale '{locale_code}'"
        return Diagnostic(
            code=DiagnosticCode.LOCALE_UNKNOWN,
            message=msg,
            hint="Use BCP 47 locale codes (e.g., 'en_US', 'de_DE', 'lv_LV')",
        )

    @staticmethod
    def locale_table_invalid(reason: str) -> Diagnostic:
        """Locale table contents violate its invariants.

        Args:
            reason: What is wrong with the table

        Returns:
            Diagnostic for LOCALE_TABLE_INVALID
        """
        msg = f"Invalid locale table: {reason}"
        return Diagnostic(
            code=DiagnosticCode.LOCALE_TABLE_INVALID,
            message=msg,
            hint="Supply 12 month names, 12 short month names and distinct AM/PM markers",
        )
