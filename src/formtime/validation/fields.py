"""Date and time field validators.

The validators are the collaborators of the parsing engine: they accept raw
form input (strings or already-typed values), try each configured input
format in order via try_parse_with_formats(), and either return a Python
date/time value or raise a user-facing ValidationError.

Parser detail never reaches the user. Every failed format is logged at DEBUG
level and the caller sees only "Enter a valid date." (or time/date-time).

Input formats are compiled when the field is constructed, so a malformed
format string fails fast with FormatError instead of at first use.

Thread Safety:
    Fields are frozen dataclasses and hold only immutable state. A single
    field instance can validate concurrently from multiple threads.

Python 3.13+.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import date, datetime, time
from typing import ClassVar

from formtime.constants import (
    DEFAULT_DATE_INPUT_FORMATS,
    DEFAULT_DATETIME_INPUT_FORMATS,
    DEFAULT_TIME_INPUT_FORMATS,
)
from formtime.diagnostics import ErrorTemplate, ValidationError
from formtime.parsing import (
    CanonicalTime,
    compile_format,
    is_valid_date_fields,
    try_parse_with_formats,
)
from formtime.runtime.locale_table import ENGLISH, LocaleTable

__all__ = ["DateField", "DateTimeField", "TimeField"]

logger = logging.getLogger(__name__)

_EMPTY_VALUES: tuple[object, ...] = (None, "")


@dataclass(frozen=True, slots=True)
class _TemporalField(ABC):
    """Shared clean() pipeline for date, time and date-time fields.

    Attributes:
        required: Reject empty input (None or "") when True
        input_formats: Formats tried in order; None selects the defaults
        locale: Month names and meridiem markers used by the formats
    """

    default_input_formats: ClassVar[tuple[str, ...]] = ()
    invalid_message: ClassVar[str] = ""

    required: bool = True
    input_formats: tuple[str, ...] | None = None
    locale: LocaleTable = ENGLISH

    def __post_init__(self) -> None:
        """Compile every input format up front.

        Raises:
            FormatError: If any input format is malformed
        """
        if self.input_formats is not None:
            # Accept any iterable of strings, store an immutable tuple
            object.__setattr__(self, "input_formats", tuple(self.input_formats))
        for format_string in self.formats:
            compile_format(format_string, self.locale)

    @property
    def formats(self) -> tuple[str, ...]:
        """Input formats in the order they are tried."""
        if self.input_formats is None:
            return self.default_input_formats
        return self.input_formats

    def clean(self, value: object) -> date | time | datetime | None:
        """Validate raw input and return the typed value.

        Args:
            value: Raw input: a string, a date/time value, None or ""

        Returns:
            Typed value, or None for empty input on an optional field

        Raises:
            ValidationError: code "required" for empty input on a required
                field, code "invalid" when no input format matches
        """
        if value in _EMPTY_VALUES:
            if self.required:
                raise ValidationError(ErrorTemplate.validation_required(), code="required")
            return None

        native = self._from_native(value)
        if native is not None:
            return native

        if not isinstance(value, str):
            raise self._invalid(repr(value))

        text = value.strip()
        result, _errors = try_parse_with_formats(
            text, self.formats, self.locale, message=self.invalid_message
        )
        if result is None or not is_valid_date_fields(result):
            logger.debug(
                "%s rejected %r after %d format(s)",
                type(self).__name__,
                text,
                len(self.formats),
            )
            raise self._invalid(text)
        return self._from_parsed(result)

    @abstractmethod
    def _from_native(self, value: object) -> date | time | datetime | None:
        """Convert an already-typed value, or return None for strings."""

    @abstractmethod
    def _from_parsed(self, parsed: CanonicalTime) -> date | time | datetime:
        """Convert a successful parse into the field's value type."""

    def _invalid(self, value: str) -> ValidationError:
        return ValidationError(
            ErrorTemplate.validation_invalid(self.invalid_message, value), code="invalid"
        )


@dataclass(frozen=True, slots=True)
class DateField(_TemporalField):
    """Validates input as a datetime.date.

    Example:
        >>> DateField().clean("Oct 25, 2006")
        datetime.date(2006, 10, 25)
        >>> DateField(input_formats=("%Y %m %d",)).clean("2006 10 25")
        datetime.date(2006, 10, 25)
    """

    default_input_formats: ClassVar[tuple[str, ...]] = DEFAULT_DATE_INPUT_FORMATS
    invalid_message: ClassVar[str] = "Enter a valid date."

    def _from_native(self, value: object) -> date | None:
        if isinstance(value, datetime):
            return value.date()
        if isinstance(value, date):
            return value
        return None

    def _from_parsed(self, parsed: CanonicalTime) -> date:
        return parsed.to_date()


@dataclass(frozen=True, slots=True)
class TimeField(_TemporalField):
    """Validates input as a datetime.time.

    Example:
        >>> TimeField().clean("14:25")
        datetime.time(14, 25)
        >>> TimeField(input_formats=("%I:%M %p",)).clean("4:25 PM")
        datetime.time(16, 25)
    """

    default_input_formats: ClassVar[tuple[str, ...]] = DEFAULT_TIME_INPUT_FORMATS
    invalid_message: ClassVar[str] = "Enter a valid time."

    def _from_native(self, value: object) -> time | None:
        if isinstance(value, datetime):
            return value.time()
        if isinstance(value, time):
            return value
        return None

    def _from_parsed(self, parsed: CanonicalTime) -> time:
        return parsed.to_time()


@dataclass(frozen=True, slots=True)
class DateTimeField(_TemporalField):
    """Validates input as a datetime.datetime.

    A date without a time of day becomes midnight of that day.

    Example:
        >>> DateTimeField().clean("2006-10-25 14:30")
        datetime.datetime(2006, 10, 25, 14, 30)
    """

    default_input_formats: ClassVar[tuple[str, ...]] = DEFAULT_DATETIME_INPUT_FORMATS
    invalid_message: ClassVar[str] = "Enter a valid date/time."

    def _from_native(self, value: object) -> datetime | None:
        if isinstance(value, datetime):
            return value
        if isinstance(value, date):
            return datetime(value.year, value.month, value.day)
        return None

    def _from_parsed(self, parsed: CanonicalTime) -> datetime:
        return parsed.to_datetime()
