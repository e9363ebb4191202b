"""Matcher/extractor: compiled format + text -> CanonicalTime.

Resolution order:
    1. Full match against the compiled pattern (no partial records)
    2. Captures zipped with expected directives; later duplicates win
    3. Year: yyyy verbatim, yy windowed around TWO_DIGIT_YEAR_PIVOT
    4. Month: numeric > full name > short name
    5. Day: bounded to [1, 31] here, calendar-checked in step 8
    6. Hour: H directly; else h (12 -> 0) plus 12 for the PM marker
    7. Minute, second: [0, 59]
    8. Day re-checked against the true length of the resolved month/year

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from datetime import date, datetime, time
from typing import TYPE_CHECKING, NamedTuple

from formtime.constants import (
    DEFAULT_DAY,
    DEFAULT_DST,
    DEFAULT_MONTH,
    DEFAULT_WEEKDAY,
    DEFAULT_YEAR,
    DEFAULT_YEARDAY,
    MAX_INPUT_LENGTH,
    TWO_DIGIT_YEAR_PIVOT,
)
from formtime.diagnostics import Diagnostic, ErrorTemplate, ParseError, RangeError

from .calendar import days_in_month
from .tokenizer import Directive

if TYPE_CHECKING:
    from .compiler import CompiledFormat

__all__ = ["CanonicalTime", "extract"]


class CanonicalTime(NamedTuple):
    """Nine-field calendar record produced by parsing.

    Laid out like time.struct_time. Weekday, yearday and DST are not
    computed and always hold their placeholder values.

    Example:
        >>> tuple(strptime("2006-10-25 14:30", "%Y-%m-%d %H:%M"))
        (2006, 10, 25, 14, 30, 0, 0, 1, -1)
    """

    year: int = DEFAULT_YEAR
    month: int = DEFAULT_MONTH
    day: int = DEFAULT_DAY
    hour: int = 0
    minute: int = 0
    second: int = 0
    weekday: int = DEFAULT_WEEKDAY
    yearday: int = DEFAULT_YEARDAY
    dst: int = DEFAULT_DST

    def to_date(self) -> date:
        """Date part as a datetime.date."""
        return date(self.year, self.month, self.day)

    def to_time(self) -> time:
        """Time-of-day part as a datetime.time."""
        return time(self.hour, self.minute, self.second)

    def to_datetime(self) -> datetime:
        """Full record as a naive datetime.datetime."""
        return datetime(self.year, self.month, self.day, self.hour, self.minute, self.second)


def extract(compiled: CompiledFormat, text: str) -> CanonicalTime:
    """Match text against a compiled format and resolve calendar fields.

    Args:
        compiled: Result of compile_format()
        text: Input text

    Returns:
        CanonicalTime with every field validated

    Raises:
        ParseError: If text is not a string, is too long, or does not match
        RangeError: If a captured value violates its field's range
    """
    if not isinstance(text, str):
        diagnostic = ErrorTemplate.parse_not_string(type(text).__name__)  # type: ignore[unreachable]
        raise ParseError(diagnostic, input_value=str(text), format_string=compiled.format_string)

    if len(text) > MAX_INPUT_LENGTH:
        diagnostic = ErrorTemplate.parse_input_too_long(len(text), MAX_INPUT_LENGTH)
        raise ParseError(
            diagnostic, input_value=text[:MAX_INPUT_LENGTH], format_string=compiled.format_string
        )

    match = compiled.pattern.match(text)
    if match is None:
        diagnostic = ErrorTemplate.parse_no_match(text, compiled.format_string)
        raise ParseError(diagnostic, input_value=text, format_string=compiled.format_string)

    data: dict[Directive, str] = dict(zip(compiled.directives, match.groups(), strict=True))
    return _Resolver(compiled, text, data).resolve()


class _Resolver:
    """Turns a directive -> raw capture mapping into a CanonicalTime."""

    __slots__ = ("_compiled", "_data", "_text")

    def __init__(self, compiled: CompiledFormat, text: str, data: dict[Directive, str]) -> None:
        self._compiled = compiled
        self._text = text
        self._data = data

    def resolve(self) -> CanonicalTime:
        year = self._year()
        month = self._month()
        day = self._bounded(Directive.DAY, "day", 1, 31, DEFAULT_DAY)
        hour = self._hour()
        minute = self._bounded(Directive.MINUTE, "minute", 0, 59, 0)
        second = self._bounded(Directive.SECOND, "second", 0, 59, 0)

        # Month length depends on the year, so this runs once both are known
        limit = days_in_month(month, year)
        if day > limit:
            raise self._range_error(
                ErrorTemplate.day_out_of_month(day, month, year, limit), "day", day
            )

        return CanonicalTime(year, month, day, hour, minute, second)

    def _year(self) -> int:
        if Directive.YEAR in self._data:
            return int(self._data[Directive.YEAR])
        if Directive.YEAR_2_DIGIT in self._data:
            year = int(self._data[Directive.YEAR_2_DIGIT])
            if year < TWO_DIGIT_YEAR_PIVOT:
                return 2000 + year
            return 1900 + year
        return DEFAULT_YEAR

    def _month(self) -> int:
        if Directive.MONTH in self._data:
            return self._bounded(Directive.MONTH, "month", 1, 12, DEFAULT_MONTH)

        locale = self._compiled.locale
        month: int | None = None
        if Directive.MONTH_NAME in self._data:
            month = locale.month_number(self._data[Directive.MONTH_NAME])
        elif Directive.MONTH_SHORT_NAME in self._data:
            month = locale.short_month_number(self._data[Directive.MONTH_SHORT_NAME])
        # The pattern only admits locale names, so a failed lookup is
        # unreachable; treat it as "no month given".
        return month if month is not None else DEFAULT_MONTH

    def _hour(self) -> int:
        if Directive.HOUR_24 in self._data:
            return self._bounded(Directive.HOUR_24, "hour", 0, 23, 0)
        if Directive.HOUR_12 not in self._data:
            return 0

        hour = self._bounded(Directive.HOUR_12, "hour", 1, 12, 0)
        # Without a marker the hour is taken as a.m.; 12 a.m. is midnight
        if hour == 12:
            hour = 0
        if self._data.get(Directive.MERIDIEM) == self._compiled.locale.pm:
            hour += 12
        return hour

    def _bounded(self, directive: Directive, field: str, low: int, high: int, default: int) -> int:
        raw = self._data.get(directive)
        if raw is None:
            return default
        value = int(raw)
        if not low <= value <= high:
            raise self._range_error(
                ErrorTemplate.field_out_of_range(field, value, low, high), field, value
            )
        return value

    def _range_error(self, diagnostic: Diagnostic, field: str, value: int) -> RangeError:
        return RangeError(
            diagnostic,
            field=field,
            value=value,
            input_value=self._text,
            format_string=self._compiled.format_string,
        )
