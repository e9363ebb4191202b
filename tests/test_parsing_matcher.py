"""Tests for parsing/matcher.py: extraction and calendar field resolution.

Python 3.13+.
"""

from __future__ import annotations

from datetime import date, datetime, time

import pytest

from formtime import CanonicalTime, LocaleTable, ParseError, RangeError, strptime
from formtime.constants import MAX_INPUT_LENGTH
from formtime.diagnostics import DiagnosticCode
from formtime.parsing import days_in_month, is_leap_year

_OCT_25_2006 = (2006, 10, 25, 0, 0, 0, 0, 1, -1)


# ============================================================================
# Default input formats
# ============================================================================


class TestDefaultDateFormats:
    """Every default date format parses its canonical spelling."""

    @pytest.mark.parametrize(
        ("text", "format_string"),
        [
            ("2006-10-25", "%Y-%m-%d"),
            ("10/25/2006", "%m/%d/%Y"),
            ("10/25/06", "%m/%d/%y"),
            ("Oct 25 2006", "%b %d %Y"),
            ("Oct 25, 2006", "%b %d, %Y"),
            ("25 Oct 2006", "%d %b %Y"),
            ("25 Oct, 2006", "%d %b, %Y"),
            ("October 25 2006", "%B %d %Y"),
            ("October 25, 2006", "%B %d, %Y"),
            ("25 October 2006", "%d %B %Y"),
            ("25 October, 2006", "%d %B, %Y"),
        ],
    )
    def test_date(self, text: str, format_string: str) -> None:
        """Date-only formats default the time of day to midnight."""
        assert tuple(strptime(text, format_string)) == _OCT_25_2006


class TestDefaultTimeFormats:
    """Time-only formats default the date to 1900-01-01."""

    def test_with_seconds(self) -> None:
        """%H:%M:%S captures all three time fields."""
        assert tuple(strptime("14:30:59", "%H:%M:%S")) == (1900, 1, 1, 14, 30, 59, 0, 1, -1)

    def test_without_seconds(self) -> None:
        """%H:%M leaves seconds at zero."""
        assert tuple(strptime("14:30", "%H:%M")) == (1900, 1, 1, 14, 30, 0, 0, 1, -1)


class TestDefaultDateTimeFormats:
    """Date-time formats combine both halves."""

    @pytest.mark.parametrize(
        ("text", "format_string", "expected"),
        [
            ("2006-10-25 14:30:59", "%Y-%m-%d %H:%M:%S", (2006, 10, 25, 14, 30, 59)),
            ("2006-10-25 14:30", "%Y-%m-%d %H:%M", (2006, 10, 25, 14, 30, 0)),
            ("2006-10-25", "%Y-%m-%d", (2006, 10, 25, 0, 0, 0)),
            ("10/25/2006 14:30:59", "%m/%d/%Y %H:%M:%S", (2006, 10, 25, 14, 30, 59)),
            ("10/25/2006 14:30", "%m/%d/%Y %H:%M", (2006, 10, 25, 14, 30, 0)),
            ("10/25/2006", "%m/%d/%Y", (2006, 10, 25, 0, 0, 0)),
            ("10/25/06 14:30:59", "%m/%d/%y %H:%M:%S", (2006, 10, 25, 14, 30, 59)),
            ("10/25/06 14:30", "%m/%d/%y %H:%M", (2006, 10, 25, 14, 30, 0)),
            ("10/25/06", "%m/%d/%y", (2006, 10, 25, 0, 0, 0)),
        ],
    )
    def test_datetime(
        self, text: str, format_string: str, expected: tuple[int, ...]
    ) -> None:
        """Weekday, yearday and DST keep their placeholder values."""
        assert tuple(strptime(text, format_string)) == (*expected, 0, 1, -1)

    def test_result_type(self) -> None:
        """Results are CanonicalTime records with named fields."""
        result = strptime("2006-10-25 14:30", "%Y-%m-%d %H:%M")
        assert isinstance(result, CanonicalTime)
        assert result.year == 2006
        assert result.minute == 30
        assert result.dst == -1


class TestPatternLetterFormats:
    """Pattern-letter formats parse the same way as strftime formats."""

    def test_iso_date(self) -> None:
        """yyyy-MM-dd accepts one- or two-digit month and day."""
        assert tuple(strptime("2006-4-5", "yyyy-MM-dd"))[:3] == (2006, 4, 5)

    def test_month_name_and_quoted_literal(self) -> None:
        """Quoted literals must appear verbatim."""
        result = strptime("25 of October 2006", "d 'of' MMMM yyyy")
        assert tuple(result)[:3] == (2006, 10, 25)

    def test_short_month_name(self) -> None:
        """MMM accepts abbreviated month names."""
        assert tuple(strptime("Feb 3, 2010", "MMM d, yyyy"))[:3] == (2010, 2, 3)

    def test_twelve_hour_with_marker(self) -> None:
        """h:mm tt with PM adds twelve hours."""
        result = strptime("4:25 PM", "h:mm tt")
        assert (result.hour, result.minute) == (16, 25)


# ============================================================================
# Calendar validation
# ============================================================================


class TestLeapYears:
    """February 29 is only valid in leap years."""

    def test_divisible_by_four(self) -> None:
        """2004 is divisible by 4 but not by 100."""
        assert tuple(strptime("2004-02-29", "%Y-%m-%d"))[:3] == (2004, 2, 29)

    def test_divisible_by_four_hundred(self) -> None:
        """2000 is divisible by 400."""
        assert tuple(strptime("2000-02-29", "%Y-%m-%d"))[:3] == (2000, 2, 29)

    def test_divisible_by_one_hundred_only(self) -> None:
        """2200 is divisible by 100 but not by 400, so not a leap year."""
        with pytest.raises(RangeError) as exc_info:
            strptime("2200-02-29", "%Y-%m-%d")
        assert exc_info.value.field == "day"
        assert exc_info.value.value == 29
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.RANGE_DAY_OUT_OF_MONTH


_MONTH_LENGTHS_2006 = [
    ("01", 31),
    ("02", 28),
    ("03", 31),
    ("04", 30),
    ("05", 31),
    ("06", 30),
    ("07", 31),
    ("08", 31),
    ("09", 30),
    ("10", 31),
    ("11", 30),
    ("12", 31),
]


class TestMonthLengths:
    """The last day of each month parses; the day after it does not."""

    @pytest.mark.parametrize(("month", "days"), _MONTH_LENGTHS_2006)
    def test_last_day_accepted(self, month: str, days: int) -> None:
        """The month's last day is valid."""
        result = strptime(f"2006-{month}-{days}", "%Y-%m-%d")
        assert tuple(result) == (2006, int(month), days, 0, 0, 0, 0, 1, -1)

    @pytest.mark.parametrize(("month", "days"), _MONTH_LENGTHS_2006)
    def test_day_after_last_rejected(self, month: str, days: int) -> None:
        """One past the last day raises RangeError."""
        with pytest.raises(RangeError) as exc_info:
            strptime(f"2006-{month}-{days + 1}", "%Y-%m-%d")
        assert exc_info.value.field == "day"

    def test_message_names_day_and_month(self) -> None:
        """The error message reports the day and month."""
        with pytest.raises(RangeError, match=r"Day 31 is out of range for month 4"):
            strptime("2006-04-31", "%Y-%m-%d")

    def test_day_checked_without_year_directive(self) -> None:
        """Without a year the default year 1900 (not a leap year) applies."""
        with pytest.raises(RangeError):
            strptime("02/29", "%m/%d")


class TestFieldBounds:
    """Captured numbers outside their field's bounds raise RangeError."""

    @pytest.mark.parametrize(
        ("text", "format_string", "field"),
        [
            ("0", "%m", "month"),
            ("13", "%m", "month"),
            ("0", "%d", "day"),
            ("32", "%d", "day"),
            ("24", "%H", "hour"),
            ("60", "%M", "minute"),
            ("60", "%S", "second"),
            ("0", "%I", "hour"),
            ("13", "%I", "hour"),
        ],
    )
    def test_out_of_range(self, text: str, format_string: str, field: str) -> None:
        """Each field reports its own name and the offending value."""
        with pytest.raises(RangeError) as exc_info:
            strptime(text, format_string)
        assert exc_info.value.field == field
        assert exc_info.value.value == int(text)
        assert exc_info.value.input_value == text
        assert exc_info.value.format_string == format_string
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.RANGE_FIELD_OUT_OF_RANGE

    @pytest.mark.parametrize(
        ("text", "format_string"),
        [("1", "%m"), ("12", "%m"), ("31", "%d"), ("23", "%H"), ("59", "%M"), ("59", "%S")],
    )
    def test_upper_and_lower_bounds_inclusive(self, text: str, format_string: str) -> None:
        """Boundary values themselves are accepted."""
        strptime(text, format_string)

    def test_month_message(self) -> None:
        """Bounds errors name the field and value."""
        with pytest.raises(RangeError, match=r"Month is out of range: 13"):
            strptime("13", "%m")

    def test_range_error_is_not_parse_error(self) -> None:
        """Range failures and match failures are distinct error types."""
        with pytest.raises(RangeError) as exc_info:
            strptime("13", "%m")
        assert not isinstance(exc_info.value, ParseError)


# ============================================================================
# Year windowing
# ============================================================================


class TestTwoDigitYears:
    """Two-digit years are windowed around 68."""

    @pytest.mark.parametrize(
        ("text", "year"),
        [
            ("06", 2006),
            ("6", 2006),
            ("00", 2000),
            ("67", 2067),
            ("68", 1968),
            ("70", 1970),
            ("99", 1999),
        ],
    )
    def test_window(self, text: str, year: int) -> None:
        """Values below 68 map to 20xx, the rest to 19xx."""
        assert strptime(text, "%y").year == year

    def test_four_digit_year_verbatim(self) -> None:
        """yyyy is taken as written, including years below 1000."""
        assert strptime("0999", "%Y").year == 999

    def test_four_digit_year_wins_over_two_digit(self) -> None:
        """yyyy takes precedence when both year directives are present."""
        assert strptime("2006 99", "%Y %y").year == 2006


# ============================================================================
# Twelve-hour clock
# ============================================================================


class TestTwelveHourClock:
    """h/%I resolve with the meridiem marker."""

    @pytest.mark.parametrize(
        ("text", "hour"),
        [
            ("12:00 AM", 0),
            ("1:00 AM", 1),
            ("11:59 AM", 11),
            ("12:00 PM", 12),
            ("1:00 PM", 13),
            ("4:25 PM", 16),
            ("11:59 PM", 23),
        ],
    )
    def test_marker(self, text: str, hour: int) -> None:
        """12 AM is midnight, 12 PM is noon."""
        assert strptime(text, "%I:%M %p").hour == hour

    def test_missing_marker_is_morning(self) -> None:
        """Without a marker the hour is taken as a.m."""
        assert strptime("4:25", "h:mm").hour == 4
        assert strptime("12:25", "h:mm").hour == 0

    def test_twenty_four_hour_wins(self) -> None:
        """H takes precedence over h and the marker."""
        assert strptime("15 3 AM", "H h tt").hour == 15

    def test_marker_is_case_sensitive(self) -> None:
        """Markers must match the locale spelling exactly."""
        with pytest.raises(ParseError):
            strptime("4:25 pm", "h:mm tt")

    def test_locale_markers(self) -> None:
        """Custom locale tables supply their own markers."""
        table = LocaleTable(
            months=tuple(f"m{i}" for i in range(1, 13)),
            short_months=tuple(f"s{i}" for i in range(1, 13)),
            am="vorm.",
            pm="nachm.",
        )
        assert strptime("4:25 nachm.", "h:mm tt", table).hour == 16
        assert strptime("4:25 vorm.", "h:mm tt", table).hour == 4


# ============================================================================
# Month resolution
# ============================================================================


class TestMonthResolution:
    """Numeric month beats full name, which beats short name."""

    def test_numeric_beats_names(self) -> None:
        """An explicit month number wins over any name."""
        assert strptime("3 October Jan", "%m %B %b").month == 3

    def test_full_name_beats_short_name(self) -> None:
        """A full name wins over an abbreviation."""
        assert strptime("October Jan", "%B %b").month == 10

    def test_later_duplicate_wins(self) -> None:
        """When a directive repeats, the later capture is used."""
        assert strptime("3 4", "%m %m").month == 4

    def test_name_prefix_does_not_shadow(self) -> None:
        """A shorter locale name that prefixes a longer one still matches."""
        table = LocaleTable(
            months=("Jun", "Juni", *(f"M{i}" for i in range(3, 13))),
            short_months=tuple(f"S{i}" for i in range(1, 13)),
            am="AM",
            pm="PM",
        )
        assert strptime("Juni 2006", "MMMM yyyy", table).month == 2
        assert strptime("Jun 2006", "MMMM yyyy", table).month == 1

    def test_metacharacters_in_names_match_literally(self) -> None:
        """Names containing regex metacharacters are escaped."""
        table = LocaleTable(
            months=tuple(f"month{i}" for i in range(1, 13)),
            short_months=(
                "janv.",
                "févr.",
                "mars",
                "avr.",
                "mai",
                "juin",
                "juil.",
                "août",
                "sept.",
                "oct.",
                "nov.",
                "déc.",
            ),
            am="AM",
            pm="PM",
        )
        assert strptime("3 janv. 2006", "d MMM yyyy", table).month == 1
        with pytest.raises(ParseError):
            strptime("3 janvX 2006", "d MMM yyyy", table)


# ============================================================================
# Match failures
# ============================================================================


class TestMatchFailures:
    """Input that does not match raises ParseError."""

    def test_partial_match_rejected(self) -> None:
        """Trailing text after a valid date is not accepted."""
        with pytest.raises(ParseError) as exc_info:
            strptime("2006-10-25x", "%Y-%m-%d")
        assert exc_info.value.input_value == "2006-10-25x"
        assert exc_info.value.format_string == "%Y-%m-%d"
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.PARSE_NO_MATCH

    def test_trailing_newline_rejected(self) -> None:
        """The match is anchored to the absolute end of input."""
        with pytest.raises(ParseError):
            strptime("2006-10-25\n", "%Y-%m-%d")

    def test_leading_text_rejected(self) -> None:
        """The match is anchored to the start of input."""
        with pytest.raises(ParseError):
            strptime("x2006-10-25", "%Y-%m-%d")

    def test_message(self) -> None:
        """The message echoes data and format."""
        with pytest.raises(ParseError, match=r"data=200a-10-25, format=%Y-%m-%d"):
            strptime("200a-10-25", "%Y-%m-%d")

    def test_three_digit_field_rejected(self) -> None:
        """Numeric fields accept at most two digits."""
        with pytest.raises(ParseError):
            strptime("123", "%d")

    def test_non_ascii_digits_rejected(self) -> None:
        """Only ASCII digits are accepted."""
        with pytest.raises(ParseError):
            strptime("٢٥", "%d")

    def test_literal_case_matters(self) -> None:
        """Month names are matched case-sensitively."""
        with pytest.raises(ParseError):
            strptime("oct 25 2006", "%b %d %Y")

    def test_non_string_input(self) -> None:
        """Non-string input is rejected."""
        with pytest.raises(ParseError) as exc_info:
            strptime(20061025, "%Y%m%d")  # type: ignore[arg-type]
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.PARSE_NOT_STRING

    def test_input_too_long(self) -> None:
        """Inputs past the length limit are rejected before matching."""
        with pytest.raises(ParseError) as exc_info:
            strptime("1" * (MAX_INPUT_LENGTH + 1), "%d")
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.PARSE_INPUT_TOO_LONG


# ============================================================================
# Whitespace
# ============================================================================


class TestWhitespaceMatching:
    """Whitespace in the format matches any whitespace run in the input."""

    def test_multiple_spaces_in_input(self) -> None:
        """One format space matches several input spaces."""
        assert strptime("25   Oct 2006", "%d %b %Y").month == 10

    def test_tab_in_input(self) -> None:
        """A format space matches a tab."""
        assert strptime("14:30\t2006", "%H:%M %Y").year == 2006

    def test_whitespace_required(self) -> None:
        """A format space requires at least one input whitespace character."""
        with pytest.raises(ParseError):
            strptime("25Oct2006", "%d %b %Y")

    def test_quoted_space_is_exact(self) -> None:
        """A space inside quotes is a literal character."""
        assert strptime("14h 30", "H'h 'm").minute == 30
        with pytest.raises(ParseError):
            strptime("14h  30", "H'h 'm")


# ============================================================================
# CanonicalTime conversions
# ============================================================================


class TestCanonicalTimeConversions:
    """CanonicalTime converts to datetime types."""

    def test_to_date(self) -> None:
        """to_date() keeps the calendar date."""
        assert strptime("2006-10-25", "%Y-%m-%d").to_date() == date(2006, 10, 25)

    def test_to_time(self) -> None:
        """to_time() keeps the time of day."""
        assert strptime("14:30:59", "%H:%M:%S").to_time() == time(14, 30, 59)

    def test_to_datetime(self) -> None:
        """to_datetime() keeps every field."""
        result = strptime("2006-10-25 14:30:59", "%Y-%m-%d %H:%M:%S")
        assert result.to_datetime() == datetime(2006, 10, 25, 14, 30, 59)

    def test_defaults(self) -> None:
        """An empty record is 1900-01-01 00:00:00."""
        assert tuple(CanonicalTime()) == (1900, 1, 1, 0, 0, 0, 0, 1, -1)


# ============================================================================
# Calendar helpers
# ============================================================================


class TestCalendar:
    """Gregorian leap-year rule and month lengths."""

    @pytest.mark.parametrize(
        ("year", "leap"),
        [(2004, True), (2000, True), (2006, False), (1900, False), (2200, False)],
    )
    def test_is_leap_year(self, year: int, leap: bool) -> None:
        """Divisible by 4, except centuries not divisible by 400."""
        assert is_leap_year(year) is leap

    def test_february(self) -> None:
        """February has 29 days only in leap years."""
        assert days_in_month(2, 2000) == 29
        assert days_in_month(2, 1900) == 28

    @pytest.mark.parametrize("month", [0, 13])
    def test_invalid_month(self, month: int) -> None:
        """Months outside 1-12 are rejected."""
        with pytest.raises(ValueError):
            days_in_month(month, 2006)
