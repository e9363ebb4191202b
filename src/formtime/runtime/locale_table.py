"""Locale tables: month names and meridiem markers used by the format compiler.

A LocaleTable is an explicit, immutable value passed to compile_format().
There is no ambient locale state: the English table is the default, and
tables for other locales are built from Babel CLDR data on request.

Thread Safety:
    LocaleTable is frozen and hashable. for_locale() results are cached via
    lru_cache (internally locked).

Python 3.13+.
"""

from __future__ import annotations

import functools
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from formtime.constants import MAX_LOCALE_CACHE_SIZE
from formtime.core.babel_compat import get_unknown_locale_error, require_babel
from formtime.diagnostics import ErrorTemplate
from formtime.locale_utils import get_babel_locale, normalize_locale

if TYPE_CHECKING:
    from babel import Locale

__all__ = ["ENGLISH", "LocaleTable"]

logger = logging.getLogger(__name__)

_MONTHS_PER_YEAR: int = 12


@dataclass(frozen=True, slots=True)
class LocaleTable:
    """Month names and AM/PM markers for one locale.

    Attributes:
        months: Full month names, January first
        short_months: Abbreviated month names, January first
        am: Ante meridiem marker
        pm: Post meridiem marker
        code: Locale code the table was built for (informational)

    Example:
        >>> table = LocaleTable.for_locale("de-DE")
        >>> table.months[2]
        'März'
        >>> table.month_number("März")
        3
    """

    months: tuple[str, ...]
    short_months: tuple[str, ...]
    am: str
    pm: str
    code: str = ""

    def __post_init__(self) -> None:
        """Validate table contents at construction time.

        Raises:
            ValueError: If a month list does not hold exactly 12 non-empty
                names, or if the meridiem markers are empty or identical.
        """
        # Tables are cache keys: any sequence of names is stored as a tuple
        object.__setattr__(self, "months", tuple(self.months))
        object.__setattr__(self, "short_months", tuple(self.short_months))
        for label, names in (("months", self.months), ("short_months", self.short_months)):
            if len(names) != _MONTHS_PER_YEAR:
                reason = f"{label} must have 12 entries, got {len(names)}"
                raise ValueError(ErrorTemplate.locale_table_invalid(reason).message)
            if not all(names):
                reason = f"{label} must not contain empty names"
                raise ValueError(ErrorTemplate.locale_table_invalid(reason).message)
        if not self.am or not self.pm:
            raise ValueError(ErrorTemplate.locale_table_invalid("empty meridiem marker").message)
        if self.am == self.pm:
            reason = f"AM and PM markers are identical ({self.am!r})"
            raise ValueError(ErrorTemplate.locale_table_invalid(reason).message)

    def month_number(self, name: str) -> int | None:
        """Return the 1-based month for a full month name, or None.

        Lookup is exact and case-sensitive.
        """
        try:
            return self.months.index(name) + 1
        except ValueError:
            return None

    def short_month_number(self, name: str) -> int | None:
        """Return the 1-based month for an abbreviated month name, or None."""
        try:
            return self.short_months.index(name) + 1
        except ValueError:
            return None

    @classmethod
    def for_locale(cls, locale_code: str) -> LocaleTable:
        """Build a table from Babel CLDR data.

        Unknown locales fall back to the English table with a warning, the
        same way formatting falls back to a known locale rather than failing.

        Args:
            locale_code: BCP-47 or POSIX locale code ("de-DE", "fr_FR")

        Returns:
            LocaleTable with CLDR format-context month names and AM/PM markers

        Raises:
            BabelImportError: If Babel is not installed
        """
        require_babel("LocaleTable.for_locale")
        return _load_babel_table(normalize_locale(locale_code))


@functools.lru_cache(maxsize=MAX_LOCALE_CACHE_SIZE)
def _load_babel_table(locale_code: str) -> LocaleTable:
    unknown_locale_error = get_unknown_locale_error()
    try:
        locale = get_babel_locale(locale_code)
    except (unknown_locale_error, ValueError) as e:
        logger.warning(
            "%s: %s. Falling back to English month names",
            ErrorTemplate.locale_unknown(locale_code).message,
            e,
        )
        return ENGLISH

    wide = locale.months["format"]["wide"]
    abbreviated = locale.months["format"]["abbreviated"]
    am, pm = _meridiem_markers(locale, locale_code)

    return LocaleTable(
        months=tuple(wide[month] for month in range(1, _MONTHS_PER_YEAR + 1)),
        short_months=tuple(abbreviated[month] for month in range(1, _MONTHS_PER_YEAR + 1)),
        am=am,
        pm=pm,
        code=locale_code,
    )


def _meridiem_markers(locale: Locale, locale_code: str) -> tuple[str, str]:
    """Return the format-context abbreviated AM/PM markers of a Babel locale.

    Locale.periods lacks "am"/"pm" keys for many locales (de, fr).
    """
    try:
        markers = locale.day_periods["format"]["abbreviated"]
        return markers["am"], markers["pm"]
    except KeyError:
        logger.debug(
            "No CLDR AM/PM markers for %s. Using English markers", locale_code
        )
        return ENGLISH.am, ENGLISH.pm


ENGLISH: LocaleTable = LocaleTable(
    months=(
        "January",
        "February",
        "March",
        "April",
        "May",
        "June",
        "July",
        "August",
        "September",
        "October",
        "November",
        "December",
    ),
    short_months=(
        "Jan",
        "Feb",
        "Mar",
        "Apr",
        "May",
        "Jun",
        "Jul",
        "Aug",
        "Sep",
        "Oct",
        "Nov",
        "Dec",
    ),
    am="AM",
    pm="PM",
    code="en",
)
