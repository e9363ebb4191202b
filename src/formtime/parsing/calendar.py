"""Gregorian calendar rules used by the matcher.

Python 3.13+. Zero external dependencies.
"""

__all__ = ["days_in_month", "is_leap_year"]

_THIRTY_DAY_MONTHS: frozenset[int] = frozenset({4, 6, 9, 11})


def is_leap_year(year: int) -> bool:
    """Divisible by 4, and either not by 100 or also by 400."""
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(month: int, year: int) -> int:
    """Number of days in a month (1-12) of the given year.

    Raises:
        ValueError: If month is outside 1-12
    """
    if not 1 <= month <= 12:
        msg = f"month must be in 1..12, got {month}"
        raise ValueError(msg)
    if month == 2:
        return 29 if is_leap_year(year) else 28
    if month in _THIRTY_DAY_MONTHS:
        return 30
    return 31
