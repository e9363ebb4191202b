"""Hypothesis strategies for formtime property tests.

Modules:
    times - Calendar values, month ends, 12-hour clock cases and lossless
        round-trip formats
"""

from .times import (
    FULL_PRECISION_FORMATS,
    calendar_datetimes,
    month_end_dates,
    twelve_hour_times,
)

__all__ = [
    "FULL_PRECISION_FORMATS",
    "calendar_datetimes",
    "month_end_dates",
    "twelve_hour_times",
]
