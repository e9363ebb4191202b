"""Rendering calendar moments to text.

Public API:
    strftime - Render a date, datetime, time or CanonicalTime
    CalendarMoment - Type alias for accepted moment values

Python 3.13+.
"""

from .formatter import CalendarMoment, strftime

__all__ = ["CalendarMoment", "strftime"]
