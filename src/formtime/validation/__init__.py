"""Field validators built on the parsing engine.

Public API:
    DateField - Cleans input to datetime.date
    TimeField - Cleans input to datetime.time
    DateTimeField - Cleans input to datetime.datetime

Python 3.13+.
"""

from .fields import DateField, DateTimeField, TimeField

__all__ = ["DateField", "DateTimeField", "TimeField"]
