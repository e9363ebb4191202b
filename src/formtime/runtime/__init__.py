"""Runtime data shared by the parser: locale tables.

Exports:
    LocaleTable: Month names and AM/PM markers for one locale
    ENGLISH: Default English table

Python 3.13+.
"""

from .locale_table import ENGLISH, LocaleTable

__all__ = ["ENGLISH", "LocaleTable"]
