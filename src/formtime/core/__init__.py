"""Core utilities shared across the parsing, formatting and validation layers.

Exports:
    BabelImportError: Raised when a Babel-backed feature is used without Babel
    is_babel_available: Check whether the optional Babel dependency is installed
    require_babel: Fail fast when Babel is required but missing

Python 3.13+.
"""

from .babel_compat import BabelImportError, is_babel_available, require_babel

__all__ = ["BabelImportError", "is_babel_available", "require_babel"]
