"""Diagnostic system for formtime errors.

Provides structured error diagnostics with codes, hints, and categories.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, ErrorCategory
from .errors import (
    FormatError,
    FormTimeError,
    ParseError,
    RangeError,
    ValidationError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorCategory",
    "ErrorTemplate",
    "FormTimeError",
    "FormatError",
    "OutputFormat",
    "ParseError",
    "RangeError",
    "ValidationError",
]
