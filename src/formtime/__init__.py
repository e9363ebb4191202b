"""formtime - Date/time parsing and validation for form input.

Compiles human-readable format strings ("yyyy-MM-dd HH:mm", "%d %B %Y") into
matchers that turn free-form text into validated calendar fields, with
leap-year and month-length checks and locale-aware month and AM/PM names.

Public API:
    strptime - Parse text with one format (raises on failure)
    parse_time - Parse text with one format (returns result and errors)
    try_parse_with_formats - Try formats in order, first success wins
    compile_format - Compile and cache a format for repeated use
    strftime - Render a date/time value with a strftime-style format
    CanonicalTime - Nine-field parse result
    LocaleTable - Month names and AM/PM markers (ENGLISH by default)
    DateField, TimeField, DateTimeField - Form field validators

Exceptions:
    FormTimeError - Base exception class
    FormatError - Malformed format string
    ParseError - Input does not match the format
    RangeError - Captured value out of range
    ValidationError - User-facing field validation failure

Submodules:
    formtime.parsing - Tokenizer, compiler, matcher and type guards
    formtime.formatting - strftime-style rendering
    formtime.validation - Field validators
    formtime.runtime - Locale tables
    formtime.diagnostics - Error codes, templates and formatting
"""

from .diagnostics import (
    FormatError,
    FormTimeError,
    ParseError,
    RangeError,
    ValidationError,
)
from .formatting import strftime
from .parsing import (
    CanonicalTime,
    CompiledFormat,
    compile_format,
    parse_time,
    strptime,
    try_parse_with_formats,
)
from .runtime import ENGLISH, LocaleTable
from .validation import DateField, DateTimeField, TimeField

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("formtime")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "ENGLISH",
    "CanonicalTime",
    "CompiledFormat",
    "DateField",
    "DateTimeField",
    "FormTimeError",
    "FormatError",
    "LocaleTable",
    "ParseError",
    "RangeError",
    "TimeField",
    "ValidationError",
    "__version__",
    "compile_format",
    "parse_time",
    "strftime",
    "strptime",
    "try_parse_with_formats",
]
