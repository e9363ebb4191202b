#!/usr/bin/env python3
"""Date/Time Format Compiler and Matcher Fuzzer (Atheris).

Targets: formtime.parsing (tokenizer, compiler, matcher)
Feeds arbitrary format strings and inputs through parse_time() and the
field validators. Any exception other than the documented ones is a finding.

Built for Python 3.13+.
"""

from __future__ import annotations

import atexit
import json
import logging
import sys

# --- PEP 695 Type Aliases ---
type FuzzStats = dict[str, int | str]

_fuzz_stats: FuzzStats = {"status": "incomplete", "iterations": 0, "findings": 0}


def _emit_final_report() -> None:
    report = json.dumps(_fuzz_stats)
    print(f"\n[SUMMARY-JSON-BEGIN]{report}[SUMMARY-JSON-END]", file=sys.stderr)


atexit.register(_emit_final_report)

try:
    import atheris
except ImportError:
    sys.exit(1)

logging.getLogger("formtime").setLevel(logging.CRITICAL)

with atheris.instrument_imports(include=["formtime"]):
    from formtime import (
        CanonicalTime,
        DateTimeField,
        FormatError,
        FormTimeError,
        ValidationError,
        parse_time,
        strftime,
    )
    from formtime.constants import DEFAULT_DATETIME_INPUT_FORMATS

# Formats that exercise every directive family, quoting and whitespace
SEED_FORMATS = [
    *DEFAULT_DATETIME_INPUT_FORMATS,
    "yyyy-MM-dd HH:mm:ss",
    "d MMMM yyyy",
    "MMM d, yy h:mm tt",
    "h 'o''clock' tt",
    "%d %B,%t%Y",
    "%I:%M %p",
]

_FIELD = DateTimeField(required=False)


def test_one_input(data: bytes) -> None:
    """Atheris entry point: compile, match and render arbitrary input."""
    _fuzz_stats["iterations"] = int(_fuzz_stats["iterations"]) + 1
    _fuzz_stats["status"] = "running"

    fdp = atheris.FuzzedDataProvider(data)

    # 1. Inputs
    use_seed_format = fdp.ConsumeBool()
    format_string = (
        fdp.PickValueInList(SEED_FORMATS)
        if use_seed_format
        else fdp.ConsumeUnicodeNoSurrogates(30)
    )
    input_str = fdp.ConsumeUnicodeNoSurrogates(60)

    # 2. Execution
    try:
        result, errors = parse_time(input_str, format_string)
        if result is not None:
            assert isinstance(result, CanonicalTime)
            assert errors == ()
            # Parsed records always render back without error
            strftime(result, "%Y-%m-%d %H:%M:%S")
        else:
            assert len(errors) == 1
            assert isinstance(errors[0], FormTimeError)

        try:
            _FIELD.clean(input_str)
        except ValidationError:
            pass  # Expected for unparseable input

        try:
            strftime(CanonicalTime(), format_string)
        except FormatError:
            pass  # Expected for a dangling '%'

    except Exception:
        _fuzz_stats["findings"] = int(_fuzz_stats["findings"]) + 1
        raise


if __name__ == "__main__":
    atheris.Setup(sys.argv, test_one_input)
    atheris.Fuzz()
