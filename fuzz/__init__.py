"""Atheris fuzz targets for the format compiler and matcher.

Requires Atheris installation (pip install formtime[fuzz]).

Targets:
    dates.py - Detects unexpected exceptions from parse_time(), strftime()
        and the field validators
"""
