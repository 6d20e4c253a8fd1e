"""Fuzz testing infrastructure for nuggetlex.

This package contains:
- shadow_parser: Simple reference implementation for differential testing
- test_nugget_parser_property: Differential and robustness fuzzing of the parser

Python 3.13+.
"""
