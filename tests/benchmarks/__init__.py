"""Performance benchmarks for nuggetlex.

Benchmarks use pytest-benchmark to measure and track performance of critical operations.
Prevents performance regressions in parsing, extraction and localization.

Python 3.13+.
"""

from __future__ import annotations

__all__: list[str] = []
