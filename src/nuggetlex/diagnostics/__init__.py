"""Diagnostic system for nuggetlex errors.

Provides structured error diagnostics with codes and hints.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import NuggetError, ParserConfigError, TokenSetError
from .templates import ErrorTemplate

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "ErrorTemplate",
    "NuggetError",
    "ParserConfigError",
    "TokenSetError",
]
