"""Shared constants for nuggetlex.

This module provides centralized configuration constants used across
the syntax, core and integration modules. Placing constants here avoids
circular imports and provides a single source of truth.

Constants are grouped by domain:
- Depth limits: Recursion protection for nested nugget parameters
- Default tokens: The nugget syntax used by most collaborators
- Logging: Truncation of user text in log records

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Depth limits
    "MAX_DEPTH",
    "FRAMES_PER_NESTING_LEVEL",
    "STACK_RESERVE_FRAMES",
    # Default tokens
    "DEFAULT_BEGIN_TOKEN",
    "DEFAULT_END_TOKEN",
    "DEFAULT_DELIMITER_TOKEN",
    "DEFAULT_COMMENT_TOKEN",
    "DEFAULT_PARAM_BEGIN_TOKEN",
    "DEFAULT_PARAM_END_TOKEN",
    # Logging
    "LOG_TRUNCATE",
]

# ============================================================================
# DEPTH LIMITS
# ============================================================================

# Maximum nesting depth of nugget-valued parameters.
# [[[a|||(((  [[[b|||(((  ...  )))]]]  )))]]] nested 100 levels deep is
# almost certainly adversarial or machine-generated input.
MAX_DEPTH: int = 100

# Every nesting level costs one zone frame and one nugget frame on the
# Python stack.
FRAMES_PER_NESTING_LEVEL: int = 2

# Frames kept free below the recursion limit for callbacks and logging
# handlers running at the deepest nesting level.
STACK_RESERVE_FRAMES: int = 100

# ============================================================================
# DEFAULT TOKENS
# ============================================================================

DEFAULT_BEGIN_TOKEN: str = "[[["
DEFAULT_END_TOKEN: str = "]]]"
DEFAULT_DELIMITER_TOKEN: str = "|||"
DEFAULT_COMMENT_TOKEN: str = "///"
DEFAULT_PARAM_BEGIN_TOKEN: str = "((("
DEFAULT_PARAM_END_TOKEN: str = ")))"

# ============================================================================
# LOGGING
# ============================================================================

# Maximum number of characters of document text included in a log record.
LOG_TRUNCATE: int = 50
