"""Diagnostic codes and data structures.

Defines error codes and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Configuration errors (token sets, parser limits)
        3000-3999: Syntax conditions (recovered from, never raised)
    """

    # Configuration errors (1000-1999)
    TOKEN_EMPTY = 1001
    TOKEN_DUPLICATE = 1002
    INVALID_NESTING_DEPTH = 1003

    # Syntax conditions (3000-3999)
    UNTERMINATED_NUGGET = 3001
    NESTING_DEPTH_EXCEEDED = 3002


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like a compiler message.

        Example output:
            error[TOKEN_DUPLICATE]: Tokens 'begin' and 'end' are both '||'
              = help: Every token of a token set must be distinct

        Returns:
            Formatted error message
        """
        lines = [f"{self.severity}[{self.code.name}]: {self.message}"]
        if self.hint:
            lines.append(f"  = help: {self.hint}")
        return "\n".join(lines)
