"""nuggetlex exception hierarchy with structured diagnostics.

Malformed documents never raise: the parser degrades to literal text.
These exceptions cover configuration mistakes made by the caller.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic


class NuggetError(Exception):
    """Base exception for all nuggetlex errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize NuggetError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class TokenSetError(NuggetError, ValueError):
    """Invalid nugget token configuration.

    Raised when a token set contains an empty token or two tokens with
    the same text.
    """


class ParserConfigError(NuggetError, ValueError):
    """Invalid parser limit configuration (e.g. non-positive nesting depth)."""
