"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    """

    @staticmethod
    def token_empty(name: str) -> Diagnostic:
        """Token set contains an empty token.

        Args:
            name: Field name of the empty token

        Returns:
            Diagnostic for TOKEN_EMPTY
        """
        return Diagnostic(
            code=DiagnosticCode.TOKEN_EMPTY,
            message=f"Token '{name}' must not be empty",
            hint="Every nugget token needs at least one character",
        )

    @staticmethod
    def token_duplicate(first: str, second: str, value: str) -> Diagnostic:
        """Two tokens of a token set share the same text.

        Args:
            first: Field name of the first token
            second: Field name of the second token
            value: The shared token text

        Returns:
            Diagnostic for TOKEN_DUPLICATE
        """
        return Diagnostic(
            code=DiagnosticCode.TOKEN_DUPLICATE,
            message=f"Tokens '{first}' and '{second}' are both {value!r}",
            hint="Every token of a token set must be distinct",
        )

    @staticmethod
    def invalid_nesting_depth(depth: int) -> Diagnostic:
        """Parser configured with an unusable nesting depth.

        Args:
            depth: The rejected depth

        Returns:
            Diagnostic for INVALID_NESTING_DEPTH
        """
        return Diagnostic(
            code=DiagnosticCode.INVALID_NESTING_DEPTH,
            message=f"max_nesting_depth must be positive, got {depth}",
        )

    @staticmethod
    def unterminated_nugget(position: int) -> Diagnostic:
        """Nugget without an End token.

        Args:
            position: Offset of the Begin token

        Returns:
            Diagnostic for UNTERMINATED_NUGGET (warning severity)
        """
        return Diagnostic(
            code=DiagnosticCode.UNTERMINATED_NUGGET,
            message=f"Unterminated nugget at position {position}",
            hint="The remainder of the document is kept as literal text",
            severity="warning",
        )

    @staticmethod
    def nesting_depth_exceeded(max_depth: int, position: int) -> Diagnostic:
        """Nested parameters deeper than the configured limit.

        Args:
            max_depth: The configured nesting limit
            position: Offset of the nugget whose parameter was too deep

        Returns:
            Diagnostic for NESTING_DEPTH_EXCEEDED (warning severity)
        """
        return Diagnostic(
            code=DiagnosticCode.NESTING_DEPTH_EXCEEDED,
            message=(
                f"Nugget parameter nesting exceeds {max_depth} levels "
                f"at position {position}"
            ),
            hint="The remainder of the document is kept as literal text",
            severity="warning",
        )
