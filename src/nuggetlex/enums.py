"""Enumerations for nuggetlex type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class NuggetContext(StrEnum):
    """Processing context of a parser instance.

    StrEnum provides automatic string conversion: str(NuggetContext.SOURCE) == "source"
    """

    SOURCE = "source"
    """Extracting messages from program source.

    Message ids are unescaped per file type and bare parameters are
    reported to the callback as messages of their own.
    """

    RESPONSE = "response"
    """Substituting translations into already-rendered text.

    Message ids are delivered raw and parsed parameters are exposed
    on the nugget as format items.
    """


class Lexeme(StrEnum):
    """Lexeme kinds recognized by the token matcher.

    Declaration order is the matching priority: combined two-token lexemes
    come before the single tokens they are built from.
    """

    DELIMITER_PARAM_BEGIN = "delimiter_param_begin"
    """Delimiter + ParamBegin: |||((( opens a nested parameter"""

    PARAM_END_DELIMITER = "param_end_delimiter"
    """ParamEnd + Delimiter: )))||| closes a nested zone, more parameters follow"""

    PARAM_END_END = "param_end_end"
    """ParamEnd + End: )))]]] closes a nested zone, the nugget ends"""

    BEGIN = "begin"
    """Begin: [[["""

    DELIMITER = "delimiter"
    """Delimiter: |||"""

    COMMENT = "comment"
    """Comment: ///"""

    END = "end"
    """End: ]]]"""

    @property
    def is_param_end(self) -> bool:
        """True for the two lexemes that terminate a nested zone."""
        return self in (Lexeme.PARAM_END_DELIMITER, Lexeme.PARAM_END_END)


__all__ = [
    "Lexeme",
    "NuggetContext",
]
