"""Nugget token configuration and lexeme matching.

A nugget looks like ``[[[msgid|||param|||(((nested)))///comment]]]`` with the
default tokens, but every token is configurable. The matcher compiles the six
tokens, plus the three combined two-token lexemes, into one regular expression
whose alternation order is the matching priority:

    1. Delimiter + ParamBegin
    2. ParamEnd + Delimiter
    3. ParamEnd + End
    4. Begin
    5. Delimiter
    6. Comment
    7. End

Python's ``re`` alternation is ordered choice: at a given offset the first
alternative that matches wins, so a combined lexeme is never split into its
parts.

Python 3.13+. Zero external dependencies.
"""

import re
from dataclasses import dataclass, field, fields
from itertools import combinations

from nuggetlex.constants import (
    DEFAULT_BEGIN_TOKEN,
    DEFAULT_COMMENT_TOKEN,
    DEFAULT_DELIMITER_TOKEN,
    DEFAULT_END_TOKEN,
    DEFAULT_PARAM_BEGIN_TOKEN,
    DEFAULT_PARAM_END_TOKEN,
)
from nuggetlex.diagnostics import ErrorTemplate, TokenSetError
from nuggetlex.enums import Lexeme

__all__ = ["DEFAULT_TOKENS", "TokenMatch", "TokenMatcher", "TokenSet"]


@dataclass(frozen=True, slots=True)
class TokenSet:
    """Immutable set of the six literal strings defining nugget syntax.

    Attributes:
        begin: Opens a nugget
        end: Closes a nugget
        delimiter: Separates message id and parameters
        comment: Starts the developer comment
        param_begin: Opens a nugget-valued parameter (after a delimiter)
        param_end: Closes a nugget-valued parameter

    Raises:
        TokenSetError: If a token is empty or two tokens are equal

    Example:
        >>> TokenSet(begin="{{", end="}}", delimiter="|", comment="#",
        ...          param_begin="(", param_end=")").begin
        '{{'
    """

    begin: str = DEFAULT_BEGIN_TOKEN
    end: str = DEFAULT_END_TOKEN
    delimiter: str = DEFAULT_DELIMITER_TOKEN
    comment: str = DEFAULT_COMMENT_TOKEN
    param_begin: str = DEFAULT_PARAM_BEGIN_TOKEN
    param_end: str = DEFAULT_PARAM_END_TOKEN

    def __post_init__(self) -> None:
        """Validate that tokens are non-empty and pairwise distinct."""
        named = [(f.name, getattr(self, f.name)) for f in fields(self)]
        for name, value in named:
            if not isinstance(value, str) or not value:
                raise TokenSetError(ErrorTemplate.token_empty(name))
        for (first, first_value), (second, second_value) in combinations(named, 2):
            if first_value == second_value:
                raise TokenSetError(
                    ErrorTemplate.token_duplicate(first, second, first_value)
                )

    @property
    def delimiter_param_begin(self) -> str:
        """Combined lexeme opening a nested parameter."""
        return self.delimiter + self.param_begin

    @property
    def param_end_delimiter(self) -> str:
        """Combined lexeme closing a nested parameter before another one."""
        return self.param_end + self.delimiter

    @property
    def param_end_end(self) -> str:
        """Combined lexeme closing a nested parameter and the nugget."""
        return self.param_end + self.end

    def lexeme_text(self, lexeme: Lexeme) -> str:
        """Return the literal text of a lexeme under this token set."""
        match lexeme:
            case Lexeme.DELIMITER_PARAM_BEGIN:
                return self.delimiter_param_begin
            case Lexeme.PARAM_END_DELIMITER:
                return self.param_end_delimiter
            case Lexeme.PARAM_END_END:
                return self.param_end_end
            case Lexeme.BEGIN:
                return self.begin
            case Lexeme.DELIMITER:
                return self.delimiter
            case Lexeme.COMMENT:
                return self.comment
            case Lexeme.END:
                return self.end


DEFAULT_TOKENS = TokenSet()


@dataclass(frozen=True, slots=True)
class TokenMatch:
    """One lexeme occurrence in a document.

    Attributes:
        lexeme: Which lexeme matched
        start: Offset of the first character
        end: Offset just past the last character
    """

    lexeme: Lexeme
    start: int
    end: int

    @property
    def length(self) -> int:
        """Length of the matched text."""
        return self.end - self.start


@dataclass(frozen=True, slots=True)
class TokenMatcher:
    """Compiled ordered-choice scanner for the lexemes of a token set.

    Read-only after construction; a single instance may be shared by any
    number of concurrent parse operations.

    Example:
        >>> matcher = TokenMatcher(DEFAULT_TOKENS)
        >>> m = matcher.search("x |||((( y", 0)
        >>> (m.lexeme, m.start, m.end)
        (<Lexeme.DELIMITER_PARAM_BEGIN: 'delimiter_param_begin'>, 2, 8)
    """

    tokens: TokenSet
    _pattern: re.Pattern[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        """Compile the lexeme alternation in priority order."""
        alternatives = "|".join(
            f"(?P<{lexeme.value}>{re.escape(self.tokens.lexeme_text(lexeme))})"
            for lexeme in Lexeme
        )
        object.__setattr__(self, "_pattern", re.compile(alternatives, re.DOTALL))

    def search(self, text: str, pos: int) -> TokenMatch | None:
        """Find the next lexeme at or after pos.

        Args:
            text: Document text
            pos: Offset to start scanning from

        Returns:
            TokenMatch for the earliest lexeme, or None when the rest of
            the document contains no lexeme
        """
        match = self._pattern.search(text, pos)
        if match is None:
            return None
        # lastgroup names the alternative that matched
        return TokenMatch(
            lexeme=Lexeme(match.lastgroup),
            start=match.start(),
            end=match.end(),
        )
