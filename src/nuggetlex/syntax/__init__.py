"""Nugget syntax package.

Provides token configuration, lexeme matching, file-type unescaping, the
Nugget entity and the recursive parser.

Python 3.13+.
"""

from functools import lru_cache

from nuggetlex.enums import NuggetContext

from .escapes import EscapeTable, escape_csharp, get_unescaper, unescape
from .nugget import Nugget
from .parser import NuggetCallback, NuggetParser
from .tokens import DEFAULT_TOKENS, TokenMatch, TokenMatcher, TokenSet

__all__ = [
    "DEFAULT_TOKENS",
    "EscapeTable",
    "Nugget",
    "NuggetCallback",
    "NuggetParser",
    "TokenMatch",
    "TokenMatcher",
    "TokenSet",
    "escape_csharp",
    "get_unescaper",
    "parse_nuggets",
    "unescape",
]


@lru_cache(maxsize=32)
def _shared_parser(tokens: TokenSet, context: NuggetContext) -> NuggetParser:
    return NuggetParser(tokens, context)


def parse_nuggets(
    entity: str,
    on_nugget: NuggetCallback,
    *,
    context: NuggetContext = NuggetContext.SOURCE,
    tokens: TokenSet = DEFAULT_TOKENS,
    file_extension: str | None = None,
) -> str:
    """Parse a document for nuggets.

    Convenience function for NuggetParser.parse(). Parsers are cached per
    (tokens, context) so the token matcher is compiled once.

    Args:
        entity: Document text
        on_nugget: Substitution callback
        context: Processing context (default: SOURCE)
        tokens: Token set (default: DEFAULT_TOKENS)
        file_extension: Extension selecting the unescaping table

    Returns:
        The document with all nugget replacements applied

    Example:
        >>> from nuggetlex.syntax import parse_nuggets
        >>> parse_nuggets("a [[[b]]] c", lambda text, offset, nugget, entity: "B")
        'a B c'
    """
    return _shared_parser(tokens, context).parse(entity, on_nugget, file_extension)
