"""nuggetlex - Extraction and substitution of i18n nuggets.

A nugget is a delimited message marker embedded in arbitrary text, e.g.
``[[[Hello %0|||(((World)))///greeting]]]``: a message id, optional
parameters (which may contain nested nuggets) and an optional comment.
The parser finds every nugget in a document, hands it to a callback and
rebuilds the document with the callback's replacements.

Public API:
    NuggetParser - Recursive nugget parser for one token set and context
    NuggetContext - SOURCE (extract from code) or RESPONSE (translate output)
    TokenSet - Configurable nugget delimiters
    Nugget - Parsed nugget handed to callbacks
    parse_nuggets - Parse with a cached parser

Exceptions:
    NuggetError - Base exception class
    TokenSetError - Invalid token configuration
    ParserConfigError - Invalid parser limits

Submodules:
    nuggetlex.syntax.escapes - File-type specific message id unescaping
    nuggetlex.extract - Babel extraction method and catalog collection
    nuggetlex.localize - Response-side translation with Babel translations
"""

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

from .diagnostics import NuggetError, ParserConfigError, TokenSetError
from .enums import NuggetContext
from .syntax import (
    DEFAULT_TOKENS,
    Nugget,
    NuggetCallback,
    NuggetParser,
    TokenSet,
    parse_nuggets,
)

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
try:
    __version__ = _get_version("nuggetlex")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "DEFAULT_TOKENS",
    "Nugget",
    "NuggetCallback",
    "NuggetContext",
    "NuggetError",
    "NuggetParser",
    "ParserConfigError",
    "TokenSet",
    "TokenSetError",
    "__version__",
    "parse_nuggets",
]
