"""Message extraction from nugget-bearing source files.

Runs the parser under source processing and turns every reported nugget
into a catalog entry. Two entry points:

    extract_nuggets - Babel extraction method, registered as the ``nuggets``
        method of the ``babel.extractors`` entry point group, so
        ``pybabel extract -F babel.cfg`` picks nuggets out of any file type
    collect_catalog - Accumulate nuggets from in-memory documents into a
        babel.messages.catalog.Catalog

Example babel.cfg::

    [nuggets: **.cs]
    [nuggets: **.js]
    [nuggets: **.cshtml]
    extension = .html

Python 3.13+. External dependency: Babel (message catalogs).
"""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Collection, Iterable, Iterator, Mapping
from dataclasses import dataclass
from pathlib import PurePath
from typing import IO, TYPE_CHECKING, Any

from babel.messages.catalog import Catalog

from nuggetlex.enums import NuggetContext
from nuggetlex.syntax import DEFAULT_TOKENS, TokenSet, parse_nuggets
from nuggetlex.syntax.position import LineOffsetCache

if TYPE_CHECKING:
    from nuggetlex.syntax import Nugget

__all__ = [
    "ExtractedNugget",
    "collect_catalog",
    "extract_nuggets",
    "find_nuggets",
    "tokens_from_options",
]

logger = logging.getLogger(__name__)

_TOKEN_OPTIONS: tuple[str, ...] = tuple(f.name for f in dataclasses.fields(TokenSet))


@dataclass(frozen=True, slots=True)
class ExtractedNugget:
    """A message found in a source document.

    Attributes:
        lineno: 1-indexed line of the nugget
        msgid: Unescaped message id
        comment: Developer comment, or None
    """

    lineno: int
    msgid: str
    comment: str | None = None

    @property
    def comments(self) -> list[str]:
        """Comment as a list, the shape catalogs expect."""
        return [self.comment] if self.comment else []


def tokens_from_options(options: Mapping[str, Any]) -> TokenSet:
    """Build a token set from extractor options.

    Recognized keys: begin, end, delimiter, comment, param_begin, param_end.
    Missing or empty keys keep the default token.

    Raises:
        TokenSetError: If the resulting token set is invalid
    """
    overrides = {name: options[name] for name in _TOKEN_OPTIONS if options.get(name)}
    if not overrides:
        return DEFAULT_TOKENS
    return dataclasses.replace(DEFAULT_TOKENS, **overrides)


class _NuggetLocator:
    """Maps callback arguments back to document lines.

    Nuggets reported with the document as entity carry their true offset.
    Bare parameters and rebuilt canonical nuggets do not, so they are found
    by searching the document for their raw text: a bare parameter forward
    from the furthest offset seen so far, a rebuilt nugget backward from it
    (an enclosing nugget starts before the nuggets nested in it and completes
    after them).
    """

    __slots__ = ("_furthest", "_lines", "_text", "_tokens")

    def __init__(self, text: str, tokens: TokenSet) -> None:
        self._text = text
        self._tokens = tokens
        self._lines = LineOffsetCache(text)
        self._furthest = 0

    def locate(self, nugget_text: str, offset: int, entity: str) -> int:
        """Return the 1-indexed line of a reported nugget."""
        tokens = self._tokens
        if entity is self._text:
            pos = offset
        elif offset == len(tokens.begin):
            raw = nugget_text[len(tokens.begin) : len(nugget_text) - len(tokens.end)]
            fragment = tokens.delimiter_param_begin + raw
            pos = self._text.find(fragment, self._furthest)
            if pos >= 0:
                pos += len(tokens.delimiter_param_begin)
        else:
            body = nugget_text[len(tokens.begin) :]
            cuts = [i for i in (body.find(tokens.comment), body.find(tokens.delimiter)) if i >= 0]
            fragment = tokens.begin + body[: min(cuts, default=len(body))]
            pos = self._text.rfind(fragment, 0, self._furthest + len(fragment))

        if pos < 0:
            pos = self._furthest
        self._furthest = max(self._furthest, pos)
        return self._lines.get_line(pos)


def find_nuggets(
    text: str,
    *,
    tokens: TokenSet = DEFAULT_TOKENS,
    file_extension: str | None = None,
) -> list[ExtractedNugget]:
    """Find every message in a source document.

    Nuggets are reported in the order they complete, so an inner nugget is
    listed before the nugget whose parameter contains it.

    Args:
        text: Document text
        tokens: Token set
        file_extension: Extension selecting the unescaping table

    Returns:
        Extracted messages in callback order

    Example:
        >>> [(n.lineno, n.msgid) for n in find_nuggets("a\\n[[[Hello]]]")]
        [(2, 'Hello')]
    """
    locator = _NuggetLocator(text, tokens)
    found: list[ExtractedNugget] = []

    def collect(nugget_text: str, offset: int, nugget: Nugget, entity: str) -> None:
        lineno = locator.locate(nugget_text, offset, entity)
        found.append(ExtractedNugget(lineno, nugget.msgid, nugget.comment))

    parse_nuggets(
        text,
        collect,
        context=NuggetContext.SOURCE,
        tokens=tokens,
        file_extension=file_extension,
    )
    return found


def extract_nuggets(
    fileobj: IO[bytes],
    keywords: Mapping[str, Any],
    comment_tags: Collection[str],
    options: Mapping[str, Any],
) -> Iterator[tuple[int, str | None, str, list[str]]]:
    """Babel extraction method for nuggets.

    keywords and comment_tags are part of the extractor protocol but do not
    apply: nuggets are not function calls and carry their own comments.

    Options:
        encoding: Source encoding (default: utf-8)
        extension: File extension selecting the unescaping table (default:
            the extension of fileobj.name, when available)
        begin, end, delimiter, comment, param_begin, param_end: Token
            overrides

    Yields:
        (lineno, funcname, message, comments) tuples; funcname is None
    """
    encoding = options.get("encoding") or "utf-8"
    extension = options.get("extension")
    if not extension:
        name = getattr(fileobj, "name", None)
        extension = PurePath(name).suffix if isinstance(name, str) else None

    text = fileobj.read().decode(encoding)
    tokens = tokens_from_options(options)
    for item in find_nuggets(text, tokens=tokens, file_extension=extension):
        yield item.lineno, None, item.msgid, item.comments


def collect_catalog(
    documents: Iterable[tuple[str, str]],
    *,
    tokens: TokenSet = DEFAULT_TOKENS,
    catalog: Catalog | None = None,
) -> Catalog:
    """Accumulate the nuggets of in-memory documents into a message catalog.

    Duplicate message ids are merged by the catalog: locations and comments
    accumulate on one entry.

    Args:
        documents: (filename, text) pairs; the filename's extension selects
            the unescaping table and the filename is recorded as location
        tokens: Token set
        catalog: Catalog to add to (default: a new empty Catalog)

    Returns:
        The catalog the messages were added to

    Example:
        >>> catalog = collect_catalog([("views/home.html", "[[[Welcome]]]")])
        >>> catalog.get("Welcome").locations
        [('views/home.html', 1)]
    """
    if catalog is None:
        catalog = Catalog()
    for filename, text in documents:
        extension = PurePath(filename).suffix
        found = find_nuggets(text, tokens=tokens, file_extension=extension)
        logger.debug("Extracted %d nuggets from %s", len(found), filename)
        for item in found:
            catalog.add(
                item.msgid,
                locations=[(filename, item.lineno)],
                auto_comments=item.comments,
            )
    return catalog
