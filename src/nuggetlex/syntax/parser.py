"""Recursive nugget parser.

This module provides the NuggetParser class that locates nuggets in a
document, hands each one to a caller-supplied callback and rebuilds the
document with the callback's replacements applied in place.

Architecture:
    One call to :meth:`NuggetParser.parse` creates a private
    :class:`_ParseOperation` holding the per-call state (document, callback,
    unescaper). Parsing is a pair of mutually recursive functions:

    - ``_parse_zone`` scans a zone (the whole document, or the contents of
      one ``|||(((...)))`` parameter) for nuggets
    - ``_parse_nugget`` parses one nugget body from its Begin token to its
      End token, descending into a nested zone for every nugget-valued
      parameter

    Both return a :class:`_ParseResult` (replacement text, next position,
    contains-nuggets flag); accumulators are locals, never shared fields.

Robustness:
    Malformed input never raises. Unterminated nuggets, stray tokens and
    nesting beyond ``max_nesting_depth`` degrade to literal text.

Thread Safety:
    A NuggetParser is immutable after construction. Concurrent parse() calls
    on different documents are safe as long as the callback is.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass

from nuggetlex.constants import LOG_TRUNCATE, MAX_DEPTH
from nuggetlex.core.depth_guard import NestingDepth, depth_clamp, stack_headroom
from nuggetlex.diagnostics import ErrorTemplate, ParserConfigError
from nuggetlex.enums import Lexeme, NuggetContext
from nuggetlex.syntax.escapes import Unescaper, get_unescaper
from nuggetlex.syntax.nugget import Nugget
from nuggetlex.syntax.tokens import DEFAULT_TOKENS, TokenMatch, TokenMatcher, TokenSet

__all__ = ["NuggetCallback", "NuggetParser"]

logger = logging.getLogger(__name__)

type NuggetCallback = Callable[[str, int, Nugget, str], str | None]
"""Substitution callback: (nugget_text, offset, nugget, entity_text) -> replacement.

Returning None keeps the nugget's message id as its replacement.
"""


@dataclass(frozen=True, slots=True)
class _ParseResult:
    """Outcome of parsing one zone or one nugget.

    Attributes:
        replacement: Text that replaces the parsed region
        next_position: Offset at which the caller resumes scanning
        contains_nuggets: True if at least one real nugget was parsed
    """

    replacement: str
    next_position: int
    contains_nuggets: bool = False


class NuggetParser:
    """Nugget parser for one token set and processing context.

    Attributes:
        tokens: Token set defining the nugget syntax
        context: SOURCE (extract from program source) or RESPONSE
            (substitute into rendered text)
        max_nesting_depth: Maximum depth of nested nugget parameters

    Example:
        >>> parser = NuggetParser(context=NuggetContext.RESPONSE)
        >>> parser.parse(
        ...     "<p>[[[Hello|||World]]]</p>",
        ...     lambda text, offset, nugget, entity: nugget.msgid.upper(),
        ... )
        '<p>HELLO</p>'
    """

    __slots__ = ("_context", "_matcher", "_max_nesting_depth", "_tokens")

    def __init__(
        self,
        tokens: TokenSet = DEFAULT_TOKENS,
        context: NuggetContext = NuggetContext.SOURCE,
        *,
        max_nesting_depth: int | None = None,
    ) -> None:
        """Initialize parser and compile the token matcher.

        Args:
            tokens: Token set (default: [[[ ]]] ||| /// ((( ))))
            context: Processing context, fixed for the parser's lifetime
            max_nesting_depth: Maximum nesting of nugget-valued parameters
                (default: 100). Clamped against the Python recursion limit.

        Raises:
            ParserConfigError: If max_nesting_depth is not positive
        """
        requested = max_nesting_depth if max_nesting_depth is not None else MAX_DEPTH
        if requested <= 0:
            raise ParserConfigError(ErrorTemplate.invalid_nesting_depth(requested))
        self._tokens = tokens
        self._context = NuggetContext(context)
        self._matcher = TokenMatcher(tokens)
        self._max_nesting_depth = depth_clamp(requested)

    @property
    def tokens(self) -> TokenSet:
        """Token set defining the nugget syntax."""
        return self._tokens

    @property
    def context(self) -> NuggetContext:
        """Processing context."""
        return self._context

    @property
    def matcher(self) -> TokenMatcher:
        """Compiled lexeme matcher for the token set."""
        return self._matcher

    @property
    def max_nesting_depth(self) -> int:
        """Maximum depth of nested nugget parameters."""
        return self._max_nesting_depth

    def parse(
        self,
        entity: str,
        on_nugget: NuggetCallback,
        file_extension: str | None = None,
    ) -> str:
        """Parse a document, replacing every nugget with the callback's result.

        Args:
            entity: Document text (source file, rendered response, ...)
            on_nugget: Called once per well-formed nugget, in the order the
                nuggets complete (inner nuggets before the nugget containing
                them). Exceptions raised by it propagate.
            file_extension: Extension of the document (".cs", ".js", ".sql",
                ".xml", ".html", ".resx") selecting the unescaping table under
                SOURCE processing. Anything else disables unescaping.

        Returns:
            The document with all nugget replacements applied

        Example:
            >>> NuggetParser().parse("no nuggets here", lambda *args: "x")
            'no nuggets here'
        """
        return _ParseOperation(self, entity, on_nugget, file_extension).run()

    def breakdown(self, nugget_text: str) -> Nugget | None:
        """Decompose one isolated nugget string without substitution.

        Nested parameters are not recursed into; their text is kept as is.

        Args:
            nugget_text: Text that starts with Begin and ends with End

        Returns:
            The nugget, or None if the text is not a single valid nugget.
            Begin or End outside a nested parameter makes it invalid, and
            under SOURCE processing so does an empty parameter.

        Example:
            >>> NuggetParser().breakdown("[[[Hi %0|||Bob///greeting]]]")
            Nugget(msgid='Hi %0', comment='greeting', format_items=('Bob',))
            >>> NuggetParser().breakdown("[[[unterminated") is None
            True
        """
        tokens = self._tokens
        begin_len, end_len = len(tokens.begin), len(tokens.end)
        if (
            len(nugget_text) < begin_len + end_len
            or not nugget_text.startswith(tokens.begin)
            or not nugget_text.endswith(tokens.end)
        ):
            return None

        body = nugget_text[begin_len : len(nugget_text) - end_len]
        body, separator, comment_text = body.partition(tokens.comment)
        comment = (comment_text or None) if separator else None

        msgid, *items = body.split(tokens.delimiter)
        if not msgid:
            return None
        # Begin or End outside a nested parameter means several nuggets
        literal_parts = [msgid, comment_text]
        literal_parts.extend(
            item
            for item in items
            if not (item.startswith(tokens.param_begin) and item.endswith(tokens.param_end))
        )
        if any(tokens.begin in part or tokens.end in part for part in literal_parts):
            return None
        if self._context is NuggetContext.SOURCE and not all(items):
            return None
        return Nugget(msgid, comment, tuple(items) if items else None)


class _ParseOperation:
    """State of a single parse() call."""

    __slots__ = (
        "_context",
        "_entity",
        "_matcher",
        "_max_depth",
        "_on_nugget",
        "_tokens",
        "_unescaper",
    )

    def __init__(
        self,
        parser: NuggetParser,
        entity: str,
        on_nugget: NuggetCallback,
        file_extension: str | None,
    ) -> None:
        self._tokens = parser.tokens
        self._context = parser.context
        self._matcher = parser.matcher
        self._max_depth = parser.max_nesting_depth
        self._entity = entity
        self._on_nugget = on_nugget
        self._unescaper: Unescaper | None = (
            get_unescaper(file_extension)
            if self._context is NuggetContext.SOURCE
            else None
        )

    def run(self) -> str:
        max_depth = min(self._max_depth, stack_headroom())
        if max_depth < self._max_depth:
            logger.debug(
                "Caller stack leaves room for %d of %d nesting levels",
                max_depth,
                self._max_depth,
            )
        depth = NestingDepth(max_depth=max_depth)
        return self._parse_zone(0, depth, nested=False).replacement

    def _search(self, pos: int) -> TokenMatch | None:
        return self._matcher.search(self._entity, pos)

    def _preprocess_msgid(self, msgid: str) -> str:
        if self._unescaper is None:
            return msgid
        return self._unescaper(msgid)

    def _parse_zone(
        self, position: int, depth: NestingDepth, *, nested: bool
    ) -> _ParseResult:
        """Scan a zone for nuggets.

        The top-level zone runs to the end of the document. A nested zone
        (the contents of one |||(((...))) parameter) ends at ParamEnd+Delimiter
        or ParamEnd+End; its next position points just past the ParamEnd half
        so that the enclosing nugget sees the Delimiter or End itself.
        """
        source = self._entity
        parts: list[str] = []
        contains_nuggets = False
        next_position = position

        while True:
            token = self._search(next_position)
            if token is None:
                parts.append(source[next_position:])
                return _ParseResult("".join(parts), len(source), contains_nuggets)

            if token.lexeme is Lexeme.BEGIN:
                parts.append(source[next_position : token.start])
                result = self._parse_nugget(token.start, depth, nested=nested)
                parts.append(result.replacement)
                next_position = result.next_position
                contains_nuggets = True
                continue

            if nested and token.lexeme.is_param_end:
                parts.append(source[next_position : token.start])
                zone_text = "".join(parts)
                if not contains_nuggets:
                    zone_text = self._process_bare_parameter(zone_text)
                return _ParseResult(
                    zone_text,
                    token.start + len(self._tokens.param_end),
                    contains_nuggets,
                )

            # Any other lexeme is literal text in a zone
            parts.append(source[next_position : token.end])
            next_position = token.end

    def _process_bare_parameter(self, text: str) -> str:
        """Handle a nested zone that contained no nugget.

        Under SOURCE processing the literal text is itself a message and is
        reported through a synthesized nugget; under RESPONSE it passes
        through untouched.
        """
        if self._context is not NuggetContext.SOURCE:
            return text
        # An empty message id would collide with the catalog header entry
        if not text:
            return text
        tokens = self._tokens
        nugget_text = tokens.begin + text + tokens.end
        nugget = Nugget(self._preprocess_msgid(text))
        replacement = self._on_nugget(nugget_text, len(tokens.begin), nugget, nugget_text)
        return text if replacement is None else replacement

    def _parse_nugget(  # noqa: PLR0912
        self, position: int, depth: NestingDepth, *, nested: bool
    ) -> _ParseResult:
        """Parse one nugget whose Begin token starts at position."""
        source = self._entity
        tokens = self._tokens

        msgid: str | None = None
        comment_start: int | None = None
        parameter_start: int | None = None
        format_items: list[str] = []
        has_nested_items = False

        next_position = position + len(tokens.begin)
        while True:
            token = self._search(next_position)
            if token is None:
                logger.debug(
                    "%s: %r",
                    ErrorTemplate.unterminated_nugget(position),
                    source[position : position + LOG_TRUNCATE],
                )
                return _ParseResult(source[position:], len(source))

            lexeme = token.lexeme

            # Begin inside a nugget body is plain text
            if lexeme is Lexeme.BEGIN:
                next_position = token.end
                continue

            if lexeme.is_param_end:
                if nested:
                    # Terminator of the enclosing zone: leave it for the zone
                    return _ParseResult(
                        source[position : token.start], token.start, True
                    )
                next_position = token.start + len(tokens.param_end)
                continue

            if comment_start is not None and lexeme is not Lexeme.END:
                next_position = token.end
                continue

            if msgid is None:
                msgid = source[position + len(tokens.begin) : token.start]

            if parameter_start is not None:
                format_items.append(source[parameter_start : token.start])
                parameter_start = None

            match lexeme:
                case Lexeme.DELIMITER_PARAM_BEGIN:
                    if depth.is_exceeded():
                        diagnostic = ErrorTemplate.nesting_depth_exceeded(
                            depth.max_depth, position
                        )
                        logger.warning("%s", diagnostic)
                        return _ParseResult(source[position:], len(source))
                    zone = self._parse_zone(token.end, depth.enter(), nested=True)
                    format_items.append(zone.replacement)
                    has_nested_items = True
                    next_position = zone.next_position
                case Lexeme.DELIMITER:
                    parameter_start = token.end
                    next_position = token.end
                case Lexeme.COMMENT:
                    comment_start = token.end
                    next_position = token.end
                case Lexeme.END:
                    comment = (
                        source[comment_start : token.start]
                        if comment_start is not None
                        else None
                    )
                    return self._complete_nugget(
                        position,
                        token.end,
                        msgid,
                        comment,
                        format_items,
                        rebuild=has_nested_items,
                    )

    def _complete_nugget(  # noqa: PLR0913
        self,
        position: int,
        end: int,
        msgid: str,
        comment: str | None,
        format_items: list[str],
        *,
        rebuild: bool,
    ) -> _ParseResult:
        """Invoke the callback for a fully parsed nugget.

        When a parameter came from a nested zone the original span contains
        unreplaced inner nuggets, so the callback receives a canonical nugget
        string rebuilt from the parsed parts instead.
        """
        if not msgid:
            logger.debug("Dropping nugget with empty message id at position %d", position)
            return _ParseResult("", end, True)

        exposed_items = (
            tuple(format_items)
            if format_items and self._context is NuggetContext.RESPONSE
            else None
        )
        nugget = Nugget(self._preprocess_msgid(msgid), comment, exposed_items)

        if rebuild:
            nugget_text = Nugget(msgid, comment, tuple(format_items)).to_nugget_string(
                self._tokens
            )
            replacement = self._on_nugget(nugget_text, 0, nugget, nugget_text)
        else:
            replacement = self._on_nugget(
                self._entity[position:end], position, nugget, self._entity
            )

        return _ParseResult(msgid if replacement is None else replacement, end, True)
