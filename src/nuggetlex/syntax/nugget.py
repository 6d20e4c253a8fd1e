"""Nugget entity: the parsed form of one nugget occurrence.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass

from nuggetlex.syntax.tokens import DEFAULT_TOKENS, TokenSet

__all__ = ["Nugget"]


@dataclass(frozen=True, slots=True)
class Nugget:
    """Broken-down nugget handed to the substitution callback.

    Created transiently for one nugget occurrence and discarded after
    the callback returns. Never persisted by the parser.

    Attributes:
        msgid: Message identifier / default text. The empty string is the
            "delete this nugget" sentinel and never reaches a callback.
        comment: Developer comment, or None
        format_items: Parameters in order, each literal text or the
            already-substituted output of a nested nugget. None when the
            nugget has no parameters or the parser does not expose them.

    Example:
        >>> n = Nugget("Hello %0", format_items=("World",))
        >>> n.is_formatted
        True
        >>> n.to_nugget_string()
        '[[[Hello %0|||World]]]'
    """

    msgid: str
    comment: str | None = None
    format_items: tuple[str, ...] | None = None

    @property
    def is_formatted(self) -> bool:
        """True if the nugget carries at least one format item."""
        return bool(self.format_items)

    def to_nugget_string(self, tokens: TokenSet = DEFAULT_TOKENS) -> str:
        """Render the canonical nugget string.

        Layout: Begin, msgid, [Comment + comment], Delimiter + item for
        each format item, End.

        Args:
            tokens: Token set to render with

        Returns:
            Canonical nugget text
        """
        parts = [tokens.begin, self.msgid]
        if self.comment is not None:
            parts.append(tokens.comment)
            parts.append(self.comment)
        for item in self.format_items or ():
            parts.append(tokens.delimiter)
            parts.append(item)
        parts.append(tokens.end)
        return "".join(parts)
