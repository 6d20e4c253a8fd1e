"""File-type specific unescaping of message ids.

Nuggets found in program source carry the escaping of their host language:
``[[[Line one\\nLine two]]]`` in a C# string literal means a real line break.
Before a message id extracted under source processing reaches the callback it
is unescaped with the table registered for the document's file extension.

Each table is compiled once into a single alternation ordered longest-first,
so a multi-character sequence always wins over a shorter sequence that is a
prefix of it. All tables are module-level immutable constants and are safe to
share between threads.

Python 3.13+. Zero external dependencies.
"""

import html
import re
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

__all__ = [
    "CSHARP_ESCAPE",
    "CSHARP_UNESCAPE",
    "JAVASCRIPT_UNESCAPE",
    "SQL_UNESCAPE",
    "UNESCAPERS",
    "EscapeTable",
    "escape_csharp",
    "get_unescaper",
    "unescape",
]

type Unescaper = Callable[[str], str]


@dataclass(frozen=True, slots=True)
class EscapeTable:
    """Immutable sequence-to-replacement translation table.

    Attributes:
        translations: (sequence, replacement) pairs

    Example:
        >>> table = EscapeTable((("%%", "%"),))
        >>> table.apply("100%% sure")
        '100% sure'
    """

    translations: tuple[tuple[str, str], ...]
    _lookup: Mapping[str, str] = field(init=False, repr=False, compare=False)
    _pattern: re.Pattern[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        """Compile the longest-first alternation."""
        ordered = sorted(
            (sequence for sequence, _ in self.translations), key=len, reverse=True
        )
        object.__setattr__(self, "_lookup", MappingProxyType(dict(self.translations)))
        object.__setattr__(
            self,
            "_pattern",
            re.compile("|".join(re.escape(s) for s in ordered), re.DOTALL),
        )

    def apply(self, text: str) -> str:
        """Replace every table sequence in text in a single left-to-right pass."""
        return self._pattern.sub(lambda m: self._lookup[m.group()], text)

    def __call__(self, text: str) -> str:
        return self.apply(text)


# NOTE: "''" -> "," is not SQL quote escaping ("''" -> "'"). Kept as found in
# existing extracted catalogs; changing it would change their message ids.
SQL_UNESCAPE = EscapeTable(
    (
        ("%%", "%"),
        ("''", ","),
    )
)

CSHARP_UNESCAPE = EscapeTable(
    (
        ("\\n", "\n"),
        ("\n", "\r\n"),
        ("\\t", "\t"),
        ('\\"', '"'),
        ("\\\\", "\\"),
        ('""', '"'),
    )
)

JAVASCRIPT_UNESCAPE = EscapeTable(
    (
        ("\\n", "\n"),
        ("\n", "\r\n"),
        ("\\t", "\t"),
        ('\\"', '"'),
        ("\\\\", "\\"),
        ("\\'", "'"),
    )
)

CSHARP_ESCAPE = EscapeTable(
    (
        ("\n", "\\n"),
        ("\r\n", "\n"),
        ("\t", "\\t"),
        ('"', '\\"'),
        ("\\", "\\\\"),
    )
)

UNESCAPERS: Mapping[str, Unescaper] = MappingProxyType(
    {
        ".sql": SQL_UNESCAPE,
        ".cs": CSHARP_UNESCAPE,
        ".js": JAVASCRIPT_UNESCAPE,
        ".xml": html.unescape,
        ".html": html.unescape,
        ".resx": html.unescape,
    }
)


def get_unescaper(file_extension: str | None) -> Unescaper | None:
    """Look up the unescaper for a file extension.

    Args:
        file_extension: Extension with leading dot, any case (".CS", ".js").
            None or an unknown extension disables unescaping.

    Returns:
        The registered unescaper, or None
    """
    if not file_extension:
        return None
    return UNESCAPERS.get(file_extension.lower())


def unescape(text: str, file_extension: str | None) -> str:
    """Unescape a message id for the given file extension.

    Example:
        >>> unescape("Tab\\\\there", ".cs")
        'Tab\\there'
        >>> unescape("Fish &amp; Chips", ".html")
        'Fish & Chips'
        >>> unescape("as is\\\\n", ".txt")
        'as is\\\\n'
    """
    unescaper = get_unescaper(file_extension)
    if unescaper is None:
        return text
    return unescaper(text)


def escape_csharp(text: str) -> str:
    """Escape text for embedding in a C# string literal.

    Reverse direction of the ".cs" unescaping table. CRLF collapses to a
    bare line feed, a lone line feed becomes the two-character escape.

    Example:
        >>> escape_csharp('Say "hi"')
        'Say \\\\"hi\\\\"'
    """
    return CSHARP_ESCAPE.apply(text)
