"""Position utilities for nugget-bearing documents.

Converts character offsets reported by the parser into line/column pairs
for message catalogs and diagnostics.
"""

from bisect import bisect_right

__all__ = ["LineOffsetCache"]


class LineOffsetCache:
    """Cached line offset computation for efficient position lookups.

    Precomputes line start offsets in O(n) single pass, then provides
    O(log n) lookups using binary search. Use this when you need to
    compute line:column for many positions in the same document.

    Example:
        >>> cache = LineOffsetCache("line1\\nline2\\nline3")
        >>> cache.get_line_col(0)   # Start of line 1
        (1, 1)
        >>> cache.get_line_col(6)   # Start of line 2
        (2, 1)
        >>> cache.get_line_col(8)   # Third char of line 2
        (2, 3)

    Thread Safety:
        Thread-safe. Internal state is only set during __init__.
    """

    __slots__ = ("_offsets", "_source_len")

    def __init__(self, source: str) -> None:
        """Build line offset cache from source.

        Args:
            source: Document text to index
        """
        offsets = [0]
        start = source.find("\n")
        while start != -1:
            offsets.append(start + 1)
            start = source.find("\n", start + 1)
        self._offsets: tuple[int, ...] = tuple(offsets)
        self._source_len = len(source)

    def get_line_col(self, pos: int) -> tuple[int, int]:
        """Get line and column for position.

        Args:
            pos: Character position in the document (0-indexed, clamped)

        Returns:
            (line, column) tuple (1-indexed, like text editors)
        """
        pos = min(max(pos, 0), self._source_len)
        index = bisect_right(self._offsets, pos) - 1
        return (index + 1, pos - self._offsets[index] + 1)

    def get_line(self, pos: int) -> int:
        """Get the 1-indexed line number for position."""
        return self.get_line_col(pos)[0]
