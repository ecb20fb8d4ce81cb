"""Position utilities: flat offsets to 1-based line/column.

Provides helper functions for converting character offsets into
line/column positions for error reporting.

Line Ending Support:
    - LF (Unix, \\n): Fully supported
    - CRLF (Windows, \\r\\n): Supported (\\n is the line delimiter)
    - CR-only (Classic Mac, \\r): NOT supported, \\r is an ordinary character
"""

from bisect import bisect_right
from dataclasses import dataclass
from typing import TYPE_CHECKING

from bluntparse.constants import DEFAULT_CONTEXT_LINES
from bluntparse.diagnostics import ErrorTemplate, PositionRangeError

if TYPE_CHECKING:
    from bluntparse.core.cursor import Cursor

__all__ = [
    "DocPos",
    "LineOffsetCache",
    "get_error_context",
    "get_line_content",
]


def _check_offset(idx: int, text: str) -> None:
    if idx < 0 or idx > len(text):
        raise PositionRangeError(ErrorTemplate.position_out_of_range(idx, len(text)))


@dataclass(frozen=True, slots=True)
class DocPos:
    """Resolved document position.

    Attributes:
        idx: Flat character offset (0-based)
        ln: Line number (1-based)
        col: Column number (1-based)

    Example:
        >>> DocPos.create(0, "abc")
        DocPos(idx=0, ln=1, col=1)
        >>> DocPos.create(6, "line1\\nline2")
        DocPos(idx=6, ln=2, col=1)
    """

    idx: int
    ln: int
    col: int

    @staticmethod
    def create(idx: int, text: str) -> "DocPos":
        """Resolve ``idx`` by scanning ``text`` from the start.

        Args:
            idx: Offset in ``[0, len(text)]``. The end offset is valid and
                resolves to the position just after the last character.
            text: Text the offset points into

        Returns:
            DocPos with 1-based line and column

        Raises:
            PositionRangeError: If idx is outside ``[0, len(text)]``

        Performance:
            O(n) where n = idx, O(1) memory (no substring allocation).
        """
        _check_offset(idx, text)
        ln = text.count("\n", 0, idx) + 1
        last_newline = text.rfind("\n", 0, idx)
        col = idx - last_newline if last_newline >= 0 else idx + 1
        return DocPos(idx, ln, col)

    @staticmethod
    def of_cursor(cursor: "Cursor") -> "DocPos":
        """Resolve the position of a cursor."""
        return DocPos.create(cursor.idx, cursor.text)

    def __str__(self) -> str:
        return f"{self.ln}:{self.col}"


class LineOffsetCache:
    """Cached line offset computation for efficient position lookups.

    Precomputes line start offsets in a single O(n) pass, then resolves
    offsets in O(log n) with binary search. Use this when many offsets in
    the same text need resolving (for example when reporting several
    failures); results equal DocPos.create().

    Example:
        >>> cache = LineOffsetCache("line1\\nline2\\nline3")
        >>> cache.get(8)
        DocPos(idx=8, ln=2, col=3)

    Thread Safety:
        Thread-safe. Internal state is only set during __init__.
    """

    __slots__ = ("_offsets", "_text_len")

    def __init__(self, text: str) -> None:
        offsets = [0]
        start = text.find("\n")
        while start >= 0:
            offsets.append(start + 1)
            start = text.find("\n", start + 1)
        self._offsets: tuple[int, ...] = tuple(offsets)
        self._text_len = len(text)

    @property
    def line_count(self) -> int:
        """Number of lines (a trailing newline opens an empty last line)."""
        return len(self._offsets)

    def get(self, idx: int) -> DocPos:
        """Resolve ``idx`` to a DocPos.

        Raises:
            PositionRangeError: If idx is outside ``[0, len(text)]``
        """
        if idx < 0 or idx > self._text_len:
            raise PositionRangeError(
                ErrorTemplate.position_out_of_range(idx, self._text_len)
            )
        line_index = bisect_right(self._offsets, idx) - 1
        return DocPos(idx, line_index + 1, idx - self._offsets[line_index] + 1)


def get_line_content(text: str, ln: int) -> str:
    """Extract the content of 1-based line ``ln`` without its newline.

    Example:
        >>> get_line_content("hello\\nworld\\ntest", 2)
        'world'

    Raises:
        ValueError: If ln is not a line of ``text``
    """
    lines = text.split("\n")
    if ln < 1 or ln > len(lines):
        msg = f"Line {ln} out of range (text has {len(lines)} lines)"
        raise ValueError(msg)
    return lines[ln - 1]


def get_error_context(
    text: str,
    idx: int,
    context_lines: int = DEFAULT_CONTEXT_LINES,
    marker: str = "^",
) -> str:
    """Get formatted error context showing position in text.

    Creates a multi-line string showing the error location with
    surrounding context lines and a marker pointing to the error.

    Args:
        text: Complete input text
        idx: Offset of the error
        context_lines: Number of lines to show before/after error
        marker: Character to use for error marker

    Returns:
        Formatted error context string

    Example:
        >>> text = "line1\\nline2\\nerror here\\nline4\\nline5"
        >>> print(get_error_context(text, 12, context_lines=1))
        line2
        error here
        ^
        line4
    """
    pos = DocPos.create(idx, text)
    lines = text.split("\n")

    start_line = max(1, pos.ln - context_lines)
    end_line = min(len(lines), pos.ln + context_lines)

    context = []
    for ln in range(start_line, end_line + 1):
        context.append(lines[ln - 1])
        if ln == pos.ln:
            context.append(" " * (pos.col - 1) + marker)

    return "\n".join(context)
