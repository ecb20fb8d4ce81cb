"""Immutable cursor infrastructure for combinator parsing.

Implements the immutable cursor pattern: a cursor is the input text plus an
integer offset, and every movement returns a NEW cursor.
Python 3.13+. Zero external dependencies.

Design Philosophy:
    - Cursor is immutable (frozen dataclass)
    - The text is shared, never copied per step (matching is index based)
    - EOF is a state (is_at_end), not a return value
    - Movement is forward-only: a parser consumes input or stays put
    - Line:column computed on-demand (O(n) only for errors)

Pattern Reference:
    - Haskell Parsec
    - Python funcparserlib
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING

from bluntparse.diagnostics import CursorRangeError, ErrorTemplate

if TYPE_CHECKING:
    from bluntparse.core.position import DocPos

__all__ = ["Cursor", "Range"]


@dataclass(frozen=True, slots=True)
class Cursor:
    """Immutable position into an input text.

    Invariant: ``0 <= idx <= len(text)``. Violations raise
    CursorRangeError, a programming error that malformed input can never
    trigger.

    Example:
        >>> cursor = Cursor("hello", 0)
        >>> cursor.current
        'h'
        >>> moved = cursor.advance()
        >>> moved.current
        'e'
        >>> cursor.current  # Original unchanged (immutability)
        'h'
        >>> Cursor("hi", 2).is_at_end
        True
    """

    text: str
    idx: int = 0

    def __post_init__(self) -> None:
        """Validate the offset against the text bounds.

        Raises:
            CursorRangeError: If idx lies outside [0, len(text)]
        """
        if not 0 <= self.idx <= len(self.text):
            raise CursorRangeError(
                ErrorTemplate.cursor_out_of_range(self.idx, 0, len(self.text))
            )

    @property
    def is_at_end(self) -> bool:
        """True when every character has been consumed."""
        return self.idx == len(self.text)

    @property
    def has_rest(self) -> bool:
        """True when at least one character remains."""
        return self.idx < len(self.text)

    @property
    def rest(self) -> str:
        """Unconsumed suffix of the text.

        Note:
            Slicing copies. Combinators match with matches_at() instead;
            use this for diagnostics and tests.
        """
        return self.text[self.idx :]

    @property
    def current(self) -> str:
        """Get current character.

        Raises:
            EOFError: If at end of input
        """
        if self.is_at_end:
            diagnostic = ErrorTemplate.unexpected_eof(self.idx)
            raise EOFError(diagnostic.message)
        return self.text[self.idx]

    def peek(self, offset: int = 0) -> str | None:
        """Character at idx + offset, or None beyond the end."""
        target = self.idx + offset
        if target < 0 or target >= len(self.text):
            return None
        return self.text[target]

    def can_goto(self, idx: int) -> bool:
        """Check whether goto(idx) is permitted.

        Movement is forward-only, so the permitted range is
        ``[self.idx, len(text)]``.
        """
        return self.idx <= idx <= len(self.text)

    def can_walk_forward(self, steps: int) -> bool:
        """Check whether the cursor can advance by ``steps`` characters."""
        return self.can_goto(self.idx + steps)

    def goto(self, idx: int) -> "Cursor":
        """Return a new cursor at ``idx``.

        Raises:
            CursorRangeError: If can_goto(idx) is False. Combinators validate
                bounds before moving, so reaching this is a wiring bug.
        """
        if not self.can_goto(idx):
            raise CursorRangeError(
                ErrorTemplate.cursor_out_of_range(idx, self.idx, len(self.text))
            )
        if idx == self.idx:
            return self
        return Cursor(self.text, idx)

    def advance(self, count: int = 1) -> "Cursor":
        """Return new cursor advanced by count positions.

        Example:
            >>> cursor = Cursor("hello", 0)
            >>> cursor.advance(2).idx
            2
            >>> cursor.idx  # Original unchanged
            0
        """
        return self.goto(self.idx + count)

    def matches_at(self, literal: str) -> bool:
        """Ordinal, case-sensitive test for ``literal`` at the cursor.

        Uses str.startswith with an offset, so no substring is allocated.
        """
        return self.text.startswith(literal, self.idx)

    def slice_to(self, end_idx: int) -> str:
        """Extract text from the cursor up to ``end_idx`` (exclusive)."""
        return self.text[self.idx : end_idx]

    def doc_pos(self) -> "DocPos":
        """Resolve this cursor to a 1-based line/column position.

        Performance:
            O(n) where n = idx. Only call for error reporting.
        """
        from bluntparse.core.position import DocPos  # noqa: PLC0415 - circular

        return DocPos.create(self.idx, self.text)


@dataclass(frozen=True, slots=True)
class Range:
    """Half-open interval ``[start_idx, end_idx)`` of consumed text.

    Example:
        >>> Range(0, 3).merge(Range(3, 5))
        Range(start_idx=0, end_idx=5)
    """

    start_idx: int
    end_idx: int

    def __post_init__(self) -> None:
        """Validate ``0 <= start_idx <= end_idx``.

        Raises:
            CursorRangeError: If the interval is inverted or negative
        """
        if self.start_idx < 0 or self.end_idx < self.start_idx:
            raise CursorRangeError(
                ErrorTemplate.invalid_range(self.start_idx, self.end_idx)
            )

    @property
    def length(self) -> int:
        """Number of characters covered."""
        return self.end_idx - self.start_idx

    @property
    def is_empty(self) -> bool:
        """True for a zero-width range."""
        return self.start_idx == self.end_idx

    def merge(self, other: "Range") -> "Range":
        """Start of this range to the end of ``other``."""
        return Range(self.start_idx, other.end_idx)
