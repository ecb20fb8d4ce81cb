"""Tests for core.cursor: Cursor and Range.

Validates immutability, forward-only movement, bounds checking and the
derived predicates used by the combinators.
"""

from __future__ import annotations

import pytest

from bluntparse.core import Cursor, DocPos, Range
from bluntparse.diagnostics import BluntProgrammingError, CursorRangeError

# ============================================================================
# CONSTRUCTION
# ============================================================================


class TestCursorConstruction:
    """Test cursor creation and invariants."""

    def test_default_offset_is_zero(self) -> None:
        """Cursor defaults to the start of the text."""
        cursor = Cursor("hello")

        assert cursor.idx == 0
        assert cursor.text == "hello"

    def test_end_offset_is_valid(self) -> None:
        """Offset equal to the text length is the end position."""
        cursor = Cursor("hello", 5)

        assert cursor.is_at_end

    def test_negative_offset_rejected(self) -> None:
        """Negative offset is a programming error."""
        with pytest.raises(CursorRangeError, match="out of range"):
            Cursor("hello", -1)

    def test_offset_beyond_end_rejected(self) -> None:
        """Offset past the end is a programming error."""
        with pytest.raises(CursorRangeError):
            Cursor("hello", 6)

    def test_range_error_is_programming_error(self) -> None:
        """CursorRangeError belongs to the programming-error tier."""
        with pytest.raises(BluntProgrammingError):
            Cursor("", 1)

    def test_cursor_immutability(self) -> None:
        """Cursor is immutable (frozen dataclass)."""
        cursor = Cursor("hello", 0)

        with pytest.raises(AttributeError):
            cursor.idx = 3  # type: ignore[misc]

    def test_cursors_compare_by_value(self) -> None:
        """Two cursors over the same text and offset are equal."""
        assert Cursor("abc", 1) == Cursor("abc", 1)


# ============================================================================
# PREDICATES
# ============================================================================


class TestCursorPredicates:
    """Test derived predicates."""

    def test_is_at_end_and_has_rest_are_complementary(self) -> None:
        """has_rest is the negation of is_at_end."""
        for idx in range(4):
            cursor = Cursor("abc", idx)
            assert cursor.has_rest is not cursor.is_at_end

    def test_empty_text_is_at_end(self) -> None:
        """Empty text starts at the end."""
        cursor = Cursor("", 0)

        assert cursor.is_at_end
        assert not cursor.has_rest

    def test_rest_is_unconsumed_suffix(self) -> None:
        """rest returns the text after the cursor."""
        assert Cursor("hello", 2).rest == "llo"
        assert Cursor("hello", 5).rest == ""

    def test_current_character(self) -> None:
        """current returns the character at the cursor."""
        assert Cursor("hello", 1).current == "e"

    def test_current_at_end_raises(self) -> None:
        """current at the end raises EOFError."""
        with pytest.raises(EOFError, match="Unexpected EOF at position 5"):
            _ = Cursor("hello", 5).current

    def test_peek(self) -> None:
        """peek looks ahead without moving."""
        cursor = Cursor("abc", 1)

        assert cursor.peek() == "b"
        assert cursor.peek(1) == "c"
        assert cursor.peek(2) is None
        assert cursor.peek(-1) == "a"
        assert cursor.peek(-2) is None

    def test_matches_at(self) -> None:
        """matches_at is an ordinal, case-sensitive prefix test."""
        cursor = Cursor("Hello world", 6)

        assert cursor.matches_at("world")
        assert cursor.matches_at("")
        assert not cursor.matches_at("World")
        assert not cursor.matches_at("world!")

    def test_slice_to(self) -> None:
        """slice_to extracts from the cursor to an end offset."""
        assert Cursor("hello world", 6).slice_to(11) == "world"


# ============================================================================
# MOVEMENT
# ============================================================================


class TestCursorMovement:
    """Test forward-only movement."""

    def test_can_goto_forward_range(self) -> None:
        """can_goto accepts [idx, len(text)]."""
        cursor = Cursor("hello", 2)

        assert cursor.can_goto(2)
        assert cursor.can_goto(5)
        assert not cursor.can_goto(6)

    def test_can_goto_rejects_backward(self) -> None:
        """Movement is forward-only."""
        cursor = Cursor("hello", 2)

        assert not cursor.can_goto(1)
        assert not cursor.can_goto(0)

    def test_can_walk_forward(self) -> None:
        """can_walk_forward checks idx + steps."""
        cursor = Cursor("abc", 1)

        assert cursor.can_walk_forward(0)
        assert cursor.can_walk_forward(2)
        assert not cursor.can_walk_forward(3)

    def test_goto_returns_new_cursor(self) -> None:
        """goto returns a new cursor and leaves the original untouched."""
        cursor = Cursor("hello", 0)
        moved = cursor.goto(3)

        assert moved.idx == 3
        assert cursor.idx == 0
        assert moved.text is cursor.text

    def test_goto_same_offset_returns_self(self) -> None:
        """goto to the current offset reuses the cursor."""
        cursor = Cursor("hello", 2)

        assert cursor.goto(2) is cursor

    def test_goto_backward_raises(self) -> None:
        """Backward goto is a programming error."""
        with pytest.raises(CursorRangeError, match=r"\[3, 5\]"):
            Cursor("hello", 3).goto(1)

    def test_goto_past_end_raises(self) -> None:
        """goto beyond the end is a programming error."""
        with pytest.raises(CursorRangeError):
            Cursor("hello", 0).goto(6)

    def test_advance(self) -> None:
        """advance moves forward by count."""
        cursor = Cursor("hello", 0)

        assert cursor.advance().idx == 1
        assert cursor.advance(5).is_at_end

    def test_advance_past_end_raises(self) -> None:
        """advance does not clamp."""
        with pytest.raises(CursorRangeError):
            Cursor("hi", 2).advance()

    def test_doc_pos(self) -> None:
        """doc_pos resolves the cursor to line/column."""
        assert Cursor("ab\ncd", 4).doc_pos() == DocPos(4, 2, 2)


# ============================================================================
# RANGE
# ============================================================================


class TestRange:
    """Test half-open ranges."""

    def test_length_and_empty(self) -> None:
        """length counts covered characters."""
        assert Range(2, 5).length == 3
        assert not Range(2, 5).is_empty
        assert Range(4, 4).is_empty

    def test_merge_takes_first_start_and_last_end(self) -> None:
        """merge spans from this start to the other end."""
        assert Range(0, 3).merge(Range(3, 7)) == Range(0, 7)
        assert Range(1, 1).merge(Range(1, 1)) == Range(1, 1)

    def test_inverted_range_rejected(self) -> None:
        """start_idx must not exceed end_idx."""
        with pytest.raises(CursorRangeError, match="Invalid range"):
            Range(5, 2)

    def test_negative_start_rejected(self) -> None:
        """start_idx must be non-negative."""
        with pytest.raises(CursorRangeError):
            Range(-1, 2)
