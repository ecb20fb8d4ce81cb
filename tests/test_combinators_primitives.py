"""Tests for combinators.primitives: pstr, any_char, pchar, eoi, pgoto."""

from __future__ import annotations

from hypothesis import given
from hypothesis import strategies as st

from bluntparse.combinators import any_char, eoi, pblank, pchar, pgoto, pstr
from bluntparse.core import Cursor, PError, POk
from tests.strategies import input_texts, literals


class TestPStr:
    """Test literal matching."""

    def test_match_consumes_literal(self) -> None:
        """pstr consumes exactly len(s) characters."""
        assert pstr("let").parse_text("let x") == POk.create(0, 3, "let")

    def test_mismatch_fails_at_cursor(self) -> None:
        """pstr fails with "Expected: '<s>'" consuming nothing."""
        assert pstr("let")(Cursor("a var", 2)) == PError.create(2, "Expected: 'let'")

    def test_case_sensitive(self) -> None:
        """Matching is ordinal."""
        assert not pstr("Let").parse_text("let").is_ok

    def test_partial_input_fails(self) -> None:
        """A literal longer than the rest of the input fails."""
        assert pstr("letter").parse_text("let") == PError.create(0, "Expected: 'letter'")

    def test_empty_literal_is_zero_width(self) -> None:
        """The empty literal always matches."""
        assert pstr("")(Cursor("ab", 1)) == POk.create(1, 1, "")

    def test_blank(self) -> None:
        """pblank is a single U+0020."""
        assert pblank.parse_text(" x") == POk.create(0, 1, " ")
        assert pblank.parse_text("\tx") == PError.create(0, "Expected: ' '")

    @given(literals, input_texts)
    def test_prefix_property(self, literal: str, tail: str) -> None:
        """PROPERTY: pstr(s) on s + tail consumes len(s) and returns s."""
        assert pstr(literal).parse_text(literal + tail) == POk.create(0, len(literal), literal)

    @given(literals, input_texts)
    def test_non_matching_prefix_fails_at_zero(self, literal: str, text: str) -> None:
        """PROPERTY: any non-matching prefix fails at offset 0."""
        if text.startswith(literal):
            return
        result = pstr(literal).parse_text(text)

        assert isinstance(result, PError)
        assert result.idx == 0


class TestAnyChar:
    """Test any_char."""

    def test_consumes_one_character(self) -> None:
        """any_char returns the current character."""
        assert any_char(Cursor("abc", 1)) == POk.create(1, 2, "b")

    def test_fails_at_end(self) -> None:
        """any_char needs more characters at the end."""
        result = any_char(Cursor("abc", 3))

        assert isinstance(result, PError)
        assert result.idx == 3
        assert "Expected more characters" in result.message

    def test_code_point_not_grapheme(self) -> None:
        """Combining marks are separate characters."""
        assert any_char.parse_text("e\u0301") == POk.create(0, 1, "e")


class TestPChar:
    """Test predicate matching."""

    def test_predicate_holds(self) -> None:
        """A matching character is consumed."""
        assert pchar(str.isdigit).parse_text("7a") == POk.create(0, 1, "7")

    def test_default_message(self) -> None:
        """Without a builder the found character is reported."""
        assert pchar(str.isdigit).parse_text("a") == PError.create(
            0, "Unexpected character: 'a'"
        )

    def test_builder_receives_found_character(self) -> None:
        """The builder formats the failure from the actual character."""
        digit = pchar(str.isdigit, lambda c: f"Expected digit, got '{c}'")

        assert digit.parse_text("x") == PError.create(0, "Expected digit, got 'x'")

    def test_fails_at_end_without_calling_predicate(self) -> None:
        """The predicate never sees an empty string."""
        seen: list[str] = []

        def predicate(c: str) -> bool:
            seen.append(c)
            return True

        result = pchar(predicate).parse_text("")

        assert isinstance(result, PError)
        assert seen == []


class TestEoi:
    """Test end-of-input."""

    def test_succeeds_at_end(self) -> None:
        """eoi is zero-width at the end."""
        assert eoi(Cursor("ab", 2)) == POk.create(2, 2, None)

    def test_succeeds_on_empty_text(self) -> None:
        """The empty text is at its end immediately."""
        assert eoi.parse_text("").is_ok

    def test_fails_with_rest(self) -> None:
        """eoi fails while input remains."""
        assert eoi(Cursor("ab", 1)) == PError.create(1, "Expected end of input.")

    def test_full_match(self) -> None:
        """Typical use: the whole input must match."""
        whole = pstr("ab") << eoi

        assert whole.parse_text("ab").is_ok
        assert whole.parse_text("abc") == PError.create(2, "Expected end of input.")


class TestPGoto:
    """Test explicit relocation."""

    def test_forward_goto(self) -> None:
        """pgoto jumps forward."""
        assert pgoto(3).parse_text("abcdef") == POk.create(0, 3, None)

    def test_goto_to_end(self) -> None:
        """The end offset is a valid target."""
        assert pgoto(2)(Cursor("ab", 1)) == POk.create(1, 2, None)

    def test_backward_goto_fails(self) -> None:
        """Backward movement is a parse failure, not an exception."""
        result = pgoto(0)(Cursor("abc", 2))

        assert isinstance(result, PError)
        assert result.idx == 2
        assert "out of range" in result.message

    @given(st.integers(min_value=4, max_value=100))
    def test_goto_past_end_fails(self, idx: int) -> None:
        """Targets past the end fail at the cursor."""
        result = pgoto(idx).parse_text("abc")

        assert isinstance(result, PError)
        assert result.idx == 0
