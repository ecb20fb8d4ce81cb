"""Primitive parsers.

Low-level parsers that inspect the text directly. Each one either consumes
exactly what it matched or fails at the cursor offset consuming nothing.
Characters are Python code points; no grapheme clustering is done.
"""

from collections.abc import Callable

from bluntparse.core import Cursor, PError, POk, ParserResult
from bluntparse.diagnostics import ErrorTemplate

from .parser import Parser

__all__ = ["any_char", "eoi", "pblank", "pchar", "pgoto", "pstr"]


def pstr(literal: str) -> Parser[str]:
    """Match ``literal`` exactly (ordinal, case-sensitive).

    Example:
        >>> pstr("let").parse_text("let x").value
        'let'
        >>> pstr("let").parse_text("var x").message
        "Expected: 'let'"
    """
    expected = ErrorTemplate.expected_literal(literal).message

    def parse(cursor: Cursor) -> ParserResult[str]:
        if cursor.matches_at(literal):
            return POk.create(cursor.idx, cursor.idx + len(literal), literal)
        return PError.create(cursor.idx, expected)

    return Parser(parse, repr(literal))


def _parse_any_char(cursor: Cursor) -> ParserResult[str]:
    if cursor.is_at_end:
        return PError.create(cursor.idx, ErrorTemplate.expected_more_characters().message)
    return POk.create(cursor.idx, cursor.idx + 1, cursor.current)


any_char: Parser[str] = Parser(_parse_any_char, "any character")


def pchar(
    predicate: Callable[[str], bool],
    error_message: Callable[[str], str] | None = None,
) -> Parser[str]:
    """Match one character satisfying ``predicate``.

    Args:
        predicate: Test applied to the character at the cursor
        error_message: Builds the failure message from the character
            found. Defaults to "Unexpected character: '<c>'".

    Example:
        >>> digit = pchar(str.isdigit, lambda c: f"Expected digit, got '{c}'")
        >>> digit.parse_text("x").message
        "Expected digit, got 'x'"
    """

    def parse(cursor: Cursor) -> ParserResult[str]:
        if cursor.is_at_end:
            return PError.create(
                cursor.idx, ErrorTemplate.expected_more_characters().message
            )
        ch = cursor.current
        if predicate(ch):
            return POk.create(cursor.idx, cursor.idx + 1, ch)
        if error_message is not None:
            return PError.create(cursor.idx, error_message(ch))
        return PError.create(cursor.idx, ErrorTemplate.unexpected_character(ch).message)

    return Parser(parse, "character")


def _parse_eoi(cursor: Cursor) -> ParserResult[None]:
    if cursor.is_at_end:
        return POk.create(cursor.idx, cursor.idx, None)
    return PError.create(cursor.idx, ErrorTemplate.expected_end_of_input().message)


eoi: Parser[None] = Parser(_parse_eoi, "end of input")


def pgoto(idx: int) -> Parser[None]:
    """Relocate the cursor to ``idx``.

    Fails (as a parse error) when ``idx`` is behind the cursor or beyond
    the end of the text; movement is forward-only.
    """

    def parse(cursor: Cursor) -> ParserResult[None]:
        if cursor.can_goto(idx):
            return POk.create(cursor.idx, idx, None)
        diagnostic = ErrorTemplate.invalid_goto(idx, cursor.idx, len(cursor.text))
        return PError.create(cursor.idx, diagnostic.message)

    return Parser(parse, f"goto({idx})")


pblank: Parser[str] = pstr(" ")
