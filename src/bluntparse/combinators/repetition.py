"""Repetition combinators.

Every repetition stops after the first application that succeeds without
consuming input. The zero-width value is still collected, so a parser that
can match the empty string forever yields exactly one element and the loop
always terminates.
"""

from collections.abc import Iterable

from bluntparse.core import Cursor, PError, POk, ParserResult
from bluntparse.diagnostics import ErrorTemplate

from .parser import Parser

__all__ = ["as_joined_string", "many", "many1", "many_n"]


def many_n[T](min_occurrences: int, p: Parser[T]) -> Parser[list[T]]:
    """Apply ``p`` repeatedly, requiring at least ``min_occurrences`` values.

    Args:
        min_occurrences: Minimum number of successful applications
        p: Parser to repeat

    Returns:
        Parser yielding the values in order over ``[start, last end)``.
        Fails at the offset reached when fewer values were collected.

    Example:
        >>> from bluntparse import pstr
        >>> many_n(2, pstr(" ")).parse_text("  x").value
        [' ', ' ']
    """
    if min_occurrences < 0:
        msg = f"min_occurrences must be >= 0, got {min_occurrences}"
        raise ValueError(msg)

    def parse(cursor: Cursor) -> ParserResult[list[T]]:
        values: list[T] = []
        current = cursor
        while True:
            result = p(current)
            if not isinstance(result, POk):
                break
            values.append(result.value)
            if result.end_idx == current.idx:
                break
            current = current.goto(result.end_idx)

        if len(values) < min_occurrences:
            diagnostic = ErrorTemplate.too_few_occurrences(min_occurrences, len(values))
            return PError.create(current.idx, diagnostic.message)
        return POk.create(cursor.idx, current.idx, values)

    return Parser(parse, f"many_n({min_occurrences}, {p.name})")


def many[T](p: Parser[T]) -> Parser[list[T]]:
    """Zero or more applications of ``p``; never fails."""
    return many_n(0, p).named(f"many({p.name})")


def many1[T](p: Parser[T]) -> Parser[list[T]]:
    """One or more applications of ``p``.

    Runs many() and converts an empty result into a failure at the offset
    where the repetition started.
    """
    inner = many(p)

    def parse(cursor: Cursor) -> ParserResult[list[T]]:
        match inner(cursor):
            case POk(value=[]):
                return PError.create(
                    cursor.idx, ErrorTemplate.expected_at_least_one().message
                )
            case result:
                return result

    return Parser(parse, f"many1({p.name})")


def as_joined_string(p: Parser[Iterable[str]]) -> Parser[str]:
    """Join a parser's sequence-of-strings value into one string."""

    def parse(cursor: Cursor) -> ParserResult[str]:
        match p(cursor):
            case POk(range=rng, value=value):
                return POk(rng, "".join(value))
            case err:
                return err

    return Parser(parse, p.name)
