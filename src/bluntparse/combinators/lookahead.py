"""Lookahead, optional and negation combinators.

All of these always turn the failure of their inner parser into a
zero-width success (pnot inverts instead). Only ptry and pis_ok keep the
input a successful probe consumed; pattempt, pnot and pis_err never move
the cursor.
"""

from typing import Any

from bluntparse.core import Cursor, PError, POk, ParserResult
from bluntparse.diagnostics import ErrorTemplate

from .parser import Parser

__all__ = ["pattempt", "pis_err", "pis_ok", "pnot", "ptry"]


def pattempt[T](p: Parser[T]) -> Parser[T | None]:
    """Speculative lookahead.

    Succeeds with the value of ``p`` or None, zero-width either way.
    """

    def parse(cursor: Cursor) -> ParserResult[T | None]:
        match p(cursor):
            case POk(value=value):
                return POk.create(cursor.idx, cursor.idx, value)
            case _:
                return POk.create(cursor.idx, cursor.idx, None)

    return Parser(parse, f"attempt({p.name})")


def ptry[T](p: Parser[T]) -> Parser[T | None]:
    """Optional ``p``: its result on success, zero-width None on failure.

    The error detail of a failed attempt is discarded.
    """

    def parse(cursor: Cursor) -> ParserResult[T | None]:
        match p(cursor):
            case POk() as ok:
                return ok
            case _:
                return POk.create(cursor.idx, cursor.idx, None)

    return Parser(parse, f"try({p.name})")


def pnot(p: Parser[Any]) -> Parser[None]:
    """Negative lookahead: succeed iff ``p`` fails, consuming nothing."""

    def parse(cursor: Cursor) -> ParserResult[None]:
        match p(cursor):
            case POk():
                return PError.create(
                    cursor.idx, ErrorTemplate.unexpected_match(p.name).message
                )
            case _:
                return POk.create(cursor.idx, cursor.idx, None)

    return Parser(parse, f"not({p.name})")


def pis_ok(p: Parser[Any]) -> Parser[bool]:
    """Report whether ``p`` succeeds.

    On success the cursor advances past what ``p`` consumed; on failure
    the result is a zero-width False.
    """

    def parse(cursor: Cursor) -> ParserResult[bool]:
        match p(cursor):
            case POk(range=rng):
                return POk.create(cursor.idx, rng.end_idx, True)
            case _:
                return POk.create(cursor.idx, cursor.idx, False)

    return Parser(parse, f"is_ok({p.name})")


def pis_err(p: Parser[Any]) -> Parser[bool]:
    """Report whether ``p`` fails, never consuming input."""

    def parse(cursor: Cursor) -> ParserResult[bool]:
        return POk.create(cursor.idx, cursor.idx, not p(cursor).is_ok)

    return Parser(parse, f"is_err({p.name})")
