"""Monadic core and sequencing/choice combinators.

Propagation rules:
    - Sequencing (bind, and_then, keep_left, keep_right) short-circuits on
      the first failure and returns it unchanged.
    - Choice (or_then, first_of, pchoice) retries every alternative from
      the ORIGINAL cursor. Backtracking is unconditional; there is no cut.

All functions are pure and synchronous. Argument order follows the
function-first convention of the builtin map(): ``bind(f, p)``,
``pmap(proj, p)``.
"""

from collections.abc import Callable, Iterable
from typing import Any

from bluntparse.core import Cursor, PError, POk, ParserResult
from bluntparse.diagnostics import ErrorTemplate

from .parser import Parser

__all__ = [
    "and_then",
    "bind",
    "fail",
    "first_of",
    "keep_left",
    "keep_right",
    "or_then",
    "pchoice",
    "pignore",
    "pmap",
    "return_",
    "set_error_message",
]


def return_[T](value: T) -> Parser[T]:
    """Zero-width success carrying ``value``."""

    def parse(cursor: Cursor) -> ParserResult[T]:
        return POk.create(cursor.idx, cursor.idx, value)

    return Parser(parse, f"return({value!r})")


def fail(message: str) -> Parser[Any]:
    """Failure at the cursor, consuming nothing."""

    def parse(cursor: Cursor) -> ParserResult[Any]:
        return PError.create(cursor.idx, message)

    return Parser(parse, "fail")


def bind[A, B](f: Callable[[A], Parser[B]], p: Parser[A]) -> Parser[B]:
    """Run ``p``, then the parser ``f`` builds from its value.

    The second parser starts where ``p`` ended. The result is exactly what
    the second parser reports, INCLUDING its range: the ranges are not
    merged. Use and_then() when both values and the combined range are
    needed.
    """

    def parse(cursor: Cursor) -> ParserResult[B]:
        match p(cursor):
            case PError() as err:
                return err
            case POk(range=rng, value=value):
                return f(value)(cursor.goto(rng.end_idx))

    return Parser(parse, f"bind({p.name})")


def pmap[A, B](proj: Callable[[A], B], p: Parser[A]) -> Parser[B]:
    """Transform the success value; range and failures unchanged."""

    def parse(cursor: Cursor) -> ParserResult[B]:
        match p(cursor):
            case PError() as err:
                return err
            case POk(range=rng, value=value):
                return POk(rng, proj(value))

    return Parser(parse, p.name)


def pignore(p: Parser[Any]) -> Parser[None]:
    """Discard the success value."""
    return pmap(lambda _: None, p)


def and_then[A, B](pa: Parser[A], pb: Parser[B]) -> Parser[tuple[A, B]]:
    """Run ``pa`` then ``pb``; pair the values over ``[pa.start, pb.end)``."""

    def parse(cursor: Cursor) -> ParserResult[tuple[A, B]]:
        match pa(cursor):
            case PError() as err:
                return err
            case POk(range=range_a, value=value_a):
                match pb(cursor.goto(range_a.end_idx)):
                    case PError() as err:
                        return err
                    case POk(range=range_b, value=value_b):
                        return POk(range_a.merge(range_b), (value_a, value_b))

    return Parser(parse, f"{pa.name} + {pb.name}")


def keep_left[A](pa: Parser[A], pb: Parser[Any]) -> Parser[A]:
    """and_then keeping only the left value."""
    return pmap(lambda pair: pair[0], and_then(pa, pb))


def keep_right[B](pa: Parser[Any], pb: Parser[B]) -> Parser[B]:
    """and_then keeping only the right value."""
    return pmap(lambda pair: pair[1], and_then(pa, pb))


def or_then[T](pa: Parser[T], pb: Parser[T]) -> Parser[T]:
    """Try ``pa``; on failure run ``pb`` from the original cursor.

    However far ``pa`` got before failing, ``pb`` starts at the same
    offset ``pa`` started at.
    """

    def parse(cursor: Cursor) -> ParserResult[T]:
        result = pa(cursor)
        if result.is_ok:
            return result
        return pb(cursor)

    return Parser(parse, f"{pa.name} | {pb.name}")


def first_of[T](parsers: Iterable[Parser[T]]) -> Parser[T]:
    """Left-to-right or_then reduction.

    Fails with the error of the last alternative when all fail, and with
    "No more parsers" when given no alternatives at all.
    """
    alternatives = tuple(parsers)
    if not alternatives:
        return fail(ErrorTemplate.no_more_parsers().message)
    combined = alternatives[0]
    for alternative in alternatives[1:]:
        combined = or_then(combined, alternative)
    return combined


def pchoice[T](parsers: Iterable[Parser[T]]) -> Parser[T]:
    """Return the first alternative that succeeds.

    Unlike first_of(), an overall failure is reported at the starting
    offset with a generic "No more parsers" message listing the messages
    of the alternatives that were tried.
    """
    alternatives = tuple(parsers)

    def parse(cursor: Cursor) -> ParserResult[T]:
        attempted: list[str] = []
        for alternative in alternatives:
            result = alternative(cursor)
            if result.is_ok:
                return result
            attempted.append(result.message)
        return PError.create(
            cursor.idx, ErrorTemplate.no_more_parsers(tuple(attempted)).message
        )

    return Parser(parse, "choice(" + ", ".join(a.name for a in alternatives) + ")")


def set_error_message[T](message: str, p: Parser[T]) -> Parser[T]:
    """Replace the failure message of ``p``, keeping the failure offset."""

    def parse(cursor: Cursor) -> ParserResult[T]:
        match p(cursor):
            case PError(error=error):
                return PError(error.with_message(message))
            case ok:
                return ok

    return Parser(parse, p.name)
