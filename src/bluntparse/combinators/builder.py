"""Sequencing builder: generator do-notation and list-producing loops.

The @sequence decorator turns a generator function into a parser factory.
Each ``yield`` hands a parser to the driver, which runs it at the current
offset and sends the parsed value back into the generator; the
generator's return value becomes the parser's value:

    @sequence
    def assignment():
        name = yield identifier
        yield pstr(" = ")
        value = yield number
        return (name, value)

A failing yield closes the generator and the failure propagates unchanged,
exactly as with bind().

The list combinators (concat, repeat, loop_while, for_items) operate on
parsers whose values are lists and append those lists in order.
"""

import functools
from collections.abc import Callable, Generator, Iterable, Iterator
from typing import Any

from bluntparse.core import Cursor, PError, POk, ParserResult

from .parser import Parser

__all__ = ["SequenceBody", "concat", "for_items", "loop_while", "repeat", "sequence"]

type SequenceBody[T] = Generator[Parser[Any], Any, T]


def sequence[**P, T](
    fn: Callable[P, SequenceBody[T]],
) -> Callable[P, Parser[T]]:
    """Build parsers from a generator function (do-notation).

    The result range covers everything from the starting offset to the
    offset after the last yielded parser.
    """

    @functools.wraps(fn)
    def factory(*args: P.args, **kwargs: P.kwargs) -> Parser[T]:
        def run_body(cursor: Cursor) -> ParserResult[T]:
            body = fn(*args, **kwargs)
            current = cursor
            sent: Any = None
            while True:
                try:
                    step = body.send(sent)
                except StopIteration as done:
                    return POk.create(cursor.idx, current.idx, done.value)
                match step(current):
                    case PError() as err:
                        body.close()
                        return err
                    case POk(range=rng, value=value):
                        current = current.goto(rng.end_idx)
                        sent = value

        return Parser(run_body, fn.__name__)

    return factory


def concat[T](*parsers: Parser[list[T]]) -> Parser[list[T]]:
    """Run list parsers in order and append their values."""

    def parse(cursor: Cursor) -> ParserResult[list[T]]:
        values: list[T] = []
        current = cursor
        for p in parsers:
            match p(current):
                case PError() as err:
                    return err
                case POk(range=rng, value=chunk):
                    values.extend(chunk)
                    current = current.goto(rng.end_idx)
        return POk.create(cursor.idx, current.idx, values)

    return Parser(parse, "concat(" + ", ".join(p.name for p in parsers) + ")")


def repeat[T](count: int, p: Parser[T]) -> Parser[list[T]]:
    """Exactly ``count`` applications of ``p``.

    Example:
        >>> from bluntparse import pstr
        >>> repeat(2, pstr("ab")).parse_text("ababab").value
        ['ab', 'ab']
    """
    if count < 0:
        msg = f"count must be >= 0, got {count}"
        raise ValueError(msg)

    def parse(cursor: Cursor) -> ParserResult[list[T]]:
        values: list[T] = []
        current = cursor
        for _ in range(count):
            match p(current):
                case PError() as err:
                    return err
                case POk(range=rng, value=value):
                    values.append(value)
                    current = current.goto(rng.end_idx)
        return POk.create(cursor.idx, current.idx, values)

    return Parser(parse, f"repeat({count}, {p.name})")


def _drive[T](cursor: Cursor, steps: Iterator[Parser[list[T]]]) -> ParserResult[list[T]]:
    """Run list parsers from ``steps`` until exhausted or no progress.

    A step that consumes nothing contributes its values and ends the loop.
    """
    values: list[T] = []
    current = cursor
    for step in steps:
        match step(current):
            case PError() as err:
                return err
            case POk(range=rng, value=chunk):
                values.extend(chunk)
                if rng.end_idx == current.idx:
                    break
                current = current.goto(rng.end_idx)
    return POk.create(cursor.idx, current.idx, values)


def loop_while[T](
    guard: Callable[[], bool],
    body: Callable[[], Parser[list[T]]],
) -> Parser[list[T]]:
    """Run ``body()`` while ``guard()`` holds, appending the list values.

    Body failures propagate. A body that consumes nothing ends the loop
    successfully.
    """

    def steps() -> Iterator[Parser[list[T]]]:
        while guard():
            yield body()

    return Parser(lambda cursor: _drive(cursor, steps()), "loop_while")


def for_items[X, T](
    items: Iterable[X],
    body: Callable[[X], Parser[list[T]]],
) -> Parser[list[T]]:
    """loop_while driven by an iterable: one body per item.

    The iterable is re-iterated on every run, so pass a reusable
    collection rather than a one-shot iterator.
    """
    return Parser(
        lambda cursor: _drive(cursor, (body(item) for item in items)),
        "for_items",
    )
