"""Parser value type.

A parser is a pure function ``Cursor -> ParserResult[T]``. Parser wraps
that function with a descriptive name (used in diagnostics such as
pnot's "Unexpected: ..." message) and operator sugar:

    a + b   and_then     (pair of both values, merged range)
    a | b   or_then      (backtracking choice)
    a << b  keep_left    (value of a)
    a >> b  keep_right   (value of b)

Parsers are composed, never mutated. A Parser captures no mutable state,
so one instance may run over many independent cursors.
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from bluntparse.core import Cursor, ParserResult

__all__ = ["Parser", "ParserFunction"]

type ParserFunction[T] = Callable[[Cursor], ParserResult[T]]


@dataclass(frozen=True, slots=True)
class Parser[T]:
    """Named, immutable parser function.

    Example:
        >>> from bluntparse import pstr
        >>> p = pstr("let") >> pstr(" ")
        >>> p(Cursor("let x", 0)).value
        ' '
    """

    fn: ParserFunction[T]
    name: str = "parser"

    def __call__(self, cursor: Cursor) -> ParserResult[T]:
        return self.fn(cursor)

    def __repr__(self) -> str:
        return f"Parser({self.name})"

    def parse_text(self, text: str) -> ParserResult[T]:
        """Run from the start of ``text`` and return the raw result."""
        return self.fn(Cursor(text, 0))

    def bind[U](self, f: Callable[[T], "Parser[U]"]) -> "Parser[U]":
        """Method form of engine.bind."""
        from bluntparse.combinators.engine import bind  # noqa: PLC0415 - circular

        return bind(f, self)

    def map[U](self, proj: Callable[[T], U]) -> "Parser[U]":
        """Method form of engine.pmap."""
        from bluntparse.combinators.engine import pmap  # noqa: PLC0415 - circular

        return pmap(proj, self)

    def and_then[U](self, other: "Parser[U]") -> "Parser[tuple[T, U]]":
        from bluntparse.combinators.engine import and_then  # noqa: PLC0415 - circular

        return and_then(self, other)

    def or_then(self, other: "Parser[T]") -> "Parser[T]":
        from bluntparse.combinators.engine import or_then  # noqa: PLC0415 - circular

        return or_then(self, other)

    def keep_left(self, other: "Parser[Any]") -> "Parser[T]":
        from bluntparse.combinators.engine import keep_left  # noqa: PLC0415 - circular

        return keep_left(self, other)

    def keep_right[U](self, other: "Parser[U]") -> "Parser[U]":
        from bluntparse.combinators.engine import keep_right  # noqa: PLC0415 - circular

        return keep_right(self, other)

    def label(self, message: str) -> "Parser[T]":
        """Replace the failure message (see engine.set_error_message)."""
        from bluntparse.combinators.engine import (  # noqa: PLC0415 - circular
            set_error_message,
        )

        return set_error_message(message, self)

    def named(self, name: str) -> "Parser[T]":
        """Same function, new descriptive name."""
        return Parser(self.fn, name)

    __add__ = and_then
    __or__ = or_then
    __lshift__ = keep_left
    __rshift__ = keep_right
