"""Accumulating loop: parse greedily while a condition parser matches.

for_each() drives a loop-condition parser and a body callback that shares
a loop-local ForState:

    def body(ch, state):
        if ch in "abc":
            state.append_to_accumulator(ch)
        elif ch == "X":
            state.stop()
        return None

    letters = for_each(any_char, body)

Iteration rules:
    1. Run the condition parser at the current offset. If it fails the
       loop ends SUCCESSFULLY with what has been accumulated so far.
    2. Call body(value, state). It may mutate the state and returns a
       parser to run after the condition (or None for nothing). If that
       parser fails, the whole loop fails.
    3. Stop when state.stop() was called or the input is exhausted.
    4. Continue from the body's end offset if the iteration advanced.
       Otherwise step forward one character if possible (progress
       governor), else stop.

A fresh ForState is created for every run, so one for_each parser may be
reused freely.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from bluntparse.constants import GOVERNOR_STEP
from bluntparse.core import Cursor, PError, POk, ParserResult
from bluntparse.enums import LoopExit

from .builder import SequenceBody, repeat, sequence
from .parser import Parser
from .primitives import pblank

__all__ = ["ForOutput", "ForState", "LoopBody", "for_each", "pblanks"]

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class ForState:
    """Loop-local state shared by the iterations of one for_each run.

    Mutability Note:
        Intentionally mutable (not frozen=True). It is created at the start
        of a run and discarded at its end; it never escapes the loop except
        as the immutable ForOutput snapshot.

    Attributes:
        stop_requested: Set by stop(); checked after each body
    """

    stop_requested: bool = False
    _buffer: list[str] = field(default_factory=list)
    _items: list[Any] = field(default_factory=list)

    def stop(self) -> None:
        """End the loop after the current iteration."""
        self.stop_requested = True

    def append_to_accumulator(self, text: str) -> None:
        """Append ``text`` to the running string accumulator."""
        self._buffer.append(text)

    def yield_item(self, item: Any) -> None:
        """Record one discrete output item."""
        self._items.append(item)

    def yield_accumulator_snapshot(self) -> None:
        """Record the current accumulator content as an item.

        The accumulator is NOT cleared; later appends extend it.
        """
        self._items.append(self.accumulator)

    @property
    def accumulator(self) -> str:
        """Text appended so far."""
        return "".join(self._buffer)

    @property
    def items(self) -> tuple[Any, ...]:
        """Items yielded so far, in order."""
        return tuple(self._items)


@dataclass(frozen=True, slots=True)
class ForOutput:
    """Value produced by a for_each loop.

    Attributes:
        items: Items recorded with yield_item / yield_accumulator_snapshot
        text: Final accumulator content
        exit: Why the loop ended
    """

    items: tuple[Any, ...]
    text: str
    exit: LoopExit


type LoopBody[T] = Callable[[T, ForState], Parser[Any] | None]


def _finish(
    start: Cursor, end: Cursor, state: ForState, exit_reason: LoopExit
) -> ParserResult[ForOutput]:
    output = ForOutput(state.items, state.accumulator, exit_reason)
    return POk.create(start.idx, end.idx, output)


def for_each[T](loop_parser: Parser[T], body: LoopBody[T]) -> Parser[ForOutput]:
    """Loop while ``loop_parser`` matches, feeding each value to ``body``.

    Args:
        loop_parser: Condition parser run at the start of every iteration
        body: Callback receiving the condition value and the ForState;
            returns a parser to run after the condition, or None

    Returns:
        Parser yielding a ForOutput. Fails only when a body parser fails.
    """

    def parse(cursor: Cursor) -> ParserResult[ForOutput]:
        state = ForState()
        current = cursor
        while True:
            condition = loop_parser(current)
            if not isinstance(condition, POk):
                return _finish(cursor, current, state, LoopExit.CONDITION_FAILED)
            after_condition = current.goto(condition.end_idx)

            body_parser = body(condition.value, state)
            body_end = after_condition
            if body_parser is not None:
                match body_parser(after_condition):
                    case PError() as err:
                        return err
                    case POk(range=rng):
                        body_end = after_condition.goto(rng.end_idx)

            if state.stop_requested:
                return _finish(cursor, body_end, state, LoopExit.STOPPED)
            if body_end.is_at_end:
                return _finish(cursor, body_end, state, LoopExit.END_OF_INPUT)
            if body_end.idx > current.idx:
                current = body_end
            elif body_end.can_walk_forward(GOVERNOR_STEP):
                logger.debug(
                    "for_each(%s): iteration at %d consumed nothing, stepping to %d",
                    loop_parser.name,
                    current.idx,
                    body_end.idx + GOVERNOR_STEP,
                )
                current = body_end.advance(GOVERNOR_STEP)
            else:
                return _finish(cursor, body_end, state, LoopExit.NO_PROGRESS)

    return Parser(parse, f"for_each({loop_parser.name})")


def _accumulate(blank: str, state: ForState) -> None:
    state.append_to_accumulator(blank)


@sequence
def pblanks(count: int) -> SequenceBody[str]:
    """At least ``count`` blanks (U+0020); the value is the blank run.

    Example:
        >>> pblanks(1).parse_text("   xxx").value
        '   '
    """
    leading = yield repeat(count, pblank)
    rest = yield for_each(pblank, _accumulate)
    return "".join(leading) + rest.text
