"""Entry point: run a parser over a text and resolve failures.

run() never raises for malformed input. It returns RunSuccess with the
parsed value, or RunFailure whose raw failure offset has been resolved to
a 1-based line/column DocPos. run_or_raise() is the exception-based
variant for callers that prefer it.
"""

import logging
from dataclasses import dataclass

from bluntparse.combinators import Parser
from bluntparse.constants import DEFAULT_CONTEXT_LINES, MAX_SOURCE_SIZE
from bluntparse.core import Cursor, DocPos, PError, POk, get_error_context
from bluntparse.diagnostics import (
    BluntSyntaxError,
    Diagnostic,
    DiagnosticCode,
    SourceSpan,
)

__all__ = ["RunFailure", "RunResult", "RunSuccess", "run", "run_or_raise"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class RunSuccess[T]:
    """Parser succeeded; ``end_idx`` is the offset where it stopped."""

    value: T
    end_idx: int

    @property
    def is_ok(self) -> bool:
        return True


@dataclass(frozen=True, slots=True)
class RunFailure:
    """Parser failed at ``position`` with ``message``."""

    position: DocPos
    message: str
    text: str

    @property
    def is_ok(self) -> bool:
        return False

    def format(self) -> str:
        """``line:column: message``."""
        return f"{self.position.ln}:{self.position.col}: {self.message}"

    def format_with_context(self, context_lines: int = DEFAULT_CONTEXT_LINES) -> str:
        """format() followed by the surrounding lines and a caret."""
        context = get_error_context(self.text, self.position.idx, context_lines)
        return f"{self.format()}\n\n{context}"

    def to_diagnostic(self) -> Diagnostic:
        """Structured diagnostic with a zero-width span at the failure."""
        span = SourceSpan(
            start=self.position.idx,
            end=self.position.idx,
            line=self.position.ln,
            column=self.position.col,
        )
        return Diagnostic(code=DiagnosticCode.PARSE_FAILED, message=self.message, span=span)


type RunResult[T] = RunSuccess[T] | RunFailure


def run[T](
    text: str,
    parser: Parser[T],
    *,
    max_source_size: int | None = None,
) -> RunResult[T]:
    """Run ``parser`` from the start of ``text``.

    Args:
        text: Input text
        parser: Parser to run
        max_source_size: Maximum input length in characters
            (default: MAX_SOURCE_SIZE). 0 disables the limit.

    Returns:
        RunSuccess or RunFailure

    Raises:
        ValueError: If text exceeds max_source_size

    Example:
        >>> from bluntparse import pstr
        >>> run("let", pstr("let")).value
        'let'
        >>> run("var", pstr("let")).format()
        "1:1: Expected: 'let'"
    """
    limit = max_source_size if max_source_size is not None else MAX_SOURCE_SIZE
    if limit > 0 and len(text) > limit:
        msg = (
            f"Source size ({len(text):,} characters) exceeds maximum "
            f"({limit:,} characters). "
            "Pass max_source_size to run() to increase the limit."
        )
        raise ValueError(msg)

    match parser(Cursor(text, 0)):
        case POk(range=rng, value=value):
            return RunSuccess(value, rng.end_idx)
        case PError(error=error):
            position = DocPos.create(error.idx, text)
            logger.debug("%s failed at %s: %s", parser.name, position, error.message)
            return RunFailure(position, error.message, text)


def run_or_raise[T](
    text: str,
    parser: Parser[T],
    *,
    max_source_size: int | None = None,
) -> T:
    """Run ``parser`` and return its value.

    Raises:
        BluntSyntaxError: If the parser fails; carries the diagnostic and
            quotes the failing line
        ValueError: If text exceeds max_source_size
    """
    match run(text, parser, max_source_size=max_source_size):
        case RunSuccess(value=value):
            return value
        case RunFailure() as failure:
            raise BluntSyntaxError(failure.to_diagnostic(), failure.text)
