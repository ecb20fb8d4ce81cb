"""Diagnostic codes and data structures.

A Diagnostic pairs a DiagnosticCode with the message a combinator reported.
Parse failures only gain a SourceSpan once run() resolves their offset
against the input text.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "SourceSpan",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        3000-3999: Parse errors (ordinary combinator failures)
        9000-9999: Programming errors (invariant violations in combinator wiring)
    """

    # Parse errors (3000-3999)
    UNEXPECTED_EOF = 3001
    EXPECTED_LITERAL = 3002
    UNEXPECTED_CHARACTER = 3003
    EXPECTED_END_OF_INPUT = 3004
    NO_MORE_PARSERS = 3005
    TOO_FEW_OCCURRENCES = 3006
    EXPECTED_AT_LEAST_ONE = 3007
    UNEXPECTED_MATCH = 3008
    INVALID_GOTO = 3009
    PARSE_FAILED = 3099

    # Programming errors (9000-9999)
    CURSOR_OUT_OF_RANGE = 9001
    POSITION_OUT_OF_RANGE = 9002
    INVALID_RANGE = 9003


@dataclass(frozen=True, slots=True)
class SourceSpan:
    """Resolved location of a failure in the input text.

    A failed parse reports one offset, so spans built by run() are
    zero-width (``start == end``). Offsets count code points.

    Attributes:
        start: Offset of the failure (0-based)
        end: Exclusive end offset, never before ``start``
        line: Line of ``start`` (1-based, ``\\n`` separated)
        column: Column of ``start`` (1-based)
    """

    start: int
    end: int
    line: int
    column: int

    def __post_init__(self) -> None:
        """Reject offsets and positions no DocPos could produce.

        Raises:
            ValueError: On a negative or inverted offset pair, or a
                line/column below 1
        """
        if self.start < 0 or self.end < self.start:
            msg = (
                "SourceSpan offsets must satisfy 0 <= start <= end, "
                f"got [{self.start}, {self.end}]"
            )
            raise ValueError(msg)
        if self.line < 1 or self.column < 1:
            msg = f"SourceSpan line and column are 1-based, got {self.line}:{self.column}"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Failure message with its code and, once resolved, its location.

    Attributes:
        code: Which template produced the message
        message: Text carried by PError, unchanged
        span: Location in the input (None for unresolved failures)
        hint: How to fix the grammar or the input
    """

    code: DiagnosticCode
    message: str
    span: SourceSpan | None = None
    hint: str | None = None

    def __str__(self) -> str:
        return self.message

    def format_error(self, text: str | None = None) -> str:
        """Render with format_diagnostic(), quoting ``text`` when given."""
        from .formatter import format_diagnostic  # noqa: PLC0415 - circular

        return format_diagnostic(self, text)
