"""Parser result model.

A parser returns exactly one of two variants:

    POk[T]  - success with the consumed Range and the parsed value
    PError  - failure with the offset where it was detected and a message

Zero-width success (``range.is_empty``) is distinct from failure; no
sentinel values are used.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass

from bluntparse.core.cursor import Range

__all__ = ["PError", "POk", "ParseError", "ParserResult"]


@dataclass(frozen=True, slots=True)
class ParseError:
    """Parse failure location and diagnostic.

    ``idx`` is where the failure was detected, not necessarily where the
    overall parse started.

    Example:
        >>> ParseError(7, "Expected ']'").format("hello\\nworld")
        "2:2: Expected ']'"
    """

    idx: int
    message: str

    def with_message(self, message: str) -> "ParseError":
        """Same offset, replaced message."""
        return ParseError(self.idx, message)

    def format(self, text: str) -> str:
        """Format error as ``line:column: message`` against ``text``."""
        from bluntparse.core.position import DocPos  # noqa: PLC0415 - circular

        pos = DocPos.create(self.idx, text)
        return f"{pos.ln}:{pos.col}: {self.message}"


@dataclass(frozen=True, slots=True)
class POk[T]:
    """Successful parse step.

    Type Parameters:
        T: The type of the parsed value

    Example:
        >>> ok = POk.create(0, 3, "abc")
        >>> ok.range.end_idx
        3
        >>> ok.value
        'abc'
    """

    range: Range
    value: T

    @property
    def is_ok(self) -> bool:
        return True

    @property
    def end_idx(self) -> int:
        """Offset just past the consumed text."""
        return self.range.end_idx

    @staticmethod
    def create[V](start_idx: int, end_idx: int, value: V) -> "POk[V]":
        """Build a success covering ``[start_idx, end_idx)``."""
        return POk(Range(start_idx, end_idx), value)


@dataclass(frozen=True, slots=True)
class PError:
    """Failed parse step."""

    error: ParseError

    @property
    def is_ok(self) -> bool:
        return False

    @property
    def idx(self) -> int:
        """Offset where the failure was detected."""
        return self.error.idx

    @property
    def message(self) -> str:
        """Human-readable diagnostic."""
        return self.error.message

    @staticmethod
    def create(idx: int, message: str) -> "PError":
        """Build a failure at ``idx``."""
        return PError(ParseError(idx, message))


type ParserResult[T] = POk[T] | PError
