"""Cursor, result model and position resolution.

Leaf layer of the library: nothing here depends on the combinators.
"""

from .cursor import Cursor, Range
from .position import DocPos, LineOffsetCache, get_error_context, get_line_content
from .result import PError, POk, ParseError, ParserResult

__all__ = [
    "Cursor",
    "DocPos",
    "LineOffsetCache",
    "PError",
    "POk",
    "ParseError",
    "ParserResult",
    "Range",
    "get_error_context",
    "get_line_content",
]
