"""Diagnostic system for parse failures and invariant violations.

Provides structured error diagnostics with codes, spans and hints.
Inspired by Rust compiler diagnostics and Elm error messages.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan
from .errors import (
    BluntError,
    BluntProgrammingError,
    BluntSyntaxError,
    CursorRangeError,
    PositionRangeError,
)
from .formatter import format_diagnostic
from .templates import ErrorTemplate

__all__ = [
    "BluntError",
    "BluntProgrammingError",
    "BluntSyntaxError",
    "CursorRangeError",
    "Diagnostic",
    "DiagnosticCode",
    "ErrorTemplate",
    "PositionRangeError",
    "SourceSpan",
    "format_diagnostic",
]
