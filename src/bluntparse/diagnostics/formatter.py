"""Render diagnostics as readable text.

A located diagnostic points at its ``line:column``. When the input text is
known, the failing line is quoted with a caret under the column:

    error[PARSE_FAILED]: Expected: 'x'
      --> 2:3
         |
       2 | two
         |   ^
      = help: ...

Columns count code points, so the caret lines up for text without wide or
combining characters.
"""

from .codes import Diagnostic, SourceSpan

__all__ = ["format_diagnostic"]


def _quote_line(text: str, span: SourceSpan, marker: str) -> list[str]:
    lines = text.split("\n")
    if span.line > len(lines):
        return []
    number = str(span.line)
    gutter = " " * len(number)
    return [
        f"   {gutter} |",
        f"   {number} | {lines[span.line - 1]}",
        f"   {gutter} | {' ' * (span.column - 1)}{marker}",
    ]


def format_diagnostic(
    diagnostic: Diagnostic,
    text: str | None = None,
    marker: str = "^",
) -> str:
    """Render ``diagnostic``; quote the failing line when ``text`` is given.

    Example:
        >>> from bluntparse.diagnostics import ErrorTemplate
        >>> print(format_diagnostic(ErrorTemplate.expected_literal("let")))
        error[EXPECTED_LITERAL]: Expected: 'let'
    """
    parts = [f"error[{diagnostic.code.name}]: {diagnostic.message}"]
    span = diagnostic.span
    if span is not None:
        parts.append(f"  --> {span.line}:{span.column}")
        if text is not None:
            parts.extend(_quote_line(text, span, marker))
    if diagnostic.hint:
        parts.append(f"  = help: {diagnostic.hint}")
    return "\n".join(parts)
