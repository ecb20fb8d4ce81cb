"""Exception hierarchy with structured diagnostics.

Parse failures are ordinary return values (PError) and never raise.
Exceptions here cover two cases only:

- BluntSyntaxError: raised by run_or_raise() to surface a parse failure
- BluntProgrammingError: invariant violations caused by incorrect
  combinator wiring (cursor moved out of range, offset outside the text)

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic


class BluntError(Exception):
    """Base exception for all bluntparse errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic, text: str | None = None) -> None:
        """Initialize BluntError.

        Args:
            message: Error message string OR Diagnostic object
            text: Input the diagnostic refers to; its failing line is
                quoted in the exception message
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error(text))
        else:
            self.diagnostic = None
            super().__init__(message)


class BluntSyntaxError(BluntError):
    """Input text did not match the parser.

    Raised only by run_or_raise(). The diagnostic span carries the
    resolved line and column of the failure.
    """


class BluntProgrammingError(BluntError):
    """Invariant violation in parser construction.

    Never triggered by malformed input, only by combinator code that
    bypassed bounds validation.
    """


class CursorRangeError(BluntProgrammingError, IndexError):
    """Cursor constructed or moved outside the permitted range."""


class PositionRangeError(BluntProgrammingError, ValueError):
    """Offset passed to the position resolver lies outside the text."""
