"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    Combinators take the ``message`` of the returned Diagnostic for their
    PError results; programming errors wrap the Diagnostic directly.
    """

    # ------------------------------------------------------------------
    # Parse errors
    # ------------------------------------------------------------------

    @staticmethod
    def unexpected_eof(position: int) -> Diagnostic:
        """Input ended while more characters were required.

        Args:
            position: Offset of the end of input

        Returns:
            Diagnostic for UNEXPECTED_EOF
        """
        msg = f"Unexpected EOF at position {position}"
        return Diagnostic(
            code=DiagnosticCode.UNEXPECTED_EOF,
            message=msg,
            hint="Expected more characters",
        )

    @staticmethod
    def expected_more_characters() -> Diagnostic:
        """any_char reached the end of input."""
        return Diagnostic(
            code=DiagnosticCode.UNEXPECTED_EOF,
            message="Expected more characters, reached end of input",
        )

    @staticmethod
    def expected_literal(literal: str) -> Diagnostic:
        """Literal match failed.

        Args:
            literal: The literal that was expected

        Returns:
            Diagnostic for EXPECTED_LITERAL
        """
        msg = f"Expected: '{literal}'"
        return Diagnostic(code=DiagnosticCode.EXPECTED_LITERAL, message=msg)

    @staticmethod
    def unexpected_character(found: str) -> Diagnostic:
        """Character predicate rejected the character found.

        Args:
            found: The character at the cursor

        Returns:
            Diagnostic for UNEXPECTED_CHARACTER
        """
        msg = f"Unexpected character: '{found}'"
        return Diagnostic(code=DiagnosticCode.UNEXPECTED_CHARACTER, message=msg)

    @staticmethod
    def expected_end_of_input() -> Diagnostic:
        """eoi found unconsumed input."""
        return Diagnostic(
            code=DiagnosticCode.EXPECTED_END_OF_INPUT,
            message="Expected end of input.",
        )

    @staticmethod
    def no_more_parsers(attempted: tuple[str, ...] = ()) -> Diagnostic:
        """Every alternative of a choice failed.

        Args:
            attempted: Messages of the failed alternatives, in order

        Returns:
            Diagnostic for NO_MORE_PARSERS
        """
        msg = "No more parsers"
        if attempted:
            msg += " (tried: " + "; ".join(attempted) + ")"
        return Diagnostic(code=DiagnosticCode.NO_MORE_PARSERS, message=msg)

    @staticmethod
    def too_few_occurrences(expected: int, actual: int) -> Diagnostic:
        """Repetition stopped before reaching its minimum count.

        Args:
            expected: Minimum number of occurrences
            actual: Number of occurrences actually parsed

        Returns:
            Diagnostic for TOO_FEW_OCCURRENCES
        """
        msg = f"Expected at least {expected} occurrences, got {actual}"
        return Diagnostic(code=DiagnosticCode.TOO_FEW_OCCURRENCES, message=msg)

    @staticmethod
    def expected_at_least_one() -> Diagnostic:
        """many1 produced no elements."""
        return Diagnostic(
            code=DiagnosticCode.EXPECTED_AT_LEAST_ONE,
            message="Expected at least one element",
        )

    @staticmethod
    def unexpected_match(name: str) -> Diagnostic:
        """Negative lookahead saw its parser succeed.

        Args:
            name: Descriptive name of the parser that matched

        Returns:
            Diagnostic for UNEXPECTED_MATCH
        """
        msg = f"Unexpected: {name}"
        return Diagnostic(code=DiagnosticCode.UNEXPECTED_MATCH, message=msg)

    @staticmethod
    def invalid_goto(idx: int, current: int, length: int) -> Diagnostic:
        """pgoto target lies outside [current, length].

        Args:
            idx: Requested offset
            current: Offset of the cursor
            length: Length of the text

        Returns:
            Diagnostic for INVALID_GOTO
        """
        msg = f"Index {idx} is out of range [{current}, {length}]"
        return Diagnostic(
            code=DiagnosticCode.INVALID_GOTO,
            message=msg,
            hint="Cursor movement is forward-only",
        )

    # ------------------------------------------------------------------
    # Programming errors
    # ------------------------------------------------------------------

    @staticmethod
    def cursor_out_of_range(idx: int, lower: int, length: int) -> Diagnostic:
        """Cursor constructed or moved outside [lower, length].

        Args:
            idx: Offending offset
            lower: Smallest permitted offset
            length: Length of the text

        Returns:
            Diagnostic for CURSOR_OUT_OF_RANGE
        """
        msg = f"Cursor index {idx} is out of range [{lower}, {length}]"
        return Diagnostic(
            code=DiagnosticCode.CURSOR_OUT_OF_RANGE,
            message=msg,
            hint="Validate with can_goto() before calling goto()",
        )

    @staticmethod
    def position_out_of_range(idx: int, length: int) -> Diagnostic:
        """DocPos requested for an offset outside the text.

        Args:
            idx: Offending offset
            length: Length of the text

        Returns:
            Diagnostic for POSITION_OUT_OF_RANGE
        """
        msg = f"Index {idx} is out of range of input string of length {length}."
        return Diagnostic(code=DiagnosticCode.POSITION_OUT_OF_RANGE, message=msg)

    @staticmethod
    def invalid_range(start: int, end: int) -> Diagnostic:
        """Range with a negative start or end before start."""
        msg = f"Invalid range [{start}, {end})"
        return Diagnostic(code=DiagnosticCode.INVALID_RANGE, message=msg)
