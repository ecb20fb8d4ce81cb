"""Enumerations for bluntparse type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.

Python 3.13+.
"""

from enum import StrEnum


class LoopExit(StrEnum):
    """Reason a for_each() loop terminated.

    StrEnum provides automatic string conversion: str(LoopExit.STOPPED) == "stopped"
    """

    CONDITION_FAILED = "condition_failed"
    """Loop-condition parser failed; accumulated output is returned."""

    STOPPED = "stopped"
    """Loop body called ForState.stop()."""

    END_OF_INPUT = "end_of_input"
    """Body finished with the cursor at the end of the text."""

    NO_PROGRESS = "no_progress"
    """Body consumed nothing and the governor could not step forward."""
