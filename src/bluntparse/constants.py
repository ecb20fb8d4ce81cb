"""Shared constants for bluntparse.

Centralized configuration defaults. Runtime overrides are passed as
keyword-only arguments (for example ``run(..., max_source_size=...)``).

Python 3.13+. Zero external dependencies.
"""

__all__ = [
    "DEFAULT_CONTEXT_LINES",
    "GOVERNOR_STEP",
    "MAX_SOURCE_SIZE",
]

# ============================================================================
# INPUT LIMITS
# ============================================================================

# Default maximum input size in characters (10 MiB).
# Parsing is in-memory and offsets are resolved by scanning, so very large
# inputs are rejected before parsing starts. 0 disables the check.
MAX_SOURCE_SIZE: int = 10 * 1024 * 1024

# ============================================================================
# LOOP GOVERNOR
# ============================================================================

# Characters skipped by for_each() when an iteration consumes nothing.
# Steps above 1 skip input. When fewer characters than the step remain,
# the loop ends with LoopExit.NO_PROGRESS.
GOVERNOR_STEP: int = 1

# ============================================================================
# ERROR REPORTING
# ============================================================================

# Lines shown before and after the failing line by get_error_context().
DEFAULT_CONTEXT_LINES: int = 2
