"""bluntparse - parser combinators over an immutable text cursor.

Recursive-descent parsers are built by composing small parser values
instead of generating code from a grammar file.

Public API:
    run / run_or_raise - Run a parser over a text
    Parser - Parser value type (callable ``Cursor -> ParserResult``)
    pstr, any_char, pchar, eoi, pgoto - Primitive parsers
    bind, pmap, and_then, or_then, first_of, pchoice - Core combinators
    many, many1, many_n - Repetition
    pattempt, ptry, pnot, pis_ok, pis_err - Lookahead and negation
    sequence, for_each, ForState - Sequencing and accumulating loops
    DocPos - Offset to line/column resolution

Exceptions:
    BluntError - Base exception class
    BluntSyntaxError - Raised by run_or_raise on parse failure
    BluntProgrammingError - Invariant violations in combinator wiring

Submodules:
    bluntparse.core - Cursor, Range, result model, positions
    bluntparse.combinators - Combinator engine
    bluntparse.diagnostics - Error codes, templates and formatting
"""

from .combinators import (
    ForOutput,
    ForState,
    Parser,
    and_then,
    any_char,
    as_joined_string,
    bind,
    concat,
    eoi,
    fail,
    first_of,
    for_each,
    for_items,
    keep_left,
    keep_right,
    loop_while,
    many,
    many1,
    many_n,
    or_then,
    pattempt,
    pblank,
    pblanks,
    pchar,
    pchoice,
    pgoto,
    pignore,
    pis_err,
    pis_ok,
    pmap,
    pnot,
    pstr,
    ptry,
    repeat,
    return_,
    sequence,
    set_error_message,
)
from .core import Cursor, DocPos, LineOffsetCache, PError, POk, ParseError, Range
from .diagnostics import (
    BluntError,
    BluntProgrammingError,
    BluntSyntaxError,
    CursorRangeError,
    PositionRangeError,
)
from .enums import LoopExit
from .runner import RunFailure, RunSuccess, run, run_or_raise

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("bluntparse")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "BluntError",
    "BluntProgrammingError",
    "BluntSyntaxError",
    "Cursor",
    "CursorRangeError",
    "DocPos",
    "ForOutput",
    "ForState",
    "LineOffsetCache",
    "LoopExit",
    "PError",
    "POk",
    "ParseError",
    "Parser",
    "PositionRangeError",
    "Range",
    "RunFailure",
    "RunSuccess",
    "__version__",
    "and_then",
    "any_char",
    "as_joined_string",
    "bind",
    "concat",
    "eoi",
    "fail",
    "first_of",
    "for_each",
    "for_items",
    "keep_left",
    "keep_right",
    "loop_while",
    "many",
    "many1",
    "many_n",
    "or_then",
    "pattempt",
    "pblank",
    "pblanks",
    "pchar",
    "pchoice",
    "pgoto",
    "pignore",
    "pis_err",
    "pis_ok",
    "pmap",
    "pnot",
    "pstr",
    "ptry",
    "repeat",
    "return_",
    "run",
    "run_or_raise",
    "sequence",
    "set_error_message",
]
