"""Combinator engine, primitives and sequencing layer.

Module Organization:
- parser.py: Parser value type and operator sugar
- engine.py: bind, pmap, sequencing and choice
- repetition.py: many_n, many, many1
- lookahead.py: pattempt, ptry, pnot, pis_ok, pis_err
- primitives.py: pstr, any_char, pchar, eoi, pgoto
- builder.py: @sequence do-notation and list loops
- loops.py: for_each with ForState accumulator
"""

from .builder import SequenceBody, concat, for_items, loop_while, repeat, sequence
from .engine import (
    and_then,
    bind,
    fail,
    first_of,
    keep_left,
    keep_right,
    or_then,
    pchoice,
    pignore,
    pmap,
    return_,
    set_error_message,
)
from .lookahead import pattempt, pis_err, pis_ok, pnot, ptry
from .loops import ForOutput, ForState, LoopBody, for_each, pblanks
from .parser import Parser, ParserFunction
from .primitives import any_char, eoi, pblank, pchar, pgoto, pstr
from .repetition import as_joined_string, many, many1, many_n

__all__ = [
    "ForOutput",
    "ForState",
    "LoopBody",
    "Parser",
    "ParserFunction",
    "SequenceBody",
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
    "sequence",
    "set_error_message",
]
