"""
Public API.
"""

from . import primitive, sequence, text
from .core.types import Loc
from .parser import (
    Delay, Parser, alt, altl, altn, altr, between, bind, chainl1, chainr1,
    delay, either, fmap, ignore, label, many, maybe, parse, repeat, sep_by,
    seq, seql, seqn, seqr, some, times
)
from .types import (
    Alternatives, ErrorInfo, ErrorItem, ErrorKind, Left, ParseError,
    ParseResult, Reason, Right
)

__all__ = (
    "primitive", "sequence", "text",
    "Loc",
    "Alternatives", "ErrorInfo", "ErrorItem", "ErrorKind", "Left",
    "ParseError", "ParseResult", "Reason", "Right",

    "Delay", "Parser", "alt", "altl", "altn", "altr", "between", "bind",
    "chainl1", "chainr1", "delay", "either", "fmap", "ignore", "label",
    "many", "maybe", "parse", "repeat", "sep_by", "seq", "seql", "seqn",
    "seqr", "some", "times"
)

__version__ = "0.1.0"
