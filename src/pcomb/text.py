"""
Parsers for strings: character classes, numeric literals, and line and column
tracking.

>>> from pcomb.text import integer, number

>>> integer.parse("-12").unwrap()
'-12'
>>> number.parse("3.14e-2").unwrap()
0.0314
>>> number.parse("3.14.5").unwrap()
Traceback (most recent call last):
  ...
pcomb.types.ParseError: at 4: expected end of input
"""

from typing import (
    Callable, FrozenSet, List, Optional, Sequence, Tuple, TypeVar
)

from .core.types import Loc
from .parser import Parser, maybe, parse as _parse, some
from .primitive import Pure
from .sequence import in_range, literal, satisfy, sym
from .types import ParseResult

__all__ = (
    "char", "one_of", "none_of", "any_of", "all_of", "digit", "hex_digit",
    "space", "tab", "newline", "cr", "crlf", "end_of_line", "spaces",
    "integer", "number", "get_loc", "parse",
)

A = TypeVar("A")

Chars = Sequence[str]


def char(c: str) -> Parser[Chars, str]:
    """
    Parses the character ``c``.

    >>> from pcomb.text import char

    >>> char("x").parse("x").unwrap()
    'x'

    :param c: Character to parse
    """

    return sym(c)


def one_of(chars: str) -> Parser[Chars, str]:
    """
    Parses any of the characters in ``chars``.

    >>> from pcomb.text import one_of

    >>> one_of("+-").parse("-").unwrap()
    '-'
    >>> one_of("+-").parse("*").unwrap()
    Traceback (most recent call last):
      ...
    pcomb.types.ParseError: at 0: expected one of '+-'

    :param chars: Allowed characters
    """

    charset = frozenset(chars)
    return satisfy(lambda c: c in charset, "one of {!r}".format(chars))


def none_of(chars: str) -> Parser[Chars, str]:
    """
    Parses any character that is not in ``chars``.

    >>> from pcomb.text import none_of

    >>> none_of("\\"").many().parse("abc").unwrap()
    ['a', 'b', 'c']

    :param chars: Forbidden characters
    """

    charset = frozenset(chars)
    return satisfy(lambda c: c not in charset, "none of {!r}".format(chars))


def _prepend(c: str) -> Callable[[List[str]], List[str]]:
    return lambda cs: [c] + cs


def _any_of(charset: FrozenSet[str]) -> Parser[Chars, List[str]]:
    def rest(c: str) -> Parser[Chars, List[str]]:
        return _any_of(charset - {c}).fmap(_prepend(c)) | Pure([c])

    label = "one of {!r}".format("".join(sorted(charset)))
    return satisfy(lambda c: c in charset, label).bind(rest)


def any_of(chars: str) -> Parser[Chars, List[str]]:
    """
    Parses characters from ``chars`` in the order they are found, matching
    each of them at most once.

    >>> from pcomb.text import any_of

    >>> any_of("xyz").parse("zx").unwrap()
    ['z', 'x']
    >>> any_of("xyz").parse("xzx").unwrap()
    Traceback (most recent call last):
      ...
    pcomb.types.ParseError: at 2: expected end of input

    :param chars: Allowed characters
    """

    return _any_of(frozenset(chars))


def all_of(chars: str) -> Parser[Chars, List[str]]:
    """
    Parses characters from ``chars`` in the order they are found, matching
    each of them as many times as it occurs.

    >>> from pcomb.text import all_of

    >>> all_of("ab").parse("abba").unwrap()
    ['a', 'b', 'b', 'a']

    :param chars: Allowed characters
    """

    item = one_of(chars)
    return item.bind(lambda c: item.many().fmap(_prepend(c)))


digit: Parser[Chars, str] = in_range("0", "9").label("expected digit")
hex_digit: Parser[Chars, str] = (
    digit | in_range("a", "f") | in_range("A", "F")
).label("expected hex digit")

space = char(" ")
tab = char("\t")
newline = char("\n")
cr = char("\r")
crlf: Parser[Chars, str] = literal("\r\n")
end_of_line: Parser[Chars, str] = newline | crlf
spaces: Parser[Chars, None] = one_of(" \t\r\n").many().ignore()


def _join_int(v: Tuple[Optional[str], list]) -> str:
    sign, digits = v
    return (sign or "") + "".join(digits)


def _join_exp(v: Tuple[Tuple[str, Optional[str]], list]) -> str:
    (e, sign), digits = v
    return e + (sign or "") + "".join(digits)


integer: Parser[Chars, str] = (
    char("-").maybe() + some(digit)
).fmap(_join_int)

_fraction: Parser[Chars, str] = (char(".") + some(digit)).fmap(
    lambda v: v[0] + "".join(v[1])
)
_exponent: Parser[Chars, str] = (
    one_of("eE") + one_of("+-").maybe() + some(digit)
).fmap(_join_exp)

number: Parser[Chars, float] = (
    integer + maybe(_fraction) + maybe(_exponent)
).fmap(
    lambda v: float(v[0][0] + (v[0][1] or "") + (v[1] or ""))
)


def get_loc(stream: Chars, pos: int) -> Loc:
    """
    Computes zero-based line and column of ``pos`` in ``stream``.

    >>> from pcomb.text import get_loc

    >>> get_loc("ab\\ncd", 4)
    Loc(pos=4, line=1, col=1)

    :param stream: Parsed string
    :param pos: Position in the string
    """

    if type(stream) is not str:
        stream = "".join(stream)
    line = stream.count("\n", 0, pos)
    col = pos - stream.rfind("\n", 0, pos) - 1
    return Loc(pos, line, col)


def _fmt_loc(loc: Loc) -> str:
    return "{}:{}".format(loc.line + 1, loc.col + 1)


def parse(parser: Parser[Chars, A], stream: str) -> ParseResult[A, Chars]:
    """
    Wrapper around :meth:`pcomb.Parser.parse` that reports errors with line
    and column.

    >>> from pcomb.text import char, parse

    >>> parser = char("a") + char("\\n") + char("b")

    >>> parse(parser, "a\\nc").unwrap()
    Traceback (most recent call last):
      ...
    pcomb.types.ParseError: at 2:1: expected 'b'

    :param parser: Parser to run
    :param stream: String to parse
    """

    return _parse(parser, stream, get_loc=get_loc, fmt_loc=_fmt_loc)
