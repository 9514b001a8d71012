"""
Primitive input-agnostic parsers.
"""

from typing import TypeVar

from .core import primitive
from .parser import FnParser, Parser

__all__ = ("Pure", "PureFn", "fail", "none")

S_contra = TypeVar("S_contra", contravariant=True)
A_co = TypeVar("A_co", covariant=True)


class Pure(primitive.Pure[S_contra, A_co], Parser[S_contra, A_co]):
    """
    Parser that always succeeds, consumes no input, and returns constant value.

    >>> from pcomb.primitive import Pure

    >>> Pure(0).parse("").unwrap()
    0

    :param x: Value to return
    """


class PureFn(primitive.PureFn[S_contra, A_co], Parser[S_contra, A_co]):
    """
    Parser that always succeeds, consumes no input, and returns the result of
    function.

    >>> from pcomb.primitive import PureFn

    >>> PureFn(lambda: list()).parse("").unwrap()
    []

    :param fn: Function that produces a value to return
    """


def fail(reason: str) -> Parser[object, None]:
    """
    Parser that always fails and consumes no input.

    >>> from pcomb.primitive import fail

    >>> fail("a").parse("").unwrap()
    Traceback (most recent call last):
      ...
    pcomb.types.ParseError: at 0: a

    :param reason: Error description
    """

    return FnParser(primitive.fail(reason))


def none() -> Parser[object, None]:
    """
    Parser that always fails. Identity for alternation.

    >>> from pcomb.primitive import none
    >>> from pcomb.sequence import sym

    >>> (none() | sym("a")).parse("a").unwrap()
    'a'
    """

    return fail("unexpected input")
