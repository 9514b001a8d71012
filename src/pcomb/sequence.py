"""
Terminal parsers for arbitrary sequences.
"""

from typing import Any, Callable, Optional, Sequence, Sized, TypeVar

from .core import sequence
from .parser import FnParser, Parser

__all__ = ("any_item", "eof", "in_range", "literal", "satisfy", "sym")

A = TypeVar("A")
L = TypeVar("L", bound=Sequence[Any])


def any_item() -> Parser[Sequence[A], A]:
    """
    Parses any single element and returns it. Fails only at the end of the
    input.

    >>> from pcomb.sequence import any_item

    >>> any_item().parse("x").unwrap()
    'x'
    >>> any_item().parse("").unwrap()
    Traceback (most recent call last):
      ...
    pcomb.types.ParseError: at 0: unexpected end of input
    """

    return FnParser(sequence.any_item())


def eof() -> Parser[Sized, None]:
    """
    Succeeds at the end of the input.

    >>> from pcomb.sequence import eof

    >>> eof().parse("").unwrap()
    >>> eof().parse("a").unwrap()
    Traceback (most recent call last):
      ...
    pcomb.types.ParseError: at 0: expected end of input
    """

    return FnParser(sequence.eof())


def satisfy(
        test: Callable[[A], bool],
        label: Optional[str] = None) -> Parser[Sequence[A], A]:
    """
    Succeeds for sequence element for which ``test`` returns ``True`` and
    returns that element.

    >>> from pcomb.sequence import satisfy

    >>> parser = satisfy(lambda c: c.isalpha())

    >>> parser.parse("a").unwrap()
    'a'
    >>> parser.parse("0").unwrap()
    Traceback (most recent call last):
      ...
    pcomb.types.ParseError: at 0: unexpected input

    :param test: Predicate for sequence elements
    :param label: Description of the expected element
    """

    return FnParser(sequence.satisfy(test, label))


def sym(s: A, label: Optional[str] = None) -> Parser[Sequence[A], A]:
    """
    Parses ``s`` and returns the parsed element.

    >>> from pcomb.sequence import sym

    >>> sym("a").parse("a").unwrap()
    'a'
    >>> sym("a").parse("0").unwrap()
    Traceback (most recent call last):
      ...
    pcomb.types.ParseError: at 0: expected 'a'

    :param s: Value to parse
    :param label: Label to use instead of ``repr(s)``
    """

    return FnParser(sequence.sym(s, label))


def literal(s: L) -> Parser[Sequence[Any], L]:
    """
    Parses the elements of ``s`` in order and returns ``s``.

    >>> from pcomb.sequence import literal

    >>> parser = literal("ab")

    >>> parser.parse("ab").unwrap()
    'ab'
    >>> parser.parse("ac").unwrap()
    Traceback (most recent call last):
      ...
    pcomb.types.ParseError: at 0: expected 'ab'

    :param s: Non-empty sequence to parse
    :raise: :exc:`ValueError` if ``s`` is empty
    """

    return FnParser(sequence.literal(s))


def in_range(lo: A, hi: A) -> Parser[Sequence[A], A]:
    """
    Parses an element that is not less than ``lo`` and not greater than
    ``hi``.

    >>> from pcomb.sequence import in_range

    >>> in_range("0", "9").parse("5").unwrap()
    '5'
    >>> in_range("0", "9").parse("a").unwrap()
    Traceback (most recent call last):
      ...
    pcomb.types.ParseError: at 0: expected '0'..'9'

    :param lo: Lower bound
    :param hi: Upper bound
    """

    return FnParser(sequence.in_range(lo, hi))
