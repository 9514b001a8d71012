"""
Parser combinators.
"""

import logging
import threading
from typing import Callable, List, Optional, Tuple, TypeVar

from .core import combinators
from .core.error import ErrorKind, Reason
from .core.parser import ParseFn, ParseObj
from .core.result import Error, Ok, Result
from .core.types import Either, Loc
from .types import ParseResult, ResultWrapper

log = logging.getLogger(__name__)

S = TypeVar("S")
S_contra = TypeVar("S_contra", contravariant=True)
A = TypeVar("A")
A_co = TypeVar("A_co", covariant=True)
B = TypeVar("B")
C = TypeVar("C")


def _get_loc(stream: object, pos: int) -> Loc:
    return Loc(pos, 0, 0)


def _fmt_loc(loc: Loc) -> str:
    return repr(loc.pos)


class Parser(ParseObj[S_contra, A_co]):
    def parse(
            self, stream: S_contra, *,
            get_loc: Callable[[S_contra, int], Loc] = _get_loc,
            fmt_loc: Callable[[Loc], str] = _fmt_loc
    ) -> ParseResult[A_co, S_contra]:
        """
        Parses input. The parser has to consume the whole input to succeed.

        >>> from pcomb.sequence import literal

        >>> literal("foo").parse("foo").unwrap()
        'foo'
        >>> literal("foo").parse("foot").unwrap()
        Traceback (most recent call last):
          ...
        pcomb.types.ParseError: at 3: expected end of input

        :param stream: Input to parse
        :param get_loc: Function that constructs ``Loc`` from a stream and
            position in the stream
        :param fmt_loc: Function that converts ``Loc`` to string
        """

        return parse(self, stream, get_loc=get_loc, fmt_loc=fmt_loc)

    def fmap(self, fn: Callable[[A_co], B]) -> "Parser[S_contra, B]":
        """
        Transforms the result of the parser by applying ``fn`` to it.

        >>> from pcomb.sequence import satisfy

        >>> satisfy(str.isdigit).fmap(lambda x: int(x) + 1).parse("0").unwrap()
        1

        :param fn: Function to produce new value from the result of the parser
        """

        return fmap(self, fn)

    def bind(
            self, fn: Callable[[A_co], ParseObj[S_contra, B]]
    ) -> "Parser[S_contra, B]":
        """
        Calls ``fn`` with the result of the parser and then applies the
        returned parser from where this parser stopped.

        >>> from pcomb.sequence import any_item, sym

        >>> parser = any_item().bind(lambda x: sym(x))

        >>> parser.parse("aa").unwrap()
        'a'
        >>> parser.parse("ab").unwrap()
        Traceback (most recent call last):
          ...
        pcomb.types.ParseError: at 1: expected 'a'

        :param fn: Function that returns a new parser using the result of this
            parser
        """

        return bind(self, fn)

    def ignore(self) -> "Parser[S_contra, None]":
        """
        Applies the parser and replaces its result with ``None``.

        >>> from pcomb.sequence import literal

        >>> literal("ab").ignore().parse("ab").unwrap()

        """

        return ignore(self)

    def seql(self, other: ParseObj[S_contra, B]) -> "Parser[S_contra, A_co]":
        """
        Alias for :meth:`Parser.__lshift__`

        :param other: Second parser
        """

        return seql(self, other)

    def seqr(self, other: ParseObj[S_contra, B]) -> "Parser[S_contra, B]":
        """
        Alias for :meth:`Parser.__rshift__`

        :param other: Second parser
        """

        return seqr(self, other)

    def seqn(self, other: ParseObj[S_contra, B]) -> "Parser[S_contra, None]":
        """
        Applies two parsers sequentially and drops both results.

        >>> from pcomb.sequence import sym

        >>> sym("a").seqn(sym("b")).parse("ab").unwrap()

        :param other: Second parser
        """

        return seqn(self, other)

    def __lshift__(
            self, other: ParseObj[S_contra, B]) -> "Parser[S_contra, A_co]":
        """
        Applies two parsers sequentially and returns the result of the first
        parser.

        >>> from pcomb.sequence import sym

        >>> (sym("a") << sym("b")).parse("ab").unwrap()
        'a'

        :param other: Second parser
        """

        return seql(self, other)

    def __rshift__(
            self, other: ParseObj[S_contra, B]) -> "Parser[S_contra, B]":
        """
        Applies two parsers sequentially and returns the result of the second
        parser.

        >>> from pcomb.sequence import sym

        >>> (sym("a") >> sym("b")).parse("ab").unwrap()
        'b'

        :param other: Second parser
        """

        return seqr(self, other)

    def __add__(
            self, other: ParseObj[S_contra, B]
    ) -> "Parser[S_contra, Tuple[A_co, B]]":
        """
        Applies two parsers sequentially and returns a tuple of their results.

        >>> from pcomb.sequence import sym

        >>> parser = sym("a") + sym("b")

        >>> parser.parse("ab").unwrap()
        ('a', 'b')
        >>> parser.parse("ac").unwrap()
        Traceback (most recent call last):
          ...
        pcomb.types.ParseError: at 1: expected 'b'

        :param other: Second parser
        """

        return seq(self, other)

    def __or__(
            self, other: ParseObj[S_contra, A_co]) -> "Parser[S_contra, A_co]":
        """
        Applies the first parser and returns its result if it succeeds.
        Otherwise applies the second parser at the same position. If both
        fail, the errors of both are reported.

        >>> from pcomb.sequence import sym

        >>> parser = sym("a") | sym("b")

        >>> parser.parse("a").unwrap()
        'a'
        >>> parser.parse("b").unwrap()
        'b'
        >>> parser.parse("c").unwrap()
        Traceback (most recent call last):
          ...
        pcomb.types.ParseError: at 0: expected 'a', at 0: expected 'b'

        :param other: Second parser
        """

        return alt(self, other)

    def either(
            self, other: ParseObj[S_contra, B]
    ) -> "Parser[S_contra, Either[A_co, B]]":
        """
        Like :meth:`Parser.__or__`, but tags the result with
        :class:`~pcomb.types.Left` or :class:`~pcomb.types.Right` depending on
        which parser succeeded.

        >>> from pcomb.sequence import literal, sym

        >>> parser = sym("a").either(literal("b").fmap(len))

        >>> parser.parse("a").unwrap()
        Left(value='a')
        >>> parser.parse("b").unwrap()
        Right(value=1)

        :param other: Second parser
        """

        return either(self, other)

    def altl(
            self, other: ParseObj[S_contra, B]
    ) -> "Parser[S_contra, Optional[A_co]]":
        """
        Like :meth:`Parser.__or__`, but drops the result of the second parser.

        :param other: Second parser
        """

        return altl(self, other)

    def altr(
            self,
            other: ParseObj[S_contra, B]) -> "Parser[S_contra, Optional[B]]":
        """
        Like :meth:`Parser.__or__`, but drops the result of the first parser.

        :param other: Second parser
        """

        return altr(self, other)

    def altn(self, other: ParseObj[S_contra, B]) -> "Parser[S_contra, None]":
        """
        Like :meth:`Parser.__or__`, but drops the results of both parsers.

        :param other: Second parser
        """

        return altn(self, other)

    def repeat(
            self, min_count: int = 0, max_count: Optional[int] = None
    ) -> "Parser[S_contra, List[A_co]]":
        """
        Applies the parser repeatedly, at most ``max_count`` times, until it
        fails. Succeeds with the list of parsed values if the parser was
        applied at least ``min_count`` times. Otherwise returns the error that
        stopped the repetition.

        >>> from pcomb.sequence import sym

        >>> parser = sym("a").repeat(2, 3)

        >>> parser.parse("aa").unwrap()
        ['a', 'a']
        >>> parser.parse("a").unwrap()
        Traceback (most recent call last):
          ...
        pcomb.types.ParseError: at 1: expected 'a'
        >>> parser.parse("aaaa").unwrap()
        Traceback (most recent call last):
          ...
        pcomb.types.ParseError: at 3: expected end of input

        :param min_count: Minimal number of repetitions
        :param max_count: Maximal number of repetitions, ``None`` for no limit
        """

        return repeat(self, min_count, max_count)

    def many(self) -> "Parser[S_contra, List[A_co]]":
        """
        Applies the parser zero or more times, until it fails. Never fails.

        >>> from pcomb.sequence import sym

        >>> parser = (sym("a") << sym("b")).many()

        >>> parser.parse("abab").unwrap()
        ['a', 'a']
        >>> parser.parse("").unwrap()
        []
        """

        return many(self)

    def some(self) -> "Parser[S_contra, List[A_co]]":
        """
        Applies the parser one or more times, until it fails.

        >>> from pcomb.sequence import sym

        >>> sym("a").some().parse("aaa").unwrap()
        ['a', 'a', 'a']
        >>> sym("a").some().parse("").unwrap()
        Traceback (most recent call last):
          ...
        pcomb.types.ParseError: at 0: expected 'a'
        """

        return some(self)

    def times(self, n: int) -> "Parser[S_contra, List[A_co]]":
        """
        Applies the parser exactly ``n`` times.

        >>> from pcomb.sequence import sym

        >>> sym("a").times(2).parse("aa").unwrap()
        ['a', 'a']

        :param n: Number of repetitions
        """

        return times(self, n)

    def maybe(self) -> "Parser[S_contra, Optional[A_co]]":
        """
        Applies the parser and returns ``None`` if it failed. Otherwise returns
        the result of the parser.

        >>> from pcomb.sequence import sym

        >>> parser = sym("-").maybe()

        >>> parser.parse("-").unwrap()
        '-'
        >>> parser.parse("").unwrap()
        """

        return maybe(self)

    def label(self, reason: str) -> "Parser[S_contra, A_co]":
        """
        Applies the parser, and replaces its error with ``reason`` if it
        failed at the position where it started.

        >>> from pcomb.sequence import sym

        >>> parser = (sym("a") + sym("b")).label("expected ab")

        >>> parser.parse("bb").unwrap()
        Traceback (most recent call last):
          ...
        pcomb.types.ParseError: at 0: expected ab
        >>> parser.parse("aa").unwrap()
        Traceback (most recent call last):
          ...
        pcomb.types.ParseError: at 1: expected 'b'

        :param reason: Description of the expected input
        """

        return label(self, reason)

    def sep_by(
            self, sep: ParseObj[S_contra, B]
    ) -> "Parser[S_contra, List[A_co]]":
        """
        Applies the parser multiple times, with ``sep`` in between. Returns a
        list of the values parsed by the parser.

        >>> from pcomb.sequence import sym

        >>> parser = sym("a").sep_by(sym(","))

        >>> parser.parse("a,a,a").unwrap()
        ['a', 'a', 'a']

        :param sep: Separators parser
        """

        return sep_by(self, sep)

    def between(
            self, open: ParseObj[S_contra, B],
            close: ParseObj[S_contra, C]) -> "Parser[S_contra, A_co]":
        """
        Applies ``open``, then the parser, then ``close``, and returns the
        value parsed by the parser.

        >>> from pcomb.sequence import sym

        >>> parser = sym("a").between(sym("("), sym(")"))

        >>> parser.parse("(a)").unwrap()
        'a'

        :param open: 'Opening bracket' parser
        :param close: 'Closing bracket' parser
        """

        return between(open, close, self)

    def chainl1(
            self, op: ParseObj[S_contra, Callable[[A_co, A_co], A_co]]
    ) -> "Parser[S_contra, A_co]":
        """
        Applies the parser one or more times, with ``op`` in between. Returns a
        value of left-associative application of functions returned by ``op``
        to the values parsed by the parser.

        >>> from pcomb.sequence import sym

        >>> parser = sym("a").chainl1(
        ...     sym("+").fmap(lambda _: "({}+{})".format)
        ... )

        >>> parser.parse("a+a+a").unwrap()
        '((a+a)+a)'

        :param op: Operator parser
        """

        return chainl1(self, op)

    def chainr1(
            self, op: ParseObj[S_contra, Callable[[A_co, A_co], A_co]]
    ) -> "Parser[S_contra, A_co]":
        """
        Applies the parser one or more times, with ``op`` in between. Returns a
        value of right-associative application of functions returned by ``op``
        to the values parsed by the parser.

        >>> from pcomb.sequence import sym

        >>> parser = sym("a").chainr1(
        ...     sym("^").fmap(lambda _: "({}^{})".format)
        ... )

        >>> parser.parse("a^a^a").unwrap()
        '(a^(a^a))'

        :param op: Operator parser
        """

        return chainr1(self, op)


class FnParser(Parser[S_contra, A_co]):
    def __init__(self, fn: ParseFn[S_contra, A_co]):
        self._fn = fn

    def to_fn(self) -> ParseFn[S_contra, A_co]:
        return self._fn

    def parse_fn(self, stream: S_contra, pos: int) -> Result[A_co]:
        return self._fn(stream, pos)


class Delay(Parser[S_contra, A_co]):
    """
    A subclass of :class:`Parser` to use as a forward declaration.

    >>> from pcomb import Delay
    >>> from pcomb.sequence import sym

    >>> parser = Delay()
    >>> parser.define((sym("a") + parser).maybe())

    >>> parser.parse("aaa").unwrap()
    ('a', ('a', ('a', None)))
    """

    def __init__(self) -> None:
        def _fn(stream: S_contra, pos: int) -> Result[A_co]:
            raise RuntimeError("Delayed parser was not defined")

        self._defined = False
        self._fn: ParseFn[S_contra, A_co] = _fn

    def define(self, parser: ParseObj[S_contra, A_co]) -> None:
        """
        Define the parser.

        >>> from pcomb import Delay
        >>> from pcomb.sequence import sym

        >>> parser = Delay()
        >>> parser.parse("a")
        Traceback (most recent call last):
          ...
        RuntimeError: Delayed parser was not defined

        >>> parser.define(sym("a"))
        >>> parser.parse("a").unwrap()
        'a'

        :param parser: Parser definition
        """

        if self._defined:
            raise RuntimeError("Delayed parser was already defined")
        self._defined = True
        self._fn = parser.to_fn()

    def parse_fn(self, stream: S_contra, pos: int) -> Result[A_co]:
        return self._fn(stream, pos)

    def to_fn(self) -> ParseFn[S_contra, A_co]:
        if self._defined:
            return self._fn
        return super().to_fn()


class Lazy(Parser[S_contra, A_co]):
    """
    Parser that is built by ``producer`` on its first use. See
    :func:`delay`.

    :param producer: Function that returns the parser
    """

    def __init__(self, producer: Callable[[], ParseObj[S_contra, A_co]]):
        self._producer = producer
        self._fn: Optional[ParseFn[S_contra, A_co]] = None
        self._lock = threading.Lock()

    def _force(self) -> ParseFn[S_contra, A_co]:
        fn = self._fn
        if fn is None:
            with self._lock:
                fn = self._fn
                if fn is None:
                    log.debug("building delayed parser %r", self._producer)
                    fn = self._fn = self._producer().to_fn()
        return fn

    def parse_fn(self, stream: S_contra, pos: int) -> Result[A_co]:
        return self._force()(stream, pos)


def delay(producer: Callable[[], ParseObj[S, A]]) -> Parser[S, A]:
    """
    Returns a parser that calls ``producer`` once, when it is used for the
    first time, and then delegates to the parser ``producer`` returned. This
    allows parsers to refer to themselves.

    >>> from pcomb import delay
    >>> from pcomb.sequence import sym

    >>> parens = delay(lambda: (sym("(") >> parens.maybe() << sym(")")))

    >>> parens.parse("(())").ok
    True
    >>> parens.parse("(()").unwrap()
    Traceback (most recent call last):
      ...
    pcomb.types.ParseError: at 3: expected ')'

    :param producer: Function that returns the parser
    """

    return Lazy(producer)


def parse(
        parser: ParseObj[S, A], stream: S, *,
        get_loc: Callable[[S, int], Loc] = _get_loc,
        fmt_loc: Callable[[Loc], str] = _fmt_loc) -> ParseResult[A, S]:
    """
    :meth:`Parser.parse` as a function.

    :param parser: Parser to run
    :param stream: Input to parse
    :param get_loc: Function that constructs ``Loc`` from a stream and
        position in the stream
    :param fmt_loc: Function that converts ``Loc`` to string
    """

    result: Result[A] = parser.parse_fn(stream, 0)
    if type(result) is Ok and result.pos != len(stream):  # type: ignore
        result = Error(
            Reason(
                ErrorKind.PARTIAL_MATCH, "expected end of input", result.pos
            )
        )
    if type(result) is Error:
        log.debug("parse failed: %r", result.info)
    return ResultWrapper(result, stream, get_loc, fmt_loc)


def fmap(parser: ParseObj[S, A], fn: Callable[[A], B]) -> Parser[S, B]:
    """
    :meth:`Parser.fmap` as a function.

    :param parser: Parser
    :param fn: Function to produce value from the result of ``parser``
    """

    return FnParser(combinators.fmap(parser.to_fn(), fn))


def bind(
        parser: ParseObj[S, A],
        fn: Callable[[A], ParseObj[S, B]]) -> Parser[S, B]:
    """
    :meth:`Parser.bind` as a function.

    :param parser: Parser
    :param fn: Function that returns a new parser using the result of the
        parser
    """

    return FnParser(combinators.bind(parser.to_fn(), fn))


def ignore(parser: ParseObj[S, A]) -> Parser[S, None]:
    """
    :meth:`Parser.ignore` as a function.

    :param parser: Parser
    """

    return FnParser(combinators.ignore(parser.to_fn()))


def seq(
        parser: ParseObj[S, A],
        second: ParseObj[S, B]) -> Parser[S, Tuple[A, B]]:
    """
    :meth:`Parser.__add__` as a function.

    :param parser: First parser
    :param second: Second parser
    """

    return FnParser(combinators.seq(parser.to_fn(), second.to_fn()))


def seql(parser: ParseObj[S, A], second: ParseObj[S, B]) -> Parser[S, A]:
    """
    :meth:`Parser.seql` as a function.

    :param parser: First parser
    :param second: Second parser
    """

    return FnParser(combinators.seql(parser.to_fn(), second.to_fn()))


def seqr(parser: ParseObj[S, A], second: ParseObj[S, B]) -> Parser[S, B]:
    """
    :meth:`Parser.seqr` as a function.

    :param parser: First parser
    :param second: Second parser
    """

    return FnParser(combinators.seqr(parser.to_fn(), second.to_fn()))


def seqn(parser: ParseObj[S, A], second: ParseObj[S, B]) -> Parser[S, None]:
    """
    :meth:`Parser.seqn` as a function.

    :param parser: First parser
    :param second: Second parser
    """

    return FnParser(combinators.seqn(parser.to_fn(), second.to_fn()))


def alt(parser: ParseObj[S, A], second: ParseObj[S, A]) -> Parser[S, A]:
    """
    :meth:`Parser.__or__` as a function.

    :param parser: First parser
    :param second: Second parser
    """

    return FnParser(combinators.alt(parser.to_fn(), second.to_fn()))


def either(
        parser: ParseObj[S, A],
        second: ParseObj[S, B]) -> Parser[S, Either[A, B]]:
    """
    :meth:`Parser.either` as a function.

    :param parser: First parser
    :param second: Second parser
    """

    return FnParser(combinators.either(parser.to_fn(), second.to_fn()))


def altl(
        parser: ParseObj[S, A],
        second: ParseObj[S, B]) -> Parser[S, Optional[A]]:
    """
    :meth:`Parser.altl` as a function.

    :param parser: First parser
    :param second: Second parser
    """

    return FnParser(combinators.altl(parser.to_fn(), second.to_fn()))


def altr(
        parser: ParseObj[S, A],
        second: ParseObj[S, B]) -> Parser[S, Optional[B]]:
    """
    :meth:`Parser.altr` as a function.

    :param parser: First parser
    :param second: Second parser
    """

    return FnParser(combinators.altr(parser.to_fn(), second.to_fn()))


def altn(parser: ParseObj[S, A], second: ParseObj[S, B]) -> Parser[S, None]:
    """
    :meth:`Parser.altn` as a function.

    :param parser: First parser
    :param second: Second parser
    """

    return FnParser(combinators.altn(parser.to_fn(), second.to_fn()))


def repeat(
        parser: ParseObj[S, A], min_count: int = 0,
        max_count: Optional[int] = None) -> Parser[S, List[A]]:
    """
    :meth:`Parser.repeat` as a function.

    :param parser: Parser
    :param min_count: Minimal number of repetitions
    :param max_count: Maximal number of repetitions, ``None`` for no limit
    """

    return FnParser(
        combinators.repeat(parser.to_fn(), min_count, max_count)
    )


def many(parser: ParseObj[S, A]) -> Parser[S, List[A]]:
    """
    :meth:`Parser.many` as a function.

    :param parser: Parser
    """

    return repeat(parser, 0, None)


def some(parser: ParseObj[S, A]) -> Parser[S, List[A]]:
    """
    :meth:`Parser.some` as a function.

    :param parser: Parser
    """

    return repeat(parser, 1, None)


def times(parser: ParseObj[S, A], n: int) -> Parser[S, List[A]]:
    """
    :meth:`Parser.times` as a function.

    :param parser: Parser
    :param n: Number of repetitions
    """

    return repeat(parser, n, n)


def maybe(parser: ParseObj[S, A]) -> Parser[S, Optional[A]]:
    """
    :meth:`Parser.maybe` as a function.

    :param parser: Parser
    """

    return FnParser(combinators.maybe(parser.to_fn()))


def label(parser: ParseObj[S, A], reason: str) -> Parser[S, A]:
    """
    :meth:`Parser.label` as a function.

    :param parser: Parser
    :param reason: Description of the expected input
    """

    return FnParser(combinators.label(parser.to_fn(), reason))


def sep_by(parser: ParseObj[S, A], sep: ParseObj[S, B]) -> Parser[S, List[A]]:
    """
    :meth:`Parser.sep_by` as a function.

    :param parser: Items parser
    :param sep: Separators parser
    """

    return maybe(seq(parser, many(seqr(sep, parser)))).fmap(
        lambda v: [] if v is None else [v[0]] + v[1]
    )


def between(
        open: ParseObj[S, B], close: ParseObj[S, C],
        parser: ParseObj[S, A]) -> Parser[S, A]:
    """
    :meth:`Parser.between` as a function.

    :param open: 'Opening bracket' parser
    :param close: 'Closing bracket' parser
    :param parser: Value parser
    """

    return seqr(open, seql(parser, close))


def chainl1(
        arg: ParseObj[S, A],
        op: ParseObj[S, Callable[[A, A], A]]) -> Parser[S, A]:
    """
    :meth:`Parser.chainl1` as a function.

    :param arg: Argument parser
    :param op: Operator parser
    """

    def reducer(v: Tuple[A, List[Tuple[Callable[[A, A], A], A]]]) -> A:
        res, tail = v
        for op, arg in tail:
            res = op(res, arg)
        return res

    return fmap(seq(arg, many(seq(op, arg))), reducer)


def chainr1(
        arg: ParseObj[S, A],
        op: ParseObj[S, Callable[[A, A], A]]) -> Parser[S, A]:
    """
    :meth:`Parser.chainr1` as a function.

    :param arg: Argument parser
    :param op: Operator parser
    """

    def reducer(v: Tuple[A, List[Tuple[Callable[[A, A], A], A]]]) -> A:
        res, tail = v
        rassoc: List[Tuple[A, Callable[[A, A], A]]] = []
        for op, arg in tail:
            rassoc.append((res, op))
            res = arg
        for arg, op in reversed(rassoc):
            res = op(arg, res)
        return res

    return fmap(seq(arg, many(seq(op, arg))), reducer)
