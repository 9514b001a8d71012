from typing import Callable, List, Optional, Tuple, TypeVar, Union

from .error import Alternatives, ErrorKind, Reason
from .parser import ParseFn, ParseObj
from .result import Error, Ok, Result
from .types import Either, Left, Right

S = TypeVar("S")
A = TypeVar("A")
B = TypeVar("B")
C = TypeVar("C")

MergeFn = Callable[[A, B], C]


def fmap(parse_fn: ParseFn[S, A], fn: Callable[[A], B]) -> ParseFn[S, B]:
    def fmap(stream: S, pos: int) -> Result[B]:
        return parse_fn(stream, pos).fmap(fn)

    return fmap


def ignore(parse_fn: ParseFn[S, A]) -> ParseFn[S, None]:
    return fmap(parse_fn, lambda _: None)


def bind(
        parse_fn: ParseFn[S, A],
        fn: Callable[[A], ParseObj[S, B]]) -> ParseFn[S, B]:
    def bind(stream: S, pos: int) -> Result[B]:
        ra = parse_fn(stream, pos)
        if type(ra) is Error:
            return ra
        return fn(ra.value).parse_fn(stream, ra.pos)

    return bind


def _seq(
        parse_fn: ParseFn[S, A], second_fn: ParseFn[S, B],
        merge: MergeFn[A, B, C]) -> ParseFn[S, C]:
    def seq(stream: S, pos: int) -> Result[C]:
        ra = parse_fn(stream, pos)
        if type(ra) is Error:
            return ra
        va = ra.value
        return second_fn(stream, ra.pos).fmap(lambda vb: merge(va, vb))

    return seq


def seq(
        parse_fn: ParseFn[S, A],
        second_fn: ParseFn[S, B]) -> ParseFn[S, Tuple[A, B]]:
    return _seq(parse_fn, second_fn, lambda l, r: (l, r))


def seql(parse_fn: ParseFn[S, A], second_fn: ParseFn[S, B]) -> ParseFn[S, A]:
    return _seq(parse_fn, second_fn, lambda l, _: l)


def seqr(parse_fn: ParseFn[S, A], second_fn: ParseFn[S, B]) -> ParseFn[S, B]:
    return _seq(parse_fn, second_fn, lambda _, r: r)


def seqn(
        parse_fn: ParseFn[S, A],
        second_fn: ParseFn[S, B]) -> ParseFn[S, None]:
    return _seq(parse_fn, second_fn, lambda _, __: None)


def alt(
        parse_fn: ParseFn[S, A],
        second_fn: ParseFn[S, B]) -> ParseFn[S, Union[A, B]]:
    def alt(stream: S, pos: int) -> Result[Union[A, B]]:
        ra = parse_fn(stream, pos)
        if type(ra) is Ok:
            return ra
        rb = second_fn(stream, pos)
        if type(rb) is Ok:
            return rb
        return Error(Alternatives(ra.info, rb.info, pos))

    return alt


def either(
        parse_fn: ParseFn[S, A],
        second_fn: ParseFn[S, B]) -> ParseFn[S, Either[A, B]]:
    return alt(fmap(parse_fn, Left), fmap(second_fn, Right))


def altl(
        parse_fn: ParseFn[S, A],
        second_fn: ParseFn[S, B]) -> ParseFn[S, Optional[A]]:
    return alt(parse_fn, ignore(second_fn))


def altr(
        parse_fn: ParseFn[S, A],
        second_fn: ParseFn[S, B]) -> ParseFn[S, Optional[B]]:
    return alt(ignore(parse_fn), second_fn)


def altn(
        parse_fn: ParseFn[S, A],
        second_fn: ParseFn[S, B]) -> ParseFn[S, None]:
    return alt(ignore(parse_fn), ignore(second_fn))


def repeat(
        parse_fn: ParseFn[S, A], min_count: int,
        max_count: Optional[int]) -> ParseFn[S, List[A]]:
    if min_count < 0:
        raise ValueError("min_count must be non-negative")
    if max_count is not None and max_count < min_count:
        raise ValueError("max_count must not be less than min_count")

    def repeat(stream: S, pos: int) -> Result[List[A]]:
        value: List[A] = []
        while max_count is None or len(value) < max_count:
            r = parse_fn(stream, pos)
            if type(r) is Error:
                if len(value) < min_count:
                    return r
                break
            value.append(r.value)
            if r.pos == pos and len(value) >= min_count:
                break
            pos = r.pos
        return Ok(value, pos)

    return repeat


def maybe(parse_fn: ParseFn[S, A]) -> ParseFn[S, Optional[A]]:
    return fmap(repeat(parse_fn, 0, 1), lambda v: v[0] if v else None)


def label(parse_fn: ParseFn[S, A], reason: str) -> ParseFn[S, A]:
    def label(stream: S, pos: int) -> Result[A]:
        r = parse_fn(stream, pos)
        if type(r) is Ok or r.pos != pos:
            return r
        kind = r.info.kind if type(r.info) is Reason else ErrorKind.UNEXPECTED
        return Error(Reason(kind, reason, pos))

    return label
