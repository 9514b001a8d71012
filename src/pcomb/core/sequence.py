from typing import Any, Callable, Optional, Sequence, Sized, TypeVar

from .error import ErrorKind, Reason
from .parser import ParseFn
from .result import Error, Ok, Result

T = TypeVar("T")
L = TypeVar("L", bound=Sequence[Any])

UNEXPECTED_END = "unexpected end of input"


def any_item() -> ParseFn[Sequence[T], T]:
    def any_item(stream: Sequence[T], pos: int) -> Result[T]:
        if pos < len(stream):
            return Ok(stream[pos], pos + 1)
        return Error(Reason(ErrorKind.UNEXPECTED_END, UNEXPECTED_END, pos))

    return any_item


def eof() -> ParseFn[Sized, None]:
    def eof(stream: Sized, pos: int) -> Result[None]:
        if pos == len(stream):
            return Ok(None, pos)
        return Error(
            Reason(ErrorKind.PARTIAL_MATCH, "expected end of input", pos)
        )

    return eof


def satisfy(
        test: Callable[[T], bool],
        label: Optional[str]) -> ParseFn[Sequence[T], T]:
    reason = "unexpected input" if label is None else "expected " + label

    def satisfy(stream: Sequence[T], pos: int) -> Result[T]:
        if pos < len(stream):
            t = stream[pos]
            if test(t):
                return Ok(t, pos + 1)
            return Error(Reason(ErrorKind.PREDICATE_MISMATCH, reason, pos))
        return Error(Reason(ErrorKind.UNEXPECTED_END, UNEXPECTED_END, pos))

    return satisfy


def sym(s: T, label: Optional[str]) -> ParseFn[Sequence[T], T]:
    reason = "expected " + (repr(s) if label is None else label)

    def sym(stream: Sequence[T], pos: int) -> Result[T]:
        if pos < len(stream):
            t = stream[pos]
            if t == s:
                return Ok(t, pos + 1)
            return Error(Reason(ErrorKind.LITERAL_MISMATCH, reason, pos))
        return Error(Reason(ErrorKind.UNEXPECTED_END, reason, pos))

    return sym


def literal(s: L) -> ParseFn[Sequence[Any], L]:
    ls = len(s)
    if ls == 0:
        raise ValueError("Expected non-empty value")
    reason = "expected {!r}".format(s)
    is_str = type(s) is str

    def literal(stream: Sequence[Any], pos: int) -> Result[L]:
        if is_str and type(stream) is str and stream.startswith(s, pos):
            return Ok(s, pos + ls)
        end = min(pos + ls, len(stream))
        for i, cur in enumerate(range(pos, end)):
            if stream[cur] != s[i]:
                return Error(
                    Reason(ErrorKind.LITERAL_MISMATCH, reason, pos)
                )
        if end - pos < ls:
            return Error(Reason(ErrorKind.UNEXPECTED_END, reason, pos))
        return Ok(s, pos + ls)

    return literal


def in_range(lo: T, hi: T) -> ParseFn[Sequence[T], T]:
    reason = "expected {!r}..{!r}".format(lo, hi)

    def in_range(stream: Sequence[T], pos: int) -> Result[T]:
        if pos < len(stream):
            t = stream[pos]
            if lo <= t <= hi:  # type: ignore[operator]
                return Ok(t, pos + 1)
            return Error(Reason(ErrorKind.RANGE_MISMATCH, reason, pos))
        return Error(Reason(ErrorKind.UNEXPECTED_END, reason, pos))

    return in_range
