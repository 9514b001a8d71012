from typing import Callable, TypeVar

from .error import ErrorKind, Reason
from .parser import ParseFn, ParseObj
from .result import Error, Ok, Result

S_contra = TypeVar("S_contra", contravariant=True)
A_co = TypeVar("A_co", covariant=True)


class Pure(ParseObj[S_contra, A_co]):
    def __init__(self, x: A_co):
        self._x = x

    def parse_fn(self, stream: S_contra, pos: int) -> Result[A_co]:
        return Ok(self._x, pos)


class PureFn(ParseObj[S_contra, A_co]):
    def __init__(self, fn: Callable[[], A_co]):
        self._fn = fn

    def parse_fn(self, stream: S_contra, pos: int) -> Result[A_co]:
        return Ok(self._fn(), pos)


def fail(reason: str) -> ParseFn[object, None]:
    def fail(stream: object, pos: int) -> Result[None]:
        return Error(Reason(ErrorKind.UNEXPECTED, reason, pos))

    return fail
