from typing import Callable, Generic, TypeVar, Union

from typing_extensions import final

from .error import ErrorInfo
from .types import Position

A = TypeVar("A")
A_co = TypeVar("A_co", covariant=True)
B = TypeVar("B")


@final
class Ok(Generic[A_co]):
    __slots__ = "value", "pos"

    def __init__(self, value: A_co, pos: Position):
        self.value = value
        self.pos = pos

    def __repr__(self) -> str:
        return "Ok(value={!r}, pos={!r})".format(self.value, self.pos)

    def fmap(self, fn: Callable[[A_co], B]) -> "Ok[B]":
        return Ok(fn(self.value), self.pos)


@final
class Error:
    __slots__ = "info",

    def __init__(self, info: ErrorInfo):
        self.info = info

    def __repr__(self) -> str:
        return "Error(info={!r})".format(self.info)

    @property
    def pos(self) -> Position:
        return self.info.pos

    def fmap(self, fn: object) -> "Error":
        return self


Result = Union[Ok[A], Error]
