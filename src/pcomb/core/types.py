from dataclasses import dataclass
from typing import Callable, Generic, NamedTuple, TypeVar, Union

A = TypeVar("A")
A_co = TypeVar("A_co", covariant=True)
B = TypeVar("B")

Position = int


class Loc(NamedTuple):
    pos: Position
    line: int
    col: int


@dataclass(frozen=True)
class Left(Generic[A_co]):
    value: A_co

    def either(self, left: Callable[[A_co], B], right: object) -> B:
        return left(self.value)


@dataclass(frozen=True)
class Right(Generic[A_co]):
    value: A_co

    def either(self, left: object, right: Callable[[A_co], B]) -> B:
        return right(self.value)


Either = Union[Left[A], Right[B]]
