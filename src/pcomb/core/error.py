from enum import Enum
from typing import Iterator, Union

from typing_extensions import final

from .types import Position


class ErrorKind(Enum):
    UNEXPECTED_END = "unexpected end"
    LITERAL_MISMATCH = "literal mismatch"
    RANGE_MISMATCH = "range mismatch"
    PREDICATE_MISMATCH = "predicate mismatch"
    UNEXPECTED = "unexpected input"
    PARTIAL_MATCH = "partial match"


@final
class Reason:
    __slots__ = "kind", "reason", "pos"

    def __init__(self, kind: ErrorKind, reason: str, pos: Position):
        self.kind = kind
        self.reason = reason
        self.pos = pos

    def __repr__(self) -> str:
        return "Reason(kind={!r}, reason={!r}, pos={!r})".format(
            self.kind, self.reason, self.pos
        )


@final
class Alternatives:
    __slots__ = "left", "right", "pos"

    reason = "no alternative matched"

    def __init__(
            self, left: "ErrorInfo", right: "ErrorInfo", pos: Position):
        self.left = left
        self.right = right
        self.pos = pos

    def __repr__(self) -> str:
        return "Alternatives(left={!r}, right={!r}, pos={!r})".format(
            self.left, self.right, self.pos
        )


ErrorInfo = Union[Reason, Alternatives]


def leaves(info: ErrorInfo) -> Iterator[Reason]:
    stack = [info]
    while stack:
        node = stack.pop()
        if type(node) is Reason:
            yield node
        else:
            stack.append(node.right)
            stack.append(node.left)
