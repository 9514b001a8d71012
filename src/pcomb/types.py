"""
Parse outcome API.
"""

from abc import abstractmethod
from dataclasses import dataclass
from typing import Callable, Generic, List, Optional, TypeVar

from .core.error import Alternatives, ErrorInfo, ErrorKind, Reason, leaves
from .core.result import Ok, Result
from .core.types import Left, Loc, Right

__all__ = (
    "Alternatives", "ErrorInfo", "ErrorKind", "Reason",
    "ErrorItem", "ParseError", "ParseResult", "Left", "Right", "Loc",
)

S = TypeVar("S")
A_co = TypeVar("A_co", covariant=True)
B = TypeVar("B")


@dataclass
class ErrorItem:
    """
    Description of a single parse error.

    :param loc: Location of the error
    :param loc_str: String representation of the location
    :param reason: Description of what went wrong
    :param kind: Category of the error
    """

    loc: Loc
    loc_str: str
    reason: str
    kind: ErrorKind

    @property
    def msg(self) -> str:
        """
        Human-readable description of the error.
        """

        return "at {}: {}".format(self.loc_str, self.reason)


class ParseError(Exception):
    """
    Exception that is raised if a parser was unable to parse the input.

    :param errors: List of errors, one per failed alternative
    :param info: Error tree the list was built from
    """

    def __init__(self, errors: List[ErrorItem], info: ErrorInfo):
        super().__init__(errors)
        self.errors = errors
        self.info = info

    def __str__(self) -> str:
        return ", ".join(error.msg for error in self.errors)


class ParseResult(Generic[A_co, S]):
    """
    Result of the parsing.
    """

    @property
    @abstractmethod
    def ok(self) -> bool:
        """
        ``True`` if the whole input was parsed.
        """

    @property
    @abstractmethod
    def value(self) -> Optional[A_co]:
        """
        Parsed value, or ``None`` if the parse failed.
        """

    @property
    @abstractmethod
    def error(self) -> Optional[ErrorInfo]:
        """
        Error tree of the failed parse, or ``None`` on success.
        """

    @abstractmethod
    def fmap(self, fn: Callable[[A_co], B]) -> "ParseResult[B, S]":
        """
        Transforms :class:`ParseResult`\\[``A_co``, ``S``] into
        :class:`ParseResult`\\[``B``, ``S``] by applying `fn` to value.

        :param fn: Function to apply to value
        """

    @abstractmethod
    def unwrap(self) -> A_co:
        """
        Returns parsed value if there is one. Otherwise throws
        :exc:`ParseError`.

        :raise: :exc:`ParseError`
        """


class ResultWrapper(ParseResult[A_co, S]):
    def __init__(
            self, result: Result[A_co], stream: S,
            get_loc: Callable[[S, int], Loc], fmt_loc: Callable[[Loc], str]):
        self._result = result
        self._stream = stream
        self._get_loc = get_loc
        self._fmt_loc = fmt_loc

    def __repr__(self) -> str:
        return "ResultWrapper({!r})".format(self._result)

    @property
    def ok(self) -> bool:
        return type(self._result) is Ok

    @property
    def value(self) -> Optional[A_co]:
        if type(self._result) is Ok:
            return self._result.value
        return None

    @property
    def error(self) -> Optional[ErrorInfo]:
        if type(self._result) is Ok:
            return None
        return self._result.info

    def fmap(self, fn: Callable[[A_co], B]) -> ParseResult[B, S]:
        return ResultWrapper(
            self._result.fmap(fn), self._stream, self._get_loc, self._fmt_loc
        )

    def unwrap(self) -> A_co:
        if type(self._result) is Ok:
            return self._result.value

        errors = []
        for item in leaves(self._result.info):
            loc = self._get_loc(self._stream, item.pos)
            errors.append(
                ErrorItem(loc, self._fmt_loc(loc), item.reason, item.kind)
            )
        raise ParseError(errors, self._result.info)
