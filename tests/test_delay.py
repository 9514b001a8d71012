import threading
from typing import List, Optional

import pytest

from pcomb import Delay, ParseError, Parser, delay, parse
from pcomb.sequence import literal, sym

parens: Parser[str, int] = delay(
    lambda: (sym("(") >> parens.maybe() << sym(")")).fmap(
        lambda inner: 1 if inner is None else inner + 1
    )
)

DATA_POSITIVE = [
    ("()", 1),
    ("(())", 2),
    ("((()))", 3),
]


@pytest.mark.parametrize("data, depth", DATA_POSITIVE)
def test_parens(data: str, depth: int) -> None:
    assert parse(parens, data).unwrap() == depth


@pytest.mark.parametrize("data", ["(()", "", ")(", "()()"])
def test_parens_negative(data: str) -> None:
    with pytest.raises(ParseError):
        parse(parens, data).unwrap()


def test_producer_is_called_once() -> None:
    calls: List[int] = []

    def producer() -> Parser[str, str]:
        calls.append(1)
        return literal("x")

    parser = delay(producer)
    assert calls == []
    assert parser.parse("x").unwrap() == "x"
    assert parser.parse("x").unwrap() == "x"
    assert (parser + parser).parse("xx").unwrap() == ("x", "x")
    assert calls == [1]


def test_producer_is_called_once_across_threads() -> None:
    calls: List[int] = []
    barrier = threading.Barrier(8)

    def producer() -> Parser[str, str]:
        calls.append(1)
        return literal("x")

    parser = delay(producer)
    results: List[Optional[str]] = [None] * 8

    def worker(i: int) -> None:
        barrier.wait()
        results[i] = parser.parse("x").unwrap()

    threads = [threading.Thread(target=worker, args=(i,)) for i in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert calls == [1]
    assert results == ["x"] * 8


def test_mutual_recursion() -> None:
    expr: Parser[str, int] = delay(
        lambda: term.chainl1(sym("+").fmap(lambda _: lambda a, b: a + b))
    )
    term: Parser[str, int] = (
        sym("1").fmap(int) | expr.between(sym("("), sym(")"))
    )
    assert expr.parse("1+(1+1)+1").unwrap() == 4


def test_delay_forward_declaration() -> None:
    parser = Delay[str, object]()
    parser.define((sym("a") + parser).maybe())
    assert parser.parse("aa").unwrap() == ("a", ("a", None))


def test_delay_undefined() -> None:
    parser = Delay[str, str]()
    with pytest.raises(RuntimeError, match="not defined"):
        parser.parse("a")


def test_delay_defined_twice() -> None:
    parser = Delay[str, str]()
    parser.define(sym("a"))
    with pytest.raises(RuntimeError, match="already defined"):
        parser.define(sym("b"))
