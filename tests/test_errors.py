import logging

import pytest
from hypothesis import given
from hypothesis import strategies as st

from pcomb import (
    Alternatives, ErrorKind, ParseError, Reason, label, many, parse, repeat
)
from pcomb.core.error import leaves
from pcomb.core.result import Error, Ok
from pcomb.sequence import literal, sym

a = sym("a")
b = sym("b")
c = sym("c")


def test_alternatives_keep_both_errors() -> None:
    r = (a | b).parse_fn("c", 0)
    assert type(r) is Error
    info = r.info
    assert type(info) is Alternatives
    assert info.reason == "no alternative matched"
    assert info.pos == 0
    assert type(info.left) is Reason
    assert info.left.reason == "expected 'a'"
    assert type(info.right) is Reason
    assert info.right.reason == "expected 'b'"


def test_nested_alternatives_leaves_in_order() -> None:
    r = (a | b | c).parse_fn("d", 0)
    assert type(r) is Error
    assert [leaf.reason for leaf in leaves(r.info)] == [
        "expected 'a'", "expected 'b'", "expected 'c'"
    ]


def test_sequence_failure_is_not_wrapped() -> None:
    r = (a + b).parse_fn("ac", 0)
    assert type(r) is Error
    assert type(r.info) is Reason
    assert r.info.kind is ErrorKind.LITERAL_MISMATCH
    assert r.pos == 1


def test_partial_match() -> None:
    result = parse(literal("foo"), "foot")
    assert not result.ok
    assert result.error is not None
    assert result.error.kind is ErrorKind.PARTIAL_MATCH
    assert result.error.pos == 3


def test_success_has_no_error() -> None:
    result = parse(literal("foo"), "foo")
    assert result.ok
    assert result.error is None
    assert result.fmap(len).unwrap() == 3


def test_result_value() -> None:
    assert parse(literal("foo"), "foo").value == "foo"
    assert parse(literal("foo"), "foo").fmap(len).value == 3
    assert parse(literal("foo"), "fox").value is None
    assert parse(literal("foo"), "foot").value is None


def test_parse_error_message() -> None:
    with pytest.raises(ParseError) as err:
        parse(a | b, "c").unwrap()
    assert str(err.value) == "at 0: expected 'a', at 0: expected 'b'"
    assert [e.kind for e in err.value.errors] == [
        ErrorKind.LITERAL_MISMATCH, ErrorKind.LITERAL_MISMATCH
    ]
    assert type(err.value.info) is Alternatives


def test_repetition_below_minimum_reports_halting_error() -> None:
    with pytest.raises(ParseError) as err:
        parse(repeat(a, 2, None), "ab").unwrap()
    assert str(err.value) == "at 1: expected 'a'"


def test_label_replaces_error_at_start() -> None:
    parser = label(a | b, "expected a or b")
    with pytest.raises(ParseError) as err:
        parse(parser, "c").unwrap()
    assert str(err.value) == "at 0: expected a or b"


def test_custom_location_format() -> None:
    result = parse(
        a + b, "ac", fmt_loc=lambda loc: "offset {}".format(loc.pos)
    )
    with pytest.raises(ParseError) as err:
        result.unwrap()
    assert str(err.value) == "at offset 1: expected 'b'"


def test_failed_parse_is_logged(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="pcomb.parser"):
        parse(a, "b")
    assert any("parse failed" in r.message for r in caplog.records)


@given(st.text(min_size=1, max_size=10), st.text(max_size=10))
def test_literal_must_consume_whole_input(t: str, s: str) -> None:
    result = parse(literal(t), t + s)
    assert result.ok is (s == "")
    if s:
        assert result.error is not None
        assert result.error.kind is ErrorKind.PARTIAL_MATCH
        assert result.error.pos == len(t)


@given(st.text(alphabet="ab", max_size=20))
def test_parse_succeeds_iff_input_consumed(data: str) -> None:
    r = many(a).parse_fn(data, 0)
    expected = type(r) is Ok and r.pos == len(data)
    assert parse(many(a), data).ok is expected
