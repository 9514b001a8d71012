from typing import List, Tuple

import pytest

from pcomb import Loc, ParseError, Parser
from pcomb.text import (
    all_of, any_of, cr, crlf, digit, end_of_line, get_loc, hex_digit,
    integer, none_of, number, one_of, parse, space, spaces, tab
)

from .parsers.colour import colour

DATA_NUMBERS: List[Tuple[str, float]] = [
    ("0", 0.0),
    ("42", 42.0),
    ("-12", -12.0),
    ("1.5", 1.5),
    ("2E3", 2000.0),
    ("2e+3", 2000.0),
    ("3.14e-2", 0.0314),
    ("-0.5e1", -5.0),
]


@pytest.mark.parametrize("data, value", DATA_NUMBERS)
def test_number(data: str, value: float) -> None:
    assert parse(number, data).unwrap() == value


DATA_NUMBERS_NEGATIVE = [
    ("3.14.5", "at 1:5: expected end of input"),
    ("1.", "at 1:2: expected end of input"),
    ("1e", "at 1:2: expected end of input"),
    ("-", "at 1:2: expected digit"),
    ("", "at 1:1: expected digit"),
]


@pytest.mark.parametrize("data, expected", DATA_NUMBERS_NEGATIVE)
def test_number_negative(data: str, expected: str) -> None:
    with pytest.raises(ParseError) as err:
        parse(number, data).unwrap()
    assert str(err.value) == expected


DATA_CHARS = [
    (digit, "7", "7"),
    (hex_digit, "b", "b"),
    (hex_digit, "F", "F"),
    (space, " ", " "),
    (tab, "\t", "\t"),
    (cr, "\r", "\r"),
    (crlf, "\r\n", "\r\n"),
    (end_of_line, "\n", "\n"),
    (end_of_line, "\r\n", "\r\n"),
    (one_of("xyz"), "y", "y"),
    (none_of("xyz").many(), "abc", ["a", "b", "c"]),
    (spaces, " \t\r\n", None),
    (integer, "-007", "-007"),
]


@pytest.mark.parametrize("parser, data, value", DATA_CHARS)
def test_chars(parser: Parser[str, object], data: str, value: object) -> None:
    assert parse(parser, data).unwrap() == value


DATA_CHARS_NEGATIVE = [
    (digit, "a", "at 1:1: expected digit"),
    (hex_digit, "g", "at 1:1: expected hex digit"),
    (one_of("xyz"), "a", "at 1:1: expected one of 'xyz'"),
    (none_of("xyz"), "x", "at 1:1: expected none of 'xyz'"),
]


@pytest.mark.parametrize("parser, data, expected", DATA_CHARS_NEGATIVE)
def test_chars_negative(
        parser: Parser[str, object], data: str, expected: str) -> None:
    with pytest.raises(ParseError) as err:
        parse(parser, data).unwrap()
    assert str(err.value) == expected


DATA_SETS = [
    (any_of("xyz"), "x", ["x"]),
    (any_of("xyz"), "zyx", ["z", "y", "x"]),
    (any_of("xyz"), "yx", ["y", "x"]),
    (all_of("ab"), "a", ["a"]),
    (all_of("ab"), "abba", ["a", "b", "b", "a"]),
    (all_of("ab"), "bbbb", ["b"] * 4),
]


@pytest.mark.parametrize("parser, data, value", DATA_SETS)
def test_sets(parser: Parser[str, object], data: str, value: object) -> None:
    assert parse(parser, data).unwrap() == value


DATA_SETS_NEGATIVE = [
    (any_of("xyz"), "", "at 1:1: unexpected end of input"),
    (any_of("zyx"), "a", "at 1:1: expected one of 'xyz'"),
    (any_of("xyz"), "xx", "at 1:2: expected end of input"),
    (any_of("xyz"), "xyzx", "at 1:4: expected end of input"),
    (all_of("ab"), "", "at 1:1: unexpected end of input"),
    (all_of("ab"), "abc", "at 1:3: expected end of input"),
]


@pytest.mark.parametrize("parser, data, expected", DATA_SETS_NEGATIVE)
def test_sets_negative(
        parser: Parser[str, object], data: str, expected: str) -> None:
    with pytest.raises(ParseError) as err:
        parse(parser, data).unwrap()
    assert str(err.value) == expected


DATA_TOKENS = [
    (one_of("+-"), ["-"], True),
    (one_of("+-"), ["+-"], False),
    (none_of("+-"), ["+-"], True),
    (none_of("+-"), ["+"], False),
]


@pytest.mark.parametrize("parser, data, ok", DATA_TOKENS)
def test_char_classes_on_tokens(
        parser: Parser[List[str], str], data: List[str], ok: bool) -> None:
    assert parser.parse(data).ok is ok


DATA_COLOURS = [
    ("#d52a41", (0xd5 / 255, 0x2a / 255, 0x41 / 255)),
    ("#5a2", (0x55 / 255, 0xaa / 255, 0x22 / 255)),
    ("#5e8ca1", (0x5e / 255, 0x8c / 255, 0xa1 / 255)),
]


@pytest.mark.parametrize("data, value", DATA_COLOURS)
def test_colour(data: str, value: Tuple[float, float, float]) -> None:
    assert parse(colour, data).unwrap() == value


@pytest.mark.parametrize("data", ["#12", "#1234", "123456"])
def test_colour_negative(data: str) -> None:
    with pytest.raises(ParseError):
        parse(colour, data).unwrap()


DATA_LOCS = [
    ("", 0, Loc(0, 0, 0)),
    ("abc", 2, Loc(2, 0, 2)),
    ("a\nbc", 2, Loc(2, 1, 0)),
    ("a\nb\ncd", 6, Loc(6, 2, 2)),
]


@pytest.mark.parametrize("data, pos, loc", DATA_LOCS)
def test_get_loc(data: str, pos: int, loc: Loc) -> None:
    assert get_loc(data, pos) == loc
