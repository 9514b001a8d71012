from typing import List, Tuple

import pytest

from pcomb import ParseError

from .parsers import expr

DATA_POSITIVE: List[Tuple[str, int]] = [
    ("1", 1),
    ("1 + 2", 3),
    ("2 - 1", 1),
    ("2 * 3", 6),
    ("1 + 2 * 3", 7),
    ("(1 + 2) * 3", 9),
    ("((1) + (2))", 3),
    (" 10 * (2 - 3) ", -10),
]


@pytest.mark.parametrize("data, expected", DATA_POSITIVE)
def test_positive(data: str, expected: int) -> None:
    assert expr.eval(data) == expected


DATA_NEGATIVE = [
    ("", "at 1:1: expected digit, at 1:1: expected '('"),
    ("1 1", "at 1:3: expected end of input"),
    ("1 +", "at 1:3: expected end of input"),
    ("1 )", "at 1:3: expected end of input"),
    ("(1", "at 1:1: expected digit, at 1:3: expected ')'"),
]


@pytest.mark.parametrize("data, expected", DATA_NEGATIVE)
def test_negative(data: str, expected: str) -> None:
    with pytest.raises(ParseError) as err:
        expr.eval(data)
    assert str(err.value) == expected
