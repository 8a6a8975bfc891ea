from __future__ import annotations

import pytest

from trafficlog.exceptions import InvalidDistanceError
from trafficlog.models.distance import decode, encode, format_distance


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("0,0", 0),
        ("0,7", 7),
        ("12,3", 123),
        ("10,5", 105),
        ("99999999,9", 999_999_999),
    ],
)
def test_encode_scales_by_ten(text: str, expected: int) -> None:
    assert encode(text) == expected


@pytest.mark.parametrize("text", ["0,0", "3,1", "120,0", "12345678,9"])
def test_format_restores_input_text(text: str) -> None:
    assert format_distance(encode(text)) == text


def test_decode_splits_whole_and_fraction() -> None:
    assert decode(123) == (12, 3)
    assert decode(5) == (0, 5)


@pytest.mark.parametrize(
    "text",
    ["", "1", "1,", ",5", "01,0", "1,23", "1.5", "123456789,0", "-1,0", "2\u0665,0", "1,\u0663"],
)
def test_encode_rejects_text_outside_grammar(text: str) -> None:
    with pytest.raises(InvalidDistanceError):
        encode(text)


def test_invalid_distance_error_is_value_error() -> None:
    with pytest.raises(ValueError):
        encode("abc")


def test_decode_rejects_unset_sentinel() -> None:
    with pytest.raises(InvalidDistanceError):
        decode(-1)
