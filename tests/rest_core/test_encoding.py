from __future__ import annotations

import datetime as dt
from decimal import Decimal
from enum import Enum
from uuid import UUID

import pytest

from rest_core.encoding import ValueKind, classify, encode_value
from rest_core.errors import UnsupportedValueError


class Color(Enum):
    RED = "red"
    ANSWER = 42


def test_scalars_use_canonical_text() -> None:
    assert encode_value("hello") == "hello"
    assert encode_value(7) == "7"
    assert encode_value(2.5) == "2.5"
    assert encode_value(Decimal("10.50")) == "10.50"
    assert encode_value(True) == "true"
    assert encode_value(False) == "false"
    assert encode_value(Color.RED) == "red"
    assert encode_value(Color.ANSWER) == "42"
    assert encode_value(UUID("12345678-1234-5678-1234-567812345678")) == "12345678-1234-5678-1234-567812345678"


def test_dates_are_formatted_as_iso_days() -> None:
    assert encode_value(dt.date(2008, 3, 1)) == "2008-03-01"
    assert encode_value(dt.datetime(2008, 3, 1, 12, 30)) == "2008-03-01T12:30:00"


def test_sequences_are_joined_with_commas() -> None:
    assert encode_value([1, 2, 3]) == "1,2,3"
    assert encode_value(("a", dt.date(2020, 1, 2))) == "a,2020-01-02"
    assert encode_value([]) == ""
    assert encode_value([[1, 2], [3]]) == "1,2,3"


def test_classify_separates_strings_from_sequences() -> None:
    assert classify("abc") is ValueKind.SCALAR
    assert classify([1]) is ValueKind.SEQUENCE
    assert classify(range(3)) is ValueKind.SEQUENCE


@pytest.mark.parametrize("value", [{"a": 1}, {1, 2}, object(), b"raw", None, [1, None]])
def test_unsupported_values_raise(value: object) -> None:
    with pytest.raises(UnsupportedValueError):
        encode_value(value)
