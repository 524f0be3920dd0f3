"""Encoding of descriptor field values into URL text."""

from __future__ import annotations

import datetime as dt
from collections.abc import Sequence
from decimal import Decimal
from enum import Enum
from typing import Any
from uuid import UUID

from .errors import UnsupportedValueError


class ValueKind(str, Enum):
    """The shapes a descriptor field value may take."""

    SCALAR = "scalar"
    SEQUENCE = "sequence"


_SCALAR_TYPES = (str, bool, int, float, Decimal, Enum, dt.date, UUID)


def classify(value: Any) -> ValueKind:
    """Return the kind of ``value`` or raise ``UnsupportedValueError``."""

    if isinstance(value, _SCALAR_TYPES):
        return ValueKind.SCALAR
    if isinstance(value, Sequence) and not isinstance(value, (bytes, bytearray, memoryview)):
        return ValueKind.SEQUENCE
    raise UnsupportedValueError(f"Value {value!r} of type {type(value).__name__} is not supported in URLs.")


def encode_value(value: Any) -> str:
    """Render a scalar, or a sequence of scalars, in its canonical text form."""

    if classify(value) is ValueKind.SEQUENCE:
        return ",".join(encode_value(item) for item in value)
    return _encode_scalar(value)


def _encode_scalar(value: Any) -> str:
    # bool is an int subclass; it must be checked first.
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return encode_value(value.value)
    if isinstance(value, dt.date):
        # yyyy-MM-dd for dates, full ISO-8601 for datetimes
        return value.isoformat()
    return str(value)
