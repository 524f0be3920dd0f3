"""JSON (de)serialization helpers shared by request bodies and responses."""

from __future__ import annotations

from functools import lru_cache
from typing import Any

from pydantic import BaseModel, ConfigDict, TypeAdapter
from pydantic_core import to_json

from .naming import to_snake


class WireModel(BaseModel):
    """Base for DTOs exchanged with snake_case JSON APIs.

    Attribute names are mapped to wire keys with :func:`to_snake`, so both
    ``created_at`` and ``CreatedAt`` read and write ``"created_at"``.
    """

    model_config = ConfigDict(
        alias_generator=to_snake,
        populate_by_name=True,
        extra="ignore",
    )


@lru_cache(maxsize=256)
def type_adapter(response_type: Any) -> TypeAdapter[Any]:
    return TypeAdapter(response_type)


def parse_json(text: str, response_type: Any) -> Any:
    """Validate a JSON document into ``response_type``.

    Raises ``pydantic.ValidationError`` for malformed JSON or mismatched shape.
    """

    return type_adapter(response_type).validate_json(text)


def dump_json(value: Any) -> bytes:
    return to_json(value, by_alias=True)
