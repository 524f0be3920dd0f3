"""Field-name conversion between UpperCamel identifiers and snake_case wire keys."""

from __future__ import annotations

import re

_UPPER = re.compile(r"[A-Z]")
_SNAKE_HEAD = re.compile(r"(^|_)[a-z]")


def to_snake(name: str) -> str:
    """``MinDate`` -> ``min_date``. Names without capitals are returned as-is."""

    return _UPPER.sub(lambda match: f"_{match.group(0).lower()}", name).lstrip("_")


def to_upper_camel(name: str) -> str:
    """``min_date`` -> ``MinDate``."""

    return _SNAKE_HEAD.sub(lambda match: match.group(0).upper(), name).replace("_", "")


def convert(name: str) -> str:
    """Flip ``name`` to the other convention, judged by its first character."""

    if not name:
        return name
    head = name[0]
    if "A" <= head <= "Z":
        return to_snake(name)
    if "a" <= head <= "z":
        return to_upper_camel(name)
    return name
