from __future__ import annotations

import datetime as dt
from typing import Any, Dict, List, Mapping, Optional

from trivia import TriviaService


class UpstreamUnavailableError(RuntimeError):
    """Raised when the trivia API returned nothing usable."""


class TriviaAPI:
    """Facade turning query parameters into service calls and plain dicts."""

    def __init__(self, *, service: Optional[TriviaService] = None) -> None:
        self.service = service or TriviaService.from_settings()

    # ------------------------------------------------------------------ #
    # Public API
    # ------------------------------------------------------------------ #

    def question(self) -> Dict[str, Any]:
        message = self.service.load_trivia_question()
        if message is None:
            raise UpstreamUnavailableError("The trivia API did not return a clue.")
        question, _, answer = message.partition("|")
        return {"question": question, "answer": answer, "message": message}

    def clues(self, params: Mapping[str, Any]) -> List[Dict[str, Any]]:
        clues = self.service.clues(
            value=_optional_int(params, "value"),
            category=_optional_int(params, "category"),
            min_date=_optional_date(params, "min_date"),
            max_date=_optional_date(params, "max_date"),
            offset=_optional_int(params, "offset"),
        )
        return [clue.model_dump(mode="json", by_alias=True) for clue in clues]

    def categories(self, params: Mapping[str, Any]) -> List[Dict[str, Any]]:
        count = _optional_int(params, "count")
        categories = self.service.categories(count if count is not None else 10, _optional_int(params, "offset"))
        return [category.model_dump(mode="json", by_alias=True) for category in categories]

    def category(self, category_id: int) -> Dict[str, Any]:
        found = self.service.category(category_id)
        if found is None:
            raise KeyError(category_id)
        return found.model_dump(mode="json", by_alias=True)


def _optional_int(params: Mapping[str, Any], key: str) -> Optional[int]:
    raw = params.get(key)
    if raw is None or raw == "":
        return None
    try:
        return int(raw)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"'{key}' must be an integer.") from exc


def _optional_date(params: Mapping[str, Any], key: str) -> Optional[dt.date]:
    raw = params.get(key)
    if raw is None or raw == "":
        return None
    if isinstance(raw, dt.date):
        return raw
    try:
        return dt.date.fromisoformat(str(raw))
    except ValueError as exc:
        raise ValueError(f"'{key}' must be a date formatted as YYYY-MM-DD.") from exc
