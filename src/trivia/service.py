from __future__ import annotations

import datetime as dt
import logging
from typing import List, Optional

from rest_core.client import RestClient

from .config import TriviaSettings
from .descriptors import (
    GetCategories,
    GetCategory,
    GetClues,
    GetFinalClues,
    GetRandomClues,
    MarkClueInvalid,
)
from .models import Category, Clue

LOGGER = logging.getLogger(__name__)

MAX_PAGE_SIZE = 100


class TriviaService:
    """Trivia operations on top of a ``RestClient`` pointed at the jService API.

    Input validation lives here; the client itself only reports upstream
    failures through its hooks, so every method returns ``None`` or an empty
    list when the API gave nothing usable.
    """

    def __init__(self, client: RestClient, *, logger: Optional[logging.Logger] = None) -> None:
        self.client = client
        self.logger = logger or LOGGER

    @classmethod
    def from_settings(cls, settings: Optional[TriviaSettings] = None) -> "TriviaService":
        resolved = settings or TriviaSettings.from_env()
        return cls(resolved.client_settings().build_client())

    # ------------------------------------------------------------------ #
    # Commands
    # ------------------------------------------------------------------ #

    def load_trivia_question(self) -> Optional[str]:
        """Fetch one random clue formatted as ``question|answer``."""

        self.logger.info("Loading trivia")
        clues = self.random_clues(1)
        if not clues:
            self.logger.warning("Trivia API returned no clue")
            return None
        return clues[0].as_message()

    # ------------------------------------------------------------------ #
    # Queries
    # ------------------------------------------------------------------ #

    def random_clues(self, count: int = 1) -> List[Clue]:
        return self.client.invoke(GetRandomClues(count=_check_count(count))) or []

    def final_clues(self, count: int = 1) -> List[Clue]:
        return self.client.invoke(GetFinalClues(count=_check_count(count))) or []

    def clues(
        self,
        *,
        value: Optional[int] = None,
        category: Optional[int] = None,
        min_date: Optional[dt.date] = None,
        max_date: Optional[dt.date] = None,
        offset: Optional[int] = None,
    ) -> List[Clue]:
        if min_date and max_date and min_date > max_date:
            raise ValueError("'min_date' must not be after 'max_date'.")
        request = GetClues(
            value=value,
            category=category,
            min_date=min_date,
            max_date=max_date,
            offset=_check_offset(offset),
        )
        return self.client.invoke(request) or []

    def categories(self, count: int = 1, offset: Optional[int] = None) -> List[Category]:
        request = GetCategories(count=_check_count(count), offset=_check_offset(offset))
        return self.client.invoke(request) or []

    def category(self, category_id: int) -> Optional[Category]:
        return self.client.invoke(GetCategory(id=_check_id(category_id)))

    def mark_invalid(self, clue_id: int) -> Optional[Clue]:
        return self.client.invoke(MarkClueInvalid(id=_check_id(clue_id)))


def _check_count(count: int) -> int:
    if not 1 <= count <= MAX_PAGE_SIZE:
        raise ValueError(f"'count' must be between 1 and {MAX_PAGE_SIZE}.")
    return count


def _check_offset(offset: Optional[int]) -> Optional[int]:
    if offset is not None and offset < 0:
        raise ValueError("'offset' must not be negative.")
    return offset


def _check_id(value: int) -> int:
    if value < 1:
        raise ValueError("Ids are positive integers.")
    return value
