from __future__ import annotations

import datetime as dt
from typing import List, Optional

from rest_core.models import WireModel


class Category(WireModel):
    """A trivia category; ``clues`` is only populated by the single-category endpoint."""

    id: int
    title: str
    created_at: Optional[dt.datetime] = None
    updated_at: Optional[dt.datetime] = None
    clues_count: Optional[int] = None
    clues: Optional[List[Clue]] = None


class Clue(WireModel):
    id: int
    answer: str
    question: str
    value: Optional[int] = None
    airdate: Optional[dt.datetime] = None
    created_at: Optional[dt.datetime] = None
    updated_at: Optional[dt.datetime] = None
    category_id: Optional[int] = None
    game_id: Optional[int] = None
    invalid_count: Optional[int] = None
    category: Optional[Category] = None

    def as_message(self) -> str:
        """Render the clue the way chat commands expect it: ``question|answer``."""

        return f"{self.question}|{self.answer}"


Category.model_rebuild()
Clue.model_rebuild()
