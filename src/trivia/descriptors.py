"""Request descriptors for the jService endpoints."""

from __future__ import annotations

import datetime as dt
from dataclasses import dataclass
from typing import List, Optional

from rest_core.metadata import RequestDescriptor, Verb, body, route

from .models import Category, Clue


@route("/random", Verb.GET)
@dataclass(frozen=True)
class GetRandomClues(RequestDescriptor[List[Clue]]):
    # amount of clues to return, limited to 100 at a time
    count: Optional[int] = None


@route("/clues", Verb.GET)
@dataclass(frozen=True)
class GetClues(RequestDescriptor[List[Clue]]):
    value: Optional[int] = None
    """The value of the clue in dollars."""

    category: Optional[int] = None
    """The id of the category to return clues from."""

    min_date: Optional[dt.date] = None
    """Earliest original air date to include."""

    max_date: Optional[dt.date] = None
    """Latest original air date to include."""

    offset: Optional[int] = None
    """Offsets the returned clues, for pagination."""


@route("/final", Verb.GET)
@dataclass(frozen=True)
class GetFinalClues(RequestDescriptor[List[Clue]]):
    count: Optional[int] = None


@route("/categories", Verb.GET)
@dataclass(frozen=True)
class GetCategories(RequestDescriptor[List[Category]]):
    count: Optional[int] = None
    offset: Optional[int] = None


@route("/category", Verb.GET)
@dataclass(frozen=True)
class GetCategory(RequestDescriptor[Category]):
    id: Optional[int] = None


@route("/invalid", Verb.POST)
@dataclass(frozen=True)
class MarkClueInvalid(RequestDescriptor[Clue]):
    """Flag a clue as broken; the API answers with the updated clue."""

    id: Optional[int] = body()
