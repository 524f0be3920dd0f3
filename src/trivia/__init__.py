"""
Client for the jService trivia API built on ``rest_core`` descriptors.

``TriviaService`` is the entry point used by the CLI and the HTTP facade.
"""

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
from .service import TriviaService

__all__ = [
    "Category",
    "Clue",
    "GetCategories",
    "GetCategory",
    "GetClues",
    "GetFinalClues",
    "GetRandomClues",
    "MarkClueInvalid",
    "TriviaService",
    "TriviaSettings",
]
