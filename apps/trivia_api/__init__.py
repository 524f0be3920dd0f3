"""
HTTP facade over the trivia service.

The FastAPI adapter in ``app`` only maps routes and errors; request parsing
and response shaping live in the ``TriviaAPI`` facade so other front ends
(chat commands, CLIs) can reuse them.
"""

from .facade import TriviaAPI

__all__ = ["TriviaAPI"]
