# gordle/__init__.py
"""
Gordle: a console word-guessing game scored with Wordle rules.
"""

__version__ = "0.1.0"

from .hint import Hint, Feedback
from .game import Game, GameState, compute_feedback
from .corpus import read_corpus, pick_word, default_corpus_path
from .settings import GameSettings
from .exceptions import (GordleError, ConfigurationError, CorpusEmptyError,
    CorpusUnreadableError, InvalidGuessError, InputReadError
)

__all__ = [
    "Hint",
    "Feedback",
    "Game",
    "GameState",
    "compute_feedback",
    "read_corpus",
    "pick_word",
    "default_corpus_path",
    "GameSettings",
    "GordleError",
    "ConfigurationError",
    "CorpusEmptyError",
    "CorpusUnreadableError",
    "InvalidGuessError",
    "InputReadError",
]
