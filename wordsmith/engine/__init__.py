from .errors import ConfigurationError, LoadError
from .rules import normalize, is_original, is_possible, is_real
from .outcomes import (
    SubmissionOutcome,
    Accepted,
    RejectedDuplicate,
    RejectedImpossibleLetters,
    RejectedNotAWord,
)
from .game import GameState, WordGameEngine, start_game, new_game, submit

__all__ = [
    "ConfigurationError", "LoadError",
    "normalize", "is_original", "is_possible", "is_real",
    "SubmissionOutcome", "Accepted", "RejectedDuplicate",
    "RejectedImpossibleLetters", "RejectedNotAWord",
    "GameState", "WordGameEngine", "start_game", "new_game", "submit",
]
