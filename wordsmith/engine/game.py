"""
Game state and the submit-word chain.

The functions here are pure with respect to everything except the GameState
they are handed; WordGameEngine is a thin convenience wrapper that owns one
state, the root-word pool, a dictionary and a seeded RNG.

Typical use:
    from wordsmith.engine import WordGameEngine
    from wordsmith.datasets import default_provider
    from wordsmith.dictionary import create_dictionary

    engine = WordGameEngine(default_provider(), create_dictionary("wordfreq"), seed=7)
    engine.start()
    outcome = engine.submit("silk")
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Set

from .errors import ConfigurationError, LoadError
from .outcomes import (
    Accepted,
    RejectedDuplicate,
    RejectedImpossibleLetters,
    RejectedNotAWord,
    SubmissionOutcome,
)
from .rules import (
    DEFAULT_LOCALE,
    DEFAULT_ROOT_WORD,
    is_original,
    is_possible,
    is_real,
    normalize,
)

log = logging.getLogger("wordsmith.engine")


@dataclass
class GameState:
    """One round: the root word, accepted words (newest first) and the running score."""
    root_word: str
    candidate_root_words: Set[str]
    used_words: List[str] = field(default_factory=list)
    score: int = 0


def _pick_root_word(pool: Set[str], rng: random.Random) -> str:
    # Sorted so that a seeded rng picks the same word regardless of set order.
    choices = sorted(w for w in pool if w)
    if not choices:
        return DEFAULT_ROOT_WORD
    return rng.choice(choices)


def start_game(candidate_root_words: Optional[Iterable[str]],
               rng: random.Random | None = None) -> GameState:
    """
    Create a fresh GameState with a random root word from the pool.

    Raises:
      ConfigurationError if no pool was supplied at all (word list never loaded).
      An empty pool is fine: the root word falls back to DEFAULT_ROOT_WORD.
    """
    if candidate_root_words is None:
        raise ConfigurationError("no root-word pool supplied; the word list failed to load")

    pool = {normalize(w) for w in candidate_root_words}
    pool.discard("")
    root = _pick_root_word(pool, rng or random.Random())
    log.info("New round: root word %r (pool of %d)", root, len(pool))
    return GameState(root_word=root, candidate_root_words=pool)


def new_game(state: GameState, rng: random.Random | None = None) -> GameState:
    """Start over with the same pool: new root word, no used words, score 0."""
    return start_game(state.candidate_root_words, rng)


def submit(raw_input: str, state: GameState, dictionary,
           locale: str = DEFAULT_LOCALE) -> SubmissionOutcome | None:
    """
    Validate one candidate word and update `state` in place.

    Returns:
      None for blank input (no state change), otherwise the outcome of the
      first failing check, or Accepted.
    """
    word = normalize(raw_input)
    if not word:
        return None

    # Check order matters: overlapping failures take the first penalty.
    outcome: SubmissionOutcome
    if not is_original(word, state.used_words):
        outcome = RejectedDuplicate(word)
    elif not is_possible(word, state.root_word):
        outcome = RejectedImpossibleLetters(word)
    elif not is_real(word, state.root_word, dictionary, locale):
        outcome = RejectedNotAWord(word)
    else:
        outcome = Accepted(word)
        state.used_words.insert(0, word)

    state.score += outcome.delta
    log.debug("%r -> %s (%+d), score %d", word, outcome.kind, outcome.delta, state.score)
    return outcome


class WordGameEngine:
    """
    Owns one game at a time.

    `words` is either a WordListProvider (anything with .load()) or an
    already-loaded iterable of root words. The provider is loaded once,
    here; new_game() never reloads it.
    """

    def __init__(self, words, dictionary, *, seed: int | None = None,
                 locale: str = DEFAULT_LOCALE):
        self.dictionary = dictionary
        self.locale = locale
        self.rng = random.Random(seed)
        self._load_error: LoadError | None = None
        self._pool: Optional[Set[str]] = None
        self._state: GameState | None = None

        if isinstance(words, (str, bytes)):
            raise TypeError(
                "words must be a WordListProvider or an iterable of words, not a string; "
                "wrap a path in FileWordListProvider"
            )
        if hasattr(words, "load"):
            try:
                self._pool = words.load()
            except LoadError as e:
                # Surfaced as fatal on start(); keep the cause for chaining.
                log.error("Root word list unavailable: %s", e)
                self._load_error = e
        elif words is not None:
            self._pool = set(words)

    def start(self) -> GameState:
        if self._pool is None:
            raise ConfigurationError(
                "cannot start: root word list could not be loaded"
            ) from self._load_error
        self._state = start_game(self._pool, self.rng)
        return self._state

    def new_game(self) -> GameState:
        if self._state is None:
            return self.start()
        self._state = new_game(self._state, self.rng)
        return self._state

    def submit(self, raw_input: str) -> SubmissionOutcome | None:
        return submit(raw_input, self.state, self.dictionary, self.locale)

    @property
    def state(self) -> GameState:
        if self._state is None:
            raise ConfigurationError("game not started; call start() first")
        return self._state

    @property
    def root_word(self) -> str:
        return self.state.root_word

    @property
    def score(self) -> int:
        return self.state.score

    @property
    def used_words(self) -> List[str]:
        return list(self.state.used_words)
