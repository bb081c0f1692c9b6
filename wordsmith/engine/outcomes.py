"""
Submission outcomes.

Every scored submission produces exactly one immutable outcome. The four
variants share a small surface so callers (CLI, harness) never need to
branch on the concrete class:

  - kind     : stable tag used in reports ("accepted", "duplicate", ...)
  - delta    : signed score change (+10, -2, -3, -5)
  - accepted : True only for Accepted
  - title / message : the alert pair shown to the player
"""

from __future__ import annotations

from dataclasses import dataclass

from .rules import (
    ACCEPT_POINTS,
    DUPLICATE_PENALTY,
    IMPOSSIBLE_PENALTY,
    NOT_A_WORD_PENALTY,
)


@dataclass(frozen=True)
class SubmissionOutcome:
    word: str

    kind = "outcome"
    title = ""
    message = ""

    @property
    def accepted(self) -> bool:
        return False

    @property
    def delta(self) -> int:
        raise NotImplementedError("Override in subclass")


@dataclass(frozen=True)
class Accepted(SubmissionOutcome):
    points_awarded: int = ACCEPT_POINTS

    kind = "accepted"
    title = "Nice one"

    @property
    def message(self) -> str:
        return f"You earn {self.points_awarded} score points."

    @property
    def accepted(self) -> bool:
        return True

    @property
    def delta(self) -> int:
        return self.points_awarded


@dataclass(frozen=True)
class Rejected(SubmissionOutcome):
    """Common base for the three rejection variants."""
    penalty: int = 0

    @property
    def delta(self) -> int:
        return -self.penalty


@dataclass(frozen=True)
class RejectedDuplicate(Rejected):
    penalty: int = DUPLICATE_PENALTY

    kind = "duplicate"
    title = "Word used already"
    message = "Be more original. You lose 2 score points."


@dataclass(frozen=True)
class RejectedImpossibleLetters(Rejected):
    penalty: int = IMPOSSIBLE_PENALTY

    kind = "impossible_letters"
    # Swapped on purpose: this title goes with impossible letters, "not possible" with not-a-word.
    title = "Word not recognized"
    message = "You can't just make them up, you know! You lose 3 score points."


@dataclass(frozen=True)
class RejectedNotAWord(Rejected):
    penalty: int = NOT_A_WORD_PENALTY

    kind = "not_a_word"
    title = "Word not possible"
    message = "That word is shorter than 3 letters, or it doesn't exist. You lose 5 score points."
