"""
Random Feasible solver.

Strategy:
  - Choose uniformly at random among lexicon words that are still playable
    this round (original, spelled from the root's letters, >= 3 letters,
    not the root word itself).
  - Give up (return None) once nothing playable is left.

Notes:
  - Deterministic across runs with the same seed (via BaseSolver.rng).
  - Baseline to verify the pipeline; whether a pick is a "real" word is
    still up to the engine's dictionary.
"""

from __future__ import annotations

from typing import List
from .base import BaseSolver, register


@register
class RandomFeasibleSolver(BaseSolver):
    id = "random_feasible"
    name = "Random Feasible"
    version = "1.0.0"

    def next_word(self, state: dict) -> str | None:
        pool: List[str] = self.playable(state)
        if not pool:
            return None
        return pool[self.rng.randrange(len(pool))]
