"""
Longest-First solver.

Plays the longest playable lexicon word each turn (alphabetical among equal
lengths). Every acceptance is worth the same 10 points, so length buys
nothing directly; the point is a deterministic, greedy reference player
whose transcripts are easy to eyeball.
"""

from __future__ import annotations

from .base import BaseSolver, register


@register
class LongestFirstSolver(BaseSolver):
    id = "longest_first"
    name = "Longest First"
    version = "1.0.0"

    def next_word(self, state: dict) -> str | None:
        pool = self.playable(state)
        if not pool:
            return None
        # lexicon is sorted, so min() over (-len, word) is stable
        return min(pool, key=lambda w: (-len(w), w))
