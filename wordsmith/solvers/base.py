from __future__ import annotations
import random
from typing import Dict, List, Type

from wordsmith.engine.rules import MIN_WORD_LENGTH, is_original, is_possible, normalize

# ---- Global solver registry ----
REGISTRY: Dict[str, Type["BaseSolver"]] = {}


def register(cls: Type["BaseSolver"]) -> Type["BaseSolver"]:
    """
    Decorator: @register on a solver class adds it to REGISTRY by its `id`.
    """
    sid = getattr(cls, "id", None)
    if not sid:
        raise ValueError(f"{cls.__name__} must define a non-empty `id`")
    if sid in REGISTRY:
        raise ValueError(f"Duplicate solver id: {sid}")
    REGISTRY[sid] = cls
    return cls


# ---- Base class that solvers inherit ----
class BaseSolver:
    """
    An automated player. Each turn it is shown the round state and returns
    the next word to submit, or None to stop.
    """
    id = "base"
    name = "Base"
    version = "0.0.0"

    def __init__(self):
        self.lexicon: List[str] = []
        self.rng = random.Random()

    def reset(self, *, lexicon: List[str], seed: int | None = None) -> None:
        # Sorted + deduped so seeded runs don't depend on input order.
        self.lexicon = sorted({normalize(w) for w in lexicon if w.strip()})
        if seed is not None:
            self.rng.seed(seed)

    def playable(self, state: dict) -> List[str]:
        """
        Lexicon words that pass every rule that doesn't need the dictionary:
        original, feasible, long enough, not the root word. Words already
        tried this round (accepted or not) are skipped too.
        """
        root = state["root_word"]
        used = set(state["used_words"]) | set(state.get("tried_words", ()))
        return [
            w for w in self.lexicon
            if len(w) >= MIN_WORD_LENGTH
            and w != root
            and is_original(w, used)
            and is_possible(w, root)
        ]

    def next_word(self, state: dict) -> str | None:
        raise NotImplementedError("Override in subclass")
