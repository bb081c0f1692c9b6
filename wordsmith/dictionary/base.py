from __future__ import annotations
from typing import Dict, Type

from wordsmith.engine.rules import DEFAULT_LOCALE

# ---- Global dictionary backend registry ----
REGISTRY: Dict[str, Type["BaseDictionary"]] = {}


def register(cls: Type["BaseDictionary"]) -> Type["BaseDictionary"]:
    """
    Decorator: @register on a dictionary class adds it to REGISTRY by its `id`.
    """
    did = getattr(cls, "id", None)
    if not did:
        raise ValueError(f"{cls.__name__} must define a non-empty `id`")
    if did in REGISTRY:
        raise ValueError(f"Duplicate dictionary id: {did}")
    REGISTRY[did] = cls
    return cls


# ---- Base class that dictionary backends inherit ----
class BaseDictionary:
    """
    The spell-check capability the engine depends on: a pure
    "is this a correctly spelled word in `locale`?" query.
    """
    id = "base"
    name = "Base"

    def is_valid_word(self, word: str, locale: str = DEFAULT_LOCALE) -> bool:
        raise NotImplementedError("Override in subclass")

    def __contains__(self, word: str) -> bool:
        return self.is_valid_word(word)
