from __future__ import annotations
from typing import List
from .base import BaseDictionary, REGISTRY, register

from . import word_set  # noqa: F401
from . import word_list  # noqa: F401
from . import zipf  # noqa: F401

from .word_set import SetDictionary
from .word_list import WordListDictionary
from .zipf import WordfreqDictionary


def create_dictionary(dictionary_id: str, **options) -> BaseDictionary:
    """
    Factory: instantiate a registered dictionary backend by id.
    """
    try:
        cls = REGISTRY[dictionary_id]
    except KeyError as e:
        raise ValueError(
            f"Unknown dictionary id: {dictionary_id}. Available: {sorted(REGISTRY.keys())}") from e
    return cls(**options)


def get_dictionary_ids() -> List[str]:
    """
    Return all registered dictionary ids (sorted for stable CLI help).
    """
    return sorted(REGISTRY.keys())


__all__ = [
    "BaseDictionary", "REGISTRY", "register",
    "SetDictionary", "WordListDictionary", "WordfreqDictionary",
    "create_dictionary", "get_dictionary_ids",
]
