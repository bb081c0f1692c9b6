"""
Fixed-set dictionary.

Knows exactly the words it was given (case-insensitive) and only for one
locale. Handy for tests and for small curated games.
"""

from __future__ import annotations

from typing import Iterable

from wordsmith.engine.rules import DEFAULT_LOCALE
from .base import BaseDictionary, register


@register
class SetDictionary(BaseDictionary):
    id = "set"
    name = "Fixed word set"

    def __init__(self, words: Iterable[str] = (), locale: str = DEFAULT_LOCALE):
        self.words = {w.strip().lower() for w in words if w.strip()}
        self.locale = locale
        self.queries = 0  # lookups served; lets callers check short-circuiting

    def is_valid_word(self, word: str, locale: str = DEFAULT_LOCALE) -> bool:
        self.queries += 1
        return locale == self.locale and word.lower() in self.words

    def __len__(self) -> int:
        return len(self.words)
