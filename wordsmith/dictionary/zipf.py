"""
Dictionary backed by the `wordfreq` corpus.

A word counts as real when its Zipf frequency in the requested language is
at least `min_zipf`. Zipf is log10 of occurrences per billion words, so
1.0 is roughly "seen once per hundred million words"; unknown strings score 0.
Raise the threshold to reject rare or obscure words.

Only languages wordfreq ships a list for are answered; any other locale is
"not a word" rather than a nearest-match guess or an exception.
"""

from __future__ import annotations

from functools import lru_cache

from wordfreq import available_languages, zipf_frequency

from wordsmith.engine.rules import DEFAULT_LOCALE
from .base import BaseDictionary, register


@lru_cache(maxsize=1)
def _languages() -> frozenset:
    return frozenset(available_languages())


@lru_cache(maxsize=50000)
def _zipf(word: str, locale: str) -> float:
    """Cached Zipf frequency lookup."""
    return zipf_frequency(word, locale)


@register
class WordfreqDictionary(BaseDictionary):
    id = "wordfreq"
    name = "wordfreq corpus (Zipf threshold)"

    def __init__(self, min_zipf: float = 1.0):
        self.min_zipf = float(min_zipf)

    def is_valid_word(self, word: str, locale: str = DEFAULT_LOCALE) -> bool:
        w = word.strip().lower()
        if not w.isalpha() or locale not in _languages():
            return False
        try:
            return _zipf(w, locale) >= self.min_zipf
        except (LookupError, ValueError):
            return False
