"""Dictionary backed by a newline-separated word list file."""

from __future__ import annotations

import logging
import os

from wordsmith.engine.errors import LoadError
from wordsmith.engine.rules import DEFAULT_LOCALE
from .base import BaseDictionary, register

log = logging.getLogger("wordsmith.dictionary")

SEARCH_PATHS = [
    "words.txt",
    "dictionary.txt",
    "/usr/share/dict/words",
]


@register
class WordListDictionary(BaseDictionary):
    """Set lookup over the first word list found on the search path."""
    id = "wordlist"
    name = "Word list file"

    def __init__(self, path: str | None = None, locale: str = DEFAULT_LOCALE):
        self.locale = locale
        self.words: set[str] = set()
        self.path = self._load(path)

    def _load(self, path: str | None) -> str:
        search_paths: list[str] = []
        if path:
            if not os.path.exists(path):
                log.warning("Dictionary file %s not found -- falling back to the default search path", path)
            search_paths.append(path)
        search_paths.extend(SEARCH_PATHS)

        for candidate in search_paths:
            if not os.path.exists(candidate):
                continue
            try:
                with open(candidate, "r", encoding="utf-8", errors="ignore") as f:
                    for line in f:
                        word = line.strip().lower()
                        if word.isalpha():
                            self.words.add(word)
            except OSError as e:
                raise LoadError(f"cannot read dictionary {candidate}: {e}") from e
            if self.words:
                log.info("Loaded %s words from %s", f"{len(self.words):,}", candidate)
                return candidate
            log.warning("Dictionary file %s holds no usable words, skipping", candidate)

        raise LoadError(f"no dictionary word list found (searched: {', '.join(search_paths)})")

    def is_valid_word(self, word: str, locale: str = DEFAULT_LOCALE) -> bool:
        return locale == self.locale and word.lower() in self.words

    def __len__(self) -> int:
        return len(self.words)
