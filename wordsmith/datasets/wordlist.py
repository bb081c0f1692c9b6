"""
Root-word pool providers.

A provider has a single job: `load() -> set[str]` of candidate root words,
raising LoadError if the list is unavailable. The engine calls it once at
startup; "new game" reuses the loaded pool.

Words are stripped and lowercased; blank lines are dropped (a trailing
newline in the file must not become a root word).
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List, Set

from wordsmith.engine.errors import LoadError

log = logging.getLogger("wordsmith.datasets")

DATA_DIR = Path(__file__).parent / "data"
DEFAULT_START_WORDS = DATA_DIR / "start.txt"


def read_lines(p: Path | str) -> List[str]:
    """
    Read a UTF-8 text file into a list of lines, stripping trailing CR/LF.
    Raises LoadError if the path doesn't exist or can't be read.
    """
    p = Path(p)
    if not p.exists():
        raise LoadError(f"word list not found: {p}")
    try:
        text = p.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise LoadError(f"cannot read word list {p}: {e}") from e
    return [ln.rstrip("\r\n") for ln in text.splitlines()]


def clean_words(lines: Iterable[str]) -> Set[str]:
    return {w.strip().lower() for w in lines if w.strip()}


class WordListProvider:
    def load(self) -> Set[str]:
        raise NotImplementedError("Override in subclass")


class FileWordListProvider(WordListProvider):
    """Newline-separated word file, one root word per line."""

    def __init__(self, path: Path | str):
        self.path = Path(path)

    def load(self) -> Set[str]:
        words = clean_words(read_lines(self.path))
        log.info("Loaded %d root words from %s", len(words), self.path)
        return words

    def __repr__(self) -> str:
        return f"FileWordListProvider({str(self.path)!r})"


class StaticWordListProvider(WordListProvider):
    """In-memory pool, e.g. for tests or a fixed tournament list."""

    def __init__(self, words: Iterable[str]):
        self.words = clean_words(words)

    def load(self) -> Set[str]:
        return set(self.words)


def default_provider() -> FileWordListProvider:
    """Provider for the root words bundled with the package."""
    return FileWordListProvider(DEFAULT_START_WORDS)
