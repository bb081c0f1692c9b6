from .validator import validate_wordlist, pretty_summary
from .wordlist import (
    WordListProvider,
    FileWordListProvider,
    StaticWordListProvider,
    default_provider,
    read_lines,
    DEFAULT_START_WORDS,
)

__all__ = [
    "validate_wordlist", "pretty_summary",
    "WordListProvider", "FileWordListProvider", "StaticWordListProvider",
    "default_provider", "read_lines", "DEFAULT_START_WORDS",
]
