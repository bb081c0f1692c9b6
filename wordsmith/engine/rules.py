"""
Rule predicates for a single submission.

A candidate word scores only if it passes, in this order:
  1) originality  : not already in the used-words list
  2) feasibility  : its letters are a sub-multiset of the root word's letters
  3) realness     : >= MIN_WORD_LENGTH letters, not the root word itself,
                    and known to the dictionary for the given locale

All predicates expect an already-normalized word (see `normalize`).
The engine calls them in the order above; solvers reuse them to filter
their lexicon down to words worth submitting.
"""

from collections import Counter
from typing import Iterable

# Single source of truth for scoring and rule constants.
ACCEPT_POINTS = 10
DUPLICATE_PENALTY = 2
IMPOSSIBLE_PENALTY = 3
NOT_A_WORD_PENALTY = 5

MIN_WORD_LENGTH = 3
DEFAULT_ROOT_WORD = "silkworm"
DEFAULT_LOCALE = "en"


def normalize(raw: str) -> str:
    """Lowercase and trim; an empty result means 'nothing submitted'."""
    return raw.lower().strip()


def is_original(word: str, used_words: Iterable[str]) -> bool:
    return word not in used_words


def is_possible(word: str, root_word: str) -> bool:
    """
    True if `word` can be spelled with the letters of `root_word`,
    each root letter usable at most as many times as it appears.

    Examples:
      is_possible("sass", "assess")  -> True   (needs s*3, a*1; root has s*4, a*1)
      is_possible("sassy", "assess") -> False  (no 'y')
      is_possible("seas", "assess")  -> True
      is_possible("eases", "assess") -> False  (needs e*2; root has e*1)
    """
    remaining = Counter(root_word)
    for ch in word:
        if remaining[ch] <= 0:
            return False
        remaining[ch] -= 1  # consume one instance
    return True


def is_real(word: str, root_word: str, dictionary, locale: str = DEFAULT_LOCALE) -> bool:
    """
    True if `word` is long enough, differs from the root word and the
    dictionary knows it. The dictionary is only queried when the cheap
    checks pass.
    """
    if len(word) < MIN_WORD_LENGTH or word == root_word:
        return False
    return bool(dictionary.is_valid_word(word, locale))
