"""
Root-word list validator.

What this module does:
- Validate a root-word file (one word per line) before a game or batch run.
- Enforce formatting rules (lowercase, a–z only, at least `min_length` letters).
- Detect duplicates and invalid lines; compute SHA-256 of the raw file.
- Optionally check every word against a dictionary (a root word the
  dictionary doesn't know is playable but suspicious).
- Return a machine-readable dict (for manifests) and provide a pretty one-line summary.

Typical use:
    from wordsmith.datasets import validate_wordlist, pretty_summary
    rep = validate_wordlist("wordsmith/datasets/data/start.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict, field
from pathlib import Path
from typing import Dict, List, Tuple
import hashlib

from wordsmith.engine.rules import MIN_WORD_LENGTH, DEFAULT_LOCALE


# -----------------------------
# Dataclass for the structured report
# -----------------------------

@dataclass
class WordListReport:
    path: str            # file path (as given)
    exists: bool         # did the file exist on disk?
    count: int           # number of VALID words after cleaning
    sha256: str          # SHA-256 of raw file bytes (empty string if missing)
    unique_count: int    # unique valid words (after dedupe)
    invalid_lines: int   # number of invalid lines encountered
    passed: bool
    issues: List[str]    # human-friendly list of problems (if any)
    unknown_words: List[str] = field(default_factory=list)  # only with a dictionary


# -----------------------------
# Helpers
# -----------------------------

def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _load_and_check(path: Path, min_length: int) -> Tuple[List[str], int]:
    """
    Rules:
      - one token per line
      - must be lowercase a–z
      - at least `min_length` letters
      - empty/whitespace-only lines are INVALID

    Returns:
      (valid_words, invalid_count)
    """
    valid: List[str] = []
    invalid = 0

    with path.open("r", encoding="utf-8") as f:
        for raw in f:
            w = raw.strip()
            if not w:
                invalid += 1
                continue
            if w == w.lower() and w.isalpha() and len(w) >= min_length:
                valid.append(w)
            else:
                invalid += 1

    return valid, invalid


# -----------------------------
# Public API
# -----------------------------

def validate_wordlist(path: str, *, min_length: int = MIN_WORD_LENGTH,
                      dictionary=None, locale: str = DEFAULT_LOCALE) -> Dict:
    """
    Validate a root-word list.

    Parameters
    ----------
    path : str
        Path to the word list (one word per line).
    min_length : int
        Shortest acceptable root word.
    dictionary : optional
        Anything with is_valid_word(word, locale); words it rejects are
        listed under `unknown_words` and reported as an issue.

    Returns
    -------
    Dict
        JSON-serializable report (see WordListReport). `passed` is strict:
        the file must exist, be non-empty and contain no invalid lines or
        duplicates. Unknown words are reported but do not fail the list.
    """
    issues: List[str] = []
    p = Path(path)

    if not p.exists():
        issues.append(f"word list not found: {path}")
        rep = WordListReport(path, False, 0, "", 0, 0, False, issues)
        return asdict(rep)

    words, invalid = _load_and_check(p, min_length)
    unique = set(words)

    if not words:
        issues.append("word list contains 0 valid words")
    if invalid:
        issues.append(f"word list has {invalid} invalid line(s)")
    if len(words) != len(unique):
        issues.append("word list contains duplicate lines")

    unknown: List[str] = []
    if dictionary is not None:
        unknown = sorted(w for w in unique if not dictionary.is_valid_word(w, locale))
        if unknown:
            issues.append(f"{len(unknown)} word(s) unknown to the dictionary (e.g., {unknown[:5]})")

    passed = bool(words) and invalid == 0 and len(words) == len(unique)

    rep = WordListReport(
        path=str(p),
        exists=True,
        count=len(words),
        sha256=_sha256_file(p),
        unique_count=len(unique),
        invalid_lines=invalid,
        passed=passed,
        issues=issues,
        unknown_words=unknown,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Produce a compact, human-friendly one-liner for console/docs.

    Example:
        start.txt: words=265 (uniq=265, invalid=0, sha=abc123...) | OK
    """
    status = "OK" if report["passed"] else "FAIL"
    name = Path(report["path"]).name
    sha = (report.get("sha256") or "")[:12]
    line = (
        f"{name}: words={report['count']} (uniq={report['unique_count']}, "
        f"invalid={report['invalid_lines']}, sha={sha}) | {status}"
    )
    if report.get("unknown_words"):
        line += f" | unknown={len(report['unknown_words'])}"
    return line
