from pathlib import Path

import pytest
from wordsmith.datasets import (
    DEFAULT_START_WORDS,
    FileWordListProvider,
    StaticWordListProvider,
    pretty_summary,
    validate_wordlist,
)
from wordsmith.dictionary import SetDictionary
from wordsmith.engine import LoadError


def _write(p: Path, lines):
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")


def test_validate_wordlist_happy_path(tmp_path: Path):
    start = tmp_path / "start.txt"
    _write(start, ["silkworm", "absolute", "academic"])

    rep = validate_wordlist(str(start))
    assert rep["passed"] is True
    assert rep["count"] == 3 and rep["unique_count"] == 3
    assert len(rep["sha256"]) == 64
    s = pretty_summary(rep)
    assert "start.txt" in s and "words=3" in s and s.endswith("OK")


def test_validate_wordlist_flags_errors(tmp_path: Path):
    start = tmp_path / "start.txt"
    # uppercase, too short, non-alpha and a blank line are all invalid
    start.write_text("silkworm\nAbsolute\nab\nsilk-worm\n\nassess\n", encoding="utf-8")

    rep = validate_wordlist(str(start))
    assert rep["passed"] is False
    assert rep["invalid_lines"] == 4
    assert any("invalid" in msg for msg in rep["issues"])


def test_validate_wordlist_duplicates(tmp_path: Path):
    start = tmp_path / "start.txt"
    _write(start, ["silkworm", "assess", "silkworm"])

    rep = validate_wordlist(str(start))
    assert rep["passed"] is False
    assert rep["count"] == 3 and rep["unique_count"] == 2
    assert any("duplicate" in msg for msg in rep["issues"])


def test_validate_wordlist_missing_file(tmp_path: Path):
    rep = validate_wordlist(str(tmp_path / "missing.txt"))
    assert rep["exists"] is False and rep["passed"] is False
    assert "FAIL" in pretty_summary(rep)


def test_validate_wordlist_reports_unknown_words(tmp_path: Path):
    start = tmp_path / "start.txt"
    _write(start, ["silkworm", "qwzxvbnm"])

    rep = validate_wordlist(str(start), dictionary=SetDictionary(["silkworm"]))
    assert rep["unknown_words"] == ["qwzxvbnm"]
    assert rep["passed"] is True  # unknown words are a warning only
    assert "unknown=1" in pretty_summary(rep)


def test_bundled_start_words_pass_validation():
    rep = validate_wordlist(str(DEFAULT_START_WORDS))
    assert rep["passed"] is True, rep["issues"]


def test_file_provider_cleans_lines(tmp_path: Path):
    start = tmp_path / "start.txt"
    start.write_text("Silkworm\r\n  assess \n\n", encoding="utf-8")
    assert FileWordListProvider(start).load() == {"silkworm", "assess"}


def test_file_provider_missing_file_raises(tmp_path: Path):
    with pytest.raises(LoadError):
        FileWordListProvider(tmp_path / "start.txt").load()


def test_static_provider_returns_copy():
    p = StaticWordListProvider(["silkworm"])
    words = p.load()
    words.add("assess")
    assert p.load() == {"silkworm"}
