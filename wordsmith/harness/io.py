"""
I/O utilities for autoplay runs.

Responsibilities:
- write_csv:     flatten per-round results into a tidy CSV (one row per round).
- write_manifest:dump a JSON manifest with config, hashes, and metadata.
- timestamp_id:  stable UTC run ID string.
- git_commit_or_unknown: best-effort short commit hash for reproducibility.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List
import csv
import json
import subprocess
import datetime as dt


def _format_history(history) -> str:
    """
    Compact transcript for one CSV cell, e.g. "silk:+10 silk:-2 xyz:-5".
    """
    return " ".join(f"{w}:{delta:+d}" for w, _kind, delta in history)


def write_csv(results: List[Dict], path: str) -> str:
    """
    Serialize a batch of round results to CSV.

    Schema (columns):
      solver, root_word, score, accepted, rejected, turns, time_ms,
      accepted_words, transcript

    Returns:
      The path written (string).
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    fields = ["solver", "root_word", "score", "accepted", "rejected", "turns",
              "time_ms", "accepted_words", "transcript"]

    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=fields)
        w.writeheader()

        for r in results:
            hist = r.get("history", [])
            w.writerow({
                "solver": r.get("solver_id", "?"),
                "root_word": r["root_word"],
                "score": r["score"],
                "accepted": r["accepted"],
                "rejected": r["rejected"],
                "turns": r["turns"],
                "time_ms": round(float(r["time_ms"]), 3),
                "accepted_words": " ".join(word for word, kind, _ in hist if kind == "accepted"),
                "transcript": _format_history(hist),
            })

    return str(p)


def write_manifest(manifest: Dict, path: str) -> str:
    """
    Write a JSON manifest with run configuration and word-list validation summary.

    Typical keys:
      - run_id, git_commit
      - config: CLI args (solver, dictionary, paths, seed, sample, outdir)
      - wordlist: output of datasets.validate_wordlist(...)
      - num_cases, total_score
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        json.dump(manifest, f, indent=2)
    return str(p)


def timestamp_id() -> str:
    """
    Return a compact UTC timestamp suitable for filenames, e.g. 20250820T024121Z.
    """
    return dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def git_commit_or_unknown() -> str:
    """
    Best-effort short git hash of the current repo state.
    Returns 'unknown' if git is not available or the call fails.
    """
    try:
        return (
            subprocess.check_output(
                ["git", "rev-parse", "--short", "HEAD"],
                stderr=subprocess.DEVNULL,
            )
            .decode()
            .strip()
        )
    except (OSError, subprocess.CalledProcessError):
        return "unknown"
