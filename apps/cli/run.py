# apps/cli/run.py
"""
CLI entry point for autoplay experiments.

This script:
  1) Validates the root-word list (prints counts + SHA, flags bad lines).
  2) Loads the root words, the solver lexicon and the dictionary, and
     instantiates the requested solver.
  3) Plays one round per root word with a live progress indicator and writes:
       - CSV:  per-round results + transcript column
       - JSON: manifest with config, word-list hash, git commit, totals
"""

from __future__ import annotations

import argparse
import logging
import random
import sys
import time
from pathlib import Path

from tqdm import tqdm

from wordsmith.datasets import (
    DEFAULT_START_WORDS,
    FileWordListProvider,
    pretty_summary,
    validate_wordlist,
)
from wordsmith.dictionary import create_dictionary, get_dictionary_ids
from wordsmith.engine import LoadError
from wordsmith.harness import DEFAULT_MAX_TURNS, run_case
from wordsmith.harness.io import write_csv, write_manifest, timestamp_id, git_commit_or_unknown
from wordsmith.solvers import create_solver, get_solver_ids

log = logging.getLogger("wordsmith.run")


def main():
    """
    Parse CLI args, validate the word list, run the batch with progress, and write outputs.
    """
    ap = argparse.ArgumentParser(description="wordsmith — run autoplay experiments")
    ap.add_argument("--solver", default="longest_first",
                    help=f"solver id (one of: {', '.join(get_solver_ids())})")
    ap.add_argument("--words", default=str(DEFAULT_START_WORDS),
                    help="root word list (one word per line)")
    ap.add_argument("--lexicon", required=True,
                    help="word list the solver draws submissions from")
    ap.add_argument("--dictionary", default="wordfreq",
                    help=f"dictionary backend (one of: {', '.join(get_dictionary_ids())})")
    ap.add_argument("--dict-path", default=None,
                    help="word list file for the 'wordlist' backend (default: --lexicon)")
    ap.add_argument("--min-zipf", type=float, default=1.0,
                    help="minimum Zipf frequency for the 'wordfreq' backend")
    ap.add_argument("--max-turns", type=int, default=DEFAULT_MAX_TURNS,
                    help="submission budget per round")
    ap.add_argument("--sample", type=int,
                    help="play only a subset of root words (deterministic by seed)")
    ap.add_argument("--seed", type=int, default=123, help="base RNG seed (for reproducibility)")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument(
        "--progress",
        choices=["auto", "bar", "plain", "off"],
        default="auto",
        help="Show run progress (auto=bar on a terminal, else plain text)."
    )
    ap.add_argument("--verbose", "-v", action="store_true",
                    help="Enable debug-level logging")
    args = ap.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="[%(levelname)s] %(message)s",
    )

    # 1) Validate the root word list and print a one-liner summary
    rep = validate_wordlist(args.words)
    print(pretty_summary(rep))
    for issue in rep["issues"]:
        log.warning("%s", issue)

    # 2) Load lists and the dictionary; a missing list is fatal here
    try:
        root_words = sorted(FileWordListProvider(args.words).load())
        lexicon = sorted(FileWordListProvider(args.lexicon).load())
        if args.dictionary == "wordfreq":
            dictionary = create_dictionary("wordfreq", min_zipf=args.min_zipf)
        elif args.dictionary == "wordlist":
            dictionary = create_dictionary("wordlist", path=args.dict_path or args.lexicon)
        elif args.dictionary == "set":
            dictionary = create_dictionary("set", words=lexicon)
        else:
            dictionary = create_dictionary(args.dictionary)
    except LoadError as e:
        log.error("%s", e)
        sys.exit(1)

    # 3) Instantiate solver by id
    solver = create_solver(args.solver)

    # 4) Choose cases (deterministic sample by seed)
    rng = random.Random(args.seed)
    if args.sample and args.sample < len(root_words):
        cases = rng.sample(root_words, args.sample)
    else:
        cases = list(root_words)

    total = len(cases)

    # 5) Progress mode
    mode = args.progress
    if mode == "auto":
        mode = "bar" if sys.stderr.isatty() else "plain"

    results = []
    start = time.time()
    last_print = 0.0

    iterator = tqdm(cases, ncols=80, desc="Playing", unit="round") if mode == "bar" else cases

    # 6) Run batch with live progress
    for idx, root in enumerate(iterator, 1):
        r = run_case(
            solver,
            root,
            dictionary=dictionary,
            lexicon=lexicon,
            max_turns=args.max_turns,
            seed=args.seed + idx,
        )
        r["solver_id"] = solver.id  # stamp id for downstream tools
        results.append(r)

        if mode == "plain":
            now = time.time()
            if (now - last_print >= 1.0) or (idx == total):
                elapsed = now - start
                pct = 100.0 * idx / max(1, total)
                sys.stderr.write(f"\r[{idx}/{total}] {pct:5.1f}% | elapsed {elapsed:6.1f}s")
                sys.stderr.flush()
                last_print = now

    if mode == "plain":
        sys.stderr.write("\n")
        sys.stderr.flush()

    # 7) Write outputs (CSV + manifest)
    run_id = timestamp_id()
    outdir = Path(args.outdir)
    outdir.mkdir(parents=True, exist_ok=True)

    csv_path = outdir / f"run_{run_id}.csv"
    manifest_path = outdir / f"run_{run_id}_manifest.json"

    write_csv(results, str(csv_path))
    total_score = sum(r["score"] for r in results)
    manifest = {
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": vars(args),
        "wordlist": rep,
        "num_cases": len(results),
        "solver_id": solver.id,
        "total_score": total_score,
        "mean_score": (total_score / len(results)) if results else 0.0,
    }
    write_manifest(manifest, str(manifest_path))

    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")


if __name__ == "__main__":
    main()
