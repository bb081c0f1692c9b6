# apps/cli/play.py
"""
Play the word game in the terminal.

The screen is the original single-view layout, rendered as text:
the root word as a title, the words found so far (newest first, numbered),
and the score. Rejected words show the alert title and message.

Commands at the prompt:
  :new    start a new game (new root word, score back to 0)
  :words  show the words found so far
  :quit   leave (Ctrl-D / Ctrl-C work too)

Usage:
    python -m apps.cli.play
    python -m apps.cli.play --dictionary wordlist --dict-path /usr/share/dict/words
"""

from __future__ import annotations

import argparse
import logging
import sys

from wordsmith.datasets import FileWordListProvider, DEFAULT_START_WORDS
from wordsmith.dictionary import create_dictionary, get_dictionary_ids
from wordsmith.engine import ConfigurationError, LoadError, WordGameEngine

log = logging.getLogger("wordsmith.play")


def _build_dictionary(args):
    if args.dictionary == "wordfreq":
        return create_dictionary("wordfreq", min_zipf=args.min_zipf)
    if args.dictionary == "wordlist":
        return create_dictionary("wordlist", path=args.dict_path)
    if args.dictionary == "set":
        if not args.dict_path:
            raise LoadError("the 'set' dictionary needs --dict-path")
        return create_dictionary("set", words=FileWordListProvider(args.dict_path).load())
    return create_dictionary(args.dictionary)


def _show_board(engine: WordGameEngine) -> None:
    print()
    print("=" * 40)
    print(f"  {engine.root_word.upper()}")
    print("=" * 40)
    for i, word in enumerate(engine.used_words, start=1):
        print(f"  {i}. {word}")
    print(f"  Score: {engine.score}")
    print()


def run_game(engine: WordGameEngine) -> None:
    """Prompt loop; returns when the player quits or input ends."""
    engine.start()
    _show_board(engine)

    while True:
        try:
            inp = input("  word> ")
        except (EOFError, KeyboardInterrupt):
            print()
            break

        cmd = inp.strip().lower()
        if cmd == ":quit":
            break
        if cmd == ":new":
            engine.new_game()
            _show_board(engine)
            continue
        if cmd == ":words":
            _show_board(engine)
            continue

        outcome = engine.submit(inp)
        if outcome is None:
            continue
        if outcome.accepted:
            _show_board(engine)
        else:
            print(f"  ** {outcome.title} **")
            print(f"  {outcome.message}")
            print(f"  Score: {engine.score}")

    print(f"Final score: {engine.score} ({len(engine.used_words)} words)")


def main():
    ap = argparse.ArgumentParser(description="wordsmith — make words from the root word")
    ap.add_argument("--words", default=str(DEFAULT_START_WORDS),
                    help="root word list (one word per line)")
    ap.add_argument("--dictionary", default="wordfreq",
                    help=f"dictionary backend (one of: {', '.join(get_dictionary_ids())})")
    ap.add_argument("--dict-path", default=None,
                    help="word list file for the 'wordlist' / 'set' backends")
    ap.add_argument("--min-zipf", type=float, default=1.0,
                    help="minimum Zipf frequency for the 'wordfreq' backend")
    ap.add_argument("--seed", type=int, default=None, help="RNG seed for root word picks")
    ap.add_argument("--verbose", "-v", action="store_true",
                    help="Enable debug-level logging")
    args = ap.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="[%(levelname)s] %(message)s",
    )

    try:
        dictionary = _build_dictionary(args)
        engine = WordGameEngine(FileWordListProvider(args.words), dictionary, seed=args.seed)
        run_game(engine)
    except (ConfigurationError, LoadError) as e:
        log.error("%s", e)
        sys.exit(1)


if __name__ == "__main__":
    main()
