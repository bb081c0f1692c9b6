"""
Autoplay harness core primitives.

- run_case:  play one round (one fixed root word) with a given solver.
- run_batch: play many rounds in sequence (optionally a sample prefix).
- Caps each round at `max_turns` submissions at the harness layer.

The harness drives the same engine functions a human front-end uses
(start_game / submit), so solver results are scored exactly like play.
These functions are UI-agnostic so they can be reused by a CLI app,
a notebook, or tests without changes.
"""

from __future__ import annotations
import random
import time
from typing import Dict, List, Iterable, Tuple

from wordsmith.engine import GameState, submit
from wordsmith.engine.rules import normalize

# Default submission budget per round.
DEFAULT_MAX_TURNS = 25


def _assert_turns(max_turns: int) -> None:
    """Guardrail: a round needs at least one turn."""
    if max_turns < 1:
        raise ValueError(f"max_turns must be >= 1; got {max_turns}")


def run_case(
        solver,
        root_word: str,
        *,
        dictionary,
        lexicon: Iterable[str],
        max_turns: int = DEFAULT_MAX_TURNS,
        seed: int | None = None,
) -> Dict:
    """
    Play one round until the solver gives up or the turn budget is spent.

    Args:
        solver:     an object implementing BaseSolver with next_word(state)
        root_word:  the root word for this round
        dictionary: Dictionary capability the engine validates against
        lexicon:    words the solver may draw submissions from
        max_turns:  submission budget for the round
        seed:       RNG seed to make solver choices reproducible

    Returns:
        dict with keys:
            root_word (str), score (int), accepted (int), rejected (int),
            turns (int), time_ms (float), history (list[(word, kind, delta)])
    """
    _assert_turns(max_turns)

    solver.reset(lexicon=list(lexicon), seed=seed)

    root = normalize(root_word)
    state = GameState(root_word=root, candidate_root_words={root})

    # History accumulates (word, outcome kind, score delta) for reports
    history: List[Tuple[str, str, int]] = []
    tried: List[str] = []
    accepted = 0

    t0 = time.time()
    for turn in range(1, max_turns + 1):
        view = {
            "turn": turn,
            "root_word": state.root_word,
            "used_words": list(state.used_words),
            "tried_words": list(tried),
            "score": state.score,
            "rng": solver.rng,
        }

        word = solver.next_word(view)
        if word is None:
            break

        outcome = submit(word, state, dictionary)
        if outcome is None:
            # blank submission; counts as a spent turn but scores nothing
            continue
        tried.append(outcome.word)
        history.append((outcome.word, outcome.kind, outcome.delta))
        if outcome.accepted:
            accepted += 1

    dt = (time.time() - t0) * 1000.0
    return {
        "root_word": root,
        "score": state.score,
        "accepted": accepted,
        "rejected": len(history) - accepted,
        "turns": len(history),
        "time_ms": dt,
        "history": history,
    }


def run_batch(
        solver,
        root_words: List[str],
        *,
        dictionary,
        lexicon: List[str],
        max_turns: int = DEFAULT_MAX_TURNS,
        seed: int | None = None,
        sample: int | None = None,
) -> List[Dict]:
    """
    Play many rounds back-to-back. If 'sample' is provided, a seeded random
    subset of K root words is used to speed up quick experiments.

    Each case's seed is derived from the base seed to make runs reproducible
    but not identical across cases (seed + index).
    """
    _assert_turns(max_turns)

    pool = sorted({normalize(w) for w in root_words if w.strip()})
    if sample is not None and sample < len(pool):
        rng = random.Random(seed)
        pool = rng.sample(pool, sample)

    out: List[Dict] = []
    for idx, root in enumerate(pool, start=1):
        case_seed = None if seed is None else (seed + idx)
        r = run_case(
            solver, root, dictionary=dictionary, lexicon=lexicon,
            max_turns=max_turns, seed=case_seed
        )
        out.append(r)
    return out
