import random

import pytest
from wordsmith.dictionary import SetDictionary
from wordsmith.engine import (
    Accepted,
    ConfigurationError,
    GameState,
    RejectedDuplicate,
    RejectedImpossibleLetters,
    RejectedNotAWord,
    is_possible,
    new_game,
    normalize,
    start_game,
    submit,
)

WORDS = ["silk", "work", "worm", "milk", "skim", "ski", "silkworm", "assess", "sass", "seas"]


def _state(root):
    return GameState(root_word=root, candidate_root_words={root})


# --- letter feasibility (multiset) ---
@pytest.mark.parametrize("word,root,expected", [
    ("sass", "assess", True),
    ("seas", "assess", True),
    ("sassy", "assess", False),
    ("eases", "assess", False),   # two e's, root has one
    ("silk", "silkworm", True),
    ("worms", "silkworm", True),
    ("rooms", "silkworm", False),  # two o's, root has one
    ("mill", "silkworm", False),  # one l in the root
    ("", "silkworm", True),
])
def test_is_possible(word, root, expected):
    assert is_possible(word, root) is expected


def test_normalize_lowercases_and_trims():
    assert normalize("  SiLK \n") == "silk"
    assert normalize(" \t ") == ""


# --- the silkworm scenario ---
def test_silkworm_scenario():
    d = SetDictionary(WORDS)
    s = _state("silkworm")

    out = submit("silk", s, d)
    assert isinstance(out, Accepted)
    assert s.score == 10 and s.used_words == ["silk"]

    out = submit("silk", s, d)
    assert isinstance(out, RejectedDuplicate)
    assert s.score == 8 and s.used_words == ["silk"]

    # 'xyz' isn't spelled from silkworm either, so feasibility catches it first
    out = submit("xyz", s, d)
    assert isinstance(out, RejectedImpossibleLetters)
    assert s.score == 5


def test_silkworm_scenario_with_feasible_non_word():
    d = SetDictionary(WORDS)
    s = _state("silkworm")
    submit("silk", s, d)
    submit("silk", s, d)
    out = submit("lorm", s, d)  # spelled from silkworm, not a word
    assert isinstance(out, RejectedNotAWord)
    assert s.score == 3 and s.used_words == ["silk"]


def test_not_a_word_penalty():
    d = SetDictionary(WORDS)
    s = _state("silkworm")
    out = submit("wilk", s, d)  # feasible, unknown to the dictionary
    assert isinstance(out, RejectedNotAWord)
    assert s.score == -5 and s.used_words == []


def test_accepted_words_are_newest_first():
    d = SetDictionary(WORDS)
    s = _state("silkworm")
    for w in ["silk", "WORM", "  milk "]:
        assert submit(w, s, d).accepted
    assert s.used_words == ["milk", "worm", "silk"]
    assert s.score == 30


def test_duplicate_is_case_insensitive():
    d = SetDictionary(WORDS)
    s = _state("silkworm")
    submit("silk", s, d)
    out = submit("SILK", s, d)
    assert isinstance(out, RejectedDuplicate)
    assert out.delta == -2


def test_root_word_always_rejected():
    d = SetDictionary(WORDS)  # 'silkworm' is a valid dictionary word
    s = _state("silkworm")
    out = submit("Silkworm", s, d)
    assert isinstance(out, RejectedNotAWord)
    assert s.score == -5


def test_short_words_rejected_without_dictionary_lookup():
    d = SetDictionary(["is", "ok"])
    s = _state("silkworm")
    out = submit("ok", s, d)
    assert isinstance(out, RejectedNotAWord)
    assert d.queries == 0


def test_dictionary_queried_with_english_locale():
    d = SetDictionary(WORDS, locale="fr")
    s = _state("silkworm")
    assert isinstance(submit("silk", s, d), RejectedNotAWord)


@pytest.mark.parametrize("raw", ["", "   ", "\n\t"])
def test_blank_input_is_a_noop(raw):
    d = SetDictionary(WORDS)
    s = _state("silkworm")
    submit("silk", s, d)
    assert submit(raw, s, d) is None
    assert s.score == 10 and s.used_words == ["silk"]


def test_repeated_invalid_word_penalized_each_time():
    d = SetDictionary(WORDS)
    s = _state("silkworm")
    first = submit("zoom", s, d)
    second = submit("zoom", s, d)
    assert type(first) is type(second) is RejectedImpossibleLetters
    assert s.score == -6
    assert s.used_words == []


def test_multiplicity_against_assess():
    d = SetDictionary(WORDS)
    s = _state("assess")
    assert isinstance(submit("sass", s, d), Accepted)
    assert isinstance(submit("sassy", s, d), RejectedImpossibleLetters)
    assert s.score == 7


def test_duplicate_checked_before_length():
    # A used short word can only be a duplicate, never "not a word"
    d = SetDictionary(WORDS)
    s = _state("silkworm")
    s.used_words.append("ok")
    assert isinstance(submit("ok", s, d), RejectedDuplicate)


def test_outcome_alert_text():
    assert RejectedDuplicate("x").title == "Word used already"
    assert RejectedDuplicate("x").message == "Be more original. You lose 2 score points."
    assert RejectedImpossibleLetters("x").delta == -3
    assert RejectedNotAWord("x").delta == -5
    assert "shorter than 3 letters" in RejectedNotAWord("x").message
    assert Accepted("x").delta == 10 and Accepted("x").kind == "accepted"


# --- start / new game ---
def test_start_game_picks_from_pool():
    pool = {"silkworm", "assess", "absolute"}
    s = start_game(pool, random.Random(3))
    assert s.root_word in pool
    assert s.used_words == [] and s.score == 0


def test_start_game_is_reproducible_with_seed():
    pool = {"silkworm", "assess", "absolute", "academic"}
    a = start_game(pool, random.Random(11)).root_word
    b = start_game(set(sorted(pool, reverse=True)), random.Random(11)).root_word
    assert a == b


@pytest.mark.parametrize("pool", [set(), {""}, ["", "  "]])
def test_start_game_falls_back_to_default_word(pool):
    assert start_game(pool).root_word == "silkworm"


def test_start_game_without_pool_is_fatal():
    with pytest.raises(ConfigurationError):
        start_game(None)


def test_new_game_resets_score_and_keeps_pool():
    d = SetDictionary(WORDS)
    s = start_game({"silkworm"})
    submit("silk", s, d)
    submit("zzz", s, d)
    s2 = new_game(s)
    assert s2.score == 0 and s2.used_words == []
    assert s2.candidate_root_words == {"silkworm"}
    assert s2.root_word == "silkworm"
