from apps.cli.play import run_game
from wordsmith.dictionary import SetDictionary
from wordsmith.engine import WordGameEngine


def _feed(monkeypatch, lines):
    it = iter(lines)

    def fake_input(prompt=""):
        try:
            return next(it)
        except StopIteration:
            raise EOFError

    monkeypatch.setattr("builtins.input", fake_input)


def test_play_session_transcript(monkeypatch, capsys):
    engine = WordGameEngine(["silkworm"], SetDictionary(["silk", "worm"]), seed=0)
    _feed(monkeypatch, ["silk", "Worm", "   ", "silk", "zzz", ":quit", "never read"])

    run_game(engine)
    out = capsys.readouterr().out

    assert "SILKWORM" in out
    assert "1. worm" in out and "2. silk" in out
    assert "Word used already" in out
    assert "Word not recognized" in out
    assert "Final score: 15 (2 words)" in out


def test_play_new_game_command(monkeypatch, capsys):
    engine = WordGameEngine(["silkworm"], SetDictionary(["silk"]), seed=0)
    _feed(monkeypatch, ["silk", ":new"])

    run_game(engine)
    out = capsys.readouterr().out

    assert engine.score == 0 and engine.used_words == []
    assert "Final score: 0 (0 words)" in out
