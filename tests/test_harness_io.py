from pathlib import Path

from termwordle.engine import evaluate
from termwordle.harness import emoji_rows, load_play_state, write_play_state


def test_emoji_rows():
    rows = emoji_rows([evaluate("CRANE", "SLATE"), evaluate("CRANE", "CRANE")])
    assert rows == ["⬜⬜🟩⬜🟩", "🟩🟩🟩🟩🟩"]


def test_play_state_round_trip(tmp_path: Path):
    p = tmp_path / ".play.state.txt"
    assert load_play_state(p) is None

    write_play_state(p, "crane", ["⬜⬜🟩⬜🟩", "🟩🟩🟩🟩🟩"])
    rec = load_play_state(p)
    assert rec.solution == "CRANE"
    assert rec.rows == ["⬜⬜🟩⬜🟩", "🟩🟩🟩🟩🟩"]


def test_empty_play_state_is_ignored(tmp_path: Path):
    p = tmp_path / ".play.state.txt"
    p.write_text("", encoding="utf-8")
    assert load_play_state(p) is None
