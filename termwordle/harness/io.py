"""
Result persistence for finished games.

Responsibilities:
- emoji_rows:        one ⬜/🟨/🟩 row per scored guess (shareable summary).
- write_play_state:  record today's solution and rows once a game finishes.
- load_play_state:   read that record back so a day can't be replayed.

File format (UTF-8 text):
    line 1     : the solution
    lines 2..n : emoji rows, one per guess
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional

from termwordle.engine import Guess

DEFAULT_STATE = ".play.state.txt"


@dataclass(frozen=True)
class PlayRecord:
    solution: str
    rows: List[str]


def emoji_rows(guesses: Iterable[Guess]) -> List[str]:
    """
    Example: a winning second guess after "SLATE" on "CRANE" ->
      ["⬜⬜🟩⬜🟩", "🟩🟩🟩🟩🟩"]
    """
    return ["".join(s.verdict.emoji for s in g) for g in guesses]


def write_play_state(path: Path | str, solution: str, rows: List[str]) -> str:
    """
    Write the play record for `solution`. Returns the path written.
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text("\n".join([solution.upper(), *rows]), encoding="utf-8")
    return str(p)


def load_play_state(path: Path | str) -> Optional[PlayRecord]:
    """
    Read a play record; None if the file is missing or empty.
    """
    p = Path(path)
    if not p.exists():
        return None
    lines = p.read_text(encoding="utf-8").splitlines()
    if not lines or not lines[0].strip():
        return None
    return PlayRecord(solution=lines[0].strip().upper(), rows=[ln for ln in lines[1:] if ln])
