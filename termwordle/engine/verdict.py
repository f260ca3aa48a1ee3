"""
Verdict types shared by the evaluator, the knowledge accumulator and the UI.

Conventions (same glyphs the pattern strings use):
  - 'G' / 🟩 : CORRECT = letter in the correct position
  - 'Y' / 🟨 : PRESENT = letter in the word, wrong position
  - '-' / ⬜ : ABSENT  = letter not present (or present fewer times than guessed)

The strength order ABSENT < PRESENT < CORRECT is the IntEnum value order, so
`max()` over verdicts is the monotone upgrade everywhere.
"""

from __future__ import annotations

from enum import IntEnum
from typing import NamedTuple, Tuple

WORD_LENGTH = 5


class LetterVerdict(IntEnum):
    ABSENT = 0
    PRESENT = 1
    CORRECT = 2

    @property
    def glyph(self) -> str:
        return _GLYPHS[self]

    @property
    def emoji(self) -> str:
        return _EMOJI[self]


_GLYPHS = {
    LetterVerdict.ABSENT: "-",
    LetterVerdict.PRESENT: "Y",
    LetterVerdict.CORRECT: "G",
}

_EMOJI = {
    LetterVerdict.ABSENT: "⬜",
    LetterVerdict.PRESENT: "\U0001f7e8",
    LetterVerdict.CORRECT: "\U0001f7e9",
}


class ScoredLetter(NamedTuple):
    """One typed letter and the verdict it earned."""
    letter: str
    verdict: LetterVerdict


# A scored guess: exactly WORD_LENGTH letters in typed order.
Guess = Tuple[ScoredLetter, ...]


def is_solved(guess: Guess) -> bool:
    """True if every letter of `guess` is CORRECT."""
    return len(guess) == WORD_LENGTH and all(s.verdict is LetterVerdict.CORRECT for s in guess)


def word_of(guess: Guess) -> str:
    return "".join(s.letter for s in guess)
