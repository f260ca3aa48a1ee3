"""
Best-known feedback derived from the game history.

Given:
  - a history of scored guesses (oldest first)
  - a letter being typed and the position it is typed at

Return:
  - the strongest verdict the history supports for that letter there, or
    None if the letter has never been guessed.

Everything here is recomputed from the history on every call, so nothing can
go stale between guesses. Because each answer is a `max()` over the
observations, a longer history never yields a weaker verdict.
"""

from typing import Dict, Iterable, List, Optional

from .verdict import Guess, LetterVerdict

History = Iterable[Guess]


def accumulate(history: History, letter: str, position: int) -> Optional[LetterVerdict]:
    """
    Strongest verdict known for `letter` typed at `position`.

    CORRECT is only attributable when some guess had this exact letter at this
    exact position and it scored CORRECT there. A CORRECT seen at another
    position only proves the letter is in the word, so it counts as PRESENT.
    ABSENT comes straight from the evaluator's multiset pass.
    """
    letter = letter.upper()
    best: Optional[LetterVerdict] = None

    for guess in history:
        for i, scored in enumerate(guess):
            if scored.letter != letter:
                continue
            verdict = scored.verdict
            if verdict is LetterVerdict.CORRECT and i != position:
                verdict = LetterVerdict.PRESENT
            if best is None or verdict > best:
                best = verdict
            if best is LetterVerdict.CORRECT:
                return best

    return best


def pending_verdicts(history: History, text: str) -> List[Optional[LetterVerdict]]:
    """Per-character coloring for a not-yet-submitted input buffer."""
    history = list(history)
    return [accumulate(history, ch, i) for i, ch in enumerate(text)]


def letter_states(history: History) -> Dict[str, LetterVerdict]:
    """
    Strongest verdict seen per letter, ignoring position (keyboard summary).
    Priority: CORRECT > PRESENT > ABSENT, never downgraded.
    """
    states: Dict[str, LetterVerdict] = {}
    for guess in history:
        for scored in guess:
            prev = states.get(scored.letter)
            if prev is None or scored.verdict > prev:
                states[scored.letter] = scored.verdict
    return states
