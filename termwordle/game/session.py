"""
Game session: the state machine behind one day's puzzle.

- type_character / backspace edit the pending input buffer.
- submit scores the buffer, records the guess and checks for win/loss.
- handle dispatches decoded input events to the methods above.
- Enforces Wordle's 6-turn limit.

The session is UI-agnostic. A renderer reads `guesses`, `pending_input` and
the knowledge queries; it never mutates anything.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Dict, Iterable, List, Optional, Tuple

from termwordle.engine import (
    WORD_LENGTH,
    Guess,
    LetterVerdict,
    accumulate,
    evaluate,
    is_letter,
    is_solved,
    letter_states,
    pending_verdicts,
    validate_guess,
)
from .events import Backspace, InputEvent, Quit, Submit, TypeChar

log = logging.getLogger(__name__)

# Single source of truth for Wordle turn budget.
MAX_TURNS = 6


class GameState(Enum):
    IN_PROGRESS = "in_progress"
    WON = "won"
    LOST = "lost"


class GameSession:
    """
    One game against a fixed secret.

    Args:
        secret:    the word being guessed (5 ASCII letters, any case)
        word_list: every word accepted as a guess (any case)

    Raises:
        ValueError if the secret is malformed or the word list is empty.
    """

    def __init__(self, secret: str, word_list: Iterable[str]):
        secret = secret.strip().upper()
        if len(secret) != WORD_LENGTH or not all(is_letter(ch) for ch in secret):
            raise ValueError(f"secret must be {WORD_LENGTH} ASCII letters; got {secret!r}")

        words = {w.strip().upper() for w in word_list}
        words.discard("")
        if not words:
            raise ValueError("word_list is empty")
        if secret not in words:
            # The day's answer is always guessable, even with a stale list.
            log.warning("secret missing from word list; adding it")
            words.add(secret)

        self._secret = secret
        self._word_list = frozenset(words)
        self._guesses: List[Guess] = []
        self._pending: List[str] = []
        self._state = GameState.IN_PROGRESS

    # ---- read-only accessors ----

    @property
    def secret(self) -> str:
        return self._secret

    @property
    def word_list(self) -> frozenset:
        return self._word_list

    @property
    def guesses(self) -> Tuple[Guess, ...]:
        return tuple(self._guesses)

    @property
    def pending_input(self) -> str:
        return "".join(self._pending)

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def finished(self) -> bool:
        return self._state is not GameState.IN_PROGRESS

    @property
    def won(self) -> bool:
        return self._state is GameState.WON

    @property
    def remaining_turns(self) -> int:
        return MAX_TURNS - len(self._guesses)

    def known_verdict(self, letter: str, position: int) -> Optional[LetterVerdict]:
        """Best-known verdict for `letter` typed at `position` (None = unknown)."""
        return accumulate(self._guesses, letter, position)

    def pending_verdicts(self) -> List[Optional[LetterVerdict]]:
        return pending_verdicts(self._guesses, self.pending_input)

    def letter_states(self) -> Dict[str, LetterVerdict]:
        return letter_states(self._guesses)

    # ---- transitions ----

    def type_character(self, c: str) -> None:
        if self.finished or len(self._pending) >= WORD_LENGTH or not is_letter(c):
            return
        self._pending.append(c.upper())

    def backspace(self) -> None:
        if self.finished or not self._pending:
            return
        self._pending.pop()

    def submit(self) -> bool:
        """
        Score the pending input if it is a valid guess.

        Returns True when the guess was accepted. A rejected submission
        (wrong length, unknown word, game over) leaves every field untouched.
        """
        if self.finished:
            return False

        word = self.pending_input
        if not validate_guess(word, self._word_list):
            log.debug("rejected submission %r", word)
            return False

        guess = evaluate(self._secret, word)
        self._guesses.append(guess)
        self._pending.clear()

        # Win condition: all correct
        if is_solved(guess):
            self._state = GameState.WON
        elif len(self._guesses) == MAX_TURNS:
            self._state = GameState.LOST

        log.info("guess %d/%d %s -> %s", len(self._guesses), MAX_TURNS, word, self._state.value)
        return True

    def handle(self, event: InputEvent) -> bool:
        """
        Apply one input event. Returns False when the event asks to quit,
        True otherwise (including rejected or ignored events).
        """
        if isinstance(event, Quit):
            return False
        if isinstance(event, TypeChar):
            self.type_character(event.char)
        elif isinstance(event, Backspace):
            self.backspace()
        elif isinstance(event, Submit):
            self.submit()
        else:
            raise TypeError(f"unknown input event: {event!r}")
        return True
