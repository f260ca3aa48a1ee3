"""
Curses view of a GameSession.

Layout (top to bottom):
  - title
  - one row per scored guess, letters colored by verdict
  - the pending input, colored by what earlier guesses reveal
  - a QWERTY keyboard colored by the best verdict per letter
  - a status line

The view only reads session state; every change goes through session.handle.
"""

from __future__ import annotations

import curses
from typing import Dict, Optional

from termwordle.engine import WORD_LENGTH, LetterVerdict
from termwordle.game import MAX_TURNS, GameSession, GameState
from .keys import decode_key

KEYBOARD_ROWS = ("QWERTYUIOP", "ASDFGHJKL", "ZXCVBNM")

# Color pair indices
COLOR_TITLE = 1
COLOR_CORRECT = 2
COLOR_PRESENT = 3
COLOR_ABSENT = 4
COLOR_UNKNOWN = 5
COLOR_WIN = 6
COLOR_LOSE = 7

_VERDICT_PAIRS = {
    LetterVerdict.CORRECT: COLOR_CORRECT,
    LetterVerdict.PRESENT: COLOR_PRESENT,
    LetterVerdict.ABSENT: COLOR_ABSENT,
}


def init_colors() -> None:
    """Initialize curses color pairs."""
    curses.start_color()
    curses.use_default_colors()
    curses.init_pair(COLOR_TITLE, curses.COLOR_BLUE, -1)
    curses.init_pair(COLOR_CORRECT, curses.COLOR_GREEN, -1)
    curses.init_pair(COLOR_PRESENT, curses.COLOR_YELLOW, -1)
    curses.init_pair(COLOR_ABSENT, 8 if curses.COLORS > 8 else curses.COLOR_BLACK, -1)
    curses.init_pair(COLOR_UNKNOWN, curses.COLOR_WHITE, -1)
    curses.init_pair(COLOR_WIN, curses.COLOR_GREEN, -1)
    curses.init_pair(COLOR_LOSE, curses.COLOR_RED, -1)


def verdict_attr(verdict: Optional[LetterVerdict]) -> int:
    """curses attribute for a verdict; None (never guessed) renders neutral."""
    if verdict is None:
        return curses.color_pair(COLOR_UNKNOWN)
    attr = curses.color_pair(_VERDICT_PAIRS[verdict])
    if verdict is not LetterVerdict.ABSENT:
        attr |= curses.A_BOLD
    return attr


class WordleScreen:
    def __init__(self, stdscr):
        self.stdscr = stdscr

    def _center_x(self, width: int) -> int:
        _, cols = self.stdscr.getmaxyx()
        return max(0, (cols - width) // 2)

    def _put(self, y: int, x: int, text: str, attr: int = 0) -> None:
        rows, cols = self.stdscr.getmaxyx()
        if 0 <= y < rows and x < cols:
            self.stdscr.addstr(y, x, text[: max(0, cols - x - 1)], attr)

    def _draw_keyboard(self, y: int, states: Dict[str, LetterVerdict]) -> None:
        for row in KEYBOARD_ROWS:
            x = self._center_x(len(row) * 2 - 1)
            for i, ch in enumerate(row):
                self._put(y, x + i * 2, ch, verdict_attr(states.get(ch)))
            y += 1

    def draw(self, session: GameSession) -> None:
        self.stdscr.erase()
        y = 1
        title = "wordle"
        self._put(y, self._center_x(len(title)), title,
                  curses.color_pair(COLOR_TITLE) | curses.A_DIM)
        y += 2

        x = self._center_x(WORD_LENGTH)
        for guess in session.guesses:
            for i, scored in enumerate(guess):
                self._put(y, x + i, scored.letter, verdict_attr(scored.verdict))
            y += 1

        if not session.finished:
            pending = session.pending_input
            for i, verdict in enumerate(session.pending_verdicts()):
                self._put(y, x + i, pending[i], verdict_attr(verdict))
            self._put(y, x + len(pending), "_" * (WORD_LENGTH - len(pending)),
                      curses.color_pair(COLOR_UNKNOWN) | curses.A_DIM)
        y = 3 + MAX_TURNS + 1

        self._draw_keyboard(y, session.letter_states())
        y += len(KEYBOARD_ROWS) + 1

        if session.state is GameState.WON:
            msg, attr = f"solved in {len(session.guesses)}! press any key", curses.color_pair(COLOR_WIN)
        elif session.state is GameState.LOST:
            msg, attr = f"the word was {session.secret}. press any key", curses.color_pair(COLOR_LOSE)
        else:
            msg, attr = "type a word, enter to submit, esc to quit", curses.A_DIM
        self._put(y, self._center_x(len(msg)), msg, attr)
        self.stdscr.refresh()

    def run(self, session: GameSession) -> None:
        """
        Event loop: draw, read one key, apply it. Returns when the player
        quits, or after one more key once the game is finished.
        """
        while True:
            self.draw(session)
            key = self.stdscr.getch()
            if session.finished:
                return
            event = decode_key(key)
            if event is not None and not session.handle(event):
                return


def play(session: GameSession) -> None:
    """Run the curses UI for `session`, restoring the terminal afterwards."""

    def _main(stdscr):
        curses.raw()  # deliver Ctrl-C as a key instead of SIGINT
        try:
            curses.curs_set(0)
        except curses.error:
            pass  # terminal cannot hide the cursor
        init_colors()
        WordleScreen(stdscr).run(session)

    curses.wrapper(_main)
