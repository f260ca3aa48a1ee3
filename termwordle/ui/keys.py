"""
Decode curses key codes into session input events.

Kept free of screen state so it can be tested without a terminal.
"""

from __future__ import annotations

import curses
from typing import Optional

from termwordle.game import Backspace, InputEvent, Quit, Submit, TypeChar

CTRL_C = 3
ESC = 27

_SUBMIT_KEYS = {ord("\n"), ord("\r"), curses.KEY_ENTER}
_BACKSPACE_KEYS = {curses.KEY_BACKSPACE, 127, 8}
_QUIT_KEYS = {CTRL_C, ESC}


def decode_key(key: int) -> Optional[InputEvent]:
    """Map one `getch()` value to an event; None for keys the game ignores."""
    if key in _QUIT_KEYS:
        return Quit()
    if key in _SUBMIT_KEYS:
        return Submit()
    if key in _BACKSPACE_KEYS:
        return Backspace()
    if ord("a") <= key <= ord("z") or ord("A") <= key <= ord("Z"):
        return TypeChar(chr(key).upper())
    return None
