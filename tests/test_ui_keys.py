import curses

import pytest
from termwordle.game import Backspace, Quit, Submit, TypeChar
from termwordle.ui import decode_key


@pytest.mark.parametrize("key,expected", [
    (ord("a"), TypeChar("A")),
    (ord("Z"), TypeChar("Z")),
    (ord("\n"), Submit()),
    (ord("\r"), Submit()),
    (curses.KEY_ENTER, Submit()),
    (curses.KEY_BACKSPACE, Backspace()),
    (127, Backspace()),
    (8, Backspace()),
    (3, Quit()),
    (27, Quit()),
    (ord("1"), None),
    (ord(" "), None),
    (curses.KEY_LEFT, None),
    (-1, None),
])
def test_decode_key(key, expected):
    assert decode_key(key) == expected
