"""
Input events delivered to a GameSession one at a time.

The UI decodes raw key presses into these; the session never sees key codes.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class TypeChar:
    char: str


@dataclass(frozen=True)
class Backspace:
    pass


@dataclass(frozen=True)
class Submit:
    pass


@dataclass(frozen=True)
class Quit:
    pass


InputEvent = Union[TypeChar, Backspace, Submit, Quit]
