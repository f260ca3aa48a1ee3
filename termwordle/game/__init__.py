from .events import Backspace, InputEvent, Quit, Submit, TypeChar
from .session import MAX_TURNS, GameSession, GameState

__all__ = [
    "GameSession", "GameState", "MAX_TURNS",
    "InputEvent", "TypeChar", "Backspace", "Submit", "Quit",
]
