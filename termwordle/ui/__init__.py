from .keys import decode_key
from .screen import WordleScreen, play

__all__ = ["decode_key", "WordleScreen", "play"]
