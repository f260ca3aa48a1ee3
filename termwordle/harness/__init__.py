from .io import DEFAULT_STATE, PlayRecord, emoji_rows, load_play_state, write_play_state

__all__ = ["DEFAULT_STATE", "PlayRecord", "emoji_rows", "load_play_state", "write_play_state"]
