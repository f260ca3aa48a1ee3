"""
Lightweight guess validation.

A submission is acceptable iff:
  - it has exactly WORD_LENGTH characters
  - every character is an ASCII letter A–Z
  - it exists in the word list

Anything else is a rejected submission, not an error.
"""

from typing import AbstractSet

from .verdict import WORD_LENGTH


def is_letter(ch: str) -> bool:
    """True for a single ASCII letter (case-insensitive)."""
    return len(ch) == 1 and ch.isascii() and ch.isalpha()


def validate_guess(word: str, allowed: AbstractSet[str]) -> bool:
    """
    Return True if `word` is a valid guess per the rules above.

    `allowed` must already be an uppercase set; build it once per session
    rather than per call.
    """
    if not isinstance(word, str):
        return False

    w = word.strip().upper()

    # Shape/characters check
    if len(w) != WORD_LENGTH or not all(is_letter(ch) for ch in w):
        return False

    return w in allowed
