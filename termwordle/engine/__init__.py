from .verdict import WORD_LENGTH, Guess, LetterVerdict, ScoredLetter, is_solved, word_of
from .scoring import evaluate, pattern
from .validation import is_letter, validate_guess
from .knowledge import accumulate, letter_states, pending_verdicts

__all__ = [
    "WORD_LENGTH", "Guess", "LetterVerdict", "ScoredLetter", "is_solved", "word_of",
    "evaluate", "pattern", "accumulate", "letter_states", "pending_verdicts", "is_letter", "validate_guess",
]
