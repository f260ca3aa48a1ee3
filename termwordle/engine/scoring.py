"""
Wordle scoring (feedback) for a single (secret, guess) pair.

This implementation is:
  - duplicate-safe (respects true letter multiplicities in the secret)
  - deterministic (same inputs -> same outputs)

Algorithm (two-pass, canonical for Wordle):
  1) First pass marks all exact matches and counts the remaining (unmatched)
     letters of the secret.
  2) Second pass walks positions left to right and marks a letter PRESENT
     only if that letter still has remaining count; everything else is ABSENT.

Marking in a single pass over-credits repeated letters: for secret "ALLOY"
and guess "LLAMA" the L at index 1 must claim its exact match before the L at
index 0 can take the secret's second L.
"""

from collections import Counter

from .verdict import WORD_LENGTH, Guess, LetterVerdict, ScoredLetter


def evaluate(secret: str, guess: str) -> Guess:
    """
    Score `guess` against `secret`.

    Preconditions (caller validated length and word-list membership):
      - len(secret) == len(guess) == 5

    Returns:
      - tuple of 5 ScoredLetter, in the order the guess was typed

    Examples:
      pattern(evaluate("LEVEL", "BELLE")) -> "-GYYY"
      pattern(evaluate("ALLOY", "LLAMA")) -> "YGY--"
    """
    # Normalize; comparisons are on uppercase ASCII letters
    secret = secret.strip().upper()
    guess = guess.strip().upper()
    assert len(secret) == WORD_LENGTH, f"secret must be {WORD_LENGTH} letters, got {secret!r}"
    assert len(guess) == WORD_LENGTH, f"guess must be {WORD_LENGTH} letters, got {guess!r}"

    verdicts = [LetterVerdict.ABSENT] * WORD_LENGTH

    # Pass 1: exact matches claim their letter; the secret's other letters
    # form the pool that PRESENT verdicts draw from.
    remaining: Counter = Counter()
    for i, (s, g) in enumerate(zip(secret, guess)):
        if g == s:
            verdicts[i] = LetterVerdict.CORRECT
        else:
            remaining[s] += 1

    # Pass 2: leftmost out-of-place occurrence is serviced first.
    for i, g in enumerate(guess):
        if verdicts[i] is LetterVerdict.CORRECT:
            continue
        if remaining[g] > 0:
            verdicts[i] = LetterVerdict.PRESENT
            remaining[g] -= 1  # consume one instance

    return tuple(ScoredLetter(g, v) for g, v in zip(guess, verdicts))


def pattern(guess: Guess) -> str:
    """Compact 'G'/'Y'/'-' string for a scored guess, e.g. "YY--G"."""
    return "".join(s.verdict.glyph for s in guess)
