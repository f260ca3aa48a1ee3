"""
Word-list validator.

What this module does:
- Validate a word list file (one word per line): exact length 5, A–Z only.
- Detect duplicates and invalid lines; compute SHA-256 of the raw file.
- Optionally check that the day's solution is in the list.
- Return a machine-readable dict and provide a pretty one-line summary.

Typical use:
    from termwordle.datasets import validate_wordlist, pretty_summary
    rep = validate_wordlist(".word-list.cache.txt", solution="CRANE")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Dict, List, Optional, Tuple
import hashlib

from termwordle.engine import WORD_LENGTH, is_letter


@dataclass
class WordListReport:
    """Diagnostics for one word list file."""
    path: str                       # file path (as given)
    exists: bool                    # did the file exist on disk?
    count: int                      # number of VALID words
    sha256: str                     # SHA-256 of raw file bytes (empty if missing)
    unique_count: int               # unique valid words (after dedupe)
    invalid_lines: int              # number of invalid lines encountered
    contains_solution: Optional[bool]  # None when no solution was given
    passed: bool
    issues: List[str]               # human-friendly list of problems (if any)


def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _load_and_check(path: Path) -> Tuple[List[str], int]:
    """
    Load words from a text file and validate them.

    Rules:
      - one token per line, any case (normalized to uppercase)
      - ASCII letters only, exact length WORD_LENGTH
      - empty/whitespace-only lines are INVALID

    Returns:
      (valid_words, invalid_count)
    """
    valid: List[str] = []
    invalid = 0

    with path.open("r", encoding="utf-8") as f:
        for raw in f:
            w = raw.strip().upper()
            if len(w) == WORD_LENGTH and all(is_letter(ch) for ch in w):
                valid.append(w)
            else:
                invalid += 1

    return valid, invalid


def validate_wordlist(path: str, solution: Optional[str] = None) -> Dict:
    """
    Validate the word list at `path`.

    Returns a JSON-serializable dict (see WordListReport). `passed` is strict:
    the file exists, is non-empty, has no invalid lines and, when `solution`
    is given, contains it. Duplicates are reported but do not fail the check.
    """
    issues: List[str] = []
    p = Path(path)

    if not p.exists():
        issues.append(f"word list not found: {path}")
        rep = WordListReport(path, False, 0, "", 0, 0, None, False, issues)
        return asdict(rep)

    words, invalid = _load_and_check(p)
    unique = set(words)

    contains = None
    if solution is not None:
        contains = solution.strip().upper() in unique
        if not contains:
            issues.append(f"solution not in word list: {solution.strip().upper()}")

    if not words:
        issues.append("word list contains 0 valid words")
    if invalid:
        issues.append(f"word list has {invalid} invalid line(s)")
    if len(words) != len(unique):
        issues.append("word list contains duplicate lines")

    passed = bool(words) and invalid == 0 and contains is not False

    rep = WordListReport(
        path=str(p),
        exists=True,
        count=len(words),
        sha256=_sha256_file(p),
        unique_count=len(unique),
        invalid_lines=invalid,
        contains_solution=contains,
        passed=passed,
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Produce a compact, human-friendly one-liner.

    Example:
        words=14855 (uniq=14855, sha=abc123def456) | solution=True | OK
    """
    status = "OK" if report["passed"] else "FAIL"
    sha = (report.get("sha256") or "")[:12]
    return (
        f"words={report['count']} (uniq={report['unique_count']}, sha={sha}) "
        f"| solution={report['contains_solution']} | {status}"
    )
