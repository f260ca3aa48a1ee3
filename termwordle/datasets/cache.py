"""
Disk cache for the guessable word list.

The cache is a plain text file, one uppercase word per line. It is trusted
only while it validates; otherwise the list is fetched again and the cache
rewritten.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, List, Optional

from .io import read_words, write_words
from .validator import pretty_summary, validate_wordlist

log = logging.getLogger(__name__)

DEFAULT_CACHE = ".word-list.cache.txt"


def load_word_list(
        cache_path: Path | str,
        fetch: Callable[[], List[str]],
        *,
        solution: Optional[str] = None,
) -> List[str]:
    """
    Return the word list, from the cache when it is usable.

    Args:
        cache_path: cache file location
        fetch:      zero-arg callable that downloads the list (uppercase)
        solution:   if given, a cache missing it counts as stale
    """
    p = Path(cache_path)
    if p.exists():
        rep = validate_wordlist(str(p), solution=solution)
        log.info("word list cache: %s", pretty_summary(rep))
        if rep["passed"]:
            return read_words(p)
        log.warning("discarding word list cache %s: %s", p, "; ".join(rep["issues"]))

    log.info("fetching word list...")
    words = [w.strip().upper() for w in fetch() if w.strip()]
    write_words(words, p)
    return words
