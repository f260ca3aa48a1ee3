from .validator import validate_wordlist, pretty_summary
from .io import read_words, write_words
from .cache import DEFAULT_CACHE, load_word_list

__all__ = [
    "validate_wordlist", "pretty_summary", "read_words", "write_words",
    "DEFAULT_CACHE", "load_word_list",
]
