from .nyt import fetch_solution, fetch_word_list, parse_word_list

__all__ = ["fetch_solution", "fetch_word_list", "parse_word_list"]
