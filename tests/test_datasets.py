from pathlib import Path

from termwordle.datasets import load_word_list, pretty_summary, read_words, validate_wordlist


def _write(p: Path, lines):
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")


def test_validate_wordlist_happy_path(tmp_path: Path):
    p = tmp_path / "words.txt"
    _write(p, ["crane", "RAISE", "stare"])

    rep = validate_wordlist(str(p), solution="crane")
    assert rep["passed"] is True
    assert rep["count"] == 3
    assert rep["contains_solution"] is True
    s = pretty_summary(rep)
    assert "words=3" in s and "OK" in s


def test_validate_wordlist_flags_errors(tmp_path: Path):
    # wrong length, invalid chars and a blank line are all invalid
    p = tmp_path / "words.txt"
    p.write_text("crane\ncranes\n???\n\nstare\n", encoding="utf-8")

    rep = validate_wordlist(str(p))
    assert rep["passed"] is False
    assert rep["invalid_lines"] == 3
    assert any("invalid" in msg for msg in rep["issues"])


def test_validate_wordlist_missing_solution_and_file(tmp_path: Path):
    p = tmp_path / "words.txt"
    _write(p, ["crane", "stare", "crane"])
    rep = validate_wordlist(str(p), solution="ALLOY")
    assert rep["passed"] is False
    assert rep["contains_solution"] is False
    assert any("duplicate" in msg for msg in rep["issues"])

    rep = validate_wordlist(str(tmp_path / "nope.txt"))
    assert rep["exists"] is False and rep["passed"] is False


def test_load_word_list_uses_valid_cache(tmp_path: Path):
    cache = tmp_path / ".word-list.cache.txt"
    _write(cache, ["crane", "slate"])

    def fetch():
        raise AssertionError("should not fetch when cache is valid")

    assert load_word_list(cache, fetch, solution="CRANE") == ["CRANE", "SLATE"]


def test_load_word_list_fetches_and_writes_cache(tmp_path: Path):
    cache = tmp_path / "sub" / ".word-list.cache.txt"
    calls = []

    def fetch():
        calls.append(1)
        return ["crane", "Slate"]

    assert load_word_list(cache, fetch) == ["CRANE", "SLATE"]
    assert read_words(cache) == ["CRANE", "SLATE"]
    assert len(calls) == 1


def test_load_word_list_refetches_stale_cache(tmp_path: Path):
    cache = tmp_path / ".word-list.cache.txt"
    _write(cache, ["slate"])
    words = load_word_list(cache, lambda: ["CRANE", "SLATE"], solution="CRANE")
    assert words == ["CRANE", "SLATE"]
    assert read_words(cache) == ["CRANE", "SLATE"]
