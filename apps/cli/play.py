# apps/cli/play.py
"""
CLI entry point for playing the daily Wordle in the terminal.

This script:
  1) Resolves today's solution (NYT endpoint, or --solution offline).
  2) Refuses to replay a day already recorded in the play-state file.
  3) Loads the word list (local file, validated cache, or download).
  4) Runs the curses game, then prints the emoji summary and records the
     result once the game is finished.
"""

from __future__ import annotations

import argparse
import datetime as dt
import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

import requests

from termwordle.datasets import DEFAULT_CACHE, load_word_list, read_words
from termwordle.errors import ProviderError
from termwordle.game import GameSession
from termwordle.harness import DEFAULT_STATE, emoji_rows, load_play_state, write_play_state
from termwordle.providers import fetch_solution, fetch_word_list
from termwordle.ui import play

log = logging.getLogger("termwordle")


@dataclass(frozen=True)
class PlayConfig:
    day: dt.date
    solution: Optional[str]
    words: Optional[Path]
    cache: Path
    state: Path
    timeout: float
    progress: bool
    force: bool
    verbose: bool


def _parse_date(s: str) -> dt.date:
    try:
        return dt.date.fromisoformat(s)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"expected YYYY-MM-DD, got {s!r}") from e


def parse_args(argv: Optional[List[str]] = None) -> PlayConfig:
    ap = argparse.ArgumentParser(description="termwordle: play the daily Wordle in your terminal")
    ap.add_argument("--date", type=_parse_date, default=dt.date.today(),
                    help="puzzle date, YYYY-MM-DD (default: today)")
    ap.add_argument("--solution", help="play this word instead of fetching the daily solution")
    ap.add_argument("--words", type=Path,
                    help="local word list (one word per line) instead of the downloaded list")
    ap.add_argument("--cache", type=Path, default=Path(DEFAULT_CACHE),
                    help="word list cache file")
    ap.add_argument("--state", type=Path, default=Path(DEFAULT_STATE),
                    help="file recording the finished game for the day")
    ap.add_argument("--timeout", type=float, default=10.0, help="HTTP timeout in seconds")
    ap.add_argument(
        "--progress",
        choices=["auto", "bar", "off"],
        default="auto",
        help="Show word list download progress (auto=bar when stderr is a terminal)."
    )
    ap.add_argument("--force", action="store_true", help="play even if today is already recorded")
    ap.add_argument("-v", "--verbose", action="store_true", help="log progress to stderr")
    args = ap.parse_args(argv)

    progress = args.progress == "bar" or (args.progress == "auto" and sys.stderr.isatty())
    return PlayConfig(
        day=args.date,
        solution=args.solution.strip().upper() if args.solution else None,
        words=args.words,
        cache=args.cache,
        state=args.state,
        timeout=args.timeout,
        progress=progress,
        force=args.force,
        verbose=args.verbose,
    )


def _resolve_words(cfg: PlayConfig, solution: str, http: requests.Session) -> List[str]:
    if cfg.words is not None:
        return read_words(cfg.words)
    return load_word_list(
        cfg.cache,
        lambda: fetch_word_list(session=http, timeout=cfg.timeout, progress=cfg.progress),
        solution=solution,
    )


def main(argv: Optional[List[str]] = None) -> int:
    """
    Parse CLI args, gather the day's data, play, and record the result.
    """
    cfg = parse_args(argv)
    logging.basicConfig(
        level=logging.INFO if cfg.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    with requests.Session() as http:
        try:
            solution = cfg.solution or fetch_solution(cfg.day, session=http, timeout=cfg.timeout)

            # 1) One game per solution
            record = load_play_state(cfg.state)
            if record is not None and record.solution == solution and not cfg.force:
                print("you already played today")
                print("\n".join(record.rows))
                return 0

            # 2) Word list (cache is refreshed when stale)
            words = _resolve_words(cfg, solution, http)
        except (ProviderError, FileNotFoundError) as e:
            print(f"error: {e}", file=sys.stderr)
            return 1

    try:
        session = GameSession(solution, words)
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    log.info("starting game for %s with %d words", cfg.day, len(session.word_list))

    play(session)

    # 3) Summary + record (only a finished game locks the day)
    rows = emoji_rows(session.guesses)
    print("\n".join(rows))
    if session.finished:
        write_play_state(cfg.state, solution, rows)
        if not session.won:
            print(f"the word was {solution}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
