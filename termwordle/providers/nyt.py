"""
NYT Wordle data sources.

- fetch_solution:  the daily answer from the v2 JSON endpoint.
- fetch_word_list: the guessable words embedded in the game's JS bundle.

Both accept an optional `requests.Session` so callers (and tests) can share
connections or substitute a fake. Network and parse failures surface as
ProviderError; there is no retry.
"""

from __future__ import annotations

import datetime as dt
import json
import logging
from typing import List, Optional

import requests
from tqdm import tqdm

from termwordle.errors import ProviderError

log = logging.getLogger(__name__)

SOLUTION_URL = "https://www.nytimes.com/svc/wordle/v2/{day}.json"
WORD_LIST_URL = "https://www.nytimes.com/games-assets/v2/9673.7e73cdd39fb6121fa17d.js"

# The bundle contains `... const o=[ "aahed","aalii",... ] ...`
_ARRAY_MARKER = "const o=["

DEFAULT_TIMEOUT = 10.0


def _get(session: Optional[requests.Session], url: str, **kwargs) -> requests.Response:
    http = session or requests
    try:
        resp = http.get(url, **kwargs)
    except requests.RequestException as e:
        raise ProviderError(f"request to {url} failed: {e}") from e
    try:
        resp.raise_for_status()
    except requests.RequestException as e:
        resp.close()  # release the pooled connection held by stream=True
        raise ProviderError(f"request to {url} failed: {e}") from e
    return resp


def fetch_solution(
        day: dt.date,
        *,
        session: Optional[requests.Session] = None,
        timeout: float = DEFAULT_TIMEOUT,
) -> str:
    """
    Return the uppercase solution for `day`.

    Raises:
        ProviderError if the request fails or the payload has no string
        `solution` field.
    """
    url = SOLUTION_URL.format(day=day.strftime("%Y-%m-%d"))
    log.info("fetching solution from %s", url)
    resp = _get(session, url, timeout=timeout)

    try:
        payload = resp.json()
    except ValueError as e:
        raise ProviderError(f"solution response is not JSON: {e}") from e

    solution = payload.get("solution") if isinstance(payload, dict) else None
    if not isinstance(solution, str):
        raise ProviderError("solution value was not type of string")
    return solution.strip().upper()


def parse_word_list(bundle: str) -> List[str]:
    """
    Extract the word array from the game bundle text.

    Returns uppercase words in bundle order.
    """
    _, sep, tail = bundle.partition(_ARRAY_MARKER)
    if not sep:
        raise ProviderError("failed to locate word array in bundle")
    body, sep, _ = tail.partition("]")
    if not sep:
        raise ProviderError("word array in bundle is not terminated")

    try:
        words = json.loads(f"[{body}]")
    except ValueError as e:
        raise ProviderError(f"failed to parse word array: {e}") from e

    if not all(isinstance(w, str) for w in words):
        raise ProviderError("word array contains non-string entries")
    return [w.strip().upper() for w in words]


def fetch_word_list(
        *,
        url: str = WORD_LIST_URL,
        session: Optional[requests.Session] = None,
        timeout: float = DEFAULT_TIMEOUT,
        progress: bool = False,
) -> List[str]:
    """
    Download the game bundle and return its word list (uppercase).

    With `progress=True` a tqdm bar tracks the download on stderr.
    """
    log.info("fetching word list from %s", url)
    resp = _get(session, url, timeout=timeout, stream=True)

    total = int(resp.headers.get("content-length", 0) or 0) or None
    chunks: List[bytes] = []
    with tqdm(total=total, unit="B", unit_scale=True, ncols=80,
              desc="Word list", disable=not progress) as bar:
        for chunk in resp.iter_content(chunk_size=8192):
            if chunk:
                chunks.append(chunk)
                bar.update(len(chunk))

    text = b"".join(chunks).decode(resp.encoding or "utf-8", errors="replace")
    words = parse_word_list(text)
    log.info("word list has %d words", len(words))
    return words
