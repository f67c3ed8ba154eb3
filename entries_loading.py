# entries_loading.py
from __future__ import annotations

import json
import logging
from pathlib import Path

import requests

from config import DEFAULT_REQUEST_TIMEOUT

_HEADERS = {
    "Cache-Control": "no-cache",
    "Pragma": "no-cache",
    "Accept": "application/json",
    "User-Agent": "Mozilla/5.0 (compatible; security-leaderboard/1.0; +streamlit)",
}


class LeaderboardLoadError(RuntimeError):
    """The entries document could not be fetched or parsed."""


def _is_url(source: str) -> bool:
    return source.lower().startswith(("http://", "https://"))


def _fetch_json(url: str, timeout: float) -> object:
    resp = requests.get(url, timeout=timeout, headers=_HEADERS)
    resp.raise_for_status()
    txt = resp.text
    if "<html" in txt[:512].lower():
        raise ValueError(
            "Expected JSON but received HTML. Check that the entries file "
            "is published at this URL."
        )
    return json.loads(txt)


def _read_json(path: Path) -> object:
    return json.loads(path.read_text(encoding="utf-8"))


def load_entries(source: str | Path, *, timeout: float | None = None) -> dict:
    """Load the raw entries document from a URL or a local JSON file.

    The document is fetched once, with no retry and nothing cached between
    calls. Any failure raises ``LeaderboardLoadError``.
    """
    source = str(source)
    try:
        if _is_url(source):
            data = _fetch_json(source, DEFAULT_REQUEST_TIMEOUT if timeout is None else timeout)
        else:
            data = _read_json(Path(source))
    except (requests.RequestException, OSError, ValueError) as e:
        logging.exception("Failed to load leaderboard data from %s", source)
        raise LeaderboardLoadError("Failed to load leaderboard data.") from e

    if not isinstance(data, dict):
        logging.error("Leaderboard data from %s is not a JSON object", source)
        raise LeaderboardLoadError("Failed to load leaderboard data.")

    if not isinstance(data.get("students"), list):
        logging.warning("Leaderboard data from %s has no students list", source)

    return data
