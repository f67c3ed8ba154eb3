"""Runtime settings for the leaderboard page."""

from __future__ import annotations

import os

import streamlit as st

DEFAULT_ENTRIES_SOURCE = "data/entries.json"
DEFAULT_REQUEST_TIMEOUT = 12.0
DEFAULT_RECENT_LIMIT = 10


def _read_secrets() -> dict:
    try:
        return dict(st.secrets.get("leaderboard", {}))
    except Exception:  # pragma: no cover - no secrets.toml available
        return {}


def _setting(secrets: dict, key: str, env_name: str):
    """First configured value: secrets, then environment. Empty values count as unset."""
    value = secrets.get(key)
    if value is None or value == "":
        value = os.environ.get(env_name)
    return None if value is None or value == "" else value


def load_leaderboard_config() -> dict:
    """Load settings from Streamlit secrets, falling back to environment variables.

    A configured ``recent_limit`` of ``0`` is kept; request timeouts must be
    positive and fall back to the default otherwise.
    """
    secrets = _read_secrets()
    config = {
        "ENTRIES_SOURCE": _setting(secrets, "entries_source", "LEADERBOARD_ENTRIES_SOURCE"),
        "REQUEST_TIMEOUT": _setting(secrets, "request_timeout", "LEADERBOARD_REQUEST_TIMEOUT"),
        "RECENT_LIMIT": _setting(secrets, "recent_limit", "LEADERBOARD_RECENT_LIMIT"),
    }

    if config["ENTRIES_SOURCE"] is None:
        config["ENTRIES_SOURCE"] = DEFAULT_ENTRIES_SOURCE

    try:
        timeout = float(config["REQUEST_TIMEOUT"])
        config["REQUEST_TIMEOUT"] = timeout if timeout > 0 else DEFAULT_REQUEST_TIMEOUT
    except (TypeError, ValueError):
        config["REQUEST_TIMEOUT"] = DEFAULT_REQUEST_TIMEOUT

    try:
        config["RECENT_LIMIT"] = max(int(config["RECENT_LIMIT"]), 0)
    except (TypeError, ValueError):
        config["RECENT_LIMIT"] = DEFAULT_RECENT_LIMIT

    return config
