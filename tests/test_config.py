import pytest

import config


@pytest.fixture(autouse=True)
def no_secrets(monkeypatch):
    monkeypatch.setattr(config, "_read_secrets", lambda: {})
    for name in ("LEADERBOARD_ENTRIES_SOURCE", "LEADERBOARD_REQUEST_TIMEOUT", "LEADERBOARD_RECENT_LIMIT"):
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    assert config.load_leaderboard_config() == {
        "ENTRIES_SOURCE": "data/entries.json",
        "REQUEST_TIMEOUT": 12.0,
        "RECENT_LIMIT": 10,
    }


def test_environment_fallback(monkeypatch):
    monkeypatch.setenv("LEADERBOARD_ENTRIES_SOURCE", "https://example.com/entries.json")
    monkeypatch.setenv("LEADERBOARD_REQUEST_TIMEOUT", "4.5")
    monkeypatch.setenv("LEADERBOARD_RECENT_LIMIT", "5")

    cfg = config.load_leaderboard_config()

    assert cfg["ENTRIES_SOURCE"] == "https://example.com/entries.json"
    assert cfg["REQUEST_TIMEOUT"] == 4.5
    assert cfg["RECENT_LIMIT"] == 5


def test_secrets_take_priority(monkeypatch):
    monkeypatch.setattr(config, "_read_secrets", lambda: {"entries_source": "board.json", "recent_limit": 3})
    monkeypatch.setenv("LEADERBOARD_ENTRIES_SOURCE", "env.json")

    cfg = config.load_leaderboard_config()

    assert cfg["ENTRIES_SOURCE"] == "board.json"
    assert cfg["RECENT_LIMIT"] == 3


def test_bad_numbers_fall_back_to_defaults(monkeypatch):
    monkeypatch.setenv("LEADERBOARD_REQUEST_TIMEOUT", "soon")
    monkeypatch.setenv("LEADERBOARD_RECENT_LIMIT", "many")

    cfg = config.load_leaderboard_config()

    assert cfg["REQUEST_TIMEOUT"] == 12.0
    assert cfg["RECENT_LIMIT"] == 10


def test_zero_recent_limit_is_kept(monkeypatch):
    monkeypatch.setattr(config, "_read_secrets", lambda: {"recent_limit": 0})
    monkeypatch.setenv("LEADERBOARD_RECENT_LIMIT", "7")

    assert config.load_leaderboard_config()["RECENT_LIMIT"] == 0


def test_zero_recent_limit_from_environment(monkeypatch):
    monkeypatch.setenv("LEADERBOARD_RECENT_LIMIT", "0")

    assert config.load_leaderboard_config()["RECENT_LIMIT"] == 0


def test_non_positive_timeout_falls_back_to_default(monkeypatch):
    monkeypatch.setattr(config, "_read_secrets", lambda: {"request_timeout": 0})
    monkeypatch.setenv("LEADERBOARD_REQUEST_TIMEOUT", "30")

    assert config.load_leaderboard_config()["REQUEST_TIMEOUT"] == 12.0
