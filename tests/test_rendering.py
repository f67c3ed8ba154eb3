import pandas as pd

import rendering
from leaderboard_logic import build_leaderboard


def _view():
    return build_leaderboard(
        {
            "scoring": {"xss": 5},
            "students": [
                {"name": "Ann", "cohort": "A", "notes": "web", "findings": [
                    {"type": "XSS", "title": "Search box", "date": "2024-01-01",
                     "program": "Portal", "url": "https://example.com/1"},
                ]},
                {"findings": [{"points": 2.5, "date": "bad"}]},
                {"name": "Zed"},
            ],
        }
    )


def test_meta_labels_use_defaults():
    labels = rendering.meta_labels(_view())

    assert labels == {
        "title": "Security Discovery Leaderboard",
        "season": "N/A",
        "last_updated": "Unknown date",
    }


def test_stat_labels():
    assert rendering.stat_labels(_view()) == {"students": "3", "findings": "2", "points": "7.5"}


def test_leaderboard_rows():
    rows = rendering.leaderboard_rows(_view().students)

    assert [r["Rank"] for r in rows] == ["#1", "#2", "#3"]
    assert rows[0]["Student"] == "Ann"
    assert rows[0]["Latest"] == "XSS: Search box"
    assert rows[1]["Student"] == "Unknown"
    assert rows[1]["Cohort"] == "-"
    assert rows[1]["Latest"] == "Finding: Untitled"
    assert rows[2]["Latest"] == "No findings"


def test_feed_item_text():
    view = _view()
    first, second = (rendering.feed_item(f) for f in view.recent)

    assert first == {
        "title": "XSS - Search box",
        "points": "+5 pts",
        "meta": "Ann (A) | Portal | Jan 1, 2024",
        "url": "https://example.com/1",
    }
    assert second["title"] == "Finding - Untitled"
    assert second["meta"] == "Unknown (-) | Program not set | Unknown date"
    assert second["url"] is None


def test_empty_views_produce_empty_frames_with_columns():
    view = build_leaderboard({})

    board = rendering.leaderboard_frame(view.students)
    feed = rendering.recent_feed_frame(view.recent)

    assert board.empty and list(board.columns) == rendering.LEADERBOARD_COLUMNS
    assert feed.empty and list(feed.columns) == rendering.FEED_COLUMNS


def test_leaderboard_frame():
    board = rendering.leaderboard_frame(_view().students)

    expected = pd.DataFrame(
        {
            "Rank": ["#1", "#2", "#3"],
            "Student": ["Ann", "Unknown", "Zed"],
            "Notes": ["web", "", ""],
            "Cohort": ["A", "-", "-"],
            "Findings": [1, 1, 0],
            "Points": ["5", "2.5", "0"],
            "Latest": ["XSS: Search box", "Finding: Untitled", "No findings"],
        }
    )
    pd.testing.assert_frame_equal(board, expected)
