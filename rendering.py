"""Display text and tables for the leaderboard page.

Everything here reads the pipeline output and returns plain strings, dicts or
DataFrames; nothing is mutated and nothing touches Streamlit.
"""

from __future__ import annotations

import pandas as pd

from leaderboard_logic import LeaderboardView
from scoring import format_date
from utils import format_points, text_or

DEFAULT_TITLE = "Security Discovery Leaderboard"
EMPTY_LEADERBOARD = "No student entries yet."
EMPTY_FEED = "No findings yet. Add entries in data/entries.json."
LOAD_FAILED_LEADERBOARD = "Unable to load leaderboard data. Check data/entries.json."
LOAD_FAILED_FEED = "Data load failed."

LEADERBOARD_COLUMNS = ["Rank", "Student", "Notes", "Cohort", "Findings", "Points", "Latest"]
FEED_COLUMNS = ["Date", "Student", "Cohort", "Type", "Title", "Points", "Program", "URL"]


def meta_labels(view: LeaderboardView) -> dict:
    return {
        "title": view.title or DEFAULT_TITLE,
        "season": view.season or "N/A",
        "last_updated": format_date(view.last_updated),
    }


def stat_labels(view: LeaderboardView) -> dict:
    return {
        "students": str(view.stats.students),
        "findings": str(view.stats.findings),
        "points": format_points(view.stats.points),
    }


def latest_text(student: dict) -> str:
    latest = student.get("latestFinding")
    if not latest:
        return "No findings"
    return f"{text_or(latest.get('type'), 'Finding')}: {text_or(latest.get('title'), 'Untitled')}"


def leaderboard_rows(students) -> list[dict]:
    """One display row per ranked student, rank numbering starting at #1."""
    return [
        {
            "Rank": f"#{index}",
            "Student": text_or(student.get("name"), "Unknown"),
            "Notes": text_or(student.get("notes")),
            "Cohort": text_or(student.get("cohort"), "-"),
            "Findings": student["findingCount"],
            "Points": format_points(student["totalPoints"]),
            "Latest": latest_text(student),
        }
        for index, student in enumerate(students, start=1)
    ]


def feed_item(finding: dict) -> dict:
    """Title, points label, meta line and link for one recent finding."""
    title = f"{text_or(finding.get('type'), 'Finding')} - {text_or(finding.get('title'), 'Untitled')}"
    meta = " | ".join(
        [
            f"{finding['studentName']} ({finding['cohort']})",
            text_or(finding.get("program"), "Program not set"),
            format_date(finding.get("date")),
        ]
    )
    return {
        "title": title,
        "points": f"+{format_points(finding['points'])} pts",
        "meta": meta,
        "url": finding.get("url") or None,
    }


def leaderboard_frame(students) -> pd.DataFrame:
    rows = leaderboard_rows(students)
    if not rows:
        return pd.DataFrame(columns=LEADERBOARD_COLUMNS)
    return pd.DataFrame(rows, columns=LEADERBOARD_COLUMNS)


def recent_feed_frame(findings) -> pd.DataFrame:
    rows = [
        {
            "Date": format_date(f.get("date")),
            "Student": f["studentName"],
            "Cohort": f["cohort"],
            "Type": text_or(f.get("type"), "Finding"),
            "Title": text_or(f.get("title"), "Untitled"),
            "Points": f["points"],
            "Program": text_or(f.get("program")),
            "URL": text_or(f.get("url")),
        }
        for f in findings
    ]
    if not rows:
        return pd.DataFrame(columns=FEED_COLUMNS)
    return pd.DataFrame(rows, columns=FEED_COLUMNS)
