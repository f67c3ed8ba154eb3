"""Helper functions for computing the leaderboard from the entries document."""

from __future__ import annotations

import unicodedata
from collections.abc import Mapping
from typing import NamedTuple

from scoring import finding_timestamp, resolve_points

RECENT_LIMIT = 10


class LeaderboardStats(NamedTuple):
    students: int
    findings: int
    points: int | float


class LeaderboardView(NamedTuple):
    """Everything one run of the pipeline hands to the page."""

    title: str
    season: str
    last_updated: str
    students: tuple[dict, ...]
    recent: tuple[dict, ...]
    stats: LeaderboardStats


def _as_records(value) -> list[dict]:
    if not isinstance(value, (list, tuple)):
        return []
    return [dict(item) if isinstance(item, Mapping) else {} for item in value]


def _as_text(value) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


def decode_document(raw) -> dict:
    """Map the loaded JSON onto the document shape, defaulting bad fields.

    Only a top-level value that is not an object is rejected; every nested
    field is coerced (non-list ``students``/``findings`` become empty lists,
    non-object entries become empty records, a non-object ``scoring`` table
    becomes empty). The input is never mutated.
    """
    if not isinstance(raw, Mapping):
        raise ValueError("Leaderboard document must be a JSON object.")

    students = []
    for student in _as_records(raw.get("students")):
        student["findings"] = _as_records(student.get("findings"))
        students.append(student)

    scoring = raw.get("scoring")
    return {
        "title": _as_text(raw.get("title")),
        "season": _as_text(raw.get("season")),
        "lastUpdated": _as_text(raw.get("lastUpdated")),
        "scoring": dict(scoring) if isinstance(scoring, Mapping) else {},
        "students": students,
    }


def _score_student(student: dict, scoring: Mapping) -> dict:
    findings = [
        {**finding, "points": resolve_points(finding, scoring)}
        for finding in student["findings"]
    ]
    # sorted() is stable, so equal timestamps keep input order
    by_recency = sorted(findings, key=lambda f: -finding_timestamp(f))

    return {
        **student,
        "findings": findings,
        "findingCount": len(findings),
        "totalPoints": sum(f["points"] for f in findings),
        "latestFinding": by_recency[0] if by_recency else None,
    }


def _name_key(name) -> tuple[str, str, str]:
    """Locale-style ordering: accents and case only break ties."""
    text = _as_text(name)
    folded = "".join(
        c for c in unicodedata.normalize("NFKD", text) if not unicodedata.combining(c)
    )
    return folded.casefold(), text.casefold(), text.swapcase()


def rank_key(student: Mapping) -> tuple:
    """Sort key: most points, then most findings, then name A-Z."""
    return (-student["totalPoints"], -student["findingCount"], _name_key(student.get("name")))


def build_students(document) -> list[dict]:
    """Score every finding and return the students in leaderboard order."""
    document = decode_document(document)
    scored = [_score_student(s, document["scoring"]) for s in document["students"]]
    return sorted(scored, key=rank_key)


def flatten_findings(students: list[dict]) -> list[dict]:
    """Every finding across *students*, newest first then highest points.

    Findings that tie on both keys keep leaderboard order, then their order
    within the student.
    """
    findings = [
        {
            **finding,
            "studentName": student.get("name") or "Unknown",
            "cohort": student.get("cohort") or "-",
        }
        for student in students
        for finding in student["findings"]
    ]
    return sorted(findings, key=lambda f: (-finding_timestamp(f), -f["points"]))


def recent_findings(students: list[dict], limit: int = RECENT_LIMIT) -> list[dict]:
    return flatten_findings(students)[: max(int(limit), 0)]


def compute_stats(students: list[dict]) -> LeaderboardStats:
    return LeaderboardStats(
        students=len(students),
        findings=sum(s["findingCount"] for s in students),
        points=sum(s["totalPoints"] for s in students),
    )


def build_leaderboard(raw, *, recent_limit: int = RECENT_LIMIT) -> LeaderboardView:
    """Run the whole pipeline over one loaded document."""
    document = decode_document(raw)
    students = build_students(document)
    return LeaderboardView(
        title=document["title"],
        season=document["season"],
        last_updated=document["lastUpdated"],
        students=tuple(students),
        recent=tuple(recent_findings(students, recent_limit)),
        stats=compute_stats(students),
    )
