"""Helpers for turning raw finding records into scored findings."""

from __future__ import annotations

import math
import numbers
import re
from collections.abc import Mapping
from datetime import date, datetime

import pandas as pd

DEFAULT_POINTS = 1

# pandas resolves these against the wall clock
_RELATIVE_DATES = {"now", "today"}


def canonicalize_type(value) -> str:
    """
    Canonicalize finding types so spelling variants share a scoring key:
    - lowercase, strip spaces
    - collapse every run of non ``[a-z0-9]`` characters into ``_``
    - strip leading/trailing ``_``

    ``"SQL Injection!!"`` and ``"sql-injection"`` both become ``sql_injection``.
    """
    if not value:
        return ""
    x = str(value).strip().lower()
    x = re.sub(r"[^a-z0-9]+", "_", x)
    return x.strip("_")


def _finite_number(value) -> int | float | None:
    """Return *value* as a finite number, or ``None`` if it is not one."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
    elif not isinstance(value, numbers.Real):
        return None

    try:
        number = float(pd.to_numeric(value, errors="coerce"))
    except (TypeError, ValueError, OverflowError):
        return None
    if not math.isfinite(number):
        return None
    return int(number) if number.is_integer() else number


def resolve_points(finding: Mapping, scoring: Mapping | None) -> int | float:
    """Resolve the point value of one *finding*.

    An explicit ``points`` value wins whenever it is a finite number, zero and
    negative values included. Otherwise the canonical ``type`` is looked up in
    *scoring*, and anything that still isn't a finite number scores
    ``DEFAULT_POINTS``.
    """
    explicit = _finite_number(finding.get("points"))
    if explicit is not None:
        return explicit

    table = scoring if isinstance(scoring, Mapping) else {}
    fallback = _finite_number(table.get(canonicalize_type(finding.get("type"))))
    return fallback if fallback is not None else DEFAULT_POINTS


def parse_date(value) -> pd.Timestamp:
    """Parse *value* into a UTC ``Timestamp`` or return ``NaT`` if invalid.

    Numbers are read as epoch milliseconds and dates without a timezone are
    taken as UTC. Relative keywords such as ``"now"`` are invalid. Never raises.
    """
    if value is None or isinstance(value, bool):
        return pd.NaT
    try:
        if isinstance(value, numbers.Real):
            if not math.isfinite(value):
                return pd.NaT
            ts = pd.to_datetime(value, unit="ms", errors="coerce", utc=True)
        elif isinstance(value, str):
            value = value.strip()
            if value.lower() in _RELATIVE_DATES:
                return pd.NaT
            ts = pd.to_datetime(value, errors="coerce", utc=True)
        elif isinstance(value, (datetime, date)):
            ts = pd.to_datetime(value, errors="coerce", utc=True)
        else:
            return pd.NaT
    except (ValueError, TypeError, OverflowError):
        return pd.NaT
    return ts if pd.notna(ts) else pd.NaT


def finding_timestamp(finding: Mapping) -> int:
    """Epoch milliseconds of the finding's ``date``; ``0`` when it is invalid."""
    ts = parse_date(finding.get("date"))
    if pd.isna(ts):
        return 0
    # asm8 keeps dates outside the nanosecond range (before 1677, after 2262)
    return int(ts.as_unit("ms").asm8.astype("int64"))


def format_date(value, default: str = "Unknown date") -> str:
    """Format *value* like ``Jan 1, 2024`` or return *default* if invalid."""
    ts = parse_date(value)
    if pd.isna(ts):
        return default
    return f"{ts:%b} {ts.day}, {ts.year}"
