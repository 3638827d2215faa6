"""Compact timestamps for log lines."""

from __future__ import annotations

from datetime import datetime


def stime(t: datetime) -> str:
    """Return a log-friendly timestamp such as ``0503 04:05:06`` (MMDD HH:MM:SS)."""
    return f"{t.month:02d}{t.day:02d} {t.hour:02d}:{t.minute:02d}:{t.second:02d}"