"""Cache keys for repository searches and reaction tallies."""

from __future__ import annotations

from datetime import timedelta
from typing import Any

REACT_THUMBS_UP = "thumbs_up"
REACT_THUMBS_DOWN = "thumbs_down"
REACT_LAUGH = "laugh"
REACT_CONFUSED = "confused"
REACT_HEART = "heart"
REACT_HOORAY = "hooray"

# Reaction name -> attribute holding its count on a reactions record.
_REACTION_FIELDS = {
    REACT_THUMBS_UP: "plus_one",
    REACT_THUMBS_DOWN: "minus_one",
    REACT_LAUGH: "laugh",
    REACT_CONFUSED: "confused",
    REACT_HEART: "heart",
    REACT_HOORAY: "hooray",
}


def _search_key(org: str, project: str, state: str, kind: str, update_age: timedelta | None) -> str:
    base = f"{org}-{project}-{state}-{kind}"
    if update_age is not None and update_age > timedelta(0):
        hours = update_age.total_seconds() / 3600
        return f"{base}-within-{hours:.1f}h"
    return base


def issue_search_key(org: str, project: str, state: str, update_age: timedelta | None = None) -> str:
    """Return the cache key for an issue listing."""
    return _search_key(org, project, state, "issues", update_age)


def pr_search_key(org: str, project: str, state: str, update_age: timedelta | None = None) -> str:
    """Return the cache key for a pull request listing."""
    return _search_key(org, project, state, "prs", update_age)


def reactions(r: Any) -> dict[str, int]:
    """Return reaction counts by name; a missing record counts as all zeros."""
    return {name: (getattr(r, attr, 0) or 0) for name, attr in _REACTION_FIELDS.items()}