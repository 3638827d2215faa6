"""Working out where a pull request's review process was left off."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Iterable

log = logging.getLogger(__name__)

UNREVIEWED = "UNREVIEWED"
NEW_COMMITS = "NEW_COMMITS"
CHANGES_REQUESTED = "CHANGES_REQUESTED"
APPROVED = "APPROVED"
PUSHED_AFTER_APPROVAL = "PUSHED_AFTER_APPROVAL"
COMMENTED = "COMMENTED"
MERGED = "MERGED"
CLOSED = "CLOSED"


def _get(obj: Any, name: str) -> Any:
    if obj is None:
        return None
    if isinstance(obj, dict):
        return obj.get(name)
    return getattr(obj, name, None)


def _before(a: datetime | None, b: datetime | None) -> bool:
    """Return whether ``a`` is earlier than ``b``; None is the earliest possible time."""
    if b is None:
        return False
    if a is None:
        return True
    return a < b


def review_state(timeline: Iterable[Any] | None, reviews: Iterable[Any] | None) -> str:
    """Return the review state implied by a pull request's timeline events and reviews.

    Timeline events carry ``event``, ``created_at``, ``commit_id`` and ``url``;
    reviews carry ``commit_id``, ``state`` and ``submitted_at``. Either may be
    an object with those attributes or a mapping with those keys.
    """
    events = list(timeline or [])
    review_list = list(reviews or [])

    if not events and not review_list:
        log.info("Asked for a review state, but have no input data")
        return UNREVIEWED

    last_commit_id = ""
    last_push_time: datetime | None = None
    is_open = True

    for ev in events:
        kind = _get(ev, "event") or ""
        if kind == "merged":
            return MERGED
        if kind == "head_ref_force_pushed":
            last_push_time = _get(ev, "created_at")
        if kind == "committed":
            commit = _get(ev, "commit_id") or ""
            url = _get(ev, "url") or ""
            if not commit and "/commits/" in url:
                commit = url.split("/")[-1]
            last_commit_id = commit
        if kind == "reopened":
            is_open = True
        if kind == "closed":
            is_open = False

    if not is_open:
        return CLOSED

    state = UNREVIEWED
    last_review: datetime | None = None
    for r in review_list:
        commit = _get(r, "commit_id") or ""
        if commit == last_commit_id or not last_commit_id:
            last_review = _get(r, "submitted_at")
            state = _get(r, "state") or ""
            log.debug("found %r review at %s for final commit: %s", state, last_review, last_commit_id)
        else:
            log.debug("found %r review for older commit: %s", _get(r, "state"), commit)

    if state == UNREVIEWED and review_list:
        state = NEW_COMMITS

    if state == APPROVED and _before(last_review, last_push_time):
        state = PUSHED_AFTER_APPROVAL

    return state