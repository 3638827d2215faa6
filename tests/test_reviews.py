from datetime import datetime, timedelta, timezone
from types import SimpleNamespace

from triagekit.reviews import (
    APPROVED,
    CHANGES_REQUESTED,
    CLOSED,
    MERGED,
    NEW_COMMITS,
    PUSHED_AFTER_APPROVAL,
    UNREVIEWED,
    review_state,
)

T0 = datetime(2020, 5, 1, tzinfo=timezone.utc)


def ev(event, created_at=None, commit_id="", url=""):
    return SimpleNamespace(event=event, created_at=created_at, commit_id=commit_id, url=url)


def rv(state, commit_id="", submitted_at=None):
    return SimpleNamespace(state=state, commit_id=commit_id, submitted_at=submitted_at)


def test_no_data_is_unreviewed():
    assert review_state([], []) == UNREVIEWED
    assert review_state(None, None) == UNREVIEWED


def test_merged_event_wins():
    assert review_state([ev("committed", commit_id="c1"), ev("merged")], [rv(APPROVED, "c1")]) == MERGED


def test_closed_pr():
    assert review_state([ev("closed")], [rv(APPROVED)]) == CLOSED


def test_reopened_after_close_is_open():
    result = review_state([ev("closed"), ev("reopened")], [rv(APPROVED, submitted_at=T0)])
    assert result == APPROVED


def test_review_for_last_commit():
    timeline = [ev("committed", commit_id="c1"), ev("committed", commit_id="c2")]
    assert review_state(timeline, [rv(CHANGES_REQUESTED, "c2", T0)]) == CHANGES_REQUESTED


def test_review_only_for_older_commit_means_new_commits():
    timeline = [ev("committed", commit_id="c1"), ev("committed", commit_id="c2")]
    assert review_state(timeline, [rv(APPROVED, "c1", T0)]) == NEW_COMMITS


def test_commit_id_taken_from_url():
    timeline = [ev("committed", url="https://github.com/o/p/commits/abc123")]
    assert review_state(timeline, [rv(APPROVED, "abc123", T0)]) == APPROVED
    assert review_state(timeline, [rv(APPROVED, "other", T0)]) == NEW_COMMITS


def test_force_push_after_approval():
    timeline = [ev("head_ref_force_pushed", created_at=T0 + timedelta(hours=1))]
    assert review_state(timeline, [rv(APPROVED, submitted_at=T0)]) == PUSHED_AFTER_APPROVAL


def test_force_push_before_approval_keeps_approval():
    timeline = [ev("head_ref_force_pushed", created_at=T0)]
    assert review_state(timeline, [rv(APPROVED, submitted_at=T0 + timedelta(hours=1))]) == APPROVED


def test_latest_matching_review_wins():
    reviews = [rv(CHANGES_REQUESTED, submitted_at=T0), rv(APPROVED, submitted_at=T0 + timedelta(hours=1))]
    assert review_state([ev("committed")], reviews) == APPROVED


def test_timeline_only_without_reviews_is_unreviewed():
    assert review_state([ev("committed", commit_id="c1")], []) == UNREVIEWED


def test_accepts_mappings():
    timeline = [{"event": "committed", "commit_id": "c1"}]
    reviews = [{"state": APPROVED, "commit_id": "c1", "submitted_at": T0}]
    assert review_state(timeline, reviews) == APPROVED