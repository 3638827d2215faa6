"""Tracking the latest known modification time of items.

Providers do not always bump an item's update time for events such as
cross-references, so later sightings are recorded here and preferred.
"""

from __future__ import annotations

import logging
import threading
from datetime import datetime

log = logging.getLogger(__name__)


def ref_key(org: str, project: str, num: int) -> str:
    """Return the tracking key for an item, e.g. ``org/project#12``."""
    return f"{org}/{project}#{num}"


def update_key(url: str) -> str:
    """Return the tracking key for an item's web URL, or "" if the URL is malformed."""
    parts = url.split("/")
    if len(parts) < 7:
        log.error("unexpected URL: %s -> %s", url, parts)
        return ""
    return f"{parts[-4]}/{parts[-3]}#{parts[-1]}"


class UpdateTracker:
    """Thread-safe map from item key to the latest time it was seen updated."""

    def __init__(self) -> None:
        self._updated: dict[str, datetime] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._updated)

    def updated_at(self, key: str) -> datetime | None:
        """Return the recorded update time for ``key``, or None if unknown."""
        with self._lock:
            return self._updated.get(key)

    def mtime_key(self, idea: datetime | None, key: str) -> datetime | None:
        """Return the later of ``idea`` and the recorded update time for ``key``."""
        seen = self.updated_at(key)
        log.debug("%s was definitely updated by %s - possibly by %s", key, idea, seen)
        if seen is None:
            return idea
        if idea is None or seen > idea:
            return seen
        return idea

    def update(self, key: str, ts: datetime | None) -> None:
        """Record ``ts`` for ``key`` if it is later than what is known."""
        if ts is None:
            return
        with self._lock:
            current = self._updated.get(key)
            if current is None or ts > current:
                if current is not None:
                    log.debug("Updating %s last update time for %s to %s", key, current, ts)
                self._updated[key] = ts