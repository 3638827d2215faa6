"""Cache records and the in-memory, expiring store shared by every backend."""

from __future__ import annotations

import logging
import threading
import time
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Any, Callable

log = logging.getLogger(__name__)

MEM_EXPIRATION = timedelta(days=7)
MEM_CLEANUP_INTERVAL = timedelta(hours=12)


@dataclass
class Config:
    """Cache configuration: program name, backend type and backend path."""

    program: str = ""
    backend: str = ""
    path: str = ""


@dataclass
class Blob:
    """A cached bundle of provider data, stamped with its creation time."""

    created: datetime | None = None
    pull_requests: list[Any] = field(default_factory=list)
    issues: list[Any] = field(default_factory=list)
    pull_request_comments: list[Any] = field(default_factory=list)
    issue_comments: list[Any] = field(default_factory=list)
    timeline: list[Any] = field(default_factory=list)
    reviews: list[Any] = field(default_factory=list)
    # Provider-specific payloads used by other tools.
    extras: dict[str, Any] = field(default_factory=dict)


class ExpiringStore:
    """Thread-safe key/blob map whose entries expire after a fixed lifetime."""

    def __init__(
        self,
        expiration: timedelta = MEM_EXPIRATION,
        cleanup_interval: timedelta = MEM_CLEANUP_INTERVAL,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._ttl = expiration.total_seconds()
        self._cleanup_every = cleanup_interval.total_seconds()
        self._clock = clock
        self._items: dict[str, tuple[Blob, float]] = {}
        self._lock = threading.Lock()
        self._last_cleanup = clock()

    def _purge(self, now: float) -> None:
        expired = [k for k, (_, deadline) in self._items.items() if deadline <= now]
        for key in expired:
            del self._items[key]
        self._last_cleanup = now

    def set(self, key: str, blob: Blob) -> None:
        """Store ``blob`` under ``key``, stamping it with the current time if unset."""
        if blob.created is None:
            blob.created = datetime.now(timezone.utc)
        log.debug("Storing %s within in-memory cache (created: %s)", key, blob.created)
        with self._lock:
            now = self._clock()
            if now - self._last_cleanup >= self._cleanup_every:
                self._purge(now)
            self._items[key] = (blob, now + self._ttl)

    def get(self, key: str, newer_than: datetime | None = None) -> Blob | None:
        """Return the blob for ``key`` unless missing, expired or older than ``newer_than``."""
        with self._lock:
            entry = self._items.get(key)
            if entry is not None and entry[1] <= self._clock():
                del self._items[key]
                entry = None

        if entry is None:
            log.debug("%s is not within in-memory cache!", key)
            return None

        blob = entry[0]
        if blob.created is not None and blob.created > datetime.now(timezone.utc):
            log.error("%s claims to be created in the future: %s ???", key, blob.created)

        if newer_than is not None and blob.created is not None and blob.created < newer_than:
            return None
        return blob


class MemoryCache:
    """A cache that lives only in process memory."""

    def __init__(self, config: Config | None = None) -> None:
        self._store: ExpiringStore | None = None

    def __str__(self) -> str:
        return "memory"

    def _require(self) -> ExpiringStore:
        if self._store is None:
            raise RuntimeError("memory cache is not initialized")
        return self._store

    def initialize(self) -> None:
        """Create the backing store."""
        self._store = ExpiringStore()

    def set(self, key: str, blob: Blob) -> None:
        """Store a blob."""
        self._require().set(key, blob)

    def get(self, key: str, newer_than: datetime | None = None) -> Blob | None:
        """Return a blob no older than ``newer_than``, or None."""
        return self._require().get(key, newer_than)