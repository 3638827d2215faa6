"""A cache kept in memory and mirrored to files in a directory."""

from __future__ import annotations

import logging
import os
import pickle
import sys
import tempfile
from datetime import datetime
from pathlib import Path
from urllib.parse import quote

from triagekit.memstore import Blob, Config, ExpiringStore

log = logging.getLogger(__name__)

_DECODE_ERRORS = (
    pickle.UnpicklingError,
    EOFError,
    AttributeError,
    ImportError,
    IndexError,
    TypeError,
    ValueError,
)


def _user_cache_dir() -> str:
    if sys.platform.startswith("win"):
        root = os.environ.get("LOCALAPPDATA", "")
        if not root:
            raise OSError("cache dir: %LocalAppData% is not defined")
        return root
    if sys.platform == "darwin":
        home = os.environ.get("HOME", "")
        if not home:
            raise OSError("cache dir: $HOME is not defined")
        return os.path.join(home, "Library", "Caches")
    xdg = os.environ.get("XDG_CACHE_HOME", "")
    if xdg:
        return xdg
    home = os.environ.get("HOME", "")
    if not home:
        raise OSError("cache dir: neither $XDG_CACHE_HOME nor $HOME are defined")
    return os.path.join(home, ".cache")


class DiskCache:
    """Two-level cache: an expiring memory store backed by one file per key."""

    def __init__(self, config: Config) -> None:
        self.path = config.path
        self.program = config.program
        self._mem: ExpiringStore | None = None

    def __str__(self) -> str:
        return self.path

    def _require(self) -> ExpiringStore:
        if self._mem is None:
            raise RuntimeError("disk cache is not initialized")
        return self._mem

    def _file(self, key: str) -> Path:
        return Path(self.path) / quote(key, safe="")

    def initialize(self) -> None:
        """Choose and create the cache directory."""
        if not self.path:
            self.path = os.path.join(_user_cache_dir(), self.program)
        os.makedirs(self.path, mode=0o755, exist_ok=True)
        log.info("cache dir is %s", self.path)
        self._mem = ExpiringStore()

    def set(self, key: str, blob: Blob) -> None:
        """Store a blob in memory and on disk."""
        mem = self._require()
        if not key:
            raise ValueError("empty key")
        mem.set(key, blob)
        try:
            payload = pickle.dumps(blob)
        except (pickle.PicklingError, TypeError, AttributeError) as err:
            raise ValueError(f"encode: {err}") from err

        fd, tmp = tempfile.mkstemp(dir=self.path, prefix=".tmp-")
        try:
            with os.fdopen(fd, "wb") as fh:
                fh.write(payload)
            os.replace(tmp, self._file(key))
        except BaseException:
            if os.path.exists(tmp):
                os.unlink(tmp)
            raise

    def get(self, key: str, newer_than: datetime | None = None) -> Blob | None:
        """Return a blob no older than ``newer_than`` from memory or disk, or None."""
        mem = self._require()
        found = mem.get(key, newer_than)
        if found is not None:
            return found

        target = self._file(key) if key else None
        if target is None or not target.is_file():
            log.warning("%s is a complete cache miss", key)
            return None

        log.warning("%s was not in memory, resorting to disk cache", key)
        try:
            data = target.read_bytes()
        except OSError as err:
            log.error("disk read failed for %r: %s", key, err)
            return None

        try:
            blob = pickle.loads(data)
        except _DECODE_ERRORS as err:
            log.error("decode failed for %r: %s", key, err)
            return None
        if not isinstance(blob, Blob):
            log.error("decode failed for %r: unexpected %s", key, type(blob).__name__)
            return None

        if newer_than is not None and blob.created is not None and blob.created < newer_than:
            log.warning("found %s on disk, but it was older than %s", key, newer_than)
            return None

        mem.set(key, blob)
        return blob