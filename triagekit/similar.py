"""Title normalisation and a similarity index between item titles."""

from __future__ import annotations

import logging
import re
import threading
from collections import Counter

log = logging.getLogger(__name__)

NON_LETTER_RE = re.compile(r"[^a-zA-Z]")

REMOVE_WORDS = frozenset(
    {
        "a", "an", "and", "are", "as", "be", "by", "can", "does", "has",
        "have", "how", "if", "in", "is", "of", "on", "or", "the", "that",
        "to", "use", "very", "via", "too", "why", "add", "feature", "fix",
        "bug", "fr", "it", "you", "with", "do", "we",
    }
)


def normalize_title(title: str) -> str:
    """Lower-case a title, keep letters only and drop common filler words."""
    keep = []
    for word in title.split(" "):
        word = NON_LETTER_RE.sub("", word)
        if not word:
            continue
        word = word.lower()
        if word in REMOVE_WORDS:
            continue
        keep.append(word)
    normalized = " ".join(keep)
    log.debug("normalized: %s", normalized)
    return normalized


def compare_strings(a: str, b: str) -> float:
    """Return the Sørensen–Dice coefficient of the character bigrams of two strings.

    Whitespace is ignored. Identical strings score 1.0; strings shorter than
    two characters score 0.0 unless identical.
    """
    a = "".join(a.split())
    b = "".join(b.split())
    if a == b:
        return 1.0
    if len(a) < 2 or len(b) < 2:
        return 0.0

    bigrams = Counter(a[pos:pos + 2] for pos in range(len(a) - 1))
    intersection = 0
    for pos in range(len(b) - 1):
        pair = b[pos:pos + 2]
        if bigrams[pair] > 0:
            bigrams[pair] -= 1
            intersection += 1
    return 2.0 * intersection / (len(a) + len(b) - 2)


class SimilarityIndex:
    """Thread-safe tables mapping normalised titles to URLs and to similar titles.

    A ``min_similarity`` of zero disables the index.
    """

    def __init__(self, min_similarity: float = 0.0) -> None:
        self.min_similarity = min_similarity
        self._title_to_urls: dict[str, list[str]] = {}
        self._similar_titles: dict[str, list[str]] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._title_to_urls)

    def add(self, raw_title: str, url: str) -> None:
        """Record that ``url`` carries ``raw_title`` and update similarity links."""
        if self.min_similarity == 0:
            return

        title = normalize_title(raw_title)
        with self._lock:
            existing = self._title_to_urls.get(title)
            if existing is not None:
                if url not in existing:
                    log.debug("updating %r with %s", raw_title, existing)
                    self._title_to_urls[title] = [*existing, url]
                return

            self._title_to_urls[title] = [url]

            similar_to = [
                other
                for other in self._title_to_urls
                if other != title and compare_strings(title, other) > self.min_similarity
            ]
            for other in similar_to:
                log.debug("%r is similar to %r", raw_title, other)
            self._similar_titles[title] = similar_to

            for other in similar_to:
                others = self._similar_titles.get(other)
                if others is not None:
                    self._similar_titles[other] = [*others, title]

    def similar_urls(self, raw_title: str) -> list[str]:
        """Return the URLs of items whose titles resemble ``raw_title``."""
        if self.min_similarity == 0:
            return []
        title = normalize_title(raw_title)
        with self._lock:
            titles = self._similar_titles.get(title)
            if titles is None:
                return []
            urls: list[str] = []
            for other in titles:
                urls.extend(self._title_to_urls.get(other, []))
            return urls