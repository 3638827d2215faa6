"""Deciding which raw items a search needs and which of them to analyse."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Collection, Iterable

from triagekit.constants import OPEN_STATE, OPENED_STATE
from triagekit.match import Filter

log = logging.getLogger(__name__)


def needs_closed(filters: Iterable[Filter]) -> bool:
    """Return whether any filter requires closed items to be fetched."""
    for f in filters:
        if f.closed_commenters:
            log.debug("will need closed items due to ClosedCommenters=%s", f.closed_commenters)
            return True
        if f.closed_comments:
            log.debug("will need closed items due to ClosedComments=%s", f.closed_comments)
            return True
        if f.state and f.state not in (OPEN_STATE, OPENED_STATE):
            log.debug("will need closed items due to State=%s", f.state)
            return True
    return False


def _field(item: Any, name: str) -> Any:
    if isinstance(item, Mapping):
        return item.get(name)
    return getattr(item, name, None)


def _is_debugged(debug: Mapping[int, bool] | Collection[int], number: Any) -> bool:
    if isinstance(debug, Mapping):
        return bool(debug.get(number))
    return number in debug


def dedupe_items(
    items: Iterable[Any],
    debug: Mapping[int, bool] | Collection[int] | None = None,
) -> list[Any]:
    """Return items in order without repeated URLs.

    When ``debug`` names any item numbers, only those items are kept.
    Items may be objects or mappings with ``number`` and ``url``.
    """
    kept: list[Any] = []
    seen: set[Any] = set()
    for item in items:
        number = _field(item, "number")
        if debug:
            if not _is_debugged(debug, number):
                continue
            log.error("*** Found debug item #%s", number)

        url = _field(item, "url")
        if url in seen:
            log.error("unusual: I already saw %s", url)
            continue
        seen.add(url)
        kept.append(item)
    return kept