"""Item filters and the primitive matchers they are built from."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from datetime import datetime, timedelta
from fractions import Fraction
from typing import Any, Iterable

log = logging.getLogger(__name__)

DAY_RE = re.compile(r"(\d+)d")
WEEK_RE = re.compile(r"(\d+)w")
RANGE_RE = re.compile(r"([<>=]*)([\d\.]+)")

_MAX_INT64 = 2**63 - 1

_UNIT_NS = {
    "ns": 1,
    "us": 1_000,
    "µs": 1_000,
    "μs": 1_000,
    "ms": 1_000_000,
    "s": 1_000_000_000,
    "m": 60 * 1_000_000_000,
    "h": 3600 * 1_000_000_000,
}

_PART_RE = re.compile(r"(\d*)(?:\.(\d*))?([^\d.]*)")


@dataclass
class Filter:
    """One set of conditions an item must meet; empty fields are ignored."""

    state: str = ""
    closed_commenters: str = ""
    closed_comments: str = ""
    closed: str = ""
    updated: str = ""
    responded: str = ""
    created: str = ""
    prioritized: str = ""
    reactions: str = ""
    reactions_per_month: str = ""
    commenters: str = ""
    commenters_per_month: str = ""
    comments: str = ""
    title_regex: re.Pattern[str] | None = None
    title_negate: bool = False
    label_regex: re.Pattern[str] | None = None
    label_negate: bool = False
    milestone_regex: re.Pattern[str] | None = None
    milestone_negate: bool = False
    tag_regex: re.Pattern[str] | None = None
    tag_negate: bool = False


def _parse_go_duration(s: str) -> timedelta:
    """Parse a duration such as ``1h30m`` or ``-2.5s``."""
    original = s
    negative = False
    if s[:1] in ("+", "-"):
        negative = s[0] == "-"
        s = s[1:]
    if s == "0":
        return timedelta(0)
    if not s:
        raise ValueError(f"invalid duration {original!r}")

    total = Fraction(0)
    pos = 0
    while pos < len(s):
        m = _PART_RE.match(s, pos)
        whole, frac, unit = m.group(1), m.group(2), m.group(3)
        if not whole and not frac:
            raise ValueError(f"invalid duration {original!r}")
        if not unit:
            raise ValueError(f"missing unit in duration {original!r}")
        if unit not in _UNIT_NS:
            raise ValueError(f"unknown unit {unit!r} in duration {original!r}")
        value = Fraction(int(whole or "0"))
        if frac:
            value += Fraction(int(frac), 10 ** len(frac))
        total += value * _UNIT_NS[unit]
        if total > _MAX_INT64:
            raise ValueError(f"invalid duration {original!r}")
        pos = m.end()

    nanos = int(total)
    micros = nanos // 1000
    return timedelta(microseconds=-micros if negative else micros)


def _expand(pattern: re.Pattern[str], ds: str, hours_per: int) -> str | None:
    m = pattern.search(ds)
    if m is None:
        return ds
    n = int(m.group(1))
    if n > _MAX_INT64:
        log.error("unable to parse duration: %s", m.group(1))
        return None
    return pattern.sub(f"{hours_per * n}h", ds)


def parse_duration(ds: str) -> tuple[timedelta, bool, bool]:
    """Parse ``[-<+>]N{d,w,h,m,s...}`` into (duration, within, over).

    Returns ``(timedelta(0), False, False)`` when the text cannot be parsed.
    """
    failed = (timedelta(0), False, False)
    expanded = _expand(DAY_RE, ds, 24)
    if expanded is None:
        return failed
    expanded = _expand(WEEK_RE, expanded, 24 * 7)
    if expanded is None:
        return failed
    ds = expanded

    within = over = False
    if ds.startswith(("-", "<")):
        ds = ds[1:]
        within = True
    if ds.startswith(("+", ">")):
        ds = ds[1:]
        over = True

    try:
        d = _parse_go_duration(ds)
    except (ValueError, OverflowError) as err:
        log.error("unable to parse duration %s: %s", ds, err)
        return failed
    return d, within, over


def match_duration(t: datetime | None, ds: str) -> bool:
    """Return whether the time since ``t`` is within or over the duration spec."""
    if t is None:
        log.warning("matchDuration against zero time for %s (returning false)", ds)
        return False

    d, within, over = parse_duration(ds)
    since = datetime.now(t.tzinfo) - t
    if within and since < d:
        return True
    if over and since > d:
        return True
    return False


def match_range(value: float, spec: str) -> bool:
    """Compare ``value`` against a spec such as ``>5``, ``<=2.5`` or ``3``."""
    m = RANGE_RE.search(spec)
    if m is None:
        log.error("%r does not match range regexp", spec)
        return False
    modifier, number = m.group(1), m.group(2)
    try:
        d = float(number)
    except ValueError:
        log.error("unable to parse range value: %s", number)
        return False

    if modifier == "":
        return value == d
    if modifier == ">":
        return value > d
    if modifier == "<":
        return value < d
    if modifier == ">=":
        return value >= d
    if modifier == "<=":
        return value <= d
    log.error("unknown range modifier: %s", modifier)
    return False


def _compiled(pattern: re.Pattern[str] | str) -> re.Pattern[str]:
    return re.compile(pattern) if isinstance(pattern, str) else pattern


def match_negate_regex(value: str, pattern: re.Pattern[str] | str, negate: bool) -> bool:
    """Match ``value`` against a pattern, inverting the result when ``negate``."""
    rx = _compiled(pattern)
    if value == "" and rx.pattern not in ("", "^$"):
        return negate
    if rx.search(value):
        return not negate
    return negate


def match_label(labels: Iterable[Any], pattern: re.Pattern[str] | str, negate: bool) -> bool:
    """Return whether any label name matches, inverted when ``negate``."""
    rx = _compiled(pattern)
    for label in labels:
        name = label if isinstance(label, str) else label.name
        if rx.search(name):
            return not negate
    return negate


def match_tag(tags: Iterable[Any], pattern: re.Pattern[str] | str, negate: bool) -> tuple[bool, Any]:
    """Return (matched, tag) for the first tag whose id matches; tag is None if none did."""
    rx = _compiled(pattern)
    for t in tags:
        tag_id = t if isinstance(t, str) else t.id
        if rx.search(tag_id):
            return not negate, t
    return negate, None