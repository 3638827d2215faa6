from types import SimpleNamespace

from triagekit.match import Filter
from triagekit.selection import dedupe_items, needs_closed


def test_needs_closed_empty():
    assert needs_closed([]) is False


def test_needs_closed_open_states():
    assert needs_closed([Filter(state="open"), Filter(state="opened")]) is False


def test_needs_closed_by_state():
    assert needs_closed([Filter(state="open"), Filter(state="closed")]) is True
    assert needs_closed([Filter(state="all")]) is True


def test_needs_closed_by_closed_commenters():
    assert needs_closed([Filter(closed_commenters=">1")]) is True


def test_needs_closed_by_closed_comments():
    assert needs_closed([Filter(closed_comments=">2")]) is True


def test_needs_closed_unrelated_filters():
    assert needs_closed([Filter(comments=">3", updated="+1d")]) is False


def test_dedupe_removes_repeated_urls_keeping_order():
    items = [
        {"number": 1, "url": "u1"},
        {"number": 2, "url": "u2"},
        {"number": 1, "url": "u1"},
        {"number": 3, "url": "u3"},
    ]
    out = dedupe_items(items)
    assert [i["number"] for i in out] == [1, 2, 3]


def test_dedupe_with_objects():
    a = SimpleNamespace(number=5, url="x")
    b = SimpleNamespace(number=6, url="x")
    assert dedupe_items([a, b]) == [a]


def test_dedupe_debug_mapping_filters():
    items = [{"number": n, "url": f"u{n}"} for n in (1, 2, 3)]
    out = dedupe_items(items, {2: True, 3: False})
    assert out == [items[1]]


def test_dedupe_debug_set_filters():
    items = [{"number": n, "url": f"u{n}"} for n in (1, 2, 3)]
    out = dedupe_items(items, {1, 3})
    assert out == [items[0], items[2]]


def test_dedupe_empty_debug_keeps_all():
    items = [{"number": n, "url": f"u{n}"} for n in (1, 2)]
    assert dedupe_items(items, {}) == items