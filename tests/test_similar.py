import pytest

from triagekit.similar import SimilarityIndex, compare_strings, normalize_title


def test_normalize_drops_filler_words_and_punctuation():
    assert normalize_title("Add the Feature: Foo-Bar!") == "foobar"


def test_normalize_only_filler_words_is_empty():
    assert normalize_title("fix the bug") == ""


def test_normalize_is_idempotent():
    once = normalize_title("Why does Minikube crash on start, with Docker?")
    assert normalize_title(once) == once


def test_normalize_lowercases():
    result = normalize_title("KUBERNETES Dashboard")
    assert result == result.lower()
    assert "kubernetes" in result.split()


def test_compare_identical_is_one():
    assert compare_strings("minikube start", "minikube start") == 1.0


def test_compare_ignores_whitespace():
    assert compare_strings("a b c", "abc") == 1.0


def test_compare_short_strings_score_zero():
    assert compare_strings("a", "ab") == 0.0
    assert compare_strings("", "abc") == 0.0


def test_compare_no_shared_bigrams_is_zero():
    assert compare_strings("abab", "cdcd") == 0.0


def test_compare_worked_example():
    assert compare_strings("healed", "sealed") == pytest.approx(0.8)


@pytest.mark.parametrize(
    "a,b",
    [("night", "nacht"), ("docker driver", "podman driver"), ("abc", "abcd")],
)
def test_compare_symmetric_and_bounded(a, b):
    score = compare_strings(a, b)
    assert score == pytest.approx(compare_strings(b, a))
    assert 0.0 <= score <= 1.0


def test_disabled_index_records_nothing():
    idx = SimilarityIndex(0)
    idx.add("minikube start fails on macos", "https://github.com/o/p/issues/1")
    assert len(idx) == 0
    assert idx.similar_urls("minikube start fails on macos") == []


def test_similar_titles_link_both_ways():
    idx = SimilarityIndex(0.5)
    u1 = "https://github.com/o/p/issues/1"
    u2 = "https://github.com/o/p/issues/2"
    idx.add("minikube start fails on macos", u1)
    idx.add("minikube start fails on macos catalina", u2)
    assert idx.similar_urls("minikube start fails on macos") == [u2]
    assert idx.similar_urls("minikube start fails on macos catalina") == [u1]


def test_dissimilar_titles_not_linked():
    idx = SimilarityIndex(0.5)
    idx.add("minikube start fails on macos", "https://github.com/o/p/issues/1")
    idx.add("dashboard shows wrong memory", "https://github.com/o/p/issues/2")
    assert idx.similar_urls("dashboard shows wrong memory") == []
    assert idx.similar_urls("minikube start fails on macos") == []


def test_same_title_urls_accumulate_without_duplicates():
    idx = SimilarityIndex(0.5)
    u1 = "https://github.com/o/p/issues/1"
    u2 = "https://github.com/o/p/issues/2"
    u3 = "https://github.com/o/p/issues/3"
    idx.add("minikube start fails on macos", u1)
    idx.add("minikube start fails on macos catalina", u2)
    idx.add("Minikube start fails on macOS catalina!", u3)
    idx.add("minikube start fails on macos catalina", u2)
    assert idx.similar_urls("minikube start fails on macos") == [u2, u3]
    assert len(idx) == 2


def test_unknown_title_has_no_similar_urls():
    idx = SimilarityIndex(0.5)
    idx.add("minikube start fails on macos", "https://github.com/o/p/issues/1")
    assert idx.similar_urls("something never seen") == []