import pytest

from services.similarity import FUZZY_THRESHOLD, is_close, levenshtein, similarity


def test_levenshtein_identical_is_zero():
    assert levenshtein("kubernetes", "kubernetes") == 0


def test_levenshtein_known_distances():
    assert levenshtein("kitten", "sitting") == 3
    assert levenshtein("", "abc") == 3
    assert levenshtein("abc", "") == 3
    assert levenshtein("flaw", "lawn") == 2


def test_levenshtein_is_symmetric():
    pairs = [("devops", "dev ops"), ("cloud", "cloud computing"), ("rest", "rest api"), ("", "x")]
    for a, b in pairs:
        assert levenshtein(a, b) == levenshtein(b, a)


def test_levenshtein_counts_code_points():
    assert levenshtein("café", "cafe") == 1
    assert levenshtein("日本", "日本語") == 1


def test_similarity_identical_is_one():
    assert similarity("testing", "testing") == 1.0


def test_similarity_both_empty_is_one():
    assert similarity("", "") == 1.0


def test_similarity_one_empty_is_zero():
    assert similarity("", "docker") == 0.0


def test_similarity_formula():
    # distance 3 over max length 7
    assert similarity("kitten", "sitting") == pytest.approx(1 - 3 / 7)


def test_similarity_in_unit_interval():
    for a, b in [("a", "b"), ("frontend", "backend"), ("leadership", "management")]:
        assert 0.0 <= similarity(a, b) <= 1.0


def test_threshold_is_strict():
    assert FUZZY_THRESHOLD == 0.6
    # "abcde" vs "abxyz": distance 3 over 5 -> similarity 0.4
    assert not is_close("abcde", "abxyz")
    # distance 2 over 5 -> exactly 0.6, which is not strictly above
    assert similarity("abcde", "abcyz") == pytest.approx(0.6)
    assert not is_close("abcde", "abcyz")
    # distance 1 over 5 -> 0.8
    assert is_close("abcde", "abcdz")


def test_close_concepts():
    assert is_close("devops", "dev ops")
    assert is_close("version control", "version controls")
    assert not is_close("frontend", "backend")
