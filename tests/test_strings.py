from collections import Counter

import pytest
from hypothesis import given
from hypothesis import strategies as st

from algodrills.strings import (
    anagram_groups,
    duplicate_counts,
    first_non_repeating,
    has_unique_chars,
    most_frequent,
    remove_duplicates,
    sort_by_frequency,
    words_with_duplicates,
    words_with_unique_chars,
)

small_text = st.text(alphabet="abcdefxyz", max_size=30)


def _is_subsequence(short, long):
    it = iter(long)
    return all(ch in it for ch in short)


def test_remove_duplicates_documented_example():
    assert remove_duplicates("programming") == "progamin"


def test_remove_duplicates_empty():
    assert remove_duplicates("") == ""


@given(small_text)
def test_remove_duplicates_invariants(text):
    result = remove_duplicates(text)
    assert set(result) == set(text)
    assert len(result) == len(set(result))
    assert _is_subsequence(result, text)
    assert remove_duplicates(result) == result


@given(small_text)
def test_has_unique_chars_matches_dedup(text):
    assert has_unique_chars(text) == (remove_duplicates(text) == text)


def test_words_with_unique_chars_documented_example():
    assert words_with_unique_chars(["apple", "ball", "cat", "dog"]) == ["cat", "dog"]


@given(st.lists(small_text, max_size=10))
def test_word_filters_partition_input(words):
    unique = words_with_unique_chars(words)
    dup = words_with_duplicates(words)
    assert len(unique) + len(dup) == len(words)
    assert all(has_unique_chars(w) for w in unique)
    assert not any(has_unique_chars(w) for w in dup)


def test_first_non_repeating_source_example():
    assert first_non_repeating("zaabbcddbe") == "z"


def test_first_non_repeating_skips_repeats():
    assert first_non_repeating("aabbcddbe") == "c"


def test_first_non_repeating_none_when_all_repeat():
    assert first_non_repeating("aabb") is None


@given(small_text)
def test_first_non_repeating_invariant(text):
    result = first_non_repeating(text)
    if result is None:
        assert all(text.count(ch) > 1 for ch in text)
    else:
        assert text.count(result) == 1
        prefix = text[: text.index(result)]
        assert all(text.count(ch) > 1 for ch in prefix)


def test_most_frequent_documented_example():
    assert most_frequent("aabbbcddddd") == ("d", 5)


def test_most_frequent_empty_raises():
    with pytest.raises(ValueError):
        most_frequent("")


@given(small_text.filter(bool))
def test_most_frequent_invariants(text):
    ch, count = most_frequent(text)
    assert text.count(ch) == count
    counts = Counter(text)
    assert all(n <= count for n in counts.values())
    assert all(other >= ch for other, n in counts.items() if n == count)


def test_duplicate_counts_documented_example():
    assert duplicate_counts("aabccddee") == {"a": 2, "c": 2, "d": 2, "e": 2}


@given(small_text)
def test_duplicate_counts_invariants(text):
    result = duplicate_counts(text)
    assert list(result) == sorted(result)
    for ch, n in result.items():
        assert n > 1
        assert text.count(ch) == n
    assert set(result) == {ch for ch in text if text.count(ch) > 1}


def test_anagram_groups_documented_example():
    words = ["listen", "silent", "rat", "tar", "art"]
    assert anagram_groups(words) == [("listen", "silent"), ("rat", "tar", "art")]


def test_anagram_groups_no_singletons():
    assert anagram_groups(["abc", "def"]) == []


@given(st.lists(st.text(alphabet="abc", max_size=3), max_size=12))
def test_anagram_groups_invariants(words):
    groups = anagram_groups(words)
    for group in groups:
        assert len(group) > 1
        assert len({"".join(sorted(w)) for w in group}) == 1
    flat = [w for group in groups for w in group]
    assert len(flat) <= len(words)


def test_sort_by_frequency_example():
    assert sort_by_frequency("tree") == ["e", "r", "t"]


@given(small_text)
def test_sort_by_frequency_invariants(text):
    result = sort_by_frequency(text)
    assert sorted(result) == sorted(set(text))
    keys = [(-text.count(ch), ch) for ch in result]
    assert keys == sorted(keys)