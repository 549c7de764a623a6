"""String drills: duplicates, uniqueness, frequencies and anagrams."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable
from typing import Optional, Tuple

__all__ = [
    "remove_duplicates",
    "has_unique_chars",
    "words_with_duplicates",
    "first_non_repeating",
    "most_frequent",
    "duplicate_counts",
    "words_with_unique_chars",
    "anagram_groups",
    "sort_by_frequency",
]


def remove_duplicates(text: str) -> str:
    """Drop repeated characters, keeping only the first occurrence of each."""
    return "".join(dict.fromkeys(text))


def has_unique_chars(text: str) -> bool:
    """Tell whether no character occurs more than once in the text."""
    seen: set[str] = set()
    for ch in text:
        if ch in seen:
            return False
        seen.add(ch)
    return True


def words_with_duplicates(words: Iterable[str]) -> list[str]:
    """Return, in order, the words that contain some character more than once."""
    return [word for word in words if not has_unique_chars(word)]


def words_with_unique_chars(words: Iterable[str]) -> list[str]:
    """Return, in order, the words in which every character is distinct."""
    return [word for word in words if has_unique_chars(word)]


def first_non_repeating(text: str) -> Optional[str]:
    """Return the first character that occurs exactly once, or None if there is none."""
    counts = Counter(text)
    return next((ch for ch in text if counts[ch] == 1), None)


def most_frequent(text: str) -> Tuple[str, int]:
    """Return the most frequent character and its count.

    Ties go to the character that sorts first. Raises ValueError on empty text.
    """
    if not text:
        raise ValueError("most_frequent() requires a non-empty string")
    counts = Counter(text)
    return max(sorted(counts.items()), key=lambda item: item[1])


def duplicate_counts(text: str) -> dict[str, int]:
    """Map each character occurring more than once to its count, ordered by character."""
    counts = Counter(text)
    return {ch: n for ch, n in sorted(counts.items()) if n > 1}


def anagram_groups(words: Iterable[str]) -> list[tuple[str, ...]]:
    """Group words that are anagrams of one another.

    Only groups of two or more words are returned, in order of each group's
    first appearance; words keep their input order within a group.
    """
    groups: dict[str, list[str]] = {}
    for word in words:
        groups.setdefault("".join(sorted(word)), []).append(word)
    return [tuple(group) for group in groups.values() if len(group) > 1]


def sort_by_frequency(text: str) -> list[str]:
    """Return the distinct characters, most frequent first, ties in alphabetical order."""
    counts = Counter(text)
    return sorted(counts, key=lambda ch: (-counts[ch], ch))