"""Array and sequence drills: lookups, rearrangements and running sums."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import accumulate, groupby
from typing import Optional, Tuple

__all__ = [
    "first_repeating",
    "reverse_words",
    "compress",
    "move_zeros_to_end",
    "prefix_sums",
    "suffix_sums",
    "max_subarray_sum",
    "two_sum_sorted",
    "pair_with_difference",
    "can_split_equal",
]


def first_repeating(values: Iterable[int]) -> Optional[int]:
    """Return the repeated element whose first occurrence comes earliest.

    Returns None when no element occurs more than once.
    """
    first_index: dict[int, int] = {}
    earliest: Optional[int] = None
    for index, value in enumerate(values):
        if value in first_index:
            seen_at = first_index[value]
            if earliest is None or seen_at < earliest:
                earliest = seen_at
        else:
            first_index[value] = index
    if earliest is None:
        return None
    return next(value for value, idx in first_index.items() if idx == earliest)


def reverse_words(text: str) -> str:
    """Reverse the order of whitespace-separated words, collapsing extra spaces."""
    return " ".join(reversed(text.split()))


def compress(text: str) -> str:
    """Replace each run of equal characters with the character and its run length."""
    if not text:
        raise ValueError("cannot compress an empty string")
    return "".join(f"{char}{sum(1 for _ in run)}" for char, run in groupby(text))


def move_zeros_to_end(values: Iterable[int]) -> list[int]:
    """Return a copy with every zero moved to the end using a two-pointer swap.

    The relative order of the non-zero elements is not guaranteed to be kept.
    """
    result = list(values)
    left, right = 0, len(result) - 1
    while left < right:
        if result[left] != 0:
            left += 1
        elif result[right] == 0:
            right -= 1
        else:
            result[left], result[right] = result[right], result[left]
            left += 1
            right -= 1
    return result


def prefix_sums(values: Iterable[int]) -> list[int]:
    """Return the running totals from the front of the sequence."""
    return list(accumulate(values))


def suffix_sums(values: Sequence[int]) -> list[int]:
    """Return the running totals from the back of the sequence, aligned by index."""
    return list(accumulate(reversed(values)))[::-1]


def max_subarray_sum(values: Iterable[int]) -> int:
    """Return the best running total, restarting the total after each negative element."""
    best: Optional[int] = None
    running = 0
    for value in values:
        running += value
        if best is None or running > best:
            best = running
        if value < 0:
            running = 0
    if best is None:
        raise ValueError("max_subarray_sum() requires at least one value")
    return best


def two_sum_sorted(values: Sequence[int], target: int) -> Optional[Tuple[int, int]]:
    """Find two elements of an ascending sequence that add up to target.

    Returns the pair of values, or None if there is no such pair.
    """
    start, end = 0, len(values) - 1
    while start < end:
        current = values[start] + values[end]
        if current == target:
            return values[start], values[end]
        if current > target:
            end -= 1
        else:
            start += 1
    return None


def pair_with_difference(values: Sequence[int], diff: int) -> Optional[Tuple[int, int]]:
    """Find indices (i, j) in an ascending sequence with values[j] - values[i] == diff.

    Returns None if no such pair is found.
    """
    i, j = 0, 1
    while j < len(values):
        gap = values[j] - values[i]
        if gap == diff:
            return i, j
        if gap > diff:
            i += 1
        else:
            j += 1
    return None


def can_split_equal(values: Sequence[int]) -> bool:
    """Tell whether the sequence splits into a non-empty prefix and suffix of equal sum."""
    total = sum(values)
    return any(2 * prefix == total for prefix in accumulate(values[:-1]))