"""Small numeric and character conversions."""

from __future__ import annotations

__all__ = ["binary_to_decimal", "char_code"]


def binary_to_decimal(binary: str) -> int:
    """Convert a string of binary digits to its integer value.

    Leading zeros are allowed and an empty string gives 0.
    Raises ValueError on any character other than '0' or '1'.
    """
    result = 0
    for power, digit in enumerate(reversed(binary)):
        if digit not in "01":
            raise ValueError(f"invalid binary digit {digit!r} in {binary!r}")
        result += int(digit) << power
    return result


def char_code(ch: str) -> int:
    """Return the code point of a single character."""
    if len(ch) != 1:
        raise ValueError(f"expected a single character, got {ch!r}")
    return ord(ch)