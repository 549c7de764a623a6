# algodrills

Compact Python solutions to common interview-style exercises on arrays,
strings and singly linked lists. Every function takes ordinary Python
values and returns ordinary Python values; invalid input raises
`ValueError`.

## Installation

```
pip install algodrills
```

To run the test suite, install the test extra and run pytest:

```
pip install "algodrills[test]"
pytest
```

## Modules

### `algodrills.arrays`

- `first_repeating(values)`: the repeated element whose first occurrence comes earliest, or `None` if nothing repeats.
- `reverse_words(text)`: the whitespace-separated words of `text` in reverse order, joined by single spaces.
- `compress(text)`: run-length encoding, for example `"aabbbaa"` becomes `"a2b3a2"`. Raises `ValueError` on an empty string.
- `move_zeros_to_end(values)`: a new list with every zero moved to the end by a two-pointer swap; the order of the non-zero elements is not guaranteed to be kept.
- `prefix_sums(values)` and `suffix_sums(values)`: running totals from the left and from the right, aligned by index.
- `max_subarray_sum(values)`: the best running total, where the total restarts after each negative element. Raises `ValueError` on an empty sequence.
- `two_sum_sorted(values, target)`: a pair of values from an ascending sequence that adds up to `target`, as a tuple, or `None`.
- `pair_with_difference(values, diff)`: indices `(i, j)` in an ascending sequence with `values[j] - values[i] == diff`, or `None`.
- `can_split_equal(values)`: whether the sequence can be cut into a non-empty prefix and suffix with equal sums.

### `algodrills.strings`

- `remove_duplicates(text)`: keeps only the first occurrence of each character.
- `has_unique_chars(text)`: whether no character occurs more than once.
- `first_non_repeating(text)`: the first character that occurs exactly once, or `None`.
- `most_frequent(text)`: the most frequent character and its count as a tuple; ties go to the character that sorts first. Raises `ValueError` on an empty string.
- `duplicate_counts(text)`: a dict of the characters that occur more than once and their counts, ordered by character.
- `sort_by_frequency(text)`: the distinct characters, most frequent first, with ties in alphabetical order.
- `words_with_duplicates(words)` and `words_with_unique_chars(words)`: filter a list of words, keeping input order.
- `anagram_groups(words)`: tuples of two or more words that are anagrams of each other, in order of first appearance.

### `algodrills.conversions`

- `binary_to_decimal(binary)`: parses a string of 0s and 1s (an empty string gives 0); raises `ValueError` on any other character.
- `char_code(ch)`: the code point of a single character; raises `ValueError` if `ch` is not exactly one character.

### `algodrills.linked_list`

`LinkedList` is a singly linked list with `push_front`, `append` and
`render`. It can also be iterated over and supports `len()`; `str()` gives
the same text as `render()`.

```python
from algodrills.linked_list import LinkedList

items = LinkedList()
items.push_front(10)
items.push_front(100)
items.append(20)
print(items.render())   # 100->10->20->NULL
list(items)             # [100, 10, 20]
```

## Example

```python
from algodrills.arrays import compress, first_repeating
from algodrills.strings import sort_by_frequency

compress("aabbbaa")                       # "a2b3a2"
first_repeating([10, 5, 3, 4, 3, 5, 6])   # 5
sort_by_frequency("tree")                 # ['e', 'r', 't']
```

## What it does not do

algodrills is a library only: it installs no command-line tool and reads
no input of its own. Call its functions from your own code.