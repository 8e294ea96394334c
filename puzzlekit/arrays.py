"""Array and hashing puzzles."""

from __future__ import annotations

from collections import Counter
from collections.abc import Hashable, Iterable, Sequence
from itertools import accumulate
from operator import mul
from string import ascii_lowercase

_EMPTY_CELL = "."
_BOARD_SIZE = 9


def two_sum(nums: Sequence[int], target: int) -> list[int]:
    """Return the indices of two distinct entries adding up to ``target``.

    The first index is the earliest one that has a partner after it; an
    empty list is returned when no pair exists.
    """
    remaining = Counter(nums)
    for i, value in enumerate(nums):
        wanted = target - value
        remaining[value] -= 1
        if remaining[wanted] > 0:
            j = next(k for k in range(i + 1, len(nums)) if nums[k] == wanted)
            return [i, j]
    return []


def longest_consecutive(nums: Iterable[int]) -> int:
    """Return the length of the longest run of consecutive integers."""
    values = set(nums)
    longest = 0
    for start in values:
        if start - 1 in values:
            continue
        end = start
        while end + 1 in values:
            end += 1
        longest = max(longest, end - start + 1)
    return longest


def longest_common_prefix(strs: Sequence[str]) -> str:
    """Return the longest prefix shared by every string."""
    prefix = []
    for chars in zip(*strs):
        first = chars[0]
        if any(ch != first for ch in chars):
            break
        prefix.append(first)
    return "".join(prefix)


def get_concatenation(nums: Sequence[int]) -> list[int]:
    """Return the sequence followed by itself."""
    return [*nums, *nums]


def contains_duplicate(nums: Iterable[Hashable]) -> bool:
    """Tell whether any value appears more than once."""
    return any(count > 1 for count in Counter(nums).values())


def product_except_self(nums: Sequence[int]) -> list[int]:
    """Return, for each position, the product of all the other entries."""
    if not nums:
        return []
    prefix = list(accumulate(nums[:-1], mul, initial=1))
    suffix = list(accumulate(reversed(nums[1:]), mul, initial=1))[::-1]
    return [before * after for before, after in zip(prefix, suffix)]


def is_anagram(s: str, t: str) -> bool:
    """Tell whether ``t`` is a rearrangement of ``s``."""
    return len(s) == len(t) and Counter(s) == Counter(t)


def remove_element(nums: list[int], val: int) -> int:
    """Remove every occurrence of ``val`` from ``nums`` in place.

    Returns the number of entries left.
    """
    nums[:] = [x for x in nums if x != val]
    return len(nums)


def top_k_frequent(nums: Iterable[int], k: int) -> list[int]:
    """Return the ``k`` most frequent values, most frequent first.

    Ties in frequency go to the larger value.
    """
    ranked = sorted(
        ((count, value) for value, count in Counter(nums).items()), reverse=True
    )
    if k < 0 or k > len(ranked):
        raise ValueError(f"k must be between 0 and {len(ranked)}, got {k}")
    return [value for _, value in ranked[:k]]


def is_valid_sudoku(board: Sequence[Sequence[str]]) -> bool:
    """Tell whether the filled cells of a 9x9 board break no sudoku rule."""
    rows: list[set[str]] = [set() for _ in range(_BOARD_SIZE)]
    cols: list[set[str]] = [set() for _ in range(_BOARD_SIZE)]
    boxes: list[set[str]] = [set() for _ in range(_BOARD_SIZE)]
    for i, row in enumerate(board[:_BOARD_SIZE]):
        for j, cell in enumerate(row[:_BOARD_SIZE]):
            if cell == _EMPTY_CELL:
                continue
            box = (i // 3) * 3 + j // 3
            if cell in rows[i] or cell in cols[j] or cell in boxes[box]:
                return False
            rows[i].add(cell)
            cols[j].add(cell)
            boxes[box].add(cell)
    return True


def _letter_signature(word: str) -> tuple[int, ...]:
    counts = Counter(word)
    unexpected = set(counts) - set(ascii_lowercase)
    if unexpected:
        raise ValueError(
            f"only lowercase ASCII letters are allowed, got {sorted(unexpected)!r}"
        )
    return tuple(counts[letter] for letter in ascii_lowercase)


def group_anagrams(strs: Iterable[str]) -> list[list[str]]:
    """Group lowercase words that are anagrams of one another."""
    groups: dict[tuple[int, ...], list[str]] = {}
    for word in strs:
        groups.setdefault(_letter_signature(word), []).append(word)
    return list(groups.values())