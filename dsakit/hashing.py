"""Array and string problems solved with hash maps, sets and prefix sums."""

from __future__ import annotations

import heapq
from collections import Counter, defaultdict
from collections.abc import Hashable, Iterable, Sequence

_MODULUS = 1_000_000_007


def two_sum(nums: Sequence[int], target: int) -> tuple[int, int]:
    """Return the indices of two elements that add up to ``target``.

    Raises ValueError when no such pair exists.
    """
    seen: dict[int, int] = {}
    for index, value in enumerate(nums):
        wanted = target - value
        if wanted in seen:
            return seen[wanted], index
        seen[value] = index
    raise ValueError(f"no two elements add up to {target}")


def longest_consecutive(nums: Iterable[int]) -> int:
    """Return the length of the longest run of consecutive integers."""
    values = set(nums)
    longest = 0
    for value in values:
        if value - 1 in values:
            continue
        end = value
        while end + 1 in values:
            end += 1
        longest = max(longest, end - value + 1)
    return longest


def contains_duplicate(nums: Iterable[Hashable]) -> bool:
    """Tell whether any value occurs more than once."""
    seen = set()
    for value in nums:
        if value in seen:
            return True
        seen.add(value)
    return False


def is_anagram(s: str, t: str) -> bool:
    """Tell whether ``t`` is a rearrangement of the characters of ``s``."""
    return len(s) == len(t) and Counter(s) == Counter(t)


def _split_on_spaces(s: str) -> list[str]:
    words = s.split(" ")
    if words and words[-1] == "":
        words.pop()
    return words


def word_pattern(pattern: str, s: str) -> bool:
    """Tell whether the space-separated words of ``s`` follow ``pattern``.

    Letters and words must correspond one to one.
    """
    words = _split_on_spaces(s)
    if len(words) != len(pattern):
        return False
    mapping: dict[str, str] = {}
    used: set[str] = set()
    for word, letter in zip(words, pattern):
        mapped = mapping.get(word)
        if mapped is None and letter not in used:
            mapping[word] = letter
            used.add(letter)
        elif mapped != letter:
            return False
    return True


def top_k_frequent(nums: Iterable[int], k: int) -> list[int]:
    """Return the ``k`` most frequent values, least frequent of them first.

    Ties in frequency are broken in favour of larger values.
    """
    counts = Counter(nums)
    kept = heapq.nlargest(k, ((freq, value) for value, freq in counts.items()))
    return [value for _, value in reversed(kept)]


def is_valid_sudoku(board: Sequence[Sequence[str]]) -> bool:
    """Tell whether the filled cells of a 9x9 board break no Sudoku rule.

    Empty cells are written as ``"."``.
    """
    rows: defaultdict[int, set[str]] = defaultdict(set)
    cols: defaultdict[int, set[str]] = defaultdict(set)
    boxes: defaultdict[tuple[int, int], set[str]] = defaultdict(set)
    for i, row in enumerate(board):
        for j, cell in enumerate(row):
            if cell == ".":
                continue
            box = (i // 3, j // 3)
            if cell in rows[i] or cell in cols[j] or cell in boxes[box]:
                return False
            rows[i].add(cell)
            cols[j].add(cell)
            boxes[box].add(cell)
    return True


def group_anagrams(strs: Iterable[str]) -> list[list[str]]:
    """Group words that are anagrams of each other, keeping input order."""
    groups: dict[str, list[str]] = {}
    for word in strs:
        groups.setdefault("".join(sorted(word)), []).append(word)
    return list(groups.values())


def subarray_sum(nums: Iterable[int], k: int) -> int:
    """Count the contiguous subarrays whose elements add up to ``k``."""
    prefix_counts: Counter[int] = Counter({0: 1})
    running = 0
    result = 0
    for value in nums:
        running += value
        result += prefix_counts[running - k]
        prefix_counts[running] += 1
    return result


def _truncated_mod(a: int, b: int) -> int:
    remainder = abs(a) % abs(b)
    return -remainder if a < 0 else remainder


def check_subarray_sum(nums: Iterable[int], k: int) -> bool:
    """Tell whether a subarray of at least two elements sums to a multiple of ``k``.

    With ``k == 0`` the subarray must sum to zero.
    """
    first_seen = {0: -1}
    running = 0
    for index, value in enumerate(nums):
        running += value
        remainder = running if k == 0 else _truncated_mod(running, k)
        if remainder in first_seen:
            if index - first_seen[remainder] >= 2:
                return True
        else:
            first_seen[remainder] = index
    return False


def num_odd_sum_subarrays(arr: Iterable[int]) -> int:
    """Count the subarrays with an odd sum, modulo 10**9 + 7."""
    count = 0
    odd_prefixes = 0
    even_prefixes = 1
    running = 0
    for value in arr:
        running += value
        if running % 2 == 0:
            count = (count + odd_prefixes) % _MODULUS
            even_prefixes += 1
        else:
            count = (count + even_prefixes) % _MODULUS
            odd_prefixes += 1
    return count


def _balance_index(nums: Sequence[int]) -> int:
    total = sum(nums)
    left = 0
    for index, value in enumerate(nums):
        if left == total - left - value:
            return index
        left += value
    return -1


def find_middle_index(nums: Sequence[int]) -> int:
    """Return the leftmost index whose left and right sums are equal, or -1."""
    return _balance_index(nums)


def pivot_index(nums: Sequence[int]) -> int:
    """Return the leftmost pivot index of ``nums``, or -1 if there is none."""
    return _balance_index(nums)