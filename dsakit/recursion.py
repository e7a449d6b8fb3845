"""Recursive generation, grammar rows, perfect squares and happy numbers."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from itertools import product


def _parentheses(open_left: int, close_left: int, prefix: str) -> Iterator[str]:
    if open_left == 0 and close_left == 0:
        yield prefix
        return
    if open_left:
        yield from _parentheses(open_left - 1, close_left, prefix + "(")
    if open_left < close_left:
        yield from _parentheses(open_left, close_left - 1, prefix + ")")


def generate_parenthesis(n: int) -> list[str]:
    """Return every balanced string of ``n`` pairs of parentheses."""
    if n < 0:
        raise ValueError("n must not be negative")
    return list(_parentheses(n, n, ""))


def kth_grammar(n: int, k: int) -> int:
    """Return symbol ``k`` (1-based) of row ``n`` where each 0 becomes 01 and each 1 becomes 10."""
    if n < 1 or not 1 <= k <= 1 << (n - 1):
        raise ValueError("position outside the row")
    flipped = 0
    while n > 1:
        half = 1 << (n - 2)
        if k > half:
            k -= half
            flipped ^= 1
        n -= 1
    return flipped


def letter_case_permutation(s: str) -> list[str]:
    """Return every string made by changing the case of the letters in ``s``.

    Lower case comes before upper case at each letter.
    """
    choices = [
        (ch.lower(), ch.upper()) if ch.isascii() and ch.isalpha() else (ch,)
        for ch in s
    ]
    return ["".join(combo) for combo in product(*choices)]


def num_squares(n: int) -> int:
    """Return the least number of perfect squares that add up to ``n``."""
    if n < 1:
        raise ValueError("n must be positive")
    squares = []
    root = 1
    while root * root <= n:
        squares.append(root * root)
        root += 1
    visited = {n}
    queue = deque([n])
    level = 0
    while queue:
        level += 1
        for _ in range(len(queue)):
            current = queue.popleft()
            for square in squares:
                rest = current - square
                if rest == 0:
                    return level
                if rest < 0:
                    break
                if rest not in visited:
                    visited.add(rest)
                    queue.append(rest)
    return level


def digit_square_sum(n: int) -> int:
    """Return the sum of the squares of the decimal digits of ``n``."""
    total = 0
    while n > 0:
        n, digit = divmod(n, 10)
        total += digit * digit
    return total


def is_happy(n: int) -> bool:
    """Tell whether repeatedly summing squared digits from ``n`` reaches 1."""
    slow = digit_square_sum(n)
    fast = digit_square_sum(digit_square_sum(n))
    if slow == 1 or fast == 1:
        return True
    while fast != slow:
        slow = digit_square_sum(slow)
        fast = digit_square_sum(digit_square_sum(fast))
        if slow == 1 or fast == 1:
            return True
    return False