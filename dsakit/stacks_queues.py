"""Problems solved with stacks, and queues built on stacks and on a ring buffer."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Optional

_PAIRS = {")": "(", "]": "[", "}": "{"}
_OPENERS = frozenset(_PAIRS.values())


def is_valid_parentheses(s: str) -> bool:
    """Tell whether every bracket in ``s`` is closed in the right order."""
    stack: list[str] = []
    for char in s:
        if char in _OPENERS:
            stack.append(char)
            continue
        if not stack:
            return False
        top = stack.pop()
        expected = _PAIRS.get(char)
        if expected is not None and top != expected:
            return False
    return not stack


class StackQueue:
    """A first-in first-out queue kept in two stacks."""

    def __init__(self) -> None:
        self._front: list[Any] = []
        self._rear: list[Any] = []

    def __len__(self) -> int:
        return len(self._front) + len(self._rear)

    def _shift(self) -> None:
        if not self._front:
            while self._rear:
                self._front.append(self._rear.pop())
        if not self._front:
            raise IndexError("queue is empty")

    def push(self, x: Any) -> None:
        """Add ``x`` at the back of the queue."""
        self._rear.append(x)

    def pop(self) -> Any:
        """Remove and return the element at the front."""
        self._shift()
        return self._front.pop()

    def peek(self) -> Any:
        """Return the element at the front without removing it."""
        self._shift()
        return self._front[-1]


def decode_string(s: str) -> str:
    """Expand ``k[text]`` groups, which may nest, into ``text`` repeated ``k`` times."""
    counts: list[int] = []
    prefixes: list[str] = []
    current = ""
    number = 0
    for char in s:
        if char.isdigit():
            number = number * 10 + int(char)
        elif char == "[":
            counts.append(number)
            prefixes.append(current)
            number = 0
            current = ""
        elif char == "]":
            if not counts:
                raise ValueError("unbalanced ']' in encoded string")
            current = prefixes.pop() + current * counts.pop()
        else:
            current += char
    return current


def next_greater_element(nums1: Sequence[int], nums2: Sequence[int]) -> list[int]:
    """For each value of ``nums1``, return the first greater value after it in ``nums2``, or -1."""
    stack: list[int] = []
    greater: dict[int, int] = {}
    for value in reversed(nums2):
        while stack and stack[-1] <= value:
            stack.pop()
        greater[value] = stack[-1] if stack else -1
        stack.append(value)
    try:
        return [greater[value] for value in nums1]
    except KeyError as exc:
        raise ValueError(f"{exc.args[0]!r} does not occur in nums2") from None


class CircularQueue:
    """A bounded first-in first-out queue in a fixed ring of slots."""

    def __init__(self, k: int) -> None:
        if k < 0:
            raise ValueError("capacity must not be negative")
        self._capacity = k
        self._slots: list[Optional[Any]] = [None] * k
        self._head = 0
        self._tail = -1
        self._count = 0

    def __len__(self) -> int:
        return self._count

    def enqueue(self, value: Any) -> bool:
        """Add ``value`` at the back; return False if the queue is full."""
        if self.is_full():
            return False
        self._tail = (self._tail + 1) % self._capacity
        self._slots[self._tail] = value
        self._count += 1
        return True

    def dequeue(self) -> bool:
        """Drop the front element; return False if the queue is empty."""
        if self.is_empty():
            return False
        self._head = (self._head + 1) % self._capacity
        self._count -= 1
        return True

    def front(self) -> Any:
        """Return the front element."""
        if self.is_empty():
            raise IndexError("queue is empty")
        return self._slots[self._head]

    def rear(self) -> Any:
        """Return the back element."""
        if self.is_empty():
            raise IndexError("queue is empty")
        return self._slots[self._tail]

    def is_empty(self) -> bool:
        return self._count == 0

    def is_full(self) -> bool:
        return self._count == self._capacity


def simplify_path(path: str) -> str:
    """Return the canonical form of an absolute Unix-style path."""
    parts: list[str] = []
    for token in path.split("/"):
        if token in ("", "."):
            continue
        if token != "..":
            parts.append(token)
        elif parts:
            parts.pop()
    return "/" + "/".join(parts)


def daily_temperatures(temperatures: Sequence[int]) -> list[int]:
    """For each day, return how many days until a warmer one, or 0 if none comes."""
    answer = [0] * len(temperatures)
    waiting: list[int] = []
    for day, temperature in enumerate(temperatures):
        while waiting and temperature > temperatures[waiting[-1]]:
            earlier = waiting.pop()
            answer[earlier] = day - earlier
        waiting.append(day)
    return answer