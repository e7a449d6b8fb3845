"""Classic problems on singly linked lists built from ``ListNode``."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Optional


@dataclass(eq=False)
class ListNode:
    """A node of a singly linked list."""

    val: int = 0
    next: Optional["ListNode"] = None


def build_list(values: Iterable[int]) -> Optional[ListNode]:
    """Build a linked list from ``values`` and return its head."""
    head: Optional[ListNode] = None
    tail: Optional[ListNode] = None
    for value in values:
        node = ListNode(value)
        if tail is None:
            head = node
        else:
            tail.next = node
        tail = node
    return head


def list_values(head: Optional[ListNode]) -> list[int]:
    """Return the values of an acyclic list in order."""
    values = []
    while head is not None:
        values.append(head.val)
        head = head.next
    return values


def has_cycle(head: Optional[ListNode]) -> bool:
    """Tell whether following ``next`` from ``head`` ever loops."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next  # type: ignore[union-attr]
        fast = fast.next.next
        if slow is fast:
            return True
    return False


def detect_cycle(head: Optional[ListNode]) -> Optional[ListNode]:
    """Return the node where the cycle begins, or None if there is none."""
    slow = fast = entry = head
    while fast is not None and fast.next is not None:
        slow = slow.next  # type: ignore[union-attr]
        fast = fast.next.next
        if slow is fast:
            while slow is not entry:
                slow = slow.next  # type: ignore[union-attr]
                entry = entry.next  # type: ignore[union-attr]
            return entry
    return None


def reverse_list(head: Optional[ListNode]) -> Optional[ListNode]:
    """Reverse the list in place and return the new head."""
    prev: Optional[ListNode] = None
    curr = head
    while curr is not None:
        curr.next, prev, curr = prev, curr, curr.next
    return prev


def middle_node(head: Optional[ListNode]) -> Optional[ListNode]:
    """Return the middle node; of two middles, the second."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next  # type: ignore[union-attr]
        fast = fast.next.next
    return slow


def pair_sum(head: Optional[ListNode]) -> int:
    """Return the largest sum of a node and its twin from the other end.

    The list is left as it was found.
    """
    if head is None:
        raise ValueError("list is empty")
    middle = middle_node(head)
    second = reverse_list(middle)
    best = None
    first, other = head, second
    while other is not None:
        total = first.val + other.val  # type: ignore[union-attr]
        best = total if best is None else max(best, total)
        first = first.next  # type: ignore[union-attr]
        other = other.next
    reverse_list(second)
    assert best is not None
    return best