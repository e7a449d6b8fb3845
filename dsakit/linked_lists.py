"""Singly, doubly and circular linked lists with positional insertion."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(eq=False)
class _SNode:
    data: Any
    next: Optional["_SNode"] = None


@dataclass(eq=False)
class _DNode:
    data: Any
    prev: Optional["_DNode"] = None
    next: Optional["_DNode"] = None


class SinglyLinkedList:
    """A singly linked list."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: Optional[_SNode] = None
        self._size = 0
        for value in values:
            self.push_back(value)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.data
            node = node.next

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def push_front(self, data: Any) -> None:
        """Insert ``data`` before the first element."""
        self._head = _SNode(data, self._head)
        self._size += 1

    def push_back(self, data: Any) -> None:
        """Append ``data`` after the last element."""
        new_node = _SNode(data)
        if self._head is None:
            self._head = new_node
        else:
            node = self._head
            while node.next is not None:
                node = node.next
            node.next = new_node
        self._size += 1

    def _find(self, key: Any) -> _SNode:
        node = self._head
        while node is not None:
            if node.data == key:
                return node
            node = node.next
        raise ValueError(f"key {key!r} not found")

    def insert_after(self, key: Any, data: Any) -> None:
        """Insert ``data`` right after the first element equal to ``key``."""
        if self._head is None:
            raise ValueError("list is empty")
        node = self._find(key)
        node.next = _SNode(data, node.next)
        self._size += 1

    def insert_before(self, key: Any, data: Any) -> None:
        """Insert ``data`` right before the first element equal to ``key``."""
        if self._head is None:
            raise ValueError("list is empty")
        if self._head.data == key:
            self.push_front(data)
            return
        node = self._head
        while node.next is not None and node.next.data != key:
            node = node.next
        if node.next is None:
            raise ValueError(f"key {key!r} not found")
        node.next = _SNode(data, node.next)
        self._size += 1

    def insert_at(self, pos: int, data: Any) -> None:
        """Insert ``data`` so that it becomes the element at 1-based ``pos``.

        Positions below 1 insert right after the first element.
        """
        if pos == 1:
            self.push_front(data)
            return
        if self._head is None:
            raise IndexError("list is empty and position is greater than 1")
        node: Optional[_SNode] = self._head
        loc = 1
        while node is not None and loc < pos - 1:
            node = node.next
            loc += 1
        if node is None:
            raise IndexError(f"position {pos} out of bounds")
        node.next = _SNode(data, node.next)
        self._size += 1

    def reverse(self) -> None:
        """Reverse the list in place."""
        prev: Optional[_SNode] = None
        curr = self._head
        while curr is not None:
            curr.next, prev, curr = prev, curr, curr.next
        self._head = prev


class DoublyLinkedList:
    """A doubly linked list that can be walked in both directions."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: Optional[_DNode] = None
        self._tail: Optional[_DNode] = None
        self._size = 0
        for value in values:
            self.push_back(value)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.data
            node = node.next

    def __reversed__(self) -> Iterator[Any]:
        node = self._tail
        while node is not None:
            yield node.data
            node = node.prev

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def _start(self, data: Any) -> None:
        node = _DNode(data)
        self._head = self._tail = node
        self._size = 1

    def push_front(self, data: Any) -> None:
        """Insert ``data`` before the first element."""
        if self._head is None:
            self._start(data)
            return
        node = _DNode(data, None, self._head)
        self._head.prev = node
        self._head = node
        self._size += 1

    def push_back(self, data: Any) -> None:
        """Append ``data`` after the last element."""
        if self._tail is None:
            self._start(data)
            return
        node = _DNode(data, self._tail, None)
        self._tail.next = node
        self._tail = node
        self._size += 1

    def insert_at(self, pos: int, data: Any) -> None:
        """Insert ``data`` at 1-based ``pos``; past the end it is appended.

        On an empty list the element is added whatever ``pos`` is.
        """
        if self._head is None:
            self._start(data)
            return
        if pos == 1:
            self.push_front(data)
            return
        if pos < 1:
            raise IndexError(f"position {pos} out of bounds")
        back: Optional[_DNode] = None
        curr: Optional[_DNode] = self._head
        loc = 1
        while curr is not None and loc < pos:
            back, curr = curr, curr.next
            loc += 1
        if curr is None:
            self.push_back(data)
            return
        node = _DNode(data, back, curr)
        assert back is not None
        back.next = node
        curr.prev = node
        self._size += 1


class CircularLinkedList:
    """A singly linked list whose last node points back to the first."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: Optional[_SNode] = None
        self._tail: Optional[_SNode] = None
        self._size = 0
        for value in values:
            self.push_back(value)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        if self._head is None:
            return
        node = self._head
        while True:
            yield node.data
            assert node.next is not None
            node = node.next
            if node is self._head:
                break

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def _start(self, data: Any) -> None:
        node = _SNode(data)
        node.next = node
        self._head = self._tail = node
        self._size = 1

    def push_front(self, data: Any) -> None:
        """Insert ``data`` as the new first element."""
        if self._head is None:
            self._start(data)
            return
        assert self._tail is not None
        node = _SNode(data, self._head)
        self._tail.next = node
        self._head = node
        self._size += 1

    def push_back(self, data: Any) -> None:
        """Insert ``data`` as the new last element."""
        if self._head is None:
            self._start(data)
            return
        assert self._tail is not None
        node = _SNode(data, self._head)
        self._tail.next = node
        self._tail = node
        self._size += 1

    def insert_at(self, pos: int, data: Any) -> None:
        """Insert ``data`` at 1-based ``pos``; past the end it is appended.

        Positions below 1 insert right after the first element; on an empty
        list the element is added whatever ``pos`` is.
        """
        if self._head is None:
            self._start(data)
            return
        if pos == 1:
            self.push_front(data)
            return
        prev = self._head
        curr = self._head.next
        loc = 2
        while curr is not self._head and loc < pos:
            assert curr is not None
            prev, curr = curr, curr.next
            loc += 1
        node = _SNode(data, curr)
        prev.next = node
        if prev is self._tail:
            self._tail = node
        self._size += 1