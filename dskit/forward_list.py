"""A singly linked list of integers that tracks both its head and its tail."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Optional


class _Node:
    __slots__ = ("value", "next")

    def __init__(self, value: int, next: Optional[_Node] = None) -> None:
        self.value = value
        self.next = next


class ForwardList:
    """A singly linked list with constant-time access to both ends."""

    def __init__(self) -> None:
        self._head: Optional[_Node] = None
        self._tail: Optional[_Node] = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[int]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __repr__(self) -> str:
        return f"ForwardList({list(self)!r})"

    def is_empty(self) -> bool:
        return self._head is None

    def _node_before(self, index: int) -> _Node:
        """Return the node at position ``index - 1``; ``index`` must be in 1..size."""
        node = self._head
        assert node is not None
        for _ in range(index - 1):
            assert node.next is not None
            node = node.next
        return node

    def push_front(self, value: int) -> None:
        """Add ``value`` at the front."""
        self._head = _Node(value, self._head)
        if self._tail is None:
            self._tail = self._head
        self._size += 1

    def push_back(self, value: int) -> None:
        """Add ``value`` at the end."""
        node = _Node(value)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def front(self) -> int:
        """Return the first value."""
        if self._head is None:
            raise IndexError("cannot get front of empty list")
        return self._head.value

    def back(self) -> int:
        """Return the last value."""
        if self._tail is None:
            raise IndexError("cannot get back of empty list")
        return self._tail.value

    def pop_front(self) -> int:
        """Remove the first item and return its value."""
        if self._head is None:
            raise IndexError("cannot pop front of empty list")
        removed = self._head
        self._head = removed.next
        if self._tail is removed:
            self._tail = self._head
        self._size -= 1
        return removed.value

    def pop_back(self) -> int:
        """Remove the last item and return its value."""
        if self._tail is None:
            raise IndexError("cannot pop back of empty list")
        removed = self._tail
        if self._head is removed:
            self._head = self._tail = None
        else:
            prev = self._node_before(self._size - 1)
            prev.next = None
            self._tail = prev
        self._size -= 1
        return removed.value

    def insert(self, index: int, value: int) -> None:
        """Insert ``value`` so that it takes position ``index``.

        ``index`` must name an existing item, except that 0 is allowed on an
        empty list.
        """
        if index == 0:
            self.push_front(value)
            return
        if index < 0 or index >= self._size:
            raise IndexError(f"cannot insert at index {index} in list of size {self._size}")
        prev = self._node_before(index)
        prev.next = _Node(value, prev.next)
        self._size += 1

    def value_at(self, index: int) -> int:
        """Return the value at position ``index``."""
        if index < 0 or index >= self._size:
            raise IndexError(f"index {index} out of bounds for list of size {self._size}")
        for position, value in enumerate(self):
            if position == index:
                return value
        raise IndexError(f"index {index} out of bounds")

    def erase(self, index: int) -> None:
        """Remove the item at position ``index``."""
        if self._head is None:
            raise IndexError("cannot erase from empty list")
        if index < 0 or index >= self._size:
            raise IndexError(f"index {index} out of bounds for list of size {self._size}")
        if index == 0:
            self.pop_front()
            return
        prev = self._node_before(index)
        removed = prev.next
        assert removed is not None
        prev.next = removed.next
        if self._tail is removed:
            self._tail = prev
        self._size -= 1

    def value_n_from_end(self, n: int) -> int:
        """Return the value ``n`` places from the end; ``n == 1`` is the last item."""
        if n < 1:
            raise IndexError(f"n must be at least 1, got {n}")
        lead = self._head
        for _ in range(n):
            if lead is None:
                raise IndexError("list not long enough to find nth item from end")
            lead = lead.next
        match = self._head
        while lead is not None:
            lead = lead.next
            assert match is not None
            match = match.next
        assert match is not None
        return match.value

    def reverse(self) -> None:
        """Reverse the list in place."""
        prev: Optional[_Node] = None
        current = self._head
        self._tail = self._head
        while current is not None:
            current.next, prev, current = prev, current, current.next
        self._head = prev

    def remove(self, value: int) -> None:
        """Remove the first item equal to ``value``, if any."""
        prev: Optional[_Node] = None
        current = self._head
        while current is not None:
            if current.value == value:
                if prev is None:
                    self._head = current.next
                else:
                    prev.next = current.next
                if self._tail is current:
                    self._tail = prev
                self._size -= 1
                return
            prev, current = current, current.next

    def describe(self) -> str:
        """Return a debugging summary of the list's ends and path."""
        front = self._head.value if self._head else None
        back = self._tail.value if self._tail else None
        path = "".join(f"{value} -> " for value in self)
        return f"head: {front}\ntail: {back}\npath: {path}\n"