"""A singly linked list of integers reached through its head node only."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Optional


class _Node:
    __slots__ = ("value", "next")

    def __init__(self, value: int, next: Optional[_Node] = None) -> None:
        self.value = value
        self.next = next


class LinkedList:
    """A singly linked list; operations at the back walk the whole chain."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._head: Optional[_Node] = None
        self._size = 0
        tail: Optional[_Node] = None
        for value in values:
            node = _Node(value)
            if tail is None:
                self._head = node
            else:
                tail.next = node
            tail = node
            self._size += 1

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[int]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def _node_at(self, index: int) -> _Node:
        """Return the node at ``index``; the caller guarantees it exists."""
        node = self._head
        for _ in range(index):
            assert node is not None
            node = node.next
        assert node is not None
        return node

    def is_empty(self) -> bool:
        return self._head is None

    def push_front(self, value: int) -> None:
        """Add ``value`` at the beginning of the list."""
        self._head = _Node(value, self._head)
        self._size += 1

    def push_back(self, value: int) -> None:
        """Add ``value`` at the end of the list."""
        node = _Node(value)
        if self._head is None:
            self._head = node
        else:
            self._node_at(self._size - 1).next = node
        self._size += 1

    def pop_front(self) -> int:
        """Remove the first item and return its value."""
        if self._head is None:
            raise IndexError("unable to pop_front an empty list")
        removed = self._head
        self._head = removed.next
        self._size -= 1
        return removed.value

    def pop_back(self) -> int:
        """Remove the last item and return its value."""
        if self._head is None:
            raise IndexError("unable to pop_back from empty list")
        if self._size == 1:
            value = self._head.value
            self._head = None
        else:
            prev = self._node_at(self._size - 2)
            assert prev.next is not None
            value = prev.next.value
            prev.next = None
        self._size -= 1
        return value

    def front(self) -> int:
        """Return the first value."""
        if self._head is None:
            raise IndexError("cannot get front of empty list")
        return self._head.value

    def back(self) -> int:
        """Return the last value."""
        if self._head is None:
            raise IndexError("cannot get back of empty list")
        return self._node_at(self._size - 1).value

    def value_at(self, index: int) -> int:
        """Return the value at position ``index`` (counting from 0)."""
        if index < 0 or index >= self._size:
            raise IndexError(f"index {index} does not exist in list of size {self._size}")
        return self._node_at(index).value

    def insert(self, index: int, value: int) -> None:
        """Insert ``value`` at ``index``; ``index`` may equal the size to append."""
        if index < 0 or index > self._size:
            raise IndexError(f"index {index} out of bounds for list of size {self._size}")
        if index == 0:
            self.push_front(value)
            return
        prev = self._node_at(index - 1)
        prev.next = _Node(value, prev.next)
        self._size += 1

    def erase(self, index: int) -> None:
        """Remove the node at position ``index``."""
        if self._head is None:
            raise IndexError("unable to erase from empty list")
        if index < 0 or index >= self._size:
            raise IndexError(f"index {index} out of bounds for list of size {self._size}")
        if index == 0:
            self._head = self._head.next
        else:
            prev = self._node_at(index - 1)
            assert prev.next is not None
            prev.next = prev.next.next
        self._size -= 1

    def value_n_from_end(self, n: int) -> int:
        """Return the value ``n`` places from the end; ``n == 1`` is the last item."""
        if n < 1 or self._head is None:
            raise IndexError("cannot get nth item from end")
        if n > self._size:
            raise IndexError("list is too short to get nth item from end")
        return self._node_at(self._size - n).value

    def reverse(self) -> None:
        """Reverse the list in place."""
        prev: Optional[_Node] = None
        current = self._head
        while current is not None:
            current.next, prev, current = prev, current, current.next
        self._head = prev

    def remove_value(self, value: int) -> None:
        """Remove the first item equal to ``value``, if any."""
        prev: Optional[_Node] = None
        current = self._head
        while current is not None:
            if current.value == value:
                if prev is None:
                    self._head = current.next
                else:
                    prev.next = current.next
                self._size -= 1
                return
            prev, current = current, current.next

    def describe(self) -> str:
        """Return the values as one line of ``value -> `` links."""
        return "".join(f"{value} -> " for value in self) + "\n"