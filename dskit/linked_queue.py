"""An unbounded FIFO queue of integers built on linked nodes."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Optional

from dskit.ring_queue import QueueEmptyError


class _Node:
    __slots__ = ("value", "next")

    def __init__(self, value: int) -> None:
        self.value = value
        self.next: Optional[_Node] = None


class LinkedQueue:
    """A queue that adds at the tail and removes from the head."""

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
        return f"LinkedQueue({list(self)!r})"

    def enqueue(self, value: int) -> None:
        """Add ``value`` at the back of the queue."""
        node = _Node(value)
        if self._tail is not None:
            self._tail.next = node
        self._tail = node
        if self._head is None:
            self._head = node
        self._size += 1

    def dequeue(self) -> int:
        """Remove and return the least recently added value."""
        if self._head is None:
            raise QueueEmptyError("unable to dequeue, queue is empty")
        removed = self._head
        if self._tail is removed:
            self._tail = None
        self._head = removed.next
        self._size -= 1
        return removed.value

    def is_empty(self) -> bool:
        return self._head is None

    def describe(self) -> str:
        """Return the contents, oldest first, as one line."""
        contents = "".join(f"{value} < " for value in self)
        return f"Queue contents: {contents}\n"