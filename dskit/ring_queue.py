"""A fixed-capacity FIFO queue backed by a circular buffer."""

from __future__ import annotations

from collections.abc import Iterator

DEFAULT_CAPACITY = 5


class QueueFullError(Exception):
    """Raised when enqueueing onto a full queue."""


class QueueEmptyError(Exception):
    """Raised when dequeueing from an empty queue."""


class RingQueue:
    """A bounded queue storing its items in a circular buffer.

    The buffer has one slot more than the capacity, so that a full queue and
    an empty one can be told apart by the read and write positions alone.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError(f"capacity must be at least 1, got {capacity}")
        self.capacity = capacity
        self._slots = [0] * (capacity + 1)
        self._insert = 0
        self._pop = 0

    def _advance(self, position: int) -> int:
        return (position + 1) % len(self._slots)

    def __len__(self) -> int:
        return (self._insert - self._pop) % len(self._slots)

    def __iter__(self) -> Iterator[int]:
        position = self._pop
        while position != self._insert:
            yield self._slots[position]
            position = self._advance(position)

    def __repr__(self) -> str:
        return f"RingQueue({list(self)!r}, capacity={self.capacity})"

    def enqueue(self, value: int) -> None:
        """Add ``value`` at the back of the queue."""
        if self.is_full():
            raise QueueFullError("cannot enqueue another item")
        self._slots[self._insert] = value
        self._insert = self._advance(self._insert)

    def dequeue(self) -> int:
        """Remove and return the oldest value."""
        if self.is_empty():
            raise QueueEmptyError("queue is empty, cannot dequeue")
        value = self._slots[self._pop]
        self._slots[self._pop] = 0
        self._pop = self._advance(self._pop)
        return value

    def is_empty(self) -> bool:
        return self._insert == self._pop

    def is_full(self) -> bool:
        return self._pop == self._advance(self._insert)

    def describe(self) -> str:
        """Return the contents, oldest first, as one line."""
        contents = "".join(f"{value}, " for value in self)
        return f"Queue contents (old to new): {contents}\n"