"""A bounded max-heap priority queue and an in-place heap sort."""

from __future__ import annotations

from collections.abc import Iterator

QUEUE_CAPACITY = 1000


class HeapFullError(Exception):
    """Raised when inserting into a heap that is at capacity."""


class MaxHeap:
    """A max-heap of integers with a fixed capacity.

    Positions are numbered from 1 at the root; the children of position ``i``
    are ``2 * i`` and ``2 * i + 1``.
    """

    def __init__(self, capacity: int = QUEUE_CAPACITY) -> None:
        if capacity < 0:
            raise ValueError(f"capacity must not be negative, got {capacity}")
        self.capacity = capacity
        self._elements: list[int] = [0]

    @property
    def _size(self) -> int:
        return len(self._elements) - 1

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[int]:
        """Yield the stored values in heap-array order."""
        return iter(self._elements[1:])

    def __repr__(self) -> str:
        return f"MaxHeap({list(self)!r}, capacity={self.capacity})"

    def _swap(self, a: int, b: int) -> None:
        elements = self._elements
        elements[a], elements[b] = elements[b], elements[a]

    def _sift_up(self, i: int) -> None:
        while i > 1:
            parent = i // 2
            if self._elements[parent] < self._elements[i]:
                self._swap(parent, i)
            i = parent

    def _sift_down(self, i: int) -> None:
        size = self._size
        elements = self._elements
        while 2 * i <= size:
            left, right = 2 * i, 2 * i + 1
            if right <= size and not elements[left] > elements[right]:
                child = right
            else:
                child = left
            if elements[child] > elements[i]:
                self._swap(child, i)
                i = child
            else:
                break

    def insert(self, value: int) -> None:
        """Add ``value`` to the heap."""
        if self._size == self.capacity:
            raise HeapFullError("cannot add more items")
        self._elements.append(value)
        self._sift_up(self._size)

    def max(self) -> int:
        """Return the largest value without removing it."""
        if not self._size:
            raise IndexError("max of empty heap")
        return self._elements[1]

    def extract_max(self) -> int:
        """Remove and return the largest value."""
        if not self._size:
            raise IndexError("extract from empty heap")
        top = self._elements[1]
        last = self._elements.pop()
        if self._size:
            self._elements[1] = last
            self._sift_down(1)
        return top

    def remove(self, index: int) -> None:
        """Remove the value at heap position ``index`` (the root is 1)."""
        if index < 1 or index > self._size:
            raise IndexError(f"heap position {index} out of range for size {self._size}")
        last = self._elements.pop()
        if index <= self._size:
            self._elements[index] = last
            self._sift_down(index)

    def is_empty(self) -> bool:
        return self._size == 0


def percolate_down(numbers: list[int], count: int, index: int) -> None:
    """Sift ``numbers[index]`` down within the 0-indexed heap ``numbers[:count]``."""
    i = index
    while 2 * i + 1 < count:
        left, right = 2 * i + 1, 2 * i + 2
        if right < count and not numbers[left] > numbers[right]:
            child = right
        else:
            child = left
        if numbers[child] > numbers[i]:
            numbers[i], numbers[child] = numbers[child], numbers[i]
            i = child
        else:
            break


def heapify(numbers: list[int]) -> None:
    """Rearrange ``numbers`` in place into a 0-indexed max-heap."""
    count = len(numbers)
    for i in range(count // 2 - 1, -1, -1):
        percolate_down(numbers, count, i)


def heap_sort(numbers: list[int]) -> None:
    """Sort ``numbers`` in place into ascending order."""
    heapify(numbers)
    for end in range(len(numbers) - 1, 0, -1):
        numbers[0], numbers[end] = numbers[end], numbers[0]
        percolate_down(numbers, end, 0)