"""A growable array of integers with explicit capacity management."""

from __future__ import annotations

import sys
from collections.abc import Iterator, Sequence

MIN_CAPACITY = 16
GROWTH_FACTOR = 2
SHRINK_FACTOR = 4

PROMPT = "Enter many numbers would you like to store: "


def determine_capacity(capacity: int) -> int:
    """Return the smallest power-of-growth capacity able to hold ``capacity`` items."""
    if capacity < 1:
        raise ValueError(f"capacity must be at least 1, got {capacity}")
    true_capacity = MIN_CAPACITY
    while capacity > true_capacity // GROWTH_FACTOR:
        true_capacity *= GROWTH_FACTOR
    return true_capacity


class Vector:
    """An integer vector that grows by doubling and shrinks when mostly empty."""

    def __init__(self, capacity: int) -> None:
        self._capacity = determine_capacity(capacity)
        self._items: list[int] = []

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        return iter(self._items)

    def __getitem__(self, index: int) -> int:
        return self.at(index)

    def __repr__(self) -> str:
        return f"Vector({self._items!r}, capacity={self._capacity})"

    def capacity(self) -> int:
        """Return the number of items the vector can hold before growing."""
        return self._capacity

    def is_empty(self) -> bool:
        return not self._items

    def _check_index(self, index: int) -> None:
        if index < 0 or index > len(self._items) - 1:
            raise IndexError(f"index {index} out of range for size {len(self._items)}")

    def _resize_for_size(self, candidate_size: int) -> None:
        size = len(self._items)
        if size < candidate_size:
            if size == self._capacity:
                self._capacity = determine_capacity(self._capacity)
        elif size > candidate_size:
            if size < self._capacity // SHRINK_FACTOR:
                self._capacity = max(self._capacity // GROWTH_FACTOR, MIN_CAPACITY)

    def push(self, item: int) -> None:
        """Append ``item`` to the end."""
        self._resize_for_size(len(self._items) + 1)
        self._items.append(item)

    def at(self, index: int) -> int:
        """Return the value stored at ``index``."""
        self._check_index(index)
        return self._items[index]

    def insert(self, index: int, value: int) -> None:
        """Insert ``value`` at an existing ``index``, shifting later items right."""
        self._check_index(index)
        self._resize_for_size(len(self._items) + 1)
        self._items.insert(index, value)

    def prepend(self, value: int) -> None:
        self.insert(0, value)

    def pop(self) -> int:
        """Remove and return the last item."""
        if not self._items:
            raise IndexError("pop from empty vector")
        self._resize_for_size(len(self._items) - 1)
        return self._items.pop()

    def delete(self, index: int) -> None:
        """Delete the item at ``index``, shifting later items left."""
        self._check_index(index)
        self._resize_for_size(len(self._items) - 1)
        del self._items[index]

    def remove(self, value: int) -> None:
        """Delete every occurrence of ``value``."""
        while (index := self.find(value)) != -1:
            self.delete(index)

    def find(self, value: int) -> int:
        """Return the index of the first occurrence of ``value``, or -1."""
        try:
            return self._items.index(value)
        except ValueError:
            return -1

    def describe(self) -> str:
        """Return a multi-line summary of size, capacity and items."""
        lines = [
            f"Size: {len(self._items)}",
            f"Capacity: {self._capacity}",
            "Items:",
            *(f"{i}: {item}" for i, item in enumerate(self._items)),
            "---------",
        ]
        return "\n".join(lines) + "\n"


def run_example(capacity: int) -> str:
    """Exercise a vector of ``capacity`` numbers and return the narrated output."""
    out: list[str] = [f"You'll be storing {capacity} numbers.\n"]

    vector = Vector(capacity)
    for d in range(1, capacity + 1):
        vector.push(d)

    insert_value = 999
    out.append(f" - Inserting {insert_value} at index {capacity - 1}.\n")
    vector.insert(capacity - 1, insert_value)

    out.append(" - Prepending 12.\n")
    vector.prepend(12)

    out.append(f" - Popping an item: {vector.pop()}\n")
    out.append(vector.describe())

    index_to_remove = len(vector) - 3
    out.append(f" - Deleting from index {index_to_remove}\n")
    vector.delete(index_to_remove)

    vector.push(12)
    vector.push(12)
    out.append(vector.describe())

    out.append(" - Deleting 12s\n")
    vector.remove(12)
    out.append(vector.describe())

    return "".join(out)


def main(argv: Sequence[str] | None = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    text = args[0] if args else input(PROMPT)
    try:
        capacity = int(text)
        sys.stdout.write(run_example(capacity))
    except (ValueError, IndexError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())