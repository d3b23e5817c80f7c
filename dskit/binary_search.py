"""Binary search over sorted integer sequences."""

from __future__ import annotations

from collections.abc import Sequence


def binary_search(target: int, numbers: Sequence[int]) -> int:
    """Return the index of ``target`` in sorted ``numbers``, or -1."""
    low, high = 0, len(numbers) - 1
    while low <= high:
        mid = (low + high) // 2
        if target > numbers[mid]:
            low = mid + 1
        elif target < numbers[mid]:
            high = mid - 1
        else:
            return mid
    return -1


def binary_search_recursive(
    target: int, numbers: Sequence[int], low: int = 0, high: int | None = None
) -> int:
    """Return the index of ``target`` within ``numbers[low..high]``, or -1.

    ``high`` is clamped to the last valid index of ``numbers``.
    """
    last = len(numbers) - 1
    high = last if high is None else min(high, last)
    if low > high:
        return -1
    mid = (low + high) // 2
    if target > numbers[mid]:
        return binary_search_recursive(target, numbers, mid + 1, high)
    if target < numbers[mid]:
        return binary_search_recursive(target, numbers, low, mid - 1)
    return mid