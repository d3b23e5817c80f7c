"""An unbalanced binary search tree of distinct integers."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Optional


@dataclass
class BstNode:
    """One node of a binary search tree."""

    value: int
    left: Optional[BstNode] = None
    right: Optional[BstNode] = None


def _is_between(node: Optional[BstNode], low: Optional[int], high: Optional[int]) -> bool:
    if node is None:
        return True
    if low is not None and not node.value > low:
        return False
    if high is not None and not node.value < high:
        return False
    return _is_between(node.left, low, node.value) and _is_between(
        node.right, node.value, high
    )


def is_binary_search_tree(node: Optional[BstNode]) -> bool:
    """Return True if the tree rooted at ``node`` keeps strict search-tree order."""
    return _is_between(node, None, None)


def _count(node: Optional[BstNode]) -> int:
    if node is None:
        return 0
    return 1 + _count(node.left) + _count(node.right)


def _height(node: Optional[BstNode]) -> int:
    if node is None:
        return 0
    return 1 + max(_height(node.left), _height(node.right))


def _min_value(node: BstNode) -> int:
    while node.left is not None:
        node = node.left
    return node.value


def _max_value(node: BstNode) -> int:
    while node.right is not None:
        node = node.right
    return node.value


def _delete(node: Optional[BstNode], value: int) -> Optional[BstNode]:
    if node is None:
        return None
    if value < node.value:
        node.left = _delete(node.left, value)
    elif value > node.value:
        node.right = _delete(node.right, value)
    else:
        if node.left is None:
            return node.right
        if node.right is None:
            return node.left
        right_min = _min_value(node.right)
        node.value = right_min
        node.right = _delete(node.right, right_min)
    return node


class BinarySearchTree:
    """A binary search tree; inserting a value already present does nothing."""

    def __init__(self, root: Optional[BstNode] = None) -> None:
        self._root = root

    def __len__(self) -> int:
        return _count(self._root)

    def __iter__(self) -> Iterator[int]:
        stack: list[BstNode] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.value
            node = node.right

    def __contains__(self, value: object) -> bool:
        node = self._root
        while node is not None:
            if value < node.value:  # type: ignore[operator]
                node = node.left
            elif value > node.value:  # type: ignore[operator]
                node = node.right
            else:
                return True
        return False

    def __repr__(self) -> str:
        return f"BinarySearchTree({list(self)!r})"

    def insert(self, value: int) -> None:
        """Add ``value`` to the tree unless it is already there."""
        if self._root is None:
            self._root = BstNode(value)
            return
        node = self._root
        while True:
            if value < node.value:
                if node.left is None:
                    node.left = BstNode(value)
                    return
                node = node.left
            elif value > node.value:
                if node.right is None:
                    node.right = BstNode(value)
                    return
                node = node.right
            else:
                return

    def height(self) -> int:
        """Return the height in nodes, 0 for an empty tree."""
        return _height(self._root)

    def min(self) -> int:
        """Return the smallest value, 0 for an empty tree."""
        return 0 if self._root is None else _min_value(self._root)

    def max(self) -> int:
        """Return the largest value, 0 for an empty tree."""
        return 0 if self._root is None else _max_value(self._root)

    def is_valid(self) -> bool:
        """Return True if the tree keeps search-tree order."""
        return is_binary_search_tree(self._root)

    def delete(self, value: int) -> None:
        """Remove ``value`` from the tree; absent values are ignored."""
        self._root = _delete(self._root, value)

    def successor(self, value: int) -> int:
        """Return the next value after ``value`` in order, or -1 if there is none.

        Raises KeyError if ``value`` is not in a non-empty tree.
        """
        if self._root is None:
            return -1
        target: Optional[BstNode] = self._root
        while target is not None and target.value != value:
            target = target.left if value < target.value else target.right
        if target is None:
            raise KeyError(value)
        if target.right is not None:
            return _min_value(target.right)
        successor: Optional[BstNode] = None
        ancestor: Optional[BstNode] = self._root
        while ancestor is not None:
            if value < ancestor.value:
                successor = ancestor
                ancestor = ancestor.left
            else:
                ancestor = ancestor.right
        return -1 if successor is None else successor.value