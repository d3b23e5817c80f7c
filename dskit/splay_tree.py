"""A top-down splay tree of distinct integers."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Optional


class _Node:
    __slots__ = ("value", "left", "right")

    def __init__(self, value: int) -> None:
        self.value = value
        self.left: Optional[_Node] = None
        self.right: Optional[_Node] = None


def _splay(x: _Node, value: int) -> _Node:
    """Bring ``value``, or the last node on its search path, to the root."""
    header = _Node(0)
    left = right = header
    while True:
        if value < x.value:
            if x.left is None:
                break
            if value < x.left.value:
                y = x.left
                x.left = y.right
                y.right = x
                x = y
                if x.left is None:
                    break
            right.left = x
            right = x
            x = x.left
        elif value > x.value:
            if x.right is None:
                break
            if value > x.right.value:
                y = x.right
                x.right = y.left
                y.left = x
                x = y
                if x.right is None:
                    break
            left.right = x
            left = x
            x = x.right
        else:
            break
    left.right = x.left
    right.left = x.right
    x.left = header.right
    x.right = header.left
    return x


class SplayTree:
    """A self-adjusting search tree: every access moves the key to the root."""

    def __init__(self) -> None:
        self._root: Optional[_Node] = None
        self._size = 0

    def __iter__(self) -> Iterator[int]:
        stack: list[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.value
            node = node.right

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"SplayTree({list(self)!r})"

    def root_value(self) -> Optional[int]:
        """Return the value at the root, or None for an empty tree."""
        return None if self._root is None else self._root.value

    def insert(self, value: int) -> None:
        """Insert ``value`` and make it the root; duplicates are not added."""
        if self._root is None:
            self._root = _Node(value)
            self._size += 1
            return
        root = _splay(self._root, value)
        if value == root.value:
            self._root = root
            return
        node = _Node(value)
        if value < root.value:
            node.left = root.left
            node.right = root
            root.left = None
        else:
            node.left = root
            node.right = root.right
            root.right = None
        self._root = node
        self._size += 1

    def delete(self, value: int) -> None:
        """Remove ``value`` if present; the tree is splayed either way."""
        if self._root is None:
            return
        root = _splay(self._root, value)
        if value != root.value:
            self._root = root
            return
        if root.left is None:
            self._root = root.right
        else:
            new_root = _splay(root.left, value)
            new_root.right = root.right
            self._root = new_root
        self._size -= 1

    def describe(self) -> str:
        """Return the values in order on one line."""
        if self._root is None:
            return "-- empty --\n"
        return "".join(f"{value} < " for value in self) + "\n"