"""A string-to-string hash table with separate chaining."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Optional

TABLE_SIZE = 100

_INT_BITS = 32
_INT_MASK = (1 << _INT_BITS) - 1
_INT_SIGN = 1 << (_INT_BITS - 1)


def _to_int32(value: int) -> int:
    value &= _INT_MASK
    return value - (1 << _INT_BITS) if value & _INT_SIGN else value


def _signed_bytes(key: str) -> Iterator[int]:
    for byte in key.encode("utf-8"):
        yield byte - 256 if byte >= 128 else byte


def string_hash(key: str, m: int) -> int:
    """Hash ``key`` with a multiply-by-31 polynomial into the range ``0..m-1``.

    Arithmetic wraps at 32 bits. Characters are consumed while their
    (signed byte) value exceeds their position in the key.
    """
    if m < 1:
        raise ValueError(f"table size must be at least 1, got {m}")
    h = 0
    for position, char in enumerate(_signed_bytes(key)):
        if not position < char:
            break
        h = _to_int32(h * 31 + char)
    return abs(h) % m


@dataclass
class _Entry:
    key: str
    value: str


class HashTable:
    """A fixed number of slots, each holding a chain of key/value entries."""

    def __init__(self, size: int = TABLE_SIZE) -> None:
        if size < 1:
            raise ValueError(f"table size must be at least 1, got {size}")
        self.size = size
        self._slots: list[list[_Entry]] = [[] for _ in range(size)]

    def __len__(self) -> int:
        return sum(len(chain) for chain in self._slots)

    def __iter__(self) -> Iterator[str]:
        for chain in self._slots:
            for entry in chain:
                yield entry.key

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self._find(key) is not None

    def __repr__(self) -> str:
        items = {key: self.get(key) for key in self}
        return f"HashTable({items!r}, size={self.size})"

    def _chain(self, key: str) -> list[_Entry]:
        return self._slots[string_hash(key, self.size)]

    def _find(self, key: str) -> Optional[_Entry]:
        return next((entry for entry in self._chain(key) if entry.key == key), None)

    def exists(self, key: str) -> bool:
        """Return True if ``key`` is stored in the table."""
        return self._find(key) is not None

    def add(self, key: str, value: str) -> None:
        """Store ``value`` under ``key``, replacing any value already there."""
        entry = self._find(key)
        if entry is not None:
            entry.value = value
            return
        self._chain(key).insert(0, _Entry(key, value))

    def get(self, key: str) -> Optional[str]:
        """Return the value stored under ``key``, or None if it is absent."""
        entry = self._find(key)
        return None if entry is None else entry.value

    def delete(self, key: str) -> None:
        """Remove ``key`` from the table; absent keys are ignored."""
        chain = self._chain(key)
        chain[:] = [entry for entry in chain if entry.key != key]

    def describe(self) -> str:
        """Return one line per slot showing the head entry of its chain."""
        lines = [
            f"{index}:" if not chain else f"{chain[0].key}: {chain[0].value}"
            for index, chain in enumerate(self._slots)
        ]
        lines.append("===================")
        return "\n".join(lines) + "\n"