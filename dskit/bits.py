"""Bit-twiddling helpers and a bitmap-based sort of distinct integers."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Iterator, Sequence

INT_BITS = 32
BITSORT_LIMIT = 10_000_000


def bit_string(value: int, width: int = INT_BITS) -> str:
    """Return the two's-complement bits of ``value`` in ``width`` binary digits."""
    if width < 1:
        raise ValueError(f"width must be at least 1, got {width}")
    return format(value & ((1 << width) - 1), f"0{width}b")


def set_bit(value: int, position: int) -> int:
    """Return ``value`` with the bit at ``position`` turned on."""
    return value | (1 << position)


def clear_bit(value: int, position: int) -> int:
    """Return ``value`` with the bit at ``position`` turned off."""
    return value & ~(1 << position)


def is_little_endian() -> bool:
    """Return True if this machine stores the least significant byte first."""
    return sys.byteorder == "little"


class BitSet:
    """A fixed-size set of non-negative integers below ``size``, one bit each."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError(f"size must not be negative, got {size}")
        self.size = size
        self._bytes = bytearray((size + 7) // 8)

    def _locate(self, i: int) -> tuple[int, int]:
        if not 0 <= i < self.size:
            raise IndexError(f"bit {i} out of range for size {self.size}")
        return i >> 3, 1 << (i & 7)

    def set(self, i: int) -> None:
        """Turn on bit ``i``."""
        index, mask = self._locate(i)
        self._bytes[index] |= mask

    def clear(self, i: int) -> None:
        """Turn off bit ``i``."""
        index, mask = self._locate(i)
        self._bytes[index] &= ~mask & 0xFF

    def test(self, i: int) -> bool:
        """Return True if bit ``i`` is on."""
        index, mask = self._locate(i)
        return bool(self._bytes[index] & mask)

    def __iter__(self) -> Iterator[int]:
        """Yield the positions of the bits that are on, in ascending order."""
        for index, byte in enumerate(self._bytes):
            if not byte:
                continue
            base = index << 3
            for offset in range(8):
                if byte & (1 << offset):
                    yield base + offset

    def __repr__(self) -> str:
        return f"BitSet(size={self.size}, members={list(self)!r})"


def bitsort(numbers: Iterable[int], size: int = BITSORT_LIMIT) -> list[int]:
    """Return the distinct ``numbers``, each in ``0..size-1``, in ascending order."""
    bits = BitSet(size)
    for number in numbers:
        bits.set(number)
    return list(bits)


def _bit_demo() -> str:
    lines = []

    def show(value: int) -> None:
        lines.append(f"{value:9d}: {bit_string(value)}")

    x = 0
    show(x)
    x = set_bit(x, 2)
    show(x)
    x = 65535
    show(x)
    x = clear_bit(x, 2)
    show(x)
    if is_little_endian():
        lines.append("This system is little endian.")
    else:
        lines.append("This system is big endian.")
    return "\n".join(lines) + "\n"


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Bit manipulation demo and bitmap sort.")
    parser.add_argument(
        "--sort",
        action="store_true",
        help="read integers from standard input and print them sorted, without duplicates",
    )
    args = parser.parse_args(argv)

    if not args.sort:
        sys.stdout.write(_bit_demo())
        return 0

    try:
        numbers = [int(token) for token in sys.stdin.read().split()]
        result = bitsort(numbers)
    except (ValueError, IndexError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    for number in result:
        print(number)
    return 0


if __name__ == "__main__":
    sys.exit(main())