"""Fenwick (binary indexed) tree for prefix sums with point updates."""

from __future__ import annotations


class FenwickTree:
    """Point add and range sum over ``n`` positions, all starting at zero."""

    __slots__ = ("_n", "_data")

    def __init__(self, n: int = 0) -> None:
        if n < 0:
            raise ValueError("n must be non-negative")
        self._n = n
        self._data = [0] * n

    def __len__(self) -> int:
        return self._n

    def add(self, p: int, x: int) -> None:
        """Add ``x`` at position ``p``."""
        if not 0 <= p < self._n:
            raise IndexError("position out of range")
        p += 1
        while p <= self._n:
            self._data[p - 1] += x
            p += p & -p

    def _prefix(self, r: int) -> int:
        total = 0
        while r > 0:
            total += self._data[r - 1]
            r -= r & -r
        return total

    def sum(self, l: int, r: int) -> int:
        """Sum over positions ``[l, r)``."""
        if not 0 <= l <= r <= self._n:
            raise IndexError("range out of bounds")
        return self._prefix(r) - self._prefix(l)