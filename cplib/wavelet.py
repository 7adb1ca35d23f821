"""Wavelet tree over a bounded integer range."""

from __future__ import annotations

from collections.abc import Iterable
from itertools import accumulate


class _Level:
    __slots__ = ("lo", "hi", "prefix", "left", "right")

    def __init__(self, values: list[int], lo: int, hi: int) -> None:
        self.lo = lo
        self.hi = hi
        self.prefix: list[int] = []
        self.left: _Level | None = None
        self.right: _Level | None = None
        if lo == hi or not values:
            return
        mid = (lo + hi) // 2
        self.prefix = [0, *accumulate(int(v <= mid) for v in values)]
        self.left = _Level([v for v in values if v <= mid], lo, mid)
        self.right = _Level([v for v in values if v > mid], mid + 1, hi)

    def kth(self, l: int, r: int, k: int) -> int:
        if l >= r:
            return 0
        if self.lo == self.hi:
            return self.lo
        lb, rb = self.prefix[l], self.prefix[r]
        in_left = rb - lb
        if k <= in_left:
            return self.left.kth(lb, rb, k)
        return self.right.kth(l - lb, r - rb, k - in_left)

    def count_le(self, l: int, r: int, k: int) -> int:
        if l >= r or k < self.lo:
            return 0
        if self.hi <= k:
            return r - l
        lb, rb = self.prefix[l], self.prefix[r]
        return self.left.count_le(lb, rb, k) + self.right.count_le(l - lb, r - rb, k)

    def count(self, l: int, r: int, k: int) -> int:
        if l >= r or k < self.lo or k > self.hi:
            return 0
        if self.lo == self.hi:
            return r - l
        lb, rb = self.prefix[l], self.prefix[r]
        if k <= (self.lo + self.hi) // 2:
            return self.left.count(lb, rb, k)
        return self.right.count(l - lb, r - rb, k)


class WaveletTree:
    """Order statistics and value counts over ranges of a static integer sequence.

    Values must lie in ``[lo, hi]``; the bounds default to the sequence's min and max.
    """

    __slots__ = ("_n", "_root")

    def __init__(
        self, values: Iterable[int], lo: int | None = None, hi: int | None = None
    ) -> None:
        data = list(values)
        if lo is None:
            lo = min(data, default=0)
        if hi is None:
            hi = max(data, default=lo)
        if lo > hi:
            raise ValueError("lo must not exceed hi")
        if any(not lo <= v <= hi for v in data):
            raise ValueError("value outside [lo, hi]")
        self._n = len(data)
        self._root = _Level(data, lo, hi)

    def __len__(self) -> int:
        return self._n

    def _check(self, l: int, r: int) -> bool:
        if l >= r:
            return False
        if l < 0 or r > self._n:
            raise IndexError("range out of bounds")
        return True

    def kth(self, l: int, r: int, k: int) -> int:
        """The ``k``-th smallest (1-based) value in ``[l, r)``; 0 for an empty range."""
        if not self._check(l, r):
            return 0
        if not 1 <= k <= r - l:
            raise ValueError("k must lie in [1, r - l]")
        return self._root.kth(l, r, k)

    def count_le(self, l: int, r: int, k: int) -> int:
        """Number of values in ``[l, r)`` not greater than ``k``."""
        if not self._check(l, r):
            return 0
        return self._root.count_le(l, r, k)

    def count(self, l: int, r: int, k: int) -> int:
        """Number of values in ``[l, r)`` equal to ``k``."""
        if not self._check(l, r):
            return 0
        return self._root.count(l, r, k)