"""Sparse table for idempotent range queries in constant time."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any


class SparseTable:
    """Static range queries for an idempotent operation such as ``min`` or ``max``."""

    __slots__ = ("_n", "_op", "_table")

    def __init__(self, values: Iterable[Any], op: Callable[[Any, Any], Any]) -> None:
        row = list(values)
        self._n = len(row)
        self._op = op
        self._table = [row]
        half = 1
        while 2 * half <= self._n:
            prev = self._table[-1]
            self._table.append(
                [op(prev[j], prev[j + half]) for j in range(self._n - 2 * half + 1)]
            )
            half *= 2

    def __len__(self) -> int:
        return self._n

    def query(self, l: int, r: int) -> Any:
        """Combine the values at positions ``[l, r)``, which must be non-empty."""
        if l >= r:
            raise ValueError("query range is empty")
        if l < 0 or r > self._n:
            raise IndexError("range out of bounds")
        k = (r - l).bit_length() - 1
        level = self._table[k]
        return self._op(level[l], level[r - (1 << k)])