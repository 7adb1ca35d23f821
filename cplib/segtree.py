"""Segment trees over a monoid, with a lazy-propagation variant for range updates."""

from __future__ import annotations

import operator
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

T = TypeVar("T")
A = TypeVar("A")

INT_MIN = -(1 << 31)
INT_MAX = (1 << 31) - 1


@dataclass(frozen=True)
class Monoid(Generic[T]):
    """An associative operation ``op`` with identity ``e``."""

    e: T
    op: Callable[[T, T], T]


@dataclass(frozen=True)
class Lazy(Generic[T, A]):
    """Range tags.

    ``e`` is the empty tag, ``op(older, newer)`` composes two tags, and
    ``update(value, tag, width)`` returns the value of a segment of ``width``
    positions after ``tag`` is applied to it.
    """

    e: A
    op: Callable[[A, A], A]
    update: Callable[[T, A, int], T]


def _min_count(a: tuple[int, int], b: tuple[int, int]) -> tuple[int, int]:
    if a[0] == b[0]:
        return a[0], a[1] + b[1]
    return min(a, b)


MAX_INT: Monoid[int] = Monoid(INT_MIN, max)
MIN_INT: Monoid[int] = Monoid(INT_MAX, min)
ADD: Monoid[int] = Monoid(0, operator.add)
MIN_COUNT: Monoid[tuple[int, int]] = Monoid((0x3F3F3F3F, 0), _min_count)
ADD_LAZY: Lazy[int, int] = Lazy(0, operator.add, lambda value, tag, width: value + tag * width)


def add_mod_monoid(m: int) -> Monoid[int]:
    """Addition modulo ``m``."""
    if m < 1:
        raise ValueError("modulus must be positive")
    return Monoid(0, lambda a, b: (a + b) % m)


def add_mul_lazy(m: int) -> Lazy[int, tuple[int, int]]:
    """Affine tags ``(add, mul)`` mapping ``x`` to ``x * mul + add`` modulo ``m``."""
    if m < 1:
        raise ValueError("modulus must be positive")

    def op(a: tuple[int, int], b: tuple[int, int]) -> tuple[int, int]:
        return (a[0] * b[1] + b[0]) % m, a[1] * b[1] % m

    def update(value: int, tag: tuple[int, int], width: int) -> int:
        return (value * tag[1] + tag[0] * width) % m

    return Lazy((0, 1), op, update)


def _initial(monoid: Monoid, data: int | Iterable[Any]) -> list[Any]:
    if isinstance(data, int):
        if data < 0:
            raise ValueError("size must be non-negative")
        return [monoid.e] * data
    return list(data)


class SegTree(Generic[T]):
    """Point assignment and range product over ``2n`` cells."""

    __slots__ = ("_monoid", "_n", "_s")

    def __init__(self, monoid: Monoid[T], data: int | Iterable[T]) -> None:
        values = _initial(monoid, data)
        self._monoid = monoid
        self._n = n = len(values)
        self._s = s = [monoid.e] * n + values
        for i in range(n - 1, 0, -1):
            s[i] = monoid.op(s[2 * i], s[2 * i + 1])

    def __len__(self) -> int:
        return self._n

    def __getitem__(self, i: int) -> T:
        if not 0 <= i < self._n:
            raise IndexError("position out of range")
        return self._s[i + self._n]

    def set(self, i: int, val: T) -> None:
        """Assign ``val`` to position ``i``."""
        if not 0 <= i < self._n:
            raise IndexError("position out of range")
        s, op = self._s, self._monoid.op
        i += self._n
        s[i] = val
        i >>= 1
        while i:
            s[i] = op(s[2 * i], s[2 * i + 1])
            i >>= 1

    def query(self, l: int, r: int) -> T:
        """Product of positions ``[l, r)`` in order."""
        if not 0 <= l <= r <= self._n:
            raise IndexError("range out of bounds")
        s, op = self._s, self._monoid.op
        la = ra = self._monoid.e
        l += self._n
        r += self._n
        while l < r:
            if l & 1:
                la = op(la, s[l])
                l += 1
            if r & 1:
                r -= 1
                ra = op(s[r], ra)
            l >>= 1
            r >>= 1
        return op(la, ra)


class LazySegTree(Generic[T, A]):
    """Range tag application and range product, padded to a power of two."""

    __slots__ = ("_monoid", "_lazy", "_len", "_n", "_s", "_d")

    def __init__(self, monoid: Monoid[T], lazy: Lazy[T, A], data: int | Iterable[T]) -> None:
        values = _initial(monoid, data)
        self._monoid = monoid
        self._lazy = lazy
        self._len = len(values)
        self._n = n = 1 << (max(1, len(values)) - 1).bit_length()
        self._s = s = [monoid.e] * (2 * n)
        s[n : n + len(values)] = values
        for i in range(n - 1, 0, -1):
            s[i] = monoid.op(s[2 * i], s[2 * i + 1])
        self._d = [lazy.e] * (2 * n)

    def __len__(self) -> int:
        return self._len

    def _tag(self, p: int, val: A, w: int) -> None:
        self._s[p] = self._lazy.update(self._s[p], val, w)
        if p < self._n:
            self._d[p] = self._lazy.op(self._d[p], val)

    def _push(self, p: int, w: int) -> None:
        tag = self._d[p]
        if p < self._n and tag != self._lazy.e:
            self._tag(2 * p, tag, w >> 1)
            self._tag(2 * p + 1, tag, w >> 1)
            self._d[p] = self._lazy.e

    def _query(self, l: int, r: int, node: int, w: int) -> T:
        self._push(node, w)
        if r <= 0 or w <= l:
            return self._monoid.e
        if l <= 0 and w <= r:
            return self._s[node]
        w >>= 1
        return self._monoid.op(
            self._query(l, r, 2 * node, w), self._query(l - w, r - w, 2 * node + 1, w)
        )

    def _apply(self, l: int, r: int, val: A, node: int, w: int) -> None:
        self._push(node, w)
        if r <= 0 or w <= l:
            return
        if l <= 0 and w <= r:
            self._d[node] = self._lazy.op(self._d[node], val)
            self._s[node] = self._lazy.update(self._s[node], val, w)
            self._push(node, w)
            return
        w >>= 1
        self._apply(l, r, val, 2 * node, w)
        self._apply(l - w, r - w, val, 2 * node + 1, w)
        self._s[node] = self._monoid.op(self._s[2 * node], self._s[2 * node + 1])

    def _check(self, l: int, r: int) -> None:
        if not 0 <= l <= r <= self._len:
            raise IndexError("range out of bounds")

    def apply(self, l: int, r: int, val: A) -> None:
        """Apply tag ``val`` to positions ``[l, r)``."""
        self._check(l, r)
        self._apply(l, r, val, 1, self._n)

    def query(self, l: int, r: int) -> T:
        """Product of positions ``[l, r)`` in order."""
        self._check(l, r)
        return self._query(l, r, 1, self._n)