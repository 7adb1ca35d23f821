"""Polynomial string hashes: prefix hashes, a segment-tree hash and one-shot hashes."""

from __future__ import annotations

import random
from collections.abc import Sequence

MASK64 = (1 << 64) - 1
FIRST_BASE = 17477417
PRIME_MOD = 10**9 + 7
POOR_MOD = 998244353
STRHASH_BASE = 202403

_rng = random.Random()
_random_base = _rng.randrange(20240327) + 131
_segment_base = _rng.randrange(20240327) + 133
_strhash_mod = _rng.getrandbits(64) % 1145141919810 | 1


def _codes(s: str | bytes) -> list[int]:
    if isinstance(s, (bytes, bytearray)):
        return list(s)
    return [ord(c) for c in s]


def _check_range(l: int | None, r: int | None, n: int) -> tuple[int, int] | None:
    if l is None and r is None:
        return None
    if l is None or r is None:
        raise TypeError("give both l and r, or neither")
    if not 0 <= l <= r <= n:
        raise IndexError("range out of bounds")
    return l, r


class DoubleHash:
    """Prefix hashes modulo ``2**64`` (fixed base) and modulo ``10**9 + 7`` (random base).

    The hash of ``s`` is ``s[0]*p**(n-1) + ... + s[n-1]`` under each modulus.
    """

    __slots__ = ("_base", "_pw", "_pre")

    def __init__(self, s: str | bytes = "", base: int | None = None) -> None:
        self._base = _random_base if base is None else base
        self._pw: list[tuple[int, int]] = [(1, 1)]
        self._pre: list[tuple[int, int]] = [(0, 0)]
        self.extend(s)

    @property
    def base(self) -> int:
        """Base of the second hash."""
        return self._base

    def __len__(self) -> int:
        return len(self._pw) - 1

    def extend(self, s: str | bytes) -> None:
        """Append ``s`` to the hashed text."""
        pw, pre, b = self._pw, self._pre, self._base
        for c in _codes(s):
            p1, p2 = pw[-1]
            pw.append((p1 * FIRST_BASE & MASK64, p2 * b % PRIME_MOD))
            h1, h2 = pre[-1]
            pre.append(((h1 * FIRST_BASE + c) & MASK64, (h2 * b + c) % PRIME_MOD))

    def value(self, l: int | None = None, r: int | None = None) -> tuple[int, int]:
        """Hash of the whole text, or of positions ``[l, r)``."""
        bounds = _check_range(l, r, len(self))
        if bounds is None:
            return self._pre[-1]
        l, r = bounds
        h1r, h2r = self._pre[r]
        h1l, h2l = self._pre[l]
        p1, p2 = self._pw[r - l]
        return (h1r - h1l * p1) & MASK64, (h2r - h2l * p2) % PRIME_MOD


class SingleHash:
    """Prefix hashes modulo ``10**9 + 7`` with a random base."""

    __slots__ = ("_base", "_pw", "_pre")

    def __init__(self, s: str | bytes = "", base: int | None = None) -> None:
        self._base = _random_base if base is None else base
        self._pw = [1]
        self._pre = [0]
        self.extend(s)

    @property
    def base(self) -> int:
        return self._base

    def __len__(self) -> int:
        return len(self._pw) - 1

    def extend(self, s: str | bytes) -> None:
        """Append ``s`` to the hashed text."""
        pw, pre, b = self._pw, self._pre, self._base
        for c in _codes(s):
            pw.append(pw[-1] * b % PRIME_MOD)
            pre.append((pre[-1] * b + c) % PRIME_MOD)

    def value(self, l: int | None = None, r: int | None = None) -> int:
        """Hash of the whole text, or of positions ``[l, r)``."""
        bounds = _check_range(l, r, len(self))
        if bounds is None:
            return self._pre[-1]
        l, r = bounds
        return (self._pre[r] - self._pre[l] * self._pw[r - l]) % PRIME_MOD


class SegmentHash:
    """Forward hash ``v(s[0]) + v(s[1])*p + ...`` of lower-case text with point updates.

    Each letter maps to a value in ``letter_values`` (random by default).
    """

    __slots__ = ("_base", "_values", "_n", "_s", "_len")

    def __init__(
        self,
        data: int | str,
        base: int | None = None,
        letter_values: Sequence[int] | None = None,
    ) -> None:
        self._base = _segment_base if base is None else base
        if letter_values is None:
            self._values = tuple(_rng.randrange(1, PRIME_MOD) for _ in range(26))
        else:
            self._values = tuple(letter_values)
            if len(self._values) != 26:
                raise ValueError("one value per letter is required")
        if isinstance(data, int):
            if data < 0:
                raise ValueError("size must be non-negative")
            leaves = [0] * data
        else:
            leaves = [self._letter(c) for c in data]
        self._n = n = len(leaves)
        self._len = length = [1] * (2 * n)
        for i in range(n - 1, 0, -1):
            length[i] = length[2 * i] + length[2 * i + 1]
        self._s = s = [0] * n + leaves
        for i in range(n - 1, 0, -1):
            s[i] = self._combine(i)

    def __len__(self) -> int:
        return self._n

    def _letter(self, c: str) -> int:
        if not (len(c) == 1 and "a" <= c <= "z"):
            raise ValueError(f"unsupported character {c!r}")
        return self._values[ord(c) - ord("a")]

    def _pw(self, k: int) -> int:
        return pow(self._base, k, PRIME_MOD)

    def _combine(self, i: int) -> int:
        s = self._s
        return (s[2 * i] + s[2 * i + 1] * self._pw(self._len[2 * i])) % PRIME_MOD

    def set(self, i: int, ch: str) -> None:
        """Replace the letter at position ``i``."""
        if not 0 <= i < self._n:
            raise IndexError("position out of range")
        i += self._n
        self._s[i] = self._letter(ch)
        i >>= 1
        while i:
            self._s[i] = self._combine(i)
            i >>= 1

    def query(self, l: int, r: int) -> int:
        """Hash of positions ``[l, r)``."""
        if not 0 <= l <= r <= self._n:
            raise IndexError("range out of bounds")
        s, length = self._s, self._len
        la = ra = 0
        len_left = 0
        l += self._n
        r += self._n
        while l < r:
            if l & 1:
                la = (la + s[l] * self._pw(len_left)) % PRIME_MOD
                len_left += length[l]
                l += 1
            if r & 1:
                r -= 1
                ra = (s[r] + ra * self._pw(length[r])) % PRIME_MOD
            l >>= 1
            r >>= 1
        return (la + ra * self._pw(len_left)) % PRIME_MOD


def strhash(s: str | bytes) -> tuple[int, int]:
    """Two hashes of ``s``: modulo a random odd number, and modulo ``2**64``."""
    h1 = h2 = 0
    for c in _codes(s):
        h1 = (h1 * STRHASH_BASE % _strhash_mod + c) % _strhash_mod
        h2 = (h2 * STRHASH_BASE + c) & MASK64
    return h1, h2


def poor_hash(s: str | bytes) -> int:
    """Polynomial hash modulo ``2**64``; easy to break on purpose."""
    h = 0
    for c in _codes(s):
        h = (h * FIRST_BASE + c) & MASK64
    return h


def poor_hash_mod(s: str | bytes) -> int:
    """Polynomial hash modulo 998244353 with a fixed base."""
    h = 0
    for c in _codes(s):
        h = (h * FIRST_BASE + c) % POOR_MOD
    return h