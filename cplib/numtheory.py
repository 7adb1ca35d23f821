"""Extended gcd, modular inverse, CRT, fast power, integer sqrt and Barrett reduction."""

from __future__ import annotations

from math import isqrt
from typing import Sequence

_SQRT_UPPER = 2_000_000_000


def inv_gcd(a: int, b: int) -> tuple[int, int]:
    """Return ``(g, x)`` with ``g = gcd(a, b)``, ``a*x = g (mod b)`` and ``0 <= x < b // g``."""
    if b < 1:
        raise ValueError("modulus must be positive")
    a %= b
    if a == 0:
        return b, 0
    s, t = b, a
    m0, m1 = 0, 1
    while t:
        u = s // t
        s, t = t, s - t * u
        m0, m1 = m1, m0 - m1 * u
    if m0 < 0:
        m0 += b // s
    return s, m0


def inv_mod(a: int, mod: int) -> int:
    """Return the inverse of ``a`` modulo ``mod``."""
    g, x = inv_gcd(a, mod)
    if g != 1:
        raise ValueError(f"{a} is not invertible modulo {mod}")
    return x


def crt(r: Sequence[int], m: Sequence[int]) -> tuple[int, int]:
    """Solve ``x = r[i] (mod m[i])``; return ``(x, lcm)`` or ``(0, 0)`` if unsolvable."""
    if len(r) != len(m):
        raise ValueError("remainders and moduli differ in length")
    r0, m0 = 0, 1
    for ri, mi in zip(r, m):
        if mi < 1:
            raise ValueError("moduli must be positive")
        r1, m1 = ri % mi, mi
        if m0 < m1:
            r0, r1 = r1, r0
            m0, m1 = m1, m0
        if m0 % m1 == 0:
            if r0 % m1 != r1:
                return 0, 0
            continue
        g, im = inv_gcd(m0, m1)
        u1 = m1 // g
        if (r1 - r0) % g:
            return 0, 0
        x = (r1 - r0) // g % u1 * im % u1
        r0 += x * m0
        m0 *= u1
    return r0, m0


def qpow(a: int, n: int, mod: int) -> int:
    """Return ``a ** n % mod``; a non-positive exponent gives 1."""
    if n <= 0:
        return 1
    return pow(a, n, mod)


def safe_sqrt(n: int) -> int:
    """Floor square root, clamped to ``[0, 2*10**9)``; negative input gives 0."""
    if n < 0:
        return 0
    return min(isqrt(n), _SQRT_UPPER - 1)


class Barrett:
    """Barrett reduction by a fixed modulus ``1 <= m < 2**32``."""

    __slots__ = ("m", "im")

    def __init__(self, m: int) -> None:
        if not 1 <= m < 1 << 32:
            raise ValueError("modulus must lie in [1, 2**32)")
        self.m = m
        self.im = (1 << 64) - 1
        self.im = self.im // m + 1

    def reduce(self, z: int) -> int:
        """Return ``z % m`` for ``0 <= z < 2**64``."""
        if not 0 <= z < 1 << 64:
            raise ValueError("value must lie in [0, 2**64)")
        x = (z * self.im) >> 64
        y = x * self.m
        return z - y + (self.m if z < y else 0)

    def __rmod__(self, z: int) -> int:
        return self.reduce(z)