"""Sieves, primality tests, factorisation and prime-sum counting."""

from __future__ import annotations

import random
from collections.abc import Callable, Iterable
from itertools import combinations, groupby
from math import gcd, isqrt, prod

from cplib.modint import MOD

_rng = random.Random()

_MR_BASES = (2, 325, 9375, 28178, 450775, 9780504, 1795265022)


def min_prime_factors(n: int) -> list[int]:
    """Linear sieve: entry ``i`` is the smallest prime factor of ``i`` (0 for 0 and 1)."""
    if n < 0:
        raise ValueError("n must be non-negative")
    spf = [0] * (n + 1)
    primes: list[int] = []
    for i in range(2, n + 1):
        if spf[i] == 0:
            spf[i] = i
            primes.append(i)
        for p in primes:
            if i * p > n:
                break
            spf[i * p] = p
            if i % p == 0:
                break
    return spf


def prime_list(n: int) -> list[int]:
    """All primes not exceeding ``n``, in increasing order."""
    spf = min_prime_factors(n)
    return [i for i in range(2, n + 1) if spf[i] == i]


def segment_primes(l: int, r: int) -> list[int]:
    """Numbers in ``[l, r]`` with no prime factor up to ``isqrt(r) + 3``.

    For ``l`` above that bound these are exactly the primes of the range.
    """
    if l < 0:
        raise ValueError("l must be non-negative")
    if r < l:
        return []
    composite = bytearray(r - l + 1)
    for p in prime_list(isqrt(r) + 3):
        start = -(-l // p) * p
        hits = len(range(start, r + 1, p))
        if hits:
            composite[start - l :: p] = b"\x01" * hits
    return [l + k for k, flag in enumerate(composite) if not flag]


def _distinct_prime_factors(n: int) -> list[int]:
    factors = []
    j = 2
    while j * j <= n:
        if n % j == 0:
            factors.append(j)
            while n % j == 0:
                n //= j
        j += 1
    if n != 1:
        factors.append(n)
    return factors


def count_coprime(n: int, limit: int) -> int:
    """Count integers in ``[1, limit]`` coprime to ``n`` by inclusion-exclusion."""
    if n < 1:
        raise ValueError("n must be positive")
    factors = _distinct_prime_factors(n)
    total = 0
    for k in range(len(factors) + 1):
        sign = -1 if k % 2 else 1
        total += sign * sum(limit // prod(combo) for combo in combinations(factors, k))
    return total


def euler_phi(n: int) -> int:
    """Euler's totient of ``n`` by trial division."""
    phi = n
    i = 2
    while i * i <= n:
        if n % i == 0:
            while n % i == 0:
                n //= i
            phi -= phi // i
        i += 1
    if n > 1:
        phi -= phi // n
    return phi


def phi_table(n: int) -> list[int]:
    """Totients of ``0..n`` by a linear sieve (entry 0 is 0)."""
    if n < 0:
        raise ValueError("n must be non-negative")
    phi = [0] * (n + 1)
    if n >= 1:
        phi[1] = 1
    composite = [False] * (n + 1)
    primes: list[int] = []
    for i in range(2, n + 1):
        if not composite[i]:
            primes.append(i)
            phi[i] = i - 1
        for p in primes:
            if i * p > n:
                break
            composite[i * p] = True
            if i % p == 0:
                phi[i * p] = phi[i] * p
                break
            phi[i * p] = phi[i] * (p - 1)
    return phi


def miller_rabin(a: int, n: int) -> bool:
    """One Miller-Rabin round: ``True`` if ``n`` is a strong probable prime to base ``a``."""
    if n < 2:
        raise ValueError("n must be at least 2")
    u = n - 1
    while not u & 1:
        u >>= 1
    v = pow(a, u, n)
    if v == 1:
        return True
    while u <= n - 1:
        if v == n - 1:
            return True
        if v == 1:
            return False
        v = v * v % n
        u *= 2
    return False


def is_prime(n: int) -> bool:
    """Deterministic primality test for 64-bit integers."""
    if n in (2, 3, 5):
        return True
    if n < 2 or n % 2 == 0 or n % 3 == 0 or n % 5 == 0:
        return False
    return all(a % n == 0 or miller_rabin(a, n) for a in _MR_BASES)


def pollard_rho(x: int) -> int:
    """Brent's variant of Pollard's rho; returns a divisor of ``x`` (``x`` itself on failure)."""
    if x < 2:
        raise ValueError("x must be at least 2")
    c = _rng.randrange(1, x) if x > 2 else 1
    t = 0
    goal = 1
    while True:
        s = t
        val = 1
        for step in range(1, goal + 1):
            t = (t * t + c) % x
            val = val * abs(t - s) % x
            if not val:
                return x
            if step % 127 == 0:
                d = gcd(val, x)
                if d > 1:
                    return d
        d = gcd(val, x)
        if d > 1:
            return d
        goal <<= 1


def prime_factors(n: int) -> list[int]:
    """Prime factors of ``n`` with multiplicity, in no particular order."""
    if n < 1:
        raise ValueError("n must be positive")
    if n == 1:
        return []
    if is_prime(n):
        return [n]
    p = n
    while p == n:
        p = pollard_rho(n)
    return prime_factors(n // p) + prime_factors(p)


def divisors_from_factors(pfac: Iterable[int]) -> list[int]:
    """All divisors built from a multiset of prime factors."""
    divisors = [1]
    for p, group in groupby(sorted(pfac)):
        count = sum(1 for _ in group)
        base = list(divisors)
        power = 1
        for _ in range(count):
            power *= p
            divisors.extend(d * power for d in base)
    return divisors


def _quotient_table(n: int) -> tuple[int, list[int], Callable[[int], int]]:
    """Distinct values of ``n // k`` in decreasing order, with an index lookup."""
    sq = isqrt(n)
    values: list[int] = []
    small = [0] * (sq + 2)
    large = [0] * (sq + 2)
    l = 1
    while l <= n:
        v = n // l
        values.append(v)
        if v <= sq:
            small[v] = len(values) - 1
        else:
            large[n // v] = len(values) - 1
        l = n // v + 1

    def index(v: int) -> int:
        return small[v] if v <= sq else large[n // v]

    return sq, values, index


def count_primes(n: int) -> int:
    """Number of primes not exceeding ``n`` (Lucy_Hedgehog's method)."""
    if n <= 1:
        return 0
    sq, values, index = _quotient_table(n)
    dp = [v - 1 for v in values]
    for j, p in enumerate(prime_list(sq)):
        pp = p * p
        for i, v in enumerate(values):
            if v < pp:
                break
            dp[i] -= dp[index(v // p)] - j
    return dp[0]


def min25_sum(n: int) -> int:
    """Sum over ``i <= n`` of the multiplicative ``f(p**k) = p**k * (p**k - 1)``, modulo MOD."""
    if n < 1:
        raise ValueError("n must be positive")
    sq, values, index = _quotient_table(n)
    primes = [1] + prime_list(sq)
    m = len(primes) - 1
    sump1 = [0]
    sump2 = [0]
    for p in primes[1:]:
        sump1.append((sump1[-1] + p) % MOD)
        sump2.append((sump2[-1] + p * p) % MOD)

    g1 = [(v * (v + 1) // 2 - 1) % MOD for v in values]
    g2 = [(v * (v + 1) * (2 * v + 1) // 6 - 1) % MOD for v in values]
    for j in range(m):
        p = primes[j + 1]
        pp = p * p
        for i, v in enumerate(values):
            if v < pp:
                break
            pos = index(v // p)
            g1[i] = (g1[i] - (g1[pos] - sump1[j]) * p) % MOD
            g2[i] = (g2[i] - (g2[pos] - sump2[j]) * pp) % MOD

    def partial(x: int, j: int) -> int:
        if primes[j] >= x:
            return 0
        k = index(x)
        total = g2[k] - g1[k] - (sump2[j] - sump1[j])
        for i in range(j + 1, m + 1):
            p = primes[i]
            if x < p * p:
                break
            pe, e = p, 1
            while pe <= x:
                total += pe % MOD * ((pe - 1) % MOD) * (partial(x // pe, i) + (e > 1))
                pe *= p
                e += 1
        return total % MOD

    return (partial(n, 0) + 1) % MOD