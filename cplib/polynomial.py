"""FFT/NTT transforms and polynomial arithmetic modulo 998244353."""

from __future__ import annotations

from math import cos, pi, sin
from typing import Iterable, MutableSequence, Sequence

from cplib.modint import MOD, ModInt

_G = 3
_GI = pow(_G, MOD - 2, MOD)


def _next_pow2(n: int) -> int:
    return 1 if n <= 1 else 1 << (n - 1).bit_length()


def _check_pow2(n: int) -> None:
    if n < 1 or n & (n - 1):
        raise ValueError("length must be a positive power of two")


def _bit_reverse(p: MutableSequence) -> None:
    n = len(p)
    lg = n.bit_length() - 2
    rev = [0] * n
    for i in range(n):
        rev[i] = (rev[i >> 1] >> 1) | ((i & 1) << lg)
        if i < rev[i]:
            p[i], p[rev[i]] = p[rev[i]], p[i]


def fft(p: MutableSequence[complex], sign: int = 1) -> None:
    """In-place complex FFT; ``sign=-1`` gives the unscaled inverse."""
    if sign not in (1, -1):
        raise ValueError("sign must be 1 or -1")
    n = len(p)
    _check_pow2(n)
    if n == 1:
        return
    _bit_reverse(p)
    wid = 2
    while wid <= n:
        angle = 2 * pi / wid * sign
        w = complex(cos(angle), sin(angle))
        half = wid // 2
        for start in range(0, n, wid):
            wi = 1 + 0j
            for i in range(start, start + half):
                x = p[i]
                y = wi * p[i + half]
                p[i] = x + y
                p[i + half] = x - y
                wi *= w
        wid <<= 1


def _ntt_ints(p: list[int], root: int) -> None:
    n = len(p)
    if n == 1:
        return
    _bit_reverse(p)
    wid = 2
    while wid <= n:
        w = pow(root, (MOD - 1) // wid, MOD)
        half = wid // 2
        for start in range(0, n, wid):
            wi = 1
            for i in range(start, start + half):
                x = p[i]
                y = wi * p[i + half] % MOD
                p[i] = (x + y) % MOD
                p[i + half] = (x - y) % MOD
                wi = wi * w % MOD
        wid <<= 1


def ntt(p: MutableSequence, root: int | ModInt) -> None:
    """In-place number-theoretic transform with primitive root ``root``; entries become ModInt."""
    _check_pow2(len(p))
    values = [int(v) % MOD for v in p]
    _ntt_ints(values, int(root) % MOD)
    p[:] = [ModInt(v) for v in values]


def _ints(a: Iterable) -> list[int]:
    return [int(v) % MOD for v in a]


def _resize(v: list[int], k: int) -> list[int]:
    return v[:k] + [0] * (k - len(v))


def _conv(a: list[int], b: list[int]) -> list[int]:
    n = _next_pow2(len(a) + len(b))
    fa = _resize(a, n)
    fb = _resize(b, n)
    _ntt_ints(fa, _G)
    _ntt_ints(fb, _G)
    prod = [x * y % MOD for x, y in zip(fa, fb)]
    _ntt_ints(prod, _GI)
    inv_n = pow(n, MOD - 2, MOD)
    return [v * inv_n % MOD for v in prod]


def _inv(a: list[int]) -> list[int]:
    n = len(a)
    if n == 0:
        return []
    size = _next_pow2(n)
    a = _resize(a, size)
    if a[0] == 0:
        raise ZeroDivisionError("constant term is not invertible")
    ans = [pow(a[0], MOD - 2, MOD)]
    while len(ans) < size:
        k = len(ans)
        ans += [0] * k
        b = ans + [0] * (2 * k)
        f = a[: 2 * k] + [0] * (2 * k)
        _ntt_ints(b, _G)
        _ntt_ints(f, _G)
        b = [x * x % MOD * y % MOD for x, y in zip(b, f)]
        _ntt_ints(b, _GI)
        inv_len = pow(len(b), MOD - 2, MOD)
        ans = [(2 * ans[i] - b[i] * inv_len) % MOD for i in range(2 * k)]
    return ans[:n]


def _div(lhs: list[int], rhs: list[int]) -> tuple[list[int], list[int]]:
    n, m = len(lhs), len(rhs)
    if m == 0:
        raise ZeroDivisionError("division by the empty polynomial")
    if n < m - 1:
        return [], _resize(lhs, m - 1)
    k = n - m + 2
    fr = _resize(lhs[::-1], k)
    gr = _resize(rhs[::-1], k)
    qr = _conv(fr, _inv(gr))[: n - m + 1]
    qr.reverse()
    b = _conv(qr, rhs)
    rem = [(lhs[i] - b[i]) % MOD for i in range(m - 1)]
    return qr, rem


def _ln(a: list[int]) -> list[int]:
    n = len(a)
    da = [(i + 1) * a[i + 1] % MOD for i in range(n - 1)] + [0]
    dl = _conv(da, _inv(a))
    return [0] + [dl[i - 1] * pow(i, MOD - 2, MOD) % MOD for i in range(1, n)]


def _exp(a: list[int]) -> list[int]:
    if a and a[0] != 0:
        raise ValueError("constant term must be zero")
    ans = [1, 0]
    while len(ans) // 2 < len(a):
        b = _ln(ans)
        for i in range(len(ans)):
            b[i] = (a[i] - b[i]) % MOD if i < len(a) else (-b[i]) % MOD
        b[0] = (b[0] + 1) % MOD
        ans = _conv(b, ans)
    return _resize(ans, len(a))


def _wrap(v: list[int]) -> list[ModInt]:
    return [ModInt(x) for x in v]


def convolution(a: Sequence, b: Sequence) -> list[ModInt]:
    """Product of two polynomials, padded to the power of two used by the transform."""
    return _wrap(_conv(_ints(a), _ints(b)))


def poly_inv(a: Sequence) -> list[ModInt]:
    """Power-series inverse of ``a`` to ``len(a)`` terms."""
    return _wrap(_inv(_ints(a)))


def poly_div(lhs: Sequence, rhs: Sequence) -> tuple[list[ModInt], list[ModInt]]:
    """Return ``(quotient, remainder)``; the remainder has ``len(rhs) - 1`` terms."""
    q, r = _div(_ints(lhs), _ints(rhs))
    return _wrap(q), _wrap(r)


def poly_ln(a: Sequence) -> list[ModInt]:
    """Power-series logarithm of ``a`` (with ``a[0] == 1``)."""
    return _wrap(_ln(_ints(a)))


def poly_exp(a: Sequence) -> list[ModInt]:
    """Power-series exponential of ``a`` (with ``a[0] == 0``)."""
    return _wrap(_exp(_ints(a)))


def poly_multipoint_eval(poly: Sequence, xs: Sequence) -> list[ModInt]:
    """Evaluate ``poly`` at every point of ``xs``."""
    p = _ints(poly)
    points = _ints(xs)
    m = len(points)
    if m == 0:
        return []
    mx = max(len(p), m)
    points += [0] * (mx - m)
    tree: list[list[int]] = [[] for _ in range(2 * _next_pow2(mx))]

    def build(lo: int, hi: int, node: int) -> None:
        if hi - lo == 1:
            tree[node] = [(-points[lo]) % MOD, 1]
            return
        mid = (lo + hi) // 2
        build(lo, mid, 2 * node)
        build(mid, hi, 2 * node + 1)
        prod = _conv(tree[2 * node], tree[2 * node + 1])
        while prod and prod[-1] == 0:
            prod.pop()
        tree[node] = prod

    build(0, mx, 1)
    ans = [0] * m

    def solve(cur: list[int], lo: int, hi: int, node: int) -> None:
        if hi - lo == 1:
            ans[lo] = cur[0] if cur else 0
            return
        mid = (lo + hi) // 2
        solve(_div(cur, tree[2 * node])[1], lo, mid, 2 * node)
        if mid < m:
            solve(_div(cur, tree[2 * node + 1])[1], mid, hi, 2 * node + 1)

    solve(p, 0, mx, 1)
    return _wrap(ans)


def fft_convolution(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """Exact integer convolution of small values via one complex FFT; trailing zeros dropped."""
    n = _next_pow2(len(a) + len(b))
    p = [
        complex(a[i] if i < len(a) else 0, b[i] if i < len(b) else 0)
        for i in range(n)
    ]
    fft(p)
    p = [c * c for c in p]
    fft(p, -1)
    y = [round(c.imag / (2 * n)) for c in p]
    while y and y[-1] == 0:
        y.pop()
    return y


def convolution_mod(a: Sequence[int], b: Sequence[int], p: int) -> list[int]:
    """Convolution modulo an arbitrary ``p`` using a 15-bit split FFT; inputs in ``[0, 2**30)``."""
    if not a or not b:
        return []
    ans_size = len(a) + len(b) - 1
    size = _next_pow2(ans_size)
    fa = list(a) + [0] * (size - len(a))
    fb = list(b) + [0] * (size - len(b))
    p1 = [complex(x >> 15, x & 0x7FFF) for x in fa]
    p2 = [complex(x >> 15, -(x & 0x7FFF)) for x in fa]
    q = [complex(x >> 15, x & 0x7FFF) for x in fb]
    fft(p1)
    fft(q)
    fft(p2)
    p1 = [x * y for x, y in zip(p1, q)]
    p2 = [x * y for x, y in zip(p2, q)]
    fft(p1, -1)
    fft(p2, -1)
    result = []
    for c1, c2 in zip(p1, p2):
        c1 /= size
        c2 /= size
        s = c1 + c2
        a1b1 = round(s.real / 2) % p
        a1b2 = round(s.imag / 2) % p
        a2b1 = (round(c1.imag) - a1b2) % p
        a2b2 = (round(c2.real) - a1b1) % p
        result.append((a1b1 * (1 << 30) + (a1b2 + a2b1) * (1 << 15) + a2b2) % p)
    return result[:ans_size]