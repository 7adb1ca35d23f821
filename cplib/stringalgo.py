"""String algorithms: Z-function, KMP, Manacher, suffix and LCP arrays, wildcard matching."""

from __future__ import annotations

from collections.abc import Sequence

from cplib.modint import MOD
from cplib.polynomial import convolution


def z_function(s: Sequence) -> list[int]:
    """``z[i]`` is the longest common prefix of ``s`` and ``s[i:]``; ``z[0]`` is 0."""
    n = len(s)
    z = [0] * n
    l = r = 0
    for i in range(1, n):
        if i < r:
            z[i] = min(r - i, z[i - l])
        while i + z[i] < n and s[z[i]] == s[i + z[i]]:
            z[i] += 1
        if i + z[i] > r:
            l, r = i, i + z[i]
    return z


def _prefix_function(p: Sequence) -> list[int]:
    pi = [0] * len(p)
    k = 0
    for i in range(1, len(p)):
        while k and p[i] != p[k]:
            k = pi[k - 1]
        if p[i] == p[k]:
            k += 1
        pi[i] = k
    return pi


def kmp_find(s: Sequence, sub: Sequence) -> int:
    """Index of the first occurrence of ``sub`` in ``s``, or -1."""
    m = len(sub)
    if m == 0:
        return 0
    if len(s) < m:
        return -1
    pi = _prefix_function(sub)
    j = 0
    for i, c in enumerate(s):
        while j and c != sub[j]:
            j = pi[j - 1]
        if c == sub[j]:
            j += 1
        if j == m:
            return i - m + 1
    return -1


def kmp_count(s: Sequence, sub: Sequence) -> int:
    """Number of non-overlapping occurrences of ``sub``, scanning left to right."""
    m = len(sub)
    if m == 0:
        raise ValueError("pattern must not be empty")
    pi = _prefix_function(sub)
    count = 0
    j = 0
    for c in s:
        while j and c != sub[j]:
            j = pi[j - 1]
        if c == sub[j]:
            j += 1
        if j == m:
            count += 1
            j = 0
    return count


def manacher(s: Sequence) -> tuple[list[int], list[int]]:
    """Palindrome radii.

    ``d1[i]`` is the largest ``k`` with ``s[i-k:i+k+1]`` a palindrome;
    ``d2[i]`` (for ``i < n-1``) is the largest ``k`` with ``s[i-k+1:i+k+1]`` one.
    """
    n = len(s)
    if n == 0:
        return [], []
    odd = [0] * n
    l, r = 0, -1
    for i in range(n):
        k = 1 if i > r else min(odd[l + r - i], r - i + 1)
        while i - k >= 0 and i + k < n and s[i - k] == s[i + k]:
            k += 1
        odd[i] = k
        if i + k - 1 > r:
            l, r = i - k + 1, i + k - 1
    even = [0] * n
    l, r = 0, -1
    for i in range(n):
        k = 0 if i > r else min(even[l + r - i + 1], r - i + 1)
        while i - k - 1 >= 0 and i + k < n and s[i - k - 1] == s[i + k]:
            k += 1
        even[i] = k
        if i + k - 1 > r:
            l, r = i - k, i + k - 1
    return [k - 1 for k in odd], even[1:]


def suffix_array(s: str) -> list[int]:
    """Start positions of the suffixes of ``s`` in lexicographic order."""
    n = len(s)
    if n == 0:
        return []
    rank = [ord(c) for c in s]
    sa = sorted(range(n), key=rank.__getitem__)
    k = 1
    while True:
        def key(i: int, k: int = k, rank: list[int] = rank) -> tuple[int, int]:
            return rank[i], rank[i + k] if i + k < n else -1

        sa.sort(key=key)
        fresh = [0] * n
        for prev, cur in zip(sa, sa[1:]):
            fresh[cur] = fresh[prev] + (key(prev) < key(cur))
        rank = fresh
        if rank[sa[-1]] == n - 1 or k >= n:
            break
        k *= 2
    return sa


def lcp_array(s: str, sa: Sequence[int]) -> list[int]:
    """Longest common prefixes of suffixes adjacent in ``sa`` (Kasai's algorithm)."""
    n = len(s)
    if n == 0:
        raise ValueError("string must not be empty")
    if len(sa) != n:
        raise ValueError("suffix array does not match the string")
    rank = [0] * n
    for i, start in enumerate(sa):
        rank[start] = i
    lcp = [0] * (n - 1)
    h = 0
    for i in range(n):
        if h > 0:
            h -= 1
        if rank[i] == 0:
            continue
        j = sa[rank[i] - 1]
        while j + h < n and i + h < n and s[j + h] == s[i + h]:
            h += 1
        lcp[rank[i] - 1] = h
    return lcp


def _codes(t: str) -> list[int]:
    out = []
    for c in t:
        if c == "*":
            out.append(0)
        elif "a" <= c <= "z":
            out.append(ord(c) - ord("a") + 2)
        else:
            raise ValueError(f"unsupported character {c!r}")
    return out


def wildcard_match(s: str, sub: str) -> list[bool]:
    """For each position of ``s``, whether ``sub`` matches there; ``*`` matches anything.

    Both strings may hold lower-case letters and ``*``.
    """
    n, m = len(s), len(sub)
    b = _codes(s)
    a = _codes(sub)[::-1]
    if m > n:
        return [False] * n
    if m == 0:
        return [True] * n
    t1 = convolution(a, [x**3 for x in b])
    t2 = convolution([x**3 for x in a], b)
    t3 = convolution([x * x for x in a], [x * x for x in b])
    return [
        i <= n - m
        and (int(t1[i + m - 1]) + int(t2[i + m - 1]) - 2 * int(t3[i + m - 1])) % MOD == 0
        for i in range(n)
    ]