"""Fast Walsh-Hadamard style transforms for OR, AND and XOR convolutions."""

from __future__ import annotations

from typing import Callable, MutableSequence, Sequence

from cplib.modint import ModInt


def _blocks(n: int):
    k = 1
    while 2 * k <= n:
        for start in range(0, n, 2 * k):
            yield k, range(start, start + k)
        k *= 2


def fwt_or(f: MutableSequence, g) -> None:
    """In-place OR transform; ``g=1`` forward, ``g=-1`` inverse."""
    f[:] = [ModInt(v) for v in f]
    for k, block in _blocks(len(f)):
        for j in block:
            f[j + k] = f[j + k] + f[j] * g


def fwt_and(f: MutableSequence, g) -> None:
    """In-place AND transform; ``g=1`` forward, ``g=-1`` inverse."""
    f[:] = [ModInt(v) for v in f]
    for k, block in _blocks(len(f)):
        for j in block:
            f[j] = f[j] + f[j + k] * g


def fwt_xor(f: MutableSequence, g) -> None:
    """In-place XOR transform; ``g=1`` forward, ``g=1/2`` inverse."""
    f[:] = [ModInt(v) for v in f]
    for k, block in _blocks(len(f)):
        for j in block:
            x, y = f[j], f[j + k]
            f[j] = (x + y) * g
            f[j + k] = (x - y) * g


def fwt_convolution(
    a: Sequence,
    b: Sequence,
    op: Callable[[MutableSequence, object], None],
    g,
    ig,
) -> list[ModInt]:
    """Convolve ``a`` and ``b`` with transform ``op`` (forward ``g``, inverse ``ig``)."""
    if len(a) != len(b):
        raise ValueError("inputs differ in length")
    n = len(a)
    if n & (n - 1):
        raise ValueError("length must be a power of two")
    fa = list(a)
    fb = list(b)
    op(fa, g)
    op(fb, g)
    c = [x * y for x, y in zip(fa, fb)]
    op(c, ig)
    return c