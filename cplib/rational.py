"""Exact rational numbers kept in lowest terms."""

from __future__ import annotations

import operator
from math import gcd


class Rational:
    """A fraction ``p/q`` with ``q > 0`` and ``gcd(p, q) == 1``."""

    __slots__ = ("_p", "_q")

    def __init__(self, p: int = 0, q: int = 1) -> None:
        p = operator.index(p)
        q = operator.index(q)
        if q == 0:
            raise ZeroDivisionError("denominator is zero")
        if q < 0:
            p, q = -p, -q
        g = gcd(p, q)
        self._p = p // g
        self._q = q // g

    @property
    def p(self) -> int:
        return self._p

    @property
    def q(self) -> int:
        return self._q

    @staticmethod
    def _coerce(other: object) -> Rational | None:
        if isinstance(other, Rational):
            return other
        if isinstance(other, int):
            return Rational(other)
        return None

    def inv(self) -> Rational:
        """Return the reciprocal."""
        if self._p == 0:
            raise ZeroDivisionError("zero has no inverse")
        return Rational(self._q, self._p)

    def __add__(self, other: object) -> Rational:
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return Rational(self._p * o._q + self._q * o._p, self._q * o._q)

    __radd__ = __add__

    def __sub__(self, other: object) -> Rational:
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return self + (-o)

    def __rsub__(self, other: object) -> Rational:
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return o - self

    def __mul__(self, other: object) -> Rational:
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return Rational(self._p * o._p, self._q * o._q)

    __rmul__ = __mul__

    def __truediv__(self, other: object) -> Rational:
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return self * o.inv()

    def __rtruediv__(self, other: object) -> Rational:
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return o * self.inv()

    def __neg__(self) -> Rational:
        return Rational(-self._p, self._q)

    def __pos__(self) -> Rational:
        return self

    def __eq__(self, other: object) -> bool:
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return self._p == o._p and self._q == o._q

    def __lt__(self, other: object) -> bool:
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return self._p * o._q < self._q * o._p

    def __le__(self, other: object) -> bool:
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return self == o or self < o

    def __gt__(self, other: object) -> bool:
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return not self <= o

    def __ge__(self, other: object) -> bool:
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return not self < o

    def __hash__(self) -> int:
        return hash((self._p, self._q))

    def __float__(self) -> float:
        return self._p / self._q

    def __int__(self) -> int:
        return int(float(self))

    def __str__(self) -> str:
        return str(self._p) if self._q == 1 else f"{self._p}/{self._q}"

    def __repr__(self) -> str:
        return f"Rational({self._p}, {self._q})"