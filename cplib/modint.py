"""Integers modulo the NTT-friendly prime 998244353."""

from __future__ import annotations

import operator

MOD = 998244353


class ModInt:
    """An immutable residue modulo :data:`MOD`."""

    __slots__ = ("_value",)

    mod = MOD

    def __init__(self, value: int | ModInt = 0) -> None:
        if isinstance(value, ModInt):
            self._value = value._value
        else:
            self._value = operator.index(value) % MOD

    @classmethod
    def _raw(cls, value: int) -> ModInt:
        obj = object.__new__(cls)
        obj._value = value
        return obj

    @staticmethod
    def _coerce(other: object) -> int | None:
        if isinstance(other, ModInt):
            return other._value
        if isinstance(other, int):
            return other % MOD
        return None

    @property
    def value(self) -> int:
        """The canonical representative in ``[0, MOD)``."""
        return self._value

    def pow(self, n: int) -> ModInt:
        """Return ``self ** n`` for a non-negative exponent."""
        if n < 0:
            raise ValueError("exponent must be non-negative")
        return ModInt._raw(pow(self._value, n, MOD))

    def inv(self) -> ModInt:
        """Return the inverse via Fermat's little theorem (zero maps to zero)."""
        return self.pow(MOD - 2)

    def __add__(self, other: object) -> ModInt:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        total = self._value + rhs
        return ModInt._raw(total - MOD if total >= MOD else total)

    __radd__ = __add__

    def __sub__(self, other: object) -> ModInt:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return ModInt._raw((self._value - rhs) % MOD)

    def __rsub__(self, other: object) -> ModInt:
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return ModInt._raw((lhs - self._value) % MOD)

    def __mul__(self, other: object) -> ModInt:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return ModInt._raw(self._value * rhs % MOD)

    __rmul__ = __mul__

    def __truediv__(self, other: object) -> ModInt:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self * ModInt._raw(rhs).inv()

    def __rtruediv__(self, other: object) -> ModInt:
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return ModInt._raw(lhs) * self.inv()

    def __pow__(self, n: int) -> ModInt:
        return self.pow(n)

    def __neg__(self) -> ModInt:
        return ModInt._raw((-self._value) % MOD)

    def __pos__(self) -> ModInt:
        return self

    def __eq__(self, other: object) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self._value == rhs

    def __hash__(self) -> int:
        return hash(self._value)

    def __bool__(self) -> bool:
        return self._value != 0

    def __int__(self) -> int:
        return self._value

    def __repr__(self) -> str:
        return f"ModInt({self._value})"

    def __str__(self) -> str:
        return str(self._value)