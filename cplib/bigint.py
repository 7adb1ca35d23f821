"""A signed arbitrary-precision integer with C-style truncating division."""

from __future__ import annotations

import functools
import operator

_SMALL_MOD_LIMIT = 9 * 10**17


def _parse(text: str) -> int:
    digits = text[1:] if text.startswith("-") else text
    if not digits or not all("0" <= c <= "9" for c in digits):
        raise ValueError(f"not a decimal integer: {text!r}")
    value = int(digits)
    return -value if text.startswith("-") else value


def _tdivmod(a: int, b: int) -> tuple[int, int]:
    if b == 0:
        raise ZeroDivisionError("division by zero")
    q = abs(a) // abs(b)
    if (a < 0) != (b < 0):
        q = -q
    return q, a - q * b


@functools.total_ordering
class BigInt:
    """An immutable integer built from a decimal string or an ``int``.

    ``//`` and ``%`` truncate toward zero, so a remainder takes the sign of the
    dividend. Taking ``%`` by a plain ``int`` not above ``9 * 10**17`` gives the
    remainder of the magnitudes instead.
    """

    __slots__ = ("_value",)

    def __init__(self, value: int | str | BigInt = 0) -> None:
        if isinstance(value, BigInt):
            self._value = value._value
        elif isinstance(value, str):
            self._value = _parse(value)
        else:
            self._value = operator.index(value)

    @staticmethod
    def _coerce(other: object) -> int | None:
        if isinstance(other, BigInt):
            return other._value
        if isinstance(other, int):
            return other
        return None

    def abs(self) -> BigInt:
        """The magnitude."""
        return BigInt(abs(self._value))

    __abs__ = abs

    def __neg__(self) -> BigInt:
        return BigInt(-self._value)

    def __pos__(self) -> BigInt:
        return self

    def __add__(self, other: object) -> BigInt:
        rhs = self._coerce(other)
        return NotImplemented if rhs is None else BigInt(self._value + rhs)

    __radd__ = __add__

    def __sub__(self, other: object) -> BigInt:
        rhs = self._coerce(other)
        return NotImplemented if rhs is None else BigInt(self._value - rhs)

    def __rsub__(self, other: object) -> BigInt:
        lhs = self._coerce(other)
        return NotImplemented if lhs is None else BigInt(lhs - self._value)

    def __mul__(self, other: object) -> BigInt:
        rhs = self._coerce(other)
        return NotImplemented if rhs is None else BigInt(self._value * rhs)

    __rmul__ = __mul__

    def __floordiv__(self, other: object) -> BigInt:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return BigInt(_tdivmod(self._value, rhs)[0])

    def __rfloordiv__(self, other: object) -> BigInt:
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return BigInt(_tdivmod(lhs, self._value)[0])

    def __mod__(self, other: object) -> BigInt:
        if isinstance(other, BigInt):
            return BigInt(_tdivmod(self._value, other._value)[1])
        if isinstance(other, int):
            if other == 0:
                raise ZeroDivisionError("modulo by zero")
            if other > _SMALL_MOD_LIMIT:
                return BigInt(_tdivmod(self._value, other)[1])
            return BigInt(abs(self._value) % abs(other))
        return NotImplemented

    def __rmod__(self, other: object) -> BigInt:
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return BigInt(_tdivmod(lhs, self._value)[1])

    def __eq__(self, other: object) -> bool:
        rhs = self._coerce(other)
        return NotImplemented if rhs is None else self._value == rhs

    def __lt__(self, other: object) -> bool:
        rhs = self._coerce(other)
        return NotImplemented if rhs is None else self._value < rhs

    def __hash__(self) -> int:
        return hash(self._value)

    def __bool__(self) -> bool:
        return self._value != 0

    def __int__(self) -> int:
        return self._value

    __index__ = __int__

    def __str__(self) -> str:
        return str(self._value)

    def __repr__(self) -> str:
        return f"BigInt('{self._value}')"