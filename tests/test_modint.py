import pytest

from cplib.modint import MOD, ModInt


def test_negative_value_wraps():
    assert ModInt(-1).value == MOD - 1
    assert int(ModInt(-3)) == MOD - 3


def test_large_value_reduced_and_equal_to_int():
    assert ModInt(MOD + 7) == 7
    assert hash(ModInt(MOD + 7)) == hash(ModInt(7))


@pytest.mark.parametrize("a", [1, 2, 3, 12345, MOD - 1, 10**12])
def test_inverse(a):
    assert (ModInt(a) * ModInt(a).inv()).value == 1


@pytest.mark.parametrize("a,b", [(5, 3), (MOD - 2, 17), (123456789, 987654321)])
def test_division_round_trip(a, b):
    assert (ModInt(a) / ModInt(b)) * b == ModInt(a)


@pytest.mark.parametrize("a,b", [(5, 3), (0, MOD - 1), (MOD - 1, MOD - 1)])
def test_add_sub_round_trip(a, b):
    x, y = ModInt(a), ModInt(b)
    assert x + y - y == x
    assert -x + x == ModInt(0)
    assert (x + y).value == (a + b) % MOD
    assert (x - y).value == (a - b) % MOD


@pytest.mark.parametrize("a,n", [(3, 0), (3, 100), (MOD - 1, 12345), (2, MOD - 1)])
def test_pow_matches_builtin(a, n):
    assert ModInt(a).pow(n).value == pow(a, n, MOD)
    assert (ModInt(a) ** n).value == pow(a, n, MOD)


def test_pow_negative_exponent_raises():
    with pytest.raises(ValueError):
        ModInt(2).pow(-1)


def test_mixed_int_operations():
    x = ModInt(MOD - 1)
    assert x + 1 == ModInt(MOD)
    assert 1 + x == ModInt(MOD)
    assert (1 / ModInt(2)) * 2 == 1
    assert (10 - ModInt(3)).value == 7
    assert (ModInt(6) * 4).value == 24


def test_zero_inverse_is_zero():
    assert not ModInt(0).inv()


def test_unsupported_operand_raises():
    with pytest.raises(TypeError):
        ModInt(3) + "x"


def test_str_and_repr():
    assert str(ModInt(-1)) == str(MOD - 1)
    assert repr(ModInt(5)) == "ModInt(5)"