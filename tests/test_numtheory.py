import math

import pytest

from cplib.numtheory import Barrett, crt, inv_gcd, inv_mod, qpow, safe_sqrt


@pytest.mark.parametrize(
    "a,b", [(3, 7), (12, 18), (-5, 13), (0, 9), (100, 1), (998244353, 1000000007), (35, 10)]
)
def test_inv_gcd_invariants(a, b):
    g, x = inv_gcd(a, b)
    assert g == math.gcd(a, b)
    assert (a * x - g) % b == 0
    assert 0 <= x < b // g or (x == 0 and b // g == 1)


def test_inv_gcd_rejects_bad_modulus():
    with pytest.raises(ValueError):
        inv_gcd(3, 0)


@pytest.mark.parametrize("a,mod", [(3, 7), (2, 998244353), (-4, 9), (123456, 1000000007)])
def test_inv_mod(a, mod):
    x = inv_mod(a, mod)
    assert a * x % mod == 1
    assert 0 <= x < mod


def test_inv_mod_not_coprime():
    with pytest.raises(ValueError):
        inv_mod(6, 9)


def test_crt_empty():
    assert crt([], []) == (0, 1)


@pytest.mark.parametrize("r,m", [([1, 2], [2, 4]), ([0, 1], [4, 6])])
def test_crt_no_solution(r, m):
    assert crt(r, m) == (0, 0)


def test_crt_errors():
    with pytest.raises(ValueError):
        crt([1, 2], [3])
    with pytest.raises(ValueError):
        crt([1], [0])


@pytest.mark.parametrize("a,n,mod", [(2, 10, 1000), (3, 10**18, 998244353), (7, 1, 13), (10**9, 5, 97)])
def test_qpow_matches_builtin(a, n, mod):
    assert qpow(a, n, mod) == pow(a, n, mod)


def test_qpow_zero_exponent():
    assert qpow(5, 0, 1) == 1
    assert qpow(5, -3, 7) == 1


@pytest.mark.parametrize("n", [0, 1, 2, 3, 15, 16, 17, 10**12, 10**18 - 1, 4 * 10**18 - 1])
def test_safe_sqrt_floor(n):
    s = safe_sqrt(n)
    assert s * s <= n < (s + 1) * (s + 1)


def test_safe_sqrt_bounds():
    assert safe_sqrt(-5) == 0
    assert safe_sqrt(10**19) == 1999999999


@pytest.mark.parametrize("m", [1, 2, 7, 998244353, 1000000007, 2**31 - 1, 2**32 - 1])
@pytest.mark.parametrize("z", [0, 1, 12345, 10**18, 2**64 - 1, 2**63 + 99])
def test_barrett_matches_mod(m, z):
    b = Barrett(m)
    assert b.reduce(z) == z % m
    assert z % b == z % m


def test_barrett_errors():
    with pytest.raises(ValueError):
        Barrett(0)
    with pytest.raises(ValueError):
        Barrett(7).reduce(-1)
    with pytest.raises(ValueError):
        Barrett(7).reduce(2**64)