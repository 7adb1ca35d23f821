import random

import pytest

from cplib.fenwick import FenwickTree


def test_starts_at_zero():
    f = FenwickTree(5)
    assert f.sum(0, 5) == 0
    assert len(f) == 5


def test_random_adds_against_list():
    rnd = random.Random(9)
    n = 37
    f = FenwickTree(n)
    model = [0] * n
    for _ in range(300):
        p = rnd.randrange(n)
        x = rnd.randrange(-1000, 1000)
        f.add(p, x)
        model[p] += x
    for l in range(n + 1):
        for r in range(l, n + 1):
            assert f.sum(l, r) == sum(model[l:r])


def test_empty_range_is_zero():
    f = FenwickTree(3)
    f.add(1, 7)
    assert f.sum(1, 1) == 0
    assert f.sum(1, 2) == 7


@pytest.mark.parametrize("p", [-1, 4])
def test_add_out_of_range(p):
    with pytest.raises(IndexError):
        FenwickTree(4).add(p, 1)


@pytest.mark.parametrize("l, r", [(-1, 2), (3, 2), (0, 5)])
def test_sum_invalid_range(l, r):
    with pytest.raises(IndexError):
        FenwickTree(4).sum(l, r)