import random
from functools import reduce
from math import gcd

import pytest

from cplib.sparse_table import SparseTable


@pytest.fixture
def data():
    rnd = random.Random(4)
    return [rnd.randrange(-500, 500) for _ in range(45)]


@pytest.mark.parametrize("op", [min, max])
def test_all_ranges(data, op):
    table = SparseTable(data, op)
    for l in range(len(data)):
        for r in range(l + 1, len(data) + 1):
            assert table.query(l, r) == op(data[l:r])


def test_gcd(data):
    values = [abs(v) + 1 for v in data]
    table = SparseTable(values, gcd)
    for l in range(0, len(values), 3):
        for r in range(l + 1, len(values) + 1, 4):
            assert table.query(l, r) == reduce(gcd, values[l:r])


def test_single_element():
    table = SparseTable([42], max)
    assert table.query(0, 1) == 42
    assert len(table) == 1


def test_empty_range_raises(data):
    with pytest.raises(ValueError):
        SparseTable(data, min).query(3, 3)


@pytest.mark.parametrize("l, r", [(-1, 2), (0, 46)])
def test_out_of_bounds(data, l, r):
    with pytest.raises(IndexError):
        SparseTable(data, min).query(l, r)