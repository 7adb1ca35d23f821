import operator
import random

import pytest

from cplib.segtree import (
    ADD,
    ADD_LAZY,
    INT_MAX,
    MAX_INT,
    MIN_COUNT,
    MIN_INT,
    LazySegTree,
    Monoid,
    SegTree,
    add_mod_monoid,
    add_mul_lazy,
)


def test_sum_queries_match_slices():
    rng = random.Random(1)
    values = [rng.randint(-50, 50) for _ in range(37)]
    tree = SegTree(ADD, values)
    for l in range(38):
        for r in range(l, 38):
            assert tree.query(l, r) == sum(values[l:r])


def test_set_then_min_queries():
    rng = random.Random(2)
    values = [rng.randint(0, 100) for _ in range(20)]
    tree = SegTree(MIN_INT, values)
    for _ in range(200):
        i = rng.randrange(20)
        values[i] = rng.randint(0, 100)
        tree.set(i, values[i])
        l = rng.randrange(20)
        r = rng.randint(l + 1, 20)
        assert tree.query(l, r) == min(values[l:r])
        assert tree[i] == values[i]


def test_empty_range_gives_identity():
    tree = SegTree(MAX_INT, [3, 1])
    assert tree.query(1, 1) == MAX_INT.e


def test_sized_constructor_starts_at_identity():
    tree = SegTree(MIN_INT, 5)
    assert tree.query(0, 5) == INT_MAX
    tree.set(2, 7)
    assert tree.query(0, 5) == 7
    assert len(tree) == 5


def test_min_count():
    rng = random.Random(3)
    values = [rng.randint(0, 3) for _ in range(25)]
    tree = SegTree(MIN_COUNT, [(v, 1) for v in values])
    for l in range(25):
        for r in range(l + 1, 26):
            part = values[l:r]
            assert tree.query(l, r) == (min(part), part.count(min(part)))


def test_non_commutative_order_kept():
    words = list("abcdefghijk")
    tree = SegTree(Monoid("", operator.add), words)
    for l in range(len(words) + 1):
        for r in range(l, len(words) + 1):
            assert tree.query(l, r) == "".join(words[l:r])


def test_out_of_range():
    tree = SegTree(ADD, [1, 2, 3])
    with pytest.raises(IndexError):
        tree.query(0, 4)
    with pytest.raises(IndexError):
        tree.set(3, 1)


def test_lazy_add_matches_list():
    rng = random.Random(4)
    values = [rng.randint(-10, 10) for _ in range(13)]
    tree = LazySegTree(ADD, ADD_LAZY, values)
    for _ in range(300):
        l = rng.randrange(13)
        r = rng.randint(l, 13)
        if rng.random() < 0.5:
            x = rng.randint(-5, 5)
            tree.apply(l, r, x)
            for i in range(l, r):
                values[i] += x
        else:
            assert tree.query(l, r) == sum(values[l:r])
    assert tree.query(0, 13) == sum(values)


def test_lazy_affine_mod():
    m = 97
    rng = random.Random(5)
    values = [rng.randrange(m) for _ in range(10)]
    tree = LazySegTree(add_mod_monoid(m), add_mul_lazy(m), values)
    for _ in range(300):
        l = rng.randrange(10)
        r = rng.randint(l, 10)
        if rng.random() < 0.5:
            add, mul = rng.randrange(m), rng.randrange(m)
            tree.apply(l, r, (add, mul))
            for i in range(l, r):
                values[i] = (values[i] * mul + add) % m
        else:
            assert tree.query(l, r) == sum(values[l:r]) % m


def test_lazy_out_of_range():
    tree = LazySegTree(ADD, ADD_LAZY, [1, 2, 3])
    assert len(tree) == 3
    with pytest.raises(IndexError):
        tree.apply(0, 4, 1)
    with pytest.raises(IndexError):
        tree.query(-1, 2)


def test_bad_modulus():
    with pytest.raises(ValueError):
        add_mod_monoid(0)
    with pytest.raises(ValueError):
        add_mul_lazy(0)