import random
from bisect import bisect_left

import pytest

from cplib.treap import Treap


def test_insert_keeps_sorted_distinct():
    values = [5, 3, 9, 3, 1, 7, 5]
    t = Treap(values)
    assert t.to_list() == sorted(set(values))
    assert len(t) == len(set(values))


def test_count_and_contains():
    t = Treap([2, 4, 6])
    assert t.count(4) == 1
    assert t.count(5) == 0
    assert 6 in t
    assert 1 not in t


def test_erase_present_and_missing():
    t = Treap([1, 2, 3])
    t.erase(2)
    assert t.to_list() == [1, 3]
    t.erase(42)
    assert t.to_list() == [1, 3]
    t.erase(1)
    t.erase(3)
    assert len(t) == 0
    assert t.to_list() == []


def test_at_matches_sorted_order():
    values = random.Random(1).sample(range(1000), 50)
    t = Treap(values)
    expected = sorted(values)
    assert [t.at(i) for i in range(len(t))] == expected
    assert t[0] == expected[0]


@pytest.mark.parametrize("index", [-1, 3])
def test_at_out_of_range(index):
    t = Treap([1, 2, 3])
    with pytest.raises(IndexError):
        t.at(index)


def test_lt_gt():
    values = [10, 20, 30, 40]
    t = Treap(values)
    assert t.lt(25) == 20
    assert t.lt(30) == 20
    assert t.gt(30) == 40
    assert t.gt(5) == 10
    with pytest.raises(ValueError):
        t.lt(10)
    with pytest.raises(ValueError):
        t.gt(40)


def test_lt_on_empty_raises():
    with pytest.raises(ValueError):
        Treap().lt(1)


def test_rank():
    values = random.Random(2).sample(range(-500, 500), 80)
    t = Treap(values)
    ordered = sorted(values)
    for v in range(-510, 510, 7):
        assert t.rank(v) == bisect_left(ordered, v) + 1


def test_random_operations_against_set():
    rnd = random.Random(3)
    t = Treap()
    model: set[int] = set()
    for _ in range(2000):
        v = rnd.randrange(200)
        if rnd.random() < 0.6:
            t.insert(v)
            model.add(v)
        else:
            t.erase(v)
            model.discard(v)
    assert t.to_list() == sorted(model)
    assert len(t) == len(model)


def test_clear():
    t = Treap(range(10))
    t.clear()
    assert len(t) == 0
    t.insert(3)
    assert t.to_list() == [3]


def test_string_keys():
    words = ["pear", "apple", "fig", "apple"]
    t = Treap(words)
    assert t.to_list() == sorted(set(words))
    assert t.gt("banana") == "fig"