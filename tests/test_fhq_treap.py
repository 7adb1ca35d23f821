import random

import pytest

from cplib.fhq_treap import ImplicitTreap


def test_construction_preserves_order():
    values = list(range(20, 0, -3))
    t = ImplicitTreap(values)
    assert t.to_list() == values
    assert len(t) == len(values)


def test_empty():
    t = ImplicitTreap()
    assert t.to_list() == []
    assert len(t) == 0


def test_single_reverse():
    values = list(range(10))
    t = ImplicitTreap(values)
    t.reverse(2, 7)
    assert t.to_list() == values[:2] + values[2:7][::-1] + values[7:]


def test_whole_reverse_twice_is_identity():
    values = list("abcdefgh")
    t = ImplicitTreap(values)
    t.reverse(0, len(values))
    assert t.to_list() == values[::-1]
    t.reverse(0, len(values))
    assert t.to_list() == values


def test_empty_range_is_noop():
    t = ImplicitTreap([1, 2, 3])
    t.reverse(1, 1)
    assert t.to_list() == [1, 2, 3]


@pytest.mark.parametrize("l, r", [(-1, 2), (2, 1), (0, 4)])
def test_invalid_range(l, r):
    t = ImplicitTreap([1, 2, 3])
    with pytest.raises(IndexError):
        t.reverse(l, r)


def test_random_reversals_against_list():
    rnd = random.Random(7)
    model = list(range(200))
    t = ImplicitTreap(model)
    for _ in range(500):
        l = rnd.randrange(len(model) + 1)
        r = rnd.randrange(l, len(model) + 1)
        t.reverse(l, r)
        model[l:r] = model[l:r][::-1]
    assert t.to_list() == model
    assert len(t) == len(model)