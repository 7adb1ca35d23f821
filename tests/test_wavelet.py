import random

import pytest

from cplib.wavelet import WaveletTree


@pytest.fixture
def data():
    rnd = random.Random(21)
    return [rnd.randrange(-20, 30) for _ in range(40)]


def test_kth_matches_sorted(data):
    wt = WaveletTree(data)
    for l in range(0, len(data), 3):
        for r in range(l + 1, len(data) + 1, 5):
            ordered = sorted(data[l:r])
            for k in range(1, r - l + 1):
                assert wt.kth(l, r, k) == ordered[k - 1]


def test_count_le_and_count(data):
    wt = WaveletTree(data, -25, 35)
    for l in range(0, len(data), 4):
        for r in range(l, len(data) + 1, 3):
            window = data[l:r]
            for k in range(-26, 37, 3):
                assert wt.count_le(l, r, k) == sum(1 for v in window if v <= k)
                assert wt.count(l, r, k) == window.count(k)


def test_input_not_mutated(data):
    copy = list(data)
    WaveletTree(data)
    assert data == copy


def test_empty_range_returns_zero(data):
    wt = WaveletTree(data)
    assert wt.kth(5, 5, 1) == 0
    assert wt.count_le(5, 3, 100) == 0
    assert wt.count(7, 7, data[7]) == 0


def test_constant_sequence():
    wt = WaveletTree([4, 4, 4], 4, 4)
    assert wt.kth(0, 3, 2) == 4
    assert wt.count(0, 3, 4) == 3
    assert wt.count_le(0, 3, 3) == 0


def test_invalid_k(data):
    wt = WaveletTree(data)
    with pytest.raises(ValueError):
        wt.kth(0, 3, 4)
    with pytest.raises(ValueError):
        wt.kth(0, 3, 0)


def test_out_of_bounds(data):
    wt = WaveletTree(data)
    with pytest.raises(IndexError):
        wt.count(0, len(data) + 1, 0)


def test_bad_bounds():
    with pytest.raises(ValueError):
        WaveletTree([1, 2], 5, 3)
    with pytest.raises(ValueError):
        WaveletTree([1, 9], 0, 5)