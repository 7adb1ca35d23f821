import pytest

from cplib.hashing import (
    DoubleHash,
    SegmentHash,
    SingleHash,
    poor_hash,
    poor_hash_mod,
    strhash,
)

LETTERS = list(range(11, 11 + 26 * 7, 7))


def test_double_hash_equal_substrings():
    h = DoubleHash("abcabc")
    assert len(h) == 6
    assert h.value(0, 3) == h.value(3, 6)
    assert h.value(0, 6) == h.value()
    assert h.value(0, 2) != h.value(1, 3)


def test_double_hash_extend_matches_construction():
    h = DoubleHash("abc")
    h.extend("abc")
    assert h.value() == DoubleHash("abcabc").value()
    assert h.value(1, 4) == DoubleHash("bca").value()


def test_double_hash_empty_and_single():
    assert DoubleHash().value() == (0, 0)
    assert DoubleHash("a", base=131).value() == (ord("a"), ord("a"))


def test_double_hash_errors():
    h = DoubleHash("abc")
    with pytest.raises(IndexError):
        h.value(2, 1)
    with pytest.raises(IndexError):
        h.value(0, 10)
    with pytest.raises(TypeError):
        h.value(0)


def test_single_hash_substrings_match_fresh_hashes():
    text = "mississippi"
    h = SingleHash(text, base=1009)
    for l in range(len(text)):
        for r in range(l, len(text) + 1):
            assert h.value(l, r) == SingleHash(text[l:r], base=1009).value()


def test_single_hash_extend():
    h = SingleHash("ab")
    h.extend("ra")
    assert len(h) == 4
    assert h.value() == SingleHash("abra").value()
    with pytest.raises(IndexError):
        h.value(-1, 2)


def test_segment_hash_ranges_match_fresh_hashes():
    text = "abracadabra"
    seg = SegmentHash(text, base=131, letter_values=LETTERS)
    for l in range(len(text)):
        for r in range(l + 1, len(text) + 1):
            fresh = SegmentHash(text[l:r], base=131, letter_values=LETTERS)
            assert seg.query(l, r) == fresh.query(0, r - l)
    assert seg.query(3, 3) == 0


def test_segment_hash_set():
    seg = SegmentHash("hello", base=257, letter_values=LETTERS)
    seg.set(0, "j")
    fresh = SegmentHash("jello", base=257, letter_values=LETTERS)
    assert seg.query(0, 5) == fresh.query(0, 5)
    assert seg.query(1, 5) == SegmentHash("ello", base=257, letter_values=LETTERS).query(0, 4)


def test_segment_hash_from_size():
    seg = SegmentHash(3, base=257, letter_values=LETTERS)
    for i, c in enumerate("abc"):
        seg.set(i, c)
    assert seg.query(0, 3) == SegmentHash("abc", base=257, letter_values=LETTERS).query(0, 3)


def test_segment_hash_errors():
    with pytest.raises(ValueError):
        SegmentHash("aB", letter_values=LETTERS)
    with pytest.raises(ValueError):
        SegmentHash("ab", letter_values=[1, 2])
    seg = SegmentHash("ab")
    with pytest.raises(IndexError):
        seg.set(2, "a")
    with pytest.raises(IndexError):
        seg.query(1, 3)


def test_poor_hashes():
    assert poor_hash("") == 0
    assert poor_hash("a") == ord("a")
    assert poor_hash("ab") % 998244353 == poor_hash_mod("ab")
    assert 0 <= poor_hash("z" * 100) < 2**64
    assert 0 <= poor_hash_mod("z" * 100) < 998244353


def test_strhash_is_deterministic():
    first, second = strhash("hello")
    assert strhash("hello") == (first, second)
    assert 0 <= second < 2**64
    assert strhash(b"hello") == (first, second)