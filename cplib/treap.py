"""An ordered set backed by a randomised treap with subtree sizes."""

from __future__ import annotations

import random
from collections.abc import Iterable, Iterator
from typing import Any

_rng = random.Random()


class _Node:
    __slots__ = ("key", "priority", "size", "left", "right")

    def __init__(self, key: Any) -> None:
        self.key = key
        self.priority = _rng.getrandbits(64)
        self.size = 1
        self.left: _Node | None = None
        self.right: _Node | None = None


def _size(node: _Node | None) -> int:
    return node.size if node is not None else 0


def _update(node: _Node) -> None:
    node.size = 1 + _size(node.left) + _size(node.right)


def _split(node: _Node | None, key: Any) -> tuple[_Node | None, _Node | None]:
    """Split into keys ``< key`` and keys ``>= key``."""
    if node is None:
        return None, None
    if node.key < key:
        left, right = _split(node.right, key)
        node.right = left
        _update(node)
        return node, right
    left, right = _split(node.left, key)
    node.left = right
    _update(node)
    return left, node


def _merge(a: _Node | None, b: _Node | None) -> _Node | None:
    if a is None:
        return b
    if b is None:
        return a
    if a.priority > b.priority:
        a.right = _merge(a.right, b)
        _update(a)
        return a
    b.left = _merge(a, b.left)
    _update(b)
    return b


def _remove(node: _Node | None, key: Any) -> _Node | None:
    if node is None:
        return None
    if node.key == key:
        return _merge(node.left, node.right)
    if key < node.key:
        node.left = _remove(node.left, key)
    else:
        node.right = _remove(node.right, key)
    _update(node)
    return node


class Treap:
    """A sorted set of distinct keys supporting order-statistic queries."""

    __slots__ = ("_root",)

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._root: _Node | None = None
        for item in items:
            self.insert(item)

    def __len__(self) -> int:
        return _size(self._root)

    def __iter__(self) -> Iterator[Any]:
        stack: list[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.key
            node = node.right

    def __contains__(self, v: Any) -> bool:
        node = self._root
        while node is not None:
            if node.key == v:
                return True
            node = node.right if node.key < v else node.left
        return False

    def count(self, v: Any) -> int:
        """Return 1 if ``v`` is present, else 0."""
        return int(v in self)

    def insert(self, v: Any) -> None:
        """Add ``v``; an existing key is left alone."""
        if v in self:
            return
        left, right = _split(self._root, v)
        self._root = _merge(_merge(left, _Node(v)), right)

    def erase(self, v: Any) -> None:
        """Remove ``v`` if present."""
        if v in self:
            self._root = _remove(self._root, v)

    def at(self, i: int) -> Any:
        """Return the ``i``-th smallest key (0-based)."""
        if not 0 <= i < len(self):
            raise IndexError("treap index out of range")
        node = self._root
        while node is not None:
            left = _size(node.left)
            if i == left:
                return node.key
            if i < left:
                node = node.left
            else:
                i -= left + 1
                node = node.right
        raise AssertionError("unreachable")

    __getitem__ = at

    def lt(self, v: Any) -> Any:
        """Return the largest key strictly less than ``v``."""
        node = self._root
        found = False
        best = None
        while node is not None:
            if node.key < v:
                best, found = node.key, True
                node = node.right
            else:
                node = node.left
        if not found:
            raise ValueError(f"no key less than {v!r}")
        return best

    def gt(self, v: Any) -> Any:
        """Return the smallest key strictly greater than ``v``."""
        node = self._root
        found = False
        best = None
        while node is not None:
            if v < node.key:
                best, found = node.key, True
                node = node.left
            else:
                node = node.right
        if not found:
            raise ValueError(f"no key greater than {v!r}")
        return best

    def rank(self, v: Any) -> int:
        """Number of keys less than ``v``, plus one."""
        count = 0
        node = self._root
        while node is not None:
            if node.key < v:
                count += _size(node.left) + 1
                node = node.right
            else:
                node = node.left
        return count + 1

    def to_list(self) -> list[Any]:
        """All keys in increasing order."""
        return list(self)

    def clear(self) -> None:
        self._root = None

    def __repr__(self) -> str:
        return f"Treap({self.to_list()!r})"