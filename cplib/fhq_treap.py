"""An implicit-key treap supporting range reversal."""

from __future__ import annotations

import random
from collections.abc import Iterable, Iterator
from typing import Any

_rng = random.Random()


class _Node:
    __slots__ = ("value", "priority", "size", "left", "right", "flipped")

    def __init__(self, value: Any) -> None:
        self.value = value
        self.priority = _rng.getrandbits(64)
        self.size = 1
        self.left: _Node | None = None
        self.right: _Node | None = None
        self.flipped = False


def _size(node: _Node | None) -> int:
    return node.size if node is not None else 0


def _update(node: _Node) -> None:
    node.size = 1 + _size(node.left) + _size(node.right)


def _push(node: _Node) -> None:
    if node.flipped:
        node.flipped = False
        node.left, node.right = node.right, node.left
        if node.left is not None:
            node.left.flipped ^= True
        if node.right is not None:
            node.right.flipped ^= True


def _split(node: _Node | None, k: int) -> tuple[_Node | None, _Node | None]:
    """Split off the first ``k`` elements."""
    if node is None:
        return None, None
    _push(node)
    if k <= _size(node.left):
        left, right = _split(node.left, k)
        node.left = right
        _update(node)
        return left, node
    left, right = _split(node.right, k - _size(node.left) - 1)
    node.right = left
    _update(node)
    return node, right


def _merge(a: _Node | None, b: _Node | None) -> _Node | None:
    if a is None:
        return b
    if b is None:
        return a
    if a.priority > b.priority:
        _push(a)
        a.right = _merge(a.right, b)
        _update(a)
        return a
    _push(b)
    b.left = _merge(a, b.left)
    _update(b)
    return b


class ImplicitTreap:
    """A sequence that reverses any contiguous range in expected logarithmic time."""

    __slots__ = ("_root",)

    def __init__(self, values: Iterable[Any] = ()) -> None:
        stack: list[_Node] = []
        for value in values:
            node = _Node(value)
            last = None
            while stack and stack[-1].priority < node.priority:
                last = stack.pop()
            node.left = last
            if stack:
                stack[-1].right = node
            stack.append(node)
        self._root = stack[0] if stack else None
        order: list[_Node] = []
        pending = [self._root] if self._root is not None else []
        while pending:
            node = pending.pop()
            order.append(node)
            pending.extend(c for c in (node.left, node.right) if c is not None)
        for node in reversed(order):
            _update(node)

    def __len__(self) -> int:
        return _size(self._root)

    def reverse(self, l: int, r: int) -> None:
        """Reverse the elements at positions ``[l, r)``."""
        if not 0 <= l <= r <= len(self):
            raise IndexError("reversal range out of bounds")
        if l == r:
            return
        head, rest = _split(self._root, l)
        mid, tail = _split(rest, r - l)
        mid.flipped ^= True
        self._root = _merge(_merge(head, mid), tail)

    def __iter__(self) -> Iterator[Any]:
        stack: list[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                _push(node)
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.value
            node = node.right

    def to_list(self) -> list[Any]:
        """The current sequence."""
        return list(self)

    def __repr__(self) -> str:
        return f"ImplicitTreap({self.to_list()!r})"