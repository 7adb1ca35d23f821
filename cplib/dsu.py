"""Disjoint-set unions: plain with component sizes, and weighted with potentials."""

from __future__ import annotations


def _group(n: int, leaders: list[int]) -> list[list[int]]:
    buckets: list[list[int]] = [[] for _ in range(n)]
    for i, leader in enumerate(leaders):
        buckets[leader].append(i)
    return [b for b in buckets if b]


class DSU:
    """Union by depth, no path compression."""

    __slots__ = ("_n", "_parent", "_size", "_dep")

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("n must be non-negative")
        self._n = n
        self._parent = list(range(n))
        self._size = [1] * n
        self._dep = [1] * n

    def __len__(self) -> int:
        return self._n

    def find(self, a: int) -> int:
        """Return the representative of ``a``'s set."""
        if not 0 <= a < self._n:
            raise IndexError("element out of range")
        d = 1
        while self._parent[a] != a:
            a = self._parent[a]
            d += 1
            self._dep[a] = max(self._dep[a], d)
        return a

    def merge(self, a: int, b: int) -> bool:
        """Join the sets of ``a`` and ``b``; ``False`` if they were already joined."""
        p1, p2 = self.find(a), self.find(b)
        if p1 == p2:
            return False
        if self._dep[p1] < self._dep[p2]:
            self._size[p2] += self._size[p1]
            self._parent[p1] = p2
        else:
            if self._dep[p1] == self._dep[p2]:
                self._dep[p1] += 1
            self._size[p1] += self._size[p2]
            self._parent[p2] = p1
        return True

    def size(self, a: int) -> int:
        """Size of the set holding ``a``."""
        return self._size[self.find(a)]

    def same(self, a: int, b: int) -> bool:
        return self.find(a) == self.find(b)

    def groups(self) -> list[list[int]]:
        """Members of every set, sets ordered by representative."""
        return _group(self._n, [self.find(i) for i in range(self._n)])


class WeightedDSU:
    """Union-find keeping the potential difference between joined elements."""

    __slots__ = ("_n", "_parent", "_dist")

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("n must be non-negative")
        self._n = n
        self._parent = list(range(n))
        self._dist = [0] * n

    def __len__(self) -> int:
        return self._n

    def find(self, a: int) -> int:
        """Return the representative of ``a``, compressing the path."""
        if not 0 <= a < self._n:
            raise IndexError("element out of range")
        parent, dist = self._parent, self._dist
        path = []
        root = a
        while parent[root] != root:
            path.append(root)
            root = parent[root]
        for node in reversed(path):
            dist[node] += dist[parent[node]]
            parent[node] = root
        return root

    def merge(self, a: int, b: int, v: int) -> bool:
        """Join the sets so that ``dist(a, b) == v``; ``False`` if already joined."""
        p1, p2 = self.find(a), self.find(b)
        if p1 == p2:
            return False
        self._parent[p1] = p2
        self._dist[p1] = self._dist[b] - self._dist[a] + v
        return True

    def same(self, a: int, b: int) -> bool:
        return self.find(a) == self.find(b)

    def dist(self, a: int, b: int) -> int:
        """Potential of ``a`` minus potential of ``b``."""
        if not self.same(a, b):
            raise ValueError("elements are in different sets")
        return self._dist[a] - self._dist[b]

    def groups(self) -> list[list[int]]:
        """Members of every set, sets ordered by representative."""
        return _group(self._n, [self.find(i) for i in range(self._n)])