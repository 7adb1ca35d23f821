"""Strongly connected components and 2-SAT."""

from __future__ import annotations


class SCCGraph:
    """A directed graph whose strongly connected components are numbered topologically."""

    __slots__ = ("_n", "_adj")

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("n must be non-negative")
        self._n = n
        self._adj: list[list[int]] = [[] for _ in range(n)]

    def __len__(self) -> int:
        return self._n

    def add_edge(self, frm: int, to: int) -> None:
        if not (0 <= frm < self._n and 0 <= to < self._n):
            raise IndexError("vertex out of range")
        self._adj[frm].append(to)

    def scc_ids(self) -> tuple[int, list[int]]:
        """Return ``(count, ids)``; every edge goes from a lower or equal id to a higher one."""
        n, adj = self._n, self._adj
        now = 0
        groups = 0
        visited: list[int] = []
        low = [0] * n
        order = [-1] * n
        ids = [0] * n
        for root in range(n):
            if order[root] != -1:
                continue
            order[root] = low[root] = now
            now += 1
            visited.append(root)
            work = [(root, iter(adj[root]))]
            while work:
                v, targets = work[-1]
                for to in targets:
                    if order[to] == -1:
                        order[to] = low[to] = now
                        now += 1
                        visited.append(to)
                        work.append((to, iter(adj[to])))
                        break
                    low[v] = min(low[v], order[to])
                else:
                    work.pop()
                    if low[v] == order[v]:
                        while True:
                            u = visited.pop()
                            order[u] = n
                            ids[u] = groups
                            if u == v:
                                break
                        groups += 1
                    if work:
                        parent = work[-1][0]
                        low[parent] = min(low[parent], low[v])
        return groups, [groups - 1 - x for x in ids]

    def scc(self) -> list[list[int]]:
        """Components in topological order, each listing its vertices ascending."""
        count, ids = self.scc_ids()
        groups: list[list[int]] = [[] for _ in range(count)]
        for v, g in enumerate(ids):
            groups[g].append(v)
        return groups


class TwoSat:
    """Satisfiability of conjunctions of two-literal clauses."""

    __slots__ = ("_n", "_answer", "_scc")

    def __init__(self, n: int = 0) -> None:
        if n < 0:
            raise ValueError("n must be non-negative")
        self._n = n
        self._answer = [False] * n
        self._scc = SCCGraph(2 * n)

    def add_clause(self, i: int, f: bool, j: int, g: bool) -> None:
        """Require ``(x_i == f) or (x_j == g)``."""
        if not (0 <= i < self._n and 0 <= j < self._n):
            raise IndexError("variable out of range")
        self._scc.add_edge(2 * i + (0 if f else 1), 2 * j + (1 if g else 0))
        self._scc.add_edge(2 * j + (0 if g else 1), 2 * i + (1 if f else 0))

    def satisfiable(self) -> bool:
        """Decide satisfiability, recording a model when there is one."""
        _, ids = self._scc.scc_ids()
        for i in range(self._n):
            if ids[2 * i] == ids[2 * i + 1]:
                return False
            self._answer[i] = ids[2 * i] < ids[2 * i + 1]
        return True

    def answer(self) -> list[bool]:
        """The model found by the last successful :meth:`satisfiable` call."""
        return list(self._answer)