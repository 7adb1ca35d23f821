"""Maximum flow by Dinic's algorithm, with edge inspection and minimum cut."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass


@dataclass(frozen=True)
class FlowEdge:
    """An original edge with its capacity and current flow."""

    frm: int
    to: int
    cap: int
    flow: int


class _Arc:
    __slots__ = ("to", "rev", "cap")

    def __init__(self, to: int, rev: int, cap: int) -> None:
        self.to = to
        self.rev = rev
        self.cap = cap


class MaxFlow:
    """A flow network on ``n`` vertices."""

    __slots__ = ("_n", "_pos", "_g")

    def __init__(self, n: int = 0) -> None:
        if n < 0:
            raise ValueError("n must be non-negative")
        self._n = n
        self._pos: list[tuple[int, int]] = []
        self._g: list[list[_Arc]] = [[] for _ in range(n)]

    def _check_vertex(self, v: int) -> None:
        if not 0 <= v < self._n:
            raise IndexError("vertex out of range")

    def _check_edge(self, i: int) -> None:
        if not 0 <= i < len(self._pos):
            raise IndexError("edge index out of range")

    def add_edge(self, frm: int, to: int, cap: int) -> int:
        """Add an edge and return its index."""
        self._check_vertex(frm)
        self._check_vertex(to)
        if cap < 0:
            raise ValueError("capacity must be non-negative")
        index = len(self._pos)
        from_id = len(self._g[frm])
        to_id = len(self._g[to])
        if frm == to:
            to_id += 1
        self._pos.append((frm, from_id))
        self._g[frm].append(_Arc(to, to_id, cap))
        self._g[to].append(_Arc(frm, from_id, 0))
        return index

    def get_edge(self, i: int) -> FlowEdge:
        self._check_edge(i)
        frm, k = self._pos[i]
        e = self._g[frm][k]
        re = self._g[e.to][e.rev]
        return FlowEdge(frm, e.to, e.cap + re.cap, re.cap)

    def edges(self) -> list[FlowEdge]:
        return [self.get_edge(i) for i in range(len(self._pos))]

    def change_edge(self, i: int, new_cap: int, new_flow: int) -> None:
        """Reset edge ``i`` to capacity ``new_cap`` carrying ``new_flow``."""
        self._check_edge(i)
        if not 0 <= new_flow <= new_cap:
            raise ValueError("flow must lie in [0, capacity]")
        frm, k = self._pos[i]
        e = self._g[frm][k]
        re = self._g[e.to][e.rev]
        e.cap = new_cap - new_flow
        re.cap = new_flow

    def flow(self, s: int, t: int, flow_limit: int | None = None) -> int:
        """Push as much flow from ``s`` to ``t`` as possible, up to ``flow_limit``."""
        self._check_vertex(s)
        self._check_vertex(t)
        if s == t:
            raise ValueError("source and sink must differ")
        limit = float("inf") if flow_limit is None else flow_limit
        n, g = self._n, self._g
        level = [-1] * n
        it = [0] * n

        def bfs() -> None:
            level[:] = [-1] * n
            level[s] = 0
            queue = deque([s])
            while queue:
                v = queue.popleft()
                for e in g[v]:
                    if e.cap == 0 or level[e.to] >= 0:
                        continue
                    level[e.to] = level[v] + 1
                    if e.to == t:
                        return
                    queue.append(e.to)

        def dfs(v: int, up):
            if v == s:
                return up
            res = 0
            level_v = level[v]
            arcs = g[v]
            while it[v] < len(arcs):
                e = arcs[it[v]]
                back = g[e.to][e.rev]
                if level_v > level[e.to] and back.cap != 0:
                    d = dfs(e.to, min(up - res, back.cap))
                    if d > 0:
                        e.cap += d
                        back.cap -= d
                        res += d
                        if res == up:
                            return res
                it[v] += 1
            level[v] = n
            return res

        total = 0
        while total < limit:
            bfs()
            if level[t] == -1:
                break
            it[:] = [0] * n
            f = dfs(t, limit - total)
            if not f:
                break
            total += f
        return total

    def min_cut(self, s: int) -> list[bool]:
        """Vertices reachable from ``s`` in the residual network."""
        self._check_vertex(s)
        visited = [False] * self._n
        queue = deque([s])
        while queue:
            p = queue.popleft()
            visited[p] = True
            for e in self._g[p]:
                if e.cap and not visited[e.to]:
                    visited[e.to] = True
                    queue.append(e.to)
        return visited