"""Tarjan components, bridges, Dijkstra shortest paths and topological sort."""

from __future__ import annotations

import heapq
from collections import deque
from collections.abc import Sequence

INF = 10**18


def tarjan_scc(graph: Sequence[Sequence[int]], directed: bool = False) -> list[list[int]]:
    """Tarjan's components in the order they are completed.

    For a directed graph these are the strongly connected components, in reverse
    topological order. For an undirected graph each edge (by its endpoints) is
    walked once, giving the 2-edge-connected components.
    Each component lists its vertices in the order they leave the stack.
    """
    n = len(graph)
    low = [-1] * n
    ids = [0] * n
    on_stack = [False] * n
    stack: list[int] = []
    used: set[tuple[int, int]] = set()
    components: list[list[int]] = []
    for root in range(n):
        if low[root] != -1:
            continue
        low[root] = ids[root] = 0
        counter = 1
        stack.append(root)
        on_stack[root] = True
        work = [(root, iter(graph[root]))]
        while work:
            c, neighbours = work[-1]
            for i in neighbours:
                if not directed:
                    key = (i, c) if i < c else (c, i)
                    if key in used:
                        continue
                    used.add(key)
                if low[i] == -1:
                    low[i] = ids[i] = counter
                    counter += 1
                    stack.append(i)
                    on_stack[i] = True
                    work.append((i, iter(graph[i])))
                    break
                if on_stack[i]:
                    low[c] = min(low[c], low[i])
            else:
                work.pop()
                if low[c] == ids[c]:
                    component = []
                    while True:
                        u = stack.pop()
                        on_stack[u] = False
                        component.append(u)
                        if u == c:
                            break
                    components.append(component)
                if work and on_stack[c]:
                    parent = work[-1][0]
                    low[parent] = min(low[parent], low[c])
    return components


class _Frame:
    __slots__ = ("u", "fa", "neighbours", "skipped_parent")

    def __init__(self, u: int, fa: int, neighbours) -> None:
        self.u = u
        self.fa = fa
        self.neighbours = neighbours
        self.skipped_parent = False


def bridges(graph: Sequence[Sequence[int]]) -> list[tuple[int, int]]:
    """Bridges of the component holding vertex 0, as ``(min, max)`` pairs.

    A repeated edge to the parent counts as a second, parallel edge.
    """
    n = len(graph)
    if n == 0:
        return []
    dfn = [0] * n
    low = [0] * n
    dfn[0] = low[0] = counter = 1
    result: list[tuple[int, int]] = []
    work = [_Frame(0, 0, iter(graph[0]))]
    while work:
        frame = work[-1]
        u = frame.u
        for v in frame.neighbours:
            if not dfn[v]:
                counter += 1
                dfn[v] = low[v] = counter
                work.append(_Frame(v, u, iter(graph[v])))
                break
            if v != frame.fa or frame.skipped_parent:
                low[u] = min(low[u], dfn[v])
            else:
                frame.skipped_parent = True
        else:
            work.pop()
            if work:
                p = work[-1].u
                low[p] = min(low[p], low[u])
                if low[u] > dfn[p]:
                    result.append((min(p, u), max(p, u)))
    return result


def dijkstra(
    graph: Sequence[Sequence[tuple[int, int]]], start: int
) -> tuple[list[int], list[int]]:
    """Shortest paths from ``start`` over non-negative weights.

    ``graph[u]`` holds ``(v, weight)`` pairs. Returns ``(parent, dist)``;
    unreachable vertices have parent -1 and distance :data:`INF`.
    """
    n = len(graph)
    if not 0 <= start < n:
        raise IndexError("start vertex out of range")
    dist = [INF] * n
    parent = [-1] * n
    dist[start] = 0
    heap: list[tuple[int, int]] = []
    u = start
    while True:
        for v, w in graph[u]:
            t = dist[u] + w
            if dist[v] > t:
                dist[v] = t
                parent[v] = u
                heapq.heappush(heap, (t, v))
        while heap and heap[0][0] != dist[heap[0][1]]:
            heapq.heappop(heap)
        if not heap:
            break
        u = heapq.heappop(heap)[1]
    return parent, dist


def topo_sort(graph: Sequence[Sequence[int]]) -> tuple[list[int], bool]:
    """Kahn's algorithm: the order found and whether it covers every vertex."""
    n = len(graph)
    indegree = [0] * n
    for targets in graph:
        for j in targets:
            indegree[j] += 1
    queue = deque(i for i in range(n) if indegree[i] == 0)
    order: list[int] = []
    while queue:
        p = queue.popleft()
        order.append(p)
        for j in graph[p]:
            indegree[j] -= 1
            if indegree[j] == 0:
                queue.append(j)
    return order, len(order) == n