import random

import pytest

from cplib.maxflow import FlowEdge, MaxFlow


def _classic():
    g = MaxFlow(4)
    for u, v, c in [(0, 1, 2), (0, 2, 1), (1, 2, 1), (1, 3, 1), (2, 3, 2)]:
        g.add_edge(u, v, c)
    return g


def _check_valid_flow(g, n, s, t, value):
    net = [0] * n
    for e in g.edges():
        assert 0 <= e.flow <= e.cap
        net[e.frm] -= e.flow
        net[e.to] += e.flow
    for v in range(n):
        if v not in (s, t):
            assert net[v] == 0
    assert net[t] == value
    assert net[s] == -value


def _cut_capacity(g, s):
    side = g.min_cut(s)
    return sum(e.cap for e in g.edges() if side[e.frm] and not side[e.to])


def test_classic_network():
    g = _classic()
    value = g.flow(0, 3)
    assert value == 3
    _check_valid_flow(g, 4, 0, 3, value)
    assert _cut_capacity(g, 0) == value


def test_edge_indices_are_sequential():
    g = MaxFlow(3)
    assert [g.add_edge(0, 1, 1), g.add_edge(1, 2, 1), g.add_edge(0, 2, 1)] == [0, 1, 2]


def test_flow_limit():
    full = _classic().flow(0, 3)
    g = _classic()
    assert g.flow(0, 3, 2) == min(2, full)
    _check_valid_flow(g, 4, 0, 3, 2)


def test_change_edge_and_self_loop():
    g = MaxFlow(2)
    g.add_edge(0, 1, 3)
    g.change_edge(0, 5, 1)
    assert g.get_edge(0) == FlowEdge(0, 1, 5, 1)
    loop = g.add_edge(0, 0, 5)
    assert g.get_edge(loop) == FlowEdge(0, 0, 5, 0)


def test_min_cut_marks_source_side():
    g = _classic()
    g.flow(0, 3)
    side = g.min_cut(0)
    assert side[0] is True
    assert side[3] is False


@pytest.mark.parametrize("seed", range(5))
def test_random_networks_max_flow_min_cut(seed):
    rng = random.Random(seed)
    n = 8
    g = MaxFlow(n)
    for _ in range(25):
        u, v = rng.randrange(n), rng.randrange(n)
        g.add_edge(u, v, rng.randint(0, 9))
    value = g.flow(0, n - 1)
    _check_valid_flow(g, n, 0, n - 1, value)
    assert _cut_capacity(g, 0) == value
    assert g.flow(0, n - 1) == 0


def test_errors():
    g = MaxFlow(2)
    with pytest.raises(ValueError):
        g.add_edge(0, 1, -1)
    with pytest.raises(IndexError):
        g.add_edge(0, 2, 1)
    g.add_edge(0, 1, 1)
    with pytest.raises(ValueError):
        g.flow(1, 1)
    with pytest.raises(ValueError):
        g.change_edge(0, 1, 2)
    with pytest.raises(IndexError):
        g.get_edge(1)