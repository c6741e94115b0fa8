# tests/domain/test_graph.py
import itertools
import math

import pytest

from dispatch_sim.domain.errors import (
    DuplicateEdge,
    DuplicateNodeId,
    InvalidEdge,
    InvalidWeight,
    UnknownNode,
)
from dispatch_sim.domain.graph import WeightedGraph


@pytest.fixture
def abc() -> WeightedGraph:
    g = WeightedGraph()
    g.add_node("A", 15.0, 75.0, "Alpha")
    g.add_node("B", 15.1, 75.1, "Bravo")
    g.add_node("C", 15.2, 75.2, "Charlie")
    g.add_edge("A", "B", 1.0)
    g.add_edge("B", "C", 2.0)
    return g


def test_add_edge_creates_mirrored_half_edges(abc: WeightedGraph):
    assert len(abc.edges) == 4
    assert abc.n_segments == 2
    for u, v in [("A", "B"), ("B", "C")]:
        fwd, back = abc.edge(u, v), abc.edge(v, u)
        assert fwd.base_weight == back.base_weight
        assert fwd.current_weight == fwd.base_weight
        assert back.current_weight == back.base_weight
    assert abc.edge("A", "C") is None


def test_neighbors_returns_current_weights(abc: WeightedGraph):
    assert sorted(abc.neighbors("B")) == [("A", 1.0), ("C", 2.0)]
    assert abc.neighbors("A") == [("B", 1.0)]


def test_neighbors_of_unknown_node_is_empty_not_an_error(abc: WeightedGraph):
    assert abc.neighbors("nowhere") == []
    g = WeightedGraph()
    g.add_node("lonely", 0.0, 0.0)
    assert g.neighbors("lonely") == []


@pytest.mark.parametrize("w", [0.0, -1.0, math.inf, math.nan, "heavy", None])
def test_non_positive_or_non_finite_weight_is_rejected(abc: WeightedGraph, w):
    with pytest.raises(InvalidWeight):
        abc.add_edge("A", "C", w)
    assert abc.edge("A", "C") is None
    assert abc.edge("C", "A") is None


def test_invalid_weight_is_a_value_error(abc: WeightedGraph):
    with pytest.raises(ValueError):
        abc.add_edge("A", "C", -3)


def test_edge_to_unknown_node_and_self_loop_rejected(abc: WeightedGraph):
    with pytest.raises(UnknownNode):
        abc.add_edge("A", "Z", 1.0)
    with pytest.raises(InvalidEdge):
        abc.add_edge("A", "A", 1.0)


def test_overwrite_policy_replaces_node_and_edge(abc: WeightedGraph):
    abc.add_node("A", 1.0, 2.0, "Alpha 2")
    assert abc.nodes["A"].name == "Alpha 2"
    assert len(abc) == 3

    abc.add_edge("B", "A", 4.0)  # same road, reverse orientation
    assert len(abc.edges) == 4
    assert abc.edge("A", "B").base_weight == 4.0
    assert abc.edge("B", "A").base_weight == 4.0
    # replaced node keeps its edges
    assert ("B", 4.0) in abc.neighbors("A")


def test_reject_policy_raises_on_duplicates():
    g = WeightedGraph(duplicate_policy="reject")
    g.add_node("A", 0.0, 0.0)
    g.add_node("B", 0.0, 1.0)
    with pytest.raises(DuplicateNodeId):
        g.add_node("A", 9.0, 9.0)
    assert g.nodes["A"].lat == 0.0

    g.add_edge("A", "B", 1.0)
    with pytest.raises(DuplicateEdge):
        g.add_edge("A", "B", 2.0)
    with pytest.raises(DuplicateEdge):
        g.add_edge("B", "A", 2.0)
    assert g.edge("A", "B").base_weight == 1.0


def test_unknown_duplicate_policy():
    with pytest.raises(ValueError):
        WeightedGraph(duplicate_policy="ignore")


def test_refresh_calls_factor_once_per_half_edge(abc: WeightedGraph):
    factors = itertools.count(start=1)
    calls = []

    def factor():
        f = 1.0 + next(factors) / 10
        calls.append(f)
        return f

    assert abc.refresh_weights(factor) == 4
    assert len(calls) == 4
    # each direction got its own draw, so mirrors diverge
    assert abc.edge("A", "B").current_weight != abc.edge("B", "A").current_weight
    for e in abc.iter_edges():
        assert e.current_weight == pytest.approx(e.base_weight * calls.pop(0))
        assert e.base_weight in (1.0, 2.0)


def test_symmetric_refresh_keeps_mirrors_equal(abc: WeightedGraph):
    factors = iter([1.1, 0.9, 5.0, 5.0])
    assert abc.refresh_weights(lambda: next(factors), symmetric=True) == 4
    assert abc.edge("A", "B").current_weight == pytest.approx(1.1)
    assert abc.edge("B", "A").current_weight == pytest.approx(1.1)
    assert abc.edge("B", "C").current_weight == pytest.approx(1.8)
    assert abc.edge("C", "B").current_weight == pytest.approx(1.8)


def test_refresh_is_relative_to_base_not_compounding(abc: WeightedGraph):
    abc.refresh_weights(lambda: 2.0)
    abc.refresh_weights(lambda: 2.0)
    assert abc.edge("B", "C").current_weight == 4.0
    abc.refresh_weights(lambda: 1.0)
    assert abc.weight_snapshot()[("B", "C")] == 2.0


def test_refresh_rejects_non_positive_factor(abc: WeightedGraph):
    with pytest.raises(InvalidWeight):
        abc.refresh_weights(lambda: 0.0)


@pytest.mark.parametrize("symmetric", [False, True])
def test_failed_refresh_leaves_previous_snapshot(abc: WeightedGraph, symmetric):
    abc.refresh_weights(lambda: 1.5)
    before = abc.weight_snapshot()
    factors = iter([1.1, 0.0, 1.1, 1.1])
    with pytest.raises(InvalidWeight):
        abc.refresh_weights(lambda: next(factors), symmetric=symmetric)
    assert abc.weight_snapshot() == before
