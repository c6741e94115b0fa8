# tests/domain/test_network.py
import pytest

from dispatch_sim.algorithms.live import find_live_path
from dispatch_sim.domain.errors import DuplicateEdge
from dispatch_sim.domain.network import (
    EMERGENCY_SITE_IDS,
    HOSPITAL_IDS,
    HUBLI_EDGES,
    HUBLI_NODES,
    build_builtin_graph,
    build_graph,
)


def test_builtin_network_shape():
    g = build_graph()
    assert len(g) == len(HUBLI_NODES) == 53
    assert len(HOSPITAL_IDS) == 12
    assert len(EMERGENCY_SITE_IDS) == 31
    # 138 records, I0-I7 appears twice (once as I7-I0)
    assert len(HUBLI_EDGES) == 138
    assert g.n_segments == 137
    assert g.nodes["H8"].name == "Sushruta Hospital"


def test_every_site_reaches_every_hospital():
    g = build_graph()
    for e in EMERGENCY_SITE_IDS:
        for h in HOSPITAL_IDS:
            assert find_live_path(g, e, h).cost > 0


def test_builtin_network_needs_overwrite_policy():
    with pytest.raises(DuplicateEdge):
        build_builtin_graph("hubli", duplicate_policy="reject")


def test_unknown_builtin_network():
    with pytest.raises(ValueError):
        build_builtin_graph("atlantis")


def test_build_graph_from_plain_tuples():
    g = build_graph(
        [("A", 0.0, 0.0, "a"), ("B", 0.0, 1.0, "b")],
        [("A", "B", 3.0)],
    )
    assert g.neighbors("A") == [("B", 3.0)]
    assert g.neighbors("B") == [("A", 3.0)]
