# domain/graph.py
"""Road network with bidirectional weighted edges.

Every road segment is stored as two directed half-edges that share a base
weight. Only ``current_weight`` changes after construction, and only through
:meth:`WeightedGraph.refresh_weights`.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Literal

from dispatch_sim.domain.entities.geography import Node
from dispatch_sim.domain.errors import (
    DuplicateEdge,
    DuplicateNodeId,
    InvalidEdge,
    InvalidWeight,
    UnknownNode,
)

logger = logging.getLogger(__name__)

DuplicatePolicy = Literal["overwrite", "reject"]
FactorFn = Callable[[], float]


@dataclass
class Edge:
    source: str
    target: str
    base_weight: float
    current_weight: float

    @property
    def key(self) -> tuple[str, str]:
        return (self.source, self.target)


def _check_weight(w: float, edge: tuple[str, str] | None = None) -> float:
    try:
        w = float(w)
    except (TypeError, ValueError):
        raise InvalidWeight(w, edge=edge) from None
    if not math.isfinite(w) or w <= 0:
        raise InvalidWeight(w, edge=edge)
    return w


class WeightedGraph:
    def __init__(self, *, duplicate_policy: DuplicatePolicy = "overwrite"):
        if duplicate_policy not in ("overwrite", "reject"):
            raise ValueError(f"Unknown duplicate policy {duplicate_policy!r}")
        self.duplicate_policy = duplicate_policy
        self.nodes: dict[str, Node] = {}
        self.edges: dict[tuple[str, str], Edge] = {}
        # node -> neighbour -> half-edge, kept in step with self.edges
        self._out: dict[str, dict[str, Edge]] = {}

    def __contains__(self, node_id) -> bool:
        return node_id in self.nodes

    def __len__(self) -> int:
        return len(self.nodes)

    def node_ids(self) -> list[str]:
        return list(self.nodes)

    @property
    def n_segments(self) -> int:
        return len(self.edges) // 2

    # ---------------- construction ----------------

    def add_node(self, node_id: str, lat: float, lng: float, name: str = "") -> Node:
        if node_id in self.nodes and self.duplicate_policy == "reject":
            raise DuplicateNodeId(node_id)
        node = Node(id=node_id, lat=float(lat), lng=float(lng), name=name)
        self.nodes[node_id] = node
        self._out.setdefault(node_id, {})
        return node

    def add_edge(self, a: str, b: str, base_weight: float) -> None:
        """Insert both half-edges a->b and b->a with current_weight = base_weight."""
        w = _check_weight(base_weight, edge=(a, b))
        for n in (a, b):
            if n not in self.nodes:
                raise UnknownNode(n)
        if a == b:
            raise InvalidEdge(f"self-loop on {a!r}")
        if (a, b) in self.edges:
            if self.duplicate_policy == "reject":
                raise DuplicateEdge(a, b)
            logger.debug("overwriting edge %s-%s", a, b)
        for u, v in ((a, b), (b, a)):
            e = Edge(source=u, target=v, base_weight=w, current_weight=w)
            self.edges[(u, v)] = e
            self._out[u][v] = e

    # ---------------- queries ----------------

    def edge(self, a: str, b: str) -> Edge | None:
        return self.edges.get((a, b))

    def neighbors(self, node_id: str) -> list[tuple[str, float]]:
        """(neighbour, current_weight) for every outgoing half-edge.

        Unknown ids have no neighbours; this never raises.
        """
        out = self._out.get(node_id)
        if not out:
            return []
        return [(v, e.current_weight) for v, e in out.items()]

    def iter_edges(self) -> Iterator[Edge]:
        yield from self.edges.values()

    def weight_snapshot(self) -> dict[tuple[str, str], float]:
        return {k: e.current_weight for k, e in self.edges.items()}

    # ---------------- traffic ----------------

    def refresh_weights(self, factor_fn: FactorFn, *, symmetric: bool = False) -> int:
        """Recompute current_weight = base_weight * factor_fn() and return half-edges touched.

        factor_fn is called once per stored half-edge, so the two directions of
        one road may end up with different costs. With symmetric=True one factor
        is drawn per road and applied to both directions.

        All factors are drawn and validated before any weight is written; a bad
        factor raises InvalidWeight and leaves the previous snapshot intact.
        """
        factors: dict[tuple[str, str], float] = {}
        for (u, v) in self.edges:
            if symmetric and (v, u) in factors:
                continue
            factors[(u, v)] = _check_weight(factor_fn(), edge=(u, v))

        for (u, v), e in self.edges.items():
            f = factors[(u, v)] if (u, v) in factors else factors[(v, u)]
            e.current_weight = e.base_weight * f
        return len(self.edges)
