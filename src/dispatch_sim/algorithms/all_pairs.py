# algorithms/all_pairs.py
"""Floyd-Warshall precompute and successor-table path lookup.

The tables are built from the weights at call time and never follow later
traffic refreshes. Answers from them are deliberately stale.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass

import numpy as np

from dispatch_sim.domain.errors import InconsistentSuccessorTable, NoRouteFound
from dispatch_sim.domain.graph import WeightedGraph
from dispatch_sim.domain.results import PathResult

logger = logging.getLogger(__name__)

NO_SUCCESSOR = -1


@dataclass(frozen=True)
class PrecomputedTables:
    nodes: tuple[str, ...]
    index: dict[str, int]
    dist: np.ndarray  # (V, V) float64, inf where unreachable
    next_hop: np.ndarray  # (V, V) int64 node index, NO_SUCCESSOR where absent
    compute_ms: float

    def __len__(self) -> int:
        return len(self.nodes)

    def distance(self, a: str, b: str) -> float:
        i, j = self.index.get(a), self.index.get(b)
        if i is None or j is None:
            return float("inf")
        return float(self.dist[i, j])

    def successor(self, a: str, b: str) -> str | None:
        """First hop from a toward b, or None."""
        i, j = self.index.get(a), self.index.get(b)
        if i is None or j is None:
            return None
        k = int(self.next_hop[i, j])
        return None if k == NO_SUCCESSOR else self.nodes[k]


def precompute_all_pairs(graph: WeightedGraph) -> PrecomputedTables:
    t0 = time.perf_counter()
    nodes = tuple(graph.node_ids())
    index = {n: i for i, n in enumerate(nodes)}
    n = len(nodes)

    dist = np.full((n, n), np.inf)
    next_hop = np.full((n, n), NO_SUCCESSOR, dtype=np.int64)
    for (u, v), w in graph.weight_snapshot().items():
        i, j = index[u], index[v]
        dist[i, j] = w
        next_hop[i, j] = j
    np.fill_diagonal(dist, 0.0)
    np.fill_diagonal(next_hop, NO_SUCCESSOR)

    # Row k and column k cannot improve while k is the intermediate, so one
    # broadcast per k gives the same tables as the i/j double loop.
    for k in range(n):
        via_k = dist[:, k, None] + dist[None, k, :]
        better = via_k < dist
        if not better.any():
            continue
        dist = np.where(better, via_k, dist)
        next_hop = np.where(better, next_hop[:, k, None], next_hop)

    dist.setflags(write=False)
    next_hop.setflags(write=False)
    ms = (time.perf_counter() - t0) * 1000
    logger.info("all-pairs precompute: %d nodes in %.2f ms", n, ms)
    return PrecomputedTables(nodes=nodes, index=index, dist=dist, next_hop=next_hop, compute_ms=ms)


def lookup_precomputed_path(source: str, target: str, tables: PrecomputedTables) -> PathResult:
    """Walk the successor table from source to target without searching.

    Raises NoRouteFound when the pair was disconnected at precompute time and
    InconsistentSuccessorTable if the walk breaks off or runs past V hops.
    """
    if source not in tables.index or target not in tables.index:
        raise NoRouteFound(source, target, engine="cached")
    if source == target:
        return PathResult(
            path=(source,), cost=0.0, compute_ms=0.0, nodes_explored=0, engine="cached"
        )

    j = tables.index[target]
    cur = tables.index[source]
    if tables.next_hop[cur, j] == NO_SUCCESSOR:
        raise NoRouteFound(source, target, engine="cached")

    path = [source]
    for _ in range(len(tables)):
        nxt = int(tables.next_hop[cur, j])
        if nxt == NO_SUCCESSOR:
            raise InconsistentSuccessorTable(source, target, at=tables.nodes[cur])
        cur = nxt
        path.append(tables.nodes[cur])
        if cur == j:
            return PathResult(
                path=tuple(path),
                cost=float(tables.dist[tables.index[source], j]),
                compute_ms=0.0,
                nodes_explored=0,
                engine="cached",
            )
    raise InconsistentSuccessorTable(source, target, at=tables.nodes[cur])
