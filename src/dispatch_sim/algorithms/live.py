# algorithms/live.py
"""Single-pair Dijkstra over the graph's current weights."""

import math
import time

from dispatch_sim.algorithms.frontier import PriorityFrontier
from dispatch_sim.domain.errors import NoRouteFound, UnknownNode
from dispatch_sim.domain.graph import WeightedGraph
from dispatch_sim.domain.priority import PriorityClass, priority_multiplier
from dispatch_sim.domain.results import PathResult


def reconstruct_path(prev: dict[str, str], target: str) -> tuple[str, ...]:
    path = [target]
    cur = target
    while cur in prev:
        cur = prev[cur]
        path.append(cur)
    path.reverse()
    return tuple(path)


def find_live_path(
    graph: WeightedGraph,
    source: str,
    target: str,
    priority: PriorityClass | str = PriorityClass.MODERATE,
) -> PathResult:
    """
    Shortest source->target path under the current edge weights.

    Every edge cost is scaled by the priority multiplier and the reported cost
    keeps that scaling. The search stops as soon as the target is settled, or
    as soon as the cheapest frontier entry is infinite (rest is unreachable),
    in which case NoRouteFound is raised.

    nodes_explored counts settled nodes (target included); stale heap entries
    that are popped and skipped are not counted.
    """
    t0 = time.perf_counter()
    for n in (source, target):
        if n not in graph:
            raise UnknownNode(n)
    multiplier = priority_multiplier(priority)

    dist: dict[str, float] = {}
    prev: dict[str, str] = {}
    settled: set[str] = set()
    frontier = PriorityFrontier()
    for nid in graph.node_ids():
        dist[nid] = 0.0 if nid == source else math.inf
        frontier.push(nid, dist[nid])

    explored = 0
    while not frontier.is_empty():
        u, d_u = frontier.pop_min()
        if u in settled or d_u > dist[u]:
            continue  # stale duplicate
        if d_u == math.inf:
            break
        settled.add(u)
        explored += 1
        if u == target:
            return PathResult(
                path=reconstruct_path(prev, target),
                cost=d_u,
                compute_ms=(time.perf_counter() - t0) * 1000,
                nodes_explored=explored,
                engine="live",
            )
        for v, w in graph.neighbors(u):
            if v in settled:
                continue
            alt = d_u + w * multiplier
            if alt < dist[v]:
                dist[v] = alt
                prev[v] = u
                frontier.push(v, alt)

    raise NoRouteFound(source, target, engine="live")
