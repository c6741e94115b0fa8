from typing import Protocol, runtime_checkable

from dispatch_sim.domain.entities.geography import Node, Polyline
from dispatch_sim.domain.results import ComparisonReport, PathResult


@runtime_checkable
class PolylineService(Protocol):
    """
    Geographic route for display only.

    Responsibilities:
      • Return (lng, lat) coordinates between two nodes, plus a road distance
        in km when the backend knows one.
      • Never fail: fall back to the straight two-point line.
    The result must not feed path costs or comparisons.
    """

    def route(self, source: Node, target: Node) -> Polyline: ...


@runtime_checkable
class ComparisonPolicy(Protocol):
    def compare(self, live: PathResult | None, cached: PathResult | None) -> ComparisonReport: ...


@runtime_checkable
class WeightRefresher(Protocol):
    """Anything that rewrites a graph's current weights in place."""

    def refresh(self, graph) -> int: ...
