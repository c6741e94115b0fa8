# domain/results.py
from dataclasses import dataclass
from typing import Literal

from dispatch_sim.domain.entities.geography import Polyline

EngineName = Literal["live", "cached"]


@dataclass(frozen=True)
class PathResult:
    path: tuple[str, ...]  # source .. target inclusive
    cost: float
    compute_ms: float
    nodes_explored: int  # 0 for table lookups
    engine: EngineName = "live"

    @property
    def source(self) -> str:
        return self.path[0]

    @property
    def target(self) -> str:
        return self.path[-1]


@dataclass(frozen=True)
class ComparedResult:
    result: PathResult
    optimal: bool


@dataclass(frozen=True)
class ComparisonReport:
    live: ComparedResult | None
    cached: ComparedResult | None
    best_cost: float
    comparative: bool  # False when only one engine produced a route

    @property
    def winners(self) -> list[EngineName]:
        out: list[EngineName] = []
        if self.live and self.live.optimal:
            out.append("live")
        if self.cached and self.cached.optimal:
            out.append("cached")
        return out

    @property
    def cost_delta(self) -> float | None:
        """live - cached cost; None unless both engines found a route."""
        if self.live is None or self.cached is None:
            return None
        return self.live.result.cost - self.cached.result.cost


@dataclass(frozen=True)
class DispatchRequest:
    source: str  # emergency site
    target: str  # hospital
    priority: str = "moderate"


@dataclass(frozen=True)
class DispatchOutcome:
    request: DispatchRequest
    report: ComparisonReport
    polyline: Polyline | None = None
    display_distance_km: float | None = None
    eta_minutes: int | None = None
