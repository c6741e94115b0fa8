# io/business_events.py

from dataclasses import dataclass


# Analytics records, written through the Recorder (never scheduled in the kernel)
@dataclass
class BizEvent:
    run_id: str
    t: float  # simulation time
    name: str  # stable record name


@dataclass
class TrafficRefreshedBiz(BizEvent):
    tick: int
    half_edges: int


@dataclass
class DispatchReportBiz(BizEvent):
    request_id: int
    source: str
    target: str
    priority: str
    live_path: list[str] | None = None
    live_cost: float | None = None
    live_ms: float | None = None
    live_nodes_explored: int | None = None
    cached_path: list[str] | None = None
    cached_cost: float | None = None
    winners: list[str] | None = None
    eta_minutes: int | None = None
    display_distance_km: float | None = None
