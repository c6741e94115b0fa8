# app/events.py
from dataclasses import dataclass

from dispatch_sim.sim.event import BaseEvent


# Traffic
@dataclass(order=True)
class TrafficTick(BaseEvent):
    tick: int = 0


@dataclass(order=True)
class TrafficRefreshed(BaseEvent):
    tick: int
    half_edges: int


# Dispatch
@dataclass(order=True)
class DispatchRequested(BaseEvent):
    request_id: int
    source: str  # emergency site id
    target: str  # hospital id
    priority: str = "moderate"


@dataclass(order=True)
class DispatchCompleted(BaseEvent):
    request_id: int
    live_cost: float | None
    cached_cost: float | None
    winners: tuple[str, ...] = ()


@dataclass(order=True)
class DispatchFailed(BaseEvent):
    request_id: int
    reason: str
