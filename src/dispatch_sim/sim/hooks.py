# sim/hooks.py
"""Observer interface for the event loop.

The kernel calls these around every event. Hooks observe only; they never
schedule events or touch the road graph.
"""

from typing import Protocol

from dispatch_sim.sim.event import BaseEvent


class KernelHooks(Protocol):
    def run_start(self, *, until: float | None, max_events: int | None, qsize: int) -> None: ...
    def run_end(self, *, processed: int, last_t: float, qsize: int, wall_ms: float) -> None: ...
    def schedule(self, ev: BaseEvent, *, now: float, qsize: int) -> None: ...
    def dispatch_start(self, ev: BaseEvent, *, seq: int, qsize: int, handlers: int) -> None: ...
    def dispatch_end(self, ev: BaseEvent, *, produced: int, qsize: int, ms: float) -> None: ...
    def error(self, ev: BaseEvent, *, reason: str, **kw) -> None: ...


class NoopHooks:
    """Silent hook set. Subclass and override only the callbacks you need."""

    def run_start(self, *, until, max_events, qsize) -> None:
        return None

    def run_end(self, *, processed, **extra) -> None:
        return None

    def schedule(self, ev, *, now, qsize) -> None:
        return None

    def dispatch_start(self, ev, *, seq, qsize, handlers) -> None:
        return None

    def dispatch_end(self, ev, *, produced, qsize, ms) -> None:
        return None

    def error(self, ev, *, reason, **extra) -> None:
        return None
