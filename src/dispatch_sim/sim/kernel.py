# sim/kernel.py
"""Single-threaded event loop.

Traffic ticks and dispatch requests are discrete events on one heap. A handler
runs to completion before the next event is popped, so a live search always
sees one consistent weight snapshot.
"""

import heapq
import time
from collections.abc import Callable, Iterable

from .event import BaseEvent
from .hooks import KernelHooks, NoopHooks

Handler = Callable[[BaseEvent], Iterable[BaseEvent] | None]

_EPS = 1e-9


class Kernel:
    def __init__(self, hooks: KernelHooks | None = None):
        self._now = 0.0
        self._heap: list[tuple[float, int, BaseEvent]] = []
        self._seq = 0
        self._handlers: dict[type[BaseEvent], list[Handler]] = {}
        self._hooks = hooks or NoopHooks()

    @property
    def now(self) -> float:
        return self._now

    @property
    def pending(self) -> int:
        return len(self._heap)

    def peek_time(self) -> float | None:
        return self._heap[0][0] if self._heap else None

    def on(self, etype: type[BaseEvent], handler: Handler) -> None:
        """Subscribe handler to events of exactly etype; handlers run in subscription order."""
        self._handlers.setdefault(etype, []).append(handler)

    def schedule(self, ev: BaseEvent) -> None:
        if ev.t + _EPS < self._now:
            self._hooks.error(ev, reason="scheduled_past", now=self._now)
            raise RuntimeError(f"cannot schedule {type(ev).__name__} at {ev.t} < now {self._now}")
        self._seq += 1
        heapq.heappush(self._heap, (ev.t, self._seq, ev))
        self._hooks.schedule(ev, now=self._now, qsize=len(self._heap))

    def step(self) -> BaseEvent | None:
        """Pop the next event, advance the clock and run its handlers.

        Returns the event, or None when nothing is queued.
        """
        if not self._heap:
            return None
        t, seq, ev = heapq.heappop(self._heap)
        if t < self._now - _EPS:
            self._hooks.error(ev, reason="time_backwards", prev_t=self._now)
            raise RuntimeError(f"time went backwards: {t} < {self._now}")
        self._now = t

        handlers = self._handlers.get(type(ev), ())
        started = time.perf_counter()
        self._hooks.dispatch_start(ev, seq=seq, qsize=len(self._heap), handlers=len(handlers))
        produced = 0
        for handle in handlers:
            for follow_up in handle(ev) or ():
                self.schedule(follow_up)
                produced += 1
        self._hooks.dispatch_end(
            ev,
            produced=produced,
            qsize=len(self._heap),
            ms=(time.perf_counter() - started) * 1000,
        )
        return ev

    def run(self, until: float | None = None, max_events: int | None = None) -> int:
        """Process events with t <= until (all if None), at most max_events of them.

        The clock stays at the last processed event; later events remain queued.
        """
        wall = time.perf_counter()
        self._hooks.run_start(until=until, max_events=max_events, qsize=len(self._heap))
        processed = 0
        while self._heap and (max_events is None or processed < max_events):
            if until is not None and self._heap[0][0] > until:
                break
            self.step()
            processed += 1
        self._hooks.run_end(
            processed=processed,
            last_t=self._now,
            qsize=len(self._heap),
            wall_ms=(time.perf_counter() - wall) * 1000,
        )
        return processed
