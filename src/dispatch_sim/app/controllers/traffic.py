# app/controllers/traffic.py
from dispatch_sim.app.events import TrafficRefreshed, TrafficTick
from dispatch_sim.app.protocols import WeightRefresher
from dispatch_sim.domain.graph import WeightedGraph
from dispatch_sim.io.business_events import TrafficRefreshedBiz
from dispatch_sim.io.recorder import Recorder


class TrafficHandler:
    """Refreshes live weights on a fixed cadence. Precomputed tables are left alone."""

    def __init__(
        self,
        graph: WeightedGraph,
        model: WeightRefresher,
        interval_s: float = 30.0,
        recorder: Recorder | None = None,
        run_id: str = "local",
    ):
        if interval_s <= 0:
            raise ValueError(f"interval_s must be > 0, got {interval_s}")
        self.graph = graph
        self.model = model
        self.interval_s = interval_s
        self.recorder = recorder
        self.run_id = run_id

    def first_tick(self, t0: float = 0.0) -> TrafficTick:
        return TrafficTick(t=t0 + self.interval_s, tick=1)

    def on_traffic_tick(self, ev: TrafficTick):
        touched = self.model.refresh(self.graph)
        if self.recorder:
            self.recorder.emit(
                TrafficRefreshedBiz(
                    run_id=self.run_id, t=ev.t, name="TrafficRefreshed", tick=ev.tick,
                    half_edges=touched,
                )
            )
        return [
            TrafficRefreshed(t=ev.t, tick=ev.tick, half_edges=touched),
            TrafficTick(t=ev.t + self.interval_s, tick=ev.tick + 1),
        ]
