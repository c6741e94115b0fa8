# app/build.py
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field

from dispatch_sim.algorithms.all_pairs import PrecomputedTables, precompute_all_pairs
from dispatch_sim.app.controllers.dispatch import DispatchHandler
from dispatch_sim.app.controllers.traffic import TrafficHandler
from dispatch_sim.app.events import DispatchRequested
from dispatch_sim.app.wiring import wire
from dispatch_sim.config.models import ScenarioModel
from dispatch_sim.domain.graph import WeightedGraph
from dispatch_sim.domain.results import DispatchRequest
from dispatch_sim.io.kernel_logging import KernelLogging
from dispatch_sim.io.recorder import JsonlSink, MemorySink, Recorder
from dispatch_sim.runtime.policy_factory import make_comparison_policy
from dispatch_sim.runtime.registries import make_graph
from dispatch_sim.runtime.services_factory import make_polyline_service, make_traffic_model
from dispatch_sim.sim.hooks import NoopHooks
from dispatch_sim.sim.kernel import Kernel
from dispatch_sim.sim.rng import TRAFFIC, RNGRegistry


@dataclass
class App:
    kernel: Kernel
    rng: RNGRegistry
    graph: WeightedGraph
    tables: PrecomputedTables
    dispatch: DispatchHandler
    traffic: TrafficHandler | None
    recorder: Recorder
    _next_request_id: int = field(default=0, repr=False)

    def request(self, t: float, source: str, target: str, priority: str = "moderate") -> int:
        """Schedule one dispatch request and return its id."""
        self._next_request_id += 1
        rid = self._next_request_id
        self.kernel.schedule(
            DispatchRequested(t=t, request_id=rid, source=source, target=target, priority=priority)
        )
        return rid

    def request_many(self, requests: Iterable[tuple[float, DispatchRequest]]) -> list[int]:
        return [self.request(t, r.source, r.target, r.priority) for t, r in requests]


def build(
    cfg: ScenarioModel | Mapping | None = None,
    *,
    use_logging: bool = True,
    recorder: Recorder | None = None,
) -> App:
    # 0) Validate config
    if cfg is None:
        model = ScenarioModel()
    else:
        model = cfg if isinstance(cfg, ScenarioModel) else ScenarioModel.model_validate(cfg)

    # 1) RNG & recorder
    rng_registry = RNGRegistry(model.sim.seed, scenario=model.name)
    if recorder is None:
        recorder = Recorder(JsonlSink()) if use_logging else Recorder(MemorySink())

    # 2) Kernel (with hooks)
    hooks = (
        KernelLogging(
            run_id=model.run_id,
            level=model.log.level,
            debug=model.log.debug,
            sample_every=model.log.sample_every,
        )
        if use_logging
        else NoopHooks()
    )
    kernel = Kernel(hooks=hooks)

    # 3) Graph, then the one-off all-pairs snapshot
    graph = make_graph(model.graph)
    tables = precompute_all_pairs(graph)

    # 4) Handlers (inject deps explicitly)
    dispatch = DispatchHandler(
        graph=graph,
        tables=tables,
        comparison=make_comparison_policy(model.comparison),
        polyline=make_polyline_service(model.polyline),
        minutes_per_km=model.dispatch.minutes_per_km,
        recorder=recorder,
        run_id=model.run_id,
    )
    traffic = None
    if model.traffic.enabled:
        traffic = TrafficHandler(
            graph=graph,
            model=make_traffic_model(model.traffic, rng=rng_registry.stream(TRAFFIC)),
            interval_s=model.traffic.refresh_interval_s,
            recorder=recorder,
            run_id=model.run_id,
        )

    # 5) Wiring & timers
    wire(kernel, dispatch=dispatch, traffic=traffic)
    if traffic:
        kernel.schedule(traffic.first_tick())

    return App(kernel, rng_registry, graph, tables, dispatch, traffic, recorder)
