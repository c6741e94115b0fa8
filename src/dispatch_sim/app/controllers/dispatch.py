# app/controllers/dispatch.py
import logging

from dispatch_sim.algorithms.all_pairs import (
    PrecomputedTables,
    lookup_precomputed_path,
    precompute_all_pairs,
)
from dispatch_sim.algorithms.live import find_live_path
from dispatch_sim.app.events import DispatchCompleted, DispatchFailed, DispatchRequested
from dispatch_sim.app.protocols import ComparisonPolicy, PolylineService
from dispatch_sim.domain.errors import NoRouteFound, UnknownNode
from dispatch_sim.domain.graph import WeightedGraph
from dispatch_sim.domain.results import DispatchOutcome, DispatchRequest, PathResult
from dispatch_sim.io.business_events import DispatchReportBiz
from dispatch_sim.io.recorder import Recorder
from dispatch_sim.policy.comparison import MinCostComparisonPolicy

logger = logging.getLogger(__name__)


class DispatchHandler:
    def __init__(
        self,
        graph: WeightedGraph,
        tables: PrecomputedTables,
        comparison: ComparisonPolicy | None = None,
        polyline: PolylineService | None = None,
        minutes_per_km: float = 2.0,
        recorder: Recorder | None = None,
        run_id: str = "local",
    ):
        self.graph = graph
        self.tables = tables
        self.comparison = comparison or MinCostComparisonPolicy()
        self.polyline = polyline
        self.minutes_per_km = minutes_per_km
        self.recorder = recorder
        self.run_id = run_id
        self.outcomes: dict[int, DispatchOutcome] = {}

    def recompute_tables(self) -> PrecomputedTables:
        """Explicitly rebuild the all-pairs tables from the current weights."""
        self.tables = precompute_all_pairs(self.graph)
        return self.tables

    def _live(self, req: DispatchRequest) -> PathResult | None:
        try:
            return find_live_path(self.graph, req.source, req.target, req.priority)
        except NoRouteFound:
            return None

    def _cached(self, req: DispatchRequest) -> PathResult | None:
        try:
            return lookup_precomputed_path(req.source, req.target, self.tables)
        except NoRouteFound:
            return None

    def dispatch(self, req: DispatchRequest) -> DispatchOutcome:
        """Run both engines for one request and compare them.

        Raises NoRouteFound when neither engine reaches the hospital.
        """
        live = self._live(req)
        cached = self._cached(req)
        try:
            report = self.comparison.compare(live, cached)
        except NoRouteFound:
            raise NoRouteFound(req.source, req.target) from None

        polyline = None
        display_km = None
        eta = None
        if live is not None:
            if self.polyline is not None:
                polyline = self.polyline.route(
                    self.graph.nodes[req.source], self.graph.nodes[req.target]
                )
            # polyline distance is for display; route costs stay graph-based
            if polyline is not None and polyline.distance_km is not None:
                display_km = polyline.distance_km
            else:
                display_km = live.cost
            eta = round(display_km * self.minutes_per_km)
        return DispatchOutcome(
            request=req,
            report=report,
            polyline=polyline,
            display_distance_km=display_km,
            eta_minutes=eta,
        )

    def on_dispatch_requested(self, ev: DispatchRequested):
        req = DispatchRequest(source=ev.source, target=ev.target, priority=ev.priority)
        try:
            outcome = self.dispatch(req)
        except (NoRouteFound, UnknownNode) as e:
            logger.info("dispatch %d failed: %s", ev.request_id, e)
            return [DispatchFailed(t=ev.t, request_id=ev.request_id, reason=str(e))]

        self.outcomes[ev.request_id] = outcome
        report = outcome.report
        if self.recorder:
            self.recorder.emit(self._biz(ev, outcome))
        return [
            DispatchCompleted(
                t=ev.t,
                request_id=ev.request_id,
                live_cost=report.live.result.cost if report.live else None,
                cached_cost=report.cached.result.cost if report.cached else None,
                winners=tuple(report.winners),
            )
        ]

    def _biz(self, ev: DispatchRequested, outcome: DispatchOutcome) -> DispatchReportBiz:
        live, cached = outcome.report.live, outcome.report.cached
        return DispatchReportBiz(
            run_id=self.run_id,
            t=ev.t,
            name="DispatchReport",
            request_id=ev.request_id,
            source=ev.source,
            target=ev.target,
            priority=ev.priority,
            live_path=list(live.result.path) if live else None,
            live_cost=live.result.cost if live else None,
            live_ms=live.result.compute_ms if live else None,
            live_nodes_explored=live.result.nodes_explored if live else None,
            cached_path=list(cached.result.path) if cached else None,
            cached_cost=cached.result.cost if cached else None,
            winners=outcome.report.winners,
            eta_minutes=outcome.eta_minutes,
            display_distance_km=outcome.display_distance_km,
        )
