# app/wiring.py
from dispatch_sim.app.controllers.dispatch import DispatchHandler
from dispatch_sim.app.controllers.traffic import TrafficHandler
from dispatch_sim.app.events import DispatchRequested, TrafficTick
from dispatch_sim.sim.kernel import Kernel


def wire(
    kernel: Kernel,
    *,
    dispatch: DispatchHandler,
    traffic: TrafficHandler | None = None,
) -> None:
    k = kernel

    # live weights move on the timer; the precomputed tables never do
    if traffic:
        k.on(TrafficTick, traffic.on_traffic_tick)

    k.on(DispatchRequested, dispatch.on_dispatch_requested)
