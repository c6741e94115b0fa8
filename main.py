# main.py
import argparse

from dispatch_sim.app.build import build
from dispatch_sim.domain.network import EMERGENCY_SITE_IDS, HOSPITAL_IDS
from dispatch_sim.domain.priority import PriorityClass
from dispatch_sim.sim.rng import REQUESTS


def run(seed: int, horizon_s: float, every_s: float, polyline: str):
    app = build(
        {
            "name": "hubli",
            "run_id": f"demo-{seed}",
            "sim": {"seed": seed, "duration": horizon_s},
            "polyline": {"kind": polyline},
        }
    )

    # one request per interval, cycling sites, hospitals and priorities
    rng = app.rng.stream(REQUESTS)
    priorities = [p.value for p in PriorityClass]
    t = every_s
    while t <= horizon_s:
        app.request(
            t,
            source=str(rng.choice(EMERGENCY_SITE_IDS)),
            target=str(rng.choice(HOSPITAL_IDS)),
            priority=str(rng.choice(priorities)),
        )
        t += every_s

    app.kernel.run(until=horizon_s)
    return app


if __name__ == "__main__":
    p = argparse.ArgumentParser(description="Ambulance dispatch routing demo")
    p.add_argument("--seed", type=int, default=7)
    p.add_argument("--horizon", type=float, default=300.0, help="simulated seconds")
    p.add_argument("--every", type=float, default=45.0, help="seconds between requests")
    p.add_argument("--polyline", choices=["none", "straight_line", "osrm"], default="none")
    args = p.parse_args()
    run(args.seed, args.horizon, args.every, args.polyline)
