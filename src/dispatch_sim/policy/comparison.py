# policy/comparison.py
from dispatch_sim.app.protocols import ComparisonPolicy
from dispatch_sim.domain.errors import NoRouteFound
from dispatch_sim.domain.results import ComparedResult, ComparisonReport, PathResult


def compare_results(
    live: PathResult | None,
    cached: PathResult | None,
    *,
    tolerance: float = 0.0,
) -> ComparisonReport:
    """
    Mark each present result optimal if its cost is the minimum.

    tolerance=0.0 compares with exact float equality, so two engines that sum
    the same edges in a different order can disagree in the last bit. A small
    positive tolerance treats costs within it of the minimum as optimal too.
    """
    if tolerance < 0:
        raise ValueError(f"tolerance must be >= 0, got {tolerance}")
    present = [r for r in (live, cached) if r is not None]
    if not present:
        raise NoRouteFound(None, None)
    best = min(r.cost for r in present)

    def mark(r: PathResult | None) -> ComparedResult | None:
        if r is None:
            return None
        ok = r.cost == best if tolerance == 0.0 else r.cost - best <= tolerance
        return ComparedResult(result=r, optimal=ok)

    return ComparisonReport(
        live=mark(live),
        cached=mark(cached),
        best_cost=best,
        comparative=len(present) == 2,
    )


class MinCostComparisonPolicy(ComparisonPolicy):
    def __init__(self, tolerance: float = 0.0):
        if tolerance < 0:
            raise ValueError(f"tolerance must be >= 0, got {tolerance}")
        self.tolerance = tolerance

    def compare(self, live: PathResult | None, cached: PathResult | None) -> ComparisonReport:
        return compare_results(live, cached, tolerance=self.tolerance)
