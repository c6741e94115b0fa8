# tests/policy/test_comparison.py
import pytest

from dispatch_sim.domain.errors import NoRouteFound
from dispatch_sim.domain.results import PathResult
from dispatch_sim.policy.comparison import MinCostComparisonPolicy, compare_results


def _r(cost, engine="live"):
    return PathResult(path=("A", "B"), cost=cost, compute_ms=0.1, nodes_explored=2, engine=engine)


def test_cheaper_cached_wins():
    rep = compare_results(_r(5.0), _r(4.0, "cached"))
    assert rep.live.optimal is False
    assert rep.cached.optimal is True
    assert rep.winners == ["cached"]
    assert rep.best_cost == 4.0
    assert rep.comparative is True
    assert rep.cost_delta == pytest.approx(1.0)


def test_tie_marks_both_optimal():
    rep = compare_results(_r(3.0), _r(3.0, "cached"))
    assert rep.winners == ["live", "cached"]


def test_single_result_is_not_comparative():
    rep = compare_results(None, _r(7.0, "cached"))
    assert rep.live is None
    assert rep.cached.optimal is True
    assert rep.comparative is False
    assert rep.cost_delta is None

    rep = compare_results(_r(7.0), None)
    assert rep.winners == ["live"]
    assert rep.comparative is False


def test_both_missing_raises():
    with pytest.raises(NoRouteFound):
        compare_results(None, None)


def test_exact_equality_by_default():
    rep = compare_results(_r(0.1 + 0.2), _r(0.3, "cached"))
    assert rep.winners == ["cached"]


def test_tolerance_absorbs_rounding_noise():
    policy = MinCostComparisonPolicy(tolerance=1e-9)
    rep = policy.compare(_r(0.1 + 0.2), _r(0.3, "cached"))
    assert rep.winners == ["live", "cached"]
    # but a real gap is still a gap
    rep = policy.compare(_r(3.5), _r(3.0, "cached"))
    assert rep.winners == ["cached"]


def test_negative_tolerance_rejected():
    with pytest.raises(ValueError):
        MinCostComparisonPolicy(tolerance=-0.1)
    with pytest.raises(ValueError):
        compare_results(_r(1.0), None, tolerance=-1.0)
