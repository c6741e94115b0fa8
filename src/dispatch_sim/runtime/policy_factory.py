from dispatch_sim.app.protocols import ComparisonPolicy
from dispatch_sim.config.models import ComparisonMinCostModel, ComparisonUnion
from dispatch_sim.policy.comparison import MinCostComparisonPolicy


def make_comparison_policy(cfg: ComparisonUnion) -> ComparisonPolicy:
    if isinstance(cfg, ComparisonMinCostModel):
        return MinCostComparisonPolicy(tolerance=cfg.tolerance)
    else:
        raise TypeError(cfg)
