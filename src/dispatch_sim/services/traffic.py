# services/traffic.py
import logging

import numpy as np

from dispatch_sim.domain.graph import WeightedGraph

logger = logging.getLogger(__name__)

BAND_LOW = 0.8
BAND_HIGH = 1.2


def _check_band(band_low: float, band_high: float) -> None:
    if band_low <= 0:
        raise ValueError(f"band_low must be > 0, got {band_low}")
    if band_high < band_low:
        raise ValueError(f"band_high ({band_high}) must be >= band_low ({band_low})")


def refresh_traffic(
    graph: WeightedGraph,
    band_low: float = BAND_LOW,
    band_high: float = BAND_HIGH,
    *,
    rng: np.random.Generator | None = None,
    symmetric: bool = False,
) -> int:
    """Draw one multiplier in [band_low, band_high] per half-edge and apply it.

    Returns the number of half-edges updated.
    """
    _check_band(band_low, band_high)
    rng = rng if rng is not None else np.random.default_rng()
    return graph.refresh_weights(
        lambda: float(rng.uniform(band_low, band_high)), symmetric=symmetric
    )


class TrafficModel:
    """Owns the traffic band and random stream; the only writer of current weights."""

    def __init__(
        self,
        rng: np.random.Generator,
        band_low: float = BAND_LOW,
        band_high: float = BAND_HIGH,
        symmetric: bool = False,
    ):
        _check_band(band_low, band_high)
        self.rng = rng
        self.band_low, self.band_high = band_low, band_high
        self.symmetric = symmetric
        self.refreshes = 0

    def refresh(self, graph: WeightedGraph) -> int:
        touched = refresh_traffic(
            graph, self.band_low, self.band_high, rng=self.rng, symmetric=self.symmetric
        )
        self.refreshes += 1
        logger.debug("traffic refresh #%d touched %d half-edges", self.refreshes, touched)
        return touched
