# runtime/services_factory.py
import numpy as np

from dispatch_sim.app.protocols import PolylineService
from dispatch_sim.config.models import (
    PolylineNoneModel,
    PolylineOsrmModel,
    PolylineStraightModel,
    PolylineUnion,
    TrafficConfigModel,
)
from dispatch_sim.services.polyline import OsrmPolylineService, StraightLinePolylineService
from dispatch_sim.services.traffic import TrafficModel


def make_polyline_service(cfg: PolylineUnion) -> PolylineService | None:
    if isinstance(cfg, PolylineNoneModel):
        return None
    elif isinstance(cfg, PolylineStraightModel):
        return StraightLinePolylineService()
    elif isinstance(cfg, PolylineOsrmModel):
        return OsrmPolylineService(
            base_url=cfg.base_url, profile=cfg.profile, timeout_s=cfg.timeout_s
        )
    else:
        raise TypeError(cfg)


def make_traffic_model(cfg: TrafficConfigModel, *, rng: np.random.Generator) -> TrafficModel:
    return TrafficModel(
        rng=rng, band_low=cfg.band_low, band_high=cfg.band_high, symmetric=cfg.symmetric
    )
