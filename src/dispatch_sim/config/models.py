from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator, model_validator

from dispatch_sim.domain.network import BUILTIN_NETWORKS


class SimModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    seed: int = 0
    duration: float = 3600.0  # seconds


class LogModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    debug: bool = False
    sample_every: int = Field(default=1, ge=1)


# ----------------- GRAPH ---------------------


class NodeModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    id: str
    lat: float
    lng: float
    name: str = ""


class EdgeModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    a: str
    b: str
    base_weight: float = Field(gt=0)


class GraphBuiltin(BaseModel):
    model_config = ConfigDict(extra="forbid")
    by: Literal["builtin"] = "builtin"
    name: str = "hubli"
    duplicate_policy: Literal["overwrite", "reject"] = "overwrite"

    @field_validator("name")
    @classmethod
    def _known(cls, v: str) -> str:
        if v not in BUILTIN_NETWORKS:
            raise ValueError(f"unknown built-in network {v!r}, have {sorted(BUILTIN_NETWORKS)}")
        return v


class GraphInline(BaseModel):
    model_config = ConfigDict(extra="forbid")
    by: Literal["inline"] = "inline"
    nodes: list[NodeModel]
    edges: list[EdgeModel] = Field(default_factory=list)
    duplicate_policy: Literal["overwrite", "reject"] = "overwrite"

    @model_validator(mode="after")
    def _well_formed(self):
        reject = self.duplicate_policy == "reject"
        ids: set[str] = set()
        for n in self.nodes:
            if reject and n.id in ids:
                raise ValueError(f"duplicate node id {n.id!r}")
            ids.add(n.id)

        roads: set[frozenset[str]] = set()
        for e in self.edges:
            missing = [x for x in (e.a, e.b) if x not in ids]
            if missing:
                raise ValueError(f"edge {e.a}-{e.b} references unknown node(s) {missing}")
            if e.a == e.b:
                raise ValueError(f"self-loop on {e.a!r}")
            road = frozenset((e.a, e.b))
            if reject and road in roads:
                raise ValueError(f"duplicate edge {e.a}-{e.b}")
            roads.add(road)
        return self


GraphUnion = Annotated[GraphBuiltin | GraphInline, Field(discriminator="by")]


# ----------------- TRAFFIC ---------------------


class TrafficConfigModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    enabled: bool = True
    band_low: float = 0.8
    band_high: float = 1.2
    refresh_interval_s: float = 30.0
    # False: each direction of a road draws its own factor
    symmetric: bool = False

    @field_validator("band_low", "refresh_interval_s")
    @classmethod
    def _positive(cls, v: float, info: ValidationInfo) -> float:
        if v <= 0:
            raise ValueError(f"{info.field_name} must be > 0")
        return v

    @model_validator(mode="after")
    def _band_order(self):
        if self.band_high < self.band_low:
            raise ValueError(
                f"band_high ({self.band_high}) must be >= band_low ({self.band_low})"
            )
        return self


# ------------------ POLICIES / SERVICES -----------------------------


class ComparisonMinCostModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["min_cost"] = "min_cost"
    tolerance: float = Field(default=0.0, ge=0.0)


# single policy for now; becomes a discriminated union on "kind" when a second lands
ComparisonUnion = ComparisonMinCostModel


class PolylineNoneModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["none"] = "none"


class PolylineStraightModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["straight_line"] = "straight_line"


class PolylineOsrmModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["osrm"] = "osrm"
    base_url: str = "https://router.project-osrm.org"
    profile: str = "driving"
    timeout_s: float = Field(default=5.0, gt=0)


PolylineUnion = Annotated[
    PolylineNoneModel | PolylineStraightModel | PolylineOsrmModel,
    Field(discriminator="kind"),
]


class DispatchModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    minutes_per_km: float = Field(default=2.0, gt=0)


# ------------------------------------------------------------------


class ScenarioModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    name: str = "hubli"
    run_id: str = "local"
    sim: SimModel = Field(default_factory=SimModel)
    log: LogModel = Field(default_factory=LogModel)
    graph: GraphUnion = Field(default_factory=GraphBuiltin)
    traffic: TrafficConfigModel = Field(default_factory=TrafficConfigModel)
    comparison: ComparisonUnion = Field(default_factory=ComparisonMinCostModel)
    polyline: PolylineUnion = Field(default_factory=PolylineNoneModel)
    dispatch: DispatchModel = Field(default_factory=DispatchModel)
