from dataclasses import dataclass

# (lng, lat) pair, the order road-routing services use on the wire
LngLat = tuple[float, float]


@dataclass(frozen=True)
class Node:
    id: str
    lat: float
    lng: float
    name: str = ""

    @property
    def lng_lat(self) -> LngLat:
        return (self.lng, self.lat)


@dataclass(frozen=True)
class NodeRecord:
    id: str
    lat: float
    lng: float
    name: str


@dataclass(frozen=True)
class EdgeRecord:
    a: str
    b: str
    base_weight: float  # km


@dataclass
class Polyline:
    coordinates: list[LngLat]
    distance_km: float | None = None  # None => straight-line fallback, distance unknown

    @property
    def is_fallback(self) -> bool:
        return self.distance_km is None
