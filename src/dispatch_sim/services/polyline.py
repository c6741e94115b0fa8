# services/polyline.py
"""Road polylines for display. Nothing here feeds path costs."""

import logging

import requests

from dispatch_sim.app.protocols import PolylineService
from dispatch_sim.domain.entities.geography import Node, Polyline

logger = logging.getLogger(__name__)


def straight_line(source: Node, target: Node) -> Polyline:
    return Polyline(coordinates=[source.lng_lat, target.lng_lat], distance_km=None)


class StraightLinePolylineService(PolylineService):
    def route(self, source: Node, target: Node) -> Polyline:
        return straight_line(source, target)


class OsrmPolylineService(PolylineService):
    """OSRM route service client; any failure degrades to a straight line."""

    def __init__(
        self,
        base_url: str = "https://router.project-osrm.org",
        profile: str = "driving",
        timeout_s: float = 5.0,
        session: requests.Session | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.profile = profile
        self.timeout_s = timeout_s
        self.session = session or requests.Session()
        self.session.headers.update({"Accept": "application/json"})

    def url_for(self, source: Node, target: Node) -> str:
        coords = f"{source.lng},{source.lat};{target.lng},{target.lat}"
        return f"{self.base_url}/route/v1/{self.profile}/{coords}"

    def route(self, source: Node, target: Node) -> Polyline:
        url = self.url_for(source, target)
        try:
            response = self.session.get(
                url,
                params={"overview": "full", "geometries": "geojson"},
                timeout=self.timeout_s,
            )
            response.raise_for_status()
            data = response.json()
        except (requests.exceptions.RequestException, ValueError) as e:
            logger.warning("OSRM routing unavailable (%s), using straight line", e)
            return straight_line(source, target)

        if not isinstance(data, dict):
            data = {}
        routes = data.get("routes") or []
        if data.get("code") != "Ok" or not routes:
            logger.warning("OSRM returned code=%r, using straight line", data.get("code"))
            return straight_line(source, target)

        best = routes[0]
        try:
            coords = [(float(lng), float(lat)) for lng, lat in best["geometry"]["coordinates"]]
            distance_km = float(best["distance"]) / 1000
        except (KeyError, TypeError, ValueError) as e:
            logger.warning("malformed OSRM route (%s), using straight line", e)
            return straight_line(source, target)
        return Polyline(coordinates=coords, distance_km=distance_km)
