# tests/services/test_polyline.py
import pytest
import requests

from dispatch_sim.domain.entities.geography import Node
from dispatch_sim.services.polyline import (
    OsrmPolylineService,
    StraightLinePolylineService,
    straight_line,
)

SRC = Node("E1", 15.36, 75.12, "site")
DST = Node("H1", 15.35, 75.14, "hospital")


class FakeResponse:
    def __init__(self, payload=None, status=200, bad_json=False):
        self.payload, self.status, self.bad_json = payload, status, bad_json

    def raise_for_status(self):
        if self.status >= 400:
            raise requests.exceptions.HTTPError(f"{self.status} error")

    def json(self):
        if self.bad_json:
            raise ValueError("not json")
        return self.payload


class FakeSession:
    def __init__(self, response=None, exc=None):
        self.response, self.exc = response, exc
        self.headers = {}
        self.calls = []

    def get(self, url, params=None, timeout=None):
        self.calls.append((url, params, timeout))
        if self.exc is not None:
            raise self.exc
        return self.response


def _svc(**kw):
    session = FakeSession(**kw)
    return OsrmPolylineService(base_url="http://osrm.test/", timeout_s=2.0, session=session), session


def test_straight_line_is_lng_lat_pair():
    p = StraightLinePolylineService().route(SRC, DST)
    assert p.coordinates == [(75.12, 15.36), (75.14, 15.35)]
    assert p.distance_km is None
    assert p.is_fallback
    assert straight_line(SRC, DST) == p


def test_url_uses_lng_lat_order():
    svc, _ = _svc()
    assert svc.url_for(SRC, DST) == "http://osrm.test/route/v1/driving/75.12,15.36;75.14,15.35"


def test_ok_route_is_parsed():
    payload = {
        "code": "Ok",
        "routes": [{"distance": 2345.0, "geometry": {"coordinates": [[75.12, 15.36], [75.13, 15.355], [75.14, 15.35]]}}],
    }
    svc, session = _svc(response=FakeResponse(payload))
    p = svc.route(SRC, DST)
    assert p.distance_km == pytest.approx(2.345)
    assert len(p.coordinates) == 3
    assert not p.is_fallback
    url, params, timeout = session.calls[0]
    assert params == {"overview": "full", "geometries": "geojson"}
    assert timeout == 2.0


@pytest.mark.parametrize(
    "kw",
    [
        {"exc": requests.exceptions.ConnectionError("down")},
        {"exc": requests.exceptions.Timeout("slow")},
        {"response": FakeResponse(status=503)},
        {"response": FakeResponse(bad_json=True)},
        {"response": FakeResponse({"code": "NoRoute", "routes": []})},
        {"response": FakeResponse({"code": "Ok", "routes": []})},
        {"response": FakeResponse(["not", "a", "dict"])},
        {"response": FakeResponse({"code": "Ok", "routes": [{"geometry": {}}]})},
    ],
)
def test_failures_fall_back_to_straight_line(kw):
    svc, _ = _svc(**kw)
    assert svc.route(SRC, DST) == straight_line(SRC, DST)
