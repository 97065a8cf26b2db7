"""Shared test fixtures."""

from urllib.parse import parse_qs

import httpx
import pytest

from kidmap.models.location import LocationCreate, LocationType
from kidmap.models.region import BoundingBox
from kidmap.services.location_store import LocationStore
from kidmap.services.overpass_service import OverpassService

OVERPASS_URL = "https://overpass.test/api/interpreter"


@pytest.fixture
def sample_bbox():
    """Small bounding box around Golden Gate Park."""
    return BoundingBox(north=37.775, south=37.765, east=-122.45, west=-122.51)


@pytest.fixture
def playground_node():
    """Overpass node element for a named playground."""
    return {
        "type": "node",
        "id": 1001,
        "lat": 37.77,
        "lon": -122.42,
        "tags": {"leisure": "playground", "name": "Tiny Tots Yard"},
    }


@pytest.fixture
def museum_way():
    """Overpass way element for an unnamed museum, with a center."""
    return {
        "type": "way",
        "id": 2002,
        "center": {"lat": 37.80, "lon": -122.41},
        "tags": {"tourism": "museum"},
    }


@pytest.fixture
def park_relation():
    """Overpass relation element for a park with full contact details."""
    return {
        "type": "relation",
        "id": 3003,
        "center": {"lat": 37.7694, "lon": -122.4862},
        "tags": {
            "leisure": "park",
            "name": "Golden Gate Park",
            "addr:housenumber": "501",
            "addr:street": "Stanyan Street",
            "addr:city": "San Francisco",
            "website": "https://goldengatepark.com",
            "phone": "+1 415 831 2700",
            "opening_hours": "05:00-24:00",
        },
    }


@pytest.fixture
def cafe_node():
    """Element that matches no registered location type."""
    return {
        "type": "node",
        "id": 4004,
        "lat": 37.78,
        "lon": -122.40,
        "tags": {"amenity": "cafe", "name": "Coffee Corner"},
    }


@pytest.fixture
def overpass_elements(playground_node, museum_way, park_relation, cafe_node):
    """Overpass response elements: three applicable, one not."""
    return [playground_node, museum_way, park_relation, cafe_node]


@pytest.fixture
def sample_records():
    """Normalized records ready to store."""
    return [
        LocationCreate(
            name="Tiny Tots Yard",
            type=LocationType.PLAYGROUND,
            latitude=37.77,
            longitude=-122.42,
            osm_id="node/1001",
        ),
        LocationCreate(
            name="Museum",
            type=LocationType.MUSEUM,
            latitude=37.80,
            longitude=-122.41,
            osm_id="way/2002",
        ),
        LocationCreate(
            name="Golden Gate Park",
            type=LocationType.PARK,
            latitude=37.7694,
            longitude=-122.4862,
            osm_id="relation/3003",
        ),
    ]


@pytest.fixture
def store():
    """Empty location store."""
    return LocationStore()


@pytest.fixture
def populated_store(store, sample_records):
    """Store holding the sample records."""
    store.replace_all(sample_records)
    return store


@pytest.fixture
def overpass_factory():
    """Build an OverpassService whose HTTP traffic goes to a handler function.

    The handler receives the ``httpx.Request`` and the decoded query text and
    returns an ``httpx.Response`` (or raises an ``httpx`` transport error).
    Every query seen is appended to ``service.queries``.
    """

    def _factory(handler):
        queries = []

        def _transport_handler(request: httpx.Request) -> httpx.Response:
            form = parse_qs(request.content.decode())
            query = form.get("data", [""])[0]
            queries.append(query)
            return handler(request, query)

        client = httpx.AsyncClient(transport=httpx.MockTransport(_transport_handler))
        service = OverpassService(OVERPASS_URL, client=client)
        service.queries = queries
        return service

    return _factory
