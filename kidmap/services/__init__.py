"""Location services."""

from .location_store import LocationStore
from .normalizer import DEFAULT_ADDRESS, normalize_element, normalize_elements
from .overpass_service import OverpassError, OverpassService, build_overpass_query
from .refresh_service import RefreshResult, RefreshService

__all__ = [
    "LocationStore",
    "DEFAULT_ADDRESS",
    "normalize_element",
    "normalize_elements",
    "OverpassError",
    "OverpassService",
    "build_overpass_query",
    "RefreshResult",
    "RefreshService",
]
