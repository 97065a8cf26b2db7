"""Data models for the kid-friendly places map."""

from .location import (
    LOCATION_TYPES,
    TYPE_PREDICATES,
    Location,
    LocationCreate,
    LocationType,
    LocationTypeConfig,
    classify_tags,
    parse_location_type,
)
from .region import SAN_FRANCISCO, BoundingBox

__all__ = [
    "LOCATION_TYPES",
    "TYPE_PREDICATES",
    "Location",
    "LocationCreate",
    "LocationType",
    "LocationTypeConfig",
    "classify_tags",
    "parse_location_type",
    "SAN_FRANCISCO",
    "BoundingBox",
]
