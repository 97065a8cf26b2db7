"""Normalization of raw Overpass elements into location records."""

import math
from typing import Any, Iterable, Mapping, Optional

from ..models.location import LOCATION_TYPES, LocationCreate, classify_tags

# Used when an element carries no address tags
DEFAULT_ADDRESS = "San Francisco, CA"

_ADDRESS_TAGS = ("addr:housenumber", "addr:street", "addr:city")


def normalize_element(element: Mapping[str, Any]) -> Optional[LocationCreate]:
    """Convert one Overpass element into a LocationCreate.

    The element is the JSON object Overpass returns for ``out center``:
    nodes carry ``lat``/``lon`` directly, ways and relations carry a
    ``center`` object. Elements whose tags match no registered location
    type, or whose coordinates cannot be resolved, yield ``None``.

    This function never raises and has no side effects.

    Args:
        element: Raw Overpass element (``type``, ``id``, ``tags``, coordinates)

    Returns:
        The normalized record, or None if the element is not applicable.
    """
    tags = element.get("tags") or {}
    if not isinstance(tags, Mapping):
        return None

    location_type = classify_tags(tags)
    if location_type is None:
        return None

    coordinates = _resolve_coordinates(element)
    if coordinates is None:
        return None
    latitude, longitude = coordinates

    config = LOCATION_TYPES[location_type]

    name = tags.get("name")
    if not isinstance(name, str) or not name.strip():
        name = config.singular_name

    return LocationCreate(
        name=name,
        type=location_type,
        latitude=latitude,
        longitude=longitude,
        address=_format_address(tags),
        website=_tag_text(tags, "website") or _tag_text(tags, "url"),
        phone=_tag_text(tags, "phone"),
        opening_hours=_tag_text(tags, "opening_hours"),
        tags={str(key): value for key, value in tags.items()},
        osm_id=f"{element.get('type')}/{element.get('id')}",
    )


def normalize_elements(
    elements: Iterable[Mapping[str, Any]],
) -> tuple[list[LocationCreate], int]:
    """Normalize a batch of elements independently.

    Returns:
        Tuple of (normalized records in input order, number of skipped elements)
    """
    records: list[LocationCreate] = []
    skipped = 0
    for element in elements:
        record = normalize_element(element) if isinstance(element, Mapping) else None
        if record is None:
            skipped += 1
        else:
            records.append(record)
    return records, skipped


def _resolve_coordinates(element: Mapping[str, Any]) -> Optional[tuple[float, float]]:
    """Pick the node position or the way/relation center."""
    if element.get("type") == "node":
        source = element
    else:
        source = element.get("center")
        if not isinstance(source, Mapping):
            return None

    latitude = _as_float(source.get("lat"))
    longitude = _as_float(source.get("lon"))
    if latitude is None or longitude is None:
        return None
    if not (-90 <= latitude <= 90 and -180 <= longitude <= 180):
        return None
    return latitude, longitude


def _as_float(value: Any) -> Optional[float]:
    # bool is an int subclass; Overpass never sends it as a coordinate
    if value is None or isinstance(value, bool):
        return None
    try:
        result = float(value)
    except (TypeError, ValueError):
        return None
    if math.isnan(result) or math.isinf(result):
        return None
    return result


def _format_address(tags: Mapping[str, Any]) -> str:
    parts = [str(tags[key]) for key in _ADDRESS_TAGS if tags.get(key)]
    return " ".join(parts) if parts else DEFAULT_ADDRESS


def _tag_text(tags: Mapping[str, Any], key: str) -> Optional[str]:
    value = tags.get(key)
    if value is None or value == "":
        return None
    return str(value)
