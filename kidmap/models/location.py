"""Location types and normalized location records."""

from enum import Enum
from typing import Any, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field


class LocationType(str, Enum):
    """Category of kid-friendly place shown on the map.

    Declaration order is the classification priority: when an OSM element
    carries tags for several categories, the first one listed wins.
    """

    PLAYGROUND = "playground"
    PARK = "park"
    MUSEUM = "museum"
    SCIENCE_CENTER = "science_center"
    PLANETARIUM = "planetarium"


class LocationTypeConfig(BaseModel):
    """Static display and query attributes for one location type."""

    model_config = ConfigDict(frozen=True)

    query: str = Field(..., pattern=r"^[^=]+=[^=]+$", description="OSM tag predicate (key=value)")
    icon: str = Field(..., description="Icon class used by the map marker")
    color: str = Field(..., description="Marker color as a hex string")
    name: str = Field(..., min_length=2, description="Plural display label")

    @property
    def tag_key(self) -> str:
        return self.query.split("=", 1)[0]

    @property
    def tag_value(self) -> str:
        return self.query.split("=", 1)[1]

    @property
    def singular_name(self) -> str:
        """Display label with the trailing plural marker removed ("Parks" -> "Park")."""
        return self.name[:-1]


LOCATION_TYPES: dict[LocationType, LocationTypeConfig] = {
    LocationType.PLAYGROUND: LocationTypeConfig(
        query="leisure=playground",
        icon="fas fa-child",
        color="#E91E63",
        name="Playgrounds",
    ),
    LocationType.PARK: LocationTypeConfig(
        query="leisure=park",
        icon="fas fa-tree",
        color="#4CAF50",
        name="Parks",
    ),
    LocationType.MUSEUM: LocationTypeConfig(
        query="tourism=museum",
        icon="fas fa-university",
        color="#9C27B0",
        name="Museums",
    ),
    LocationType.SCIENCE_CENTER: LocationTypeConfig(
        query="amenity=science_center",
        icon="fas fa-flask",
        color="#F44336",
        name="Science Centers",
    ),
    LocationType.PLANETARIUM: LocationTypeConfig(
        query="amenity=planetarium",
        icon="fas fa-globe",
        color="#3F51B5",
        name="Planetariums",
    ),
}

# (tag key, tag value, type) in priority order
TYPE_PREDICATES: list[tuple[str, str, LocationType]] = [
    (config.tag_key, config.tag_value, location_type)
    for location_type, config in LOCATION_TYPES.items()
]


def classify_tags(tags: Mapping[str, Any]) -> Optional[LocationType]:
    """Return the first location type whose predicate the tags satisfy."""
    for key, value, location_type in TYPE_PREDICATES:
        if tags.get(key) == value:
            return location_type
    return None


def parse_location_type(value: str) -> Optional[LocationType]:
    """Parse a raw string into a LocationType, or None if it is not registered."""
    try:
        return LocationType(value)
    except ValueError:
        return None


class LocationCreate(BaseModel):
    """A normalized location that has not been stored yet (no id)."""

    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(..., min_length=1, description="Display name")
    type: LocationType = Field(..., description="Location category")
    latitude: float = Field(..., ge=-90, le=90, description="Latitude coordinate")
    longitude: float = Field(..., ge=-180, le=180, description="Longitude coordinate")

    address: Optional[str] = Field(default=None, description="Formatted street address")
    website: Optional[str] = Field(default=None, description="Website URL")
    phone: Optional[str] = Field(default=None, description="Phone number")
    opening_hours: Optional[str] = Field(
        default=None,
        alias="openingHours",
        description="OSM opening_hours value",
    )

    tags: Optional[dict[str, Any]] = Field(
        default=None,
        description="Raw OSM tags, kept for downstream use",
    )
    osm_id: Optional[str] = Field(
        default=None,
        alias="osmId",
        description="OpenStreetMap identifier ('node/123', 'way/456')",
    )


class Location(LocationCreate):
    """A stored location with its process-local id."""

    id: int = Field(..., ge=1, description="Store-assigned id")

    @classmethod
    def from_create(cls, location_id: int, record: LocationCreate) -> "Location":
        """Attach an id to a normalized record."""
        return cls(id=location_id, **record.model_dump())
