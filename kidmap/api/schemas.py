"""API request/response models."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from ..models.location import LocationType, LocationTypeConfig
from ..models.region import BoundingBox


# =============================================================================
# Location Schemas
# =============================================================================


class LocationTypeInfo(BaseModel):
    """Registry entry for one location type, for map legends and filters."""

    model_config = ConfigDict(populate_by_name=True)

    type: LocationType
    name: str
    singular_name: str = Field(..., alias="singularName")
    icon: str
    color: str
    query: str

    @classmethod
    def from_config(cls, location_type: LocationType, config: LocationTypeConfig) -> "LocationTypeInfo":
        """Create from a registry entry."""
        return cls(
            type=location_type,
            name=config.name,
            singular_name=config.singular_name,
            icon=config.icon,
            color=config.color,
            query=config.query,
        )


class LocationStats(BaseModel):
    """Per-type counts of stored locations."""

    total: int
    counts: dict[LocationType, int]


# =============================================================================
# Common Response Schemas
# =============================================================================


class ErrorResponse(BaseModel):
    """Error response."""

    message: str
    error: Optional[str] = None


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    version: str


class ConfigResponse(BaseModel):
    """Non-sensitive configuration summary."""

    overpass_url: str
    http_timeout: float
    query_timeout: int
    region: BoundingBox
