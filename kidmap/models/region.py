"""Geographic region models."""

from pydantic import BaseModel, Field


class BoundingBox(BaseModel):
    """Geographic bounding box for the map region."""

    north: float = Field(..., ge=-90, le=90, description="Northern latitude boundary")
    south: float = Field(..., ge=-90, le=90, description="Southern latitude boundary")
    east: float = Field(..., ge=-180, le=180, description="Eastern longitude boundary")
    west: float = Field(..., ge=-180, le=180, description="Western longitude boundary")

    def to_overpass(self) -> str:
        """Render as an Overpass QL bbox: ``south,west,north,east``."""
        return f"{self.south},{self.west},{self.north},{self.east}"


# Region served by the map
SAN_FRANCISCO = BoundingBox(
    south=37.7049,
    west=-122.5161,
    north=37.8199,
    east=-122.3555,
)
