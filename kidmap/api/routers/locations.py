"""Location endpoints."""

import logging
from typing import Optional

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from ...models.location import LOCATION_TYPES, Location, parse_location_type
from ...services.location_store import LocationStore
from ...services.overpass_service import OverpassError
from ...services.refresh_service import RefreshResult, RefreshService
from ..dependencies import get_refresh_service, get_store
from ..schemas import ErrorResponse, LocationStats, LocationTypeInfo

logger = logging.getLogger(__name__)

router = APIRouter()

_ERROR_RESPONSES = {500: {"model": ErrorResponse}}


def error_response(status_code: int, message: str, error: Optional[str] = None) -> JSONResponse:
    """Build a JSON error body in the shape clients expect."""
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(message=message, error=error).model_dump(exclude_none=True),
    )


@router.get("", response_model=list[Location], responses=_ERROR_RESPONSES)
async def list_locations(store: LocationStore = Depends(get_store)):
    """List every stored location."""
    try:
        return store.get_locations()
    except Exception:
        logger.exception("Error fetching locations")
        return error_response(500, "Failed to fetch locations")


@router.get("/types", response_model=list[LocationTypeInfo])
async def list_location_types():
    """List the registered location types with their display attributes."""
    return [
        LocationTypeInfo.from_config(location_type, config)
        for location_type, config in LOCATION_TYPES.items()
    ]


@router.get("/stats", response_model=LocationStats, responses=_ERROR_RESPONSES)
async def location_stats(store: LocationStore = Depends(get_store)):
    """Count stored locations per type."""
    try:
        counts = store.count_by_type()
    except Exception:
        logger.exception("Error counting locations")
        return error_response(500, "Failed to fetch locations")
    return LocationStats(total=sum(counts.values()), counts=counts)


@router.get(
    "/type/{location_type}",
    response_model=list[Location],
    responses={400: {"model": ErrorResponse}, **_ERROR_RESPONSES},
)
async def list_locations_by_type(location_type: str, store: LocationStore = Depends(get_store)):
    """List stored locations of one type."""
    parsed = parse_location_type(location_type)
    if parsed is None:
        return error_response(400, "Invalid location type")

    try:
        return store.get_locations_by_type(parsed)
    except Exception:
        logger.exception("Error fetching locations of type %s", location_type)
        return error_response(500, "Failed to fetch locations")


@router.get(
    "/osm/{osm_type}/{osm_id}",
    response_model=Location,
    responses={404: {"model": ErrorResponse}},
)
async def get_location_by_osm_id(
    osm_type: str,
    osm_id: str,
    store: LocationStore = Depends(get_store),
):
    """Look up a stored location by its OpenStreetMap element."""
    location = store.get_location_by_osm_id(f"{osm_type}/{osm_id}")
    if location is None:
        return error_response(404, "Location not found")
    return location


@router.post("/refresh", response_model=RefreshResult, responses=_ERROR_RESPONSES)
async def refresh_locations(service: RefreshService = Depends(get_refresh_service)):
    """Replace the stored locations with fresh OpenStreetMap data."""
    try:
        result = await service.refresh()
    except OverpassError as exc:
        logger.error("Error refreshing locations: %s", exc)
        return error_response(500, "Failed to refresh location data", str(exc))
    except Exception as exc:
        logger.exception("Unexpected error refreshing locations")
        return error_response(500, "Failed to refresh location data", str(exc) or "Unknown error")

    return result
