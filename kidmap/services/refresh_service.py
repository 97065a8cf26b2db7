"""Refresh of the location store from OpenStreetMap."""

import logging

from pydantic import BaseModel

from ..models.location import Location
from ..models.region import SAN_FRANCISCO, BoundingBox
from .location_store import LocationStore
from .normalizer import normalize_elements
from .overpass_service import DEFAULT_QUERY_TIMEOUT, OverpassService, build_overpass_query

logger = logging.getLogger(__name__)


class RefreshResult(BaseModel):
    """Summary of a successful refresh."""

    message: str
    count: int
    locations: list[Location]
    skipped: int = 0


class RefreshService:
    """Fetches OSM elements and replaces the store contents with them."""

    def __init__(
        self,
        store: LocationStore,
        overpass: OverpassService,
        bbox: BoundingBox = SAN_FRANCISCO,
        query_timeout: int = DEFAULT_QUERY_TIMEOUT,
    ):
        self.store = store
        self.overpass = overpass
        self.bbox = bbox
        self.query_timeout = query_timeout

    async def refresh(self) -> RefreshResult:
        """
        Run one full refresh cycle.

        The store is only modified after the fetch has succeeded, so a
        failed refresh leaves the previous collection in place.

        Returns:
            RefreshResult with the stored locations

        Raises:
            OverpassError: If the Overpass request fails
        """
        query = build_overpass_query(self.bbox, timeout=self.query_timeout)
        elements = await self.overpass.fetch_elements(query)

        records, skipped = normalize_elements(elements)
        locations = self.store.replace_all(records)

        logger.info(
            "Refreshed locations: %d stored, %d elements skipped",
            len(locations),
            skipped,
        )
        return RefreshResult(
            message=f"Successfully loaded {len(locations)} locations",
            count=len(locations),
            locations=locations,
            skipped=skipped,
        )
