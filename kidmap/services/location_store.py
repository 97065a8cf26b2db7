"""In-memory storage for normalized locations."""

import logging
from typing import Iterable, Optional

from ..models.location import LOCATION_TYPES, Location, LocationCreate, LocationType

logger = logging.getLogger(__name__)


class LocationStore:
    """Holds the current location collection for the lifetime of the process.

    None of the methods await, so on a single event loop each call, including
    ``replace_all``, runs to completion before any other request sees the store.
    Ids restart from 1 whenever the store is cleared.
    """

    def __init__(self):
        self._locations: dict[int, Location] = {}
        self._current_id = 1

    def __len__(self) -> int:
        return len(self._locations)

    def get_locations(self) -> list[Location]:
        """Return a snapshot of every stored location."""
        return list(self._locations.values())

    def get_locations_by_type(self, location_type: LocationType) -> list[Location]:
        """Return the stored locations of one type."""
        return [
            location
            for location in self._locations.values()
            if location.type == location_type
        ]

    def get_location_by_osm_id(self, osm_id: str) -> Optional[Location]:
        """Find a location by its OpenStreetMap identifier."""
        for location in self._locations.values():
            if location.osm_id == osm_id:
                return location
        return None

    def create_location(self, record: LocationCreate) -> Location:
        """Store one record under the next id."""
        location = Location.from_create(self._current_id, record)
        self._locations[location.id] = location
        self._current_id += 1
        return location

    def create_locations(self, records: Iterable[LocationCreate]) -> list[Location]:
        """Store records in order, returning the stored locations."""
        return [self.create_location(record) for record in records]

    def clear_locations(self) -> None:
        """Remove every location and reset id assignment."""
        self._locations.clear()
        self._current_id = 1

    def replace_all(self, records: Iterable[LocationCreate]) -> list[Location]:
        """Discard the current collection and store ``records`` with ids from 1."""
        records = list(records)
        self.clear_locations()
        stored = self.create_locations(records)
        logger.debug("Replaced store contents with %d locations", len(stored))
        return stored

    def count_by_type(self) -> dict[LocationType, int]:
        """Count stored locations per registered type (zeros included)."""
        counts = {location_type: 0 for location_type in LOCATION_TYPES}
        for location in self._locations.values():
            counts[location.type] += 1
        return counts
