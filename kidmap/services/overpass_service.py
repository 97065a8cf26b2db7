"""Overpass API query building and fetching."""

import logging
from typing import Any, Mapping, Optional

import httpx

from ..models.location import LOCATION_TYPES, LocationType, LocationTypeConfig
from ..models.region import SAN_FRANCISCO, BoundingBox

logger = logging.getLogger(__name__)

DEFAULT_QUERY_TIMEOUT = 90


class OverpassError(Exception):
    """Raised when the Overpass API cannot deliver a usable response."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


def build_overpass_query(
    bbox: BoundingBox = SAN_FRANCISCO,
    location_types: Mapping[LocationType, LocationTypeConfig] = LOCATION_TYPES,
    timeout: int = DEFAULT_QUERY_TIMEOUT,
) -> str:
    """
    Build one Overpass QL query covering every registered location type.

    Each type contributes node, way and relation statements restricted to
    the bounding box; ``out center`` makes Overpass attach a centroid to
    ways and relations.

    Args:
        bbox: Region to search
        location_types: Registry of types to include, in output order
        timeout: Server-side timeout hint in seconds

    Returns:
        Query text, identical for identical inputs
    """
    area = bbox.to_overpass()

    statements = []
    for config in location_types.values():
        for element_kind in ("node", "way", "relation"):
            statements.append(f"  {element_kind}[{config.query}]({area});")

    lines = [
        f"[out:json][timeout:{timeout}][bbox:{area}];",
        "(",
        *statements,
        ");",
        "out center;",
    ]
    return "\n".join(lines) + "\n"


class OverpassService:
    """Client for the Overpass API interpreter endpoint."""

    def __init__(
        self,
        api_url: str,
        timeout: float = 120.0,
        client: Optional[httpx.AsyncClient] = None,
    ):
        """
        Initialize Overpass service.

        Args:
            api_url: Interpreter endpoint URL
            timeout: Client-side request timeout in seconds
            client: Optional pre-built client (the service will not close it)
        """
        self.api_url = api_url
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=timeout)

    async def fetch_elements(self, query: str) -> list[dict[str, Any]]:
        """
        POST a query and return the ``elements`` array of the response.

        Args:
            query: Overpass QL query text

        Returns:
            Raw elements; empty list when the response has no ``elements``

        Raises:
            OverpassError: On transport failure, non-success status or a
                malformed response body
        """
        logger.info("Querying Overpass API at %s", self.api_url)
        try:
            response = await self._client.post(self.api_url, data={"data": query})
        except httpx.HTTPError as exc:
            raise OverpassError(f"Overpass API request failed: {exc}") from exc

        if response.status_code >= 400:
            raise OverpassError(
                f"Overpass API error: {response.status_code}",
                status_code=response.status_code,
            )

        try:
            payload = response.json()
        except ValueError as exc:
            raise OverpassError("Overpass API returned invalid JSON") from exc

        if not isinstance(payload, dict):
            raise OverpassError("Overpass API returned an unexpected payload")

        elements = payload.get("elements")
        if elements is None:
            return []
        if not isinstance(elements, list):
            raise OverpassError("Overpass API 'elements' field is not a list")

        logger.info("Overpass API returned %d elements", len(elements))
        return elements

    async def aclose(self) -> None:
        """Close the underlying HTTP client if this service created it."""
        if self._owns_client:
            await self._client.aclose()
