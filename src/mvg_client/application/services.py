"""Application services (use cases) for querying the MVG API."""

import logging
from typing import TYPE_CHECKING, Any

from mvg_client.domain.endpoints import (
    DEPARTURES,
    LINES,
    LOCATION,
    MVG_BASE_URL,
    STATION_GLOBAL_IDS,
    STATION_NEARBY,
    STATIONS,
    Endpoint,
)
from mvg_client.domain.models import DepartureInfo, GlobalId, Line, Location, Station
from mvg_client.domain.response_decoder import ResponseDecoder

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from mvg_client.domain.ports import HttpTransport


class MvgClientService:
    """Service exposing the MVG API operations as typed coroutines.

    Each operation builds the endpoint URL, performs one GET through the
    transport and decodes the body. The service keeps no state between calls,
    so operations may be awaited concurrently.
    """

    def __init__(self, transport: "HttpTransport", base_url: str = MVG_BASE_URL) -> None:
        """Initialize with a transport and the API base URL."""
        self._transport = transport
        self._base_url = base_url

    async def _request(self, endpoint: Endpoint, **params: Any) -> Any:
        url = endpoint.build_url(self._base_url, **params)
        logger.debug(f"Requesting {endpoint.name}: {url}")
        body = await self._transport.get(url)
        return ResponseDecoder.decode(body, endpoint.response_shape, url)

    async def request_stations(self) -> list[Station]:
        """Retrieve a list of all stations."""
        return await self._request(STATIONS)

    async def request_station_global_ids(self) -> list[GlobalId]:
        """Retrieve a list of all station global ids."""
        return await self._request(STATION_GLOBAL_IDS)

    async def request_lines(self) -> list[Line]:
        """Retrieve a list of all lines."""
        return await self._request(LINES)

    async def request_departures(self, global_id: GlobalId) -> list[DepartureInfo]:
        """Retrieve upcoming departures for a station.

        Args:
            global_id: Station global id, e.g. "de:09162:1". Passed through unchecked.
        """
        return await self._request(DEPARTURES, globalId=global_id)

    async def find_location(self, query: str) -> list[Location]:
        """Find a location using a query string.

        Returns a list of locations, where the first element is the best match.
        """
        return await self._request(LOCATION, query=query)

    async def find_nearby_location(self, latitude: float, longitude: float) -> list[Location]:
        """Find a nearby location via latitude and longitude.

        Returns a list of locations, where the first element is the best match.
        """
        return await self._request(STATION_NEARBY, latitude=latitude, longitude=longitude)
