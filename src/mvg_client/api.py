"""Module-level MVG API operations.

Convenience wrappers that build an MvgClientService from the environment
configuration for a single call. Pass an aiohttp session to reuse
connections across calls; the caller keeps ownership of it.
"""

from typing import TYPE_CHECKING

from mvg_client.adapters.config import ClientConfig
from mvg_client.adapters.mvg_api import MvgHttpClient
from mvg_client.application.services import MvgClientService
from mvg_client.domain.models import DepartureInfo, GlobalId, Line, Location, Station

if TYPE_CHECKING:
    from aiohttp import ClientSession


def create_service(
    session: "ClientSession | None" = None, config: ClientConfig | None = None
) -> MvgClientService:
    """Create a service backed by aiohttp and the given (or environment) configuration."""
    config = config or ClientConfig()
    transport = MvgHttpClient(
        session=session,
        user_agent=config.user_agent,
        log_requests=config.log_requests,
    )
    return MvgClientService(transport, base_url=config.base_url)


async def request_stations(session: "ClientSession | None" = None) -> list[Station]:
    """Retrieve a list of all stations."""
    return await create_service(session).request_stations()


async def request_station_global_ids(
    session: "ClientSession | None" = None,
) -> list[GlobalId]:
    """Retrieve a list of all station global ids."""
    return await create_service(session).request_station_global_ids()


async def request_lines(session: "ClientSession | None" = None) -> list[Line]:
    """Retrieve a list of all lines."""
    return await create_service(session).request_lines()


async def request_departures(
    global_id: GlobalId, session: "ClientSession | None" = None
) -> list[DepartureInfo]:
    """Retrieve upcoming departures for a station."""
    return await create_service(session).request_departures(global_id)


async def find_location(query: str, session: "ClientSession | None" = None) -> list[Location]:
    """Find a location using a query string; the first element is the best match."""
    return await create_service(session).find_location(query)


async def find_nearby_location(
    latitude: float, longitude: float, session: "ClientSession | None" = None
) -> list[Location]:
    """Find a nearby location via latitude and longitude; the first element is the best match."""
    return await create_service(session).find_nearby_location(latitude, longitude)
