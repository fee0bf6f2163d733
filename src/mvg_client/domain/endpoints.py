"""Endpoint bindings for the MVG API.

Each binding maps a logical operation to a URL path, the query parameters it
requires and the shape its JSON response is decoded into. Paths are resolved
against a configurable base URL.
"""

from dataclasses import dataclass
from typing import Any

from yarl import URL

from mvg_client.domain.models import DepartureInfo, GlobalId, Line, Location, Station

MVG_BASE_URL = "https://www.mvg.de"


@dataclass(frozen=True)
class Endpoint:
    """A single MVG API endpoint."""

    name: str
    path: str
    params: tuple[str, ...]
    response_shape: Any

    def build_url(self, base_url: str = MVG_BASE_URL, **params: Any) -> str:
        """Build the request URL, percent-encoding the query parameters.

        Parameters are only checked for presence; their content is passed
        through verbatim.

        Raises:
            ValueError: If a required parameter is missing or an unknown one is given.
        """
        missing = [name for name in self.params if params.get(name) is None]
        if missing:
            raise ValueError(f"Endpoint '{self.name}' requires parameter(s): {', '.join(missing)}")
        unexpected = sorted(set(params) - set(self.params))
        if unexpected:
            raise ValueError(
                f"Endpoint '{self.name}' does not accept parameter(s): {', '.join(unexpected)}"
            )

        url = URL(base_url.rstrip("/") + self.path)
        if self.params:
            url = url.with_query({name: str(params[name]) for name in self.params})
        return str(url)


# ZDM endpoints return the full network data set
STATIONS = Endpoint("stations", "/.rest/zdm/stations", (), list[Station])
STATION_GLOBAL_IDS = Endpoint(
    "station_global_ids", "/.rest/zdm/mvgStationGlobalIds", (), list[GlobalId]
)
LINES = Endpoint("lines", "/.rest/zdm/lines", (), list[Line])

# FIB endpoints are queried per station or search term
DEPARTURES = Endpoint(
    "departures", "/api/fib/v2/departure", ("globalId",), list[DepartureInfo]
)
LOCATION = Endpoint("location", "/api/fib/v2/location", ("query",), list[Location])
STATION_NEARBY = Endpoint(
    "station_nearby", "/api/fib/v2/station/nearby", ("latitude", "longitude"), list[Location]
)
