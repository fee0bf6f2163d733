"""Typed asynchronous client for the MVG (Munich public transport) API."""

from mvg_client.api import (
    create_service,
    find_location,
    find_nearby_location,
    request_departures,
    request_lines,
    request_station_global_ids,
    request_stations,
)
from mvg_client.application import MvgClientService
from mvg_client.domain import (
    DecodeError,
    DepartureInfo,
    ErrorDetails,
    GlobalId,
    Line,
    Location,
    MvgApiError,
    Station,
    TransportError,
)

__all__ = [
    "DecodeError",
    "DepartureInfo",
    "ErrorDetails",
    "GlobalId",
    "Line",
    "Location",
    "MvgApiError",
    "MvgClientService",
    "Station",
    "TransportError",
    "create_service",
    "find_location",
    "find_nearby_location",
    "request_departures",
    "request_lines",
    "request_station_global_ids",
    "request_stations",
]
