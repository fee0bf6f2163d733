"""Domain models for the MVG API."""

from mvg_client.domain.models.api_record import ApiRecord
from mvg_client.domain.models.departure_info import DepartureInfo
from mvg_client.domain.models.error_details import ErrorDetails
from mvg_client.domain.models.line import Line
from mvg_client.domain.models.location import Location
from mvg_client.domain.models.station import GlobalId, Station

__all__ = [
    "ApiRecord",
    "DepartureInfo",
    "ErrorDetails",
    "GlobalId",
    "Line",
    "Location",
    "Station",
]
