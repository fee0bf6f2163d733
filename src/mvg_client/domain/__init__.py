"""Domain layer - records, errors and ports."""

from mvg_client.domain.errors import DecodeError, MvgApiError, TransportError
from mvg_client.domain.models import (
    DepartureInfo,
    ErrorDetails,
    GlobalId,
    Line,
    Location,
    Station,
)
from mvg_client.domain.ports import HttpTransport

__all__ = [
    "DecodeError",
    "DepartureInfo",
    "ErrorDetails",
    "GlobalId",
    "HttpTransport",
    "Line",
    "Location",
    "MvgApiError",
    "Station",
    "TransportError",
]
