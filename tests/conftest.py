"""Shared fixtures for MVG client tests."""

from typing import Any

import pytest

from mvg_client.domain.errors import TransportError
from mvg_client.domain.models import ErrorDetails
from tests.fakes import DEPARTURE_PAYLOAD, LOCATION_PAYLOAD, STATION_PAYLOAD


@pytest.fixture
def station_payload() -> dict[str, Any]:
    return dict(STATION_PAYLOAD)


@pytest.fixture
def departure_payload() -> dict[str, Any]:
    return dict(DEPARTURE_PAYLOAD)


@pytest.fixture
def location_payload() -> dict[str, Any]:
    return dict(LOCATION_PAYLOAD)


@pytest.fixture
def transport_error() -> TransportError:
    return TransportError(
        ErrorDetails(status_code=503, reason="Service Unavailable"),
        "https://www.mvg.de/.rest/zdm/stations",
    )
