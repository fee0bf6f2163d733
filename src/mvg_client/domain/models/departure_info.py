"""Departure info domain model."""

from datetime import datetime
from zoneinfo import ZoneInfo

from mvg_client.domain.models.api_record import ApiRecord, Int32, Int64, UInt32

MVG_TIMEZONE = ZoneInfo("Europe/Berlin")


def _from_epoch_millis(value: int | None) -> datetime | None:
    if value is None:
        return None
    try:
        return datetime.fromtimestamp(value / 1000, tz=MVG_TIMEZONE)
    except (OverflowError, ValueError, OSError):
        # Outside the range datetime can represent
        return None


class DepartureInfo(ApiRecord):
    """Represents information about an upcoming departure.

    Example entry of the departure endpoint::

        {"bannerHash": "", "cancelled": false, "delayInMinutes": 2,
         "destination": "Ebersberg", "divaId": "92M06", "label": "S6",
         "messages": [], "network": "ddb", "occupancy": "UNKNOWN",
         "plannedDepartureTime": 1708433340000, "platform": 1,
         "platformChanged": false, "realtime": true,
         "realtimeDepartureTime": 1708433460000, "sev": false,
         "stopPointGlobalId": "", "trainType": "", "transportType": "SBAHN"}

    Note that divaId is a string here while Station.divaId is numeric.
    """

    banner_hash: str | None = None  # empty string means no banner
    cancelled: bool | None = None
    delay_in_minutes: Int32 | None = None  # negative when early
    destination: str | None = None
    diva_id: str | None = None
    label: str | None = None
    messages: list[str] | None = None
    network: str | None = None
    occupancy: str | None = None
    planned_departure_time: Int64 | None = None  # Unix milliseconds
    platform: UInt32 | None = None
    platform_changed: bool | None = None
    realtime: bool | None = None
    realtime_departure_time: Int64 | None = None  # Unix milliseconds
    sev: bool | None = None  # Schienenersatzverkehr (replacement service)
    stop_point_global_id: str | None = None
    stop_position_number: UInt32 | None = None
    train_type: str | None = None
    transport_type: str | None = None

    @property
    def planned_departure(self) -> datetime | None:
        """Planned departure time in Europe/Berlin."""
        return _from_epoch_millis(self.planned_departure_time)

    @property
    def realtime_departure(self) -> datetime | None:
        """Realtime departure time in Europe/Berlin."""
        return _from_epoch_millis(self.realtime_departure_time)
