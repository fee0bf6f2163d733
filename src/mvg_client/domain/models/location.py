"""Location domain model."""

from mvg_client.domain.models.api_record import ApiRecord, Int32, UInt32
from mvg_client.domain.models.station import GlobalId


class Location(ApiRecord):
    """Represents a location returned by the location and nearby searches.

    Example entry of the location endpoint::

        {"aliases": "Stachus Bf. Bahnhof Muenchen Munchen KA", "divaId": 1,
         "globalId": "de:09162:1", "hasZoomData": true,
         "latitude": 48.13951, "longitude": 11.56613,
         "name": "Karlsplatz (Stachus)", "place": "München",
         "surroundingPlanLink": "KA", "tariffZones": "m",
         "transportTypes": ["UBAHN", "BUS", "TRAM", "SBAHN"], "type": "STATION"}
    """

    aliases: str | None = None
    distance_in_meters: Int32 | None = None  # only set by the nearby search
    diva_id: UInt32 | None = None
    global_id: GlobalId | None = None
    has_zoom_data: bool | None = None
    latitude: float | None = None
    longitude: float | None = None
    name: str | None = None
    place: str | None = None
    surrounding_plan_link: str | None = None
    tariff_zones: str | None = None
    transport_types: list[str] | None = None
    type: str | None = None
