"""Station domain model."""

from typing import TypeAlias

from mvg_client.domain.models.api_record import ApiRecord, UInt32

# Global station id of the form "<country>:<diva-region>:<diva-id>", e.g. "de:09162:1"
GlobalId: TypeAlias = str


class Station(ApiRecord):
    """Represents an MVG station ("Haltestelle").

    Example entry of the stations endpoint::

        {"abbreviation": "KA", "divaId": 1, "id": "de:09162:1",
         "latitude": 48.13951, "longitude": 11.56613,
         "name": "Karlsplatz (Stachus)", "place": "München",
         "products": ["UBAHN", "BUS", "TRAM", "SBAHN"], "tariffZones": "m"}
    """

    abbreviation: str | None = None
    diva_id: UInt32 | None = None
    id: GlobalId | None = None
    latitude: float | None = None
    longitude: float | None = None
    name: str | None = None
    place: str | None = None
    products: list[str] | None = None
    tariff_zones: str | None = None  # may be a range such as "1|2"
