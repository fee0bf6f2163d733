"""Line domain model."""

from mvg_client.domain.models.api_record import ApiRecord, Int32


class Line(ApiRecord):
    """Represents an MVG line, e.g. {"lineNumber": 2012, "name": "12", "product": "TRAM"}."""

    line_number: Int32 | None = None  # -1 for night lines without an assigned number
    name: str | None = None
    product: str | None = None
