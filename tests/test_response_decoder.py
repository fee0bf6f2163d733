"""Tests for the response decoder."""

import pytest

from mvg_client.domain.errors import DecodeError
from mvg_client.domain.models import DepartureInfo, GlobalId, Line, Location, Station
from mvg_client.domain.response_decoder import ResponseDecoder
from tests.fakes import LINES_PAYLOAD, STATION_PAYLOAD, to_body


class TestSuccessfulDecoding:
    """Tests for bodies with the expected top-level shape."""

    def test_station_list_example(self) -> None:
        """Given the stations example body, when decoding, then one full Station is returned."""
        body = (
            b'[{"abbreviation":"KA","divaId":1,"id":"de:09162:1","latitude":48.13951,'
            b'"longitude":11.56613,"name":"Karlsplatz (Stachus)","place":"M\xc3\xbcnchen",'
            b'"products":["UBAHN","BUS","TRAM","SBAHN"],"tariffZones":"m"}]'
        )

        stations = ResponseDecoder.decode(body, list[Station])

        assert stations == [Station.model_validate(STATION_PAYLOAD)]
        assert stations[0].place == "München"

    def test_order_and_length_are_preserved(self) -> None:
        """Given several lines, when decoding, then order and length match the body."""
        lines = ResponseDecoder.decode(to_body(LINES_PAYLOAD), list[Line])

        assert [line.name for line in lines] == ["N19", "N20", "12"]
        assert [line.line_number for line in lines] == [-1, -1, 2012]

    def test_empty_objects_are_not_dropped(self) -> None:
        """Given empty objects in the array, when decoding, then each yields an empty record."""
        locations = ResponseDecoder.decode(b"[{}, {\"name\": \"Marienplatz\"}, {}]", list[Location])

        assert len(locations) == 3
        assert locations[0] == Location()
        assert locations[1].name == "Marienplatz"
        assert locations[2] == Location()

    def test_empty_array(self) -> None:
        """Given an empty array, when decoding, then an empty list is returned."""
        assert ResponseDecoder.decode(b"[]", list[DepartureInfo]) == []

    def test_partial_and_mistyped_fields(self) -> None:
        """Given partial and mistyped fields, when decoding, then only those fields are None."""
        body = to_body([{"label": "U3", "delayInMinutes": "late", "platform": -2, "sev": None}])

        (departure,) = ResponseDecoder.decode(body, list[DepartureInfo])

        assert departure.label == "U3"
        assert departure.delay_in_minutes is None
        assert departure.platform is None
        assert departure.sev is None

    def test_negative_delay(self) -> None:
        """Given delayInMinutes -3, when decoding, then the delay is -3."""
        (departure,) = ResponseDecoder.decode(
            to_body([{"delayInMinutes": -3}]), list[DepartureInfo]
        )

        assert departure.delay_in_minutes == -3

    def test_global_ids(self) -> None:
        """Given an array of strings, when decoding global ids, then the strings are returned."""
        ids = ResponseDecoder.decode(b'["de:09162:1", "de:09162:9029"]', list[GlobalId])

        assert ids == ["de:09162:1", "de:09162:9029"]

    def test_str_body_is_accepted(self) -> None:
        """Given a text body, when decoding, then it is parsed like bytes."""
        lines = ResponseDecoder.decode('[{"name": "12"}]', list[Line])

        assert lines == [Line(name="12")]

    def test_snake_case_keys_are_ignored(self) -> None:
        """Given snake_case keys in the body, when decoding, then they do not fill fields."""
        body = b'[{"diva_id": 5, "tariff_zones": "x", "divaId": 7, "name": "Stachus"}]'

        (station,) = ResponseDecoder.decode(body, list[Station])

        assert station.diva_id == 7
        assert station.tariff_zones is None
        assert station.name == "Stachus"

    def test_snake_case_only_record_is_empty(self) -> None:
        """Given only snake_case keys, when decoding, then the record has all fields None."""
        (station,) = ResponseDecoder.decode(b'[{"diva_id": 5}]', list[Station])

        assert station == Station()
        assert station.diva_id is None


class TestDecodeErrors:
    """Tests for bodies that cannot be interpreted."""

    @pytest.mark.parametrize("body", [b"", b"not json", b"[{\"name\": ", b"<html></html>"])
    def test_invalid_json_raises_decode_error(self, body: bytes) -> None:
        """Given a body that is not JSON, when decoding, then DecodeError is raised."""
        with pytest.raises(DecodeError, match="not valid JSON"):
            ResponseDecoder.decode(body, list[Station])

    @pytest.mark.parametrize(
        "body",
        [b'[{"latitude": NaN}]', b'[{"longitude": Infinity}]', b'[{"latitude": -Infinity}]'],
    )
    def test_non_finite_numbers_raise_decode_error(self, body: bytes) -> None:
        """Given NaN or Infinity tokens, when decoding, then DecodeError is raised."""
        with pytest.raises(DecodeError, match="not valid JSON"):
            ResponseDecoder.decode(body, list[Station])

    def test_single_object_instead_of_array_raises(self) -> None:
        """Given a single object, when decoding a list shape, then DecodeError is raised."""
        with pytest.raises(DecodeError, match="Unexpected response shape"):
            ResponseDecoder.decode(to_body(STATION_PAYLOAD), list[Station])

    @pytest.mark.parametrize("body", [b"[1]", b"[null]", b'["de:09162:1"]', b"[[]]"])
    def test_non_object_element_raises(self, body: bytes) -> None:
        """Given an array element that is not an object, when decoding, then DecodeError is raised."""
        with pytest.raises(DecodeError):
            ResponseDecoder.decode(body, list[Station])

    def test_non_string_global_id_raises(self) -> None:
        """Given a number in the global id array, when decoding, then DecodeError is raised."""
        with pytest.raises(DecodeError):
            ResponseDecoder.decode(b'["de:09162:1", 2]', list[GlobalId])

    def test_error_carries_url_and_excerpt(self) -> None:
        """Given an invalid body, when decoding, then the error carries URL and body excerpt."""
        body = b"Service temporarily unavailable" + b"!" * 500

        with pytest.raises(DecodeError) as exc_info:
            ResponseDecoder.decode(body, list[Line], "https://www.mvg.de/.rest/zdm/lines")

        assert exc_info.value.url == "https://www.mvg.de/.rest/zdm/lines"
        assert exc_info.value.body_excerpt.startswith("Service temporarily unavailable")
        assert len(exc_info.value.body_excerpt) == 200
        assert exc_info.value.__cause__ is not None
