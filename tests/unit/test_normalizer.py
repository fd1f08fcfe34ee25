"""Tests for record normalization and WCA result formatting."""

from datetime import date

from app.models.records import UNKNOWN_EVENT_NAME, UNKNOWN_NAME, UNKNOWN_WCA_ID
from app.services.records import normalize
from app.services.records.events import format_clock, format_multiblind, format_result
from app.services.records.normalizer import country_of, parse_iso_date


class TestAliases:
    def test_flat_camel_case(self):
        r = normalize(
            {
                "personName": "Anna Muster",
                "personId": "2019MUST01",
                "eventId": "333",
                "single": "8.12",
                "average": "9.90",
                "competitionDate": "2024-05-02",
            }
        )
        assert r.name == "Anna Muster"
        assert r.wca_id == "2019MUST01"
        assert r.event_id == "333"
        assert r.event_name == "3x3x3 Cube"
        assert r.single == "8.12"
        assert r.average == "9.90"
        assert r.date == "2024-05-02"

    def test_nested(self):
        r = normalize(
            {
                "person": {"name": "Beat Beispiel", "wca_id": "2015BEIS01"},
                "event": {"id": "pyram", "name": "Pyraminx"},
                "single": {"best": 250},
                "average": {"best": 412},
                "competition": {"start_date": "2024-04-30"},
            }
        )
        assert r.name == "Beat Beispiel"
        assert r.wca_id == "2015BEIS01"
        assert r.event_id == "pyram"
        assert r.event_name == "Pyraminx"
        assert r.single == "2.50"
        assert r.average == "4.12"
        assert r.date == "2024-04-30"

    def test_first_non_empty_wins(self):
        r = normalize({"name": "  ", "personName": "Clara", "wcaId": "", "wca_id": "2021CLAR01"})
        assert r.name == "Clara"
        assert r.wca_id == "2021CLAR01"

    def test_event_as_plain_string(self):
        assert normalize({"event": "sq1"}).event_name == "Square-1"


class TestSentinels:
    def test_missing_everything(self):
        r = normalize({})
        assert r.name == UNKNOWN_NAME == "Unknown competitor"
        assert r.wca_id == UNKNOWN_WCA_ID
        assert r.event_name == UNKNOWN_EVENT_NAME
        assert r.single is None
        assert r.average is None
        assert r.date is None

    def test_unknown_event_id_keeps_id(self):
        r = normalize({"eventId": "444mbf"})
        assert r.event_id == "444mbf"
        assert r.event_name == UNKNOWN_EVENT_NAME

    def test_not_a_mapping(self):
        assert normalize(None).name == UNKNOWN_NAME


class TestDate:
    def test_datetime_string_truncated(self):
        assert normalize({"date": "2024-05-01T18:22:00Z"}).date == "2024-05-01"

    def test_unparseable_alias_skipped(self):
        assert normalize({"date": "soon", "start_date": "2024-05-03"}).date == "2024-05-03"

    def test_fallback_overrides(self):
        r = normalize({"date": "2024-01-01"}, fallback_date=date(2024, 5, 4))
        assert r.date == "2024-05-04"

    def test_fallback_string(self):
        assert normalize({}, fallback_date="2024-05-04").date == "2024-05-04"

    def test_parse_iso_date(self):
        assert parse_iso_date("2024-02-29") == "2024-02-29"
        assert parse_iso_date("2023-02-29") is None
        assert parse_iso_date(None) is None


class TestResults:
    def test_zero_is_no_result(self):
        assert normalize({"eventId": "333", "best": 0, "average": 0}).single is None

    def test_dnf_dns(self):
        r = normalize({"eventId": "333bf", "best": -1, "average": -2})
        assert r.single == "DNF"
        assert r.average == "DNS"

    def test_fewest_moves(self):
        r = normalize({"eventId": "333fm", "best": 24, "average": 2733})
        assert r.single == "24"
        assert r.average == "27.33"

    def test_clock_format(self):
        assert format_clock(812) == "8.12"
        assert format_clock(6543) == "1:05.43"
        assert format_clock(360000) == "1:00:00.00"

    def test_multiblind(self):
        # 2/2 in 1:00 -> DD=97, TTTTT=60, MM=0
        assert format_multiblind(970006000) == "2/2 1:00"
        assert format_result(970006000, "333mbf") == "2/2 1:00"

    def test_float_integral(self):
        assert normalize({"eventId": "333", "best": 1234.0}).single == "12.34"


class TestCountry:
    def test_iso_and_name(self):
        assert country_of({"country_iso2": "ch"}) == "CH"
        assert country_of({"personCountryId": "Switzerland"}) == "SWITZERLAND"
        assert country_of({"person": {"country_iso2": "CH"}}) == "CH"
        assert country_of({}) is None
