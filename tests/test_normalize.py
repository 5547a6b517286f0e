import math

import pytest

from artasia_atlas.domain.models import UNKNOWN, SiteRecord
from artasia_atlas.graph.normalize import (
    normalize,
    normalize_rows,
    parse_float,
    parse_gps,
)


def test_empty_mapping_gives_defaults():
    record = normalize({})

    assert record.site == ""
    assert record.educator == ""
    assert record.partner == UNKNOWN
    assert record.early_on is False
    assert record.participation == 0
    assert math.isnan(record.lat)
    assert math.isnan(record.lng)
    assert not record.has_location


def test_strings_are_trimmed_and_none_is_empty():
    record = normalize(
        {
            "Site": "  Gage Park  ",
            "Artist Educator": None,
            "Partner Org": "  Harbour Arts ",
            "Address": "\t1000 Main St E\n",
            "Title": " Seeds ",
            "Photo link": " https://example.org/p.jpg ",
            "Link": None,
        }
    )

    assert record.site == "Gage Park"
    assert record.educator == ""
    assert record.partner == "Harbour Arts"
    assert record.address == "1000 Main St E"
    assert record.title == "Seeds"
    assert record.photo_url == "https://example.org/p.jpg"
    assert record.link == ""


def test_blank_partner_becomes_unknown():
    assert normalize({"Partner Org": "   "}).partner == UNKNOWN


@pytest.mark.parametrize(
    "value, expected",
    [("true", True), (" TRUE ", True), ("True", True), ("yes", False), ("", False), (None, False)],
)
def test_early_on_flag(value, expected):
    assert normalize({"EarlyON": value}).early_on is expected


@pytest.mark.parametrize(
    "value, expected",
    [
        ("12", 12.0),
        (" 17.5 ", 17.5),
        ("12 people", 12.0),
        ("-3", -3.0),
        (".5", 0.5),
        ("1e2", 100.0),
        ("abc", 0.0),
        ("", 0.0),
        ("NaN", 0.0),
        (None, 0.0),
    ],
)
def test_participation_parsing(value, expected):
    assert normalize({"Participation": value}).participation == expected


def test_participation_infinity_is_kept():
    assert normalize({"Participation": "Infinity"}).participation == math.inf


def test_gps_pair():
    record = normalize({"GPS": "43.24, -79.81"})
    assert record.lat == 43.24
    assert record.lng == -79.81
    assert record.has_location


@pytest.mark.parametrize("value", ["invalid", "43.24", "", None])
def test_gps_without_two_tokens_is_unknown(value):
    lat, lng = parse_gps(value)
    assert math.isnan(lat)
    assert math.isnan(lng)


def test_gps_takes_first_two_tokens_positionally():
    assert parse_gps("43.24, -79.81, 120") == (43.24, -79.81)

    lat, lng = parse_gps("north, -79.81")
    assert math.isnan(lat)
    assert lng == -79.81

    lat, lng = parse_gps("abc,def")
    assert math.isnan(lat) and math.isnan(lng)


def test_parse_float_leading_number():
    assert parse_float("  42.5km") == 42.5
    assert math.isnan(parse_float("km 42"))


def test_unknown_columns_are_ignored():
    record = normalize({"Site": "A", "Notes": "whatever", "": "x"})
    assert isinstance(record, SiteRecord)
    assert record.site == "A"
    assert record.partner == UNKNOWN
    assert record.participation == 0


def test_normalize_rows_preserves_order():
    records = normalize_rows([{"Site": "B"}, {"Site": "A"}, {}])
    assert [r.site for r in records] == ["B", "A", ""]
