from datetime import date, datetime, timedelta, timezone

import pytest
from wsdot_client.utils.dates import (
    DateParseError,
    convert_dates,
    format_date,
    parse_mdy_date,
    parse_wsdot_date,
)

PACIFIC_STANDARD = timezone(timedelta(hours=-8))


def test_format_date_zero_pads():
    assert format_date(date(2024, 1, 5)) == "2024-01-05"


def test_format_date_uses_local_fields_of_datetime():
    # 23:30 at -08:00 is already the next day in UTC; the local day wins.
    late = datetime(2024, 1, 15, 23, 30, tzinfo=PACIFIC_STANDARD)
    assert format_date(late) == "2024-01-15"


def test_parse_wsdot_date_with_offset():
    parsed = parse_wsdot_date("/Date(1705334400000-0800)/")
    assert parsed == datetime(2024, 1, 15, 16, 0, tzinfo=timezone.utc)
    assert parsed.utcoffset() == timedelta(hours=-8)
    assert (parsed.hour, parsed.day) == (8, 15)


def test_parse_wsdot_date_without_offset_is_utc():
    parsed = parse_wsdot_date("/Date(0)/")
    assert parsed == datetime(1970, 1, 1, tzinfo=timezone.utc)
    assert parsed.utcoffset() == timedelta(0)


def test_parse_wsdot_date_before_epoch():
    parsed = parse_wsdot_date("/Date(-86400000+0000)/")
    assert parsed.date() == date(1969, 12, 31)


@pytest.mark.parametrize("raw", ["2024-01-15", "/Date(abc)/", "", "Date(1)"])
def test_parse_wsdot_date_rejects_other_strings(raw):
    with pytest.raises(DateParseError):
        parse_wsdot_date(raw)


def test_parse_mdy_date_only():
    assert parse_mdy_date("01/15/2024") == date(2024, 1, 15)


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("01/15/2024 02:30:00 PM", datetime(2024, 1, 15, 14, 30)),
        ("01/15/2024 12:05 AM", datetime(2024, 1, 15, 0, 5)),
        ("01/15/2024 12:00:00 PM", datetime(2024, 1, 15, 12, 0)),
        ("1/5/2024 17:45", datetime(2024, 1, 5, 17, 45)),
    ],
)
def test_parse_mdy_datetime(raw, expected):
    assert parse_mdy_date(raw) == expected


@pytest.mark.parametrize("raw", ["13/45/2024", "01/15/2024 13:00 PM", "2024-01-15"])
def test_parse_mdy_date_rejects_invalid(raw):
    with pytest.raises(DateParseError):
        parse_mdy_date(raw)


def test_convert_dates_walks_nested_values():
    payload = {
        "TimeStamp": "/Date(1705334400000-0800)/",
        "VesselName": "Tacoma",
        "Times": [{"DepartingTime": "/Date(0)/", "VesselID": 1}],
        "Date": "01/15/2024",
    }

    converted = convert_dates(payload)

    assert isinstance(converted["TimeStamp"], datetime)
    assert converted["VesselName"] == "Tacoma"
    assert converted["Times"][0]["DepartingTime"] == datetime(1970, 1, 1, tzinfo=timezone.utc)
    assert converted["Times"][0]["VesselID"] == 1
    # MM/DD/YYYY strings are left for the response models
    assert converted["Date"] == "01/15/2024"
    # input is not mutated
    assert payload["TimeStamp"] == "/Date(1705334400000-0800)/"


def test_convert_dates_top_level_string():
    assert isinstance(convert_dates("/Date(1705334400000-0800)/"), datetime)
    assert convert_dates(None) is None


def test_min_value_with_offset_falls_back_to_utc():
    # .NET DateTime.MinValue cannot be shifted west of UTC
    parsed = parse_wsdot_date("/Date(-62135596800000-0800)/")
    assert parsed == datetime(1, 1, 1, tzinfo=timezone.utc)
    assert parsed.utcoffset() == timedelta(0)


@pytest.mark.parametrize(
    "raw", ["/Date(-1000000000000000)/", "/Date(99999999999999999999)/", "/Date(0+9999)/"]
)
def test_parse_wsdot_date_out_of_range_is_typed(raw):
    with pytest.raises(DateParseError):
        parse_wsdot_date(raw)


def test_convert_dates_keeps_unrepresentable_dates_as_strings():
    payload = [{"Date": "/Date(-1000000000000000)/", "Eta": "/Date(0)/"}]
    converted = convert_dates(payload)
    assert converted[0]["Date"] == "/Date(-1000000000000000)/"
    assert isinstance(converted[0]["Eta"], datetime)
