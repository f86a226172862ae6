import json
from datetime import datetime, timedelta
from pathlib import Path

from wsdot_client.models import (
    HighwayAlert,
    ScheduleResponse,
    ValidDateRange,
    VesselHistory,
    VesselLocation,
)
from wsdot_client.utils.dates import convert_dates


def load_fixture(name: str):
    p = Path(__file__).parent / "fixtures" / name
    with open(p, encoding="utf-8") as f:
        return json.load(f)


def test_vessel_location_parses_raw_vendor_dates():
    payload = load_fixture("vessel_locations.json")

    underway = VesselLocation.model_validate(payload[0])

    assert underway.VesselName == "Chelan"
    assert underway.ArrivingTerminalAbbrev == "FRH"
    assert isinstance(underway.TimeStamp, datetime)
    assert underway.LeftDock.utcoffset() == timedelta(hours=-8)
    assert underway.Eta - underway.LeftDock == timedelta(minutes=65)
    assert underway.OpRouteAbbrev == ["ana-sj"]


def test_vessel_location_nullable_fields():
    payload = load_fixture("vessel_locations.json")

    docked = VesselLocation.model_validate(payload[1])

    assert docked.AtDock is True
    assert docked.ArrivingTerminalID is None
    assert docked.Eta is None
    assert docked.VesselPositionNum is None


def test_models_accept_already_converted_dates():
    payload = convert_dates(load_fixture("schedule_today.json"))
    schedule = ScheduleResponse.model_validate(payload)

    combo = schedule.TerminalCombos[0]
    assert combo.DepartingTerminalName == "Seattle"
    assert [t.VesselName for t in combo.Times] == ["Wenatchee", "Tacoma"]
    assert combo.Times[0].DepartingTime.hour == 8
    assert combo.Times[1].ArrivingTime is None
    # Season end falls after the DST change
    assert schedule.ScheduleEnd.utcoffset() == timedelta(hours=-7)


def test_vessel_history_mdy_date():
    history = VesselHistory.model_validate(load_fixture("vessel_history.json")[0])
    assert history.Date == datetime(2024, 1, 1)
    assert history.ActualDepart > history.ScheduledDepart


def test_highway_alert_nested_locations():
    alert = HighwayAlert.model_validate(load_fixture("highway_alert.json"))
    assert alert.AlertID == 42
    assert alert.StartRoadwayLocation.MilePost == 165.0
    assert alert.EndTime is None
    assert alert.LastUpdatedTime > alert.StartTime


def test_valid_date_range():
    rng = ValidDateRange.model_validate(
        {"DateFrom": "/Date(1704096000000-0800)/", "DateThru": "/Date(1711263600000-0700)/"}
    )
    assert rng.DateFrom < rng.DateThru


def test_models_use_wire_names_and_drop_unknown_fields():
    rng = ValidDateRange.model_validate(
        {"DateFrom": "/Date(0)/", "DateThru": "/Date(0)/", "RouteNotes": "ignored"}
    )
    assert set(rng.model_dump()) == {"DateFrom", "DateThru"}
    assert ValidDateRange.model_config.get("populate_by_name") is None
