"""
WSF Schedule API.

Docs: https://www.wsdot.wa.gov/ferries/api/schedule/documentation/rest.html
Help: https://www.wsdot.wa.gov/ferries/api/schedule/rest/help

Date parameters take ``datetime.date`` values and are sent as YYYY-MM-DD.
"""

from __future__ import annotations

from datetime import datetime
from typing import List

from wsdot_client.core.factory import create_fetch_factory
from wsdot_client.models import (
    ActiveSeason,
    Alert,
    AlternativeFormat,
    Route,
    RouteDetails,
    Sailing,
    ScheduledRoute,
    ScheduleResponse,
    ScheduleTerminal,
    ScheduleTerminalCombo,
    TimeAdjustment,
    ValidDateRange,
)

API_PATH = "/ferries/api/schedule/rest"

fetch = create_fetch_factory(API_PATH)

# When this date changes, drop cached schedule data and fetch it again.
get_cache_flush_date = fetch("/cacheflushdate", response_model=datetime)

get_valid_date_range = fetch("/validdaterange", response_model=ValidDateRange)

# Terminals
get_terminals = fetch("/terminals/{tripDate}", response_model=List[ScheduleTerminal])
get_terminals_and_mates = fetch(
    "/terminalsandmates/{tripDate}", response_model=List[ScheduleTerminalCombo]
)
get_terminals_and_mates_by_route = fetch(
    "/terminalsandmatesbyroute/{tripDate}/{routeId}",
    response_model=List[ScheduleTerminalCombo],
)
get_terminal_mates = fetch(
    "/terminalmates/{tripDate}/{terminalId}", response_model=List[ScheduleTerminal]
)

# Routes
get_routes = fetch("/routes/{tripDate}", response_model=List[Route])
get_routes_by_terminals = fetch(
    "/routes/{tripDate}/{departingTerminalId}/{arrivingTerminalId}",
    response_model=List[Route],
)
get_routes_with_disruptions = fetch(
    "/routeshavingservicedisruptions/{tripDate}", response_model=List[Route]
)
get_route_details = fetch("/routedetails/{tripDate}", response_model=List[RouteDetails])
get_route_details_by_terminals = fetch(
    "/routedetails/{tripDate}/{departingTerminalId}/{arrivingTerminalId}",
    response_model=List[RouteDetails],
)
get_route_details_by_route = fetch(
    "/routedetails/{tripDate}/{routeId}", response_model=RouteDetails
)

# Seasons and scheduled routes
get_active_seasons = fetch("/activeseasons", response_model=List[ActiveSeason])
get_scheduled_routes = fetch("/schedroutes", response_model=List[ScheduledRoute])
get_scheduled_routes_by_season = fetch(
    "/schedroutes/{scheduleId}", response_model=List[ScheduledRoute]
)

# Sailings (current season only)
get_sailings = fetch("/sailings/{schedRouteId}", response_model=List[Sailing])
get_all_sailings = fetch("/allsailings/{schedRouteId}", response_model=List[Sailing])

# Time adjustments
get_time_adjustments = fetch("/timeadj", response_model=List[TimeAdjustment])
get_time_adjustments_by_route = fetch(
    "/timeadjbyroute/{routeId}", response_model=List[TimeAdjustment]
)
get_time_adjustments_by_sched_route = fetch(
    "/timeadjbyschedroute/{schedRouteId}", response_model=List[TimeAdjustment]
)

# Schedules
get_schedule_by_route = fetch(
    "/schedule/{tripDate}/{routeId}", response_model=ScheduleResponse
)
get_schedule_by_terminals = fetch(
    "/schedule/{tripDate}/{departingTerminalId}/{arrivingTerminalId}",
    response_model=ScheduleResponse,
)
get_schedule_today_by_route = fetch(
    "/scheduletoday/{routeId}/{onlyRemainingTimes}",
    response_model=ScheduleResponse,
    defaults={"onlyRemainingTimes": False},
)
get_schedule_today_by_terminals = fetch(
    "/scheduletoday/{departingTerminalId}/{arrivingTerminalId}/{onlyRemainingTimes}",
    response_model=ScheduleResponse,
    defaults={"onlyRemainingTimes": False},
)

get_alerts = fetch("/alerts", response_model=List[Alert])

get_alternative_formats = fetch(
    "/alternativeformats/{subjectName}", response_model=List[AlternativeFormat]
)
