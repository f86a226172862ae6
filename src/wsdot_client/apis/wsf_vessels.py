"""
WSF Vessels API.

Docs: https://www.wsdot.wa.gov/ferries/api/vessels/documentation/rest.html
"""

from __future__ import annotations

from datetime import datetime
from typing import List

from wsdot_client.core.factory import create_fetch_factory
from wsdot_client.models import (
    VesselAccommodation,
    VesselBasic,
    VesselHistory,
    VesselLocation,
    VesselStats,
    VesselVerbose,
)

API_PATH = "/ferries/api/vessels/rest"

fetch = create_fetch_factory(API_PATH)

get_cache_flush_date = fetch("/cacheflushdate", response_model=datetime)

get_vessel_basics = fetch("/vesselbasics", response_model=List[VesselBasic])
get_vessel_basics_by_id = fetch("/vesselbasics/{vesselId}", response_model=VesselBasic)

get_vessel_accommodations = fetch(
    "/vesselaccommodations", response_model=List[VesselAccommodation]
)
get_vessel_accommodations_by_id = fetch(
    "/vesselaccommodations/{vesselId}", response_model=VesselAccommodation
)

get_vessel_stats = fetch("/vesselstats", response_model=List[VesselStats])
get_vessel_stats_by_id = fetch("/vesselstats/{vesselId}", response_model=VesselStats)

# Real-time positions; the only vessel data that changes minute to minute.
get_vessel_locations = fetch("/vessellocations", response_model=List[VesselLocation])
get_vessel_locations_by_id = fetch(
    "/vessellocations/{vesselId}", response_model=VesselLocation
)

get_vessel_verbose = fetch("/vesselverbose", response_model=List[VesselVerbose])
get_vessel_verbose_by_id = fetch(
    "/vesselverbose/{vesselId}", response_model=VesselVerbose
)

get_vessel_history = fetch("/vesselhistory", response_model=List[VesselHistory])
get_vessel_history_by_vessel_and_date_range = fetch(
    "/vesselhistory/{vesselName}/{dateStart}/{dateEnd}",
    response_model=List[VesselHistory],
)
