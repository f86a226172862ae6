"""WSDOT Highway Alerts API (WSDOT family: access code goes in ``AccessCode``)."""

from __future__ import annotations

from typing import List

from wsdot_client.core.factory import create_fetch_factory
from wsdot_client.models import HighwayAlert

API_PATH = "/Traffic/api/HighwayAlerts/HighwayAlertsREST.svc"

fetch = create_fetch_factory(API_PATH)

get_highway_alerts = fetch("/GetAlertsAsJson", response_model=List[HighwayAlert])
get_highway_alert = fetch(
    "/GetAlertAsJson?AlertID={alertId}", response_model=HighwayAlert
)
