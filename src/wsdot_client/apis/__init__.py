"""Endpoint definitions, one module per API family."""

from . import wsdot_highway_alerts, wsf_schedule, wsf_vessels

__all__ = ["wsf_schedule", "wsf_vessels", "wsdot_highway_alerts"]
