"""
Fetch strategy selection.

Browsers cannot call the WSDOT/WSF APIs directly (no CORS headers), so web
runtimes use JSONP. Servers and test runs use the native strategy, which is
simpler to debug and mock. FORCE_JSONP=true selects JSONP anywhere, so the
JSONP path can be exercised under a test runner.
"""

from __future__ import annotations

from typing import Optional

from .environment import EnvironmentProbe, EnvironmentType, get_environment_type
from .strategies import FetchStrategy, fetch_jsonp, fetch_native

FORCE_JSONP_ENV = "FORCE_JSONP"


def select_fetch_strategy(probe: Optional[EnvironmentProbe] = None) -> FetchStrategy:
    probe = probe or EnvironmentProbe.current()
    if probe.env.get(FORCE_JSONP_ENV) == "true":
        return fetch_jsonp

    environment = get_environment_type(probe)
    if environment in (EnvironmentType.TEST, EnvironmentType.SERVER):
        return fetch_native
    if environment is EnvironmentType.WEB:
        return fetch_jsonp
    return fetch_native


__all__ = ["FORCE_JSONP_ENV", "select_fetch_strategy"]
