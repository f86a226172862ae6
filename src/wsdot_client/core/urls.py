from __future__ import annotations

import re
from typing import Optional, Union

from .config import ConfigManager, WsdotConfig, config_manager
from .errors import MissingApiKeyError

WSF_PATH_MARKER = "/ferries/"
WSF_KEY_PARAM = "apiaccesscode"
WSDOT_KEY_PARAM = "AccessCode"

_KEY_VALUE_RE = re.compile(
    rf"([?&](?:{WSF_KEY_PARAM}|{WSDOT_KEY_PARAM})=)[^&#]*", re.IGNORECASE
)


def get_api_key_param(api_path: str) -> str:
    """WSF (ferries) APIs take "apiaccesscode"; other WSDOT APIs take "AccessCode"."""
    return WSF_KEY_PARAM if WSF_PATH_MARKER in api_path else WSDOT_KEY_PARAM


def build_url(
    api_path: str,
    endpoint: str,
    *,
    config: Optional[Union[WsdotConfig, ConfigManager]] = None,
) -> str:
    """
    Join base URL, API path and endpoint, then append the access code.

    No URL-encoding happens here; interpolated values are expected to be
    URL-safe already (numeric ids, YYYY-MM-DD dates, simple identifiers).
    """
    source = config if config is not None else config_manager
    if isinstance(source, WsdotConfig):
        base_url, api_key = source.base_url, source.api_key
    else:
        base_url, api_key = source.get_base_url(), source.get_api_key()

    if not api_key:
        raise MissingApiKeyError(
            "WSDOT API access code is missing; set WSDOT_ACCESS_TOKEN "
            "or call config_manager.set_api_key()."
        )

    separator = "&" if "?" in endpoint else "?"
    key_param = get_api_key_param(api_path)
    return f"{base_url}{api_path}{endpoint}{separator}{key_param}={api_key}"


def redact_url(url: str) -> str:
    """Mask the access code so URLs can be logged or put in error messages."""
    return _KEY_VALUE_RE.sub(r"\1***", url)


__all__ = [
    "WSF_KEY_PARAM",
    "WSDOT_KEY_PARAM",
    "get_api_key_param",
    "build_url",
    "redact_url",
]
