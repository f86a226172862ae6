"""Core fetching surface for wsdot-client (API-family agnostic)."""

from .config import ConfigManager, WsdotConfig, config_manager, load_env_config
from .environment import EnvironmentProbe, EnvironmentType, get_environment_type
from .errors import (
    MissingApiKeyError,
    TemplateMismatchError,
    WsdotClientError,
    WsdotHTTPError,
    WsdotJsonpError,
    WsdotModelValidationError,
    WsdotParseError,
    WsdotTransportError,
)
from .factory import Endpoint, FetchFactory, create_fetch_factory
from .observability import LoggingMode, log_event
from .selection import select_fetch_strategy
from .strategies import (
    FetchStrategy,
    JsonpFetchStrategy,
    NativeFetchStrategy,
    fetch_jsonp,
    fetch_native,
)
from .templating import find_placeholders, interpolate_params, stringify_param
from .urls import build_url, get_api_key_param, redact_url

__all__ = [
    # Config
    "ConfigManager",
    "WsdotConfig",
    "config_manager",
    "load_env_config",
    # Environment and strategy selection
    "EnvironmentProbe",
    "EnvironmentType",
    "get_environment_type",
    "select_fetch_strategy",
    # Strategies
    "FetchStrategy",
    "NativeFetchStrategy",
    "JsonpFetchStrategy",
    "fetch_native",
    "fetch_jsonp",
    # Factory, templating, URLs
    "Endpoint",
    "FetchFactory",
    "create_fetch_factory",
    "find_placeholders",
    "interpolate_params",
    "stringify_param",
    "build_url",
    "get_api_key_param",
    "redact_url",
    # Logging
    "LoggingMode",
    "log_event",
    # Exceptions
    "WsdotClientError",
    "MissingApiKeyError",
    "TemplateMismatchError",
    "WsdotTransportError",
    "WsdotHTTPError",
    "WsdotParseError",
    "WsdotJsonpError",
    "WsdotModelValidationError",
]
