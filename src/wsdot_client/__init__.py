"""wsdot_client package exports."""

from .core import (
    ConfigManager,
    Endpoint,
    EnvironmentProbe,
    EnvironmentType,
    FetchFactory,
    JsonpFetchStrategy,
    MissingApiKeyError,
    NativeFetchStrategy,
    TemplateMismatchError,
    WsdotClientError,
    WsdotConfig,
    WsdotHTTPError,
    WsdotJsonpError,
    WsdotModelValidationError,
    WsdotParseError,
    WsdotTransportError,
    build_url,
    config_manager,
    create_fetch_factory,
    get_environment_type,
    interpolate_params,
    select_fetch_strategy,
)
from .core.logging import setup_logging
from .utils.dates import convert_dates, format_date, parse_wsdot_date
from . import apis

__all__ = [
    # Endpoint definitions
    "apis",
    # Factory
    "create_fetch_factory",
    "FetchFactory",
    "Endpoint",
    "interpolate_params",
    "build_url",
    # Environment / strategies
    "EnvironmentProbe",
    "EnvironmentType",
    "get_environment_type",
    "select_fetch_strategy",
    "NativeFetchStrategy",
    "JsonpFetchStrategy",
    # Config
    "ConfigManager",
    "WsdotConfig",
    "config_manager",
    # Dates
    "format_date",
    "parse_wsdot_date",
    "convert_dates",
    # Logging
    "setup_logging",
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
