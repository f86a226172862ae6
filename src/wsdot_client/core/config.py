from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

API_KEY_ENV = "WSDOT_ACCESS_TOKEN"
BASE_URL_ENV = "WSDOT_BASE_URL"
DEFAULT_BASE_URL = "https://www.wsdot.wa.gov"


@dataclass(frozen=True)
class WsdotConfig:
    api_key: str
    base_url: str = DEFAULT_BASE_URL


def load_env_config(*, use_dotenv: bool = True) -> WsdotConfig:
    """Load the WSDOT access code and base URL from environment (optional .env)."""
    if use_dotenv:
        load_dotenv()
    api_key = os.getenv(API_KEY_ENV, "").strip()
    base_url = os.getenv(BASE_URL_ENV, "").strip().rstrip("/") or DEFAULT_BASE_URL
    return WsdotConfig(api_key=api_key, base_url=base_url)


class ConfigManager:
    """
    Process-wide source of the base URL and API key.
    - Reads the environment lazily, on first access
    - Runtime overrides (set_api_key / set_base_url) win over the environment
    - reset() drops overrides and forces a fresh environment read
    """

    def __init__(self, *, use_dotenv: bool = True):
        self._use_dotenv = use_dotenv
        self._loaded: Optional[WsdotConfig] = None
        self._api_key: Optional[str] = None
        self._base_url: Optional[str] = None

    def _env(self) -> WsdotConfig:
        if self._loaded is None:
            self._loaded = load_env_config(use_dotenv=self._use_dotenv)
        return self._loaded

    def get_api_key(self) -> str:
        if self._api_key is not None:
            return self._api_key
        return self._env().api_key

    def get_base_url(self) -> str:
        if self._base_url is not None:
            return self._base_url
        return self._env().base_url

    def set_api_key(self, api_key: str) -> None:
        self._api_key = (api_key or "").strip()

    def set_base_url(self, base_url: str) -> None:
        base_url = (base_url or "").strip().rstrip("/")
        if not base_url:
            raise ValueError("base_url must be provided.")
        self._base_url = base_url

    def snapshot(self) -> WsdotConfig:
        return WsdotConfig(api_key=self.get_api_key(), base_url=self.get_base_url())

    def reset(self) -> None:
        self._loaded = None
        self._api_key = None
        self._base_url = None


config_manager = ConfigManager()


__all__ = [
    "API_KEY_ENV",
    "BASE_URL_ENV",
    "DEFAULT_BASE_URL",
    "WsdotConfig",
    "load_env_config",
    "ConfigManager",
    "config_manager",
]
