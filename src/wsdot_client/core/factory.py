"""
Endpoint factory for the WSDOT and WSF REST APIs.

A factory binds one API path and one fetch strategy; each endpoint it makes
turns a parameter mapping into a URL and awaits the strategy:

    fetch = create_fetch_factory("/ferries/api/schedule/rest")
    get_routes = fetch("/routes/{tripDate}", response_model=List[Route])

    routes = await get_routes({"tripDate": date(2024, 1, 15)})
    routes = await get_routes.fetch_model({"tripDate": date.today()}, "info")
"""

from __future__ import annotations

from functools import cached_property
from typing import Any, Dict, Generic, List, Mapping, Optional, TypeVar, Union

from pydantic import TypeAdapter, ValidationError

from .config import ConfigManager, WsdotConfig
from .errors import TemplateMismatchError, WsdotModelValidationError
from .observability import LoggingMode
from .selection import select_fetch_strategy
from .strategies import FetchStrategy
from .templating import find_placeholders, interpolate_params, placeholder_names
from .urls import build_url

T = TypeVar("T")

ConfigSource = Union[WsdotConfig, ConfigManager]


class Endpoint(Generic[T]):
    """An async request function for one endpoint template."""

    def __init__(
        self,
        factory: "FetchFactory",
        template: str,
        *,
        response_model: Any = None,
        defaults: Optional[Mapping[str, Any]] = None,
    ):
        self.factory = factory
        self.template = template
        self.response_model = response_model
        self.defaults: Dict[str, Any] = dict(defaults or {})

        unknown = [k for k in self.defaults if k not in self.parameters]
        if unknown:
            raise TemplateMismatchError(
                f"Defaults {unknown} have no placeholder in endpoint template "
                f"{template!r}. Available placeholders: "
                f"{', '.join(self.placeholders) or 'none'}",
                template=template,
                key=unknown[0],
                placeholders=self.placeholders,
            )

    def __repr__(self) -> str:
        return f"Endpoint({self.factory.api_path!r}, {self.template!r})"

    @property
    def placeholders(self) -> List[str]:
        return find_placeholders(self.template)

    @property
    def parameters(self) -> List[str]:
        return placeholder_names(self.template)

    def resolve(self, params: Optional[Mapping[str, Any]] = None) -> str:
        """Interpolate params (over defaults) into the template."""
        merged = dict(self.defaults)
        names = self.parameters
        for key, value in (params or {}).items():
            # None means "not supplied" only for a real placeholder
            if value is None and key in names:
                continue
            merged[key] = value

        # Unknown keys are reported by interpolate_params; report gaps here.
        if all(f"{{{key}}}" in self.template for key in merged):
            missing = [name for name in names if name not in merged]
            if missing:
                raise TemplateMismatchError(
                    f"Missing parameter(s) {', '.join(missing)} for endpoint "
                    f"template {self.template!r}",
                    template=self.template,
                    key=missing[0],
                    placeholders=self.placeholders,
                )
        return interpolate_params(self.template, merged)

    def url(self, params: Optional[Mapping[str, Any]] = None) -> str:
        return build_url(
            self.factory.api_path, self.resolve(params), config=self.factory.config
        )

    async def __call__(
        self,
        params: Optional[Mapping[str, Any]] = None,
        log_mode: Optional[LoggingMode] = None,
    ) -> Any:
        url = self.url(params)
        return await self.factory.strategy(url, log_mode)

    @cached_property
    def _adapter(self) -> TypeAdapter:
        if self.response_model is None:
            raise TypeError(f"{self!r} has no response_model")
        return TypeAdapter(self.response_model)

    async def fetch_model(
        self,
        params: Optional[Mapping[str, Any]] = None,
        log_mode: Optional[LoggingMode] = None,
    ) -> T:
        adapter = self._adapter
        payload = await self(params, log_mode)
        try:
            return adapter.validate_python(payload)
        except ValidationError as exc:
            raise WsdotModelValidationError(
                f"Response from {self.template!r} did not match "
                f"{self.response_model!r}: {exc}"
            ) from exc


class FetchFactory:
    """Makes endpoints sharing one API path, strategy and config source."""

    def __init__(
        self,
        api_path: str,
        *,
        strategy: Optional[FetchStrategy] = None,
        config: Optional[ConfigSource] = None,
    ):
        self.api_path = api_path
        self.strategy = strategy if strategy is not None else select_fetch_strategy()
        self.config = config

    def __repr__(self) -> str:
        return f"FetchFactory({self.api_path!r}, strategy={self.strategy!r})"

    def __call__(
        self,
        template: str,
        *,
        response_model: Any = None,
        defaults: Optional[Mapping[str, Any]] = None,
    ) -> Endpoint[Any]:
        return Endpoint(
            self, template, response_model=response_model, defaults=defaults
        )


def create_fetch_factory(
    api_path: str,
    *,
    strategy: Optional[FetchStrategy] = None,
    config: Optional[ConfigSource] = None,
) -> FetchFactory:
    return FetchFactory(api_path, strategy=strategy, config=config)


__all__ = ["Endpoint", "FetchFactory", "create_fetch_factory"]
