from __future__ import annotations

import json
import logging
import re
import time
import uuid
from abc import ABC, abstractmethod
from typing import Any, Optional, Protocol, Tuple

import httpx

from ..utils.dates import convert_dates
from .errors import (
    WsdotHTTPError,
    WsdotJsonpError,
    WsdotParseError,
    WsdotTransportError,
)
from .observability import LoggingMode, is_enabled, log_event
from .urls import redact_url

DEFAULT_TIMEOUT_SECONDS = 30.0
JSONP_CALLBACK_PARAM = "callback"
JSONP_CALLBACK_PREFIX = "wsdot_jsonp_"

# callbackName( ... ); with optional "/**/" guard prefix some servers emit
_JSONP_BODY_RE = re.compile(
    r"^\s*(?:/\*\*/)?\s*([A-Za-z_$][\w$.]*)\s*\((.*)\)\s*;?\s*$", re.DOTALL
)


class FetchStrategy(Protocol):
    """A transport: takes a full URL, returns decoded JSON with dates converted."""

    name: str

    async def __call__(self, url: str, log_mode: Optional[LoggingMode] = None) -> Any:
        ...


class _HttpxFetchStrategy(ABC):
    """
    Shared GET plumbing for the concrete strategies.
    - One short-lived httpx.AsyncClient per call unless one is injected
    - Raises WsdotHTTPError on non-2xx responses
    - Raises WsdotTransportError on network/timeout errors (no retries)
    - Raises WsdotParseError when the body cannot be decoded
    """

    name = "httpx"
    accept = "application/json"

    def __init__(
        self,
        *,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
        http: Optional[httpx.AsyncClient] = None,
        logger: Optional[logging.Logger] = None,
    ):
        self.timeout_seconds = timeout_seconds
        self.http = http
        self.log = logger or logging.getLogger(f"wsdot_client.strategies.{self.name}")

    def __repr__(self) -> str:
        return f"{type(self).__name__}(timeout_seconds={self.timeout_seconds})"

    async def __call__(self, url: str, log_mode: Optional[LoggingMode] = None) -> Any:
        start = time.perf_counter()
        request_url, callback = self._prepare(url)
        display_url = redact_url(request_url)

        try:
            resp = await self._get(request_url, display_url=display_url)
            if resp.status_code < 200 or resp.status_code >= 300:
                raise self._to_http_error(resp, display_url=display_url)
            data = self._decode(resp, display_url=display_url, callback=callback)
        except WsdotTransportError as exc:
            cause = exc.__cause__ if exc.__cause__ is not None else exc
            self._report(
                log_mode,
                display_url,
                start,
                status=getattr(exc, "status_code", "exception"),
                error_type=type(cause).__name__,
            )
            raise

        self._report(
            log_mode,
            display_url,
            start,
            status=resp.status_code,
            bytes=len(resp.content),
        )
        return convert_dates(data)

    def _prepare(self, url: str) -> Tuple[str, Optional[str]]:
        return url, None

    @abstractmethod
    def _decode(
        self, resp: httpx.Response, *, display_url: str, callback: Optional[str]
    ) -> Any:
        """Turn a 2xx response into decoded JSON, raising WsdotParseError on bad bodies."""

    async def _get(self, url: str, *, display_url: str) -> httpx.Response:
        headers = {"Accept": self.accept}
        try:
            if self.http is not None:
                return await self.http.get(url, headers=headers)
            async with httpx.AsyncClient(timeout=self.timeout_seconds) as http:
                return await http.get(url, headers=headers)
        except httpx.TimeoutException as exc:
            raise self._timeout_error(display_url, exc) from exc
        except httpx.HTTPError as exc:
            raise WsdotTransportError(
                f"HTTPX error calling GET {display_url}: {type(exc).__name__}"
            ) from exc

    def _timeout_error(self, display_url: str, exc: Exception) -> WsdotTransportError:
        return WsdotTransportError(
            f"Timed out after {self.timeout_seconds}s calling GET {display_url}"
        )

    def _to_http_error(self, resp: httpx.Response, *, display_url: str) -> WsdotHTTPError:
        # WSDOT error bodies are usually {"Message": "..."} or plain text.
        message = "request failed"
        response_text: Optional[str] = None
        try:
            parsed = resp.json()
            if isinstance(parsed, dict):
                message = parsed.get("Message") or parsed.get("message") or message
            else:
                response_text = (resp.text or "")[:500]
        except ValueError:
            response_text = (resp.text or "")[:500]
            if response_text.strip():
                message = response_text.strip().splitlines()[0][:200]

        return WsdotHTTPError(
            status_code=resp.status_code,
            url=display_url,
            message=message,
            response_text=response_text,
        )

    def _report(
        self, log_mode: Optional[LoggingMode], display_url: str, start: float, **fields: Any
    ) -> None:
        duration_ms = int((time.perf_counter() - start) * 1000)
        endpoint = display_url.split("?", 1)[0]
        self.log.debug(
            "wsdot.request",
            extra={
                "strategy": self.name,
                "url": display_url,
                "duration_ms": duration_ms,
                **fields,
            },
        )
        if not is_enabled(log_mode):
            return

        event_fields = {
            "strategy": self.name,
            "endpoint": endpoint,
            "duration_ms": duration_ms,
            "log_mode": log_mode,
            **fields,
        }
        if log_mode != "debug":
            event_fields.pop("bytes", None)
        else:
            event_fields["url"] = display_url
        log_event("wsdot_call", **event_fields)


class NativeFetchStrategy(_HttpxFetchStrategy):
    """Plain GET returning the JSON body."""

    name = "native"

    def _decode(
        self, resp: httpx.Response, *, display_url: str, callback: Optional[str]
    ) -> Any:
        if not resp.content:
            return None
        try:
            return resp.json()
        except ValueError as exc:
            snippet = (resp.text or "")[:500]
            raise WsdotParseError(
                f"Expected JSON from GET {display_url}, got non-JSON body "
                f"snippet: {snippet!r}"
            ) from exc


class JsonpFetchStrategy(_HttpxFetchStrategy):
    """
    JSONP transport for runtimes without CORS access to the APIs.

    Each call gets a unique callback name; the server answers with a script
    body "name(<json>);". The body is checked against that name and its
    argument is decoded as JSON rather than executed.
    """

    name = "jsonp"
    accept = "application/javascript, text/javascript, */*"

    def __init__(self, *, callback_prefix: str = JSONP_CALLBACK_PREFIX, **kwargs: Any):
        super().__init__(**kwargs)
        self.callback_prefix = callback_prefix

    def new_callback_name(self) -> str:
        return f"{self.callback_prefix}{uuid.uuid4().hex[:12]}"

    def _prepare(self, url: str) -> Tuple[str, Optional[str]]:
        callback = self.new_callback_name()
        separator = "&" if "?" in url else "?"
        return f"{url}{separator}{JSONP_CALLBACK_PARAM}={callback}", callback

    def _timeout_error(self, display_url: str, exc: Exception) -> WsdotTransportError:
        return WsdotJsonpError(
            f"JSONP request timed out after {self.timeout_seconds}s: {display_url}"
        )

    def _decode(
        self, resp: httpx.Response, *, display_url: str, callback: Optional[str]
    ) -> Any:
        body = resp.text or ""
        match = _JSONP_BODY_RE.match(body)
        if match is None:
            raise WsdotJsonpError(
                f"Expected JSONP callback body from GET {display_url}, got "
                f"snippet: {body[:200]!r}"
            )
        if match.group(1) != callback:
            raise WsdotJsonpError(
                f"JSONP callback mismatch for {display_url}: expected "
                f"{callback!r}, got {match.group(1)!r}"
            )

        payload = match.group(2).strip()
        if not payload:
            return None
        try:
            return json.loads(payload)
        except ValueError as exc:
            raise WsdotParseError(
                f"JSONP callback argument from GET {display_url} is not JSON: "
                f"{payload[:200]!r}"
            ) from exc


fetch_native = NativeFetchStrategy()
fetch_jsonp = JsonpFetchStrategy()


__all__ = [
    "DEFAULT_TIMEOUT_SECONDS",
    "JSONP_CALLBACK_PARAM",
    "FetchStrategy",
    "NativeFetchStrategy",
    "JsonpFetchStrategy",
    "fetch_native",
    "fetch_jsonp",
]
