from __future__ import annotations

from typing import List, Optional


class WsdotClientError(Exception):
    """Base error for client failures."""


class MissingApiKeyError(WsdotClientError, ValueError):
    """Raised when a request URL is built without an API access code."""


class TemplateMismatchError(WsdotClientError, ValueError):
    """A parameter and the endpoint template's placeholders do not line up."""

    def __init__(
        self,
        message: str,
        *,
        template: str,
        key: Optional[str] = None,
        placeholders: Optional[List[str]] = None,
    ):
        super().__init__(message)
        self.template = template
        self.key = key
        self.placeholders = list(placeholders or [])


class WsdotTransportError(WsdotClientError):
    """The underlying fetch strategy failed (network, status or parsing)."""


class WsdotHTTPError(WsdotTransportError):
    def __init__(
        self,
        *,
        status_code: int,
        url: str,
        message: str,
        response_text: Optional[str] = None,
    ):
        super().__init__(f"{status_code} GET {url}: {message}")
        self.status_code = status_code
        self.url = url
        self.response_text = response_text


class WsdotParseError(WsdotTransportError):
    pass


class WsdotJsonpError(WsdotTransportError):
    """JSONP body was not a call to the expected callback, or never arrived."""


class WsdotModelValidationError(WsdotClientError):
    pass


__all__ = [
    "WsdotClientError",
    "MissingApiKeyError",
    "TemplateMismatchError",
    "WsdotTransportError",
    "WsdotHTTPError",
    "WsdotParseError",
    "WsdotJsonpError",
    "WsdotModelValidationError",
]
