"""
Generic JSON HTTP client.

Purpose:
- Builds URLs against one fixed base URL
- Sends JSON bodies with JSON content negotiation headers
- Classifies every failure into the taxonomy in clients/errors.py
- Returns parsed success bodies verbatim (no schema checks here)

Implementation notes:
- A fresh httpx.AsyncClient is opened per call; the client keeps no session
  state beyond its base URL and default headers
- `transport` exists so tests can plug in httpx.MockTransport

Important:
- This is the ONLY place that decides which error kind a failure is.
"""

from __future__ import annotations

import asyncio
import json
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Tuple, Union

import httpx

from bond_client.integrations.clients.errors import (
    CANCELLED_MESSAGE,
    CONNECTION_ERROR_MESSAGE,
    UNEXPECTED_ERROR_MESSAGE,
    ApiError,
    BondClientError,
    NetworkError,
    ValidationError,
)

logger = logging.getLogger(__name__)

QueryParams = Mapping[str, Union[str, int, float]]

DEFAULT_HEADERS: Dict[str, str] = {
    "Content-Type": "application/json",
    "Accept": "application/json",
}

_FIXED_STATUS_MESSAGES: Dict[int, str] = {
    401: "Unauthorized: Please check your credentials",
    403: "Forbidden: You do not have access to this resource",
    404: "Resource not found",
}
SERVER_ERROR_MESSAGE = "Server error: Please try again later"


@dataclass
class ApiResponse:
    data: Any
    status: int
    status_text: str
    headers: Dict[str, str] = field(default_factory=dict)


class HttpClient:
    def __init__(
        self,
        base_url: str,
        default_headers: Optional[Mapping[str, str]] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.default_headers: Dict[str, str] = dict(default_headers or DEFAULT_HEADERS)
        self._transport = transport

    def build_url(self, endpoint: str, params: Optional[QueryParams] = None) -> str:
        """Full URL for `endpoint`; query parameters keep insertion order."""
        url = f"{self.base_url}{endpoint}"
        if not params:
            return url
        return str(httpx.URL(url, params=dict(params)))

    def _merge_headers(self, headers: Optional[Mapping[str, str]]) -> Dict[str, str]:
        return {**self.default_headers, **(headers or {})}

    async def request(
        self,
        endpoint: str,
        method: str = "GET",
        body: Any = None,
        params: Optional[QueryParams] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> ApiResponse:
        try:
            url = self.build_url(endpoint, params)
            content = json.dumps(body) if body is not None else None
            merged_headers = self._merge_headers(headers)

            logger.debug("%s %s", method, url)
            async with httpx.AsyncClient(transport=self._transport) as client:
                response = await client.request(method, url, content=content, headers=merged_headers)

            if not response.is_success:
                raise self._classify_failure(response)

            return ApiResponse(
                data=response.json(),
                status=response.status_code,
                status_text=response.reason_phrase,
                headers=dict(response.headers),
            )
        except BondClientError:
            raise
        except httpx.TransportError as exc:
            logger.warning("Transport failure calling %s: %s", endpoint, exc)
            raise NetworkError(CONNECTION_ERROR_MESSAGE) from exc
        except asyncio.CancelledError as exc:
            logger.info("Request to %s was cancelled", endpoint)
            raise NetworkError(CANCELLED_MESSAGE) from exc
        except Exception as exc:
            raise NetworkError(str(exc) or UNEXPECTED_ERROR_MESSAGE) from exc

    async def get(self, endpoint: str, **kwargs: Any) -> ApiResponse:
        return await self.request(endpoint, "GET", **kwargs)

    async def post(self, endpoint: str, body: Any = None, **kwargs: Any) -> ApiResponse:
        return await self.request(endpoint, "POST", body=body, **kwargs)

    async def put(self, endpoint: str, body: Any = None, **kwargs: Any) -> ApiResponse:
        return await self.request(endpoint, "PUT", body=body, **kwargs)

    async def patch(self, endpoint: str, body: Any = None, **kwargs: Any) -> ApiResponse:
        return await self.request(endpoint, "PATCH", body=body, **kwargs)

    async def delete(self, endpoint: str, **kwargs: Any) -> ApiResponse:
        return await self.request(endpoint, "DELETE", **kwargs)

    # ------------------------------------------------------------------
    # Failure classification
    # ------------------------------------------------------------------

    def _classify_failure(self, response: httpx.Response) -> BondClientError:
        message, details, raw = _parse_error_body(response)
        status = response.status_code
        logger.debug("HTTP %s from %s: %s", status, response.request.url, message)

        if status == 400:
            return ValidationError(message)
        if status in _FIXED_STATUS_MESSAGES:
            return ApiError(
                _FIXED_STATUS_MESSAGES[status], status, details=details, response=raw, server_message=message
            )
        if status >= 500:
            return ApiError(SERVER_ERROR_MESSAGE, status, details=details, response=raw, server_message=message)
        return ApiError(message, status, details=details, response=raw)


def _parse_error_body(response: httpx.Response) -> Tuple[str, Optional[Dict[str, Any]], Any]:
    """Return (message, details, raw body) for a failed response."""
    fallback = response.reason_phrase
    try:
        data = response.json()
    except ValueError:
        return fallback, None, None

    if not isinstance(data, dict):
        return fallback, None, data

    message = fallback
    for key in ("message", "error", "detail"):
        value = data.get(key)
        if isinstance(value, str):
            message = value
            break

    details = dict(data) if ("error" in data or "detail" in data) else None
    return message, details, data
