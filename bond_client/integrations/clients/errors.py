"""
Failure taxonomy for calls to the bond calculation service.

Every failed call raises exactly one of:
- ValidationError: the service rejected the request as invalid (HTTP 400)
- ApiError: any other non-2xx response, with status code and details
- NetworkError: the request never completed (connection, cancellation,
  or an exception nobody classified)

All three share BondClientError and carry a `kind` tag, so callers can
branch on `exc.kind` instead of checking classes one by one.

Only the HTTP client builds these (the bond service may wrap an unknown
failure as NetworkError). Higher layers re-raise or inspect them.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Optional

CONNECTION_ERROR_MESSAGE = "Unable to connect to the server. Please check your internet connection."
CANCELLED_MESSAGE = "Request was cancelled"
UNEXPECTED_ERROR_MESSAGE = "An unexpected error occurred"


class ErrorKind(str, Enum):
    VALIDATION = "validation"
    API = "api"
    NETWORK = "network"


class BondClientError(Exception):
    kind: ErrorKind

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(BondClientError):
    kind = ErrorKind.VALIDATION


class ApiError(BondClientError):
    kind = ErrorKind.API

    def __init__(
        self,
        message: str,
        status_code: int,
        *,
        details: Optional[Dict[str, Any]] = None,
        response: Any = None,
        server_message: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.details = details
        self.response = response
        self.server_message = server_message or message

    def __repr__(self) -> str:
        return f"ApiError(status_code={self.status_code}, message={self.message!r})"


class NetworkError(BondClientError):
    kind = ErrorKind.NETWORK
