"""Turns calculation failures into messages for the user and the diagnostic log."""
from typing import Any, Dict, Optional
import logging

from bond_client.integrations.clients.errors import ApiError, BondClientError, ErrorKind

logger = logging.getLogger(__name__)

FALLBACK_MESSAGE = "An unexpected error occurred. Please try again."


def describe_failure(exc: BaseException) -> str:
    if not isinstance(exc, BondClientError):
        return FALLBACK_MESSAGE
    if exc.kind is ErrorKind.VALIDATION:
        return f"Validation Error: {exc.message}"
    if exc.kind is ErrorKind.API:
        return f"Server Error ({exc.status_code}): {exc.message}"
    if exc.kind is ErrorKind.NETWORK:
        return f"Network Error: {exc.message}"
    return FALLBACK_MESSAGE


class ErrorHandler:
    def handle_exception(
        self,
        exc: BaseException,
        request_data: Optional[Dict[str, Any]] = None,
        request_url: Optional[str] = None,
    ) -> str:
        """Log the failure and return the message shown to the user."""
        if isinstance(exc, ApiError):
            if exc.details:
                logger.error("Server error details: %s", exc.details)
            logger.error("Request data: %s", request_data)
            logger.error("Request URL: %s", request_url)
        elif not isinstance(exc, BondClientError):
            logger.error("Unhandled exception during bond calculation: %s", exc, exc_info=exc)
        logger.error("Calculation error: %r", exc)
        return describe_failure(exc)
