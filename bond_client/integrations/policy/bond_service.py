"""
Bond Service for the calculation API.

Binds the generic HttpClient to the bond calculation endpoint and types the
returned body as a BondCalculationResponse.
"""

from __future__ import annotations

import logging
from typing import NoReturn, Optional

from bond_client.integrations.clients.errors import BondClientError, NetworkError
from bond_client.integrations.clients.real_http.http_client import HttpClient
from bond_client.integrations.clients.real_http.routes import BOND_CALCULATE
from bond_client.integrations.contracts.bond import BondCalculationRequest, BondCalculationResponse
from bond_client.utils.config_loader import ClientConfig, load_client_config

logger = logging.getLogger(__name__)


class BondService:
    def __init__(self, client: HttpClient):
        self.client = client

    @classmethod
    def from_config(cls, config: Optional[ClientConfig] = None) -> "BondService":
        config = config or load_client_config()
        return cls(HttpClient(config.base_url))

    @property
    def calculate_url(self) -> str:
        return self.client.build_url(BOND_CALCULATE)

    async def calculate_bond(self, request: BondCalculationRequest) -> BondCalculationResponse:
        """
        Calculate bond metrics and the cashflow schedule.

        Raises:
            ValidationError: the service rejected the parameters (HTTP 400)
            ApiError: any other HTTP error status
            NetworkError: transport failures, cancellation, or an unexpected response
        """
        try:
            response = await self.client.post(BOND_CALCULATE, request.to_payload())
            return BondCalculationResponse.model_validate(response.data)
        except Exception as exc:
            self._handle_error(exc, "Failed to calculate bond metrics")

    @staticmethod
    def _handle_error(error: Exception, context: str) -> NoReturn:
        if isinstance(error, BondClientError):
            raise error

        logger.warning("%s: %s", context, error)
        detail = str(error)
        raise NetworkError(f"{context}: {detail}" if detail else context) from error
