"""
Contracts (data models).

This folder defines the request/response shapes for the bond calculation
service. The HTTP client, the bond service, the controller and the
presentation helpers all rely on these models instead of ad-hoc dicts.
"""

from .bond import (
    DEFAULT_FREQUENCY,
    FREQUENCY_OPTIONS,
    BondCalculationRequest,
    BondCalculationResponse,
    BondStatus,
    CashflowRow,
)

__all__ = [
    "DEFAULT_FREQUENCY",
    "FREQUENCY_OPTIONS",
    "BondCalculationRequest",
    "BondCalculationResponse",
    "BondStatus",
    "CashflowRow",
]
