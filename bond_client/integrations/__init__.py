"""
Integrations layer.

This package contains all code used to communicate with the bond calculation
service:
- contracts/: request/response shapes
- clients/: the HTTP client and its error taxonomy
- policy/: domain services binding the client to one endpoint

Key rule:
- The calculator (validation, controller) MUST NOT call HTTP directly.
- It goes through policy/bond_service.py.
"""

from .clients.errors import ApiError, BondClientError, ErrorKind, NetworkError, ValidationError
from .contracts.bond import (
    BondCalculationRequest,
    BondCalculationResponse,
    BondStatus,
    CashflowRow,
)

__all__ = [
    # errors
    "ApiError", "BondClientError", "ErrorKind", "NetworkError", "ValidationError",
    # contracts
    "BondCalculationRequest", "BondCalculationResponse", "BondStatus", "CashflowRow",
]
