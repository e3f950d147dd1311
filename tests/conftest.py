"""Pytest fixtures for the bond calculator client tests."""

import copy
from typing import Callable

import httpx
import pytest

from bond_client.integrations.clients.real_http.http_client import HttpClient

BASE_URL = "http://bond.test/api"

DISCOUNT_RESPONSE = {
    "status": "Discount",
    "currentYield": 5.26,
    "yieldToMaturity": 6.15,
    "totalInterest": 250.0,
    "cashflows": [
        {"period": 1, "paymentDate": "2025-07-01", "couponPayment": 25.0, "cumulativeInterest": 25.0},
        {"period": 2, "paymentDate": "2026-01-01", "couponPayment": 25.0, "cumulativeInterest": 50.0},
    ],
}


@pytest.fixture
def valid_form():
    return {
        "faceValue": 1000,
        "couponRate": 5,
        "marketPrice": 950,
        "yearsToMaturity": 5,
        "frequency": 2,
    }


@pytest.fixture
def make_client() -> Callable[..., HttpClient]:
    """Build an HttpClient whose transport is answered by `handler`."""

    def _make(handler) -> HttpClient:
        return HttpClient(BASE_URL, transport=httpx.MockTransport(handler))

    return _make


@pytest.fixture
def discount_response():
    return copy.deepcopy(DISCOUNT_RESPONSE)
