"""
Bond calculation contracts.

Defines the request/response structures exchanged with the bond calculation
service:
- the bond parameters sent to POST /bond/calculate
- the metrics and cashflow schedule returned by the service

The service owns the numbers. These models only check shape, they never
recompute or range-check returned values.

Wire names are camelCase (faceValue, yieldToMaturity, ...); Python code uses
the snake_case attribute names. Both are accepted when building a model.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

DEFAULT_FREQUENCY = 2

FREQUENCY_OPTIONS: Dict[int, str] = {
    1: "Annual",
    2: "Semi-Annual",
}


class BondStatus(str, Enum):
    PREMIUM = "Premium"
    DISCOUNT = "Discount"
    PAR = "Par"


class _WireModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class BondCalculationRequest(_WireModel):
    face_value: float = Field(gt=0)
    coupon_rate: float = Field(gt=0, le=100)
    market_price: float = Field(gt=0)
    years_to_maturity: float = Field(gt=0)
    frequency: int = Field(default=DEFAULT_FREQUENCY, ge=1)

    def to_payload(self) -> Dict[str, Any]:
        """Return the JSON body sent to the calculation endpoint."""
        return self.model_dump(by_alias=True)


class CashflowRow(_WireModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="allow")

    period: int
    coupon_payment: float
    cumulative_interest: float
    payment_date: Optional[str] = None       # ISO format: YYYY-MM-DD


class BondCalculationResponse(_WireModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="allow")

    status: BondStatus
    yield_to_maturity: float                 # percentage units, e.g. 6.15
    current_yield: float
    total_interest: float
    cashflows: List[CashflowRow] = Field(default_factory=list)
