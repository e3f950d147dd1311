"""Field validation for the bond calculator form.

The form submits raw values (numbers, numeric strings, or nothing at all).
`validate_bond_form` maps them to per-field error messages; an empty mapping
means the form may be submitted.

Every field is checked independently, so one bad field never hides another.
Frequency is picked from FREQUENCY_OPTIONS; `parse_frequency` rejects anything else.

`build_bond_request` raises `FormValidationError` so callers get all
`field_errors` at once.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Mapping, Optional

from bond_client.integrations.contracts.bond import DEFAULT_FREQUENCY, FREQUENCY_OPTIONS, BondCalculationRequest


class BondField(str, Enum):
    FACE_VALUE = "faceValue"
    COUPON_RATE = "couponRate"
    MARKET_PRICE = "marketPrice"
    YEARS_TO_MATURITY = "yearsToMaturity"


FIELD_LABELS: Dict[BondField, str] = {
    BondField.FACE_VALUE: "Face value",
    BondField.COUPON_RATE: "Coupon rate",
    BondField.MARKET_PRICE: "Market price",
    BondField.YEARS_TO_MATURITY: "Years to maturity",
}

MAX_COUPON_RATE = 100.0

FieldErrors = Dict[BondField, str]


@dataclass
class FormValidationError(Exception):
    """Exception raised for form validation failures.

    Attributes:
        field_errors: mapping of field -> human-readable error message.
        message: optional top-level message.
    """

    field_errors: FieldErrors
    message: str = "Please correct the highlighted fields"

    def __str__(self) -> str:
        return self.message


def add_error(errors: FieldErrors, field: BondField, message: str) -> None:
    if field not in errors:
        errors[field] = message


def parse_positive_number(payload: Mapping[str, Any], field: BondField, errors: FieldErrors) -> Optional[float]:
    """Return the field as a float, recording an error unless it is a real number > 0."""
    label = FIELD_LABELS[field]
    raw = payload.get(field.value)
    if raw is None or (isinstance(raw, str) and not raw.strip()):
        add_error(errors, field, f"{label} is required")
        return None
    if isinstance(raw, bool):
        add_error(errors, field, f"{label} must be a number")
        return None
    try:
        value = float(raw)
    except (TypeError, ValueError, OverflowError):
        add_error(errors, field, f"{label} must be a number")
        return None
    if not math.isfinite(value):
        add_error(errors, field, f"{label} must be a number")
        return None
    if value <= 0:
        add_error(errors, field, f"{label} must be greater than 0")
        return None
    return value


def parse_frequency(raw: Any) -> int:
    """Return the frequency as one of FREQUENCY_OPTIONS; raise ValueError otherwise."""
    error = ValueError(f"Unsupported frequency {raw!r}; choose one of {sorted(FREQUENCY_OPTIONS)}")
    if isinstance(raw, bool):
        raise error
    try:
        value = float(raw.strip() if isinstance(raw, str) else raw)
    except (TypeError, ValueError, OverflowError):
        raise error from None
    if not value.is_integer() or int(value) not in FREQUENCY_OPTIONS:
        raise error
    return int(value)


def validate_bond_form(payload: Mapping[str, Any]) -> FieldErrors:
    errors: FieldErrors = {}

    parse_positive_number(payload, BondField.FACE_VALUE, errors)

    coupon_rate = parse_positive_number(payload, BondField.COUPON_RATE, errors)
    if coupon_rate is not None and coupon_rate > MAX_COUPON_RATE:
        add_error(errors, BondField.COUPON_RATE, "Coupon rate must not exceed 100")

    parse_positive_number(payload, BondField.MARKET_PRICE, errors)
    parse_positive_number(payload, BondField.YEARS_TO_MATURITY, errors)
    return errors


def clear_field_error(errors: FieldErrors, field: BondField) -> FieldErrors:
    """Copy of `errors` without `field`; other fields keep their messages."""
    return {k: v for k, v in errors.items() if k != field}


def raise_if_errors(errors: FieldErrors, message: str = "Please correct the highlighted fields") -> None:
    if errors:
        raise FormValidationError(field_errors=errors, message=message)


def build_bond_request(payload: Mapping[str, Any]) -> BondCalculationRequest:
    raise_if_errors(validate_bond_form(payload))
    frequency = payload.get("frequency")
    return BondCalculationRequest(
        face_value=float(payload[BondField.FACE_VALUE.value]),
        coupon_rate=float(payload[BondField.COUPON_RATE.value]),
        market_price=float(payload[BondField.MARKET_PRICE.value]),
        years_to_maturity=float(payload[BondField.YEARS_TO_MATURITY.value]),
        frequency=parse_frequency(frequency) if frequency not in (None, "") else DEFAULT_FREQUENCY,
    )
