"""
Field validation tests for the bond calculator form.

Run:
    pytest tests/test_bond_form_validation.py -q
"""

from __future__ import annotations

import pytest

from bond_client.calculator.validation import (
    BondField,
    FormValidationError,
    build_bond_request,
    clear_field_error,
    parse_frequency,
    validate_bond_form,
)


def test_valid_form_has_no_errors(valid_form):
    assert validate_bond_form(valid_form) == {}


def test_empty_form_reports_every_required_field():
    errors = validate_bond_form({})

    assert set(errors) == set(BondField)
    assert errors[BondField.FACE_VALUE] == "Face value is required"
    assert errors[BondField.YEARS_TO_MATURITY] == "Years to maturity is required"


def test_blank_strings_count_as_missing(valid_form):
    valid_form["marketPrice"] = "   "
    errors = validate_bond_form(valid_form)
    assert errors == {BondField.MARKET_PRICE: "Market price is required"}


@pytest.mark.parametrize(
    "field,label",
    [
        (BondField.FACE_VALUE, "Face value"),
        (BondField.COUPON_RATE, "Coupon rate"),
        (BondField.MARKET_PRICE, "Market price"),
        (BondField.YEARS_TO_MATURITY, "Years to maturity"),
    ],
)
@pytest.mark.parametrize("bad_value", [0, -1, "-0.5"])
def test_non_positive_values_are_rejected(valid_form, field, label, bad_value):
    valid_form[field.value] = bad_value

    errors = validate_bond_form(valid_form)

    assert errors == {field: f"{label} must be greater than 0"}


@pytest.mark.parametrize("bad_value", ["abc", True, "nan", float("inf")])
def test_non_numeric_values_are_rejected(valid_form, bad_value):
    valid_form["faceValue"] = bad_value
    errors = validate_bond_form(valid_form)
    assert errors == {BondField.FACE_VALUE: "Face value must be a number"}


def test_integers_too_large_for_a_float_are_rejected(valid_form):
    valid_form["faceValue"] = 10**400
    errors = validate_bond_form(valid_form)
    assert errors == {BondField.FACE_VALUE: "Face value must be a number"}


def test_coupon_rate_above_100_has_its_own_message(valid_form):
    valid_form["couponRate"] = 150
    over = validate_bond_form(valid_form)[BondField.COUPON_RATE]

    valid_form["couponRate"] = 0
    non_positive = validate_bond_form(valid_form)[BondField.COUPON_RATE]

    assert over == "Coupon rate must not exceed 100"
    assert over != non_positive


def test_coupon_rate_of_exactly_100_is_valid(valid_form):
    valid_form["couponRate"] = 100
    assert validate_bond_form(valid_form) == {}


def test_fields_are_checked_independently():
    errors = validate_bond_form({"faceValue": -5, "couponRate": 101, "marketPrice": "950", "yearsToMaturity": 2})

    assert set(errors) == {BondField.FACE_VALUE, BondField.COUPON_RATE}


def test_frequency_is_not_validated(valid_form):
    valid_form["frequency"] = None
    assert validate_bond_form(valid_form) == {}


def test_clear_field_error_removes_only_that_field():
    errors = validate_bond_form({})

    cleared = clear_field_error(errors, BondField.COUPON_RATE)

    assert BondField.COUPON_RATE not in cleared
    assert set(cleared) == set(BondField) - {BondField.COUPON_RATE}
    assert BondField.COUPON_RATE in errors


def test_build_bond_request_defaults_frequency_to_semi_annual(valid_form):
    del valid_form["frequency"]
    valid_form["faceValue"] = "1000"

    request = build_bond_request(valid_form)

    assert request.face_value == 1000.0
    assert request.frequency == 2
    assert request.to_payload() == {
        "faceValue": 1000.0,
        "couponRate": 5.0,
        "marketPrice": 950.0,
        "yearsToMaturity": 5.0,
        "frequency": 2,
    }


def test_build_bond_request_raises_with_all_field_errors():
    with pytest.raises(FormValidationError) as exc:
        build_bond_request({"faceValue": 1000})
    err = exc.value.field_errors
    assert BondField.FACE_VALUE not in err
    assert {BondField.COUPON_RATE, BondField.MARKET_PRICE, BondField.YEARS_TO_MATURITY} <= set(err)


@pytest.mark.parametrize("raw,expected", [(1, 1), (2, 2), ("1", 1), (" 2 ", 2), (1.0, 1), ("2.0", 2)])
def test_parse_frequency_accepts_offered_options(raw, expected):
    assert parse_frequency(raw) == expected


@pytest.mark.parametrize("raw", [True, False, 1.9, "1.5", 4, 0, "abc", None, float("nan"), 10**400])
def test_parse_frequency_rejects_anything_else(raw):
    with pytest.raises(ValueError, match="Unsupported frequency"):
        parse_frequency(raw)


def test_build_bond_request_does_not_truncate_frequency(valid_form):
    valid_form["frequency"] = 1.9
    with pytest.raises(ValueError):
        build_bond_request(valid_form)
