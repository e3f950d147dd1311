import pytest

from bond_client.cli import build_parser, run
from bond_client.integrations.clients.errors import ApiError
from bond_client.integrations.contracts.bond import BondCalculationResponse


class FakeBondService:
    calculate_url = "http://bond.test/api/bond/calculate"

    def __init__(self, result=None, error=None):
        self.result = result
        self.error = error

    async def calculate_bond(self, request):
        if self.error is not None:
            raise self.error
        return self.result


ARGS = ["--face-value", "1000", "--coupon-rate", "5", "--market-price", "950", "--years", "5"]


def test_run_prints_summary_and_table(capsys, discount_response):
    service = FakeBondService(result=BondCalculationResponse.model_validate(discount_response))

    code = run(build_parser().parse_args(ARGS), service)

    out = capsys.readouterr().out
    assert code == 0
    assert "Discount Bond" in out
    assert "Yield to Maturity: 6.15%" in out
    assert "Total Received: $1,050.00" in out


def test_run_reports_field_errors(capsys):
    code = run(build_parser().parse_args(["--face-value", "0", "--coupon-rate", "120"]), FakeBondService())

    out = capsys.readouterr().out
    assert code == 1
    assert "Face value: Face value must be greater than 0" in out
    assert "Coupon rate: Coupon rate must not exceed 100" in out


def test_run_reports_service_failures(capsys):
    service = FakeBondService(error=ApiError("Resource not found", 404))

    code = run(build_parser().parse_args(ARGS), service)

    assert code == 1
    assert "Server Error (404): Resource not found" in capsys.readouterr().out


def test_parser_only_offers_supported_frequencies():
    assert build_parser().parse_args(ARGS).frequency == 2
    with pytest.raises(SystemExit):
        build_parser().parse_args(ARGS + ["--frequency", "4"])
