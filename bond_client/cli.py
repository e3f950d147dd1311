"""
Command line front end for the bond calculation service.

Usage:
  bond-calc --face-value 1000 --coupon-rate 5 --market-price 950 --years 5
  bond-calc --face-value 1000 --coupon-rate 5 --market-price 950 --years 5 --frequency 1 \
      --base-url http://127.0.0.1:8000/api
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from typing import List, Optional

from bond_client.calculator.controller import SubmissionController, SubmissionState
from bond_client.calculator.presentation import build_cashflow_table, format_result_summary, render_cashflow_table
from bond_client.calculator.validation import FIELD_LABELS
from bond_client.integrations.clients.real_http.http_client import HttpClient
from bond_client.integrations.contracts.bond import DEFAULT_FREQUENCY, FREQUENCY_OPTIONS
from bond_client.integrations.policy.bond_service import BondService
from bond_client.utils.config_loader import load_client_config

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Calculate bond metrics and the cashflow schedule")
    parser.add_argument("--face-value", help="Principal repaid at maturity")
    parser.add_argument("--coupon-rate", help="Annual coupon rate in percent")
    parser.add_argument("--market-price", help="Current market price")
    parser.add_argument("--years", help="Years to maturity")
    parser.add_argument(
        "--frequency",
        type=int,
        choices=sorted(FREQUENCY_OPTIONS),
        default=DEFAULT_FREQUENCY,
        help="Coupon payments per year (1 = Annual, 2 = Semi-Annual)",
    )
    parser.add_argument("--base-url", help="Service base URL (defaults to configuration)")
    return parser


def _service_for(base_url: Optional[str]) -> BondService:
    if base_url:
        return BondService(HttpClient(base_url))
    return BondService.from_config(load_client_config())


def run(args: argparse.Namespace, service: BondService) -> int:
    controller = SubmissionController(service)
    state = asyncio.run(
        controller.submit(
            {
                "faceValue": args.face_value,
                "couponRate": args.coupon_rate,
                "marketPrice": args.market_price,
                "yearsToMaturity": args.years,
                "frequency": args.frequency,
            }
        )
    )

    if state is SubmissionState.REJECTED:
        print("Please correct the following fields:")
        for field, message in controller.field_errors.items():
            print(f"  {FIELD_LABELS[field]}: {message}")
        return 1

    if state is SubmissionState.FAILED:
        print(controller.error_message)
        return 1

    for line in format_result_summary(controller.result):
        print(line)
    print()
    table = build_cashflow_table(
        controller.result.cashflows,
        face_value=controller.last_request.face_value,
        frequency=controller.last_request.frequency,
    )
    print(render_cashflow_table(table))
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    logging.basicConfig(level=logging.INFO)
    args = build_parser().parse_args(argv)
    try:
        service = _service_for(args.base_url)
    except (FileNotFoundError, ValueError) as e:
        print(f"Configuration error: {e}")
        return 1
    return run(args, service)


if __name__ == "__main__":
    sys.exit(main())
