"""
Plain-text presentation of calculation results.

Only formats what the service returned; no bond metric is recomputed here.
The totals line adds up the returned coupon payments and the face value of
the last submitted request.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Dict, List, Optional, Sequence

from dateutil.relativedelta import relativedelta

from bond_client.integrations.contracts.bond import (
    DEFAULT_FREQUENCY,
    BondCalculationResponse,
    BondStatus,
    CashflowRow,
)

STATUS_LABELS: Dict[BondStatus, str] = {
    BondStatus.PREMIUM: "Premium Bond",
    BondStatus.DISCOUNT: "Discount Bond",
    BondStatus.PAR: "Par Bond",
}

EMPTY_TABLE_MESSAGE = "No cashflow data available"


def format_currency(value: float) -> str:
    return f"${value:,.2f}"


def format_percent(value: float) -> str:
    return f"{value:.2f}%"


def format_result_summary(result: BondCalculationResponse) -> List[str]:
    return [
        STATUS_LABELS[result.status],
        f"Current Yield: {format_percent(result.current_yield)}",
        f"Yield to Maturity: {format_percent(result.yield_to_maturity)}",
        f"Total Interest: {format_currency(result.total_interest)}",
    ]


def payment_date_for(period: int, start: date, frequency: int = DEFAULT_FREQUENCY) -> date:
    """Date of `period` (1-based) when payments are `frequency` times a year from `start`."""
    months = int(round((period - 1) * 12 / frequency))
    return start + relativedelta(months=months)


@dataclass
class CashflowTableRow:
    period: int
    payment_date: str
    coupon_payment: float
    cumulative_interest: float


@dataclass
class CashflowTable:
    rows: List[CashflowTableRow] = field(default_factory=list)
    face_value: float = 0.0

    @property
    def total_periods(self) -> int:
        return len(self.rows)

    @property
    def total_coupon(self) -> float:
        return sum(row.coupon_payment for row in self.rows)

    @property
    def total_received(self) -> float:
        return self.total_coupon + self.face_value


def build_cashflow_table(
    cashflows: Sequence[CashflowRow],
    face_value: float,
    start: Optional[date] = None,
    frequency: int = DEFAULT_FREQUENCY,
) -> CashflowTable:
    start = start or date.today()
    rows = [
        CashflowTableRow(
            period=cf.period,
            payment_date=cf.payment_date or payment_date_for(cf.period, start, frequency).isoformat(),
            coupon_payment=cf.coupon_payment,
            cumulative_interest=cf.cumulative_interest,
        )
        for cf in cashflows
    ]
    return CashflowTable(rows=rows, face_value=face_value)


def render_cashflow_table(table: CashflowTable) -> str:
    if not table.rows:
        return EMPTY_TABLE_MESSAGE

    header = f"{'Period':>6}  {'Payment Date':<12}  {'Coupon':>14}  {'Cumulative Interest':>20}"
    lines = [header, "-" * len(header)]
    for row in table.rows:
        lines.append(
            f"{row.period:>6}  {row.payment_date:<12}  "
            f"{format_currency(row.coupon_payment):>14}  {format_currency(row.cumulative_interest):>20}"
        )
    lines.append("-" * len(header))
    lines.append(
        f"Total Periods: {table.total_periods}  "
        f"Total Coupon: {format_currency(table.total_coupon)}  "
        f"Total Received: {format_currency(table.total_received)}"
    )
    return "\n".join(lines)
