"""Cash runway calculation - how long current cash lasts at the trailing burn rate"""

import math
from datetime import datetime
from typing import List

from liquidity_gateway.domain.gateway import DataGateway
from liquidity_gateway.domain.models import MonthlyProjection, RunwayAnalysis
from liquidity_gateway.domain.recommendations import runway_recommendations
from liquidity_gateway.domain.risk import classify_runway_status
from liquidity_gateway.utils.date_utils import add_months, month_label, utc_now
from liquidity_gateway.utils.numeric import clamp_horizon, round_half_up, sum_amounts, to_float

# Burn rate is averaged over a fixed trailing window
EXPENSE_LOOKBACK_MONTHS = 6
DAYS_PER_MONTH = 30


def calculate_runway_months(current_cash: float, monthly_expenses: float) -> tuple[float, float]:
    """
    Return (runway_months, runway_days).

    - No cash (or overdrawn): zero runway
    - No expenses: infinite runway
    """
    if current_cash <= 0:
        return 0.0, 0.0
    if monthly_expenses > 0:
        runway_months = current_cash / monthly_expenses
        return runway_months, runway_months * DAYS_PER_MONTH
    return math.inf, math.inf


def build_monthly_breakdown(
    current_cash: float,
    monthly_expenses: float,
    months: int,
    now: datetime,
) -> List[MonthlyProjection]:
    """Pure depletion projection: income is not modeled here"""
    breakdown = []
    running_cash = current_cash
    for i in range(1, months + 1):
        running_cash -= monthly_expenses
        breakdown.append(
            MonthlyProjection(
                month=month_label(add_months(now, i)),
                projected_cash=max(0.0, running_cash),
                expenses=monthly_expenses,
                net_cash=-monthly_expenses,
            )
        )
    return breakdown


async def calculate_runway(
    user_id: str,
    gateway: DataGateway,
    months: int = 12,
    now: datetime | None = None,
) -> RunwayAnalysis:
    """
    Calculate cash runway for a user.

    Requirements:
    - Current cash is the face-value sum of all account balances
    - Monthly expenses = trailing 6-month outflows / 6 (divisor is always 6,
      even when fewer months hold transactions)
    - Breakdown has exactly `months` entries starting next month

    Args:
        user_id: Owner of the ledger data
        gateway: Ledger data source
        months: Breakdown horizon, clamped to at least 1
        now: Reference time (defaults to current UTC time)
    """
    months = clamp_horizon(months)
    now = now or utc_now()

    # 1. Current cash position
    accounts = await gateway.list_accounts(user_id)
    current_cash = sum_amounts(account.balance for account in accounts)

    # 2. Trailing average burn rate
    since = add_months(now, -EXPENSE_LOOKBACK_MONTHS)
    transactions = await gateway.list_expense_transactions(user_id, since)
    outflows = [t.amount for t in transactions if to_float(t.amount) <= 0]
    monthly_expenses = abs(sum_amounts(outflows)) / EXPENSE_LOOKBACK_MONTHS

    # 3. Runway and status
    runway_months, runway_days = calculate_runway_months(current_cash, monthly_expenses)
    status = classify_runway_status(current_cash, runway_months)

    # 4. Month-by-month depletion
    breakdown = build_monthly_breakdown(current_cash, monthly_expenses, months, now)

    return RunwayAnalysis(
        current_cash=current_cash,
        monthly_expenses=monthly_expenses,
        runway_months=round_half_up(runway_months, 2) if math.isfinite(runway_months) else runway_months,
        runway_days=round_half_up(runway_days) if math.isfinite(runway_days) else runway_days,
        status=status,
        recommendations=runway_recommendations(status),
        monthly_breakdown=tuple(breakdown),
    )
