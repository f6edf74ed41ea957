"""Multi-month cash-flow forecast built from runway and cash gap analyses"""

import asyncio
from datetime import datetime
from typing import List

from liquidity_gateway.domain.cash_gap import calculate_cash_gap
from liquidity_gateway.domain.gateway import DataGateway
from liquidity_gateway.domain.models import CashGapAnalysis, ForecastMonth, RunwayAnalysis
from liquidity_gateway.domain.risk import forecast_confidence
from liquidity_gateway.domain.runway import calculate_runway
from liquidity_gateway.utils.date_utils import add_months, month_label, utc_now
from liquidity_gateway.utils.numeric import clamp_horizon


def project_cash_flow(
    runway: RunwayAnalysis,
    cash_gap: CashGapAnalysis,
    months: int,
    now: datetime | None = None,
) -> List[ForecastMonth]:
    """
    Project opening/closing cash month by month.

    Inflows come from the receivables timeline, outflows from the trailing
    burn rate plus the payables timeline. Months past the end of the
    timeline only carry the burn rate. Closing cash never goes below zero
    and becomes the next month's opening cash.
    """
    months = clamp_horizon(months)
    now = now or utc_now()
    timeline = cash_gap.timeline

    forecast = []
    opening_cash = runway.current_cash
    for i in range(months):
        in_timeline = i < len(timeline)
        projected_inflows = timeline[i].ar_amount if in_timeline else 0.0
        projected_outflows = runway.monthly_expenses + (timeline[i].ap_amount if in_timeline else 0.0)
        net_cash_flow = projected_inflows - projected_outflows
        closing_cash = max(0.0, opening_cash + net_cash_flow)

        forecast.append(
            ForecastMonth(
                month=month_label(add_months(now, i)),
                opening_cash=opening_cash,
                projected_inflows=projected_inflows,
                projected_outflows=projected_outflows,
                net_cash_flow=net_cash_flow,
                closing_cash=closing_cash,
                confidence=forecast_confidence(i),
            )
        )
        opening_cash = closing_cash

    return forecast


async def get_cash_flow_forecast(
    user_id: str,
    gateway: DataGateway,
    months: int = 12,
    now: datetime | None = None,
) -> List[ForecastMonth]:
    """Fetch both analyses with a matching horizon, then project"""
    months = clamp_horizon(months)
    now = now or utc_now()

    runway, cash_gap = await asyncio.gather(
        calculate_runway(user_id, gateway, months, now=now),
        calculate_cash_gap(user_id, gateway, months),
    )
    return project_cash_flow(runway, cash_gap, months, now=now)
