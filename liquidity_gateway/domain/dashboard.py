"""Combined runway + cash gap dashboard"""

import asyncio
import logging
from datetime import datetime

from liquidity_gateway.domain.cash_gap import calculate_cash_gap
from liquidity_gateway.domain.gateway import DataGateway
from liquidity_gateway.domain.models import CombinedDashboard, DashboardSummary
from liquidity_gateway.domain.risk import combine_overall_risk
from liquidity_gateway.domain.runway import calculate_runway

logger = logging.getLogger(__name__)

DASHBOARD_RUNWAY_MONTHS = 12
DASHBOARD_CASH_GAP_MONTHS = 6


async def get_dashboard(user_id: str, gateway: DataGateway, now: datetime | None = None) -> CombinedDashboard:
    """
    Run both analyses concurrently and combine them into one risk rating.

    A failure in either analysis propagates; no partial dashboard is built.
    """
    runway, cash_gap = await asyncio.gather(
        calculate_runway(user_id, gateway, DASHBOARD_RUNWAY_MONTHS, now=now),
        calculate_cash_gap(user_id, gateway, DASHBOARD_CASH_GAP_MONTHS),
    )

    overall_risk = combine_overall_risk(runway.status, cash_gap.risk_level)
    logger.debug(
        "Dashboard combined",
        extra={"user_id": user_id, "runway_status": runway.status, "cash_gap_risk": cash_gap.risk_level},
    )

    return CombinedDashboard(
        runway=runway,
        cash_gap=cash_gap,
        overall_risk=overall_risk,
        summary=DashboardSummary(
            total_cash=runway.current_cash,
            total_ar=cash_gap.total_ar,
            total_ap=cash_gap.total_ap,
            net_position=runway.current_cash + cash_gap.total_ar - cash_gap.total_ap,
            runway_status=runway.status,
            cash_gap_status=cash_gap.risk_level,
        ),
    )
