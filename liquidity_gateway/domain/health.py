"""Financial health score - runway and cash gap folded into a 0-100 rating"""

import asyncio
import logging
from datetime import datetime

from liquidity_gateway.domain.cash_gap import calculate_cash_gap
from liquidity_gateway.domain.gateway import DataGateway
from liquidity_gateway.domain.models import CashGapAnalysis, FinancialHealth, HealthKeyMetrics, RunwayAnalysis
from liquidity_gateway.domain.recommendations import health_insights
from liquidity_gateway.domain.runway import calculate_runway

logger = logging.getLogger(__name__)

HEALTH_RUNWAY_MONTHS = 12
HEALTH_CASH_GAP_MONTHS = 6

MAX_HEALTH_SCORE = 100

# Score penalties
RUNWAY_PENALTIES = {"critical": 40, "warning": 20}
CASH_GAP_RISK_PENALTIES = {"critical": 30, "high": 20, "medium": 10}

# Share of receivables not collectable within 30 days
SLOW_AR_SEVERE_RATIO = 0.5
SLOW_AR_SEVERE_PENALTY = 15
SLOW_AR_ELEVATED_RATIO = 0.3
SLOW_AR_ELEVATED_PENALTY = 10

# Lower score bound of each health band, best first
HEALTH_STATUS_BANDS = (
    (90, "excellent"),
    (75, "good"),
    (60, "fair"),
    (40, "poor"),
)
HEALTH_STATUS_CRITICAL = "critical"


def slow_receivables_ratio(cash_gap: CashGapAnalysis) -> float:
    """Fraction of AR falling outside the 30-day bucket (0 when there is no AR)"""
    if cash_gap.total_ar <= 0:
        return 0.0
    return (cash_gap.total_ar - cash_gap.ar_due_in_30_days) / cash_gap.total_ar


def slow_receivables_penalty(ratio: float) -> int:
    if ratio > SLOW_AR_SEVERE_RATIO:
        return SLOW_AR_SEVERE_PENALTY
    if ratio > SLOW_AR_ELEVATED_RATIO:
        return SLOW_AR_ELEVATED_PENALTY
    return 0


def calculate_health_score(runway: RunwayAnalysis, cash_gap: CashGapAnalysis) -> int:
    """
    Start from 100 and subtract penalties.

    - Runway: critical -40, warning -20
    - Cash gap risk: critical -30, high -20, medium -10
    - Slow receivables: >50% outside 30 days -15, >30% -10
    Floored at 0.
    """
    score = MAX_HEALTH_SCORE
    score -= RUNWAY_PENALTIES.get(runway.status, 0)
    score -= CASH_GAP_RISK_PENALTIES.get(cash_gap.risk_level, 0)
    score -= slow_receivables_penalty(slow_receivables_ratio(cash_gap))
    return max(0, score)


def classify_health_status(score: int) -> str:
    for lower_bound, status in HEALTH_STATUS_BANDS:
        if score >= lower_bound:
            return status
    return HEALTH_STATUS_CRITICAL


def assess_financial_health(runway: RunwayAnalysis, cash_gap: CashGapAnalysis) -> FinancialHealth:
    """Pure scoring step over already computed analyses"""
    score = calculate_health_score(runway, cash_gap)
    status = classify_health_status(score)

    return FinancialHealth(
        health_score=score,
        health_status=status,
        insights=health_insights(status, runway.status, cash_gap.risk_level),
        key_metrics=HealthKeyMetrics(
            runway_months=runway.runway_months,
            runway_status=runway.status,
            cash_gap=cash_gap.cash_gap,
            cash_gap_risk=cash_gap.risk_level,
            total_cash=runway.current_cash,
            total_ar=cash_gap.total_ar,
            total_ap=cash_gap.total_ap,
            net_position=runway.current_cash + cash_gap.total_ar - cash_gap.total_ap,
        ),
        recommendations=runway.recommendations + cash_gap.recommendations,
    )


async def get_financial_health(user_id: str, gateway: DataGateway, now: datetime | None = None) -> FinancialHealth:
    """Compute runway and cash gap concurrently, then score them"""
    runway, cash_gap = await asyncio.gather(
        calculate_runway(user_id, gateway, HEALTH_RUNWAY_MONTHS, now=now),
        calculate_cash_gap(user_id, gateway, HEALTH_CASH_GAP_MONTHS),
    )

    health = assess_financial_health(runway, cash_gap)
    logger.debug(
        "Financial health scored",
        extra={"user_id": user_id, "health_score": health.health_score, "health_status": health.health_status},
    )
    return health
