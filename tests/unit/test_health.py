"""Unit tests for the financial health score"""

import math
import pytest
from liquidity_gateway.domain.models import Account, ARAPItem, CashGapAnalysis, RunwayAnalysis
from liquidity_gateway.domain.health import (
    assess_financial_health,
    calculate_health_score,
    classify_health_status,
    get_financial_health,
    slow_receivables_ratio,
)
from liquidity_gateway.domain.recommendations import (
    HEALTH_STATUS_INSIGHTS,
    HIGH_CASH_FLOW_RISK_INSIGHT,
    RUNWAY_RECOMMENDATIONS,
    SHORT_RUNWAY_INSIGHT,
)
from liquidity_gateway.domain.exceptions import DataGatewayError


def make_runway(status: str = "healthy", current_cash: float = 100000, runway_months: float = 10.0) -> RunwayAnalysis:
    return RunwayAnalysis(
        current_cash=current_cash,
        monthly_expenses=10000,
        runway_months=runway_months,
        runway_days=runway_months * 30,
        status=status,
        recommendations=RUNWAY_RECOMMENDATIONS[status],
        monthly_breakdown=(),
    )


def make_cash_gap(
    risk_level: str = "low",
    total_ar: float = 100000,
    ar_due_in_30_days: float = 100000,
    total_ap: float = 50000,
    recommendations=("gap advice",),
) -> CashGapAnalysis:
    return CashGapAnalysis(
        total_ar=total_ar,
        total_ap=total_ap,
        cash_gap=total_ar - total_ap,
        ar_due_in_30_days=ar_due_in_30_days,
        ap_due_in_30_days=0.0,
        net_gap_30_days=ar_due_in_30_days,
        ar_due_in_60_days=total_ar,
        ap_due_in_60_days=total_ap,
        net_gap_60_days=total_ar - total_ap,
        risk_level=risk_level,
        recommendations=recommendations,
        timeline=(),
    )


@pytest.mark.parametrize("status,expected", [("healthy", 100), ("warning", 80), ("critical", 60)])
def test_runway_penalty(status, expected):
    assert calculate_health_score(make_runway(status), make_cash_gap()) == expected


@pytest.mark.parametrize(
    "risk_level,expected",
    [("low", 100), ("medium", 90), ("high", 80), ("critical", 70)],
)
def test_cash_gap_risk_penalty(risk_level, expected):
    assert calculate_health_score(make_runway(), make_cash_gap(risk_level)) == expected


@pytest.mark.parametrize(
    "ar_due_in_30_days,expected",
    [
        (100000, 100),  # nothing slow
        (70000, 100),  # exactly 30% slow
        (69000, 90),  # just over 30%
        (50000, 90),  # exactly 50% slow
        (49000, 85),  # just over 50%
        (0, 85),  # everything slow
    ],
)
def test_slow_receivables_penalty(ar_due_in_30_days, expected):
    cash_gap = make_cash_gap(total_ar=100000, ar_due_in_30_days=ar_due_in_30_days)

    assert calculate_health_score(make_runway(), cash_gap) == expected


def test_slow_receivables_ratio_without_receivables():
    assert slow_receivables_ratio(make_cash_gap(total_ar=0, ar_due_in_30_days=0)) == 0.0


def test_worst_case_score():
    """All penalties at their maximum leave 15 points"""
    score = calculate_health_score(make_runway("critical"), make_cash_gap("critical", ar_due_in_30_days=0))

    assert score == 15
    assert classify_health_status(score) == "critical"


@pytest.mark.parametrize(
    "score,status",
    [
        (100, "excellent"),
        (90, "excellent"),
        (89, "good"),
        (75, "good"),
        (74, "fair"),
        (60, "fair"),
        (59, "poor"),
        (40, "poor"),
        (39, "critical"),
        (0, "critical"),
    ],
)
def test_health_status_bands(score, status):
    assert classify_health_status(score) == status


def test_insights_for_sound_position():
    health = assess_financial_health(make_runway(), make_cash_gap())

    assert health.health_status == "excellent"
    assert health.insights == (HEALTH_STATUS_INSIGHTS["excellent"],)


def test_insights_add_runway_and_cash_flow_warnings():
    health = assess_financial_health(make_runway("critical"), make_cash_gap("high"))

    assert health.health_score == 40
    assert health.health_status == "poor"
    assert health.insights == (
        HEALTH_STATUS_INSIGHTS["poor"],
        SHORT_RUNWAY_INSIGHT,
        HIGH_CASH_FLOW_RISK_INSIGHT,
    )


def test_key_metrics_and_merged_recommendations():
    health = assess_financial_health(
        make_runway("warning", current_cash=50000, runway_months=3.33),
        make_cash_gap(total_ar=200000, ar_due_in_30_days=200000, total_ap=120000),
    )

    metrics = health.key_metrics
    assert metrics.runway_months == 3.33
    assert metrics.runway_status == "warning"
    assert metrics.cash_gap == 80000
    assert metrics.cash_gap_risk == "low"
    assert metrics.total_cash == 50000
    assert metrics.net_position == 130000
    assert health.recommendations == RUNWAY_RECOMMENDATIONS["warning"] + ("gap advice",)


async def test_get_financial_health_from_ledger(make_gateway, monthly_expenses, now):
    gateway = make_gateway(
        accounts=[Account(balance=500000)],
        transactions=monthly_expenses(25000),
        items=[
            ARAPItem(kind="receivable", amount=60000, age_days=10),
            ARAPItem(kind="receivable", amount=40000, age_days=45),
            ARAPItem(kind="payable", amount=50000, age_days=20),
        ],
    )

    health = await get_financial_health("user-1", gateway, now=now)

    # healthy runway, low gap risk, 40% of AR beyond 30 days
    assert health.health_score == 90
    assert health.health_status == "excellent"
    assert health.key_metrics.total_ar == 100000
    assert "accounts" in gateway.calls


async def test_get_financial_health_unlimited_runway(make_gateway, now):
    health = await get_financial_health("saver", make_gateway(accounts=[Account(balance=1000)]), now=now)

    assert math.isinf(health.key_metrics.runway_months)
    assert health.health_score == 100


async def test_get_financial_health_gateway_failure(failing_gateway, now):
    with pytest.raises(DataGatewayError):
        await get_financial_health("user-1", failing_gateway, now=now)
