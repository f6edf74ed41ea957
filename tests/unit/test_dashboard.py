"""Unit tests for the combined runway + cash gap dashboard"""

import pytest
from liquidity_gateway.domain.models import Account, ARAPItem
from liquidity_gateway.domain.dashboard import get_dashboard
from liquidity_gateway.domain.exceptions import DataGatewayError


def item(kind: str, amount: float, age_days: int = 10) -> ARAPItem:
    return ARAPItem(kind=kind, amount=amount, age_days=age_days)


async def test_dashboard_empty_ledger_is_critical(make_gateway, now):
    """No cash at all dominates the low cash-gap risk"""
    dashboard = await get_dashboard("nobody", make_gateway(), now=now)

    assert dashboard.runway.status == "critical"
    assert dashboard.cash_gap.risk_level == "low"
    assert dashboard.overall_risk == "critical"
    assert dashboard.summary.total_cash == 0
    assert dashboard.summary.net_position == 0


async def test_dashboard_healthy_and_low_risk(make_gateway, monthly_expenses, now):
    """Healthy runway with a comfortable positive gap"""
    gateway = make_gateway(
        accounts=[Account(balance=500000)],
        transactions=monthly_expenses(25000),
        items=[item("receivable", 200000), item("payable", 120000)],
    )

    dashboard = await get_dashboard("user-1", gateway, now=now)

    assert dashboard.overall_risk == "low"
    assert dashboard.summary.total_cash == 500000
    assert dashboard.summary.total_ar == 200000
    assert dashboard.summary.total_ap == 120000
    assert dashboard.summary.net_position == 580000
    assert dashboard.summary.runway_status == "healthy"
    assert dashboard.summary.cash_gap_status == "low"


async def test_dashboard_warning_runway_is_high_risk(make_gateway, monthly_expenses, now):
    gateway = make_gateway(accounts=[Account(balance=50000)], transactions=monthly_expenses(15000))

    dashboard = await get_dashboard("user-1", gateway, now=now)

    assert dashboard.runway.status == "warning"
    assert dashboard.overall_risk == "high"


async def test_dashboard_balanced_gap_is_medium_risk(make_gateway, now):
    """Healthy runway, equal AR and AP"""
    gateway = make_gateway(
        accounts=[Account(balance=100000)],
        items=[item("receivable", 10000), item("payable", 10000)],
    )

    dashboard = await get_dashboard("user-1", gateway, now=now)

    assert dashboard.overall_risk == "medium"


async def test_dashboard_uses_default_horizons(make_gateway, now):
    """12-month runway breakdown, 6-period cash gap timeline"""
    gateway = make_gateway(accounts=[Account(balance=1000)])

    dashboard = await get_dashboard("user-1", gateway, now=now)

    assert len(dashboard.runway.monthly_breakdown) == 12
    assert len(dashboard.cash_gap.timeline) == 6
    assert sorted(gateway.calls) == ["accounts", "payable", "receivable", "transactions"]


async def test_dashboard_gateway_failure_propagates(failing_gateway, now):
    """No partial dashboard when a read fails"""
    with pytest.raises(DataGatewayError):
        await get_dashboard("user-1", failing_gateway, now=now)
