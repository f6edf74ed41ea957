"""Cash gap analysis - receivables vs payables by aging bucket"""

from typing import List

from liquidity_gateway.domain.gateway import DataGateway
from liquidity_gateway.domain.models import PAYABLE, RECEIVABLE, ARAPItem, CashGapAnalysis, TimelinePeriod
from liquidity_gateway.domain.recommendations import cash_gap_recommendations
from liquidity_gateway.domain.risk import classify_cash_gap_risk
from liquidity_gateway.utils.numeric import clamp_horizon, sum_amounts

PERIOD_DAYS = 30


def _age(item: ARAPItem) -> int:
    return item.age_days or 0


def sum_due_within(items: List[ARAPItem], max_age_days: int) -> float:
    """Sum of items with age_days <= max_age_days (buckets are cumulative)"""
    return sum_amounts(item.amount for item in items if _age(item) <= max_age_days)


def sum_in_window(items: List[ARAPItem], start_days: int, end_days: int) -> float:
    """Sum of items with start_days < age_days <= end_days"""
    return sum_amounts(item.amount for item in items if start_days < _age(item) <= end_days)


def build_timeline(ar_items: List[ARAPItem], ap_items: List[ARAPItem], months: int) -> List[TimelinePeriod]:
    """One 30-day window per period with running cumulative net flow"""
    timeline = []
    cumulative_cash = 0.0
    for i in range(months):
        period_start = i * PERIOD_DAYS
        period_end = (i + 1) * PERIOD_DAYS

        ar_in_period = sum_in_window(ar_items, period_start, period_end)
        ap_in_period = sum_in_window(ap_items, period_start, period_end)
        net_cash_flow = ar_in_period - ap_in_period
        cumulative_cash += net_cash_flow

        timeline.append(
            TimelinePeriod(
                period=f"{period_start + 1}-{period_end} gün",
                ar_amount=ar_in_period,
                ap_amount=ap_in_period,
                net_cash_flow=net_cash_flow,
                cumulative_cash=cumulative_cash,
            )
        )
    return timeline


async def calculate_cash_gap(user_id: str, gateway: DataGateway, months: int = 6) -> CashGapAnalysis:
    """
    Calculate cash gap between receivables (AR) and payables (AP).

    age_days is used directly as the bucketing key: "due within 30 days"
    means age_days <= 30. Items without an age count as 0 days.

    Args:
        user_id: Owner of the ledger data
        gateway: Ledger data source
        months: Number of 30-day timeline periods, clamped to at least 1
    """
    months = clamp_horizon(months)

    ar_items = await gateway.list_arap_items(user_id, RECEIVABLE)
    ap_items = await gateway.list_arap_items(user_id, PAYABLE)

    # Totals
    total_ar = sum_amounts(item.amount for item in ar_items)
    total_ap = sum_amounts(item.amount for item in ap_items)
    cash_gap = total_ar - total_ap

    # Aging buckets
    ar_due_in_30_days = sum_due_within(ar_items, 30)
    ap_due_in_30_days = sum_due_within(ap_items, 30)
    ar_due_in_60_days = sum_due_within(ar_items, 60)
    ap_due_in_60_days = sum_due_within(ap_items, 60)

    risk_level = classify_cash_gap_risk(cash_gap, total_ar, total_ap)

    return CashGapAnalysis(
        total_ar=total_ar,
        total_ap=total_ap,
        cash_gap=cash_gap,
        ar_due_in_30_days=ar_due_in_30_days,
        ap_due_in_30_days=ap_due_in_30_days,
        net_gap_30_days=ar_due_in_30_days - ap_due_in_30_days,
        ar_due_in_60_days=ar_due_in_60_days,
        ap_due_in_60_days=ap_due_in_60_days,
        net_gap_60_days=ar_due_in_60_days - ap_due_in_60_days,
        risk_level=risk_level,
        recommendations=cash_gap_recommendations(cash_gap, risk_level),
        timeline=tuple(build_timeline(ar_items, ap_items, months)),
    )
