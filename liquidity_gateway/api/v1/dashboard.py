"""GET /v1/dashboard/* - runway, cash gap, forecast, financial health and combined dashboard endpoints"""

import time
import logging
from datetime import datetime, timezone
from typing import Any, Awaitable, Callable, List
from fastapi import APIRouter, Depends, HTTPException, Query, Request

from liquidity_gateway.api.v1.schemas import (
    CashGapResponse,
    DashboardResponse,
    Envelope,
    FinancialHealthResponse,
    ForecastMonthSchema,
    RunwayResponse,
)
from liquidity_gateway.api.dependencies import get_data_gateway, get_request_id
from liquidity_gateway.api.validation import validate_months, validate_user_id
from liquidity_gateway.config import settings
from liquidity_gateway.domain.gateway import DataGateway
from liquidity_gateway.domain.runway import calculate_runway
from liquidity_gateway.domain.cash_gap import calculate_cash_gap
from liquidity_gateway.domain.dashboard import get_dashboard
from liquidity_gateway.domain.forecast import get_cash_flow_forecast
from liquidity_gateway.domain.health import get_financial_health
from liquidity_gateway.domain.exceptions import DataGatewayError, ValidationError
from liquidity_gateway.infrastructure.observability.metrics import record_analysis, gateway_failures_counter
from liquidity_gateway.infrastructure.observability.logging import log_analysis

router = APIRouter(prefix="/dashboard")


def _timestamp() -> str:
    return datetime.now(timezone.utc).isoformat()


async def _run_analysis(
    analysis: str,
    request: Request,
    user_id: str,
    compute: Callable[[], Awaitable[Any]],
    outcome_of: Callable[[Any], str],
) -> Any:
    """
    Execution wrapper shared by all endpoints.

    Maps gateway failures to 503 and anything unexpected to 500, and records
    metrics and a structured log line for successful analyses.
    """
    start_time = time.perf_counter()
    request_id = get_request_id(request)

    try:
        result = await compute()

    except DataGatewayError as e:
        gateway_failures_counter.labels(source=settings.data_source).inc()
        logging.error(f"Ledger data unavailable: {e}", extra={"request_id": request_id, "user_id": user_id})
        raise HTTPException(status_code=503, detail="Ledger data unavailable")

    except Exception as e:
        logging.exception(f"Unexpected error: {e}", extra={"request_id": request_id, "user_id": user_id})
        raise HTTPException(status_code=500, detail="Internal server error")

    duration = time.perf_counter() - start_time
    outcome = outcome_of(result)
    record_analysis(analysis, outcome, duration)
    log_analysis(request_id, user_id, analysis, outcome, duration * 1000)
    return result


def _validated(user_id: str, months: int | None = None) -> None:
    """Raise 400 with a structured detail when inputs are rejected"""
    try:
        validate_user_id(user_id)
        if months is not None:
            validate_months(months)
    except ValidationError as e:
        raise HTTPException(
            status_code=400,
            detail={"code": e.code, "message": e.message, "field": e.field},
        )


@router.get("/runway/{user_id}", response_model=Envelope[RunwayResponse])
async def get_runway(
    user_id: str,
    request: Request,
    months: int = Query(settings.default_runway_months, description="Months to project"),
    gateway: DataGateway = Depends(get_data_gateway),
):
    """
    Cash runway: months of cash left at the trailing 6-month burn rate,
    with a month-by-month depletion breakdown.
    """
    _validated(user_id, months)
    runway = await _run_analysis(
        "runway",
        request,
        user_id,
        lambda: calculate_runway(user_id, gateway, months),
        lambda r: r.status,
    )
    return Envelope[RunwayResponse](data=RunwayResponse.model_validate(runway), timestamp=_timestamp())


@router.get("/cash-gap/{user_id}", response_model=Envelope[CashGapResponse])
async def get_cash_gap(
    user_id: str,
    request: Request,
    months: int = Query(settings.default_cash_gap_months, description="30-day periods to analyze"),
    gateway: DataGateway = Depends(get_data_gateway),
):
    """Receivables vs payables gap with aging buckets and a 30-day timeline"""
    _validated(user_id, months)
    cash_gap = await _run_analysis(
        "cash_gap",
        request,
        user_id,
        lambda: calculate_cash_gap(user_id, gateway, months),
        lambda r: r.risk_level,
    )
    return Envelope[CashGapResponse](data=CashGapResponse.model_validate(cash_gap), timestamp=_timestamp())


@router.get("/forecast/{user_id}", response_model=Envelope[List[ForecastMonthSchema]])
async def get_forecast(
    user_id: str,
    request: Request,
    months: int = Query(settings.default_runway_months, description="Months to forecast"),
    gateway: DataGateway = Depends(get_data_gateway),
):
    """Cash-flow forecast with confidence decaying over the horizon"""
    _validated(user_id, months)
    forecast = await _run_analysis(
        "forecast",
        request,
        user_id,
        lambda: get_cash_flow_forecast(user_id, gateway, months),
        lambda r: "depleted" if r and r[-1].closing_cash == 0 else "solvent",
    )
    return Envelope[List[ForecastMonthSchema]](
        data=[ForecastMonthSchema.model_validate(month) for month in forecast],
        timestamp=_timestamp(),
    )


@router.get("/financial-health/{user_id}", response_model=Envelope[FinancialHealthResponse])
async def get_health(
    user_id: str,
    request: Request,
    gateway: DataGateway = Depends(get_data_gateway),
):
    """0-100 financial health score with insights and merged recommendations"""
    _validated(user_id)
    health = await _run_analysis(
        "financial_health",
        request,
        user_id,
        lambda: get_financial_health(user_id, gateway),
        lambda r: r.health_status,
    )
    return Envelope[FinancialHealthResponse](
        data=FinancialHealthResponse.model_validate(health), timestamp=_timestamp()
    )


@router.get("/{user_id}", response_model=Envelope[DashboardResponse])
async def get_combined_dashboard(
    user_id: str,
    request: Request,
    gateway: DataGateway = Depends(get_data_gateway),
):
    """Runway and cash gap combined into one overall risk rating"""
    _validated(user_id)
    dashboard = await _run_analysis(
        "dashboard",
        request,
        user_id,
        lambda: get_dashboard(user_id, gateway),
        lambda r: r.overall_risk,
    )
    return Envelope[DashboardResponse](data=DashboardResponse.model_validate(dashboard), timestamp=_timestamp())
