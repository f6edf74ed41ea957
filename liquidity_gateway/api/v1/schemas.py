"""Pydantic schemas for API response serialization"""

import math
from pydantic import BaseModel, BeforeValidator, ConfigDict
from typing import Annotated, Generic, List, Optional, TypeVar

T = TypeVar("T")


def unbounded_as_null(value):
    # JSON has no infinity: an unlimited runway is sent as null
    if isinstance(value, float) and math.isinf(value):
        return None
    return value


RunwayLength = Annotated[Optional[float], BeforeValidator(unbounded_as_null)]


class DomainSchema(BaseModel):
    """Base for schemas populated straight from domain dataclasses"""

    model_config = ConfigDict(from_attributes=True)


class MonthlyProjectionSchema(DomainSchema):
    """Single month in the runway depletion breakdown"""

    month: str
    projected_cash: float
    expenses: float
    net_cash: float


class RunwayResponse(DomainSchema):
    """Payload for GET /v1/dashboard/runway/{user_id}"""

    current_cash: float
    monthly_expenses: float
    runway_months: RunwayLength
    runway_days: RunwayLength
    status: str
    recommendations: List[str]
    monthly_breakdown: List[MonthlyProjectionSchema]


class TimelinePeriodSchema(DomainSchema):
    """Single 30-day window in the cash gap timeline"""

    period: str
    ar_amount: float
    ap_amount: float
    net_cash_flow: float
    cumulative_cash: float


class CashGapResponse(DomainSchema):
    """Payload for GET /v1/dashboard/cash-gap/{user_id}"""

    total_ar: float
    total_ap: float
    cash_gap: float
    ar_due_in_30_days: float
    ap_due_in_30_days: float
    net_gap_30_days: float
    ar_due_in_60_days: float
    ap_due_in_60_days: float
    net_gap_60_days: float
    risk_level: str
    recommendations: List[str]
    timeline: List[TimelinePeriodSchema]


class DashboardSummarySchema(DomainSchema):
    total_cash: float
    total_ar: float
    total_ap: float
    net_position: float
    runway_status: str
    cash_gap_status: str


class DashboardResponse(DomainSchema):
    """Payload for GET /v1/dashboard/{user_id}"""

    runway: RunwayResponse
    cash_gap: CashGapResponse
    overall_risk: str
    summary: DashboardSummarySchema


class ForecastMonthSchema(DomainSchema):
    """Single month of GET /v1/dashboard/forecast/{user_id}"""

    month: str
    opening_cash: float
    projected_inflows: float
    projected_outflows: float
    net_cash_flow: float
    closing_cash: float
    confidence: str


class HealthKeyMetricsSchema(DomainSchema):
    runway_months: RunwayLength
    runway_status: str
    cash_gap: float
    cash_gap_risk: str
    total_cash: float
    total_ar: float
    total_ap: float
    net_position: float


class FinancialHealthResponse(DomainSchema):
    """Payload for GET /v1/dashboard/financial-health/{user_id}"""

    health_score: int
    health_status: str
    insights: List[str]
    key_metrics: HealthKeyMetricsSchema
    recommendations: List[str]


class Envelope(BaseModel, Generic[T]):
    """Success wrapper shared by all dashboard endpoints"""

    success: bool = True
    data: T
    timestamp: str
