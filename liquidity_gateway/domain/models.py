"""Domain models - pure Python dataclasses representing business entities"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Tuple, Union

# Ledger stores may hand back floats, Decimals or numeric strings
Amount = Union[Decimal, float, int, str]

RECEIVABLE = "receivable"
PAYABLE = "payable"


@dataclass
class Account:
    """Cash-holding account snapshot (balance may be negative for overdrafts)"""

    balance: Amount
    currency: str = "TRY"
    type: str = "bank"


@dataclass
class ExpenseTransaction:
    """Ledger transaction; outflows carry a negative amount"""

    amount: Amount
    occurred_at: datetime


@dataclass
class ARAPItem:
    """Receivable or payable item with its aging in days"""

    kind: str  # "receivable" or "payable"
    amount: Amount
    age_days: int | None = 0
    status: str = "pending"  # "pending", "paid" or "overdue"


@dataclass(frozen=True)
class MonthlyProjection:
    """One month of pure cash depletion in the runway breakdown"""

    month: str
    projected_cash: float
    expenses: float
    net_cash: float


@dataclass(frozen=True)
class RunwayAnalysis:
    """How long current cash lasts at the trailing burn rate"""

    current_cash: float
    monthly_expenses: float
    runway_months: float
    runway_days: float
    status: str  # "critical", "warning" or "healthy"
    recommendations: Tuple[str, ...]
    monthly_breakdown: Tuple[MonthlyProjection, ...]


@dataclass(frozen=True)
class TimelinePeriod:
    """Receivables vs payables falling into one 30-day window"""

    period: str
    ar_amount: float
    ap_amount: float
    net_cash_flow: float
    cumulative_cash: float


@dataclass(frozen=True)
class CashGapAnalysis:
    """Timing gap between receivables and payables"""

    total_ar: float
    total_ap: float
    cash_gap: float
    ar_due_in_30_days: float
    ap_due_in_30_days: float
    net_gap_30_days: float
    ar_due_in_60_days: float
    ap_due_in_60_days: float
    net_gap_60_days: float
    risk_level: str  # "low", "medium", "high" or "critical"
    recommendations: Tuple[str, ...]
    timeline: Tuple[TimelinePeriod, ...]


@dataclass(frozen=True)
class DashboardSummary:
    """Headline figures shown next to the combined risk rating"""

    total_cash: float
    total_ar: float
    total_ap: float
    net_position: float
    runway_status: str
    cash_gap_status: str


@dataclass(frozen=True)
class CombinedDashboard:
    """Runway and cash gap analyses with an overall risk rating"""

    runway: RunwayAnalysis
    cash_gap: CashGapAnalysis
    overall_risk: str
    summary: DashboardSummary


@dataclass(frozen=True)
class ForecastMonth:
    """Single month of the cash-flow forecast"""

    month: str
    opening_cash: float
    projected_inflows: float
    projected_outflows: float
    net_cash_flow: float
    closing_cash: float
    confidence: str  # "high", "medium" or "low"


@dataclass(frozen=True)
class HealthKeyMetrics:
    """Headline figures behind the financial health score"""

    runway_months: float
    runway_status: str
    cash_gap: float
    cash_gap_risk: str
    total_cash: float
    total_ar: float
    total_ap: float
    net_position: float


@dataclass(frozen=True)
class FinancialHealth:
    """0-100 health score derived from runway and cash gap"""

    health_score: int
    health_status: str  # "excellent", "good", "fair", "poor" or "critical"
    insights: Tuple[str, ...]
    key_metrics: HealthKeyMetrics
    recommendations: Tuple[str, ...]
