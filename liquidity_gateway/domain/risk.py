"""Threshold-based risk and status classification shared by the calculators"""

# Runway status boundaries (months of cash left)
CRITICAL_RUNWAY_MONTHS = 3
WARNING_RUNWAY_MONTHS = 6

# Cash gap ratio boundaries
LOW_RISK_GAP_RATIO = 0.5
MODERATE_GAP_RATIO = 0.2
HIGH_RISK_GAP_RATIO = 0.5
CRITICAL_GAP_RATIO = 1.0

# Forecast confidence decays with distance into the future
HIGH_CONFIDENCE_MONTHS = 3
MEDIUM_CONFIDENCE_MONTHS = 6

STATUS_CRITICAL = "critical"
STATUS_WARNING = "warning"
STATUS_HEALTHY = "healthy"

RISK_LOW = "low"
RISK_MEDIUM = "medium"
RISK_HIGH = "high"
RISK_CRITICAL = "critical"

CONFIDENCE_HIGH = "high"
CONFIDENCE_MEDIUM = "medium"
CONFIDENCE_LOW = "low"


def classify_runway_status(current_cash: float, runway_months: float) -> str:
    """Map cash position and runway length to critical / warning / healthy"""
    if current_cash <= 0 or runway_months < CRITICAL_RUNWAY_MONTHS:
        return STATUS_CRITICAL
    if runway_months < WARNING_RUNWAY_MONTHS:
        return STATUS_WARNING
    return STATUS_HEALTHY


def classify_cash_gap_risk(cash_gap: float, total_ar: float, total_ap: float) -> str:
    """
    Map the receivables/payables gap to a risk level.

    Positive gaps are measured against payables, negative gaps against
    receivables. A user with no receivables and no payables at all is
    treated as low risk, while equal non-zero totals (gap of zero) are
    medium risk.
    """
    if total_ar == 0 and total_ap == 0:
        return RISK_LOW

    if cash_gap >= 0:
        gap_ratio = cash_gap / total_ap if total_ap > 0 else 0.0
        if gap_ratio > LOW_RISK_GAP_RATIO:
            return RISK_LOW
        elif gap_ratio > MODERATE_GAP_RATIO:
            return RISK_LOW
        return RISK_MEDIUM

    gap_ratio = abs(cash_gap) / total_ar if total_ar > 0 else 1.0
    if gap_ratio > CRITICAL_GAP_RATIO:
        return RISK_CRITICAL
    elif gap_ratio > HIGH_RISK_GAP_RATIO:
        return RISK_HIGH
    elif gap_ratio > MODERATE_GAP_RATIO:
        return RISK_MEDIUM
    return RISK_MEDIUM


def combine_overall_risk(runway_status: str, cash_gap_risk: str) -> str:
    """Worst-of combination of runway status and cash gap risk"""
    if runway_status == STATUS_CRITICAL or cash_gap_risk == RISK_CRITICAL:
        return RISK_CRITICAL
    if runway_status == STATUS_WARNING or cash_gap_risk == RISK_HIGH:
        return RISK_HIGH
    if cash_gap_risk == RISK_MEDIUM:
        return RISK_MEDIUM
    return RISK_LOW


def forecast_confidence(month_index: int) -> str:
    """Confidence band for the zero-based forecast month index"""
    if month_index < HIGH_CONFIDENCE_MONTHS:
        return CONFIDENCE_HIGH
    if month_index < MEDIUM_CONFIDENCE_MONTHS:
        return CONFIDENCE_MEDIUM
    return CONFIDENCE_LOW
