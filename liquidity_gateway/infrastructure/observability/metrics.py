"""Prometheus metrics for monitoring liquidity risk outcomes and gateway health"""

from prometheus_client import Counter, Histogram

# Analysis metrics
analysis_counter = Counter(
    "liquidity_analysis_total",
    "Total liquidity analyses served",
    ["analysis", "outcome"],  # runway|cash_gap|dashboard|forecast|financial_health x status/risk level
)

analysis_latency_histogram = Histogram(
    "liquidity_analysis_duration_seconds",
    "Time spent computing an analysis, including gateway reads",
    ["analysis"],
    buckets=[0.01, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0],
)

# Data gateway metrics
gateway_failures_counter = Counter(
    "ledger_gateway_failures_total",
    "Failed ledger data reads",
    ["source"],  # database | ledger_api
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_analysis(analysis: str, outcome: str, duration_seconds: float) -> None:
    """Record outcome distribution and latency for one analysis"""
    analysis_counter.labels(analysis=analysis, outcome=outcome).inc()
    analysis_latency_histogram.labels(analysis=analysis).observe(duration_seconds)
