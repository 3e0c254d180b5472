"""Prometheus metrics for monitoring score distribution, projections and request latency"""

from prometheus_client import Counter, Histogram
from finanzen_core.domain.models import ScoreBreakdown

# Score metrics
score_counter = Counter(
    "finanzen_score_total",
    "Financial health scores computed",
    ["band"],  # needs_attention | fair | healthy
)

# Projection metrics
projection_counter = Counter(
    "finanzen_projection_total",
    "Growth projections requested",
    ["outcome"],  # computed | unavailable
)

# Expense metrics
expense_summary_counter = Counter(
    "finanzen_expense_summary_total",
    "Expense summaries computed",
    ["window"],
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_score(breakdown: ScoreBreakdown) -> None:
    """Record score band distribution"""
    score_counter.labels(band=breakdown.band).inc()


def record_projection(available: bool) -> None:
    outcome = "computed" if available else "unavailable"
    projection_counter.labels(outcome=outcome).inc()
