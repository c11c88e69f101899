"""Prometheus metrics for monitoring approval rates, collateral outcomes and score distribution"""

from prometheus_client import Counter, Histogram

from surety_gateway.domain.models import AssessmentResult

# Decision metrics
assessment_counter = Counter(
    "surety_assessment_total",
    "Total 5C assessments made",
    ["band"],  # approved_tier_1 | approved_tier_2 | rejected
)

collateral_status_counter = Counter(
    "surety_collateral_requirement_total",
    "Collateral requirements issued by rule branch",
    ["status"],
)

final_score_histogram = Histogram(
    "surety_final_score",
    "Distribution of weighted 5C final scores",
    buckets=[20, 40, 60, 70, 78, 90, 100],
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_assessment(result: AssessmentResult) -> None:
    """Record decision metrics for monitoring approval rates and collateral mix"""
    assessment_counter.labels(band=result.decision_band.value).inc()
    collateral_status_counter.labels(status=result.collateral.status.value).inc()
    final_score_histogram.observe(result.final_score)
