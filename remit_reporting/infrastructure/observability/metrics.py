"""Prometheus metrics for report volume, health score distribution and collaborator failures"""

from prometheus_client import Counter, Histogram

# Report metrics
report_counter = Counter(
    "reporting_reports_generated_total",
    "Reports generated",
    ["report_type"],  # remittance | savings | bills | insurance | health_score | financial_health | trend
)

health_score_histogram = Histogram(
    "reporting_health_score",
    "Financial health scores issued",
    buckets=[20, 40, 55, 60, 75, 80, 95, 100],
)

stored_report_counter = Counter(
    "reporting_reports_stored_total",
    "Reports written to the report store",
)

# Collaborator metrics
collaborator_failures_counter = Counter(
    "reporting_collaborator_failures_total",
    "Failed collaborator calls",
    ["collaborator"],
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_report(report_type: str, health_score: int | None = None) -> None:
    """Count a generated report and, for scored reports, observe the score"""
    report_counter.labels(report_type=report_type).inc()
    if health_score is not None:
        health_score_histogram.observe(health_score)
