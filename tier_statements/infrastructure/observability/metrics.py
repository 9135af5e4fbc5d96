"""Prometheus metrics for monitoring ingestion outcomes and report generation"""

from prometheus_client import Counter, Histogram
from tier_statements.domain.models import Cardholder, InvalidRecord

# Ingestion metrics
records_counter = Counter(
    "tier_statements_records_total",
    "Input records processed",
    ["outcome"],  # valid | invalid
)

rejections_counter = Counter(
    "tier_statements_rejections_total",
    "Rejected input records by failure kind",
    ["kind"],  # structural | category | field
)

cardholders_counter = Counter(
    "tier_statements_cardholders_total",
    "Parsed cardholders by benefit tier",
    ["tier"],
)

# Report metrics
reports_counter = Counter(
    "tier_statements_reports_total",
    "Reports rendered",
    ["report"],  # original | by_name | by_balance | invalid
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_cardholder(cardholder: Cardholder) -> None:
    """Count a successfully parsed record"""
    records_counter.labels(outcome="valid").inc()
    cardholders_counter.labels(tier=cardholder.tier.name.lower()).inc()


def record_rejection(invalid_record: InvalidRecord) -> None:
    """Count a rejected record"""
    records_counter.labels(outcome="invalid").inc()
    rejections_counter.labels(kind=invalid_record.kind.value).inc()


def record_report(report: str) -> None:
    reports_counter.labels(report=report).inc()
