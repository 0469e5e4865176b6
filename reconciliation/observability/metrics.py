"""
Prometheus metrics for reconciliation runs.

Counts validated records and emitted findings so data quality can be
tracked across repeated analyses of the same sources.
"""
from prometheus_client import (
    CONTENT_TYPE_LATEST,
    CollectorRegistry,
    Counter,
    Histogram,
    generate_latest,
)

# Private registry keeps these series out of the process default registry
REGISTRY = CollectorRegistry()

UNNAMED_DATASET = "unnamed"


records_validated_total = Counter(
    name="reconciliation_records_validated_total",
    documentation="Total number of records passed through the rule battery",
    labelnames=["dataset"],
    registry=REGISTRY,
)

findings_total = Counter(
    name="reconciliation_findings_total",
    documentation="Total number of data quality findings emitted",
    labelnames=["dataset", "column", "severity"],
    registry=REGISTRY,
)

validation_runs_total = Counter(
    name="reconciliation_validation_runs_total",
    documentation="Total number of validation runs",
    labelnames=["dataset"],
    registry=REGISTRY,
)

validation_duration_seconds = Histogram(
    name="reconciliation_validation_duration_seconds",
    documentation="Time spent validating one dataset in seconds",
    labelnames=["dataset"],
    buckets=[0.001, 0.005, 0.01, 0.05, 0.1, 0.5, 1.0, 5.0],
    registry=REGISTRY,
)


class MetricsCollector:
    """
    Records the outcome of a validation run.
    """

    def __init__(self, dataset_name: str | None = None):
        self.dataset = dataset_name or UNNAMED_DATASET

    def record_run(self, record_count: int, duration_seconds: float) -> None:
        validation_runs_total.labels(dataset=self.dataset).inc()
        records_validated_total.labels(dataset=self.dataset).inc(record_count)
        validation_duration_seconds.labels(dataset=self.dataset).observe(duration_seconds)

    def record_finding(self, column: str, severity: str) -> None:
        findings_total.labels(dataset=self.dataset, column=column, severity=severity).inc()


def get_metrics() -> bytes:
    """Render all reconciliation metrics in Prometheus exposition format."""
    return generate_latest(REGISTRY)


def get_content_type() -> str:
    return CONTENT_TYPE_LATEST
