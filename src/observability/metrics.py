"""
Prometheus metrics collection for booking-enrichment

This module provides metrics instrumentation for monitoring
reference imports, row integration outcomes and run duration.
"""
from prometheus_client import (
    CONTENT_TYPE_LATEST,
    CollectorRegistry,
    Counter,
    Gauge,
    Histogram,
    generate_latest,
)

# Global registry for metrics
REGISTRY = CollectorRegistry()


# =======================
# PIPELINE METRICS
# =======================

# Input rows processed, status: enriched, failed
records_processed_total = Counter(
    name="enrichment_records_processed_total",
    documentation="Total number of input rows processed by the integrator",
    labelnames=["status"],
    registry=REGISTRY,
)

# Failed rows by error class
integration_errors_total = Counter(
    name="enrichment_integration_errors_total",
    documentation="Total number of input rows that could not be integrated",
    labelnames=["error_type"],
    registry=REGISTRY,
)

# Entries held by each reference store
reference_entries_loaded = Gauge(
    name="enrichment_reference_entries_loaded",
    documentation="Number of entries held by a reference store after import",
    labelnames=["store"],
    registry=REGISTRY,
)

# phase: import, integrate
run_duration_seconds = Histogram(
    name="enrichment_run_duration_seconds",
    documentation="Time spent in each pipeline phase in seconds",
    labelnames=["phase"],
    buckets=[0.01, 0.05, 0.1, 0.5, 1.0, 5.0, 10.0, 30.0, 60.0, 300.0],
    registry=REGISTRY,
)


# =======================
# HELPER FUNCTIONS
# =======================

def generate_metrics() -> bytes:
    """
    Generate Prometheus metrics in text format

    Returns:
        Metrics in Prometheus text format
    """
    return generate_latest(REGISTRY)


def get_content_type() -> str:
    return CONTENT_TYPE_LATEST


class track_duration:
    """
    Context manager for tracking operation duration

    Usage:
        with track_duration(run_duration_seconds, phase="import"):
            # do work
            pass
    """

    def __init__(self, histogram: Histogram, **labels):
        self.histogram = histogram
        self.labels = labels
        self.timer = None

    def __enter__(self):
        """Start timer"""
        self.timer = self.histogram.labels(**self.labels).time()
        self.timer.__enter__()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Stop timer"""
        self.timer.__exit__(exc_type, exc_val, exc_tb)
        return False


def increment_counter(counter: Counter, value: float = 1.0, **labels) -> None:
    """
    Increment a counter metric

    Args:
        counter: Prometheus Counter metric
        value: Amount to increment (default: 1.0)
        **labels: Label values for the metric
    """
    counter.labels(**labels).inc(value)


def set_gauge(gauge: Gauge, value: float, **labels) -> None:
    """
    Set a gauge metric value

    Args:
        gauge: Prometheus Gauge metric
        value: Value to set
        **labels: Label values for the metric
    """
    gauge.labels(**labels).set(value)


# =======================
# PIPELINE HELPERS
# =======================

def record_enriched_row() -> None:
    increment_counter(records_processed_total, status="enriched")


def record_failed_row(error: Exception) -> None:
    """
    Record an input row that could not be integrated.

    Args:
        error: The integration error for the row
    """
    increment_counter(records_processed_total, status="failed")
    increment_counter(integration_errors_total, error_type=type(error).__name__)


def record_reference_store(store_name: str, entries: int) -> None:
    set_gauge(reference_entries_loaded, entries, store=store_name)
