"""Prometheus metrics for record operations and storage health"""

from prometheus_client import Counter, Histogram

# Record operation metrics
record_operation_counter = Counter(
    "payment_manager_record_operations_total",
    "Record operations by resource, operation and outcome",
    ["resource", "operation", "outcome"],  # outcome: ok | validation_error | not_found | storage_error
)

storage_failures_counter = Counter(
    "payment_manager_storage_failures_total",
    "Failed calls to the underlying data store",
    ["resource"],
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_operation(resource: str, operation: str, outcome: str) -> None:
    """Count one record operation; storage failures are also tallied separately"""
    record_operation_counter.labels(resource=resource, operation=operation, outcome=outcome).inc()
    if outcome == "storage_error":
        storage_failures_counter.labels(resource=resource).inc()
