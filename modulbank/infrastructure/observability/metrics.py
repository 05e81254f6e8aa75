"""Prometheus metrics for bank API calls"""

from prometheus_client import Counter, Histogram

# Bank API metrics
bank_request_counter = Counter(
    "modulbank_requests_total",
    "Bank API calls by outcome",
    ["method", "outcome"],  # ok | error class name
)

bank_request_duration_histogram = Histogram(
    "modulbank_request_duration_seconds",
    "Bank API round trip time including decoding",
    ["method"],
    buckets=[0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0, 30.0],
)


def record_request(method: str, duration: float, error: Exception | None = None) -> None:
    """Record one bank API call"""
    outcome = "ok" if error is None else type(error).__name__
    bank_request_counter.labels(method=method, outcome=outcome).inc()
    bank_request_duration_histogram.labels(method=method).observe(duration)
