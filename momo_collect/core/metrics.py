"""Prometheus metrics for the momo-collect client.

A single run is short-lived, so metrics are not scraped. They are
written once at exit in the text exposition format when a metrics
file is configured (e.g. for the node_exporter textfile collector).

Gateway Metrics:
- momo_gateway_request_latency_seconds: Latency per gateway operation
- momo_gateway_requests_total: Gateway calls by operation and result
- momo_gateway_retry_total: Transport retries by operation

Polling Metrics:
- momo_poll_attempts_total: Status checks that came back pending
- momo_payment_outcome_total: Runs by final outcome
"""

import time
from contextlib import contextmanager
from typing import Generator

from prometheus_client import Counter, Histogram, REGISTRY, write_to_textfile


# =============================================================================
# Gateway Metrics
# =============================================================================

gateway_request_latency = Histogram(
    "momo_gateway_request_latency_seconds",
    "Gateway request latency in seconds",
    ["operation"],  # initiate, check_status
    buckets=[0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0],
)

gateway_requests_total = Counter(
    "momo_gateway_requests_total",
    "Total number of gateway requests",
    ["operation", "result"],  # success, error, unavailable, malformed
)

gateway_retries = Counter(
    "momo_gateway_retry_total",
    "Total number of gateway transport retries",
    ["operation"],
)


# =============================================================================
# Polling Metrics
# =============================================================================

poll_attempts = Counter(
    "momo_poll_attempts_total",
    "Total number of status checks that returned pending",
)

payment_outcome_total = Counter(
    "momo_payment_outcome_total",
    "Total number of payment runs by final outcome",
    ["outcome"],  # successful, failed, timeout, cancelled, invalid, error
)


# =============================================================================
# Helper Functions
# =============================================================================

@contextmanager
def track_gateway_latency(operation: str) -> Generator[None, None, None]:
    """Context manager to track gateway request latency."""
    start = time.perf_counter()
    try:
        yield
    finally:
        duration = time.perf_counter() - start
        gateway_request_latency.labels(operation=operation).observe(duration)


def record_gateway_result(operation: str, result: str) -> None:
    """Record the result of a gateway request."""
    gateway_requests_total.labels(operation=operation, result=result).inc()


def record_gateway_retry(operation: str) -> None:
    """Record a gateway transport retry."""
    gateway_retries.labels(operation=operation).inc()


def record_poll_attempt() -> None:
    """Record a pending status check."""
    poll_attempts.inc()


def record_payment_outcome(outcome: str) -> None:
    """Record the final outcome of a payment run."""
    payment_outcome_total.labels(outcome=outcome.lower()).inc()


def write_metrics(path: str) -> None:
    """Write current metrics to a file in Prometheus text format."""
    write_to_textfile(path, REGISTRY)
