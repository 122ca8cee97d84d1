"""Prometheus metrics definitions and helpers."""

from __future__ import annotations

from prometheus_client import Counter, Histogram

REQUEST_COUNT = Counter(
    "http_requests_total",
    "Total HTTP requests processed",
    ("method", "route", "status"),
)

REQUEST_LATENCY = Histogram(
    "http_request_duration_seconds",
    "HTTP request duration in seconds",
    ("method", "route"),
    buckets=(0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0),
)

ERROR_COUNTER = Counter(
    "app_internal_errors_total",
    "Number of requests ending in a 5xx response",
    ("method", "route"),
)

GREETING_COUNTER = Counter(
    "hello_records_created_total",
    "Number of greeting records persisted",
)

STORAGE_ERROR_COUNTER = Counter(
    "hello_storage_errors_total",
    "Greeting store failures by kind",
    ("kind",),
)


def observe_request(
    method: str,
    route: str,
    status_code: int,
    duration_seconds: float,
) -> None:
    """Record metrics for a completed HTTP request."""

    safe_route = route or "unknown"
    safe_method = method or "UNKNOWN"

    REQUEST_COUNT.labels(
        method=safe_method,
        route=safe_route,
        status=str(status_code),
    ).inc()
    REQUEST_LATENCY.labels(method=safe_method, route=safe_route).observe(
        max(duration_seconds, 0)
    )

    if status_code >= 500:
        ERROR_COUNTER.labels(method=safe_method, route=safe_route).inc()


def increment_greetings() -> None:
    """Increment the persisted greeting counter."""

    GREETING_COUNTER.inc()


def record_storage_error(kind: str) -> None:
    """Count a failed greeting write, labelled constraint_violation or storage_unavailable."""

    STORAGE_ERROR_COUNTER.labels(kind=kind).inc()
