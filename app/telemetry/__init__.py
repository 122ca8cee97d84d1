"""Telemetry helpers and metrics."""

from .metrics import (
    ERROR_COUNTER,
    GREETING_COUNTER,
    REQUEST_COUNT,
    REQUEST_LATENCY,
    STORAGE_ERROR_COUNTER,
    increment_greetings,
    observe_request,
    record_storage_error,
)

__all__ = [
    "ERROR_COUNTER",
    "GREETING_COUNTER",
    "REQUEST_COUNT",
    "REQUEST_LATENCY",
    "STORAGE_ERROR_COUNTER",
    "increment_greetings",
    "observe_request",
    "record_storage_error",
]
