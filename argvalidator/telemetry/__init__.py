"""Telemetry package - OpenTelemetry meter, tracer and instruments."""

from .metrics import (
    builder_invocation_total,
    record_validation,
    validate_failure_total,
    validate_latency_ms,
    validate_total,
)
from .runtime import get_tracer, meter

__all__ = [
    "builder_invocation_total",
    "get_tracer",
    "meter",
    "record_validation",
    "validate_failure_total",
    "validate_latency_ms",
    "validate_total",
]
