# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Metric instrument definitions for argvalidator."""

from __future__ import annotations

import time

from .runtime import meter

validate_total = meter.create_counter(
    name="argvalidator.validate.total",
    description="Counts validate() calls, tagged by outcome status.",
    unit="1",
)

validate_failure_total = meter.create_counter(
    name="argvalidator.validate.failure.total",
    description="Counts validate() failures, tagged by error code.",
    unit="1",
)

builder_invocation_total = meter.create_counter(
    name="argvalidator.builder.invocation.total",
    description="Counts builder invocations used to resolve missing parameters.",
    unit="1",
)

validate_latency_ms = meter.create_histogram(
    name="argvalidator.validate.latency.ms",
    description="Time taken by a single validate() call.",
    unit="ms",
)


def record_validation(status: str, start: float, reason: str | None = None) -> None:
    """Record outcome and latency for one validate() call started at *start*."""

    validate_total.add(1, {"status": status})
    if reason is not None:
        validate_failure_total.add(1, {"reason": reason})
    validate_latency_ms.record((time.perf_counter() - start) * 1000.0, {"status": status})


__all__ = [
    "builder_invocation_total",
    "record_validation",
    "validate_failure_total",
    "validate_latency_ms",
    "validate_total",
]
