# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Metric instrument definitions for valguard."""

from __future__ import annotations

import logging
import time

from .runtime import meter

logger = logging.getLogger(__name__)

guard_check_total = meter.create_counter(
    name="valguard.guard.check.total",
    description="Counts guarded calls partitioned by outcome (accepted, rejected, error).",
    unit="1",
)

guard_check_latency_ms = meter.create_histogram(
    name="valguard.guard.check.latency.ms",
    description="Time spent running validators before the guarded member executes.",
    unit="ms",
)

validator_rejected_total = meter.create_counter(
    name="valguard.validator.rejected.total",
    description="Counts rejected values partitioned by target and validator.",
    unit="1",
)


def record_guard_metrics(target: str, outcome: str, started_at: float) -> None:
    """Record the outcome and latency of one guarded call.

    Args:
        target: Qualified name of the guarded function
        outcome: "accepted", "rejected" or "error"
        started_at: Timestamp from time.perf_counter() taken before the checks
    """
    duration_ms = (time.perf_counter() - started_at) * 1000.0
    try:
        guard_check_latency_ms.record(duration_ms, {"target": target, "outcome": outcome})
        guard_check_total.add(1, {"target": target, "outcome": outcome})
    except Exception:
        # Telemetry must never interfere with user code
        logger.debug("Failed to record guard metrics for %s", target, exc_info=True)


def record_rejection(target: str, validator: str) -> None:
    try:
        validator_rejected_total.add(1, {"target": target, "validator": validator})
    except Exception:
        logger.debug("Failed to record rejection for %s", target, exc_info=True)


__all__ = [
    "guard_check_latency_ms",
    "guard_check_total",
    "record_guard_metrics",
    "record_rejection",
    "validator_rejected_total",
]
