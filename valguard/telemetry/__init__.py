"""Telemetry package - metric instruments for guard checks."""

from .metrics import (
    guard_check_latency_ms,
    guard_check_total,
    record_guard_metrics,
    record_rejection,
    validator_rejected_total,
)

__all__ = [
    "guard_check_latency_ms",
    "guard_check_total",
    "record_guard_metrics",
    "record_rejection",
    "validator_rejected_total",
]
