"""Pytest fixtures for the valguard test-suite.

Most tests build their own :class:`~valguard.registry.MetadataRegistry` through
the ``registry`` fixture so nothing they register leaks into the process-wide
default registry or into other tests.
"""
from __future__ import annotations

from typing import Any, Dict, List, Tuple

import pytest

from valguard import MetadataRegistry


@pytest.fixture()
def registry() -> MetadataRegistry:  # noqa: D401
    """Return a fresh, empty registry."""
    return MetadataRegistry()


class RecordingInstrument:
    """Stands in for an OpenTelemetry counter or histogram."""

    def __init__(self) -> None:
        self.calls: List[Tuple[Any, Dict[str, Any]]] = []

    def add(self, amount, attributes=None):  # noqa: D401
        self.calls.append((amount, dict(attributes or {})))

    def record(self, amount, attributes=None):  # noqa: D401
        self.calls.append((amount, dict(attributes or {})))


@pytest.fixture()
def recorded_metrics(monkeypatch):  # noqa: D401
    """Replace valguard's metric instruments with in-memory recorders."""
    import valguard.telemetry.metrics as _metrics

    instruments = {
        "checks": RecordingInstrument(),
        "latency": RecordingInstrument(),
        "rejections": RecordingInstrument(),
    }
    monkeypatch.setattr(_metrics, "guard_check_total", instruments["checks"])
    monkeypatch.setattr(_metrics, "guard_check_latency_ms", instruments["latency"])
    monkeypatch.setattr(_metrics, "validator_rejected_total", instruments["rejections"])
    return instruments


@pytest.fixture(autouse=True)
def _silence_logging(caplog):  # noqa: D401
    """Reduce noise – most tests assert behaviour, not log output."""
    caplog.set_level("WARNING")
    yield


@pytest.fixture()
def anyio_backend():  # noqa: D401
    """Force *anyio* tests to use the standard asyncio backend only."""
    return "asyncio"
