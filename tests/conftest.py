"""Shared fixtures for pulsegate tests."""

from datetime import datetime, timezone

import pytest
from prometheus_client import CollectorRegistry

from pulsegate.core.config import reset_config
from pulsegate.core.observability import GateMetrics
from pulsegate.testing import FixedClock, MockSink


@pytest.fixture(autouse=True)
def clean_config(monkeypatch):
    """Isolate every test from the environment and cached configuration."""
    for name in ("PULSEGATE_LOG_LEVEL", "PULSEGATE_LOG_FORMAT",
                 "PULSEGATE_METRICS_ENABLED"):
        monkeypatch.delenv(name, raising=False)
    reset_config()
    yield
    reset_config()


@pytest.fixture
def march_15():
    """Friday 2024-03-15 10:30 UTC."""
    return datetime(2024, 3, 15, 10, 30, tzinfo=timezone.utc)


@pytest.fixture
def clock(march_15):
    return FixedClock(march_15)


@pytest.fixture
def sink():
    return MockSink("sink")


@pytest.fixture
def registry():
    return CollectorRegistry()


@pytest.fixture
def metrics(registry):
    return GateMetrics(registry=registry)
