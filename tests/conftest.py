"""Shared fixtures: fresh metrics, a pizza-shop provider and hubs built on it."""

import pytest

from providers import RecordingProvider, ShopProvider
from toolhub.core.hub import FunctionHub
from toolhub.observability import MetricsStore


@pytest.fixture
def metrics():
    return MetricsStore()


@pytest.fixture
def shop():
    return ShopProvider()


@pytest.fixture
def hub(metrics, shop):
    hub = FunctionHub(metrics=metrics)
    hub.register("shop", "Pizza shop", shop)
    return hub


@pytest.fixture
def meta_hub(metrics, shop):
    """Meta mode on, capacity 2, namespaces shop and weather."""
    hub = FunctionHub(max_active=2, meta_mode=True, metrics=metrics)
    hub.register("shop", "Pizza shop", shop)
    hub.register("weather", "Weather service", RecordingProvider(["forecast", "alerts"]))
    return hub
