"""
Toolhub Observability Module.

Provides in-process metrics collection for dispatched functions and errors.
"""

from toolhub.observability.metrics import MetricsStore, get_metrics_store

__all__ = ["MetricsStore", "get_metrics_store"]
