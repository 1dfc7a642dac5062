"""
Toolhub Metrics Store.

In-process dispatch metrics, no external backend.
Tracks:
- Provider call latencies per namespaced function (bounded window, percentiles)
- Error counts by code, per function and global
- How dispatches split between provider calls and meta-mode control operations

Thread-safe via a single lock. Singleton accessor for process-wide use.
"""

from __future__ import annotations

import statistics
import threading
from collections import Counter, deque
from dataclasses import dataclass, field
from datetime import datetime, timezone
from functools import lru_cache
from typing import Any

# Latency window kept per function
LATENCY_WINDOW = 1000


def _percentile(ordered: list[float], fraction: float) -> float:
    return ordered[min(int(len(ordered) * fraction), len(ordered) - 1)]


@dataclass
class FunctionMetrics:
    """Call statistics of one namespaced function."""

    latencies_ms: deque[float] = field(default_factory=lambda: deque(maxlen=LATENCY_WINDOW))
    errors: Counter[str] = field(default_factory=Counter)
    calls: int = 0
    last_called: datetime | None = None

    def observe(self, ms: float) -> None:
        self.latencies_ms.append(ms)
        self.calls += 1
        self.last_called = datetime.now(timezone.utc)

    def latency_stats(self) -> dict[str, float]:
        if not self.latencies_ms:
            return {}
        ordered = sorted(self.latencies_ms)
        return {
            "p50_ms": _percentile(ordered, 0.5),
            "p90_ms": _percentile(ordered, 0.9),
            "p99_ms": _percentile(ordered, 0.99),
            "mean_ms": statistics.mean(ordered),
            "max_ms": ordered[-1],
        }

    def to_dict(self) -> dict[str, Any]:
        return {
            "call_count": self.calls,
            "last_called": self.last_called.isoformat() if self.last_called else None,
            **self.latency_stats(),
            "errors": dict(self.errors),
        }


class MetricsStore:
    """
    Dispatch metrics for one process.

    Several hubs may share one store; every method takes the lock.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._reset_locked()

    def _reset_locked(self) -> None:
        self._functions: dict[str, FunctionMetrics] = {}
        self._global_errors: Counter[str] = Counter()
        self._control_operations: Counter[str] = Counter()
        self._provider_calls = 0
        self._started_at = datetime.now(timezone.utc)

    def _function(self, name: str) -> FunctionMetrics:
        metrics = self._functions.get(name)
        if metrics is None:
            metrics = self._functions[name] = FunctionMetrics()
        return metrics

    # -------------------------------------------------------------------------
    # Recording
    # -------------------------------------------------------------------------

    def record_call_latency(self, function: str, ms: float) -> None:
        """One provider call finished (successfully or not) after `ms`."""
        with self._lock:
            self._function(function).observe(ms)
            self._provider_calls += 1

    def record_call_error(self, function: str, code: str) -> None:
        """A provider call failed with `code`; counted per function and globally."""
        with self._lock:
            self._function(function).errors[code] += 1
            self._global_errors[code] += 1

    def record_error(self, code: str) -> None:
        """An error not tied to a registered function (e.g. a dispatch miss)."""
        with self._lock:
            self._global_errors[code] += 1

    def record_control_operation(self, operation: str) -> None:
        """A meta-mode control operation was handled locally."""
        with self._lock:
            self._control_operations[operation] += 1

    # -------------------------------------------------------------------------
    # Export
    # -------------------------------------------------------------------------

    def get_summary(self) -> dict[str, Any]:
        """JSON-ready snapshot, as served by the metrics endpoint."""
        with self._lock:
            now = datetime.now(timezone.utc)
            return {
                "uptime_seconds": round((now - self._started_at).total_seconds(), 1),
                "collected_at": now.isoformat(),
                "dispatch": {
                    "provider_calls": self._provider_calls,
                    "control_operations": dict(self._control_operations),
                },
                "functions": {name: m.to_dict() for name, m in self._functions.items()},
                "global_errors": dict(self._global_errors),
            }

    def reset(self) -> None:
        with self._lock:
            self._reset_locked()


@lru_cache(maxsize=1)
def get_metrics_store() -> MetricsStore:
    """Process-wide MetricsStore."""
    return MetricsStore()
