"""
Toolhub Metrics Endpoint.

Exposes observability metrics for monitoring and debugging.
"""

from fastapi import APIRouter

from toolhub.deps import HubDep

router = APIRouter(prefix="/api/v1", tags=["metrics"])


@router.get("/metrics")
def get_metrics(hub: HubDep) -> dict:
    """
    Get current metrics summary.

    Example response:
    ```json
    {
      "uptime_seconds": 3600.5,
      "collected_at": "2026-01-05T19:00:00Z",
      "dispatch": {"provider_calls": 150, "control_operations": {"activateFunction": 4}},
      "functions": {
        "shop_order": {
          "call_count": 150,
          "p50_ms": 0.4,
          "p99_ms": 2.1,
          "errors": {"FUNCTION_ERROR": 3}
        }
      },
      "global_errors": {"FUNCTION_NOT_FOUND": 5, "FUNCTION_ERROR": 3}
    }
    ```
    """
    return hub.dispatcher.metrics.get_summary()
