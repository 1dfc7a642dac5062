"""
Dispatcher - Route namespaced calls to their providers

Responsibility:
- Resolve a namespaced name to (provider, original name)
- Hand control operations to the meta-mode controller while it is on
- Invoke the provider with the arguments unchanged
- Never raise at runtime: unknown names and provider crashes become
  error Responses the calling loop can feed back to the model
- Record latency and error metrics
"""

import logging
import time
from typing import Any

from toolhub.core.meta_mode import MetaModeController
from toolhub.core.registry import FunctionRegistry
from toolhub.core.responses import Response
from toolhub.observability import MetricsStore, get_metrics_store

logger = logging.getLogger(__name__)

# Error codes recorded in metrics
FUNCTION_NOT_FOUND = "FUNCTION_NOT_FOUND"
FUNCTION_ERROR = "FUNCTION_ERROR"
PROVIDER_EXCEPTION = "PROVIDER_EXCEPTION"


class Dispatcher:
    """
    Dispatches calls by namespaced name.

    Example:
        >>> dispatcher = Dispatcher(registry)
        >>> dispatcher.dispatch("shop_order", {"item": "Pizza", "qty": 2})
    """

    def __init__(
        self,
        registry: FunctionRegistry,
        meta: MetaModeController | None = None,
        metrics: MetricsStore | None = None,
    ):
        self.registry = registry
        self.meta = meta
        self.metrics = metrics or get_metrics_store()

    def dispatch(self, name: str, arguments: dict[str, Any] | None = None) -> Response:
        """
        Execute a call.

        Args:
            name: Namespaced function name (or control operation in meta mode)
            arguments: Call arguments, passed to the provider unchanged

        Returns:
            The provider's Response, or an error Response
        """
        arguments = {} if arguments is None else arguments

        if self.meta is not None and self.meta.is_control_operation(name):
            logger.debug("Meta-mode control operation %s", name)
            self.metrics.record_control_operation(name)
            return self.meta.handle(name, arguments)

        entry = self.registry.lookup(name)
        if entry is None:
            logger.warning("Dispatch miss: no function registered under '%s'", name)
            self.metrics.record_error(FUNCTION_NOT_FOUND)
            return Response.error(f"No function registered under '{name}'.")

        start_time = time.perf_counter()
        try:
            result = entry.provider.invoke(entry.original_name, arguments)
        except Exception as exc:
            logger.exception("Function '%s' raised", name)
            self.metrics.record_call_error(name, PROVIDER_EXCEPTION)
            return Response.error(f"Function '{name}' failed: {exc}")
        finally:
            self.metrics.record_call_latency(name, (time.perf_counter() - start_time) * 1000)

        response = Response.from_result(result)
        if response.is_error:
            self.metrics.record_call_error(name, FUNCTION_ERROR)
        return response


__all__ = ["Dispatcher", "FUNCTION_NOT_FOUND", "FUNCTION_ERROR", "PROVIDER_EXCEPTION"]
