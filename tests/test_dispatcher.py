"""Tests for the Dispatcher: routing, misses and provider failures."""

from providers import ExplodingProvider, RecordingProvider
from toolhub.core.dispatcher import (
    FUNCTION_ERROR,
    FUNCTION_NOT_FOUND,
    PROVIDER_EXCEPTION,
    Dispatcher,
)
from toolhub.core.registry import FunctionRegistry
from toolhub.core.responses import Response


class TestDispatch:
    """Calls reach the owning provider under the original name."""

    def test_round_trip(self, hub, shop):
        response = hub.dispatch("shop_order", {"item": "Pizza", "qty": 2})

        assert response.status == "success"
        assert response.text() == "Ordered 2 x Pizza"
        assert shop.orders == [("Pizza", 2)]

    def test_arguments_passed_unchanged(self, metrics):
        registry = FunctionRegistry()
        weather = RecordingProvider(["forecast"])
        registry.register("weather", "Weather", weather)
        arguments = {"city": "Oslo", "days": 3, "extra": {"nested": [1, 2]}}

        Dispatcher(registry, metrics=metrics).dispatch("weather_forecast", arguments)

        assert weather.calls == [("forecast", arguments)]

    def test_missing_arguments_default_to_empty(self, metrics):
        registry = FunctionRegistry()
        weather = RecordingProvider(["forecast"])
        registry.register("weather", "Weather", weather)

        Dispatcher(registry, metrics=metrics).dispatch("weather_forecast")

        assert weather.calls == [("forecast", {})]

    def test_provider_response_returned_as_is(self, metrics):
        canned = Response.success()
        registry = FunctionRegistry()
        registry.register("x", "X", RecordingProvider(["y"], response=canned))

        assert Dispatcher(registry, metrics=metrics).dispatch("x_y") is canned


class TestDispatchFailures:
    """Runtime failures become error Responses, never exceptions."""

    def test_unknown_name_on_empty_registry(self, metrics):
        response = Dispatcher(FunctionRegistry(), metrics=metrics).dispatch("nope", {})

        assert response.is_error
        assert "nope" in response.text()

    def test_unknown_name_on_populated_registry(self, hub):
        response = hub.dispatch("shop_delete", {})

        assert response.is_error
        assert response.text() == "No function registered under 'shop_delete'."

    def test_unknown_name_counted(self, hub, metrics):
        hub.dispatch("nope", {})
        assert metrics.get_summary()["global_errors"][FUNCTION_NOT_FOUND] == 1

    def test_provider_exception(self, metrics):
        registry = FunctionRegistry()
        registry.register("bomb", "Explodes", ExplodingProvider())

        response = Dispatcher(registry, metrics=metrics).dispatch("bomb_boom", {})

        assert response.is_error
        assert "bomb_boom" in response.text()
        assert "kaboom" in response.text()
        summary = metrics.get_summary()
        assert summary["functions"]["bomb_boom"]["errors"] == {PROVIDER_EXCEPTION: 1}
        assert summary["functions"]["bomb_boom"]["call_count"] == 1

    def test_provider_error_response_counted(self, hub, metrics):
        response = hub.dispatch("shop_order", {"item": "Pizza"})

        assert response.is_error
        assert metrics.get_summary()["functions"]["shop_order"]["errors"] == {FUNCTION_ERROR: 1}

    def test_latency_recorded_on_success(self, hub, metrics):
        hub.dispatch("shop_list", {})
        hub.dispatch("shop_list", {})

        stats = metrics.get_summary()["functions"]["shop_list"]
        assert stats["call_count"] == 2
        assert stats["errors"] == {}

    def test_control_operations_counted_apart(self, meta_hub, metrics):
        meta_hub.dispatch("listFunctions", {})
        meta_hub.dispatch("activateFunction", {"functionNames": ["shop_list"]})
        meta_hub.dispatch("shop_list", {})

        dispatch = metrics.get_summary()["dispatch"]
        assert dispatch["control_operations"] == {"listFunctions": 1, "activateFunction": 1}
        assert dispatch["provider_calls"] == 1
