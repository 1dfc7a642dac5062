"""Tests for provider adapters (OpenFunction, CallableProvider)."""

import pytest

from toolhub.core.function_definition import FunctionDefinition, Parameter
from toolhub.core.provider import CallableProvider, OpenFunction
from toolhub.core.registry import FunctionRegistry
from toolhub.exceptions import ConfigurationError, InvalidNameError


class TestOpenFunction:
    """Method-backed providers."""

    def test_list_signatures_builds_descriptors(self, shop):
        names = [d.name for d in shop.list_signatures()]
        assert names == ["order", "list"]

    def test_invoke_calls_method(self, shop):
        response = shop.invoke("order", {"item": "Pizza", "qty": 2})

        assert response.status == "success"
        assert response.text() == "Ordered 2 x Pizza"
        assert shop.orders == [("Pizza", 2)]

    def test_invoke_normalizes_list_result(self, shop):
        response = shop.invoke("list", {})
        assert response.text() == "Pizza\nPasta"

    def test_undeclared_method_is_an_error(self, shop):
        response = shop.invoke("function_definitions", {})
        assert response.is_error
        assert "not defined" in response.text()

    def test_arguments_that_do_not_bind(self, shop):
        response = shop.invoke("order", {"item": "Pizza"})
        assert response.is_error
        assert "Invalid arguments for 'order'" in response.text()
        assert shop.orders == []

    def test_optional_schema_validation(self):
        class StrictShop(OpenFunction):
            validate_arguments = True

            def function_definitions(self):
                return [
                    FunctionDefinition("order", "Order").add_parameter(
                        Parameter.string("item").required().enum(["Pizza", "Pasta"])
                    )
                ]

            def order(self, item):
                return f"Ordered {item}"

        shop = StrictShop()

        assert shop.invoke("order", {"item": "Pizza"}).text() == "Ordered Pizza"
        rejected = shop.invoke("order", {"item": "Sushi"})
        assert rejected.is_error
        assert "Invalid arguments for 'order'" in rejected.text()


class TestCallableProvider:
    """Providers built from plain callables."""

    def test_decorator_uses_name_and_docstring(self):
        weather = CallableProvider()

        @weather.function(parameters=[Parameter.string("city").required()])
        def forecast(city):
            """Forecast for a city"""
            return f"Sunny in {city}"

        descriptor = weather.list_signatures()[0]
        assert descriptor.name == "forecast"
        assert descriptor.description == "Forecast for a city"
        assert descriptor.required == ["city"]
        assert weather.invoke("forecast", {"city": "Oslo"}).text() == "Sunny in Oslo"

    def test_snake_case_name_clashes_with_default_separator(self):
        weather = CallableProvider()

        @weather.function()
        def get_weather():
            return "Sunny"

        with pytest.raises(InvalidNameError):
            FunctionRegistry().register("weather", "Weather", weather)

    def test_explicit_name_avoids_separator(self):
        weather = CallableProvider()

        @weather.function(name="getWeather")
        def get_weather():
            return "Sunny"

        registry = FunctionRegistry()
        assert registry.register("weather", "Weather", weather) == ["weather_getWeather"]

    def test_add_with_wire_dict(self):
        provider = CallableProvider()
        provider.add(lambda: "pong", {"name": "ping", "description": "Ping"})

        assert provider.invoke("ping", {}).text() == "pong"

    def test_duplicate_name_rejected(self):
        provider = CallableProvider()
        provider.add(lambda: 1, {"name": "one"})
        with pytest.raises(ConfigurationError):
            provider.add(lambda: 2, {"name": "one"})

    def test_unknown_function_is_an_error(self):
        response = CallableProvider().invoke("missing", {})
        assert response.is_error
