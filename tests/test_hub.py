"""Tests for FunctionHub wiring."""

from providers import ShopProvider
from toolhub.config import RegistrySettings, Settings
from toolhub.core.hub import FunctionHub
from toolhub.core.meta_mode import CONTROL_OPERATIONS


class TestFromSettings:
    def test_registry_settings_applied(self, metrics):
        settings = Settings(
            registry=RegistrySettings(separator=".", max_active=4, meta_mode=True)
        )
        hub = FunctionHub.from_settings(settings, metrics=metrics)

        assert hub.registry.separator == "."
        assert hub.meta.max_active == 4
        assert hub.meta_mode_enabled is True
        assert hub.dispatcher.metrics is metrics

    def test_defaults(self, metrics):
        hub = FunctionHub.from_settings(Settings(), metrics=metrics)

        assert hub.registry.separator == "_"
        assert hub.meta.max_active == 10
        assert hub.meta_mode_enabled is False


class TestList:
    """Wire format returned by list()."""

    def test_tool_wire_format(self, hub):
        tools = hub.list()

        assert tools[0] == {
            "type": "function",
            "function": {
                "name": "shop_order",
                "description": "[shop] Order an item from the menu",
                "parameters": {
                    "type": "object",
                    "properties": {
                        "item": {"type": "string", "description": "Menu item"},
                        "qty": {"type": "integer", "description": "Quantity"},
                    },
                    "required": ["item", "qty"],
                },
            },
        }
        assert tools[1]["function"]["parameters"] == {
            "type": "object",
            "properties": {},
            "required": [],
        }

    def test_empty_hub(self, metrics):
        assert FunctionHub(metrics=metrics).list() == []

    def test_meta_toggle(self, hub):
        assert hub.enable_meta_mode() is hub
        assert [t["function"]["name"] for t in hub.list()] == list(CONTROL_OPERATIONS)

        hub.disable_meta_mode()
        assert [t["function"]["name"] for t in hub.list()] == ["shop_order", "shop_list"]

    def test_register_returns_names(self, metrics):
        hub = FunctionHub(metrics=metrics)
        assert hub.register("shop", "Pizza shop", ShopProvider()) == ["shop_order", "shop_list"]
