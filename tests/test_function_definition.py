"""Tests for descriptors and the descriptor builder (wire format)."""

import pytest

from toolhub.core.function_definition import (
    FunctionDefinition,
    FunctionDescriptor,
    Parameter,
    ParameterType,
    to_descriptor,
)
from toolhub.exceptions import ConfigurationError, MissingFunctionNameError


class TestParameterSchema:
    """Serialization of single parameters."""

    def test_string_with_description_and_enum(self):
        spec = Parameter.string("size").description("Pizza size").enum(["s", "m", "l"]).build()

        assert spec.to_schema() == {
            "type": "string",
            "description": "Pizza size",
            "enum": ["s", "m", "l"],
        }

    def test_nullable_type_includes_null(self):
        spec = Parameter.string("note").nullable().build()
        assert spec.to_schema() == {"type": ["string", "null"]}

    def test_array_items(self):
        spec = Parameter.array("names").items(Parameter.string().enum(["a", "b"])).build()

        assert spec.to_schema() == {
            "type": "array",
            "items": {"type": "string", "enum": ["a", "b"]},
        }

    def test_object_properties_and_required(self):
        spec = (
            Parameter.object("address")
            .property(Parameter.string("street").required())
            .property(Parameter.string("zip"))
            .build()
        )

        assert spec.to_schema() == {
            "type": "object",
            "properties": {"street": {"type": "string"}, "zip": {"type": "string"}},
            "required": ["street"],
        }

    def test_enum_rejected_on_non_string(self):
        with pytest.raises(ConfigurationError):
            Parameter.integer("qty").enum([1, 2])

    def test_items_rejected_on_non_array(self):
        with pytest.raises(ConfigurationError):
            Parameter.string("x").items(Parameter.string())

    def test_specs_are_immutable(self):
        spec = Parameter.boolean("flag").build()
        with pytest.raises(AttributeError):
            spec.required = True  # type: ignore[misc]


class TestFunctionDefinition:
    """Builder and function-level wire format."""

    def test_create_function_description_shape(self):
        definition = FunctionDefinition("order", "Order an item")
        definition.add_parameter(Parameter.string("item").required())
        definition.add_parameter(Parameter.integer("qty"))

        assert definition.create_function_description() == {
            "type": "function",
            "function": {
                "name": "order",
                "description": "Order an item",
                "parameters": {
                    "type": "object",
                    "properties": {
                        "item": {"type": "string"},
                        "qty": {"type": "integer"},
                    },
                    "required": ["item"],
                },
            },
        }

    def test_no_parameters_still_has_object_schema(self):
        tool = FunctionDefinition("list", "List").create_function_description()
        assert tool["function"]["parameters"] == {"type": "object", "properties": {}, "required": []}

    def test_key_order_is_stable(self):
        tool = FunctionDefinition("list", "List").create_function_description()
        assert list(tool) == ["type", "function"]
        assert list(tool["function"]) == ["name", "description", "parameters"]
        assert list(tool["function"]["parameters"]) == ["type", "properties", "required"]

    def test_unnamed_parameter_rejected(self):
        with pytest.raises(ConfigurationError):
            FunctionDefinition("f").add_parameter(Parameter.string())

    def test_add_parameter_is_chainable(self):
        descriptor = (
            FunctionDefinition("f", "d")
            .add_parameter(Parameter.string("a"))
            .add_parameter(Parameter.number("b").required())
            .build()
        )
        assert [p.name for p in descriptor.parameters] == ["a", "b"]
        assert descriptor.required == ["b"]


class TestFunctionDescriptor:
    """Parsing and renaming."""

    def test_from_dict_tool_shape_matches_builder_output(self):
        definition = FunctionDefinition("order", "Order an item")
        definition.add_parameter(Parameter.string("item").required().enum(["Pizza"]))
        definition.add_parameter(Parameter.array("extras").items(Parameter.string()))
        wire = definition.create_function_description()

        assert FunctionDescriptor.from_dict(wire).to_tool() == wire

    def test_from_dict_bare_function_shape(self):
        descriptor = FunctionDescriptor.from_dict({"name": "ping", "description": "Ping"})
        assert descriptor.name == "ping"
        assert descriptor.parameters == ()

    def test_from_dict_parses_nullable(self):
        descriptor = FunctionDescriptor.from_dict(
            {"name": "f", "parameters": {"properties": {"x": {"type": ["integer", "null"]}}}}
        )
        assert descriptor.parameters[0].type is ParameterType.INTEGER
        assert descriptor.parameters[0].nullable is True

    def test_from_dict_without_name_raises(self):
        with pytest.raises(MissingFunctionNameError):
            FunctionDescriptor.from_dict({"type": "function", "function": {"description": "x"}})

    def test_unsupported_type_raises(self):
        with pytest.raises(ConfigurationError):
            FunctionDescriptor.from_dict(
                {"name": "f", "parameters": {"properties": {"x": {"type": "date"}}}}
            )

    def test_renamed_returns_new_descriptor(self):
        original = FunctionDefinition("order", "Order").build()
        renamed = original.renamed("shop_order", "[shop] Order")

        assert renamed.name == "shop_order"
        assert renamed.description == "[shop] Order"
        assert original.name == "order"

    def test_to_descriptor_rejects_unknown_types(self):
        with pytest.raises(ConfigurationError):
            to_descriptor(42)
