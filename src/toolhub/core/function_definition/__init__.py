"""
Function Definition - Signature descriptors and their builder

Responsibility:
- Describe one callable operation (name, description, typed parameters)
- Build descriptors fluently (Parameter / FunctionDefinition)
- Serialize to the tool-calling wire format expected by LLM APIs
- NO namespacing (that is the registry's job)
- NO argument validation (that is schema_validator, used by providers)

Wire format:

    {
        "type": "function",
        "function": {
            "name": "...",
            "description": "...",
            "parameters": {"type": "object", "properties": {...}, "required": [...]}
        }
    }
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Iterable, Mapping

from toolhub.exceptions import ConfigurationError, MissingFunctionNameError


class ParameterType(str, Enum):
    """JSON Schema types a parameter may take."""

    STRING = "string"
    NUMBER = "number"
    INTEGER = "integer"
    BOOLEAN = "boolean"
    ARRAY = "array"
    OBJECT = "object"


@dataclass(frozen=True)
class ParameterSpec:
    """Immutable description of one parameter."""

    name: str | None
    type: ParameterType
    description: str | None = None
    required: bool = False
    nullable: bool = False
    enum: tuple[Any, ...] | None = None
    items: ParameterSpec | None = None
    properties: tuple[ParameterSpec, ...] = ()

    def to_schema(self) -> dict[str, Any]:
        """Serialize to a JSON-Schema fragment."""
        schema: dict[str, Any] = {
            "type": [self.type.value, "null"] if self.nullable else self.type.value,
        }
        if self.description is not None:
            schema["description"] = self.description
        if self.enum is not None:
            schema["enum"] = list(self.enum)
        if self.type is ParameterType.ARRAY and self.items is not None:
            schema["items"] = self.items.to_schema()
        if self.type is ParameterType.OBJECT:
            schema["properties"] = {p.name: p.to_schema() for p in self.properties}
            schema["required"] = [p.name for p in self.properties if p.required]
        return schema

    @classmethod
    def from_schema(
        cls, name: str | None, schema: Mapping[str, Any], required: bool = False
    ) -> ParameterSpec:
        """Parse a JSON-Schema fragment produced by to_schema (or written by hand)."""
        raw_type = schema.get("type", "string")
        nullable = False
        if isinstance(raw_type, list):
            nullable = "null" in raw_type
            non_null = [t for t in raw_type if t != "null"]
            raw_type = non_null[0] if non_null else "string"
        try:
            param_type = ParameterType(raw_type)
        except ValueError as exc:
            raise ConfigurationError(
                f"Unsupported parameter type '{raw_type}' for parameter '{name}'.",
                details={"parameter": name, "type": raw_type},
            ) from exc

        items = None
        if "items" in schema:
            items = cls.from_schema(None, schema["items"])

        required_names = set(schema.get("required", []))
        properties = tuple(
            cls.from_schema(prop_name, prop_schema, prop_name in required_names)
            for prop_name, prop_schema in schema.get("properties", {}).items()
        )

        enum = schema.get("enum")
        return cls(
            name=name,
            type=param_type,
            description=schema.get("description"),
            required=required,
            nullable=nullable,
            enum=tuple(enum) if enum is not None else None,
            items=items,
            properties=properties,
        )


class Parameter:
    """
    Fluent builder for ParameterSpec.

    Example:
        >>> Parameter.string("item").required().description("What to order").build()
    """

    def __init__(self, name: str | None, param_type: ParameterType):
        self._name = name
        self._type = param_type
        self._description: str | None = None
        self._required = False
        self._nullable = False
        self._enum: tuple[Any, ...] | None = None
        self._items: ParameterSpec | None = None
        self._properties: list[ParameterSpec] = []

    # -------------------------------------------------------------------------
    # Factories
    # -------------------------------------------------------------------------

    @classmethod
    def string(cls, name: str | None = None) -> Parameter:
        return cls(name, ParameterType.STRING)

    @classmethod
    def number(cls, name: str | None = None) -> Parameter:
        return cls(name, ParameterType.NUMBER)

    @classmethod
    def integer(cls, name: str | None = None) -> Parameter:
        return cls(name, ParameterType.INTEGER)

    @classmethod
    def boolean(cls, name: str | None = None) -> Parameter:
        return cls(name, ParameterType.BOOLEAN)

    @classmethod
    def array(cls, name: str | None = None) -> Parameter:
        return cls(name, ParameterType.ARRAY)

    @classmethod
    def object(cls, name: str | None = None) -> Parameter:
        return cls(name, ParameterType.OBJECT)

    # -------------------------------------------------------------------------
    # Modifiers
    # -------------------------------------------------------------------------

    def required(self, value: bool = True) -> Parameter:
        self._required = value
        return self

    def nullable(self, value: bool = True) -> Parameter:
        self._nullable = value
        return self

    def description(self, text: str) -> Parameter:
        self._description = text
        return self

    def enum(self, values: Iterable[Any]) -> Parameter:
        """Restrict a string parameter to a fixed set of values."""
        if self._type is not ParameterType.STRING:
            raise ConfigurationError(
                f"enum is only supported on string parameters, not '{self._type.value}'."
            )
        self._enum = tuple(values)
        return self

    def items(self, item: Parameter | ParameterSpec) -> Parameter:
        if self._type is not ParameterType.ARRAY:
            raise ConfigurationError("items can only be set on array parameters.")
        self._items = _as_spec(item)
        return self

    def property(self, prop: Parameter | ParameterSpec) -> Parameter:
        if self._type is not ParameterType.OBJECT:
            raise ConfigurationError("properties can only be added to object parameters.")
        spec = _as_spec(prop)
        if not spec.name:
            raise ConfigurationError("object properties must be named.")
        self._properties.append(spec)
        return self

    def build(self) -> ParameterSpec:
        return ParameterSpec(
            name=self._name,
            type=self._type,
            description=self._description,
            required=self._required,
            nullable=self._nullable,
            enum=self._enum,
            items=self._items,
            properties=tuple(self._properties),
        )


def _as_spec(param: Parameter | ParameterSpec) -> ParameterSpec:
    return param.build() if isinstance(param, Parameter) else param


@dataclass(frozen=True)
class FunctionDescriptor:
    """Immutable signature of one callable operation."""

    name: str
    description: str = ""
    parameters: tuple[ParameterSpec, ...] = field(default_factory=tuple)

    @property
    def required(self) -> list[str]:
        """Names of required parameters, in declaration order."""
        return [p.name for p in self.parameters if p.required]

    def parameters_schema(self) -> dict[str, Any]:
        return {
            "type": "object",
            "properties": {p.name: p.to_schema() for p in self.parameters},
            "required": self.required,
        }

    def to_function(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "parameters": self.parameters_schema(),
        }

    def to_tool(self) -> dict[str, Any]:
        """Serialize to the tool-calling wire format."""
        return {"type": "function", "function": self.to_function()}

    def renamed(self, name: str, description: str | None = None) -> FunctionDescriptor:
        """Return a copy with a new name (and optionally a new description)."""
        return replace(
            self,
            name=name,
            description=self.description if description is None else description,
        )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> FunctionDescriptor:
        """
        Parse a wire-format descriptor.

        Accepts both the tool shape ({"type": "function", "function": {...}})
        and the bare function shape ({"name": ..., "parameters": ...}).

        Raises:
            MissingFunctionNameError: If the descriptor has no name
        """
        function = data.get("function", data)
        if not isinstance(function, Mapping):
            raise MissingFunctionNameError()
        name = function.get("name")
        if not name or not isinstance(name, str):
            raise MissingFunctionNameError()

        schema = function.get("parameters") or {}
        required_names = set(schema.get("required", []))
        parameters = tuple(
            ParameterSpec.from_schema(param_name, param_schema, param_name in required_names)
            for param_name, param_schema in schema.get("properties", {}).items()
        )
        return cls(
            name=name,
            description=function.get("description") or "",
            parameters=parameters,
        )


class FunctionDefinition:
    """
    Builder for FunctionDescriptor.

    Example:
        >>> definition = FunctionDefinition("order", "Order an item")
        >>> definition.add_parameter(Parameter.string("item").required())
        >>> definition.create_function_description()["function"]["name"]
        'order'
    """

    def __init__(self, name: str, description: str = ""):
        self.name = name
        self.description = description
        self._parameters: list[ParameterSpec] = []

    def add_parameter(self, param: Parameter | ParameterSpec) -> FunctionDefinition:
        spec = _as_spec(param)
        if not spec.name:
            raise ConfigurationError(
                f"Parameters of function '{self.name}' must be named."
            )
        self._parameters.append(spec)
        return self

    def build(self) -> FunctionDescriptor:
        return FunctionDescriptor(
            name=self.name,
            description=self.description,
            parameters=tuple(self._parameters),
        )

    def create_function_description(self) -> dict[str, Any]:
        return self.build().to_tool()


def to_descriptor(value: FunctionDescriptor | FunctionDefinition | Mapping[str, Any]) -> FunctionDescriptor:
    """Coerce anything a provider may return into a FunctionDescriptor."""
    if isinstance(value, FunctionDescriptor):
        return value
    if isinstance(value, FunctionDefinition):
        return value.build()
    if isinstance(value, Mapping):
        return FunctionDescriptor.from_dict(value)
    raise ConfigurationError(
        f"Unsupported function definition type: {type(value).__name__}"
    )


__all__ = [
    "ParameterType",
    "ParameterSpec",
    "Parameter",
    "FunctionDescriptor",
    "FunctionDefinition",
    "to_descriptor",
]
