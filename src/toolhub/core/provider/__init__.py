"""
Function Providers - Capability contract consumed by the registry

A provider:
- Declares its call signatures (list_signatures)
- Executes one of them by name (invoke)

The registry never reflects into concrete provider types. It only keeps
(provider, original_name) pairs and calls invoke().
"""

import inspect
import logging
from abc import ABC, abstractmethod
from typing import Any, Callable, Iterable, Mapping, Union

from toolhub.core.function_definition import (
    FunctionDefinition,
    FunctionDescriptor,
    to_descriptor,
)
from toolhub.core.responses import Response
from toolhub.core.schema_validator import ArgumentValidationError, SchemaValidator
from toolhub.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

DefinitionLike = Union[FunctionDescriptor, FunctionDefinition, Mapping[str, Any]]


class FunctionProvider(ABC):
    """
    Base class for everything that can be registered in a FunctionRegistry.

    Each provider must:
    - Declare its signatures (list_signatures)
    - Implement invoke(), returning a Response (or a value Response.from_result accepts)
    """

    @abstractmethod
    def list_signatures(self) -> list[DefinitionLike]:
        """Return the ordered list of call signatures this provider offers."""

    @abstractmethod
    def invoke(self, name: str, arguments: dict[str, Any]) -> Response:
        """
        Execute the operation `name`.

        Args:
            name: Original (non-namespaced) operation name
            arguments: Arguments as supplied by the caller

        Returns:
            Response; failures are reported with status "error", not raised
        """


class OpenFunction(FunctionProvider):
    """
    Provider whose operations are methods of the subclass.

    Subclasses implement function_definitions(); invoke() maps the operation
    name to the method of the same name, binds the arguments to its
    signature and normalizes the return value with Response.from_result.

    Example:
        >>> class Shop(OpenFunction):
        ...     def function_definitions(self):
        ...         return [FunctionDefinition("order", "Order an item")
        ...                 .add_parameter(Parameter.string("item").required())]
        ...     def order(self, item):
        ...         return TextResponseItem(f"Ordered {item}")
    """

    validate_arguments: bool = False

    @abstractmethod
    def function_definitions(self) -> list[DefinitionLike]:
        """Return the definitions of the methods exposed to callers."""

    def list_signatures(self) -> list[FunctionDescriptor]:
        return [to_descriptor(d) for d in self.function_definitions()]

    def invoke(self, name: str, arguments: dict[str, Any]) -> Response:
        descriptor = self._declared().get(name)
        method = getattr(self, name, None) if descriptor else None
        if descriptor is None or not callable(method):
            return Response.error(
                f"Method '{name}' is not defined on {type(self).__name__}."
            )

        arguments = dict(arguments or {})
        if self.validate_arguments:
            try:
                SchemaValidator.validate_arguments(descriptor, arguments)
            except ArgumentValidationError as exc:
                return Response.error(str(exc))

        try:
            inspect.signature(method).bind(**arguments)
        except TypeError as exc:
            return Response.error(f"Invalid arguments for '{name}': {exc}")

        return Response.from_result(method(**arguments))

    def _declared(self) -> dict[str, FunctionDescriptor]:
        return {d.name: d for d in self.list_signatures()}


class CallableProvider(FunctionProvider):
    """
    Provider built from plain Python callables.

    Example:
        >>> weather = CallableProvider()
        >>> @weather.function(parameters=[Parameter.string("city").required()])
        ... def forecast(city):
        ...     "Forecast for a city"
        ...     return f"Sunny in {city}"
    """

    def __init__(self) -> None:
        self._functions: dict[str, tuple[FunctionDescriptor, Callable[..., Any]]] = {}

    def add(self, fn: Callable[..., Any], definition: DefinitionLike) -> None:
        """
        Register a callable under its definition.

        Raises:
            ConfigurationError: If fn is not callable or the name is taken
        """
        if not callable(fn):
            raise ConfigurationError("provider functions must be callable")
        descriptor = to_descriptor(definition)
        if descriptor.name in self._functions:
            raise ConfigurationError(
                f"Function '{descriptor.name}' is already defined on this provider."
            )
        self._functions[descriptor.name] = (descriptor, fn)

    def function(
        self,
        name: str | None = None,
        description: str | None = None,
        parameters: Iterable[Any] = (),
    ) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
        """
        Decorator form of add(); name and description default to the callable's.

        The default name is fn.__name__, which must not contain the registry
        separator. With the default "_" separator a snake_case function such as
        get_weather is rejected at register(); pass name="getWeather" or build
        the hub with another separator.
        """

        def deco(fn: Callable[..., Any]) -> Callable[..., Any]:
            definition = FunctionDefinition(
                name or fn.__name__,
                description if description is not None else inspect.getdoc(fn) or "",
            )
            for param in parameters:
                definition.add_parameter(param)
            self.add(fn, definition)
            return fn

        return deco

    def list_signatures(self) -> list[FunctionDescriptor]:
        return [descriptor for descriptor, _ in self._functions.values()]

    def invoke(self, name: str, arguments: dict[str, Any]) -> Response:
        if name not in self._functions:
            return Response.error(f"Function '{name}' is not defined on this provider.")
        _, fn = self._functions[name]
        logger.debug("Calling %s with %s", name, sorted((arguments or {}).keys()))
        return Response.from_result(fn(**(arguments or {})))


__all__ = ["FunctionProvider", "OpenFunction", "CallableProvider", "DefinitionLike"]
