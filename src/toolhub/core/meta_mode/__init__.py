"""
Meta Mode - Bounded working set of active functions

While meta mode is on, the caller only sees three control operations plus
the functions it has explicitly activated:

    activateFunction(functionNames)    add to the active set
    deactivateFunction(functionNames)  remove from the active set
    listFunctions()                    everything registered, by namespace

The active set keeps activation order, holds no duplicates and never
exceeds max_active. Only explicit activate/deactivate calls change it;
turning meta mode off and on again leaves it untouched.
"""

import logging
from collections.abc import Mapping
from typing import Any

from toolhub.core.function_definition import (
    FunctionDefinition,
    FunctionDescriptor,
    Parameter,
)
from toolhub.core.registry import FunctionRegistry
from toolhub.core.responses import Response, TextResponseItem
from toolhub.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_MAX_ACTIVE = 10

ACTIVATE_FUNCTION = "activateFunction"
DEACTIVATE_FUNCTION = "deactivateFunction"
LIST_FUNCTIONS = "listFunctions"

CONTROL_OPERATIONS = (ACTIVATE_FUNCTION, DEACTIVATE_FUNCTION, LIST_FUNCTIONS)

NAMESPACE_INTRO = "Registered tool namespaces:"


class MetaModeController:
    """
    Meta-mode state machine layered on a FunctionRegistry.

    States: off / on. Transitions only through enable() / disable().
    """

    def __init__(
        self,
        registry: FunctionRegistry,
        max_active: int = DEFAULT_MAX_ACTIVE,
        enabled: bool = False,
        namespace_intro: str = NAMESPACE_INTRO,
    ):
        if max_active < 1:
            raise ConfigurationError(
                "max_active must be at least 1.", details={"max_active": max_active}
            )
        self.registry = registry
        self.max_active = max_active
        self.namespace_intro = namespace_intro
        self._enabled = enabled
        self._active: list[str] = []
        registry.reserve(CONTROL_OPERATIONS)

    # -------------------------------------------------------------------------
    # State
    # -------------------------------------------------------------------------

    @property
    def enabled(self) -> bool:
        return self._enabled

    def enable(self) -> "MetaModeController":
        if not self._enabled:
            logger.info("Meta mode enabled (%d active function(s))", len(self._active))
        self._enabled = True
        return self

    def disable(self) -> "MetaModeController":
        if self._enabled:
            logger.info("Meta mode disabled")
        self._enabled = False
        return self

    @property
    def active_functions(self) -> tuple[str, ...]:
        return tuple(self._active)

    def is_control_operation(self, name: str) -> bool:
        """True when `name` must be handled locally instead of dispatched."""
        return self._enabled and name in CONTROL_OPERATIONS

    # -------------------------------------------------------------------------
    # Visibility
    # -------------------------------------------------------------------------

    def visible_descriptors(self) -> list[FunctionDescriptor]:
        """
        Descriptors the caller may see right now.

        Off: everything registered.
        On: control operations, then active functions in activation order.
        """
        if not self._enabled:
            return self.registry.list_all_descriptors()

        descriptors = self.control_descriptors()
        for name in self._active:
            entry = self.registry.lookup(name)
            if entry is not None:
                descriptors.append(entry.descriptor)
        return descriptors

    def control_descriptors(self) -> list[FunctionDescriptor]:
        """Descriptors of the control operations, with enums matching current state."""
        available = [name for name in self.registry.names() if name not in self._active]

        activate = FunctionDefinition(
            ACTIVATE_FUNCTION,
            "Activate functions from the registry. Multiple functions can be "
            "activated at once. Duplicates are ignored.",
        ).add_parameter(
            Parameter.array("functionNames")
            .required()
            .description("An array of valid function names to activate.")
            .items(Parameter.string().enum(available))
        )

        deactivate = FunctionDefinition(
            DEACTIVATE_FUNCTION,
            "Deactivate functions from the registry. Multiple functions can be "
            "deactivated at once.",
        ).add_parameter(
            Parameter.array("functionNames")
            .required()
            .description("An array of valid function names to deactivate.")
            .items(Parameter.string().enum(self._active))
        )

        list_functions = FunctionDefinition(
            LIST_FUNCTIONS,
            "List all available functions grouped by namespace, including function "
            "names, descriptions, and namespace descriptions.",
        )

        return [activate.build(), deactivate.build(), list_functions.build()]

    # -------------------------------------------------------------------------
    # Control operations
    # -------------------------------------------------------------------------

    def handle(self, name: str, arguments: dict[str, Any] | None = None) -> Response:
        """Run a control operation and wrap its output in a Response."""
        arguments = {} if arguments is None else arguments
        if not isinstance(arguments, Mapping):
            return Response.error(f"Arguments for '{name}' must be an object.")

        if name == LIST_FUNCTIONS:
            return Response.success(self.list_functions())

        if name in (ACTIVATE_FUNCTION, DEACTIVATE_FUNCTION):
            names = arguments.get("functionNames")
            if names is None:
                return Response.error(
                    f"Missing required argument 'functionNames' for '{name}'."
                )
            if not _is_name_list(names):
                return Response.error(
                    f"Argument 'functionNames' for '{name}' must be a string or "
                    "an array of strings."
                )
            if name == ACTIVATE_FUNCTION:
                return Response.success(*self.activate(names))
            return Response.success(*self.deactivate(names))

        return Response.error(f"Unknown control operation '{name}'.")

    def activate(self, names: str | list[str]) -> list[TextResponseItem]:
        """
        Activate functions in caller order.

        Unknown names, already-active names and names over capacity are
        reported per item; they never abort the rest of the batch.
        """
        messages = []
        for name in _as_list(names):
            if name not in self.registry:
                messages.append(f"No such function: '{name}'.")
            elif name in self._active:
                messages.append(f"Function '{name}' is already activated.")
            elif len(self._active) >= self.max_active:
                messages.append(
                    f"Cannot activate '{name}': maximum limit of {self.max_active} "
                    "active functions reached. Please deactivate some functions first."
                )
            else:
                self._active.append(name)
                messages.append(f"Function '{name}' activated.")

        messages.append(self._summary())
        logger.debug("Active functions after activate: %s", self._active)
        return [TextResponseItem(m) for m in messages]

    def deactivate(self, names: str | list[str]) -> list[TextResponseItem]:
        """Deactivate functions, keeping the relative order of the rest."""
        messages = []
        for name in _as_list(names):
            if name not in self._active:
                messages.append(f"Function '{name}' is not active.")
            else:
                self._active.remove(name)
                messages.append(f"Function '{name}' deactivated.")

        messages.append(self._summary())
        logger.debug("Active functions after deactivate: %s", self._active)
        return [TextResponseItem(m) for m in messages]

    def list_functions(self) -> TextResponseItem:
        """All registered functions grouped by namespace, in registration order."""
        lines = []
        for namespace in self.registry.namespaces():
            lines.append(f"Namespace '{namespace.name}': {namespace.description}")
            for entry in self.registry.entries(namespace.name):
                lines.append(f"  - {entry.namespaced_name}: {entry.descriptor.description}")

        if not lines:
            return TextResponseItem("No functions registered.")
        return TextResponseItem("\n".join(lines))

    def namespaces_overview(self) -> str:
        """Developer-facing list of namespaces, or "" when nothing is registered."""
        namespaces = self.registry.namespaces()
        if not namespaces:
            return ""
        lines = [self.namespace_intro]
        lines.extend(f"- {ns.name}: {ns.description}" for ns in namespaces)
        return "\n".join(lines)

    def _summary(self) -> str:
        return "Activated functions: " + ", ".join(self._active)


def _as_list(names: str | list[str]) -> list[str]:
    if isinstance(names, str):
        return [names]
    return list(names)


def _is_name_list(value: Any) -> bool:
    if isinstance(value, str):
        return True
    return isinstance(value, (list, tuple)) and all(isinstance(n, str) for n in value)


__all__ = [
    "MetaModeController",
    "ACTIVATE_FUNCTION",
    "DEACTIVATE_FUNCTION",
    "LIST_FUNCTIONS",
    "CONTROL_OPERATIONS",
    "DEFAULT_MAX_ACTIVE",
    "NAMESPACE_INTRO",
]
