"""
Toolhub Core

Components (leaf to root):
- function_definition: descriptors and their builder
- responses: result model
- provider: capability contract for function providers
- schema_validator: provider-side argument validation
- registry: namespaced descriptor table
- meta_mode: bounded active-function working set
- dispatcher: routing of calls to providers
- hub: per-session orchestrator

No side effects on import.
"""

from toolhub.core.dispatcher import Dispatcher
from toolhub.core.function_definition import (
    FunctionDefinition,
    FunctionDescriptor,
    Parameter,
    ParameterSpec,
    ParameterType,
)
from toolhub.core.hub import FunctionHub
from toolhub.core.meta_mode import MetaModeController
from toolhub.core.provider import CallableProvider, FunctionProvider, OpenFunction
from toolhub.core.registry import FunctionRegistry, Namespace, RegistryEntry
from toolhub.core.responses import BinaryResponseItem, Response, TextResponseItem

__all__ = [
    "BinaryResponseItem",
    "CallableProvider",
    "Dispatcher",
    "FunctionDefinition",
    "FunctionDescriptor",
    "FunctionHub",
    "FunctionProvider",
    "FunctionRegistry",
    "MetaModeController",
    "Namespace",
    "OpenFunction",
    "Parameter",
    "ParameterSpec",
    "ParameterType",
    "RegistryEntry",
    "Response",
    "TextResponseItem",
]
