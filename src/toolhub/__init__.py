"""
Toolhub - Namespaced function registry and dispatcher for LLM tool calling.
"""

__version__ = "0.1.0"

from toolhub.core import (  # noqa: E402
    BinaryResponseItem,
    CallableProvider,
    FunctionDefinition,
    FunctionDescriptor,
    FunctionHub,
    FunctionProvider,
    FunctionRegistry,
    MetaModeController,
    OpenFunction,
    Parameter,
    Response,
    TextResponseItem,
)

__all__ = [
    "__version__",
    "BinaryResponseItem",
    "CallableProvider",
    "FunctionDefinition",
    "FunctionDescriptor",
    "FunctionHub",
    "FunctionProvider",
    "FunctionRegistry",
    "MetaModeController",
    "OpenFunction",
    "Parameter",
    "Response",
    "TextResponseItem",
]
