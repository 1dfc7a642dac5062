"""
Toolhub - Custom Exceptions.

Configuration problems are raised at setup time and abort registration.
Runtime dispatch problems are never raised; they are returned as error
responses (see toolhub.core.dispatcher).
"""

from typing import Any
from uuid import UUID


class ToolhubException(Exception):
    """Base exception for Toolhub."""

    def __init__(
        self,
        code: str,
        message: str,
        status_code: int = 500,
        details: dict[str, Any] | None = None,
        request_id: UUID | None = None,
    ):
        self.code = code
        self.message = message
        self.status_code = status_code
        self.details = details
        self.request_id = request_id
        super().__init__(message)


class ConfigurationError(ToolhubException):
    """Raised when the registry is set up inconsistently."""

    def __init__(
        self,
        message: str,
        code: str = "CONFIGURATION_ERROR",
        details: dict[str, Any] | None = None,
    ):
        super().__init__(
            code=code,
            message=message,
            status_code=500,
            details=details,
        )


class MissingFunctionNameError(ConfigurationError):
    """Raised when a provider returns a descriptor without a name."""

    def __init__(self, namespace: str | None = None):
        details = {"namespace": namespace} if namespace else None
        super().__init__(
            message="Function definition must contain a 'name' field.",
            code="MISSING_FUNCTION_NAME",
            details=details,
        )


class InvalidNameError(ConfigurationError):
    """Raised when a namespace or function name is empty or contains the separator."""

    def __init__(self, kind: str, name: str, separator: str):
        super().__init__(
            message=(
                f"Invalid {kind} name '{name}': must be non-empty and must not "
                f"contain the namespace separator '{separator}'."
            ),
            code="INVALID_NAME",
            details={"kind": kind, "name": name, "separator": separator},
        )


class DuplicateNamespaceError(ConfigurationError):
    """Raised when a namespace is registered twice."""

    def __init__(self, namespace: str):
        super().__init__(
            message=f'namespace "{namespace}" is already registered',
            code="DUPLICATE_NAMESPACE",
            details={"namespace": namespace},
        )


class DuplicateFunctionError(ConfigurationError):
    """Raised when a namespaced function name would be registered twice."""

    def __init__(self, name: str, reason: str = "already registered"):
        super().__init__(
            message=f"Function '{name}' is {reason}.",
            code="DUPLICATE_FUNCTION",
            details={"name": name},
        )


class ValidationException(ToolhubException):
    """Raised for malformed requests on the HTTP surface."""

    def __init__(self, message: str, errors: list[dict[str, Any]] | None = None):
        super().__init__(
            code="VALIDATION_ERROR",
            message=message,
            status_code=400,
            details={"errors": errors} if errors else None,
        )
