"""
Toolhub - Common Schemas.

Pydantic models used by the HTTP surface.
"""

from typing import Any

from pydantic import BaseModel, Field


# =============================================================================
# Error Responses
# =============================================================================


class ErrorDetail(BaseModel):
    """Error detail structure."""

    code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error message")
    details: dict[str, Any] | None = Field(default=None, description="Additional context")
    request_id: str | None = Field(default=None, description="Request ID for tracing")


class ErrorResponse(BaseModel):
    """Standard error response."""

    error: ErrorDetail


# =============================================================================
# Functions
# =============================================================================


class ToolListResponse(BaseModel):
    """Descriptors currently visible to the caller, in wire format."""

    tools: list[dict[str, Any]]


class DispatchRequest(BaseModel):
    """A single function call."""

    name: str = Field(..., min_length=1, description="Namespaced function name")
    arguments: dict[str, Any] = Field(default_factory=dict)


class FunctionSummary(BaseModel):
    name: str
    description: str


class NamespaceSummary(BaseModel):
    """One namespace and its functions."""

    name: str
    description: str
    functions: list[FunctionSummary]


class NamespaceListResponse(BaseModel):
    namespaces: list[NamespaceSummary]


# =============================================================================
# Meta Mode
# =============================================================================


class MetaModeStatus(BaseModel):
    """Current meta-mode state."""

    enabled: bool
    active_functions: list[str]
    max_active: int


# =============================================================================
# Health Check
# =============================================================================


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(..., pattern="^(healthy|degraded)$")
    version: str
    registry: dict[str, Any]
    app_env: str | None = None
    is_production: bool | None = None
    registered_functions: int = 0
