"""
Toolhub Functions Endpoints.

List the visible descriptors and dispatch calls.

Dispatch always answers 200: unknown names and provider failures are
reported in the body with status "error", exactly as the in-process
dispatcher returns them.
"""

from fastapi import APIRouter

from toolhub.core.responses import Response
from toolhub.deps import HubDep
from toolhub.schemas import (
    DispatchRequest,
    ErrorResponse,
    FunctionSummary,
    NamespaceListResponse,
    NamespaceSummary,
    ToolListResponse,
)

router = APIRouter(prefix="/api/v1", tags=["functions"])


@router.get("/functions", response_model=ToolListResponse)
def list_functions(hub: HubDep) -> ToolListResponse:
    """Descriptors the caller may use right now (meta mode aware)."""
    return ToolListResponse(tools=hub.list())


@router.post(
    "/dispatch",
    response_model=Response,
    responses={400: {"model": ErrorResponse, "description": "Malformed request body"}},
)
def dispatch(request: DispatchRequest, hub: HubDep) -> Response:
    """Execute one namespaced function call."""
    return hub.dispatch(request.name, request.arguments)


@router.get("/namespaces", response_model=NamespaceListResponse)
def list_namespaces(hub: HubDep) -> NamespaceListResponse:
    """Every namespace with its functions, in registration order."""
    return NamespaceListResponse(
        namespaces=[
            NamespaceSummary(
                name=namespace.name,
                description=namespace.description,
                functions=[
                    FunctionSummary(
                        name=entry.namespaced_name,
                        description=entry.descriptor.description,
                    )
                    for entry in hub.registry.entries(namespace.name)
                ],
            )
            for namespace in hub.registry.namespaces()
        ]
    )
