"""
Toolhub - Dependency Injection.

FastAPI dependencies for the session hub.
"""

from typing import Annotated

from fastapi import Depends, Request

from toolhub.core.hub import FunctionHub


def get_hub(request: Request) -> FunctionHub:
    """The FunctionHub bound to this application instance."""
    return request.app.state.hub


HubDep = Annotated[FunctionHub, Depends(get_hub)]
