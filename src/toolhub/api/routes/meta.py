"""
Toolhub Meta Mode Endpoints.

Switch meta mode on or off for the hub bound to this app.
"""

from fastapi import APIRouter

from toolhub.core.hub import FunctionHub
from toolhub.deps import HubDep
from toolhub.schemas import MetaModeStatus

router = APIRouter(prefix="/api/v1/meta", tags=["meta"])


def _status(hub: FunctionHub) -> MetaModeStatus:
    return MetaModeStatus(
        enabled=hub.meta_mode_enabled,
        active_functions=list(hub.active_functions),
        max_active=hub.meta.max_active,
    )


@router.get("", response_model=MetaModeStatus)
def get_meta_status(hub: HubDep) -> MetaModeStatus:
    return _status(hub)


@router.post("/enable", response_model=MetaModeStatus)
def enable_meta_mode(hub: HubDep) -> MetaModeStatus:
    return _status(hub.enable_meta_mode())


@router.post("/disable", response_model=MetaModeStatus)
def disable_meta_mode(hub: HubDep) -> MetaModeStatus:
    return _status(hub.disable_meta_mode())
