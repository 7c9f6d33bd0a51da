"""
System Router - Presentation Layer

Liveness and diagnostics for whoever runs the bridge.
"""

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, Request, Response, status

from src.application.dtos.health_dto import BridgeHealthDTO, BridgeInfoDTO
from src.application.use_cases.health_use_cases import (
    GetBridgeHealthUseCase,
    GetBridgeInfoUseCase,
)
from src.domain.entities.health import ServiceStatus

router = APIRouter(tags=["System"])


@router.get(
    "/health",
    response_model=BridgeHealthDTO,
    responses={503: {"model": BridgeHealthDTO, "description": "State store down"}},
)
@inject
async def health(
    response: Response,
    get_bridge_health_use_case: GetBridgeHealthUseCase = Depends(
        Provide["get_bridge_health_use_case"]
    ),
) -> BridgeHealthDTO:
    """
    Check the state store, HomeGraph and the lock vendor.

    Answers 503 only when the store is down, since intents cannot be served
    without it. A degraded bridge still answers 200.
    """
    bridge_health = await get_bridge_health_use_case.execute()
    if bridge_health.status is ServiceStatus.DOWN:
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    return bridge_health


@router.get("/info", response_model=BridgeInfoDTO)
@inject
async def info(
    request: Request,
    get_bridge_info_use_case: GetBridgeInfoUseCase = Depends(
        Provide["get_bridge_info_use_case"]
    ),
) -> BridgeInfoDTO:
    """Build metadata, catalog devices, store and reporting targets."""
    started_at = getattr(request.app.state, "started_at", None)
    return await get_bridge_info_use_case.execute(started_at)
