"""Actuation history endpoints."""

from uuid import UUID

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, HTTPException, Query, status

from src.application.dtos.actuation_dto import ActuationDTO, ActuationListDTO
from src.application.use_cases.actuation_use_cases import (
    GetActuationByIdUseCase,
    GetActuationsUseCase,
)

router = APIRouter(prefix="/actuations", tags=["Actuations"])


@router.get("", response_model=ActuationListDTO)
@inject
async def list_actuations(
    limit: int = Query(default=50, ge=1, le=500, description="Maximum records"),
    get_actuations_use_case: GetActuationsUseCase = Depends(
        Provide["get_actuations_use_case"]
    ),
) -> ActuationListDTO:
    """List recent vendor calls, newest first."""
    return await get_actuations_use_case.execute(limit=limit)


@router.get("/{actuation_id}", response_model=ActuationDTO)
@inject
async def get_actuation(
    actuation_id: UUID,
    get_actuation_by_id_use_case: GetActuationByIdUseCase = Depends(
        Provide["get_actuation_by_id_use_case"]
    ),
) -> ActuationDTO:
    actuation = await get_actuation_by_id_use_case.execute(actuation_id)
    if actuation is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Actuation with ID {actuation_id} not found",
        )
    return actuation
