"""
Devices Router - Presentation Layer

Entry point for device state observed outside the fulfillment flow.
"""

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, HTTPException, Query, status

from src.application.dtos.device_dto import DeviceStateDTO, DeviceStateUpdateDTO
from src.application.use_cases.state_reporting_use_cases import (
    UpdateDeviceStateUseCase,
)
from src.domain.entities.errors import DeviceNotFoundError, StoreWriteError
from src.shared import get_logger

logger = get_logger(__name__)

router = APIRouter(tags=["Devices"])


@router.post("/updatestate", response_model=DeviceStateDTO)
@inject
async def update_state(
    update: DeviceStateUpdateDTO,
    device_id: str = Query(
        default="", description="Target device, the catalog lock when omitted"
    ),
    update_device_state_use_case: UpdateDeviceStateUseCase = Depends(
        Provide["update_device_state_use_case"]
    ),
) -> DeviceStateDTO:
    """
    Overwrite the LockUnlock state of a device.

    The write is reported to HomeGraph like any other state change.
    """
    try:
        return await update_device_state_use_case.execute(update, device_id)

    except DeviceNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message)
    except StoreWriteError as e:
        logger.error("device_state.update_failed", device_id=device_id, error=e.message)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to update device state: {e.message}",
        )
