from __future__ import annotations

import pytest
from fastapi import HTTPException

from src.application.dtos.device_dto import DeviceStateUpdateDTO
from src.application.use_cases.state_reporting_use_cases import (
    UpdateDeviceStateUseCase,
)
from src.presentation.controllers.devices_controller import update_state

UPDATE = DeviceStateUpdateDTO(
    is_locked=False, is_jammed=False, online=True, status="SUCCESS"
)


@pytest.mark.asyncio
async def test_update_state_defaults_to_catalog_lock(
    memory_repository, lock_catalog
) -> None:
    dto = await update_state(
        update=UPDATE,
        device_id="",
        update_device_state_use_case=UpdateDeviceStateUseCase(
            memory_repository, lock_catalog, "lock"
        ),
    )

    assert dto.device_id == "lock"
    assert dto.states["isLocked"] is False


@pytest.mark.asyncio
async def test_update_state_unknown_device(memory_repository, lock_catalog) -> None:
    with pytest.raises(HTTPException) as exc:
        await update_state(
            update=UPDATE,
            device_id="garage",
            update_device_state_use_case=UpdateDeviceStateUseCase(
                memory_repository, lock_catalog, "lock"
            ),
        )

    assert exc.value.status_code == 404
