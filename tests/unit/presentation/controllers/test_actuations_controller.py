from __future__ import annotations

from uuid import uuid4

import pytest
from fastapi import HTTPException

from src.application.use_cases.actuation_use_cases import (
    GetActuationByIdUseCase,
    GetActuationsUseCase,
)
from src.domain.entities.actuation import ActuationStatus
from src.presentation.controllers.actuations_controller import (
    get_actuation,
    list_actuations,
)


@pytest.mark.asyncio
async def test_list_and_get(stub_dispatcher) -> None:
    record = stub_dispatcher.dispatch("lock", ActuationStatus.SECURED)

    listing = await list_actuations(
        limit=10, get_actuations_use_case=GetActuationsUseCase(stub_dispatcher)
    )
    single = await get_actuation(
        actuation_id=record.id,
        get_actuation_by_id_use_case=GetActuationByIdUseCase(stub_dispatcher),
    )

    assert [item.id for item in listing.actuations] == [record.id]
    assert single.device_id == "lock"


@pytest.mark.asyncio
async def test_get_missing_actuation(stub_dispatcher) -> None:
    with pytest.raises(HTTPException) as exc:
        await get_actuation(
            actuation_id=uuid4(),
            get_actuation_by_id_use_case=GetActuationByIdUseCase(stub_dispatcher),
        )

    assert exc.value.status_code == 404
