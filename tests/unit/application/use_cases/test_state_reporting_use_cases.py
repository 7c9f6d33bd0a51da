from __future__ import annotations

from uuid import UUID

import pytest

from src.application.dtos.device_dto import DeviceStateUpdateDTO
from src.application.use_cases.state_reporting_use_cases import (
    ReportStateUseCase,
    RequestSyncUseCase,
    UpdateDeviceStateUseCase,
)
from src.domain.entities.device import Trait
from src.domain.entities.errors import DeviceNotFoundError, PlatformIngestionError
from src.domain.entities.state_change import ChangeSource
from tests.conftest import StubHomeGraphGateway


@pytest.mark.asyncio
async def test_direct_store_write_reports_post_write_state_once(
    memory_repository, recording_bus, stub_home_graph, account_resolver
) -> None:
    report_state = ReportStateUseCase(stub_home_graph, account_resolver)
    recording_bus.subscribe(report_state.on_state_change)

    await memory_repository.merge_trait("lock", Trait.LOCK_UNLOCK, {"isJammed": True})
    await recording_bus.drain()

    assert len(stub_home_graph.reports) == 1
    report = stub_home_graph.reports[0]
    assert report["agent_user_id"] == "123"
    assert report["states"] == {
        "lock": {
            "isLocked": True,
            "isJammed": True,
            "online": True,
            "status": "SUCCESS",
        }
    }
    UUID(report["request_id"])


@pytest.mark.asyncio
async def test_each_report_gets_a_fresh_request_id(
    memory_repository, recording_bus, stub_home_graph, account_resolver
) -> None:
    recording_bus.subscribe(
        ReportStateUseCase(stub_home_graph, account_resolver).on_state_change
    )

    await memory_repository.merge_trait("lock", Trait.LOCK_UNLOCK, {"isLocked": False})
    await memory_repository.merge_trait("lock", Trait.LOCK_UNLOCK, {"isLocked": True})
    await recording_bus.drain()

    request_ids = {report["request_id"] for report in stub_home_graph.reports}
    assert len(request_ids) == 2


@pytest.mark.asyncio
async def test_report_failure_is_swallowed(
    memory_repository, recording_bus, account_resolver
) -> None:
    gateway = StubHomeGraphGateway(error=PlatformIngestionError("HTTP 403"))
    use_case = ReportStateUseCase(gateway, account_resolver)

    await memory_repository.merge_trait("lock", Trait.LOCK_UNLOCK, {"isLocked": False})
    delivered = await use_case.execute(recording_bus.changes[0])

    assert delivered is False
    state = await memory_repository.get("lock")
    assert state.to_platform_state()["isLocked"] is False


@pytest.mark.asyncio
async def test_request_sync_uses_default_account(
    stub_home_graph, account_resolver
) -> None:
    await RequestSyncUseCase(stub_home_graph, account_resolver).execute()

    assert stub_home_graph.sync_requests == ["123"]


@pytest.mark.asyncio
async def test_request_sync_propagates_failure(account_resolver) -> None:
    gateway = StubHomeGraphGateway(error=PlatformIngestionError("unreachable"))

    with pytest.raises(PlatformIngestionError):
        await RequestSyncUseCase(gateway, account_resolver).execute()


@pytest.mark.asyncio
async def test_update_state_overwrites_trait(
    memory_repository, lock_catalog, recording_bus
) -> None:
    use_case = UpdateDeviceStateUseCase(memory_repository, lock_catalog, "lock")
    update = DeviceStateUpdateDTO.model_validate(
        {"isLocked": False, "isJammed": True, "online": True, "status": "JAMMED"}
    )

    dto = await use_case.execute(update)

    assert dto.device_id == "lock"
    assert dto.states == {
        "isLocked": False,
        "isJammed": True,
        "online": True,
        "status": "JAMMED",
    }
    assert recording_bus.changes[-1].source is ChangeSource.EXTERNAL


@pytest.mark.asyncio
async def test_update_state_rejects_unknown_device(
    memory_repository, lock_catalog
) -> None:
    use_case = UpdateDeviceStateUseCase(memory_repository, lock_catalog, "lock")
    update = DeviceStateUpdateDTO(
        is_locked=True, is_jammed=False, online=True, status="SUCCESS"
    )

    with pytest.raises(DeviceNotFoundError):
        await use_case.execute(update, device_id="garage")
