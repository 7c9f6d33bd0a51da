from __future__ import annotations

import pymongo.errors
import pytest

from src.domain.entities.device import Trait
from src.domain.entities.errors import DeviceNotFoundError, StoreWriteError
from src.domain.entities.state_change import ChangeSource
from src.infrastructure.repositories.mongo_device_state_repository import (
    MongoDeviceStateRepository,
)

LOCK_STATE = {"isLocked": False, "isJammed": False, "online": True, "status": "SUCCESS"}


@pytest.fixture()
def repository(fake_mongo_database, recording_bus) -> MongoDeviceStateRepository:
    collection = fake_mongo_database.get_collection("device_states")
    collection.documents["lock"] = {"_id": "lock", "LockUnlock": dict(LOCK_STATE)}
    return MongoDeviceStateRepository(fake_mongo_database, recording_bus)


@pytest.mark.asyncio
async def test_get_strips_bookkeeping_fields(repository) -> None:
    state = await repository.get("lock")

    assert state is not None
    assert state.to_platform_state() == LOCK_STATE


@pytest.mark.asyncio
async def test_get_missing_device_returns_none(repository) -> None:
    assert await repository.get("ghost") is None


@pytest.mark.asyncio
async def test_merge_trait_updates_only_given_fields(
    repository, fake_mongo_database, recording_bus
) -> None:
    state = await repository.merge_trait("lock", Trait.LOCK_UNLOCK, {"isLocked": True})

    assert state.to_platform_state() == {**LOCK_STATE, "isLocked": True}
    stored = fake_mongo_database.get_collection("device_states").documents["lock"]
    assert stored["LockUnlock"]["isLocked"] is True
    assert "updated_at" in stored

    assert len(recording_bus.changes) == 1
    change = recording_bus.changes[0]
    assert change.source is ChangeSource.COMMAND
    assert change.state.to_platform_state()["isLocked"] is True


@pytest.mark.asyncio
async def test_merge_trait_missing_device(repository, recording_bus) -> None:
    with pytest.raises(DeviceNotFoundError):
        await repository.merge_trait("ghost", Trait.LOCK_UNLOCK, {"isLocked": True})

    assert recording_bus.changes == []


@pytest.mark.asyncio
async def test_write_failure_is_wrapped(
    repository, fake_mongo_database, recording_bus
) -> None:
    fake_mongo_database.write_error = pymongo.errors.AutoReconnect("gone")

    with pytest.raises(StoreWriteError) as exc:
        await repository.merge_trait("lock", Trait.LOCK_UNLOCK, {"isLocked": True})

    assert "lock" in exc.value.message
    assert recording_bus.changes == []


@pytest.mark.asyncio
async def test_replace_trait_upserts(repository, recording_bus) -> None:
    values = {"isLocked": True, "isJammed": True, "online": True, "status": "JAMMED"}

    state = await repository.replace_trait("garage", Trait.LOCK_UNLOCK, values)

    assert state.to_platform_state() == values
    assert recording_bus.changes[0].source is ChangeSource.EXTERNAL


@pytest.mark.asyncio
async def test_ensure_trait_keeps_existing_state(repository, recording_bus) -> None:
    created = await repository.ensure_trait(
        "lock", Trait.LOCK_UNLOCK, {"isLocked": True}
    )

    assert created is False
    assert recording_bus.changes == []
    state = await repository.get("lock")
    assert state.to_platform_state()["isLocked"] is False


@pytest.mark.asyncio
async def test_ensure_trait_seeds_missing_device(repository, recording_bus) -> None:
    created = await repository.ensure_trait("garage", Trait.LOCK_UNLOCK, LOCK_STATE)

    assert created is True
    assert recording_bus.changes[0].source is ChangeSource.SEED
    state = await repository.get("garage")
    assert state.to_platform_state() == LOCK_STATE


@pytest.mark.asyncio
async def test_open_and_close(repository, fake_mongo_database) -> None:
    await repository.open()
    await repository.close()

    assert fake_mongo_database.indexed == ["device_states"]
    assert fake_mongo_database.closed is True
