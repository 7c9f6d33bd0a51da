from __future__ import annotations

from typing import Dict, List, cast

import pymongo.errors
import pytest

from src.infrastructure.database.mongo_database import MongoDatabase
from tests.conftest import FakeCollection


class _StubAdmin:
    def __init__(self) -> None:
        self.commands: List[str] = []

    def command(self, name: str) -> Dict[str, int]:
        self.commands.append(name)
        return {"ok": 1}


class _StubMongoClient:
    def __init__(self, uri: str) -> None:
        self.uri = uri
        self.databases: Dict[str, _StubDatabase] = {}
        self.admin = _StubAdmin()
        self.closed = False

    def __getitem__(self, name: str) -> "_StubDatabase":
        return self.databases.setdefault(name, _StubDatabase())

    def close(self) -> None:
        self.closed = True


class _StubDatabase:
    def __init__(self) -> None:
        self.collections: Dict[str, FakeCollection] = {}

    def __getitem__(self, name: str) -> FakeCollection:
        return self.collections.setdefault(name, FakeCollection())


@pytest.fixture(autouse=True)
def patch_mongo_client(monkeypatch) -> None:
    monkeypatch.setattr(
        "src.infrastructure.database.mongo_database.MongoClient",
        _StubMongoClient,
    )


@pytest.mark.asyncio
async def test_find_one_and_update_returns_document_after_update() -> None:
    database = MongoDatabase("mongodb://localhost:27017", "smarthome")

    created = await database.find_one_and_update(
        "device_states",
        {"_id": "lock"},
        {"$set": {"LockUnlock": {"isLocked": False}}},
        upsert=True,
    )
    updated = await database.find_one_and_update(
        "device_states",
        {"_id": "lock"},
        {"$set": {"LockUnlock.isLocked": True}},
    )

    assert created == {"_id": "lock", "LockUnlock": {"isLocked": False}}
    assert updated == {"_id": "lock", "LockUnlock": {"isLocked": True}}
    assert await database.find_one("device_states", {"_id": "lock"}) == updated


@pytest.mark.asyncio
async def test_find_one_and_update_without_upsert_misses() -> None:
    database = MongoDatabase("mongodb://localhost:27017", "smarthome")

    result = await database.find_one_and_update(
        "device_states", {"_id": "ghost"}, {"$set": {"LockUnlock.isLocked": True}}
    )

    assert result is None


@pytest.mark.asyncio
async def test_ping_and_close() -> None:
    database = MongoDatabase("mongodb://localhost:27017", "smarthome")

    await database.ping()
    database.close()

    client = cast(_StubMongoClient, database.client)
    assert client.admin.commands == ["ping"]
    assert client.closed is True


@pytest.mark.asyncio
async def test_create_indexes() -> None:
    database = MongoDatabase("mongodb://localhost:27017", "smarthome")
    collection = cast(FakeCollection, database.db["device_states"])

    await database.create_indexes("device_states")

    assert "updated_at_idx" in {entry[1] for entry in collection.created_indexes}


@pytest.mark.asyncio
async def test_create_indexes_tolerates_operation_failure(monkeypatch) -> None:
    database = MongoDatabase("mongodb://localhost:27017", "smarthome")
    collection = cast(FakeCollection, database.db["device_states"])

    def _fail(*args, **kwargs):
        raise pymongo.errors.OperationFailure("not authorized")

    monkeypatch.setattr(collection, "create_index", _fail)

    await database.create_indexes("device_states")
