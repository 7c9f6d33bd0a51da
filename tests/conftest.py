from __future__ import annotations

import copy
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional
from uuid import UUID

import pytest

from src.application.models import SystemInfo
from src.domain.entities.actuation import (
    ActuationRecord,
    ActuationStatus,
    ActuatorResponse,
)
from src.domain.entities.device import Device, DeviceInfo, DeviceName, DeviceType, Trait
from src.domain.entities.health import (
    BridgeHealth,
    Dependency,
    DependencyStatus,
    ServiceStatus,
)
from src.domain.entities.state_change import StateChange
from src.infrastructure.repositories.in_memory_device_state_repository import (
    InMemoryDeviceStateRepository,
)
from src.infrastructure.services.account_resolver import StaticAccountResolver
from src.infrastructure.services.static_device_catalog import StaticDeviceCatalog

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


LOCKED_STATE = {
    "isLocked": True,
    "isJammed": False,
    "online": True,
    "status": "SUCCESS",
}


def make_lock(device_id: str = "lock") -> Device:
    return Device(
        device_id=device_id,
        device_type=DeviceType.LOCK,
        traits=[Trait.LOCK_UNLOCK],
        name=DeviceName(
            name="Door Lock",
            default_names=["My Door Lock"],
            nicknames=["Door Lock"],
        ),
        device_info=DeviceInfo(
            manufacturer="Yale",
            model="yale-lock",
            hw_version="1.0",
            sw_version="1.0.1",
        ),
    )


class RecordingBus:
    """Collects published changes and replays them to listeners on drain."""

    def __init__(self) -> None:
        self.changes: List[StateChange] = []
        self._listeners: List[Any] = []

    def subscribe(self, listener) -> None:
        self._listeners.append(listener)

    def publish(self, change: StateChange) -> None:
        self.changes.append(change)

    async def drain(self) -> None:
        for change in self.changes:
            for listener in self._listeners:
                await listener(change)


class StubDispatcher:
    def __init__(self) -> None:
        self.dispatched: List[tuple[str, ActuationStatus]] = []
        self.records: Dict[UUID, ActuationRecord] = {}

    def dispatch(self, device_id: str, status: ActuationStatus) -> ActuationRecord:
        self.dispatched.append((device_id, status))
        record = ActuationRecord(device_id=device_id, status=status)
        self.records[record.id] = record
        return record

    def get(self, actuation_id: UUID) -> Optional[ActuationRecord]:
        return self.records.get(actuation_id)

    def list_recent(self, limit: int = 50) -> List[ActuationRecord]:
        return list(reversed(list(self.records.values())))[:limit]

    async def drain(self) -> None:
        return None


class StubHomeGraphGateway:
    def __init__(self, error: Optional[Exception] = None) -> None:
        self.reports: List[Dict[str, Any]] = []
        self.sync_requests: List[str] = []
        self._error = error

    async def request_sync(self, agent_user_id: str) -> Dict[str, Any]:
        if self._error is not None:
            raise self._error
        self.sync_requests.append(agent_user_id)
        return {}

    async def report_state(self, *, request_id, agent_user_id, states):
        if self._error is not None:
            raise self._error
        self.reports.append(
            {
                "request_id": request_id,
                "agent_user_id": agent_user_id,
                "states": copy.deepcopy(states),
            }
        )
        return {"requestId": request_id}


class StubLockGateway:
    def __init__(self, status_code: int = 200) -> None:
        self.calls: List[ActuationStatus] = []
        self._status_code = status_code

    async def set_status(self, status: ActuationStatus) -> ActuatorResponse:
        self.calls.append(status)
        return ActuatorResponse(status_code=self._status_code, body="{}")


@pytest.fixture()
def lock_catalog() -> StaticDeviceCatalog:
    return StaticDeviceCatalog([make_lock()])


@pytest.fixture()
def two_lock_catalog() -> StaticDeviceCatalog:
    return StaticDeviceCatalog([make_lock("front"), make_lock("back")])


@pytest.fixture()
def account_resolver() -> StaticAccountResolver:
    return StaticAccountResolver(agent_user_id="123")


@pytest.fixture()
def recording_bus() -> RecordingBus:
    return RecordingBus()


@pytest.fixture()
def memory_repository(recording_bus: RecordingBus) -> InMemoryDeviceStateRepository:
    return InMemoryDeviceStateRepository(
        recording_bus,
        initial_records={"lock": {"LockUnlock": dict(LOCKED_STATE)}},
    )


@pytest.fixture()
def stub_dispatcher() -> StubDispatcher:
    return StubDispatcher()


@pytest.fixture()
def stub_home_graph() -> StubHomeGraphGateway:
    return StubHomeGraphGateway()


class FakeCollection:
    """Implements the subset of pymongo's Collection used by the store."""

    def __init__(self) -> None:
        self.documents: Dict[str, Dict[str, Any]] = {}
        self.created_indexes: List[tuple[Any, ...]] = []

    def find_one(self, query: Dict[str, Any]) -> Dict[str, Any] | None:
        document = self.documents.get(query.get("_id"))
        return copy.deepcopy(document) if document is not None else None

    def find_one_and_update(
        self,
        query: Dict[str, Any],
        update: Dict[str, Any],
        upsert: bool = False,
        return_document: Any = None,
    ) -> Dict[str, Any] | None:
        key = query["_id"]
        document = self.documents.get(key)
        if document is None:
            if not upsert:
                return None
            document = {"_id": key}
            self.documents[key] = document
        for path, value in update.get("$set", {}).items():
            target = document
            *parents, leaf = path.split(".")
            for parent in parents:
                target = target.setdefault(parent, {})
            target[leaf] = copy.deepcopy(value)
        return copy.deepcopy(document)

    def create_index(self, keys: Any, name: str | None = None, **kwargs: Any) -> Any:
        self.created_indexes.append((keys, name, kwargs))
        return name or keys


class FakeMongoDatabase:
    """Async facade with the same surface as ``MongoDatabase``."""

    def __init__(self) -> None:
        self.collections: Dict[str, FakeCollection] = {}
        self.write_error: Exception | None = None
        self.closed = False
        self.indexed: List[str] = []

    def get_collection(self, name: str) -> FakeCollection:
        return self.collections.setdefault(name, FakeCollection())

    async def find_one(self, collection_name: str, query: Dict[str, Any]) -> Any:
        return self.get_collection(collection_name).find_one(query)

    async def find_one_and_update(
        self,
        collection_name: str,
        query: Dict[str, Any],
        update: Dict[str, Any],
        upsert: bool = False,
    ) -> Any:
        if self.write_error is not None:
            raise self.write_error
        return self.get_collection(collection_name).find_one_and_update(
            query, update, upsert=upsert
        )

    async def create_indexes(self, collection_name: str) -> None:
        self.indexed.append(collection_name)

    async def ping(self) -> None:
        return None

    def close(self) -> None:
        self.closed = True


@pytest.fixture()
def fake_mongo_database() -> FakeMongoDatabase:
    return FakeMongoDatabase()


def make_bridge_health(
    store: ServiceStatus = ServiceStatus.UP,
    homegraph: ServiceStatus = ServiceStatus.UP,
    lock_vendor: ServiceStatus = ServiceStatus.UP,
) -> BridgeHealth:
    return BridgeHealth(
        device_store=DependencyStatus(Dependency.DEVICE_STORE, store, target="memory"),
        homegraph=DependencyStatus(
            Dependency.HOMEGRAPH, homegraph, target="http://homegraph"
        ),
        lock_vendor=DependencyStatus(
            Dependency.LOCK_VENDOR, lock_vendor, target="http://vendor"
        ),
    )


class StubHealthService:
    def __init__(self, health: Optional[BridgeHealth] = None) -> None:
        self.health = health or make_bridge_health()

    async def evaluate(self) -> BridgeHealth:
        return self.health


def make_system_info(**overrides: Any) -> SystemInfo:
    values: Dict[str, Any] = {
        "title": "Lock Bridge",
        "description": "Smart home lock bridge",
        "version": "1.2.3",
        "environment": "development",
        "git_commit": "abc1234",
        "build_time": "2024-09-09T10:00:00Z",
        "store_backend": "memory",
        "mongo_uri": "",
        "state_collection": "device_states",
        "homegraph_url": "https://homegraph.googleapis.com/v1",
        "agent_user_id": "123",
        "lock_vendor_url": "https://api.littlebirdliving.com",
        "lock_id": "front-door",
    }
    values.update(overrides)
    return SystemInfo(**values)
