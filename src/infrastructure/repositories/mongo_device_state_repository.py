"""
MongoDB Device State Repository - Infrastructure Layer

Device records are stored one document per device, keyed by ``_id``::

    {"_id": "lock", "LockUnlock": {"isLocked": true, ...}, "updated_at": ...}

Partial updates use ``$set`` on dotted trait paths so fields not present in
the delta are preserved.
"""

from datetime import datetime, timezone
from typing import Any, Dict, Optional

import pymongo.errors

from src.domain.entities.device import Trait
from src.domain.entities.device_state import DeviceState
from src.domain.entities.errors import DeviceNotFoundError, StoreWriteError
from src.domain.entities.state_change import ChangeSource
from src.domain.ports.state_change_bus import IStateChangeBus
from src.domain.repositories.device_state_repository import IDeviceStateRepository
from src.infrastructure.database import MongoDatabase
from src.infrastructure.repositories.observable_repository import (
    ObservableRepositoryMixin,
)
from src.shared import get_logger

logger = get_logger(__name__)


class MongoDeviceStateRepository(ObservableRepositoryMixin, IDeviceStateRepository):
    """MongoDB implementation of the device state store."""

    def __init__(
        self,
        mongo_database: MongoDatabase,
        state_change_bus: IStateChangeBus,
        collection_name: str = "device_states",
    ):
        """
        Initialize the MongoDB device state repository.

        Args:
            mongo_database: MongoDB database client
            state_change_bus: Bus receiving one change per committed write
            collection_name: Collection holding device records
        """
        self.db = mongo_database
        self.collection_name = collection_name
        self._state_change_bus = state_change_bus
        self._device_locks = {}

    async def open(self) -> None:
        await self.db.create_indexes(self.collection_name)

    async def close(self) -> None:
        self.db.close()

    async def ping(self) -> None:
        await self.db.ping()

    async def get(self, device_id: str) -> Optional[DeviceState]:
        document = await self.db.find_one(self.collection_name, {"_id": device_id})
        if document is None:
            return None
        return self._to_domain(device_id, document)

    async def merge_trait(
        self,
        device_id: str,
        trait: Trait,
        values: Dict[str, Any],
        source: ChangeSource = ChangeSource.COMMAND,
    ) -> DeviceState:
        update_fields: Dict[str, Any] = {
            f"{trait.value}.{key}": value for key, value in values.items()
        }
        update_fields["updated_at"] = datetime.now(timezone.utc)

        async with self._device_lock(device_id):
            document = await self._write(
                device_id,
                {"_id": device_id},
                {"$set": update_fields},
                upsert=False,
            )
            if document is None:
                raise DeviceNotFoundError(device_id)
            state = self._to_domain(device_id, document)
            self._publish(state, source)
        return state

    async def replace_trait(
        self,
        device_id: str,
        trait: Trait,
        values: Dict[str, Any],
        source: ChangeSource = ChangeSource.EXTERNAL,
    ) -> DeviceState:
        async with self._device_lock(device_id):
            document = await self._write(
                device_id,
                {"_id": device_id},
                {
                    "$set": {
                        trait.value: dict(values),
                        "updated_at": datetime.now(timezone.utc),
                    }
                },
                upsert=True,
            )
            state = self._to_domain(device_id, document or {})
            self._publish(state, source)
        return state

    async def ensure_trait(
        self, device_id: str, trait: Trait, defaults: Dict[str, Any]
    ) -> bool:
        async with self._device_lock(device_id):
            existing = await self.db.find_one(self.collection_name, {"_id": device_id})
            if existing is not None and trait.value in existing:
                return False
            document = await self._write(
                device_id,
                {"_id": device_id},
                {
                    "$set": {
                        trait.value: dict(defaults),
                        "updated_at": datetime.now(timezone.utc),
                    }
                },
                upsert=True,
            )
            self._publish(self._to_domain(device_id, document or {}), ChangeSource.SEED)
        return True

    async def _write(
        self,
        device_id: str,
        query: Dict[str, Any],
        update: Dict[str, Any],
        *,
        upsert: bool,
    ) -> Optional[Dict[str, Any]]:
        try:
            return await self.db.find_one_and_update(
                self.collection_name, query, update, upsert=upsert
            )
        except pymongo.errors.PyMongoError as e:
            logger.error(
                "device_state.mongo.write_failed",
                device_id=device_id,
                collection=self.collection_name,
                error=str(e),
                exc_info=e,
            )
            raise StoreWriteError(
                f"Failed to write state for device {device_id}: {str(e)}",
                details={"device_id": device_id},
            ) from e

    def _to_domain(self, device_id: str, document: Dict[str, Any]) -> DeviceState:
        record = {
            key: value
            for key, value in document.items()
            if key not in ("_id", "updated_at")
        }
        return DeviceState.from_record(device_id, record)
