"""In-memory device state store, used for local development and tests."""

import copy
from typing import Any, Dict, Optional

from src.domain.entities.device import Trait
from src.domain.entities.device_state import DeviceState
from src.domain.entities.errors import DeviceNotFoundError
from src.domain.entities.state_change import ChangeSource
from src.domain.ports.state_change_bus import IStateChangeBus
from src.domain.repositories.device_state_repository import IDeviceStateRepository
from src.infrastructure.repositories.observable_repository import (
    ObservableRepositoryMixin,
)


class InMemoryDeviceStateRepository(ObservableRepositoryMixin, IDeviceStateRepository):
    """Keeps device records in a dict. State is lost when the process exits."""

    def __init__(
        self,
        state_change_bus: IStateChangeBus,
        initial_records: Optional[Dict[str, Dict[str, Dict[str, Any]]]] = None,
    ):
        self._records: Dict[str, Dict[str, Dict[str, Any]]] = copy.deepcopy(
            initial_records or {}
        )
        self._state_change_bus = state_change_bus
        self._device_locks = {}

    async def get(self, device_id: str) -> Optional[DeviceState]:
        record = self._records.get(device_id)
        if record is None:
            return None
        return DeviceState.from_record(device_id, copy.deepcopy(record))

    async def merge_trait(
        self,
        device_id: str,
        trait: Trait,
        values: Dict[str, Any],
        source: ChangeSource = ChangeSource.COMMAND,
    ) -> DeviceState:
        async with self._device_lock(device_id):
            record = self._records.get(device_id)
            if record is None:
                raise DeviceNotFoundError(device_id)
            record.setdefault(trait.value, {}).update(copy.deepcopy(values))
            state = DeviceState.from_record(device_id, copy.deepcopy(record))
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
            record = self._records.setdefault(device_id, {})
            record[trait.value] = copy.deepcopy(dict(values))
            state = DeviceState.from_record(device_id, copy.deepcopy(record))
            self._publish(state, source)
        return state

    async def ensure_trait(
        self, device_id: str, trait: Trait, defaults: Dict[str, Any]
    ) -> bool:
        async with self._device_lock(device_id):
            record = self._records.setdefault(device_id, {})
            if trait.value in record:
                return False
            record[trait.value] = copy.deepcopy(dict(defaults))
            state = DeviceState.from_record(device_id, copy.deepcopy(record))
            self._publish(state, ChangeSource.SEED)
        return True

    def snapshot(self) -> Dict[str, Dict[str, Dict[str, Any]]]:
        """Copy of every raw record, keyed by device id."""
        return copy.deepcopy(self._records)
