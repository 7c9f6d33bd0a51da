"""Shared behaviour for device state repositories that publish changes."""

import asyncio
from contextlib import asynccontextmanager
from typing import AsyncIterator, Dict

from src.domain.entities.device_state import DeviceState
from src.domain.entities.state_change import ChangeSource, StateChange
from src.domain.ports.state_change_bus import IStateChangeBus
from src.shared import get_logger

logger = get_logger(__name__)


class ObservableRepositoryMixin:
    """Per-device write serialisation and change publication.

    Writes to one device are serialised with a per-device ``asyncio.Lock`` and
    the change is published before the lock is released, so listeners see
    changes to a device in commit order. Different devices never contend.
    """

    _state_change_bus: IStateChangeBus
    _device_locks: Dict[str, asyncio.Lock]

    @asynccontextmanager
    async def _device_lock(self, device_id: str) -> AsyncIterator[None]:
        lock = self._device_locks.setdefault(device_id, asyncio.Lock())
        async with lock:
            yield

    def _publish(self, state: DeviceState, source: ChangeSource) -> None:
        change = StateChange(device_id=state.device_id, state=state, source=source)
        logger.debug(
            "device_state.change_published",
            device_id=state.device_id,
            source=source.value,
            change_id=str(change.change_id),
        )
        self._state_change_bus.publish(change)
