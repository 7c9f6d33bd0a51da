"""In-process change notification bus for the device state store."""

from __future__ import annotations

import asyncio
from typing import List, Set

from src.domain.entities.state_change import StateChange
from src.domain.ports.state_change_bus import IStateChangeBus, StateChangeListener
from src.shared import get_logger

logger = get_logger(__name__)


class InProcessStateChangeBus(IStateChangeBus):
    """Delivers each change to every listener as its own asyncio task.

    Deliveries are not coalesced: two quick writes to the same device produce
    two deliveries. Listener failures are logged and never propagate to the
    writer.
    """

    def __init__(self) -> None:
        self._listeners: List[StateChangeListener] = []
        self._pending: Set[asyncio.Task] = set()

    def subscribe(self, listener: StateChangeListener) -> None:
        self._listeners.append(listener)

    def unsubscribe_all(self) -> None:
        self._listeners.clear()

    def publish(self, change: StateChange) -> None:
        loop = asyncio.get_running_loop()
        for listener in list(self._listeners):
            task = loop.create_task(self._deliver(listener, change))
            self._pending.add(task)
            task.add_done_callback(self._pending.discard)

    @property
    def pending(self) -> int:
        return len(self._pending)

    async def drain(self) -> None:
        while self._pending:
            await asyncio.gather(*list(self._pending), return_exceptions=True)

    async def _deliver(self, listener: StateChangeListener, change: StateChange) -> None:
        try:
            await listener(change)
        except Exception as exc:
            logger.error(
                "state_change.listener_failed",
                device_id=change.device_id,
                change_id=str(change.change_id),
                listener=getattr(listener, "__qualname__", repr(listener)),
                error=str(exc),
                exc_info=exc,
            )
