"""Domain port for store change notifications."""

from __future__ import annotations

from typing import Awaitable, Callable, Protocol

from src.domain.entities.state_change import StateChange

StateChangeListener = Callable[[StateChange], Awaitable[None]]


class IStateChangeBus(Protocol):
    """Fan-out of committed store mutations to subscribers.

    Every published change is delivered once to every subscriber. Delivery
    runs in the background so a slow subscriber never delays the write that
    produced the change.
    """

    def subscribe(self, listener: StateChangeListener) -> None:
        """Register a listener for every subsequent change."""
        ...

    def publish(self, change: StateChange) -> None:
        """Schedule delivery of ``change`` to all listeners."""
        ...

    async def drain(self) -> None:
        """Wait until every scheduled delivery has finished."""
        ...
