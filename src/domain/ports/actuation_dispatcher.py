"""Domain port for fire-and-forget lock actuation."""

from __future__ import annotations

from typing import List, Optional, Protocol
from uuid import UUID

from src.domain.entities.actuation import ActuationRecord, ActuationStatus


class IActuationDispatcher(Protocol):
    """Runs vendor calls in the background and keeps their outcome inspectable."""

    def dispatch(self, device_id: str, status: ActuationStatus) -> ActuationRecord:
        """Start an actuation without waiting for it.

        Returns:
            The pending record; its outcome is updated when the call settles.
        """
        ...

    def get(self, actuation_id: UUID) -> Optional[ActuationRecord]:
        ...

    def list_recent(self, limit: int = 50) -> List[ActuationRecord]:
        """Most recent actuations first."""
        ...

    async def drain(self) -> None:
        """Wait for in-flight actuations to settle."""
        ...
