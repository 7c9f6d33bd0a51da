"""
Device State Repository Interface - Domain Layer

Contract for the shared device state store. Implementations must publish
exactly one ``StateChange`` through the state change bus for every write
they commit, whatever code path issued the write.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

from src.domain.entities.device import Trait
from src.domain.entities.device_state import DeviceState
from src.domain.entities.state_change import ChangeSource


class IDeviceStateRepository(ABC):
    """Interface for device state persistence."""

    @abstractmethod
    async def get(self, device_id: str) -> Optional[DeviceState]:
        """
        Read the current record of a device.

        Args:
            device_id: Identifier of the device

        Returns:
            The device state if a record exists, None otherwise
        """
        pass

    @abstractmethod
    async def merge_trait(
        self,
        device_id: str,
        trait: Trait,
        values: Dict[str, Any],
        source: ChangeSource = ChangeSource.COMMAND,
    ) -> DeviceState:
        """
        Merge fields into one trait of an existing record (partial update).

        Concurrent merges into the same device are applied one at a time;
        the last one to acquire the device wins on overlapping fields.

        Returns:
            The post-write device state

        Raises:
            DeviceNotFoundError: If the device has no record
            StoreWriteError: If the write cannot be committed
        """
        pass

    @abstractmethod
    async def replace_trait(
        self,
        device_id: str,
        trait: Trait,
        values: Dict[str, Any],
        source: ChangeSource = ChangeSource.EXTERNAL,
    ) -> DeviceState:
        """
        Overwrite one trait of a record, creating the record when absent.

        Returns:
            The post-write device state

        Raises:
            StoreWriteError: If the write cannot be committed
        """
        pass

    @abstractmethod
    async def ensure_trait(
        self, device_id: str, trait: Trait, defaults: Dict[str, Any]
    ) -> bool:
        """
        Create the trait with ``defaults`` unless the device already has it.

        Returns:
            True when a record was written (and a change published)
        """
        pass

    async def open(self) -> None:
        """Prepare backing resources (indexes, connections)."""

    async def close(self) -> None:
        """Release backing resources."""

    async def ping(self) -> None:
        """Raise if the backing store is unreachable."""
