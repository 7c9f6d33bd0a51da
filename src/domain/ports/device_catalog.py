"""Domain port for the static device catalog."""

from __future__ import annotations

from typing import List, Optional, Protocol

from src.domain.entities.device import Device


class IDeviceCatalog(Protocol):
    """Devices exposed to the platform. Fixed for the process lifetime."""

    def list_devices(self) -> List[Device]:
        ...

    def get(self, device_id: str) -> Optional[Device]:
        ...
