"""Device catalog built from configuration at startup."""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional, Sequence

from src.domain.entities.device import (
    Device,
    DeviceInfo,
    DeviceName,
    DeviceType,
    Trait,
)
from src.domain.ports.device_catalog import IDeviceCatalog


class StaticDeviceCatalog(IDeviceCatalog):
    """Immutable, ordered set of devices."""

    def __init__(self, devices: Iterable[Device]) -> None:
        self._devices: Dict[str, Device] = {}
        for device in devices:
            if device.device_id in self._devices:
                raise ValueError(f"Duplicate device id in catalog: {device.device_id}")
            self._devices[device.device_id] = device

    @classmethod
    def single_lock(
        cls,
        *,
        device_id: str,
        name: str,
        default_names: Sequence[str],
        nicknames: Sequence[str],
        manufacturer: str,
        model: str,
        hw_version: str,
        sw_version: str,
        will_report_state: bool,
    ) -> "StaticDeviceCatalog":
        lock = Device(
            device_id=device_id,
            device_type=DeviceType.LOCK,
            traits=[Trait.LOCK_UNLOCK],
            name=DeviceName(
                name=name,
                default_names=list(default_names),
                nicknames=list(nicknames),
            ),
            device_info=DeviceInfo(
                manufacturer=manufacturer,
                model=model,
                hw_version=hw_version,
                sw_version=sw_version,
            ),
            will_report_state=will_report_state,
        )
        return cls([lock])

    def list_devices(self) -> List[Device]:
        return list(self._devices.values())

    def get(self, device_id: str) -> Optional[Device]:
        return self._devices.get(device_id)
