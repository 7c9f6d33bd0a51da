"""Domain entities for the static device catalog."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List


class DeviceType(str, Enum):
    """Device types understood by the smart home platform."""

    LOCK = "action.devices.types.LOCK"


class Trait(str, Enum):
    """Traits a device can declare. The value is the short store key."""

    LOCK_UNLOCK = "LockUnlock"

    @property
    def platform_name(self) -> str:
        return f"action.devices.traits.{self.value}"


@dataclass(frozen=True, slots=True)
class DeviceName:
    """Names the assistant uses to refer to a device."""

    name: str
    default_names: List[str] = field(default_factory=list)
    nicknames: List[str] = field(default_factory=list)


@dataclass(frozen=True, slots=True)
class DeviceInfo:
    """Manufacturer metadata reported during SYNC."""

    manufacturer: str
    model: str
    hw_version: str
    sw_version: str


@dataclass(frozen=True, slots=True)
class Device:
    """A device exposed to the smart home platform.

    Catalog entries are declared once at startup and never change while the
    process is running.
    """

    device_id: str
    device_type: DeviceType
    traits: List[Trait]
    name: DeviceName
    device_info: DeviceInfo
    will_report_state: bool = True
    attributes: Dict[str, Any] = field(default_factory=dict)

    def supports(self, trait: Trait) -> bool:
        return trait in self.traits
