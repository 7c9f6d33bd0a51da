"""
Device state entities.

A device record in the state store is a mapping of trait name to trait
state, mirroring how the records are persisted::

    {"LockUnlock": {"isLocked": true, "isJammed": false,
                    "online": true, "status": "SECURED"}}

Each trait has its own state variant. ``LockUnlock`` is the only variant
implemented; additional traits register themselves in ``TRAIT_STATE_TYPES``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, ClassVar, Dict, Mapping, Optional, Type

from src.domain.entities.device import Trait


class LockStatus(str, Enum):
    SUCCESS = "SUCCESS"
    SECURED = "SECURED"
    UNSECURED = "UNSECURED"
    JAMMED = "JAMMED"


class TraitState(ABC):
    """State of a single trait, serialisable to platform field names."""

    trait: ClassVar[Trait]

    @classmethod
    @abstractmethod
    def from_platform(cls, data: Mapping[str, Any]) -> "TraitState":
        """Build the state from a stored or reported record."""

    @abstractmethod
    def to_platform(self) -> Dict[str, Any]:
        """Return the state using platform field names, skipping unknown fields."""


@dataclass(slots=True)
class LockUnlockState(TraitState):
    """State of the ``action.devices.traits.LockUnlock`` trait.

    Fields left as ``None`` are absent from the stored record and are not
    reported.
    """

    trait: ClassVar[Trait] = Trait.LOCK_UNLOCK

    is_locked: Optional[bool] = None
    is_jammed: Optional[bool] = None
    online: Optional[bool] = None
    status: Optional[str] = None

    _FIELDS: ClassVar[Dict[str, str]] = {
        "is_locked": "isLocked",
        "is_jammed": "isJammed",
        "online": "online",
        "status": "status",
    }

    @classmethod
    def from_platform(cls, data: Mapping[str, Any]) -> "LockUnlockState":
        return cls(
            **{attr: data.get(key) for attr, key in cls._FIELDS.items() if key in data}
        )

    def to_platform(self) -> Dict[str, Any]:
        result: Dict[str, Any] = {}
        for attr, key in self._FIELDS.items():
            value = getattr(self, attr)
            if value is not None:
                result[key] = value
        return result


TRAIT_STATE_TYPES: Dict[Trait, Type[TraitState]] = {
    Trait.LOCK_UNLOCK: LockUnlockState,
}


@dataclass(slots=True)
class DeviceState:
    """All trait states recorded for one device."""

    device_id: str
    traits: Dict[Trait, TraitState] = field(default_factory=dict)

    @classmethod
    def from_record(cls, device_id: str, record: Mapping[str, Any]) -> "DeviceState":
        """Parse a stored record, ignoring keys that are not known traits."""
        traits: Dict[Trait, TraitState] = {}
        for trait, state_type in TRAIT_STATE_TYPES.items():
            value = record.get(trait.value)
            if isinstance(value, Mapping):
                traits[trait] = state_type.from_platform(value)
        return cls(device_id=device_id, traits=traits)

    def to_record(self) -> Dict[str, Dict[str, Any]]:
        return {
            trait.value: state.to_platform() for trait, state in self.traits.items()
        }

    def to_platform_state(self) -> Dict[str, Any]:
        """Flatten every trait into the single state object the platform expects."""
        flattened: Dict[str, Any] = {}
        for state in self.traits.values():
            flattened.update(state.to_platform())
        return flattened
