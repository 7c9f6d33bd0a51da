"""
Domain Entities Package

This package contains the core domain entities: catalog devices, trait
states, state change notifications, actuation records and errors.
"""

from .actuation import (
    ActuationOutcome,
    ActuationRecord,
    ActuationStatus,
    ActuatorResponse,
)
from .device import Device, DeviceInfo, DeviceName, DeviceType, Trait
from .device_state import (
    TRAIT_STATE_TYPES,
    DeviceState,
    LockStatus,
    LockUnlockState,
    TraitState,
)
from .errors import (
    ActuatorError,
    DeviceNotFoundError,
    DomainError,
    InvalidCommandParamsError,
    PlatformIngestionError,
    StoreWriteError,
    UnsupportedCommandError,
    UnsupportedIntentError,
)
from .health import BridgeHealth, Dependency, DependencyStatus, ServiceStatus
from .intents import Command, CommandOutcome, CommandStatus, Intent, TraitDelta
from .state_change import ChangeSource, StateChange

__all__ = [
    "ActuationOutcome",
    "ActuationRecord",
    "ActuationStatus",
    "ActuatorResponse",
    "Device",
    "DeviceInfo",
    "DeviceName",
    "DeviceType",
    "Trait",
    "TRAIT_STATE_TYPES",
    "DeviceState",
    "LockStatus",
    "LockUnlockState",
    "TraitState",
    "DomainError",
    "DeviceNotFoundError",
    "UnsupportedCommandError",
    "InvalidCommandParamsError",
    "StoreWriteError",
    "ActuatorError",
    "PlatformIngestionError",
    "UnsupportedIntentError",
    "BridgeHealth",
    "DependencyStatus",
    "ServiceStatus",
    "Dependency",
    "Command",
    "CommandOutcome",
    "CommandStatus",
    "Intent",
    "TraitDelta",
    "ChangeSource",
    "StateChange",
]
