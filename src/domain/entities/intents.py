"""
Smart home intent protocol constants and execution outcomes.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional

from src.domain.entities.device import Trait


class Intent(str, Enum):
    SYNC = "action.devices.SYNC"
    QUERY = "action.devices.QUERY"
    EXECUTE = "action.devices.EXECUTE"
    DISCONNECT = "action.devices.DISCONNECT"


class Command(str, Enum):
    LOCK_UNLOCK = "action.devices.commands.LockUnlock"


class CommandStatus(str, Enum):
    """Per-device execution status reported back to the platform."""

    SUCCESS = "SUCCESS"
    ERROR = "ERROR"


@dataclass(frozen=True, slots=True)
class TraitDelta:
    """Fields to merge into one trait of a device record."""

    trait: Trait
    values: Dict[str, Any]


@dataclass(slots=True)
class CommandOutcome:
    """Result of every command sent to one device in an EXECUTE request."""

    device_id: str
    status: CommandStatus
    states: Dict[str, Any] = field(default_factory=dict)
    error_code: Optional[str] = None
