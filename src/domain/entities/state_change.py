"""Change notifications emitted by the device state store."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from uuid import UUID, uuid4

from src.domain.entities.device_state import DeviceState


class ChangeSource(str, Enum):
    """Where a committed state mutation came from."""

    COMMAND = "command"
    EXTERNAL = "external"
    SEED = "seed"


@dataclass(frozen=True, slots=True)
class StateChange:
    """A committed mutation of one device record.

    ``state`` is the full post-write snapshot of the device.
    """

    device_id: str
    state: DeviceState
    source: ChangeSource
    change_id: UUID = field(default_factory=uuid4)
    committed_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
