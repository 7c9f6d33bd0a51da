"""Domain service translating platform commands into trait deltas."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Mapping, Optional

from src.domain.entities.actuation import ActuationStatus
from src.domain.entities.device import Trait
from src.domain.entities.errors import (
    InvalidCommandParamsError,
    UnsupportedCommandError,
)
from src.domain.entities.intents import Command, TraitDelta


@dataclass(frozen=True, slots=True)
class CommandPlan:
    """What executing a command does to the store and to the physical device."""

    command: str
    delta: TraitDelta
    actuation: Optional[ActuationStatus] = None


def _plan_lock_unlock(params: Mapping[str, Any]) -> CommandPlan:
    lock = params.get("lock")
    if not isinstance(lock, bool):
        raise InvalidCommandParamsError(
            "LockUnlock requires a boolean 'lock' parameter",
            details={"params": dict(params)},
        )
    return CommandPlan(
        command=Command.LOCK_UNLOCK.value,
        delta=TraitDelta(trait=Trait.LOCK_UNLOCK, values={"isLocked": lock}),
        actuation=ActuationStatus.for_lock(lock),
    )


_PLANNERS: Dict[str, Callable[[Mapping[str, Any]], CommandPlan]] = {
    Command.LOCK_UNLOCK.value: _plan_lock_unlock,
}


def supported_commands() -> List[str]:
    return list(_PLANNERS)


def plan_command(
    command: str, params: Optional[Mapping[str, Any]] = None
) -> CommandPlan:
    """
    Map a platform command to the trait delta it applies.

    Raises:
        UnsupportedCommandError: If the command has no mapping
        InvalidCommandParamsError: If the parameters are unusable
    """
    planner = _PLANNERS.get(command)
    if planner is None:
        raise UnsupportedCommandError(
            command, details={"supported_commands": supported_commands()}
        )
    return planner(params or {})
