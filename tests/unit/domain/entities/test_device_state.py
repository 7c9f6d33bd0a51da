from __future__ import annotations

from src.domain.entities.device import Trait
from src.domain.entities.device_state import DeviceState, LockUnlockState


def test_from_record_parses_known_traits_only() -> None:
    state = DeviceState.from_record(
        "lock",
        {
            "LockUnlock": {"isLocked": True, "isJammed": False},
            "OnOff": {"on": True},
        },
    )

    assert list(state.traits) == [Trait.LOCK_UNLOCK]
    lock_state = state.traits[Trait.LOCK_UNLOCK]
    assert isinstance(lock_state, LockUnlockState)
    assert lock_state.is_locked is True
    assert lock_state.online is None


def test_to_platform_omits_unset_fields() -> None:
    lock_state = LockUnlockState(is_locked=False, online=True)
    assert lock_state.to_platform() == {"isLocked": False, "online": True}


def test_platform_state_is_flattened() -> None:
    record = {
        "LockUnlock": {
            "isLocked": True,
            "isJammed": False,
            "online": True,
            "status": "SUCCESS",
        }
    }
    state = DeviceState.from_record("lock", record)

    assert state.to_platform_state() == record["LockUnlock"]
    assert state.to_record() == record


def test_record_without_traits_has_empty_platform_state() -> None:
    state = DeviceState.from_record("lock", {"LockUnlock": "garbage"})
    assert state.traits == {}
    assert state.to_platform_state() == {}
