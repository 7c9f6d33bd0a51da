"""
Device DTOs - Application Layer

Payloads for writing device state from outside the fulfillment flow and
for reading it back.
"""

from typing import Any, Dict

from pydantic import BaseModel, Field

from src.domain.entities.device_state import DeviceState


class DeviceStateUpdateDTO(BaseModel):
    """Externally observed LockUnlock state, e.g. posted by the vendor panel."""

    is_locked: bool = Field(alias="isLocked", description="Lock bolt engaged")
    is_jammed: bool = Field(alias="isJammed", description="Lock reports a jam")
    online: bool = Field(description="Device reachable")
    status: str = Field(description="Vendor status string")

    model_config = {
        "populate_by_name": True,
        "json_schema_extra": {
            "example": {
                "isLocked": True,
                "isJammed": False,
                "online": True,
                "status": "SUCCESS",
            }
        },
    }

    def to_trait_values(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True)


class DeviceStateDTO(BaseModel):
    """Stored state of a device in platform field names."""

    device_id: str = Field(description="Device identifier")
    states: Dict[str, Any] = Field(description="Flattened platform state")

    @classmethod
    def from_domain(cls, state: DeviceState) -> "DeviceStateDTO":
        return cls(device_id=state.device_id, states=state.to_platform_state())
