"""
Intent DTOs - Application Layer

Request and response shapes of the smart home fulfillment protocol. Field
names follow the platform's camelCase wire format through aliases, and
responses are serialised with ``by_alias=True, exclude_none=True``.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from src.domain.entities.device import Device
from src.domain.entities.intents import CommandStatus

_MODEL_CONFIG = {"populate_by_name": True}


class DeviceRefDTO(BaseModel):
    """Device reference inside QUERY and EXECUTE payloads."""

    id: str = Field(description="Device identifier")
    custom_data: Optional[Dict[str, Any]] = Field(
        default=None, alias="customData", description="Opaque data set during SYNC"
    )

    model_config = {**_MODEL_CONFIG, "extra": "allow"}


class ExecutionDTO(BaseModel):
    """A single command and its parameters."""

    command: str = Field(description="Platform command type")
    params: Dict[str, Any] = Field(
        default_factory=dict, description="Command parameters"
    )


class CommandGroupDTO(BaseModel):
    """Commands to apply to every listed device."""

    devices: List[DeviceRefDTO] = Field(description="Target devices")
    execution: List[ExecutionDTO] = Field(description="Commands to execute")


class QueryPayloadDTO(BaseModel):
    devices: List[DeviceRefDTO] = Field(default_factory=list)


class ExecutePayloadDTO(BaseModel):
    commands: List[CommandGroupDTO] = Field(default_factory=list)


class IntentInputDTO(BaseModel):
    intent: str = Field(description="Intent name, e.g. action.devices.QUERY")
    payload: Dict[str, Any] = Field(
        default_factory=dict, description="Intent specific payload"
    )


class FulfillmentRequestDTO(BaseModel):
    """Envelope of every fulfillment call. Only the first input is read."""

    request_id: str = Field(alias="requestId", description="Correlation id")
    inputs: List[IntentInputDTO] = Field(min_length=1, description="Intent inputs")

    model_config = {
        **_MODEL_CONFIG,
        "json_schema_extra": {
            "example": {
                "requestId": "ff36a3cc-ec34-11e6-b1a0-64510650abcf",
                "inputs": [
                    {
                        "intent": "action.devices.EXECUTE",
                        "payload": {
                            "commands": [
                                {
                                    "devices": [{"id": "lock"}],
                                    "execution": [
                                        {
                                            "command": "action.devices.commands.LockUnlock",
                                            "params": {"lock": True},
                                        }
                                    ],
                                }
                            ]
                        },
                    }
                ],
            }
        },
    }

    @property
    def intent(self) -> str:
        return self.inputs[0].intent

    @property
    def payload(self) -> Dict[str, Any]:
        return self.inputs[0].payload


class DeviceNameDTO(BaseModel):
    default_names: List[str] = Field(alias="defaultNames")
    name: str
    nicknames: List[str]

    model_config = _MODEL_CONFIG


class DeviceInfoDTO(BaseModel):
    manufacturer: str
    model: str
    hw_version: str = Field(alias="hwVersion")
    sw_version: str = Field(alias="swVersion")

    model_config = _MODEL_CONFIG


class DeviceDescriptorDTO(BaseModel):
    """Device entry of a SYNC response."""

    id: str
    type: str
    traits: List[str]
    name: DeviceNameDTO
    device_info: DeviceInfoDTO = Field(alias="deviceInfo")
    will_report_state: bool = Field(alias="willReportState")
    attributes: Optional[Dict[str, Any]] = None

    model_config = _MODEL_CONFIG

    @classmethod
    def from_domain(cls, device: Device) -> "DeviceDescriptorDTO":
        return cls(
            id=device.device_id,
            type=device.device_type.value,
            traits=[trait.platform_name for trait in device.traits],
            name=DeviceNameDTO(
                default_names=list(device.name.default_names),
                name=device.name.name,
                nicknames=list(device.name.nicknames),
            ),
            device_info=DeviceInfoDTO(
                manufacturer=device.device_info.manufacturer,
                model=device.device_info.model,
                hw_version=device.device_info.hw_version,
                sw_version=device.device_info.sw_version,
            ),
            will_report_state=device.will_report_state,
            attributes=dict(device.attributes) or None,
        )


class SyncPayloadDTO(BaseModel):
    agent_user_id: str = Field(alias="agentUserId")
    devices: List[DeviceDescriptorDTO]

    model_config = _MODEL_CONFIG


class SyncResponseDTO(BaseModel):
    request_id: str = Field(alias="requestId")
    payload: SyncPayloadDTO

    model_config = _MODEL_CONFIG


class QueryPayloadResponseDTO(BaseModel):
    devices: Dict[str, Dict[str, Any]] = Field(
        description="Platform state, or an error placeholder, keyed by device id"
    )


class QueryResponseDTO(BaseModel):
    request_id: str = Field(alias="requestId")
    payload: QueryPayloadResponseDTO

    model_config = _MODEL_CONFIG


class ExecuteCommandResultDTO(BaseModel):
    """Devices that share the same execution outcome."""

    ids: List[str]
    status: CommandStatus
    states: Optional[Dict[str, Any]] = None
    error_code: Optional[str] = Field(default=None, alias="errorCode")

    model_config = _MODEL_CONFIG


class ExecutePayloadResponseDTO(BaseModel):
    commands: List[ExecuteCommandResultDTO]


class ExecuteResponseDTO(BaseModel):
    request_id: str = Field(alias="requestId")
    payload: ExecutePayloadResponseDTO

    model_config = _MODEL_CONFIG


class DisconnectResponseDTO(BaseModel):
    """DISCONNECT is acknowledged with an empty object."""
