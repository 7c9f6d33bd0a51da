"""
DTOs Package - Application Layer

This package contains Data Transfer Objects (DTOs) used for data exchange
between the application layer and the presentation layer.
"""

from .actuation_dto import ActuationDTO, ActuationListDTO
from .auth_dto import TokenResponseDTO
from .device_dto import DeviceStateDTO, DeviceStateUpdateDTO
from .health_dto import BridgeHealthDTO, BridgeInfoDTO
from .intent_dto import (
    CommandGroupDTO,
    DeviceDescriptorDTO,
    DeviceRefDTO,
    DisconnectResponseDTO,
    ExecuteCommandResultDTO,
    ExecutePayloadDTO,
    ExecuteResponseDTO,
    ExecutionDTO,
    FulfillmentRequestDTO,
    IntentInputDTO,
    QueryPayloadDTO,
    QueryResponseDTO,
    SyncResponseDTO,
)

__all__ = [
    "ActuationDTO",
    "ActuationListDTO",
    "TokenResponseDTO",
    "DeviceStateDTO",
    "DeviceStateUpdateDTO",
    "BridgeHealthDTO",
    "BridgeInfoDTO",
    "CommandGroupDTO",
    "DeviceDescriptorDTO",
    "DeviceRefDTO",
    "DisconnectResponseDTO",
    "ExecuteCommandResultDTO",
    "ExecutePayloadDTO",
    "ExecuteResponseDTO",
    "ExecutionDTO",
    "FulfillmentRequestDTO",
    "IntentInputDTO",
    "QueryPayloadDTO",
    "QueryResponseDTO",
    "SyncResponseDTO",
]
