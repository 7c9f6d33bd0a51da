"""
Use Cases Package - Application Layer

This package contains use cases that implement the business logic
of the application. Use cases orchestrate the flow of data to and from
the entities and implement the business rules of the application.
"""

from .actuation_use_cases import GetActuationByIdUseCase, GetActuationsUseCase
from .auth_use_cases import (
    AuthorizeUseCase,
    IssueTokenUseCase,
    LoginPageUseCase,
    UnsupportedGrantTypeError,
)
from .health_use_cases import GetBridgeHealthUseCase, GetBridgeInfoUseCase
from .smart_home_use_cases import (
    DisconnectUseCase,
    ExecuteCommandsUseCase,
    FulfillmentUseCase,
    QueryDevicesUseCase,
    SyncDevicesUseCase,
)
from .state_reporting_use_cases import (
    ReportStateUseCase,
    RequestSyncUseCase,
    UpdateDeviceStateUseCase,
)

__all__ = [
    "GetActuationsUseCase",
    "GetActuationByIdUseCase",
    "AuthorizeUseCase",
    "IssueTokenUseCase",
    "LoginPageUseCase",
    "UnsupportedGrantTypeError",
    "GetBridgeHealthUseCase",
    "GetBridgeInfoUseCase",
    "SyncDevicesUseCase",
    "QueryDevicesUseCase",
    "ExecuteCommandsUseCase",
    "DisconnectUseCase",
    "FulfillmentUseCase",
    "ReportStateUseCase",
    "RequestSyncUseCase",
    "UpdateDeviceStateUseCase",
]
