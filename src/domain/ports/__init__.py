"""Domain ports package."""

from .account_resolver import IAccountResolver
from .actuation_dispatcher import IActuationDispatcher
from .device_catalog import IDeviceCatalog
from .health_check import IHealthCheckService
from .state_change_bus import IStateChangeBus, StateChangeListener

__all__ = [
    "IAccountResolver",
    "IActuationDispatcher",
    "IDeviceCatalog",
    "IHealthCheckService",
    "IStateChangeBus",
    "StateChangeListener",
]
